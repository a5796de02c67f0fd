import pytest

from sentinel_cli import menu as cli
from sentinel_core.domains import CAPACITY_LARGE
from sentinel_core.errors import SentinelInputError
from sentinel_ops.array import SentinelArray
from sentinel_ops.generate import iter_source


def _capture():
    out = []

    def _write(*args, **kwargs):
        out.append(" ".join(str(a) for a in args))

    return out, _write


def test_keyboard_reader_skips_malformed(scripted_lines):
    out, write = _capture()
    read = cli.keyboard_reader(scripted_lines(["3 x", "", "4"]), write)
    assert read() == 3
    assert read() == 4
    assert any("not an integer: 'x'" in line for line in out)


def test_demo_large_statistics():
    out, write = _capture()
    arr = SentinelArray(CAPACITY_LARGE)
    cli.demo_large(arr, iter_source([10, 20, 30, 40, -1]), write)
    text = "\n".join(out)
    assert "The max and min values are 40, 10" in text
    assert "Average value 25.00" in text
    assert "4 used elements, variance 2500.00, standard deviation 50.00" in text


def test_demo_small_and_medium_run():
    out, write = _capture()
    cli.demo_small(SentinelArray(10), write)
    cli.demo_medium(SentinelArray(20), write)
    text = "\n".join(out)
    assert "--- Demo 1 ---" in text
    assert "--- Demo 2 ---" in text
    assert "Array[19] | -1" in text


def test_menu_handles_bad_option_then_exit(scripted_lines):
    out, write = _capture()
    cli.menu_loop(scripted_lines(["abc", "9", "4"]), write)
    assert out.count("Invalid option. Please try again.") == 2
    assert out[-1] == "Exiting program."


def test_menu_runs_demo_three_then_eof(scripted_lines):
    out, write = _capture()
    cli.menu_loop(scripted_lines(["3", "5 7 -1"]), write)
    text = "\n".join(out)
    assert "Average value 6.00" in text
    assert out[-1] == "Exiting program."


def test_main_run_single_demo(capsys):
    assert cli.main(["--seed", "1", "--run", "2"]) == 0
    assert "--- Demo 2 ---" in capsys.readouterr().out


def test_package_keeps_menu_module():
    import inspect

    import sentinel_cli

    assert inspect.ismodule(sentinel_cli.menu)
    assert sentinel_cli.menu_loop is cli.menu_loop


def test_parse_int_rejects_out_of_range():
    assert cli.parse_int(" 2147483647 ") == 2**31 - 1
    with pytest.raises(SentinelInputError, match="outside"):
        cli.parse_int("2147483648")
    with pytest.raises(SentinelInputError, match="outside"):
        cli.parse_int("-2147483649")


def test_keyboard_reader_retries_out_of_range(scripted_lines):
    out, write = _capture()
    read = cli.keyboard_reader(scripted_lines(["2147483648 5"]), write)
    assert read() == 5
    assert any("outside" in line for line in out)


def test_demo_large_survives_oversized_token(scripted_lines):
    out, write = _capture()
    arr = SentinelArray(CAPACITY_LARGE)
    read = cli.keyboard_reader(scripted_lines(["99999999999 8 -1"]), write)
    cli.demo_large(arr, read, write)
    assert arr.count_used() == 1
    assert "Average value 8.00" in "\n".join(out)
