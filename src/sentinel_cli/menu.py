import argparse
from typing import Callable

from sentinel_core.domains import (
    CAPACITY_LARGE,
    CAPACITY_MEDIUM,
    CAPACITY_SMALL,
    VALUE_MAX,
    VALUE_MIN,
)
from sentinel_core.errors import SentinelInputError
from sentinel_core.protocols import ReadIntFn, WriteFn
from sentinel_core.rng import seed_default_stream
from sentinel_ops.array import SentinelArray
from sentinel_ops.views import format_view

ReadLineFn = Callable[[str], str]

MENU_TEXT = "\n".join(
    [
        "",
        "----------------------------- Main Menu -----------------------------",
        f"1. Demo 1 (Capacity {CAPACITY_SMALL})",
        f"2. Demo 2 (Capacity {CAPACITY_MEDIUM})",
        f"3. Demo 3 (Capacity {CAPACITY_LARGE})",
        "4. Exit",
    ]
)


def parse_int(token: str) -> int:
    try:
        value = int(token.strip())
    except ValueError:
        raise SentinelInputError(token=token) from None
    if not VALUE_MIN <= value <= VALUE_MAX:
        raise SentinelInputError(
            token=token, reason=f"outside [{VALUE_MIN}, {VALUE_MAX}]"
        )
    return value


def keyboard_reader(read_line: ReadLineFn = input, write: WriteFn = print) -> ReadIntFn:
    """ReadIntFn over line input; malformed tokens are reported and skipped.

    EOFError from ``read_line`` ends the fill.
    """
    pending: list[str] = []

    def _read() -> int:
        while True:
            while not pending:
                pending.extend(read_line("").split())
            token = pending.pop(0)
            try:
                return parse_int(token)
            except SentinelInputError as e:
                write(f"   {e}; try again")

    return _read


def demo_small(arr: SentinelArray, write: WriteFn = print) -> None:
    write("\n--- Demo 1 ---")
    write("Fill 7 random numbers in range 10 to 20")
    arr.fill_random(7, 10, 20)
    write("Used elements:")
    write(format_view(arr.used_view()))
    write("All elements:")
    write(format_view(arr.full_view()))
    write("Clear")
    arr.clear()
    write("Used elements after clearing:")
    write(format_view(arr.used_view()))
    write("All elements after clearing:")
    write(format_view(arr.full_view()))
    write("Fill 5 random numbers in range 20 to 30")
    arr.fill_random(5, 20, 30)
    write("Sort")
    arr.sort()
    write("All elements:")
    write(format_view(arr.full_view()))
    write(f"The max and min values are [{arr.max()}] and [{arr.min()}]")


def demo_medium(arr: SentinelArray, write: WriteFn = print) -> None:
    write("\n--- Demo 2 ---")
    write("Fill 15 random numbers in range 10 to 20")
    arr.fill_random(15, 10, 20)
    write(format_view(arr.full_view()))
    write("Sort")
    arr.sort()
    write(format_view(arr.full_view()))
    write("Shuffle")
    arr.shuffle()
    write(format_view(arr.full_view()))


def demo_large(arr: SentinelArray, read_int: ReadIntFn, write: WriteFn = print) -> None:
    write("\n--- Demo 3 ---")
    write(f"Enter up to {arr.capacity} non-negative integers (negative to stop):")
    arr.fill_from_input(read_int)
    write(f"The max and min values are {arr.max()}, {arr.min()}")
    write(f"Average value {arr.mean():.2f}, median value {arr.median()}")
    write(
        f"{arr.count_used()} used elements, variance {arr.variance():.2f}, "
        f"standard deviation {arr.standard_deviation():.2f}"
    )


def run_demo(option: int, read_line: ReadLineFn = input, write: WriteFn = print) -> None:
    if option == 1:
        demo_small(SentinelArray(CAPACITY_SMALL), write)
    elif option == 2:
        demo_medium(SentinelArray(CAPACITY_MEDIUM), write)
    elif option == 3:
        demo_large(
            SentinelArray(CAPACITY_LARGE), keyboard_reader(read_line, write), write
        )
    else:
        raise ValueError(f"unknown demo option {option!r}")


def menu_loop(read_line: ReadLineFn = input, write: WriteFn = print) -> None:
    while True:
        write(MENU_TEXT)
        try:
            line = read_line("Enter your option: ")
        except EOFError:
            write("Exiting program.")
            return
        try:
            option = parse_int(line)
        except SentinelInputError:
            write("Invalid option. Please try again.")
            continue
        if option == 4:
            write("Exiting program.")
            return
        if option not in (1, 2, 3):
            write("Invalid option. Please try again.")
            continue
        run_demo(option, read_line, write)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Menu-driven demonstrations of the sentinel array library."
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random stream (default: SENTINEL_SEED, then the clock)",
    )
    parser.add_argument(
        "--run",
        type=int,
        choices=(1, 2, 3),
        default=None,
        help="Run one demonstration and exit",
    )
    args = parser.parse_args(argv)
    seed_default_stream(args.seed)
    if args.run is not None:
        run_demo(args.run)
    else:
        menu_loop()
    return 0


__all__ = [
    "MENU_TEXT",
    "parse_int",
    "keyboard_reader",
    "demo_small",
    "demo_medium",
    "demo_large",
    "run_demo",
    "menu_loop",
    "main",
]
