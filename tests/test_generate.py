import jax.numpy as jnp
import pytest

from sentinel_core.domains import UNUSED_MARKER
from sentinel_core.errors import (
    SentinelFillCountError,
    SentinelRangeError,
    SentinelValueError,
)
from sentinel_core.rng import RandomStream
from sentinel_ops import generate as gen
from sentinel_ops.array import init_buffer
from sentinel_ops.query import count_used


def test_random_int_in_range(stream):
    draws = [gen.random_int(3, 7, stream=stream) for _ in range(50)]
    assert all(3 <= d <= 7 for d in draws)


def test_random_int_degenerate_range(stream):
    assert gen.random_int(5, 5, stream=stream) == 5


def test_random_int_rejects_inverted_range(stream):
    with pytest.raises(SentinelRangeError):
        gen.random_int(8, 2, stream=stream)


def test_random_int_rejects_non_int(stream):
    with pytest.raises(SentinelRangeError):
        gen.random_int(1.5, 2, stream=stream)


def test_stream_advances_and_is_reproducible():
    a = RandomStream.from_seed(42)
    b = RandomStream.from_seed(42)
    seq_a = [gen.random_int(0, 1000, stream=a) for _ in range(5)]
    seq_b = [gen.random_int(0, 1000, stream=b) for _ in range(5)]
    assert seq_a == seq_b
    assert a.draws == 5


@pytest.mark.parametrize("fill_count", [0, 1, 7, 10])
def test_fill_random_prefix_and_tail(stream, fill_count):
    buf = init_buffer(10, fill=99)
    out = gen.fill_random(buf, fill_count, 10, 20, stream=stream)
    assert count_used(out) == fill_count
    head = out[:fill_count]
    assert bool(jnp.all((head >= 10) & (head <= 20)))
    assert bool(jnp.all(out[fill_count:] == UNUSED_MARKER))


def test_fill_random_rejects_bad_fill_count(stream):
    buf = init_buffer(5)
    with pytest.raises(SentinelFillCountError):
        gen.fill_random(buf, 6, 0, 1, stream=stream)
    with pytest.raises(SentinelFillCountError):
        gen.fill_random(buf, -1, 0, 1, stream=stream)


def test_fill_random_rejects_bad_range(stream):
    with pytest.raises(SentinelRangeError):
        gen.fill_random(init_buffer(5), 2, 9, 1, stream=stream)


def test_fill_from_input_stops_at_negative_and_leaves_tail():
    buf = jnp.array([7, 7, 7, 7, 7, 7], dtype=jnp.int32)
    out = gen.fill_from_input(buf, gen.iter_source([1, 2, -5, 3]))
    assert out.tolist() == [1, 2, UNUSED_MARKER, 7, 7, 7]


def test_fill_from_input_clear_tail():
    buf = jnp.array([7, 7, 7, 7, 7, 7], dtype=jnp.int32)
    out = gen.fill_from_input(buf, gen.iter_source([1, 2, -1]), clear_tail=True)
    assert out.tolist() == [1, 2, -1, -1, -1, -1]


def test_fill_from_input_full_capacity_writes_no_marker():
    buf = init_buffer(3)
    out = gen.fill_from_input(buf, gen.iter_source([4, 5, 6, -1]))
    assert out.tolist() == [4, 5, 6]


def test_fill_from_input_exhausted_source_marks_next_slot():
    buf = jnp.array([9, 9, 9, 9], dtype=jnp.int32)
    out = gen.fill_from_input(buf, gen.iter_source([3]))
    assert out.tolist() == [3, -1, 9, 9]


def test_fill_from_input_cfg_reads_env(monkeypatch):
    monkeypatch.setenv("SENTINEL_CLEAR_TAIL", "yes")
    buf = jnp.array([9, 9, 9], dtype=jnp.int32)
    out = gen.fill_from_input_cfg(buf, gen.iter_source([-1]))
    assert out.tolist() == [-1, -1, -1]
    out = gen.fill_from_input_cfg(
        buf, gen.iter_source([-1]), cfg=gen.DEFAULT_INPUT_CONFIG
    )
    assert out.tolist() == [-1, 9, 9]


def test_fill_from_input_rejects_value_above_int32():
    buf = init_buffer(4)
    with pytest.raises(SentinelValueError, match="2147483648"):
        gen.fill_from_input(buf, gen.iter_source([2**31, -1]))


def test_fill_from_input_accepts_int32_max():
    buf = init_buffer(2)
    out = gen.fill_from_input(buf, gen.iter_source([2**31 - 1, -1]))
    assert out.tolist() == [2**31 - 1, -1]
