"""Generation: random draws and buffer fills."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import jax
import jax.numpy as jnp

from sentinel_core.config import clear_tail_from_env
from sentinel_core.di import resolve
from sentinel_core.domains import (
    UNUSED_MARKER,
    VALUE_DTYPE,
    VALUE_MAX,
    VALUE_MIN,
    as_buffer,
    capacity_of,
)
from sentinel_core.errors import (
    SentinelFillCountError,
    SentinelRangeError,
    SentinelValueError,
)
from sentinel_core.protocols import ReadIntFn
from sentinel_core.rng import RandomStream, default_stream


@dataclass(frozen=True, slots=True)
class InputConfig:
    """Keyboard fill DI bundle.

    clear_tail: after an early stop, mark every remaining slot unused instead
    of leaving it untouched.
    """

    clear_tail: bool = False


DEFAULT_INPUT_CONFIG = InputConfig()


def _require_range(lo, hi, context: str) -> tuple[int, int]:
    if (
        isinstance(lo, bool)
        or isinstance(hi, bool)
        or not isinstance(lo, int)
        or not isinstance(hi, int)
    ):
        raise SentinelRangeError(lo=lo, hi=hi, context=context)
    # hi + 1 is the exclusive bound handed to jax.random.randint.
    if lo > hi or lo < VALUE_MIN or hi >= VALUE_MAX:
        raise SentinelRangeError(lo=lo, hi=hi, context=context)
    return lo, hi


def random_int(lo: int, hi: int, *, stream: RandomStream | None = None) -> int:
    """Draw one integer uniformly from [lo, hi] inclusive."""
    lo, hi = _require_range(lo, hi, "random_int")
    stream = resolve(stream, default_stream())
    value = jax.random.randint(stream.next_key(), (), lo, hi + 1, dtype=VALUE_DTYPE)
    return int(value)


def fill_random(
    values,
    fill_count: int,
    lo: int,
    hi: int,
    *,
    stream: RandomStream | None = None,
):
    """Random values in [lo, hi] for slots [0, fill_count); unused after.

    Overwrites every slot; nothing of the previous contents survives.
    """
    capacity = capacity_of(values, "fill_random")
    if (
        isinstance(fill_count, bool)
        or not isinstance(fill_count, int)
        or not 0 <= fill_count <= capacity
    ):
        raise SentinelFillCountError(fill_count=fill_count, capacity=capacity)
    lo, hi = _require_range(lo, hi, "fill_random")
    stream = resolve(stream, default_stream())
    draws = jax.random.randint(
        stream.next_key(), (capacity,), lo, hi + 1, dtype=VALUE_DTYPE
    )
    filled = jnp.arange(capacity, dtype=jnp.int32) < fill_count
    return jnp.where(filled, draws, jnp.asarray(UNUSED_MARKER, dtype=VALUE_DTYPE))


def iter_source(items: Iterable[int]) -> ReadIntFn:
    """Adapt an iterable of ints into a ReadIntFn."""
    it = iter(items)

    def _read() -> int:
        return next(it)

    return _read


def fill_from_input(values, read_int: ReadIntFn, *, clear_tail: bool = False):
    """Store non-negative integers from ``read_int`` in slot order.

    Stops after ``capacity`` values, or at the first negative value (or end of
    input), which marks the current slot unused. Slots after that stop keep
    their previous contents unless ``clear_tail`` is set. A full read writes
    no marker. A value above the int32 range raises SentinelValueError.
    """
    capacity = capacity_of(values, "fill_from_input")
    values = as_buffer(values)
    accepted: list[int] = []
    stopped = False
    while len(accepted) < capacity:
        try:
            value = int(read_int())
        except (StopIteration, EOFError):
            stopped = True
            break
        if value < 0:
            stopped = True
            break
        if value > VALUE_MAX:
            raise SentinelValueError(
                value=value, lo=0, hi=VALUE_MAX, context="fill_from_input"
            )
        accepted.append(value)
    count = len(accepted)
    if count:
        values = values.at[:count].set(jnp.asarray(accepted, dtype=VALUE_DTYPE))
    if stopped:
        stop = count + 1 if not clear_tail else capacity
        values = values.at[count:stop].set(UNUSED_MARKER)
    return values


def fill_from_input_cfg(
    values, read_int: ReadIntFn, *, cfg: InputConfig | None = None
):
    """fill_from_input wrapper for an InputConfig (env default when omitted)."""
    if cfg is None:
        cfg = InputConfig(clear_tail=clear_tail_from_env())
    return fill_from_input(values, read_int, clear_tail=cfg.clear_tail)


__all__ = [
    "InputConfig",
    "DEFAULT_INPUT_CONFIG",
    "random_int",
    "fill_random",
    "iter_source",
    "fill_from_input",
    "fill_from_input_cfg",
]
