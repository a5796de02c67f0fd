"""Host handle over a fixed-capacity sentinel buffer.

Kernels in this package are pure (buffer in, buffer out). SentinelArray holds
the current buffer and swaps it on every mutating call, so callers share one
reference whose contents change in place while its capacity never does.
"""

from __future__ import annotations

import jax.numpy as jnp

from sentinel_core.domains import (
    UNUSED_MARKER,
    VALUE_DTYPE,
    Capacity,
    as_buffer,
    capacity_of,
    require_capacity,
)
from sentinel_core.errors import SentinelCapacityError
from sentinel_core.protocols import ReadIntFn
from sentinel_core.rng import RandomStream
from sentinel_ops import generate, query, transform, views


def init_buffer(capacity: int, fill: int = UNUSED_MARKER):
    capacity = require_capacity(capacity, "init_buffer")
    return jnp.full((capacity,), fill, dtype=VALUE_DTYPE)


class SentinelArray:
    def __init__(self, capacity: int, fill: int = UNUSED_MARKER):
        self.values = init_buffer(capacity, fill)
        self.capacity: Capacity = capacity_of(self.values)

    @classmethod
    def from_values(cls, values) -> "SentinelArray":
        buf = as_buffer(values)
        arr = cls(capacity_of(buf, "SentinelArray.from_values"))
        arr.values = buf
        return arr

    def _set(self, values) -> None:
        if values.shape != (self.capacity,):
            raise SentinelCapacityError(capacity=values.shape, context="SentinelArray")
        self.values = values

    def __len__(self) -> int:
        return int(self.capacity)

    def __getitem__(self, idx) -> int:
        return int(self.values[idx])

    def tolist(self) -> list[int]:
        return [v for _, v in views.full_view(self.values)]

    # Generation
    def fill_random(
        self, fill_count: int, lo: int, hi: int, *, stream: RandomStream | None = None
    ) -> None:
        self._set(generate.fill_random(self.values, fill_count, lo, hi, stream=stream))

    def fill_from_input(self, read_int: ReadIntFn, *, cfg=None) -> None:
        self._set(generate.fill_from_input_cfg(self.values, read_int, cfg=cfg))

    # Transformation
    def clear(self) -> None:
        self._set(transform.clear(self.values))

    def sort(self) -> None:
        self._set(transform.sort_used(self.values))

    def shuffle(self, *, stream: RandomStream | None = None) -> None:
        self._set(transform.shuffle(self.values, stream=stream))

    # Query
    def count_used(self) -> int:
        return query.count_used(self.values)

    def is_full(self) -> bool:
        return query.is_full(self.values)

    def min(self) -> int:
        return query.find_min(self.values)

    def max(self) -> int:
        return query.find_max(self.values)

    def mean(self) -> float:
        return query.mean(self.values)

    def median(self, *, cfg=None) -> int:
        return query.median_cfg(self.values, cfg=cfg)

    def variance(self) -> float:
        return query.variance(self.values)

    def standard_deviation(self) -> float:
        return query.standard_deviation(self.values)

    # Presentation
    def used_view(self) -> list[tuple[int, int]]:
        return views.used_view(self.values)

    def full_view(self) -> list[tuple[int, int]]:
        return views.full_view(self.values)

    def __repr__(self) -> str:
        return f"SentinelArray(capacity={self.capacity}, values={self.tolist()})"


__all__ = ["init_buffer", "SentinelArray"]
