"""Shared domain types and sentinel conventions.

A buffer slot is "used" when its value is non-negative. The unused marker is a
single reserved negative value; any other negative value is also read as
unused, since occupancy is decided by the threshold alone.
"""

from typing import NewType

import jax.numpy as jnp

from sentinel_core.errors import SentinelCapacityError

Capacity = NewType("Capacity", int)

UNUSED_MARKER = -1
VALUE_DTYPE = jnp.int32
VALUE_MIN = int(jnp.iinfo(VALUE_DTYPE).min)
VALUE_MAX = int(jnp.iinfo(VALUE_DTYPE).max)

# Demonstration capacities.
CAPACITY_SMALL = Capacity(10)
CAPACITY_MEDIUM = Capacity(20)
CAPACITY_LARGE = Capacity(100)


def is_used(value):
    """Used predicate; works on host ints and device arrays alike."""
    return value >= 0


def used_mask(values):
    return is_used(values)


def require_capacity(capacity, context: str | None = None) -> Capacity:
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
        raise SentinelCapacityError(capacity=capacity, context=context)
    return Capacity(capacity)


def as_buffer(values):
    return jnp.asarray(values, dtype=VALUE_DTYPE)


def capacity_of(values, context: str | None = None) -> Capacity:
    """Capacity of a buffer, validated as a non-empty 1-D shape."""
    shape = getattr(values, "shape", None)
    if shape is None or len(shape) != 1:
        raise SentinelCapacityError(capacity=shape, context=context)
    return require_capacity(int(shape[0]), context=context)


__all__ = [
    "Capacity",
    "UNUSED_MARKER",
    "VALUE_DTYPE",
    "VALUE_MIN",
    "VALUE_MAX",
    "CAPACITY_SMALL",
    "CAPACITY_MEDIUM",
    "CAPACITY_LARGE",
    "is_used",
    "used_mask",
    "require_capacity",
    "as_buffer",
    "capacity_of",
]
