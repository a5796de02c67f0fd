"""Transformation: clear, barrier sort and random-transposition shuffle."""

from __future__ import annotations

import jax
import jax.numpy as jnp

from sentinel_core.di import resolve
from sentinel_core.domains import UNUSED_MARKER, as_buffer, capacity_of
from sentinel_core.rng import RandomStream, default_stream
from sentinel_ops.generate import random_int


def clear(values):
    """Every slot becomes the unused marker."""
    capacity_of(values, "clear")
    return jnp.full_like(as_buffer(values), UNUSED_MARKER)


@jax.jit
def _bubble_passes(values):
    n = values.shape[0]

    def _pass(i, arr):
        def _compare(j, a):
            left = a[j]
            right = a[j + 1]
            swap = (j < n - i - 1) & (left >= 0) & (right >= 0) & (left > right)
            a = a.at[j].set(jnp.where(swap, right, left))
            return a.at[j + 1].set(jnp.where(swap, left, right))

        return jax.lax.fori_loop(0, n - 1, _compare, arr)

    return jax.lax.fori_loop(0, n - 1, _pass, values)


def sort_used(values):
    """Ascending bubble sort that only exchanges pairs of used slots.

    Unused slots stay at their positions and act as barriers: each run of used
    values between two of them is sorted in place, and no value crosses one.
    """
    capacity_of(values, "sort_used")
    return _bubble_passes(as_buffer(values))


def _swap_pairs(values, pairs):
    def _swap(k, arr):
        a = pairs[k, 0]
        b = pairs[k, 1]
        va = arr[a]
        vb = arr[b]
        return arr.at[a].set(vb).at[b].set(va)

    return jax.lax.fori_loop(0, pairs.shape[0], _swap, values)


def shuffle(values, *, stream: RandomStream | None = None):
    """Exchange k random index pairs, k uniform in [1, capacity].

    Indices are drawn independently and may coincide. Markers move with their
    slots. This is not a uniform permutation.
    """
    capacity = capacity_of(values, "shuffle")
    stream = resolve(stream, default_stream())
    swaps = random_int(1, capacity, stream=stream)
    pairs = jax.random.randint(
        stream.next_key(), (swaps, 2), 0, capacity, dtype=jnp.int32
    )
    return _swap_pairs(as_buffer(values), pairs)


__all__ = [
    "clear",
    "sort_used",
    "shuffle",
]
