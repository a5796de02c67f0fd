"""Queries and statistics over a sentinel buffer.

The statistics reproduce the reference program's arithmetic, including its
quirks:

  * find_min only considers slots after slot 0 that are not below zero, but
    starts from slot 0's raw value, so an unused slot 0 can be returned.
  * find_max compares raw values, unused markers included.
  * median reads fixed global indices chosen by capacity parity; the used
    predicate only decides whether it computes anything at all.
  * variance is (sum of used values)**2 / used count, not a spread measure.
"""

from __future__ import annotations

from dataclasses import dataclass

import jax
import jax.numpy as jnp
import numpy as np

from sentinel_core.config import median_policy_from_env
from sentinel_core.domains import as_buffer, capacity_of, used_mask
from sentinel_core.host import _host_array, _host_int_value
from sentinel_core.safety import (
    DEFAULT_SAFETY_POLICY,
    SafetyPolicy,
    resolve_fixed_index,
)


@dataclass(frozen=True, slots=True)
class StatsConfig:
    """Statistics DI bundle."""

    median_policy: SafetyPolicy = DEFAULT_SAFETY_POLICY


DEFAULT_STATS_CONFIG = StatsConfig()


def _used_sum_count(values) -> tuple[int, int]:
    # int64 host sums; nothing is rounded before the final division.
    host = _host_array(values).astype(np.int64)
    used = host[used_mask(host)]
    return int(np.sum(used, dtype=np.int64)), int(used.size)


def count_used(values) -> int:
    capacity_of(values, "count_used")
    return _host_int_value(jnp.sum(used_mask(as_buffer(values)).astype(jnp.int32)))


def is_full(values) -> bool:
    capacity = capacity_of(values, "is_full")
    return count_used(values) >= capacity


def find_min(values) -> int:
    capacity = capacity_of(values, "find_min")
    values = as_buffer(values)
    first = values[0]
    if capacity == 1:
        return _host_int_value(first)
    rest = values[1:]
    candidates = jnp.where(rest > -1, rest, first)
    return _host_int_value(jnp.minimum(first, jnp.min(candidates)))


def find_max(values) -> int:
    capacity_of(values, "find_max")
    return _host_int_value(jnp.max(as_buffer(values)))


def mean(values) -> float:
    """Arithmetic mean of used slots; 0.0 when none are used."""
    capacity_of(values, "mean")
    total, count = _used_sum_count(values)
    if count == 0:
        return 0.0
    return total / count


def median(values, *, policy: SafetyPolicy = DEFAULT_SAFETY_POLICY) -> int:
    """Fixed-index median.

    Even capacity: integer mean (truncated toward zero) of the slots at
    capacity/2 - 1 and capacity/2. Odd capacity: the slot at (capacity+1)/2,
    resolved through ``policy`` since it lies past the end when capacity is 1.
    Returns 0 when no slot is used.
    """
    capacity = capacity_of(values, "median")
    values = as_buffer(values)
    if not bool(jnp.any(used_mask(values))):
        return 0
    if capacity % 2 == 0:
        mid = capacity // 2
        pair_sum = values[mid - 1] + values[mid]
        return _host_int_value(jax.lax.div(pair_sum, jnp.int32(2)))
    idx = resolve_fixed_index(
        (capacity + 1) // 2, capacity, policy=policy, context="median"
    )
    if idx is None:
        return 0
    return _host_int_value(values[idx])


def median_cfg(values, *, cfg: StatsConfig | None = None) -> int:
    """median wrapper for a StatsConfig (env default when omitted)."""
    if cfg is None:
        cfg = StatsConfig(median_policy=median_policy_from_env())
    return median(values, policy=cfg.median_policy)


def variance(values) -> float:
    """(sum of used values)**2 / used count; 0.0 when none are used."""
    capacity_of(values, "variance")
    total, count = _used_sum_count(values)
    if count == 0:
        return 0.0
    return (total * total) / count


def standard_deviation(values) -> float:
    """Square root of variance(); NaN if given a negative variance."""
    with np.errstate(invalid="ignore"):
        return float(np.sqrt(np.float64(variance(values))))


__all__ = [
    "StatsConfig",
    "DEFAULT_STATS_CONFIG",
    "count_used",
    "is_full",
    "find_min",
    "find_max",
    "mean",
    "median",
    "median_cfg",
    "variance",
    "standard_deviation",
]
