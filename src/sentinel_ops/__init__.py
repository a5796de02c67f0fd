"""Sentinel array library: fixed-capacity int buffers with an unused marker."""

from sentinel_ops.array import SentinelArray, init_buffer
from sentinel_ops.generate import (
    DEFAULT_INPUT_CONFIG,
    InputConfig,
    fill_from_input,
    fill_from_input_cfg,
    fill_random,
    iter_source,
    random_int,
)
from sentinel_ops.query import (
    DEFAULT_STATS_CONFIG,
    StatsConfig,
    count_used,
    find_max,
    find_min,
    is_full,
    mean,
    median,
    median_cfg,
    standard_deviation,
    variance,
)
from sentinel_ops.transform import clear, shuffle, sort_used
from sentinel_ops.views import format_view, full_view, used_view

__all__ = [
    "SentinelArray",
    "init_buffer",
    "InputConfig",
    "DEFAULT_INPUT_CONFIG",
    "random_int",
    "fill_random",
    "iter_source",
    "fill_from_input",
    "fill_from_input_cfg",
    "clear",
    "sort_used",
    "shuffle",
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
    "full_view",
    "used_view",
    "format_view",
]
