"""Read-only presentation of buffer contents."""

from __future__ import annotations

from sentinel_core.domains import capacity_of, is_used
from sentinel_core.host import _host_array


def full_view(values) -> list[tuple[int, int]]:
    capacity_of(values, "full_view")
    return [(i, int(v)) for i, v in enumerate(_host_array(values))]


def used_view(values) -> list[tuple[int, int]]:
    return [(i, v) for i, v in full_view(values) if is_used(v)]


def format_view(rows) -> str:
    return "\n".join(f"Array[{i}] | {v}" for i, v in rows)


__all__ = ["full_view", "used_view", "format_view"]
