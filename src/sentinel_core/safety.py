from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sentinel_core.errors import SentinelIndexError, SentinelSafetyModeError


class SafetyMode(str, Enum):
    CORRUPT = "corrupt"
    CLAMP = "clamp"
    DROP = "drop"


def coerce_safety_mode(
    mode: SafetyMode | str, *, context: str | None = None
) -> SafetyMode:
    if isinstance(mode, SafetyMode):
        return mode
    if isinstance(mode, str):
        value = mode.strip().lower()
        if value == SafetyMode.CORRUPT.value:
            return SafetyMode.CORRUPT
        if value == SafetyMode.CLAMP.value:
            return SafetyMode.CLAMP
        if value == SafetyMode.DROP.value:
            return SafetyMode.DROP
    raise SentinelSafetyModeError(mode=mode, context=context)


@dataclass(frozen=True, slots=True)
class SafetyPolicy:
    """Policy for reads at a fixed index that falls outside the buffer.

    mode:
      - "corrupt": raise SentinelIndexError
      - "clamp": read the last slot instead
      - "drop": skip the read; the caller substitutes its neutral result
    """

    mode: SafetyMode | str = SafetyMode.CORRUPT

    def __post_init__(self):
        object.__setattr__(self, "mode", coerce_safety_mode(self.mode))


DEFAULT_SAFETY_POLICY = SafetyPolicy()


def resolve_fixed_index(
    index: int,
    capacity: int,
    *,
    policy: SafetyPolicy = DEFAULT_SAFETY_POLICY,
    context: str | None = None,
) -> int | None:
    """Map a fixed index onto the buffer under ``policy``.

    Returns the index to read, or None when the policy drops the read.
    """
    if 0 <= index < capacity:
        return index
    if policy.mode == SafetyMode.CLAMP:
        return min(max(index, 0), capacity - 1)
    if policy.mode == SafetyMode.DROP:
        return None
    raise SentinelIndexError(index=index, capacity=capacity, context=context)


__all__ = [
    "SafetyMode",
    "coerce_safety_mode",
    "SafetyPolicy",
    "DEFAULT_SAFETY_POLICY",
    "resolve_fixed_index",
]
