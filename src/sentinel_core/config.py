"""Environment-driven defaults.

SENTINEL_SEED           seed for the process-wide random stream
SENTINEL_MEDIAN_SAFETY  corrupt | clamp | drop (median fixed-index policy)
SENTINEL_CLEAR_TAIL     mark slots after an early input stop as unused
"""

import os

from sentinel_core.safety import SafetyPolicy, coerce_safety_mode

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str) -> bool:
    value = os.environ.get(name, "").strip().lower()
    return value in _TRUTHY


def seed_from_env() -> int | None:
    value = os.environ.get("SENTINEL_SEED", "").strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError("SENTINEL_SEED must be an integer") from None


def median_policy_from_env() -> SafetyPolicy:
    value = os.environ.get("SENTINEL_MEDIAN_SAFETY", "").strip()
    if not value:
        return SafetyPolicy()
    return SafetyPolicy(coerce_safety_mode(value, context="SENTINEL_MEDIAN_SAFETY"))


def clear_tail_from_env() -> bool:
    return _env_flag("SENTINEL_CLEAR_TAIL")


__all__ = [
    "seed_from_env",
    "median_policy_from_env",
    "clear_tail_from_env",
]
