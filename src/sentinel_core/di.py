from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def resolve(value: T | None, default: T) -> T:
    return default if value is None else value


__all__ = ["resolve"]
