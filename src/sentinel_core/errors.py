from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SentinelCapacityError(ValueError):
    capacity: object
    context: str | None = None

    def __str__(self) -> str:
        where = f" in {self.context}" if self.context else ""
        return f"capacity must be a positive length{where}, got {self.capacity!r}"


@dataclass(frozen=True)
class SentinelRangeError(ValueError):
    lo: object
    hi: object
    context: str | None = None

    def __str__(self) -> str:
        where = f" in {self.context}" if self.context else ""
        return f"invalid random range [{self.lo!r}, {self.hi!r}]{where}"


@dataclass(frozen=True)
class SentinelFillCountError(ValueError):
    fill_count: object
    capacity: int

    def __str__(self) -> str:
        return f"fill_count={self.fill_count!r} outside [0, {self.capacity}]"


@dataclass(frozen=True)
class SentinelIndexError(IndexError):
    index: int
    capacity: int
    context: str | None = None

    def __str__(self) -> str:
        where = f" in {self.context}" if self.context else ""
        return f"index {self.index} out of bounds for capacity {self.capacity}{where}"


@dataclass(frozen=True)
class SentinelSafetyModeError(ValueError):
    mode: object
    allowed: tuple[str, ...] = ("corrupt", "clamp", "drop")
    context: str | None = None

    def __str__(self) -> str:
        where = f" in {self.context}" if self.context else ""
        allowed = ", ".join(self.allowed)
        return f"unknown safety mode={self.mode!r}{where} (expected one of: {allowed})"


@dataclass(frozen=True)
class SentinelValueError(ValueError):
    value: int
    lo: int
    hi: int
    context: str | None = None

    def __str__(self) -> str:
        where = f" in {self.context}" if self.context else ""
        return f"value {self.value} outside [{self.lo}, {self.hi}]{where}"


@dataclass(frozen=True)
class SentinelInputError(ValueError):
    token: str
    reason: str = "not an integer"

    def __str__(self) -> str:
        return f"{self.reason}: {self.token!r}"


__all__ = [
    "SentinelCapacityError",
    "SentinelRangeError",
    "SentinelFillCountError",
    "SentinelIndexError",
    "SentinelSafetyModeError",
    "SentinelValueError",
    "SentinelInputError",
]
