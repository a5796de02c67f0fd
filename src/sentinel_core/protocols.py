from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ReadIntFn(Protocol):
    """Input source for keyboard fill: one integer per call.

    Raises StopIteration or EOFError when the source is exhausted.
    """

    def __call__(self) -> int:
        ...


@runtime_checkable
class WriteFn(Protocol):
    def __call__(self, *args, **kwargs) -> None:
        ...


__all__ = ["ReadIntFn", "WriteFn"]
