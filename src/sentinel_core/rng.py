"""Injectable pseudo-random stream.

A RandomStream owns a jax.random key and splits it on every draw, so repeated
calls advance one stream. Generation and shuffle operations take ``stream=``;
when omitted they share the process-wide default stream.
"""

from __future__ import annotations

import time

import jax

from sentinel_core.config import seed_from_env


class RandomStream:
    def __init__(self, key):
        self._key = key
        self.draws = 0

    @classmethod
    def from_seed(cls, seed: int) -> "RandomStream":
        return cls(jax.random.PRNGKey(seed))

    def next_key(self):
        self._key, sub = jax.random.split(self._key)
        self.draws += 1
        return sub

    def __repr__(self) -> str:
        return f"RandomStream(draws={self.draws})"


_default_stream: RandomStream | None = None


def _clock_seed() -> int:
    return time.time_ns() & 0x7FFFFFFF


def seed_default_stream(seed: int | None = None) -> RandomStream:
    """Reseed the process-wide stream (env SENTINEL_SEED, then the clock)."""
    global _default_stream
    if seed is None:
        seed = seed_from_env()
    if seed is None:
        seed = _clock_seed()
    _default_stream = RandomStream.from_seed(seed)
    return _default_stream


def default_stream() -> RandomStream:
    if _default_stream is None:
        return seed_default_stream()
    return _default_stream


__all__ = [
    "RandomStream",
    "seed_default_stream",
    "default_stream",
]
