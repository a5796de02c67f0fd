from __future__ import annotations

from dataclasses import dataclass

import jax
import numpy as np


@dataclass(frozen=True)
class HostInt:
    v: int

    def __int__(self) -> int:
        return int(self.v)

    def __index__(self) -> int:
        return int(self.v)


def _host_int(value) -> HostInt:
    if isinstance(value, HostInt):
        return value
    return HostInt(int(jax.device_get(value)))


def _host_int_value(value) -> int:
    return int(_host_int(value))


def _host_array(values) -> np.ndarray:
    """Copy a device buffer into a writable host numpy array."""
    return np.array(jax.device_get(values))


__all__ = [
    "HostInt",
    "_host_int",
    "_host_int_value",
    "_host_array",
]
