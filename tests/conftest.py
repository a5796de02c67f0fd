import os
import sys

import pytest

# Keep the default stream deterministic unless explicitly overridden.
os.environ.setdefault("SENTINEL_SEED", "0")

import jax

# Ensure src/ is importable when the package is not installed.
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from sentinel_core.rng import RandomStream


@pytest.fixture(autouse=True)
def _set_default_device():
    with jax.default_device(jax.devices("cpu")[0]):
        yield


@pytest.fixture
def stream():
    return RandomStream.from_seed(0)


@pytest.fixture
def scripted_lines():
    """Build a read_line callable that replays lines, then raises EOFError."""

    def _make(lines):
        it = iter(lines)

        def _read_line(prompt=""):
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        return _read_line

    return _make
