from __future__ import annotations

"""Random source used by the color resolver.

The resolver never touches a hidden global generator. Callers either pass a
:class:`RandomSource` explicitly or rely on the process-wide default source,
which is initialised once by :func:`seed` or, lazily, from a high-resolution
clock on first use.

Notes
-----
- :class:`RandomSource` wraps ``numpy.random.Generator`` (PCG64). numpy
  generators are not safe for concurrent use, so every draw is guarded by a
  lock and a source may be shared between threads.
- Same seed, same sequence of draws. Tests rely on this for regressions.
"""

import logging
import threading
import time
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)


class RandomSource:
    """Thread-safe integer sampler backed by a numpy ``Generator``."""

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = time.time_ns()
        if seed < 0:
            raise ValueError("seed must be non-negative")
        self._seed = int(seed)
        self._gen = np.random.default_rng(self._seed)
        self._lock = threading.Lock()

    @property
    def seed(self) -> int:
        """Seed this source was created with."""
        return self._seed

    def randint(self, low: int, high: int) -> int:
        """Return an integer uniformly drawn from ``[low, high]`` (both inclusive)."""
        if low > high:
            raise ValueError(f"randint requires low <= high, got low={low}, high={high}.")
        with self._lock:
            value = self._gen.integers(low, high, endpoint=True)
        return int(value)

    def __repr__(self) -> str:  # pragma: no cover - display only
        return f"RandomSource(seed={self._seed})"


_DEFAULT: Optional[RandomSource] = None
_DEFAULT_LOCK = threading.Lock()


def seed(value: Optional[int] = None) -> RandomSource:
    """(Re)initialise the process-wide default source and return it.

    ``None`` seeds from ``time.time_ns()``.
    """
    global _DEFAULT
    src = RandomSource(value)
    with _DEFAULT_LOCK:
        _DEFAULT = src
    logger.debug("default random source seeded with %d", src.seed)
    return src


def default_source() -> RandomSource:
    """Return the process-wide default source, creating it on first use."""
    global _DEFAULT
    with _DEFAULT_LOCK:
        if _DEFAULT is None:
            _DEFAULT = RandomSource()
            logger.debug("default random source seeded from clock: %d", _DEFAULT.seed)
        return _DEFAULT


__all__ = ["RandomSource", "seed", "default_source"]
