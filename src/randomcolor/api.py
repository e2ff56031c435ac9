from __future__ import annotations

"""High-level public API for generating random colors.

This module provides :func:`generate` and :func:`generate_many`, which
combine the request model, the resolver and a random source to produce
:class:`randomcolor.Color` values.
"""

from typing import Any, List, Optional

from .color_types import Color
from .options import Options
from .resolver import resolve
from .rng import RandomSource, default_source


def _coerce_options(options: Optional[Options], kwargs: dict[str, Any]) -> Options:
    if options is not None and kwargs:
        raise ValueError("Pass either an Options instance or keyword options, not both.")
    if options is None:
        return Options(**kwargs)
    if not isinstance(options, Options):
        raise ValueError(f"options must be an Options instance, got {type(options).__name__}.")
    return options


def generate(
    options: Optional[Options] = None,
    *,
    rng: Optional[RandomSource] = None,
    **kwargs: Any,
) -> Color:
    """Generate one random color.

    Parameters
    ----------
    options:
        Request describing the hue constraint and luminosity preset. When
        omitted, ``hue=``, ``family=`` and ``luminosity=`` keywords are used
        to build one; with neither, the hue is unconstrained.
    rng:
        Optional :class:`RandomSource`. If None, the process-wide default
        source is used (see :func:`randomcolor.rng.seed`).

    Returns
    -------
    Color
        The sampled HSB triple plus the family it was resolved against.
    """
    opts = _coerce_options(options, kwargs)
    if rng is None:
        rng = default_source()
    return resolve(opts, rng)


def generate_many(
    count: int,
    options: Optional[Options] = None,
    *,
    rng: Optional[RandomSource] = None,
    **kwargs: Any,
) -> List[Color]:
    """Generate ``count`` colors with the same options and random source."""
    if count < 0:
        raise ValueError("count must be non-negative.")
    opts = _coerce_options(options, kwargs)
    if rng is None:
        rng = default_source()
    return [resolve(opts, rng) for _ in range(count)]


__all__ = ["generate", "generate_many"]
