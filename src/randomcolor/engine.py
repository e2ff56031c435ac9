from __future__ import annotations

"""Color conversion engine for HSB (HSV) and 8-bit RGB.

This module defines the :class:`ColorEngine` protocol and a default
implementation of the classic six-sector HSB to RGB conversion.
"""

import math
from typing import Protocol, Tuple


HSB = Tuple[int, int, int]
RGB = Tuple[int, int, int]


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def hsb_to_rgb(self, h: float, s: float, b: float) -> RGB: ...


class DefaultColorEngine:
    """Default HSB to RGB conversion with 0-255 integer channels."""

    def hsb_to_rgb(self, h: float, s: float, b: float) -> RGB:
        """Convert H in [0, 360], S and B in [0, 100] to (r, g, b) in [0, 255].

        Hue 0 is read as 1 and hue 360 as 359, so the sector index always
        falls in 0..5. Channels are floored, not rounded.
        """
        if h == 0:
            h = 1
        if h == 360:
            h = 359

        h = h / 360.0
        s = s / 100.0
        v = b / 100.0

        h_i = math.floor(h * 6)
        f = h * 6 - h_i
        p = v * (1 - s)
        q = v * (1 - f * s)
        t = v * (1 - (1 - f) * s)

        if h_i == 0:
            r2, g2, b2 = v, t, p
        elif h_i == 1:
            r2, g2, b2 = q, v, p
        elif h_i == 2:
            r2, g2, b2 = p, v, t
        elif h_i == 3:
            r2, g2, b2 = p, q, v
        elif h_i == 4:
            r2, g2, b2 = t, p, v
        else:
            r2, g2, b2 = v, p, q

        return (_to_channel(r2), _to_channel(g2), _to_channel(b2))


def _to_channel(x: float) -> int:
    return int(math.floor(x * 255))


__all__ = ["ColorEngine", "DefaultColorEngine", "HSB", "RGB"]
