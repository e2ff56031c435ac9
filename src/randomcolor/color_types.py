from __future__ import annotations

"""Core color type returned by the generator.

A :class:`Color` stores the sampled hue, saturation and brightness together
with the family they were resolved against. RGB values are computed on demand
from the HSB triple and are never cached.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .engine import HSB, RGB, ColorEngine, DefaultColorEngine
from .families import ColorFamily
from .ranges import Range


RGBA = Tuple[int, int, int, int]

OPAQUE = 255


@dataclass(frozen=True)
class Color:
    """Generated color.

    Attributes
    ----------
    h:
        Hue in degrees, [0, 360).
    s:
        Saturation in percent, [0, 100].
    b:
        Brightness in percent, [0, 100].
    family:
        Family whose hue interval and brightness curve produced this color.
        Passing it back as ``Options(family=color.family)`` reuses the result
        as a constraint.
    """

    h: int
    s: int
    b: int
    family: ColorFamily

    @property
    def hue_range(self) -> Range:
        return self.family.hue_range

    def saturation_range(self) -> Range:
        """Saturation interval of the resolved family."""
        return self.family.saturation_range()

    def brightness_range(self) -> Range:
        """Brightness interval of the resolved family."""
        return self.family.brightness_range()

    def to_hsb(self) -> HSB:
        return (self.h, self.s, self.b)

    def to_rgb(self, engine: Optional[ColorEngine] = None) -> RGB:
        """Return (r, g, b) with channels in [0, 255]."""
        if engine is None:
            engine = DefaultColorEngine()
        return engine.hsb_to_rgb(self.h, self.s, self.b)

    def to_rgba(self, engine: Optional[ColorEngine] = None) -> RGBA:
        """Return (r, g, b, a) with channels in [0, 255]; alpha is always opaque."""
        r, g, b = self.to_rgb(engine)
        return (r, g, b, OPAQUE)

    def to_hex(self, engine: Optional[ColorEngine] = None) -> str:
        """Return hex representation "#rrggbb"."""
        return _rgb_to_hex(self.to_rgb(engine))


def _rgb_to_hex(rgb: RGB) -> str:
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"


__all__ = ["Color", "RGBA", "OPAQUE"]
