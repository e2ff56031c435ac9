from __future__ import annotations

"""Request model consumed by the resolver.

An :class:`Options` instance says which part of the hue circle to draw from
and how to bias saturation and brightness (:class:`Luminosity`).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .families import ColorFamily, family_by_name
from .ranges import Range


class Luminosity(Enum):
    """Coarse saturation/brightness presets."""

    DEFAULT = "default"
    BRIGHT = "bright"
    DARK = "dark"
    LIGHT = "light"
    RANDOM = "random"

    @classmethod
    def from_value(cls, value: "Luminosity | str | None") -> "Luminosity":
        if value is None or value == "":
            return cls.DEFAULT
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for lum in cls:
                if lum.value == key:
                    return lum
        raise ValueError(f"Unknown luminosity: {value!r}")


FULL_HUE = Range(0, 359)


@dataclass(frozen=True)
class Options:
    """What kind of color to generate.

    Attributes
    ----------
    hue:
        ``None`` for an unconstrained hue, or an exact degree strictly inside
        ``(0, 360)``.
    family:
        Explicit :class:`ColorFamily`. When set it wins over ``hue`` for both
        the hue interval and the brightness curve. A family name is accepted
        and resolved on construction.
    luminosity:
        :class:`Luminosity` preset, or its string value.
    """

    hue: Optional[int] = None
    family: Optional[ColorFamily] = None
    luminosity: Luminosity = Luminosity.DEFAULT

    def __post_init__(self) -> None:
        if self.hue is not None:
            if isinstance(self.hue, bool) or not isinstance(self.hue, int):
                raise ValueError(f"hue must be an int degree, got {self.hue!r}.")
            if not (0 < self.hue < 360):
                raise ValueError(f"hue must be strictly inside (0, 360), got {self.hue}.")
        fam: Union[ColorFamily, str, None] = self.family
        if isinstance(fam, str):
            object.__setattr__(self, "family", family_by_name(fam))
        elif fam is not None and not isinstance(fam, ColorFamily):
            raise ValueError(f"family must be a ColorFamily or its name, got {fam!r}.")
        object.__setattr__(self, "luminosity", Luminosity.from_value(self.luminosity))

    def hue_range(self) -> Range:
        """Interval the hue is drawn from."""
        if self.family is not None:
            return self.family.hue_range
        if self.hue is not None:
            return Range(self.hue, self.hue)
        return FULL_HUE


__all__ = ["Luminosity", "Options", "FULL_HUE"]
