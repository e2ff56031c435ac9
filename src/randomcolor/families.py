from __future__ import annotations

"""Named hue families and their brightness lower-bound curves.

Each :class:`ColorFamily` owns a hue interval and a curve of
``(saturation, min_brightness)`` points. The curve is read as a
piecewise-linear function: the more saturated a color, the less brightness it
needs to still look vivid.

The table is immutable. Red's interval starts below zero so that hues just
under 360 degrees are handled by folding them onto negative values before
lookup.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .ranges import Range

logger = logging.getLogger(__name__)

Point = Tuple[int, int]

# Hues in [WRAP_START, 360] are folded by -360 before lookup.
WRAP_START = 334


def _div_trunc(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


@dataclass(frozen=True)
class ColorFamily:
    """A named partition of the hue circle.

    Attributes
    ----------
    name:
        Lower-case identifier (``"red"``, ``"blue"``, ...).
    hue_range:
        Hue interval in degrees. The lower bound may be negative.
    lower_bounds:
        ``(saturation, min_brightness)`` points with strictly increasing
        saturation. The first point gives the family's minimum saturation and
        maximum brightness, the last one its maximum saturation and minimum
        brightness.
    """

    name: str
    hue_range: Range
    lower_bounds: Tuple[Point, ...]

    def __post_init__(self) -> None:
        if len(self.lower_bounds) < 2:
            raise ValueError(f"{self.name}: lower bound curve needs at least two points.")
        sats = [s for s, _ in self.lower_bounds]
        if any(b <= a for a, b in zip(sats, sats[1:])):
            raise ValueError(f"{self.name}: lower bound saturations must be strictly increasing.")

    def saturation_range(self) -> Range:
        return Range(self.lower_bounds[0][0], self.lower_bounds[-1][0])

    def brightness_range(self) -> Range:
        return Range(self.lower_bounds[-1][1], self.lower_bounds[0][1])

    def minimum_brightness(self, saturation: int) -> int:
        """Minimum acceptable brightness for ``saturation``.

        Integer arithmetic throughout: the segment slope is truncated toward
        zero before it is applied. Returns 0 when ``saturation`` lies outside
        the curve.
        """
        for (s1, v1), (s2, v2) in zip(self.lower_bounds, self.lower_bounds[1:]):
            if s1 <= saturation <= s2:
                m = _div_trunc(v2 - v1, s2 - s1)
                return v1 + m * (saturation - s1)
        return 0

    def __str__(self) -> str:
        return self.name


MONOCHROME = ColorFamily("monochrome", Range(0, 0), ((0, 0), (100, 0)))

RED = ColorFamily(
    "red",
    Range(-26, 18),
    ((20, 100), (30, 92), (40, 89), (50, 85), (60, 78), (70, 70), (80, 60), (90, 55), (100, 50)),
)

ORANGE = ColorFamily(
    "orange",
    Range(19, 46),
    ((20, 100), (30, 93), (40, 88), (50, 86), (60, 85), (70, 70), (100, 70)),
)

YELLOW = ColorFamily(
    "yellow",
    Range(47, 62),
    ((25, 100), (40, 94), (50, 89), (60, 86), (70, 84), (80, 82), (90, 80), (100, 75)),
)

GREEN = ColorFamily(
    "green",
    Range(63, 178),
    ((30, 100), (40, 90), (50, 85), (60, 81), (70, 74), (80, 64), (90, 50), (100, 40)),
)

BLUE = ColorFamily(
    "blue",
    Range(179, 257),
    ((20, 100), (30, 86), (40, 80), (50, 74), (60, 60), (70, 52), (80, 44), (90, 39), (100, 35)),
)

PURPLE = ColorFamily(
    "purple",
    Range(258, 282),
    ((20, 100), (30, 87), (40, 79), (50, 70), (60, 65), (70, 59), (80, 52), (90, 45), (100, 42)),
)

PINK = ColorFamily(
    "pink",
    Range(283, 334),
    ((20, 100), (30, 90), (40, 86), (60, 84), (80, 80), (90, 75), (100, 73)),
)

FAMILIES: Tuple[ColorFamily, ...] = (MONOCHROME, RED, ORANGE, YELLOW, GREEN, BLUE, PURPLE, PINK)

# Monochrome is only reachable by explicit selection.
HUE_FAMILIES: Tuple[ColorFamily, ...] = tuple(f for f in FAMILIES if f is not MONOCHROME)

_BY_NAME: Dict[str, ColorFamily] = {f.name: f for f in FAMILIES}


def normalize_lookup_hue(hue: int) -> int:
    """Fold hues in ``[334, 360]`` onto ``[-26, 0]``."""
    if WRAP_START <= hue <= 360:
        return hue - 360
    return hue


def lookup(hue: int) -> ColorFamily:
    """Return the family whose hue interval contains ``hue``.

    Falls back to :data:`MONOCHROME` when no interval matches. With the
    shipped table this cannot happen for hues in ``[0, 360]``; see
    :func:`hue_partition_gaps`.
    """
    h = normalize_lookup_hue(hue)
    for family in HUE_FAMILIES:
        if h in family.hue_range:
            return family
    logger.warning("no color family covers hue %s; falling back to monochrome", hue)
    return MONOCHROME


def family_by_name(name: str) -> ColorFamily:
    """Resolve a family from its (case-insensitive) name."""
    if not isinstance(name, str):
        raise TypeError("family name must be a str")
    key = name.strip().lower()
    try:
        return _BY_NAME[key]
    except KeyError as exc:
        known = ", ".join(_BY_NAME)
        raise ValueError(f"Unknown color family: {name!r} (expected one of {known})") from exc


def hue_partition_gaps() -> List[int]:
    """Integer hues in ``[-26, 334)`` not covered by exactly one family.

    An empty list means the hue-addressable families partition the folded
    hue circle.
    """
    gaps: List[int] = []
    for h in range(WRAP_START - 360, WRAP_START):
        hits = sum(1 for f in HUE_FAMILIES if h in f.hue_range)
        if hits != 1:
            gaps.append(h)
    return gaps


__all__ = [
    "ColorFamily",
    "MONOCHROME",
    "RED",
    "ORANGE",
    "YELLOW",
    "GREEN",
    "BLUE",
    "PURPLE",
    "PINK",
    "FAMILIES",
    "HUE_FAMILIES",
    "lookup",
    "family_by_name",
    "normalize_lookup_hue",
    "hue_partition_gaps",
]
