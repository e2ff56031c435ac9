from __future__ import annotations

"""Hue, saturation and brightness derivation.

The three components are resolved in order because each depends on the
previous one: the hue selects the family (unless one was given), the family
bounds the saturation, and the sampled saturation fixes the minimum
brightness through the family's lower-bound curve.
"""

import logging
from typing import Tuple

from .color_types import Color
from .families import MONOCHROME, ColorFamily, lookup
from .options import Luminosity, Options
from .ranges import Range, sample_inclusive
from .rng import RandomSource

logger = logging.getLogger(__name__)

FULL_SATURATION = Range(0, 100)
MAX_BRIGHTNESS = 100
BRIGHT_MIN_SATURATION = 55
LIGHT_MAX_SATURATION = 55
DARK_SATURATION_SPAN = 10
DARK_BRIGHTNESS_SPAN = 20


def pick_hue(options: Options, rng: RandomSource) -> int:
    """Draw a hue from the requested interval, folded into [0, 360).

    Negative hues (Red's interval) wrap by +360. The unconstrained interval
    is 0..359, so every degree is equally likely.
    """
    hue = sample_inclusive(rng, options.hue_range())
    if hue < 0:
        hue += 360
    return hue


def resolve_family(options: Options, hue: int) -> ColorFamily:
    """Explicit family if given, otherwise the family covering ``hue``."""
    if options.family is not None:
        return options.family
    return lookup(hue)


def saturation_range(family: ColorFamily, luminosity: Luminosity) -> Range:
    """Saturation interval for ``family`` after the luminosity adjustment."""
    if luminosity is Luminosity.RANDOM:
        return FULL_SATURATION
    base = family.saturation_range()
    if luminosity is Luminosity.BRIGHT:
        return base.with_low(BRIGHT_MIN_SATURATION)
    if luminosity is Luminosity.DARK:
        return base.with_low(base.high - DARK_SATURATION_SPAN)
    if luminosity is Luminosity.LIGHT:
        return base.with_high(LIGHT_MAX_SATURATION)
    return base


def pick_saturation(family: ColorFamily, luminosity: Luminosity, rng: RandomSource) -> int:
    if family is MONOCHROME:
        return 0
    return sample_inclusive(rng, saturation_range(family, luminosity))


def brightness_range(family: ColorFamily, saturation: int, luminosity: Luminosity) -> Range:
    """Brightness interval for ``saturation`` after the luminosity adjustment."""
    b_min = family.minimum_brightness(saturation)
    b_max = MAX_BRIGHTNESS
    if luminosity is Luminosity.DARK:
        b_max = min(b_min + DARK_BRIGHTNESS_SPAN, MAX_BRIGHTNESS)
    elif luminosity is Luminosity.LIGHT:
        b_min = (b_max + b_min) // 2
    elif luminosity is Luminosity.BRIGHT:
        pass
    else:
        # DEFAULT and RANDOM ignore the curve.
        b_min, b_max = 0, MAX_BRIGHTNESS
    return Range(b_min, b_max)


def pick_brightness(
    family: ColorFamily, saturation: int, luminosity: Luminosity, rng: RandomSource
) -> int:
    return sample_inclusive(rng, brightness_range(family, saturation, luminosity))


def resolve_hsb(options: Options, rng: RandomSource) -> Tuple[int, int, int, ColorFamily]:
    """Resolve (h, s, b) and the family they were drawn against."""
    hue = pick_hue(options, rng)
    family = resolve_family(options, hue)
    sat = pick_saturation(family, options.luminosity, rng)
    bri = pick_brightness(family, sat, options.luminosity, rng)
    logger.debug(
        "resolved h=%d s=%d b=%d family=%s luminosity=%s",
        hue,
        sat,
        bri,
        family.name,
        options.luminosity.value,
    )
    return hue, sat, bri, family


def resolve(options: Options, rng: RandomSource) -> Color:
    """Build a :class:`Color` for ``options`` using ``rng``."""
    h, s, b, family = resolve_hsb(options, rng)
    return Color(h=h, s=s, b=b, family=family)


__all__ = [
    "pick_hue",
    "resolve_family",
    "saturation_range",
    "pick_saturation",
    "brightness_range",
    "pick_brightness",
    "resolve_hsb",
    "resolve",
]
