"""Public entrypoint for the randomcolor library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``randomcolor`` instead of individual
submodules.
"""

from .color_types import Color
from .families import (
    BLUE,
    FAMILIES,
    GREEN,
    MONOCHROME,
    ORANGE,
    PINK,
    PURPLE,
    RED,
    YELLOW,
    ColorFamily,
    family_by_name,
)
from .options import Luminosity, Options
from .ranges import Range
from .rng import RandomSource, seed
from .api import generate, generate_many
from .ui_helpers import (
    EXPORT_FORMAT_OPTIONS,
    FAMILY_OPTIONS,
    LUMINOSITY_OPTIONS,
    ExportFormat,
    export_colors,
)

__all__ = [
    "Color",
    "ColorFamily",
    "Range",
    "Options",
    "Luminosity",
    "RandomSource",
    "seed",
    "generate",
    "generate_many",
    "family_by_name",
    "FAMILIES",
    "MONOCHROME",
    "RED",
    "ORANGE",
    "YELLOW",
    "GREEN",
    "BLUE",
    "PURPLE",
    "PINK",
    "ExportFormat",
    "export_colors",
    "FAMILY_OPTIONS",
    "LUMINOSITY_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
]
