from __future__ import annotations

"""Helper utilities for integrating randomcolor into external UIs.

This module exposes label/enum pairs for color families, luminosity presets
and export formats, and provides :func:`export_colors` to convert generated
colors into simple lists (RGB/HEX/HSB) that UI code can consume easily.
"""

from enum import Enum
from typing import Dict, List, Sequence

import numpy as np

from .color_types import Color
from .families import FAMILIES, ColorFamily
from .options import Luminosity


class ExportFormat(Enum):
    """Supported output formats for exported color lists."""

    RGBA_255 = "rgba_255"
    RGB_255 = "rgb_255"
    RGB_01 = "rgb_01"
    HEX = "hex"
    HSB = "hsb"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


# Label/Enum pairs for UI choices
FAMILY_OPTIONS: List[tuple[str, ColorFamily]] = [(f.name.capitalize(), f) for f in FAMILIES]
LUMINOSITY_OPTIONS: List[tuple[str, Luminosity]] = [
    ("Default", Luminosity.DEFAULT),
    ("Bright", Luminosity.BRIGHT),
    ("Dark", Luminosity.DARK),
    ("Light", Luminosity.LIGHT),
    ("Random", Luminosity.RANDOM),
]
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("RGBA (0-255)", ExportFormat.RGBA_255),
    ("RGB (0-255)", ExportFormat.RGB_255),
    ("RGB (0-1)", ExportFormat.RGB_01),
    ("HEX", ExportFormat.HEX),
    ("HSB", ExportFormat.HSB),
]

FAMILY_LABEL_MAP: Dict[str, ColorFamily] = {label: value for label, value in FAMILY_OPTIONS}
LUMINOSITY_LABEL_MAP: Dict[str, Luminosity] = {
    label: value for label, value in LUMINOSITY_OPTIONS
}


def export_colors(colors: Sequence[Color], fmt: ExportFormat | str) -> List[object]:
    """Convert generated colors to a list in the desired format."""
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if export_fmt == ExportFormat.RGBA_255:
        return [c.to_rgba() for c in colors]
    if export_fmt == ExportFormat.RGB_255:
        return [c.to_rgb() for c in colors]
    if export_fmt == ExportFormat.RGB_01:
        return [tuple(ch / 255.0 for ch in c.to_rgb()) for c in colors]
    if export_fmt == ExportFormat.HEX:
        return [c.to_hex() for c in colors]
    if export_fmt == ExportFormat.HSB:
        return [c.to_hsb() for c in colors]
    raise ValueError(f"Unsupported export format: {fmt}")


def as_array(colors: Sequence[Color]) -> np.ndarray:
    """Stack colors into an ``(N, 4)`` uint8 RGBA array."""
    if not colors:
        return np.zeros((0, 4), dtype=np.uint8)
    return np.asarray([c.to_rgba() for c in colors], dtype=np.uint8)


def format_color(color: Color, fmt: ExportFormat | str) -> str:
    """Render a single color as one line of text."""
    (value,) = export_colors([color], fmt)
    if isinstance(value, str):
        return value
    return " ".join(f"{v:.4f}" if isinstance(v, float) else str(v) for v in value)


__all__ = [
    "ExportFormat",
    "FAMILY_OPTIONS",
    "LUMINOSITY_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
    "FAMILY_LABEL_MAP",
    "LUMINOSITY_LABEL_MAP",
    "export_colors",
    "as_array",
    "format_color",
]
