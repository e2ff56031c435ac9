"""
Print randomly generated colors.

Usage:
    python -m randomcolor --count 5 --family purple --luminosity bright
    python -m randomcolor --hue 200 --format rgba_255 --seed 42

Defaults for --count, --format, --seed and --log-level come from the
RANDOMCOLOR_* environment variables (see ``common.settings``).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from common import settings
from common.logging import setup_default_logging

from .api import generate_many
from .families import FAMILIES
from .options import Luminosity, Options
from .rng import RandomSource
from .ui_helpers import ExportFormat, format_color

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    cfg = settings.get()
    p = argparse.ArgumentParser(prog="randomcolor", description="Generate random colors.")
    p.add_argument("-n", "--count", type=int, default=cfg.COUNT, help="number of colors")
    target = p.add_mutually_exclusive_group()
    target.add_argument("--hue", type=int, default=None, help="exact hue degree in (0, 360)")
    target.add_argument(
        "--family",
        choices=[f.name for f in FAMILIES],
        default=None,
        help="named color family",
    )
    p.add_argument(
        "--luminosity",
        choices=[lum.value for lum in Luminosity],
        default=Luminosity.DEFAULT.value,
    )
    p.add_argument(
        "--format",
        choices=[fmt.value for fmt in ExportFormat],
        default=cfg.FORMAT,
        help="output format",
    )
    p.add_argument("--seed", type=int, default=cfg.SEED, help="seed for reproducible output")
    p.add_argument("--log-level", default=cfg.LOG_LEVEL)
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_default_logging(args.log_level)

    if args.count < 0:
        parser.error("--count must be non-negative")
    try:
        options = Options(hue=args.hue, family=args.family, luminosity=args.luminosity)
        fmt = ExportFormat.from_value(args.format)
        rng = RandomSource(args.seed)
    except ValueError as exc:
        parser.error(str(exc))

    logger.debug("generating %d colors with %s (seed=%d)", args.count, options, rng.seed)
    for color in generate_many(args.count, options, rng=rng):
        print(format_color(color, fmt))
    return 0


if __name__ == "__main__":
    sys.exit(main())
