from __future__ import annotations

"""Inclusive integer ranges and uniform sampling within them.

Every interval used while resolving a color (hue, saturation, brightness)
is expressed as a :class:`Range`. Building a range validates its bounds,
so an inverted interval fails before anything is sampled.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:  # pragma: no cover
    from .rng import RandomSource


@dataclass(frozen=True)
class Range:
    """Closed integer interval ``[low, high]``.

    Attributes
    ----------
    low, high:
        Inclusive bounds. ``low`` must not exceed ``high``.
    """

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"Range bounds are inverted: low={self.low} > high={self.high}.")

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, (int, float)):
            return False
        return self.low <= value <= self.high

    def __iter__(self) -> Iterator[int]:
        # Allows ``low, high = r`` unpacking.
        yield self.low
        yield self.high

    def with_low(self, low: int) -> "Range":
        return Range(low, self.high)

    def with_high(self, high: int) -> "Range":
        return Range(self.low, high)


def sample_inclusive(rng: "RandomSource", r: Range) -> int:
    """Draw an integer uniformly from ``{r.low, ..., r.high}``."""
    return rng.randint(r.low, r.high)


__all__ = ["Range", "sample_inclusive"]
