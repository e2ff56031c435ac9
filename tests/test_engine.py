from __future__ import annotations

"""HSB → RGB 変換のテスト。"""

import pytest

from randomcolor.engine import DefaultColorEngine


@pytest.fixture()
def engine() -> DefaultColorEngine:
    return DefaultColorEngine()


def test_white_and_black(engine: DefaultColorEngine):
    assert engine.hsb_to_rgb(0, 0, 100) == (255, 255, 255)
    assert engine.hsb_to_rgb(200, 80, 0) == (0, 0, 0)


def test_primary_hues(engine: DefaultColorEngine):
    assert engine.hsb_to_rgb(120, 100, 100) == (0, 255, 0)
    assert engine.hsb_to_rgb(240, 100, 100) == (0, 0, 255)


def test_hue_zero_is_read_as_one(engine: DefaultColorEngine):
    assert engine.hsb_to_rgb(0, 100, 100) == engine.hsb_to_rgb(1, 100, 100)
    r, g, b = engine.hsb_to_rgb(0, 100, 100)
    assert r == 255 and b == 0 and g < 10


def test_hue_360_is_read_as_359(engine: DefaultColorEngine):
    assert engine.hsb_to_rgb(360, 100, 100) == engine.hsb_to_rgb(359, 100, 100)
    r, g, b = engine.hsb_to_rgb(360, 100, 100)
    assert r == 255 and g == 0 and b < 10


def test_hue_0_and_360_stay_adjacent_reds(engine: DefaultColorEngine):
    a = engine.hsb_to_rgb(0, 100, 100)
    z = engine.hsb_to_rgb(360, 100, 100)
    assert all(abs(x - y) <= 10 for x, y in zip(a, z))


def test_channels_are_floored(engine: DefaultColorEngine):
    # 50% gray: 0.5 * 255 = 127.5 floors to 127.
    assert engine.hsb_to_rgb(10, 0, 50) == (127, 127, 127)


@pytest.mark.parametrize("h", [30, 90, 150, 210, 270, 330])
def test_every_sector_stays_in_byte_range(engine: DefaultColorEngine, h: int):
    for s in (0, 37, 100):
        for b in (0, 63, 100):
            rgb = engine.hsb_to_rgb(h, s, b)
            assert all(0 <= c <= 255 for c in rgb)


def test_conversion_is_deterministic(engine: DefaultColorEngine):
    assert engine.hsb_to_rgb(271, 64, 88) == engine.hsb_to_rgb(271, 64, 88)



def test_color_accepts_engine_with_only_hsb_to_rgb():
    """ColorEngine の要件は hsb_to_rgb のみ。"""
    from randomcolor import RED, Color

    class FixedEngine:
        def hsb_to_rgb(self, h: float, s: float, b: float):
            return (1, 2, 3)

    c = Color(h=10, s=50, b=50, family=RED)
    assert c.to_rgba(FixedEngine()) == (1, 2, 3, 255)
    assert not hasattr(DefaultColorEngine(), "normalize_hue")
