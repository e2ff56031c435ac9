from __future__ import annotations

"""generate / generate_many の公開 API テスト。"""

import threading

import pytest

import randomcolor
from randomcolor import (
    FAMILIES,
    MONOCHROME,
    PURPLE,
    Color,
    Luminosity,
    Options,
    RandomSource,
    generate,
    generate_many,
)
from randomcolor.families import HUE_FAMILIES, ColorFamily


def _in_family_hues(h: int, family: ColorFamily) -> bool:
    lo, hi = family.hue_range
    return lo <= h <= hi or lo <= h - 360 <= hi


def test_exact_hue_is_returned_verbatim(rng: RandomSource):
    for h in range(1, 360):
        assert generate(Options(hue=h), rng=rng).h == h


@pytest.mark.parametrize("family", FAMILIES)
def test_family_selection_keeps_hue_inside_interval(family: ColorFamily, rng: RandomSource):
    for c in generate_many(300, Options(family=family), rng=rng):
        assert 0 <= c.h < 360
        assert _in_family_hues(c.h, family)
        assert c.family is family


@pytest.mark.parametrize("lum", list(Luminosity))
def test_monochrome_is_always_unsaturated(lum: Luminosity, rng: RandomSource):
    colors = generate_many(200, Options(family=MONOCHROME, luminosity=lum), rng=rng)
    assert all(c.s == 0 for c in colors)


@pytest.mark.parametrize("family", HUE_FAMILIES)
def test_dark_brightness_stays_near_curve(family: ColorFamily, rng: RandomSource):
    for c in generate_many(300, Options(family=family, luminosity="dark"), rng=rng):
        b_min = family.minimum_brightness(c.s)
        assert b_min <= c.b <= b_min + 20


@pytest.mark.parametrize("family", FAMILIES)
def test_light_brightness_above_midpoint(family: ColorFamily, rng: RandomSource):
    for c in generate_many(300, Options(family=family, luminosity="light"), rng=rng):
        b_min = family.minimum_brightness(c.s)
        assert c.b >= (b_min + 100) // 2


def test_unconstrained_light_uses_family_of_sampled_hue(rng: RandomSource):
    for c in generate_many(500, luminosity="light", rng=rng):
        assert c.family is randomcolor.families.lookup(c.h)
        assert c.s <= 55
        assert c.b >= (c.family.minimum_brightness(c.s) + 100) // 2


def test_purple_bright_scenario(rng: RandomSource):
    s_min, s_max = PURPLE.saturation_range()
    for c in generate_many(1000, Options(family=PURPLE, luminosity="bright"), rng=rng):
        assert 55 <= c.s <= s_max
        assert c.s >= s_min
        assert 258 <= c.h <= 282
        assert c.b >= PURPLE.minimum_brightness(c.s)
        r, g, b, a = c.to_rgba()
        assert all(0 <= ch <= 255 for ch in (r, g, b))
        assert a == 255


def test_random_luminosity_spans_full_saturation(rng: RandomSource):
    sats = {c.s for c in generate_many(3000, Options(family=PURPLE, luminosity="random"), rng=rng)}
    assert min(sats) < PURPLE.saturation_range().low


def test_keyword_options_shortcut(rng: RandomSource):
    c = generate(hue=42, luminosity="bright", rng=rng)
    assert c.h == 42
    with pytest.raises(ValueError):
        generate(Options(), hue=42, rng=rng)
    with pytest.raises(ValueError):
        generate({"hue": 42}, rng=rng)  # type: ignore[arg-type]


def test_generate_many_count():
    assert generate_many(0, rng=RandomSource(1)) == []
    assert len(generate_many(5, rng=RandomSource(1))) == 5
    with pytest.raises(ValueError):
        generate_many(-1)


def test_same_seed_same_sequence():
    a = generate_many(50, Options(luminosity="dark"), rng=RandomSource(2024))
    b = generate_many(50, Options(luminosity="dark"), rng=RandomSource(2024))
    assert a == b


def test_default_source_is_seedable(fresh_default_source: None):
    randomcolor.seed(99)
    a = generate_many(10)
    randomcolor.seed(99)
    b = generate_many(10)
    assert a == b


def test_default_source_without_seed_still_works(fresh_default_source: None):
    c = generate()
    assert isinstance(c, Color)
    assert 0 <= c.h < 360 and 0 <= c.s <= 100 and 0 <= c.b <= 100


def test_result_can_be_reused_as_constraint(rng: RandomSource):
    first = generate(hue=300, rng=rng)
    again = generate(family=first.family, luminosity="bright", rng=rng)
    assert again.family is first.family
    assert _in_family_hues(again.h, first.family)


def test_color_is_immutable(rng: RandomSource):
    c = generate(rng=rng)
    with pytest.raises(AttributeError):
        c.h = 10  # type: ignore[misc]


def test_shared_source_across_threads():
    src = RandomSource(5)
    results: list[Color] = []
    lock = threading.Lock()

    def work() -> None:
        batch = generate_many(200, Options(luminosity="bright"), rng=src)
        with lock:
            results.extend(batch)

    threads = [threading.Thread(target=work) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 1600
    for c in results:
        assert 0 <= c.h < 360
        assert c.s >= 55
        assert c.family.minimum_brightness(c.s) <= c.b <= 100
