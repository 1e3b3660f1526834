# tests/test_conversions.py
import itertools

import pytest

from color_tween.color.conversions import (
    hex_to_rgb,
    hsl_to_rgb,
    hue_to_channel,
    rgb_to_hsl,
    round_half_up,
)
from color_tween.color.types import HSL, RGB
from color_tween.errors import ColorError


# ── rgb_to_hsl ────────────────────────────────────────────────────────────────
def test_achromatic_gray_has_zero_hue_and_saturation():
    h, s, l = rgb_to_hsl(128, 128, 128)
    assert h == 0
    assert s == 0
    assert l == pytest.approx(50.196, abs=1e-3)


@pytest.mark.parametrize("channel", [0, 255])
def test_black_and_white_are_achromatic(channel):
    h, s, _ = rgb_to_hsl(channel, channel, channel)
    assert (h, s) == (0, 0)


@pytest.mark.parametrize(
    "rgb, expected",
    [
        ((255, 0, 0), (0, 100, 50)),
        ((0, 255, 0), (120, 100, 50)),
        ((0, 0, 255), (240, 100, 50)),
        ((255, 255, 0), (60, 100, 50)),
        ((255, 0, 128), (329.88, 100, 50)),  # g < b wraps the red sector
        ((64, 128, 192), (210, 50.39, 50.20)),
    ],
)
def test_rgb_to_hsl_known_values(rgb, expected):
    assert tuple(rgb_to_hsl(*rgb)) == pytest.approx(expected, abs=0.01)


def test_rgb_to_hsl_returns_named_tuple():
    result = rgb_to_hsl(255, 0, 0)
    assert isinstance(result, HSL)
    assert result.s == pytest.approx(100)


def test_light_colors_use_the_upper_saturation_formula():
    # l > 0.5: s = d / (2 - max - min)
    _, s, l = rgb_to_hsl(255, 128, 128)
    assert l > 50
    assert s == pytest.approx(100, abs=1e-9)


# ── hsl_to_rgb ────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "hsl, expected",
    [
        ((0, 100, 50), (255, 0, 0)),
        ((120, 100, 50), (0, 255, 0)),
        ((240, 100, 50), (0, 0, 255)),
        ((0, 0, 50), (127.5, 127.5, 127.5)),
        ((0, 0, 100), (255, 255, 255)),
        ((120, 100, 25), (0, 127.5, 0)),
    ],
)
def test_hsl_to_rgb_known_values(hsl, expected):
    assert tuple(hsl_to_rgb(*hsl)) == pytest.approx(expected, abs=1e-6)


def test_hsl_to_rgb_returns_named_tuple():
    assert isinstance(hsl_to_rgb(0, 100, 50), RGB)


def test_hue_360_matches_hue_0():
    assert tuple(hsl_to_rgb(360, 100, 50)) == pytest.approx(tuple(hsl_to_rgb(0, 100, 50)), abs=1e-6)


@pytest.mark.parametrize(
    "r, g, b",
    list(itertools.product([0, 17, 64, 128, 200, 255], repeat=3)),
)
def test_rgb_hsl_round_trip_within_one(r, g, b):
    back = hsl_to_rgb(*rgb_to_hsl(r, g, b))
    assert tuple(back) == pytest.approx((r, g, b), abs=1)


# ── helpers ───────────────────────────────────────────────────────────────────
def test_hue_to_channel_wraps_once():
    # 1.2 wraps to 0.2, which sits on the q plateau
    assert hue_to_channel(0.1, 0.9, 1.2) == 0.9
    # -0.1 wraps to 0.9, past 2/3
    assert hue_to_channel(0.1, 0.9, -0.1) == 0.1


@pytest.mark.parametrize(
    "x, expected",
    [(2.5, 3), (2.49, 2), (-2.5, -2), (-2.51, -3), (0, 0), (254.5, 255)],
)
def test_round_half_up(x, expected):
    assert round_half_up(x) == expected


@pytest.mark.parametrize(
    "digits, expected",
    [
        ("ff0000", (255, 0, 0)),
        ("f00", (255, 0, 0)),
        ("abc", (0xAA, 0xBB, 0xCC)),
        ("ff000080", (255, 0, 0)),
        ("0A0b0C", (10, 11, 12)),
    ],
)
def test_hex_to_rgb(digits, expected):
    assert hex_to_rgb(digits) == expected


@pytest.mark.parametrize("digits", ["ff", "gg0000", "zzz"])
def test_hex_to_rgb_rejects_bad_digits_with_color_error(digits):
    with pytest.raises(ColorError):
        hex_to_rgb(digits)


def test_rgb_to_hsl_stays_finite_when_saturation_denominator_cancels():
    # r normalizes to 2.0, so 2 - max - min == 0
    h, s, l = rgb_to_hsl(510, 0, 0)
    assert (h, s) == (0, 0)
    assert l == pytest.approx(100)


def test_rgb_to_hsl_keeps_other_out_of_range_values_unclamped():
    _, s, l = rgb_to_hsl(600, 0, 0)
    assert l > 100
    assert s < 0
