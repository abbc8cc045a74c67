import itertools

import pytest

from identicon.color import HSL, complementary, parse_color, to_hex, to_hsl, to_rgb

SAMPLES = list(itertools.product(range(0, 256, 15), repeat=3)) + [(255, 255, 255), (255, 0, 0), (1, 2, 3)]


def _close(a, b, tol=1):
    return all(abs(x - y) <= tol for x, y in zip(a, b))


def test_to_hsl_primaries():
    assert tuple(to_hsl((255, 0, 0))) == pytest.approx((0, 1, 0.5))
    assert tuple(to_hsl((0, 255, 0))) == pytest.approx((120, 1, 0.5))
    assert tuple(to_hsl((0, 0, 255))) == pytest.approx((240, 1, 0.5))


def test_to_hsl_grey_has_no_hue_or_saturation():
    hsl = to_hsl((128, 128, 128))
    assert hsl.h == 0
    assert hsl.s == 0
    assert hsl.l == pytest.approx(128 / 255)


def test_to_hsl_red_max_negative_hue_wraps():
    # blue above green with red max lands just under 360
    hsl = to_hsl((122, 16, 21))
    assert 357 < hsl.h < 358


def test_to_rgb_segments():
    assert to_rgb(HSL(0, 1, 0.5)) == (255, 0, 0)
    assert to_rgb(HSL(60, 1, 0.5)) == (255, 255, 0)
    assert to_rgb(HSL(180, 1, 0.5)) == (0, 255, 255)
    assert to_rgb(HSL(300, 1, 0.5)) == (255, 0, 255)
    assert to_rgb(HSL(0, 0, 1)) == (255, 255, 255)


def test_hsl_round_trip():
    for c in SAMPLES:
        assert _close(to_rgb(to_hsl(c)), c), c


def test_complementary_of_primaries():
    assert complementary((255, 0, 0)) == (0, 255, 255)
    assert complementary((0, 0, 255)) == (255, 255, 0)


def test_complementary_keeps_extremes():
    assert complementary((122, 16, 21)) == (16, 122, 117)


def test_complementary_of_grey_is_unchanged():
    assert complementary((255, 255, 255)) == (255, 255, 255)
    assert complementary((40, 40, 40)) == (40, 40, 40)


def test_complementary_is_an_involution():
    for c in SAMPLES:
        assert _close(complementary(complementary(c)), c), c


def test_parse_color_accepts_strings_and_tuples():
    assert parse_color("#7a1015") == (122, 16, 21)
    assert parse_color("white") == (255, 255, 255)
    assert parse_color((1, 2, 3)) == (1, 2, 3)
    assert parse_color([1, 2, 3, 0]) == (1, 2, 3)


@pytest.mark.parametrize("bad", [None, "not-a-color", (1, 2), (256, 0, 0), (-1, 0, 0), (1.5, 0, 0), 7])
def test_parse_color_rejects(bad):
    with pytest.raises(ValueError):
        parse_color(bad)


def test_to_hex():
    assert to_hex((122, 16, 21)) == "#7a1015"
