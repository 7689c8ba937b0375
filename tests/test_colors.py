import pytest

from fui.colors import hsl_to_rgb, parametrized_rainbow


def test_pure_red():
    assert hsl_to_rgb(0.0, 1.0, 0.5) == 0xFFFF0000


@pytest.mark.parametrize("h", [0.0, 0.1, 0.33, 0.5, 0.77, 0.99])
def test_alpha_is_opaque(h):
    assert hsl_to_rgb(h, 1.0, 0.5) >> 24 == 0xFF


@pytest.mark.parametrize("l", [0.0, 0.25, 0.5, 1.0])
def test_achromatic_channels_equal(l):
    color = hsl_to_rgb(0.4, 0.0, l)
    r = (color >> 16) & 0xFF
    g = (color >> 8) & 0xFF
    b = color & 0xFF
    assert r == g == b


def test_black_and_white_extremes():
    assert hsl_to_rgb(0.2, 0.0, 0.0) & 0xFFFFFF == 0
    assert hsl_to_rgb(0.2, 0.0, 1.0) & 0xFFFFFF == 0xFFFFFF


def test_hue_wraps_around():
    assert hsl_to_rgb(1.25, 1.0, 0.5) == hsl_to_rgb(0.25, 1.0, 0.5)


def test_rainbow_uses_full_saturation():
    assert parametrized_rainbow(0.25) == hsl_to_rgb(0.25, 1.0, 0.5)


def test_rainbow_is_periodic():
    assert parametrized_rainbow(2.5) == parametrized_rainbow(0.5)


def test_rainbow_changes_with_parameter():
    assert parametrized_rainbow(0.0) != parametrized_rainbow(0.5)
    assert parametrized_rainbow(0.0) == hsl_to_rgb(0.0, 1.0, 0.5)