"""Colour conversions producing packed 0xAARRGGBB values."""

import math


def _channel(n: int, h: float, a: float, l: float) -> float:
    k = math.fmod(n + h / 30, 12)
    return l - a * max(min(k - 3, min(9 - k, 1)), -1)


def _to_byte(value: float) -> int:
    return min(max(int(value * 255), 0), 255)


def hsl_to_rgb(h: float, s: float, l: float) -> int:
    """Convert hue (in turns), saturation and lightness to opaque ARGB."""
    h = math.fmod(h, 1.0) * 360.0
    if s == 0:
        r = g = b = l
    else:
        a = s * min(l, 1 - l)
        r = _channel(0, h, a, l)
        g = _channel(8, h, a, l)
        b = _channel(4, h, a, l)
    return (0xFF << 24) | (_to_byte(r) << 16) | (_to_byte(g) << 8) | _to_byte(b)


def parametrized_rainbow(t: float) -> int:
    """Return a fully saturated rainbow colour for parameter ``t``."""
    return hsl_to_rgb(math.fmod(t, 1.0), 1.0, 0.5)