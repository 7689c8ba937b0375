from fui.colors import hsl_to_rgb
from fui.mandelbrot import (
    MandelbrotRenderer,
    escape_iterations,
    mandelbrot_color,
    render_mandelbrot,
)
import threading


def test_origin_never_escapes():
    assert escape_iterations(0.0, 0.0, 100) == 100


def test_far_point_escapes_immediately():
    assert escape_iterations(10.0, 10.0, 100) == 1


def test_iterations_bounded_by_max():
    for zx in (-2.0, -0.75, 0.3, 0.5):
        assert 0 <= escape_iterations(zx, 0.1, 50) <= 50


def test_in_set_color_is_black():
    assert mandelbrot_color(200, 200) == 0xFF000000


def test_zero_iterations_is_first_hue():
    assert mandelbrot_color(0, 100) == hsl_to_rgb(0.0, 1.0, 0.5)


def test_render_covers_every_pixel_column_major():
    pixels = list(render_mandelbrot(4, 3, 1.0, 0.0, 0.0, 20))
    assert len(pixels) == 12
    assert [(x, y) for x, y, _ in pixels[:3]] == [(0, 0), (0, 1), (0, 2)]
    assert all(color >> 24 == 0xFF for _, _, color in pixels)


def test_render_stops_when_requested():
    stop = threading.Event()
    stop.set()
    assert list(render_mandelbrot(10, 10, 1.0, 0.0, 0.0, 20, stop)) == []


def test_renderer_fills_pixels():
    renderer = MandelbrotRenderer(8, 6)
    assert renderer.start(1.0, 0.0, 0.0, 50) is True
    renderer.join()
    assert renderer.running is False
    assert renderer.pixels[3][4] == 0xFF000000
    assert all(color != 0 for row in renderer.pixels for color in row)


def test_renderer_cancel():
    renderer = MandelbrotRenderer(400, 400)
    renderer.start(1.0, 0.25, 0.5, 2000)
    renderer.cancel()
    renderer.join()
    assert renderer.running is False
    drawn = sum(1 for row in renderer.pixels for color in row if color != 0)
    assert drawn < 400 * 400