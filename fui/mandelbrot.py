"""Mandelbrot set colouring and a cancellable background renderer."""

from __future__ import annotations

import math
import threading
from typing import Iterator, Optional

from fui.colors import hsl_to_rgb

IN_SET_COLOR = 0xFF000000


def escape_iterations(zx: float, zy: float, max_iter: int) -> int:
    """Return the iteration count before the orbit of ``zx + i*zy`` escapes."""
    x = y = 0.0
    iterations = 0
    while x * x + y * y < 4 and iterations < max_iter:
        x, y = x * x - y * y + zx, 2.0 * x * y + zy
        iterations += 1
    return iterations


def mandelbrot_color(iterations: int, max_iter: int) -> int:
    """Colour for a pixel, log-scaled over the hue circle; black inside the set."""
    if iterations == max_iter:
        return IN_SET_COLOR
    return hsl_to_rgb(math.log(iterations + 1) / math.log(max_iter), 1.0, 0.5)


def render_mandelbrot(width: int, height: int, zoom: float, move_x: float,
                      move_y: float, max_iter: int,
                      stop: Optional[threading.Event] = None) -> Iterator[tuple[int, int, int]]:
    """Yield ``(x, y, color)`` column by column; ends early once ``stop`` is set."""
    for i in range(width):
        zx = 1.5 * (i - width // 2) / (0.5 * zoom * width) + move_x
        for j in range(height):
            if stop is not None and stop.is_set():
                return
            zy = (j - height // 2) / (0.5 * zoom * height) + move_y
            yield i, j, mandelbrot_color(escape_iterations(zx, zy, max_iter), max_iter)


class MandelbrotRenderer:
    """Renders into ``pixels[y][x]`` on a background thread, one render at a time."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = [[0] * width for _ in range(height)]
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._running = False

    @property
    def running(self) -> bool:
        with self._lock:
            return self._running

    def _run(self, zoom, move_x, move_y, max_iter) -> None:
        try:
            for x, y, color in render_mandelbrot(self.width, self.height, zoom,
                                                 move_x, move_y, max_iter, self._stop):
                self.pixels[y][x] = color
        finally:
            with self._lock:
                self._running = False

    def start(self, zoom: float, move_x: float, move_y: float, max_iter: int) -> bool:
        """Begin a render unless one is in progress; return whether it started."""
        with self._lock:
            if self._running:
                return False
            self._running = True
            self._stop.clear()
            self._thread = threading.Thread(
                target=self._run, args=(zoom, move_x, move_y, max_iter), daemon=True)
            self._thread.start()
            return True

    def cancel(self) -> None:
        """Ask the current render to stop."""
        self._stop.set()

    def join(self) -> None:
        """Wait for the current render to finish."""
        thread = self._thread
        if thread is not None:
            thread.join()