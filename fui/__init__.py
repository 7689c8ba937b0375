"""Pure-Python graphics helpers: colours, Mandelbrot and n-body demos, and image encoders."""

__version__ = "0.1.0"