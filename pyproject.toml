[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fui"
version = "0.1.0"
description = "Pure-Python graphics helpers: HSL colours, a Mandelbrot renderer, an n-body toy, and PNG, BMP, TGA, HDR and JPEG encoders"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "png", "jpeg", "bmp", "tga", "hdr", "deflate", "zlib", "mandelbrot", "simulation", "colour"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
