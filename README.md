# fui

Dependency-free graphics helpers in pure Python: colour conversion, two small
demo computations, and encoders that turn raw pixel data into image files.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `fui.colors`

- `hsl_to_rgb(h, s, l)` – hue given in turns (`0.0`–`1.0`, wrapped), saturation
  and lightness in `0.0`–`1.0`; returns an opaque packed `0xAARRGGBB` integer.
- `parametrized_rainbow(t)` – fully saturated colour at hue `t`.

```python
from fui.colors import hsl_to_rgb

red = hsl_to_rgb(0.0, 1.0, 0.5)   # 0xFFFF0000
```

### `fui.mandelbrot`

- `escape_iterations(zx, zy, max_iter)` – iterations before the orbit of
  `zx + i·zy` leaves radius 2 (at most `max_iter`).
- `mandelbrot_color(iterations, max_iter)` – black (`0xFF000000`) inside the
  set, otherwise a hue chosen on a log scale.
- `render_mandelbrot(width, height, zoom, move_x, move_y, max_iter, stop=None)`
  – generator of `(x, y, color)` column by column; stops early once the
  `threading.Event` `stop` is set.
- `MandelbrotRenderer(width, height)` – renders into `pixels[y][x]` on a
  background thread. `start(zoom, move_x, move_y, max_iter)` returns `False`
  if a render is already running; `running`, `cancel()` and `join()` control it.

### `fui.bodies`

`BodySimulation(width, height, count=600, rng=None)` scatters `count` small
`Body` objects in the middle of a `width × height` area (both must exceed 400)
around one heavy `attractor`. `move_attractor(x, y)` repositions it,
`scroll(amount)` scales its mass by `1.1 ** amount` within 10 000–1 000 000,
and `step()` applies one tick of mutual gravity, attraction, damping and motion.

### `fui.deflate`

- `zlib_compress(data, quality=8)` – zlib stream using fixed Huffman codes,
  falling back to stored blocks when that is smaller.
- `crc32(data)` and `adler32(data)` – the checksums used by PNG and zlib.

### `fui.png`

- `encode_png(data, width, height, components, stride=0, compression_level=8,
  force_filter=-1, flip=False)` – returns PNG file bytes for 8-bit pixels with
  1 (grey), 2 (grey + alpha), 3 (RGB) or 4 (RGBA) components. Rows are `stride`
  bytes apart (`0` means tightly packed). A `force_filter` of 0–4 uses that
  filter for every row; otherwise each row gets the filter with the smallest
  output.
- `write_png(path, data, width, height, components, stride=0)` – encodes and
  writes to a file.

```python
from fui.png import write_png

pixels = bytes([255, 0, 0, 0, 255, 0])   # two RGB pixels
write_png("out.png", pixels, 2, 1, 3)
```

### `fui.bitmap`

- `encode_bmp(data, width, height, components, flip=False)` – 24-bit BMP, or a
  32-bit BMP with alpha mask when `components` is 4.
- `encode_tga(data, width, height, components, rle=True, flip=False)` – TGA,
  run-length encoded unless `rle` is false.
- `encode_hdr(data, width, height, components, flip=False)` – Radiance RGBE
  from linear floating-point values.
- `write_image(path, encoded)` – writes encoded bytes to a file.

### `fui.jpeg`

`encode_jpeg(data, width, height, components, quality=90, flip=False)` –
baseline JPEG; alpha is ignored, `quality` runs 1–100 (0 means 90), and at 90
or below the chroma channels are subsampled 2×2.

```python
from fui.bitmap import encode_bmp, write_image
from fui.jpeg import encode_jpeg

write_image("out.bmp", encode_bmp(pixels, 2, 1, 3))
jpeg_bytes = encode_jpeg(pixels, 2, 1, 3)
```

Invalid dimensions, component counts or too-short pixel data raise
`ValueError` in every encoder.

## What this package does not do

It draws nothing on screen: there is no framebuffer or window output, no
keyboard or mouse input, no event queue, no on-screen debug or frame-rate
overlay, no timing utilities and no game code. The Mandelbrot and n-body
modules compute pixel colours and positions only; displaying them is up to the
caller. The image modules only write files; they do not read or decode images.