"""BMP, TGA and Radiance HDR encoders for 8-bit and floating-point pixel data."""

from __future__ import annotations

import math
import os
import struct
from typing import Sequence, Union

_PINK = (255, 0, 255)
_TGA_MAX_PACKET = 128
_HDR_MAX_DUMP = 128
_HDR_MAX_RUN = 127


def _check_dimensions(width: int, height: int, components: int) -> None:
    if width < 0 or height < 0:
        raise ValueError("width and height must be non-negative")
    if components not in (1, 2, 3, 4):
        raise ValueError("components must be 1, 2, 3 or 4")


def _check_length(data, width: int, height: int, components: int) -> None:
    if len(data) < width * height * components:
        raise ValueError("pixel data is too short for the given dimensions")


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // b
    return q if a >= 0 else -q


def _pixel(d: bytes, components: int, write_alpha: bool, expand_mono: bool) -> bytes:
    """Return one pixel in BGR order, with alpha appended when requested."""
    out = bytearray()
    if components in (1, 2):
        out += bytes((d[0],) * 3) if expand_mono else bytes((d[0],))
    elif components == 4 and not write_alpha:
        # Composite against a pink background.
        px = [(_PINK[k] + _trunc_div((d[k] - _PINK[k]) * d[3], 255)) & 0xFF
              for k in range(3)]
        out += bytes((px[2], px[1], px[0]))
    else:
        out += bytes((d[2], d[1], d[0]))
    if write_alpha:
        out.append(d[components - 1])
    return bytes(out)


def _rows(data: bytes, width: int, height: int, components: int,
          bottom_up: bool) -> list[bytes]:
    row_bytes = width * components
    order = range(height - 1, -1, -1) if bottom_up else range(height)
    return [data[j * row_bytes:(j + 1) * row_bytes] for j in order]


def _pixels(data: bytes, width: int, height: int, components: int, bottom_up: bool,
            write_alpha: bool, pad: int, expand_mono: bool) -> bytes:
    out = bytearray()
    for row in _rows(data, width, height, components, bottom_up):
        for i in range(width):
            out += _pixel(row[i * components:(i + 1) * components],
                          components, write_alpha, expand_mono)
        out += bytes(pad)
    return bytes(out)


def encode_bmp(data, width: int, height: int, components: int,
               flip: bool = False) -> bytes:
    """Encode 8-bit pixels as a BMP file image; four channels keep their alpha."""
    _check_dimensions(width, height, components)
    data = bytes(data)
    _check_length(data, width, height, components)
    bottom_up = not flip
    if components != 4:
        pad = (-width * 3) & 3
        header = struct.pack(
            "<2sIHHIIIIHHIIIIII",
            b"BM", 14 + 40 + (width * 3 + pad) * height, 0, 0, 14 + 40,
            40, width, height, 1, 24, 0, 0, 0, 0, 0, 0)
        return header + _pixels(data, width, height, components, bottom_up,
                                False, pad, True)
    header = struct.pack(
        "<2sIHHI" + "IIIHH" + "IIIII" + "I" + "IIII" + "I" + "I" * 12,
        b"BM", 14 + 108 + width * height * 4, 0, 0, 14 + 108,
        108, width, height, 1, 32,
        3, 0, 0, 0, 0,
        0,
        0xFF0000, 0xFF00, 0xFF, 0xFF000000,
        0,
        *([0] * 12))
    return header + _pixels(data, width, height, components, bottom_up,
                            True, 0, True)


def _tga_rle_row(row: bytes, width: int, components: int, has_alpha: bool) -> bytes:
    def px(k: int) -> bytes:
        return row[k * components:(k + 1) * components]

    out = bytearray()
    i = 0
    while i < width:
        length = 1
        diff = True
        if i < width - 1:
            length = 2
            diff = px(i) != px(i + 1)
            if diff:
                prev = i
                for k in range(i + 2, width):
                    if length >= _TGA_MAX_PACKET:
                        break
                    if px(prev) != px(k):
                        prev += 1
                        length += 1
                    else:
                        length -= 1
                        break
            else:
                for k in range(i + 2, width):
                    if length >= _TGA_MAX_PACKET:
                        break
                    if px(i) == px(k):
                        length += 1
                    else:
                        break
        if diff:
            out.append((length - 1) & 0xFF)
            for k in range(length):
                out += _pixel(px(i + k), components, has_alpha, False)
        else:
            out.append((length - 129) & 0xFF)
            out += _pixel(px(i), components, has_alpha, False)
        i += length
    return bytes(out)


def encode_tga(data, width: int, height: int, components: int,
               rle: bool = True, flip: bool = False) -> bytes:
    """Encode 8-bit pixels as a TGA file image, run-length encoded by default."""
    _check_dimensions(width, height, components)
    data = bytes(data)
    _check_length(data, width, height, components)
    has_alpha = components in (2, 4)
    color_bytes = components - 1 if has_alpha else components
    image_type = 3 if color_bytes < 2 else 2
    if rle:
        image_type += 8
    header = struct.pack("<BBBHHBHHHHBB", 0, 0, image_type, 0, 0, 0, 0, 0,
                         width, height, (color_bytes + has_alpha) * 8,
                         has_alpha * 8)
    bottom_up = not flip
    if not rle:
        return header + _pixels(data, width, height, components, bottom_up,
                                has_alpha, 0, False)
    body = bytearray()
    for row in _rows(data, width, height, components, bottom_up):
        body += _tga_rle_row(row, width, components, has_alpha)
    return header + bytes(body)


def _rgbe(r: float, g: float, b: float) -> bytes:
    biggest = max(r, g, b)
    if biggest < 1e-32:
        return bytes(4)
    mantissa, exponent = math.frexp(biggest)
    scale = mantissa * 256.0 / biggest
    return bytes((int(r * scale) & 0xFF, int(g * scale) & 0xFF,
                  int(b * scale) & 0xFF, (exponent + 128) & 0xFF))


def _hdr_scanline(values: Sequence[float], width: int, components: int) -> bytes:
    pixels = []
    for x in range(width):
        base = x * components
        if components >= 3:
            rgb = (values[base], values[base + 1], values[base + 2])
        else:
            rgb = (values[base],) * 3
        pixels.append(_rgbe(*rgb))

    if width < 8 or width >= 32768:
        return b"".join(pixels)

    out = bytearray((2, 2, (width >> 8) & 0xFF, width & 0xFF))
    for c in range(4):
        comp = bytes(p[c] for p in pixels)
        x = 0
        while x < width:
            r = x
            while r + 2 < width:
                if comp[r] == comp[r + 1] == comp[r + 2]:
                    break
                r += 1
            if r + 2 >= width:
                r = width
            while x < r:
                n = min(r - x, _HDR_MAX_DUMP)
                out.append(n)
                out += comp[x:x + n]
                x += n
            if r + 2 < width:
                while r < width and comp[r] == comp[x]:
                    r += 1
                while x < r:
                    n = min(r - x, _HDR_MAX_RUN)
                    out += bytes((n + 128, comp[x]))
                    x += n
    return bytes(out)


def encode_hdr(data: Sequence[float], width: int, height: int, components: int,
               flip: bool = False) -> bytes:
    """Encode linear floating-point pixels as a Radiance RGBE file image."""
    if data is None or width <= 0 or height <= 0:
        raise ValueError("width and height must be positive and data given")
    _check_dimensions(width, height, components)
    _check_length(data, width, height, components)
    out = bytearray(b"#?RADIANCE\n# Written by fui\nFORMAT=32-bit_rle_rgbe\n")
    out += ("EXPOSURE=          1.0000000000000\n\n-Y %d +X %d\n"
            % (height, width)).encode("ascii")
    row_len = width * components
    for i in range(height):
        row = height - 1 - i if flip else i
        out += _hdr_scanline(data[row * row_len:(row + 1) * row_len],
                             width, components)
    return bytes(out)


def write_image(path: Union[str, os.PathLike], encoded: bytes) -> None:
    """Write an encoded image to ``path``."""
    with open(path, "wb") as handle:
        handle.write(encoded)