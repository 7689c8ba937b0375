"""PNG encoder with per-row filter selection, built on the package's zlib encoder."""

from __future__ import annotations

import os
from typing import Union

from fui.deflate import crc32, zlib_compress

PNG_SIGNATURE = bytes((137, 80, 78, 71, 13, 10, 26, 10))
DEFAULT_COMPRESSION_LEVEL = 8

# PNG colour type for 1 (grey), 2 (grey+alpha), 3 (RGB) and 4 (RGBA) channels.
_COLOR_TYPES = {1: 0, 2: 4, 3: 2, 4: 6}

# Filter kinds 5 and 6 are Average and Paeth on the first row, where the row
# above is all zeros; Up on the first row is the same as no filter.
_ROW_KINDS = (0, 1, 2, 3, 4)
_FIRST_ROW_KINDS = (0, 1, 0, 5, 6)


def _paeth(a: int, b: int, c: int) -> int:
    p = a + b - c
    pa, pb, pc = abs(p - a), abs(p - b), abs(p - c)
    if pa <= pb and pa <= pc:
        return a
    if pb <= pc:
        return b
    return c


def _filter_row(cur: bytes, prev: bytes, n: int, filter_type: int,
                first_row: bool) -> bytes:
    kind = (_FIRST_ROW_KINDS if first_row else _ROW_KINDS)[filter_type]
    if kind == 0:
        return bytes(cur)
    out = bytearray(len(cur))
    for i, value in enumerate(cur):
        left = cur[i - n] if i >= n else 0
        up = prev[i]
        up_left = prev[i - n] if i >= n else 0
        if kind == 1:
            predicted = left
        elif kind == 2:
            predicted = up
        elif kind == 3:
            predicted = (left + up) >> 1
        elif kind == 4:
            predicted = _paeth(left, up, up_left)
        elif kind == 5:
            predicted = left >> 1
        else:
            predicted = _paeth(left, 0, 0)
        out[i] = (value - predicted) & 0xFF
    return bytes(out)


def _row_cost(row: bytes) -> int:
    return sum(v if v < 128 else 256 - v for v in row)


def _chunk(tag: bytes, payload: bytes) -> bytes:
    body = tag + payload
    return (len(payload).to_bytes(4, "big") + body
            + crc32(body).to_bytes(4, "big"))


def encode_png(data, width: int, height: int, components: int, stride: int = 0,
               compression_level: int = DEFAULT_COMPRESSION_LEVEL,
               force_filter: int = -1, flip: bool = False) -> bytes:
    """Encode 8-bit pixels, rows ``stride`` bytes apart, as a PNG file image.

    ``force_filter`` of 0..4 uses that filter for every row; any other value
    picks, for each row, the filter whose output has the smallest magnitude.
    """
    if components not in _COLOR_TYPES:
        raise ValueError("components must be 1, 2, 3 or 4")
    if width < 0 or height < 0:
        raise ValueError("width and height must be non-negative")
    data = bytes(data)
    row_bytes = width * components
    if stride == 0:
        stride = row_bytes
    if stride < row_bytes:
        raise ValueError("stride is shorter than a row of pixels")
    if height and len(data) < stride * (height - 1) + row_bytes:
        raise ValueError("pixel data is too short for the given dimensions")
    if not 0 <= force_filter <= 4:
        force_filter = -1

    rows = []
    for y in range(height):
        source = height - 1 - y if flip else y
        start = source * stride
        rows.append(data[start:start + row_bytes])

    filtered = bytearray()
    zero_row = bytes(row_bytes)
    for y, row in enumerate(rows):
        prev = rows[y - 1] if y else zero_row
        first = y == 0
        if force_filter >= 0:
            best_type = force_filter
            best_line = _filter_row(row, prev, components, force_filter, first)
        else:
            best_type, best_line, best_cost = 0, b"", None
            for filter_type in range(5):
                line = _filter_row(row, prev, components, filter_type, first)
                cost = _row_cost(line)
                if best_cost is None or cost < best_cost:
                    best_type, best_line, best_cost = filter_type, line, cost
        filtered.append(best_type)
        filtered += best_line

    compressed = zlib_compress(bytes(filtered), compression_level)
    header = (width.to_bytes(4, "big") + height.to_bytes(4, "big")
              + bytes((8, _COLOR_TYPES[components], 0, 0, 0)))
    return (PNG_SIGNATURE + _chunk(b"IHDR", header)
            + _chunk(b"IDAT", compressed) + _chunk(b"IEND", b""))


def write_png(path: Union[str, os.PathLike], data, width: int, height: int,
              components: int, stride: int = 0) -> None:
    """Encode the pixels as PNG and write them to ``path``."""
    encoded = encode_png(data, width, height, components, stride)
    with open(path, "wb") as handle:
        handle.write(encoded)