"""Baseline JPEG encoder with optional 4:2:0 chroma subsampling."""

from __future__ import annotations

from typing import Sequence

_ZIGZAG = (
    0, 1, 5, 6, 14, 15, 27, 28, 2, 4, 7, 13, 16, 26, 29, 42,
    3, 8, 12, 17, 25, 30, 41, 43, 9, 11, 18, 24, 31, 40, 44, 53,
    10, 19, 23, 32, 39, 45, 52, 54, 20, 22, 33, 38, 46, 51, 55, 60,
    21, 34, 37, 47, 50, 56, 59, 61, 35, 36, 48, 49, 57, 58, 62, 63)

_DC_LUMINANCE_COUNTS = (0, 0, 1, 5, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0)
_DC_LUMINANCE_VALUES = (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11)
_AC_LUMINANCE_COUNTS = (0, 0, 2, 1, 3, 3, 2, 4, 3, 5, 5, 4, 4, 0, 0, 1, 0x7D)
_AC_LUMINANCE_VALUES = (
    0x01, 0x02, 0x03, 0x00, 0x04, 0x11, 0x05, 0x12, 0x21, 0x31, 0x41, 0x06,
    0x13, 0x51, 0x61, 0x07, 0x22, 0x71, 0x14, 0x32, 0x81, 0x91, 0xA1, 0x08,
    0x23, 0x42, 0xB1, 0xC1, 0x15, 0x52, 0xD1, 0xF0, 0x24, 0x33, 0x62, 0x72,
    0x82, 0x09, 0x0A, 0x16, 0x17, 0x18, 0x19, 0x1A, 0x25, 0x26, 0x27, 0x28,
    0x29, 0x2A, 0x34, 0x35, 0x36, 0x37, 0x38, 0x39, 0x3A, 0x43, 0x44, 0x45,
    0x46, 0x47, 0x48, 0x49, 0x4A, 0x53, 0x54, 0x55, 0x56, 0x57, 0x58, 0x59,
    0x5A, 0x63, 0x64, 0x65, 0x66, 0x67, 0x68, 0x69, 0x6A, 0x73, 0x74, 0x75,
    0x76, 0x77, 0x78, 0x79, 0x7A, 0x83, 0x84, 0x85, 0x86, 0x87, 0x88, 0x89,
    0x8A, 0x92, 0x93, 0x94, 0x95, 0x96, 0x97, 0x98, 0x99, 0x9A, 0xA2, 0xA3,
    0xA4, 0xA5, 0xA6, 0xA7, 0xA8, 0xA9, 0xAA, 0xB2, 0xB3, 0xB4, 0xB5, 0xB6,
    0xB7, 0xB8, 0xB9, 0xBA, 0xC2, 0xC3, 0xC4, 0xC5, 0xC6, 0xC7, 0xC8, 0xC9,
    0xCA, 0xD2, 0xD3, 0xD4, 0xD5, 0xD6, 0xD7, 0xD8, 0xD9, 0xDA, 0xE1, 0xE2,
    0xE3, 0xE4, 0xE5, 0xE6, 0xE7, 0xE8, 0xE9, 0xEA, 0xF1, 0xF2, 0xF3, 0xF4,
    0xF5, 0xF6, 0xF7, 0xF8, 0xF9, 0xFA)
_DC_CHROMINANCE_COUNTS = (0, 0, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0)
_DC_CHROMINANCE_VALUES = (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11)
_AC_CHROMINANCE_COUNTS = (0, 0, 2, 1, 2, 4, 4, 3, 4, 7, 5, 4, 4, 0, 1, 2, 0x77)
_AC_CHROMINANCE_VALUES = (
    0x00, 0x01, 0x02, 0x03, 0x11, 0x04, 0x05, 0x21, 0x31, 0x06, 0x12, 0x41,
    0x51, 0x07, 0x61, 0x71, 0x13, 0x22, 0x32, 0x81, 0x08, 0x14, 0x42, 0x91,
    0xA1, 0xB1, 0xC1, 0x09, 0x23, 0x33, 0x52, 0xF0, 0x15, 0x62, 0x72, 0xD1,
    0x0A, 0x16, 0x24, 0x34, 0xE1, 0x25, 0xF1, 0x17, 0x18, 0x19, 0x1A, 0x26,
    0x27, 0x28, 0x29, 0x2A, 0x35, 0x36, 0x37, 0x38, 0x39, 0x3A, 0x43, 0x44,
    0x45, 0x46, 0x47, 0x48, 0x49, 0x4A, 0x53, 0x54, 0x55, 0x56, 0x57, 0x58,
    0x59, 0x5A, 0x63, 0x64, 0x65, 0x66, 0x67, 0x68, 0x69, 0x6A, 0x73, 0x74,
    0x75, 0x76, 0x77, 0x78, 0x79, 0x7A, 0x82, 0x83, 0x84, 0x85, 0x86, 0x87,
    0x88, 0x89, 0x8A, 0x92, 0x93, 0x94, 0x95, 0x96, 0x97, 0x98, 0x99, 0x9A,
    0xA2, 0xA3, 0xA4, 0xA5, 0xA6, 0xA7, 0xA8, 0xA9, 0xAA, 0xB2, 0xB3, 0xB4,
    0xB5, 0xB6, 0xB7, 0xB8, 0xB9, 0xBA, 0xC2, 0xC3, 0xC4, 0xC5, 0xC6, 0xC7,
    0xC8, 0xC9, 0xCA, 0xD2, 0xD3, 0xD4, 0xD5, 0xD6, 0xD7, 0xD8, 0xD9, 0xDA,
    0xE2, 0xE3, 0xE4, 0xE5, 0xE6, 0xE7, 0xE8, 0xE9, 0xEA, 0xF2, 0xF3, 0xF4,
    0xF5, 0xF6, 0xF7, 0xF8, 0xF9, 0xFA)

_Y_QUANT = (
    16, 11, 10, 16, 24, 40, 51, 61, 12, 12, 14, 19, 26, 58, 60, 55,
    14, 13, 16, 24, 40, 57, 69, 56, 14, 17, 22, 29, 51, 87, 80, 62,
    18, 22, 37, 56, 68, 109, 103, 77, 24, 35, 55, 64, 81, 104, 113, 92,
    49, 64, 78, 87, 103, 121, 120, 101, 72, 92, 95, 98, 112, 100, 103, 99)
_UV_QUANT = (
    17, 18, 24, 47, 99, 99, 99, 99, 18, 21, 26, 66, 99, 99, 99, 99,
    24, 26, 56, 99, 99, 99, 99, 99, 47, 66, 99, 99, 99, 99, 99, 99,
    99, 99, 99, 99, 99, 99, 99, 99, 99, 99, 99, 99, 99, 99, 99, 99,
    99, 99, 99, 99, 99, 99, 99, 99, 99, 99, 99, 99, 99, 99, 99, 99)

_AASF = tuple(f * 2.828427125 for f in (
    1.0, 1.387039845, 1.306562965, 1.175875602,
    1.0, 0.785694958, 0.541196100, 0.275899379))

_HEAD0 = bytes((0xFF, 0xD8, 0xFF, 0xE0, 0, 0x10, ord("J"), ord("F"), ord("I"),
                ord("F"), 0, 1, 1, 0, 0, 1, 0, 1, 0, 0, 0xFF, 0xDB, 0, 0x84, 0))
_HEAD2 = bytes((0xFF, 0xDA, 0, 0xC, 3, 1, 0, 2, 0x11, 3, 0x11, 0, 0x3F, 0))
_FILL_BITS = (0x7F, 7)


def _huffman_table(counts: Sequence[int], values: Sequence[int]) -> list[tuple[int, int]]:
    """Build the canonical (code, length) table indexed by symbol value."""
    table = [(0, 0)] * 256
    code = 0
    symbols = iter(values)
    for length in range(1, 17):
        for _ in range(counts[length]):
            table[next(symbols)] = (code, length)
            code += 1
        code <<= 1
    return table


_YDC_HT = _huffman_table(_DC_LUMINANCE_COUNTS, _DC_LUMINANCE_VALUES)
_UVDC_HT = _huffman_table(_DC_CHROMINANCE_COUNTS, _DC_CHROMINANCE_VALUES)
_YAC_HT = _huffman_table(_AC_LUMINANCE_COUNTS, _AC_LUMINANCE_VALUES)
_UVAC_HT = _huffman_table(_AC_CHROMINANCE_COUNTS, _AC_CHROMINANCE_VALUES)


class _BitWriter:
    """Most-significant-bit-first writer with 0xFF byte stuffing."""

    def __init__(self, out: bytearray):
        self.out = out
        self._buffer = 0
        self._count = 0

    def write(self, code_bits: tuple[int, int]) -> None:
        code, length = code_bits
        self._count += length
        self._buffer |= code << (24 - self._count)
        while self._count >= 8:
            c = (self._buffer >> 16) & 0xFF
            self.out.append(c)
            if c == 0xFF:
                self.out.append(0)
            self._buffer = (self._buffer << 8) & 0xFFFFFF
            self._count -= 8


def _dct(buf: list[float], idx: Sequence[int]) -> None:
    d0, d1, d2, d3, d4, d5, d6, d7 = (buf[i] for i in idx)

    tmp0 = d0 + d7
    tmp7 = d0 - d7
    tmp1 = d1 + d6
    tmp6 = d1 - d6
    tmp2 = d2 + d5
    tmp5 = d2 - d5
    tmp3 = d3 + d4
    tmp4 = d3 - d4

    tmp10 = tmp0 + tmp3
    tmp13 = tmp0 - tmp3
    tmp11 = tmp1 + tmp2
    tmp12 = tmp1 - tmp2

    d0 = tmp10 + tmp11
    d4 = tmp10 - tmp11

    z1 = (tmp12 + tmp13) * 0.707106781
    d2 = tmp13 + z1
    d6 = tmp13 - z1

    tmp10 = tmp4 + tmp5
    tmp11 = tmp5 + tmp6
    tmp12 = tmp6 + tmp7

    z5 = (tmp10 - tmp12) * 0.382683433
    z2 = tmp10 * 0.541196100 + z5
    z4 = tmp12 * 1.306562965 + z5
    z3 = tmp11 * 0.707106781

    z11 = tmp7 + z3
    z13 = tmp7 - z3

    results = (d0, z11 + z4, d2, z13 - z2, d4, z13 + z2, d6, z11 - z4)
    for i, value in zip(idx, results):
        buf[i] = value


def _calc_bits(val: int) -> tuple[int, int]:
    length = abs(val).bit_length() or 1
    if val < 0:
        val -= 1
    return val & ((1 << length) - 1), length


def _process_du(writer: _BitWriter, cdu: list[float], offset: int, stride: int,
                fdtbl: Sequence[float], dc: int,
                htdc: Sequence[tuple[int, int]], htac: Sequence[tuple[int, int]]) -> int:
    eob = htac[0x00]
    sixteen_zeroes = htac[0xF0]

    for row in range(8):
        base = offset + row * stride
        _dct(cdu, range(base, base + 8))
    for col in range(8):
        base = offset + col
        _dct(cdu, range(base, base + stride * 8, stride))

    du = [0] * 64
    j = 0
    for y in range(8):
        for x in range(8):
            v = cdu[offset + y * stride + x] * fdtbl[j]
            du[_ZIGZAG[j]] = int(v - 0.5 if v < 0 else v + 0.5)
            j += 1

    diff = du[0] - dc
    if diff == 0:
        writer.write(htdc[0])
    else:
        bits = _calc_bits(diff)
        writer.write(htdc[bits[1]])
        writer.write(bits)

    end0pos = 63
    while end0pos > 0 and du[end0pos] == 0:
        end0pos -= 1
    if end0pos == 0:
        writer.write(eob)
        return du[0]

    i = 1
    while i <= end0pos:
        start = i
        while du[i] == 0 and i <= end0pos:
            i += 1
        zeroes = i - start
        if zeroes >= 16:
            for _ in range(zeroes >> 4):
                writer.write(sixteen_zeroes)
            zeroes &= 15
        bits = _calc_bits(du[i])
        writer.write(htac[(zeroes << 4) + bits[1]])
        writer.write(bits)
        i += 1
    if end0pos != 63:
        writer.write(eob)
    return du[0]


def _quant_tables(quality: int) -> tuple[bytes, bytes]:
    y_table = bytearray(64)
    uv_table = bytearray(64)
    for i in range(64):
        yti = (_Y_QUANT[i] * quality + 50) // 100
        y_table[_ZIGZAG[i]] = min(max(yti, 1), 255)
        uvti = (_UV_QUANT[i] * quality + 50) // 100
        uv_table[_ZIGZAG[i]] = min(max(uvti, 1), 255)
    return bytes(y_table), bytes(uv_table)


def _divisors(table: bytes) -> list[float]:
    return [1 / (table[_ZIGZAG[row * 8 + col]] * _AASF[row] * _AASF[col])
            for row in range(8) for col in range(8)]


def encode_jpeg(data, width: int, height: int, components: int,
                quality: int = 90, flip: bool = False) -> bytes:
    """Encode 8-bit pixels as a baseline JPEG file image.

    Alpha channels are ignored. ``quality`` runs from 1 to 100 (0 means 90);
    at 90 and below the chroma channels are subsampled 2x2.
    """
    if data is None or not width or not height:
        raise ValueError("data must be given and width and height be non-zero")
    if not 1 <= components <= 4:
        raise ValueError("components must be 1, 2, 3 or 4")
    if width < 0 or height < 0 or width > 0xFFFF or height > 0xFFFF:
        raise ValueError("width and height must lie between 1 and 65535")
    data = bytes(data)
    if len(data) < width * height * components:
        raise ValueError("pixel data is too short for the given dimensions")

    quality = quality if quality else 90
    subsample = quality <= 90
    quality = min(max(quality, 1), 100)
    quality = 5000 // quality if quality < 50 else 200 - quality * 2

    y_table, uv_table = _quant_tables(quality)
    fdtbl_y = _divisors(y_table)
    fdtbl_uv = _divisors(uv_table)

    out = bytearray(_HEAD0)
    out += y_table
    out.append(1)
    out += uv_table
    out += bytes((0xFF, 0xC0, 0, 0x11, 8, height >> 8, height & 0xFF,
                  width >> 8, width & 0xFF, 3, 1, 0x22 if subsample else 0x11,
                  0, 2, 0x11, 1, 3, 0x11, 1, 0xFF, 0xC4, 0x01, 0xA2, 0))
    out += bytes(_DC_LUMINANCE_COUNTS[1:]) + bytes(_DC_LUMINANCE_VALUES)
    out.append(0x10)
    out += bytes(_AC_LUMINANCE_COUNTS[1:]) + bytes(_AC_LUMINANCE_VALUES)
    out.append(1)
    out += bytes(_DC_CHROMINANCE_COUNTS[1:]) + bytes(_DC_CHROMINANCE_VALUES)
    out.append(0x11)
    out += bytes(_AC_CHROMINANCE_COUNTS[1:]) + bytes(_AC_CHROMINANCE_VALUES)
    out += _HEAD2

    writer = _BitWriter(out)
    ofs_g = 1 if components > 2 else 0
    ofs_b = 2 if components > 2 else 0

    def block(x0: int, y0: int, size: int) -> tuple[list[float], list[float], list[float]]:
        ys, us, vs = [], [], []
        for row in range(y0, y0 + size):
            clamped = row if row < height else height - 1
            source = height - 1 - clamped if flip else clamped
            base = source * width * components
            for col in range(x0, x0 + size):
                p = base + (col if col < width else width - 1) * components
                r, g, b = data[p], data[p + ofs_g], data[p + ofs_b]
                ys.append(0.29900 * r + 0.58700 * g + 0.11400 * b - 128)
                us.append(-0.16874 * r - 0.33126 * g + 0.50000 * b)
                vs.append(0.50000 * r - 0.41869 * g - 0.08131 * b)
        return ys, us, vs

    dc_y = dc_u = dc_v = 0
    if subsample:
        for y in range(0, height, 16):
            for x in range(0, width, 16):
                ys, us, vs = block(x, y, 16)
                for offset in (0, 8, 128, 136):
                    dc_y = _process_du(writer, ys, offset, 16, fdtbl_y, dc_y,
                                       _YDC_HT, _YAC_HT)
                sub_u, sub_v = [], []
                for yy in range(8):
                    for xx in range(8):
                        j = yy * 32 + xx * 2
                        sub_u.append((us[j] + us[j + 1] + us[j + 16] + us[j + 17]) * 0.25)
                        sub_v.append((vs[j] + vs[j + 1] + vs[j + 16] + vs[j + 17]) * 0.25)
                dc_u = _process_du(writer, sub_u, 0, 8, fdtbl_uv, dc_u,
                                   _UVDC_HT, _UVAC_HT)
                dc_v = _process_du(writer, sub_v, 0, 8, fdtbl_uv, dc_v,
                                   _UVDC_HT, _UVAC_HT)
    else:
        for y in range(0, height, 8):
            for x in range(0, width, 8):
                ys, us, vs = block(x, y, 8)
                dc_y = _process_du(writer, ys, 0, 8, fdtbl_y, dc_y, _YDC_HT, _YAC_HT)
                dc_u = _process_du(writer, us, 0, 8, fdtbl_uv, dc_u, _UVDC_HT, _UVAC_HT)
                dc_v = _process_du(writer, vs, 0, 8, fdtbl_uv, dc_v, _UVDC_HT, _UVAC_HT)

    writer.write(_FILL_BITS)
    out += b"\xff\xd9"
    return bytes(out)