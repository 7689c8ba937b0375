"""Small zlib encoder using fixed Huffman codes, plus CRC-32 and Adler-32 checksums."""

from __future__ import annotations

_UINT32_MASK = 0xFFFFFFFF
_HASH_SIZE = 16384
_WINDOW = 32768
_MAX_MATCH = 258
_MAX_STORED_BLOCK = 32767
_ADLER_MOD = 65521
_ADLER_BLOCK = 5552

_LENGTH_BASE = (3, 4, 5, 6, 7, 8, 9, 10, 11, 13, 15, 17, 19, 23, 27,
                31, 35, 43, 51, 59, 67, 83, 99, 115, 131, 163, 195, 227, 258, 259)
_LENGTH_EXTRA = (0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 2, 2, 2, 2,
                 3, 3, 3, 3, 4, 4, 4, 4, 5, 5, 5, 5, 0)
_DIST_BASE = (1, 2, 3, 4, 5, 7, 9, 13, 17, 25, 33, 49, 65, 97, 129, 193,
              257, 385, 513, 769, 1025, 1537, 2049, 3073, 4097, 6145,
              8193, 12289, 16385, 24577, 32768)
_DIST_EXTRA = (0, 0, 0, 0, 1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 6, 6,
               7, 7, 8, 8, 9, 9, 10, 10, 11, 11, 12, 12, 13, 13)


def _make_crc_table() -> tuple[int, ...]:
    table = []
    for n in range(256):
        c = n
        for _ in range(8):
            c = (c >> 1) ^ 0xEDB88320 if c & 1 else c >> 1
        table.append(c)
    return tuple(table)


_CRC_TABLE = _make_crc_table()


def crc32(data) -> int:
    """Return the CRC-32 (as used by PNG chunks) of ``data``."""
    crc = _UINT32_MASK
    for byte in bytes(data):
        crc = (crc >> 8) ^ _CRC_TABLE[(byte ^ crc) & 0xFF]
    return crc ^ _UINT32_MASK


def adler32(data) -> int:
    """Return the Adler-32 checksum of ``data``."""
    data = bytes(data)
    s1, s2 = 1, 0
    start = 0
    size = len(data) % _ADLER_BLOCK
    while start < len(data):
        for byte in data[start:start + size]:
            s1 += byte
            s2 += s1
        s1 %= _ADLER_MOD
        s2 %= _ADLER_MOD
        start += size
        size = _ADLER_BLOCK
    return (s2 << 16) | s1


def _bit_reverse(code: int, bits: int) -> int:
    result = 0
    for _ in range(bits):
        result = (result << 1) | (code & 1)
        code >>= 1
    return result


def _hash3(data: bytes, pos: int) -> int:
    h = data[pos] + (data[pos + 1] << 8) + (data[pos + 2] << 16)
    h = (h ^ (h << 3)) & _UINT32_MASK
    h = (h + (h >> 5)) & _UINT32_MASK
    h = (h ^ (h << 4)) & _UINT32_MASK
    h = (h + (h >> 17)) & _UINT32_MASK
    h = (h ^ (h << 25)) & _UINT32_MASK
    h = (h + (h >> 6)) & _UINT32_MASK
    return h & (_HASH_SIZE - 1)


def _match_length(data: bytes, a: int, b: int, limit: int) -> int:
    limit = min(limit, _MAX_MATCH)
    n = 0
    while n < limit and data[a + n] == data[b + n]:
        n += 1
    return n


class _BitWriter:
    """Least-significant-bit-first writer appending to a byte array."""

    def __init__(self, out: bytearray):
        self.out = out
        self._buffer = 0
        self._count = 0

    def add(self, code: int, bits: int) -> None:
        self._buffer |= code << self._count
        self._count += bits
        while self._count >= 8:
            self.out.append(self._buffer & 0xFF)
            self._buffer >>= 8
            self._count -= 8

    def huffman(self, code: int, bits: int) -> None:
        self.add(_bit_reverse(code, bits), bits)

    def symbol(self, n: int) -> None:
        """Emit a literal/length symbol with the fixed Huffman code."""
        if n <= 143:
            self.huffman(0x30 + n, 8)
        elif n <= 255:
            self.huffman(0x190 + n - 144, 9)
        elif n <= 279:
            self.huffman(n - 256, 7)
        else:
            self.huffman(0xC0 + n - 280, 8)

    def pad(self) -> None:
        while self._count:
            self.add(0, 1)


def _stored_blocks(data: bytes) -> bytearray:
    out = bytearray()
    start = 0
    while start < len(data):
        block_len = min(len(data) - start, _MAX_STORED_BLOCK)
        out.append(1 if len(data) - start == block_len else 0)
        out += bytes((block_len & 0xFF, (block_len >> 8) & 0xFF,
                      ~block_len & 0xFF, (~block_len >> 8) & 0xFF))
        out += data[start:start + block_len]
        start += block_len
    return out


def zlib_compress(data, quality: int = 8) -> bytes:
    """Compress ``data`` into a zlib stream; ``quality`` bounds hash-chain length."""
    data = bytes(data)
    n = len(data)
    quality = max(quality, 5)

    out = bytearray((0x78, 0x5E))
    bits = _BitWriter(out)
    bits.add(1, 1)  # final block
    bits.add(1, 2)  # fixed Huffman

    table: list[list[int]] = [[] for _ in range(_HASH_SIZE)]
    i = 0
    while i < n - 3:
        h = _hash3(data, i)
        best = 3
        best_pos = None
        for pos in table[h]:
            if pos > i - _WINDOW:
                d = _match_length(data, pos, i, n - i)
                if d >= best:
                    best = d
                    best_pos = pos
        if len(table[h]) == 2 * quality:
            del table[h][:quality]
        table[h].append(i)

        if best_pos is not None:
            # Lazy matching: prefer a literal if the next byte starts a longer match.
            for pos in table[_hash3(data, i + 1)]:
                if pos > i - (_WINDOW - 1):
                    if _match_length(data, pos, i + 1, n - i - 1) > best:
                        best_pos = None
                        break

        if best_pos is not None:
            distance = i - best_pos
            j = 0
            while best > _LENGTH_BASE[j + 1] - 1:
                j += 1
            bits.symbol(j + 257)
            if _LENGTH_EXTRA[j]:
                bits.add(best - _LENGTH_BASE[j], _LENGTH_EXTRA[j])
            j = 0
            while distance > _DIST_BASE[j + 1] - 1:
                j += 1
            bits.add(_bit_reverse(j, 5), 5)
            if _DIST_EXTRA[j]:
                bits.add(distance - _DIST_BASE[j], _DIST_EXTRA[j])
            i += best
        else:
            bits.symbol(data[i])
            i += 1

    for byte in data[i:]:
        bits.symbol(byte)
    bits.symbol(256)
    bits.pad()

    if len(out) > n + 2 + ((n + 32766) // 32767) * 5:
        del out[2:]
        out += _stored_blocks(data)

    checksum = adler32(data)
    out += checksum.to_bytes(4, "big")
    return bytes(out)