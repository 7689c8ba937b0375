import random
import zlib

import pytest

from fui.deflate import adler32, crc32, zlib_compress


@pytest.mark.parametrize("payload", [
    b"a",
    b"abcd",
    b"hello, hello, hello, hello world",
    b"\x00" * 1000,
    bytes(range(256)) * 8,
    b"abcabcabcabcabcxyzxyzabcabc" * 50,
])
def test_round_trip_through_zlib(payload):
    assert zlib.decompress(zlib_compress(payload)) == payload


def test_header_bytes():
    out = zlib_compress(b"some data to compress")
    assert out[:2] == b"\x78\x5e"


def test_trailer_is_adler32_big_endian():
    payload = b"The quick brown fox jumps over the lazy dog" * 3
    out = zlib_compress(payload)
    assert out[-4:] == zlib.adler32(payload).to_bytes(4, "big")


def test_empty_input_has_only_header_and_checksum():
    assert zlib_compress(b"") == b"\x78\x5e\x00\x00\x00\x01"


def test_repetitive_data_shrinks():
    payload = b"0123456789" * 2000
    out = zlib_compress(payload)
    assert len(out) < len(payload) // 10
    assert zlib.decompress(out) == payload


def test_random_data_falls_back_to_stored_blocks():
    payload = random.Random(1234).randbytes(70000)
    out = zlib_compress(payload)
    assert zlib.decompress(out) == payload
    # Stored form: header, 3 blocks with 5-byte headers, data, checksum.
    assert len(out) == 2 + 3 * 5 + len(payload) + 4
    assert out[2] == 0


def test_low_quality_is_clamped():
    payload = b"abracadabra " * 300
    assert zlib_compress(payload, 0) == zlib_compress(payload, 5)


def test_higher_quality_still_round_trips():
    payload = random.Random(7).choices(b"abcde", k=5000)
    payload = bytes(payload)
    assert zlib.decompress(zlib_compress(payload, 32)) == payload


def test_accepts_bytearray():
    payload = bytearray(b"bytearray input " * 20)
    assert zlib.decompress(zlib_compress(payload)) == bytes(payload)


def test_crc32_check_value():
    assert crc32(b"123456789") == 0xCBF43926


@pytest.mark.parametrize("payload", [b"", b"a", b"IEND", bytes(range(256)) * 3])
def test_crc32_matches_zlib(payload):
    assert crc32(payload) == zlib.crc32(payload)


def test_adler32_known_value():
    assert adler32(b"Wikipedia") == 0x11E60398


@pytest.mark.parametrize("size", [0, 1, 5551, 5552, 5553, 20000])
def test_adler32_matches_zlib(size):
    payload = random.Random(size).randbytes(size)
    assert adler32(payload) == zlib.adler32(payload)


def test_adler32_of_high_bytes_matches_zlib():
    payload = b"\xff" * 12000
    assert adler32(payload) == zlib.adler32(payload)