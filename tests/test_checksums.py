import zlib

import pytest

from tinytools.checksums import crc32, crc64


def test_crc64_check_value():
    assert crc64(b"123456789") == 0x995DC9BBDF1939FA


def test_crc64_empty():
    assert crc64(b"") == 0


def test_crc64_detects_change():
    assert crc64(b"hello") != crc64(b"hellp")


@pytest.mark.parametrize("data", [b"", b"123456789", bytes(range(256)), b"a" * 1000])
def test_crc32_matches_zlib(data):
    assert crc32(data) == zlib.crc32(data)


def test_crc32_can_be_chained():
    assert crc32(b"56789", crc32(b"1234")) == crc32(b"123456789")