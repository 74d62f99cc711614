import hashlib

import pytest

from tinytools.md5 import md5_digest, md5_hex


def test_empty():
    assert md5_hex(b"") == "d41d8cd98f00b204e9800998ecf8427e"


@pytest.mark.parametrize("size", [1, 55, 56, 57, 63, 64, 65, 119, 120, 1000])
def test_matches_hashlib(size):
    data = bytes((i * 37) & 0xFF for i in range(size))
    assert md5_digest(data) == hashlib.md5(data).digest()


def test_hex_is_digest_hex():
    data = b"The quick brown fox jumps over the lazy dog"
    assert md5_hex(data) == md5_digest(data).hex()
    assert len(md5_digest(data)) == 16