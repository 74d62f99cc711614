"""A compact MD5 implementation."""

from __future__ import annotations

import argparse
import math
import struct
import sys
from pathlib import Path

_K = [int(abs(math.sin(i + 1)) * 2**32) & 0xFFFFFFFF for i in range(64)]
_SHIFTS = [7, 12, 17, 22] * 4 + [5, 9, 14, 20] * 4 + [4, 11, 16, 23] * 4 + [6, 10, 15, 21] * 4
_MASK = 0xFFFFFFFF


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def md5_digest(data: bytes) -> bytes:
    """Return the 16-byte MD5 digest of ``data``."""
    message = bytes(data) + b"\x80"
    message += b"\0" * ((56 - len(message)) % 64)
    message += struct.pack("<Q", (len(data) * 8) & 0xFFFFFFFFFFFFFFFF)
    h = [0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476]
    for off in range(0, len(message), 64):
        words = struct.unpack("<16I", message[off:off + 64])
        a, b, c, d = h
        for i in range(64):
            rnd = i // 16
            if rnd == 0:
                f, g = (b & c) | (~b & d), i
            elif rnd == 1:
                f, g = (d & b) | (~d & c), (5 * i + 1) % 16
            elif rnd == 2:
                f, g = b ^ c ^ d, (3 * i + 5) % 16
            else:
                f, g = c ^ (b | (~d & _MASK)), (7 * i) % 16
            f = (f + a + _K[i] + words[g]) & _MASK
            a, d, c = d, c, b
            b = (b + _rotl(f, _SHIFTS[i])) & _MASK
        h = [(x + y) & _MASK for x, y in zip(h, (a, b, c, d))]
    return struct.pack("<4I", *h)


def md5_hex(data: bytes) -> str:
    """Return the MD5 digest of ``data`` as lower-case hex."""
    return md5_digest(data).hex()


def main(argv=None) -> int:
    """Print the MD5 of each named file, or of standard input."""
    parser = argparse.ArgumentParser(prog="md5", description="Print MD5 digests.")
    parser.add_argument("files", nargs="*", type=Path)
    args = parser.parse_args(argv)
    if not args.files:
        print(md5_hex(sys.stdin.buffer.read()))
        return 0
    status = 0
    for path in args.files:
        try:
            digest = md5_hex(path.read_bytes())
        except OSError as exc:
            print(f"md5: {path}: {exc.strerror}", file=sys.stderr)
            status = 1
            continue
        print(f"{digest}  {path}" if len(args.files) > 1 else digest)
    return status


if __name__ == "__main__":
    raise SystemExit(main())