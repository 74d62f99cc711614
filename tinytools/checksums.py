"""CRC-64 (XZ) and CRC-32 checksums."""

from __future__ import annotations

import argparse
import sys

_POLY64 = 0xC96C5795D7870F42
_POLY32 = 0xEDB88320
_MASK64 = 0xFFFFFFFFFFFFFFFF


def crc64(data: bytes) -> int:
    """Return the CRC-64/XZ checksum of ``data``."""
    crc = _MASK64
    for byte in data:
        crc ^= byte
        for _ in range(8):
            crc = (crc >> 1) ^ (_POLY64 if crc & 1 else 0)
    return crc ^ _MASK64


def crc32(data: bytes, crc: int = 0) -> int:
    """Continue the standard CRC-32 ``crc`` over ``data``."""
    crc = ~crc & 0xFFFFFFFF
    for byte in data:
        crc ^= byte
        for _ in range(8):
            crc = (crc >> 1) ^ (_POLY32 if crc & 1 else 0)
    return ~crc & 0xFFFFFFFF


def main(argv=None) -> int:
    """Print the CRC-64 (or, with --crc32, the CRC-32) of standard input."""
    parser = argparse.ArgumentParser(prog="checksums", description="Checksum standard input.")
    parser.add_argument("--crc32", action="store_true", help="print CRC-32 instead of CRC-64")
    args = parser.parse_args(argv)
    data = sys.stdin.buffer.read()
    if args.crc32:
        print(f"check=0x{crc32(data):08x}")
    else:
        print(f"{crc64(data):016x}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())