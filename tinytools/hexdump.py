"""Canonical hex plus ASCII dump."""

from __future__ import annotations

import sys


def _text_column(chars: list[str]) -> str:
    count = len(chars)
    return ("|" + "".join(chars)).rjust(51 - 3 * count - count // 9) + "|\n"


def hexdump(data: bytes) -> str:
    """Return a dump of ``data``: offset, 16 hex bytes and their printable text."""
    out = []
    chars: list[str] = []
    for offset, value in enumerate(data):
        if offset % 16 == 0:
            if offset:
                out.append(_text_column(chars))
                chars = []
            out.append(f"{offset:08x} ")
        out.append(f" {value:02x} " if offset % 8 == 0 else f"{value:02x} ")
        chars.append(chr(value) if 32 <= value <= 126 else ".")
    if data:
        out.append(_text_column(chars))
    out.append(f"{len(data):08x}\n")
    return "".join(out)


def main(argv=None) -> int:
    sys.stdout.write(hexdump(sys.stdin.buffer.read()))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())