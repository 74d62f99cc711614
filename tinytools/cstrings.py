"""C library style string helpers: atoi and strlen."""

from __future__ import annotations

import sys

_SPACE = " \t\n\r"


def c_atoi(text: str) -> int:
    """Parse a leading optionally signed decimal integer, wrapping to 32 bits."""
    pos = 0
    while pos < len(text) and text[pos] in _SPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        sign = -1 if text[pos] == "-" else 1
        pos += 1
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        value = (value * 10 + ord(text[pos]) - 48) & 0xFFFFFFFF
        pos += 1
    value = (value * sign) & 0xFFFFFFFF
    return value - (1 << 32) if value >> 31 else value


def c_strlen(data: bytes) -> int:
    """Return the number of bytes before the first NUL."""
    end = bytes(data).find(b"\0")
    return len(data) if end < 0 else end


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    for arg in args:
        print(c_atoi(arg))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())