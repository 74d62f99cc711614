"""Greatest common divisor of command-line numbers."""

from __future__ import annotations

import sys

from tinytools.cstrings import c_atoi


def _trunc_mod(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return a - b * q


def gcd_of(numbers) -> int:
    """Fold the numbers from the end; a zero restarts the fold."""
    result = 0
    for b in reversed(list(numbers)):
        if b == 0:
            result = 0
            continue
        a = result
        while b:
            a, b = b, _trunc_mod(a, b)
        result = a
    return result


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    print(gcd_of(c_atoi(a) for a in args))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())