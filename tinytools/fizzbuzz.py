"""FizzBuzz."""

from __future__ import annotations

import argparse


def fizzbuzz(limit: int = 100) -> list[str]:
    """Return the FizzBuzz lines for 1 to ``limit``."""
    lines = []
    for i in range(1, limit + 1):
        word = ("Fizz" if i % 3 == 0 else "") + ("Buzz" if i % 5 == 0 else "")
        lines.append(word or str(i))
    return lines


def main(argv=None) -> int:
    """Print FizzBuzz up to the given limit (100 by default)."""
    parser = argparse.ArgumentParser(prog="fizzbuzz", description="Print FizzBuzz.")
    parser.add_argument("limit", nargs="?", type=int, default=100)
    args = parser.parse_args(argv)
    lines = fizzbuzz(args.limit)
    if lines:
        print("\n".join(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())