"""Convert tabs to spaces."""

from __future__ import annotations

import sys

from tinytools.cstrings import c_atoi


def expand_tabs(text: str, tabsize: int = 8) -> str:
    """Replace tabs by spaces up to the next stop; a size below 1 keeps tabs."""
    out = []
    column = 0
    for ch in text:
        if ch == "\t" and tabsize > 0:
            width = tabsize - column % tabsize
            out.append(" " * width)
            column += width
        else:
            out.append(ch)
            column = 0 if ch in "\n\r" else column + 1
    return "".join(out)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    tabsize = c_atoi(args[0]) if args else 8
    text = sys.stdin.buffer.read().decode("latin-1")
    sys.stdout.buffer.write(expand_tabs(text, tabsize).encode("latin-1"))
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())