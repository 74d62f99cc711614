"""Assorted ways of saying hello."""

from __future__ import annotations

import struct

_OWL_PAIRS = ["|.", "=I", "^*", ".:", "}[", ">*", "|x", "#=", "];", "/.", "u<", "vv", "oo", "$@"]


def hello_world() -> str:
    """Return the classic greeting line."""
    return "Hello%cWorld!%c" % (32, 10)


def hello_spiral() -> str:
    """Build the greeting from little-endian words derived from the number one."""
    a = 1
    b = a + a
    c = b + b
    d = c * c - b
    e = d - a - b
    f = d * d + e
    g = c + c
    h = a * f - g
    i = f * f - h
    j = e * d + a + e
    k = e * d - b - g
    l = g * e + c
    m = h - a - b
    n = a * m - b - e
    o = m * m - n
    p = f * h - b - k
    words = [i * i + k * k - l, o * o - n * m - b - g - l, p * p - j * j + k - d, h - j]
    raw = b"".join(struct.pack("<I", w & 0xFFFFFFFF) for w in words)
    return raw.split(b"\0")[0].decode("ascii")


def owl_hello() -> str:
    """Spell the greeting from byte products of character pairs."""
    out = []
    for left, right in _OWL_PAIRS:
        value = ord(left) * ord(right) & 0xFF
        if not value:
            break
        out.append(chr(value))
    return "".join(out)


def _pad(n: int, j: int) -> str:
    return "~-"[((n ^ j) & 1) ^ int(j < n)]


def salve_mondo_lines(source: str = "Salve, Mondo!", target: str = "Hello, World!", pad: int = 11) -> list[str]:
    """Return lines of ``~-`` chains that turn each ``source`` character into ``target``'s."""
    lines = []
    for s_ch, t_ch in zip(source, target):
        a = ord(s_ch) - ord(t_ch)
        parts = []
        j = 0
        n = pad - abs(a) if pad else 0
        if pad and (n & 1) ^ int(a > 0):
            while j < n * 2:
                parts.append(_pad(n, j))
                j += 1
        parts.append("~-" * a if a > 0 else "-~" * -a)
        if pad:
            while j < n * 2:
                parts.append(_pad(n, j))
                j += 1
        parts.append(f"'{s_ch}',")
        lines.append("".join(parts))
    return lines


def hello3_encode(text: str = "Hello, World!\n") -> str:
    """Encode ASCII text as a chain of ``-`` and ``--`` operators."""
    if any(ord(ch) > 127 for ch in text):
        raise ValueError("only 7-bit characters can be encoded")
    out = []
    for ch in reversed(text):
        for bit in range(7):
            out.append("-- " if ord(ch) >> bit & 1 else "- ")
    out.append("- --\n")
    return "".join(out)


def hello3_decode(code: str) -> str:
    """Evaluate an operator chain made by :func:`hello3_encode`."""
    value = 0
    out = []
    for token in reversed(code.split()):
        if token == "--":
            value = value * 2 + 1
        elif token == "-":
            value *= 2
        else:
            raise ValueError(f"unexpected token {token!r}")
        if value >> 8:
            out.append(chr(value & 0xFF))
            value = 2
    return "".join(out)