"""Small text filters: ROT13, run-length listing and bit strings."""

from __future__ import annotations


def rot13(data: bytes) -> bytes:
    """Rotate ASCII letters by 13 places; other bytes pass through."""
    out = bytearray()
    for c in data:
        upper = c & ~32 & 0xFF
        if 65 <= upper <= 90:
            out.append(c - upper + 65 + (upper - 65 + 13) % 26)
        else:
            out.append(c)
    return bytes(out)


def run_lengths(text: str) -> list[tuple[str, int]]:
    """Return (character, run length) pairs for consecutive runs."""
    runs: list[tuple[str, int]] = []
    for ch in text:
        if runs and runs[-1][0] == ch:
            runs[-1] = (ch, runs[-1][1] + 1)
        else:
            runs.append((ch, 1))
    return runs


def format_run_lengths(text: str) -> str:
    """Format the runs of ``text`` as a list literal; empty text gives ''."""
    if not text:
        return ""
    return "[" + ", ".join(f'("{c}", {n})' for c, n in run_lengths(text)) + "]"


def byte_bits(value: int) -> str:
    """Return the low eight bits of ``value`` as '0'/'1', most significant first."""
    return format(value & 0xFF, "08b")