"""Shuffle the inner letters of every word while keeping its first and last letter."""

from __future__ import annotations

import random
import sys

MAX_WORD = 64


def _is_word_byte(value: int) -> bool:
    return (value | 32) - 97 in range(26) or value >> 7 == 1


def shuffle_word(word: bytes, rng: random.Random) -> bytes:
    """Return ``word`` with all but its first and last byte shuffled."""
    if len(word) <= 3:
        return bytes(word)
    middle = list(word[1:-1])
    rng.shuffle(middle)
    return bytes([word[0], *middle, word[-1]])


def _tokens(data: bytes):
    word = bytearray()
    for value in data:
        if _is_word_byte(value) and len(word) < MAX_WORD:
            word.append(value)
            continue
        if word:
            yield True, bytes(word)
            word.clear()
        if _is_word_byte(value):
            word.append(value)
        else:
            yield False, bytes([value])
    if word:
        yield True, bytes(word)


def mix_stream(data: bytes, rng: random.Random) -> bytes:
    """Shuffle every word in ``data``; other bytes pass through unchanged."""
    return b"".join(
        shuffle_word(chunk, rng) if is_word else chunk for is_word, chunk in _tokens(data)
    )


def main(argv=None) -> int:
    data = sys.stdin.buffer.read()
    sys.stdout.buffer.write(mix_stream(data, random.Random()))
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())