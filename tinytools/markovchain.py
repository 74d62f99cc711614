"""Character-level Markov chain text generator."""

from __future__ import annotations

import random
import sys
from collections import Counter, defaultdict

MAX_COUNT = 1 << 20
MAX_ORDER = 128


def _clean(text: str) -> str:
    out: list[str] = []
    last = ""
    i = 0
    while i < len(text):
        ch = text[i]
        i += 1
        if ch == "_":
            continue
        if ch == "<":
            end = text.find(">", i)
            i = len(text) if end < 0 else end + 1
            ch = " "
        if ch in " \n\r\t":
            ch = " "
            if last == " ":
                continue
        out.append(ch)
        last = ch
    return "".join(out)


def generate(text: str, count: int, order: int, seed: int) -> str:
    """Generate ``count`` characters following the statistics of ``text``."""
    if count < 0 or count >= MAX_COUNT:
        raise ValueError("count out of range")
    if not 1 <= order <= MAX_ORDER:
        raise ValueError("order out of range")
    cleaned = _clean(text)
    if len(cleaned) < order or not cleaned:
        raise ValueError("text shorter than order")
    ring = cleaned + cleaned[:order]
    table: dict[str, Counter] = defaultdict(Counter)
    for i in range(len(cleaned)):
        table[ring[i:i + order]][ring[i + order]] += 1
    rng = random.Random(seed)
    start = rng.randrange(len(cleaned))
    context = ring[start:start + order]
    out = []
    for _ in range(count):
        choices = table[context]
        ch = rng.choices(list(choices), weights=list(choices.values()))[0]
        out.append(ch)
        context = context[1:] + ch
    return "".join(out)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        print("usage: markovchain FILE COUNT ORDER SEED", file=sys.stderr)
        return 1
    try:
        with open(args[0], "rb") as fh:
            text = fh.read().decode("latin-1")
        result = generate(text, int(args[1]), int(args[2]), int(args[3]))
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    sys.stdout.buffer.write(result.encode("latin-1") + b"\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())