"""Text and SVG pictures: a moon phase, hearts and hattifatteners."""

from __future__ import annotations

import math
import random
import time

_SYNODIC_MONTH = 2551443
_NEW_MOON_EPOCH = 592531
_MOON_RADIUS = 44


def moon(timestamp=None) -> str:
    """Draw the moon as it looks at ``timestamp`` (seconds since the epoch)."""
    if timestamp is None:
        timestamp = time.time()
    phase = (int(timestamp) - _NEW_MOON_EPOCH) % _SYNODIC_MONTH * 512 // _SYNODIC_MONTH
    b = _MOON_RADIUS
    x, y, limit = -b, 2 - b, _SYNODIC_MONTH
    out = []
    while y <= b:
        x += 1
        if x >= limit:
            x = -b
            y += 4
            out.append("\n")
        elif x < 0:
            if x * x + y * y < b * b:
                limit = 1 - x
                x = -1
            else:
                x += 1
            out.append(" ")
        else:
            lit = int(x < (limit * (~phase & 255)) >> 8) ^ (phase >> 8)
            out.append("#."[lit])
    return "".join(out)


def _heart_cubic(y_values, scale: int, radius_term) -> str:
    out = []
    for y in y_values:
        for x in range(24, -25, -1):
            if x == -24:
                out.append("\n")
                continue
            z = radius_term(x, y)
            out.append("*" if z * z * z < x * x * y * y * y * scale else " ")
    return "".join(out)


def _heart_square(y_values) -> str:
    out = []
    for y in y_values:
        for x in range(20, -21, -1):
            if x == -20:
                out.append("\n")
                continue
            z = abs(x)
            inside = z - y < 16 if y < 0 else z * z + y * y < (z + y) * 16
            out.append("*" if inside else " ")
    return "".join(out)


def heart(variant: int = 1) -> str:
    """Draw one of four heart shapes (variants 1 to 4) in asterisks."""
    if variant == 1:
        return _heart_cubic(range(14, -11, -1), 200, lambda x, y: x * x - 400 + y * y * 4)
    if variant == 2:
        return _heart_cubic(range(28, -22, -2), 25, lambda x, y: -400 + x * x + y * y)
    if variant in (3, 4):
        return _heart_square(range(21, -21, -2))
    raise ValueError(f"unknown heart variant {variant}")


def hattifatteners(count: int = 50, seed=None) -> str:
    """Return an SVG picture of ``count`` hattifatteners."""
    rng = random.Random(int(time.time()) if seed is None else seed)
    rand = rng.random
    width, height, colour = 800, 600, 0x272222
    deg = math.pi / 180
    step = 7.5
    w = 25.0
    parts = [
        f"<svg width='{width}' height='{height}' xmlns='http://www.w3.org/2000/svg'>"
        f"<style>path{{fill:#{colour:x};stroke:white;stroke-width:1.5;}}</style>"
        f"<rect width='100%' height='100%' fill='#{colour:x}'/>"
    ]
    y1 = 0.0
    for i in range(1, count + 1):
        a = (rand() - 0.5) * 20 * deg
        r = (i + count) / (count * 2)
        s = math.sin(a) * r
        c = math.cos(a) * r
        r *= 5
        x0 = rand() * width
        h = 100 + rand() * 50
        y1 += height / count
        y0 = y1 - h
        b = rand() * 15 + 10
        k = b * 1.5

        def point(cmd, px, py):
            parts.append(f"{cmd}{x0 + px * c - py * s:.2f} {y0 + px * s + py * c:.2f}")

        parts.append("<path d='")
        point("M", -w, h)
        j = int(rand() * 2 + 4)
        a = (90 - j * step) * deg
        e = w / math.tan(a)
        X, Y = -w, e
        D = math.sqrt(w * w + e * e)
        point("L", X, Y)
        z = 1
        for f in range(-j + 1, j + 1):
            a += z * step * deg
            S, C = math.sin(a), math.cos(a)
            l, m = z * S * b, C * b
            o, p = z * S * k, C * k
            point("L", X - l, Y + m)
            point("C", X - o, Y + p)
            a += z * step * deg
            S, C = math.sin(a), math.cos(a)
            X, Y = -S * z * D, C * D
            point(",", X - o, Y + p)
            point(",", X - l, Y + m)
            point("L", X, Y)
            if f == 0:
                point("L", -w, w - h)
                point("C", -w, -h - w)
                point(",", w, -h - w)
                point(",", w, w - h)
                X, Y = w, -e
                point("L", X, Y)
                z = -1
        point("L", w, h)
        x0 += (rand() - 0.5) * r * 3
        parts.append("'/><path d='")
        for side in (3, -3):
            point("M", -r - w / side, -h + w / 2)
            for arc in (2, -2):
                parts.append(f"a{r:.2f} {r:.2f} 0 1 0 {r * arc:.2f} 0")
        parts.append("'/>")
    parts.append("</svg>")
    return "".join(parts)