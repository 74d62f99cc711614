"""Approximate an image by recursively splitting it into flat-coloured rectangles."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Raster:
    """An 8-bit image stored row by row, ``channels`` bytes per pixel."""

    width: int
    height: int
    channels: int
    pixels: bytes

    def __post_init__(self) -> None:
        if len(self.pixels) != self.width * self.height * self.channels:
            raise ValueError("pixel data does not match dimensions")


@dataclass
class Region:
    """A rectangle with its mean colour and squared error."""

    x: int
    y: int
    w: int
    h: int
    color: tuple = field(default_factory=tuple)
    error: int = 0


class _Integral:
    def __init__(self, raster: Raster) -> None:
        w, h, b = raster.width, raster.height, raster.channels
        self.stride = w + 1
        self.tables = []
        for ch in range(b):
            table = [0] * ((w + 1) * (h + 1))
            for y in range(h):
                run = 0
                base = y * w * b
                for x in range(w):
                    run += raster.pixels[base + x * b + ch]
                    table[(y + 1) * self.stride + x + 1] = table[y * self.stride + x + 1] + run
            self.tables.append(table)

    def at(self, ch: int, x: int, y: int) -> int:
        return self.tables[ch][y * self.stride + x]

    def rect(self, ch: int, x: int, y: int, w: int, h: int) -> int:
        return self.at(ch, x + w, y + h) - self.at(ch, x + w, y) - self.at(ch, x, y + h) + self.at(ch, x, y)


def _measure(region: Region, raster: Raster, integral: _Integral) -> None:
    area = region.w * region.h
    b = raster.channels
    if area == 0:
        region.color = (0,) * b
        region.error = 0
        return
    region.color = tuple(
        (integral.rect(ch, region.x, region.y, region.w, region.h) + area // 2) // area for ch in range(b)
    )
    error = 0
    for y in range(region.y, region.y + region.h):
        row = y * raster.width * b
        for x in range(region.x, region.x + region.w):
            for ch, mean in enumerate(region.color):
                diff = raster.pixels[row + x * b + ch] - mean
                error += diff * diff
    region.error = error


def _best_split(region: Region, integral: _Integral, vertical: bool) -> tuple[int, int]:
    length = region.w if vertical else region.h
    span = region.h if vertical else region.w
    best, best_at = 0, 0
    for z in range(1, length):
        score = 0
        for ch, mean in enumerate(region.color):
            if vertical:
                left = integral.rect(ch, region.x, region.y, z, span)
                right = integral.rect(ch, region.x + z, region.y, length - z, span)
            else:
                left = integral.rect(ch, region.x, region.y, span, z)
                right = integral.rect(ch, region.x, region.y + z, span, length - z)
            score += abs(left - mean * span * z) + abs(right - mean * span * (length - z))
        if score > best:
            best, best_at = score, z
    return best, best_at


def approximate(raster: Raster, count: int) -> list[Region]:
    """Split ``raster`` into at most ``count`` rectangles of uniform colour."""
    count = max(1, min(count, raster.width * raster.height))
    integral = _Integral(raster)
    first = Region(0, 0, raster.width, raster.height)
    _measure(first, raster, integral)
    regions = [first]
    while len(regions) < count:
        worst = max(regions, key=lambda r: r.error)
        if worst.error <= 0:
            break
        col_score, col_at = _best_split(worst, integral, True)
        row_score, row_at = _best_split(worst, integral, False)
        if col_score < row_score:
            new = Region(worst.x, worst.y + row_at, worst.w, worst.h - row_at)
            worst.h = row_at
        elif col_at:
            new = Region(worst.x + col_at, worst.y, worst.w - col_at, worst.h)
            worst.w = col_at
        else:
            worst.error = 0
            continue
        _measure(new, raster, integral)
        _measure(worst, raster, integral)
        regions.append(new)
    return regions


def paint(regions, raster: Raster) -> Raster:
    """Return a copy of ``raster`` with every region filled by its colour."""
    b = raster.channels
    out = bytearray(raster.pixels)
    for region in regions:
        fill = bytes(region.color) * region.w
        for y in range(region.y, region.y + region.h):
            start = (y * raster.width + region.x) * b
            out[start:start + len(fill)] = fill
    return Raster(raster.width, raster.height, b, bytes(out))


def _header_tokens(data: bytes, pos: int):
    while True:
        while pos < len(data) and data[pos] in b" \t\r\n":
            pos += 1
        if pos < len(data) and data[pos] == ord("#"):
            while pos < len(data) and data[pos] != ord("\n"):
                pos += 1
            continue
        start = pos
        while pos < len(data) and data[pos] not in b" \t\r\n#":
            pos += 1
        if start == pos:
            raise ValueError("truncated PPM data")
        token = data[start:pos]
        if not token.isdigit() or int(token) >> 15:
            raise ValueError(f"bad PPM number {token!r}")
        yield int(token), pos


def read_ppm(data: bytes) -> Raster:
    """Parse a P3 or P6 PPM image with a maximum value of 255."""
    if data[:2] not in (b"P3", b"P6"):
        raise ValueError("not a P3 or P6 image")
    tokens = _header_tokens(data, 2)
    width, _ = next(tokens)
    height, _ = next(tokens)
    maxval, pos = next(tokens)
    if width < 1 or height < 1:
        raise ValueError("bad image size")
    if maxval != 255:
        raise ValueError("only 8-bit images are supported")
    size = width * height * 3
    if data[:2] == b"P6":
        pixels = data[pos + 1:pos + 1 + size]
        if len(pixels) != size:
            raise ValueError("truncated PPM data")
    else:
        values = bytearray()
        for _ in range(size):
            value, pos = next(tokens)
            if value > 255:
                raise ValueError("sample out of range")
            values.append(value)
        pixels = bytes(values)
    return Raster(width, height, 3, bytes(pixels))


def write_ppm(raster: Raster) -> bytes:
    """Encode an RGB raster as binary PPM."""
    if raster.channels != 3:
        raise ValueError("PPM needs three channels")
    return f"P6\n{raster.width} {raster.height}\n255\n".encode() + raster.pixels


def load_image(path) -> Raster:
    """Load an image file as an RGB raster."""
    path = Path(path)
    if path.suffix.lower() in (".ppm", ".pnm"):
        return read_ppm(path.read_bytes())
    from PIL import Image

    with Image.open(path) as img:
        rgb = img.convert("RGB")
        return Raster(rgb.width, rgb.height, 3, rgb.tobytes())


def save_image(raster: Raster, path) -> None:
    """Save a raster; the format follows the file suffix."""
    path = Path(path)
    if path.suffix.lower() in (".ppm", ".pnm"):
        path.write_bytes(write_ppm(raster))
        return
    from PIL import Image

    mode = {1: "L", 3: "RGB", 4: "RGBA"}[raster.channels]
    img = Image.frombytes(mode, (raster.width, raster.height), raster.pixels)
    if path.suffix.lower() in (".jpg", ".jpeg"):
        img.save(path, quality=100, optimize=True)
    else:
        img.save(path)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print("usage: rectangles COUNT INPUT OUTPUT", file=sys.stderr)
        return 1
    try:
        raster = load_image(args[1])
        save_image(paint(approximate(raster, int(args[0])), raster), args[2])
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())