import pytest

from tinytools.rectangles import (
    Raster,
    approximate,
    main,
    paint,
    read_ppm,
    write_ppm,
)


def _two_tone(width=6, height=4, split=2):
    pixels = bytearray()
    for _y in range(height):
        for x in range(width):
            pixels += bytes((255, 0, 0) if x < split else (0, 0, 255))
    return Raster(width, height, 3, bytes(pixels))


def test_uniform_image_single_region():
    raster = Raster(3, 2, 3, bytes((10, 20, 30)) * 6)
    regions = approximate(raster, 5)
    assert len(regions) == 1
    assert regions[0].color == (10, 20, 30)
    assert regions[0].error == 0


def test_two_tone_split_is_exact():
    raster = _two_tone()
    regions = approximate(raster, 2)
    assert len(regions) == 2
    assert sum(r.error for r in regions) == 0
    assert paint(regions, raster).pixels == raster.pixels


def test_regions_cover_image():
    pixels = bytes((x * 17 + y * 5) % 256 for y in range(5) for x in range(7) for _ in range(3))
    raster = Raster(7, 5, 3, pixels)
    regions = approximate(raster, 6)
    assert len(regions) <= 6
    assert sum(r.w * r.h for r in regions) == 35


def test_ppm_round_trip():
    raster = _two_tone()
    assert read_ppm(write_ppm(raster)) == raster


def test_ppm_header_fixed():
    assert write_ppm(Raster(1, 1, 3, b"\1\2\3")) == b"P6\n1 1\n255\n\1\2\3"


def test_ascii_ppm_with_comment():
    raster = read_ppm(b"P3\n# c\n1 2\n255\n1 2 3\n4 5 6\n")
    assert raster.pixels == bytes([1, 2, 3, 4, 5, 6])


@pytest.mark.parametrize("data", [b"P5\n1 1\n255\n\0", b"P6\n1 1\n65535\n\0\0", b"P6\n2 2\n255\n\0"])
def test_bad_ppm(data):
    with pytest.raises(ValueError):
        read_ppm(data)


def test_main_end_to_end(tmp_path):
    src = tmp_path / "in.ppm"
    dst = tmp_path / "out.ppm"
    src.write_bytes(write_ppm(_two_tone()))
    assert main(["2", str(src), str(dst)]) == 0
    assert read_ppm(dst.read_bytes()) == _two_tone()
    assert main(["2"]) == 1