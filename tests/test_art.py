import pytest

from tinytools.art import hattifatteners, heart, moon


def test_moon_has_22_rows_of_known_characters():
    picture = moon(1_600_000_000)
    assert picture.count("\n") == 22
    assert set(picture) <= set(" #.\n")


def test_moon_shape_does_not_depend_on_time():
    def shape(p):
        return p.replace("#", "x").replace(".", "x")

    assert shape(moon(1_600_000_000)) == shape(moon(1_601_000_000))


def test_moon_changes_over_half_a_month():
    assert moon(1_600_000_000) != moon(1_600_000_000 + 1_275_721)


@pytest.mark.parametrize("variant,rows", [(1, 25), (2, 25), (3, 21), (4, 21)])
def test_heart_row_count(variant, rows):
    assert heart(variant).count("\n") == rows


@pytest.mark.parametrize("variant", [1, 2, 3, 4])
def test_heart_is_mirror_symmetric(variant):
    for line in heart(variant).splitlines():
        inner = line[1:]
        assert inner == inner[::-1]
        assert set(line) <= {"*", " "}


def test_heart_variants_three_and_four_agree():
    assert heart(3) == heart(4)


def test_heart_rejects_unknown_variant():
    with pytest.raises(ValueError):
        heart(9)


def test_hattifatteners_is_deterministic_with_seed():
    assert hattifatteners(5, seed=7) == hattifatteners(5, seed=7)
    assert hattifatteners(5, seed=7) != hattifatteners(5, seed=8)


def test_hattifatteners_structure():
    svg = hattifatteners(4, seed=1)
    assert svg.startswith("<svg width='800' height='600'")
    assert svg.endswith("</svg>")
    assert svg.count("<path") == 8