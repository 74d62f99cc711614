from tinytools.expand import expand_tabs


def test_basic():
    assert expand_tabs("a\tb", 4) == "a   b"


def test_default_and_newline_reset():
    out = expand_tabs("abc\tx\n\ty")
    assert out == "abc" + " " * 5 + "x\n" + " " * 8 + "y"


def test_nonpositive_keeps_tabs():
    assert expand_tabs("a\tb", 0) == "a\tb"


def test_no_tabs_left_and_stops_aligned():
    text = "x\tyy\tzzz\t!"
    out = expand_tabs(text, 4)
    assert "\t" not in out
    assert out.index("!") % 4 == 0