import pytest

from tinytools.markovchain import generate, main


def test_deterministic():
    text = "the quick brown fox jumps over the lazy dog " * 5
    first = generate(text, 100, 3, 42)
    second = generate(text, 100, 3, 42)
    assert len(first) == 100
    assert set(first) <= set(text)
    assert first == second


def test_length_and_alphabet():
    text = "hello there, general kenobi"
    out = generate(text, 200, 2, 1)
    assert len(out) == 200
    assert set(out) <= set(text)


def test_alternating():
    out = generate("ab" * 10, 50, 1, 3)
    assert all(x != y for x, y in zip(out, out[1:]))


def test_cleanup_removes_tags_and_underscores():
    out = generate("x_y<tag>z\n\n\tw", 300, 1, 5)
    assert "_" not in out and "<" not in out and "t" not in out
    assert "  " not in out


@pytest.mark.parametrize("order", [0, 129])
def test_bad_order(order):
    with pytest.raises(ValueError):
        generate("some text", 10, order, 1)


def test_bad_count_and_short_text():
    with pytest.raises(ValueError):
        generate("text", 1 << 20, 1, 1)
    with pytest.raises(ValueError):
        generate("ab", 5, 5, 1)


def test_main_usage():
    assert main([]) == 1