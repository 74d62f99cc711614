import random

from tinytools.lettermixer import mix_stream, shuffle_word


def test_short_words_unchanged():
    rng = random.Random(1)
    for word in (b"a", b"an", b"the"):
        assert shuffle_word(word, rng) == word


def test_first_last_kept_and_letters_preserved():
    rng = random.Random(7)
    word = b"extraordinary"
    out = shuffle_word(word, rng)
    assert out[0] == word[0] and out[-1] == word[-1]
    assert sorted(out) == sorted(word)


def test_stream_keeps_non_letters():
    rng = random.Random(3)
    data = b"Hello, wonderful world! 123\n"
    out = mix_stream(data, rng)
    assert len(out) == len(data)
    for a, b in zip(data, out):
        if not chr(a).isalpha():
            assert a == b


def test_stream_words_keep_ends():
    rng = random.Random(5)
    out = mix_stream(b"shuffling letters", rng).split(b" ")
    assert out[0][:1] == b"s" and out[0][-1:] == b"g"
    assert sorted(out[1]) == sorted(b"letters")


def test_long_word_split_at_limit():
    rng = random.Random(9)
    data = b"a" + b"b" * 70 + b"c"
    out = mix_stream(data, rng)
    assert out[0:1] == b"a"
    assert out[63:64] == b"b"
    assert out[-1:] == b"c"
    assert sorted(out) == sorted(data)