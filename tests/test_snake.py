import random

import pytest

from tinytools.snake import Direction, Game, Settings, parse_settings


def make(**kw):
    s = Settings(foods=0, **kw)
    return Game(s, 10, 10, random.Random(1))


def test_parse_settings_prefix_and_limits():
    s = parse_settings(["SIZE=9", "SHEDS=3", "WAIT=2", "GOAL=0", "other"])
    assert (s.size, s.sheds, s.shed, s.wait, s.goal) == (9, 3, 20, 9, 1)


def test_too_small():
    with pytest.raises(ValueError):
        Game(Settings(), 5, 20)


def test_wall_kills_without_wrap():
    g = make(wrap=0, lifesaver=0)
    g.turn(Direction.UP)
    results = [g.step() for _ in range(20)]
    assert g.outcome == "OUCH!"
    assert results[-1] == "OUCH!"


def test_lifesaver_delays_death():
    g = make(wrap=0, lifesaver=2)
    g.turn(Direction.UP)
    for _ in range(5):
        g.step()
    assert g.head[0] == 0
    assert g.step() is None
    assert g.step() is None
    assert g.step() == "OUCH!"


def test_wrap_moves_around():
    g = make(wrap=1)
    g.turn(Direction.LEFT)
    for _ in range(10):
        g.step()
    assert g.head == (5, 5)
    assert g.outcome is None


def test_reverse_ignored_and_pause():
    g = make()
    g.turn(Direction.RIGHT)
    g.turn(Direction.LEFT)
    assert g.direction == Direction.RIGHT
    g.toggle_pause()
    start = g.head
    g.step()
    assert g.head == start


def test_eating_grows():
    g = make(size=1, grow=3)
    g.turn(Direction.RIGHT)
    g.foods = {(5, 6): 0}
    g.step()
    assert g.eaten == 1
    for _ in range(3):
        g.step()
    assert len(g.body) == 4