"""A terminal snake game with tunable rules."""

from __future__ import annotations

import enum
import random
import select
import shutil
import sys
from dataclasses import dataclass, fields

from tinytools.cstrings import c_atoi

MAX_FOODS = 20
FOOD_TILES = "🍎🍄🍅🍇🍉🍊🍋🍌🍍🍐🍑🍒🍓🍔🍕🍖🍗🍞🍩🍬🍭🍰"


@dataclass
class Settings:
    """Game rules; each can be set on the command line as NAME=value."""

    size: int = 5
    grow: int = 5
    goal: int = 200
    shed: int = 20
    sheds: int = -1
    foods: int = 3
    expiry: int = 200
    wait: int = 200
    wrap: int = 1
    noclip: int = 0
    lifesaver: int = 2


class Direction(enum.IntEnum):
    STAND = 0
    UP = 2
    DOWN = 3
    LEFT = 4
    RIGHT = 5

    @property
    def delta(self) -> tuple[int, int]:
        return {
            Direction.STAND: (0, 0),
            Direction.UP: (-1, 0),
            Direction.DOWN: (1, 0),
            Direction.LEFT: (0, -1),
            Direction.RIGHT: (0, 1),
        }[self]


def parse_settings(argv) -> Settings:
    """Build settings from ``NAME=value`` arguments; unknown ones are ignored."""
    settings = Settings()
    for arg in argv:
        for f in fields(Settings):
            prefix = f.name.upper() + "="
            if arg.startswith(prefix):
                setattr(settings, f.name, c_atoi(arg[len(prefix):]))
    settings.wait = max(settings.wait, 9)
    settings.goal = max(settings.goal, 1)
    return settings


class Game:
    """The game state on a ``height`` by ``width`` board of (row, column) cells."""

    def __init__(self, settings: Settings | None = None, width: int = 20, height: int = 20,
                 rng: random.Random | None = None) -> None:
        if width <= 7 or height <= 7:
            raise ValueError("screen too small")
        self.settings = settings or Settings()
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.body: list[tuple[int, int]] = [(height // 2, width // 2)]
        self.pending = self.settings.size - 1
        self.direction = Direction.STAND
        self.paused = False
        self.foods: dict[tuple[int, int], int] = {}
        self.eaten = 0
        self.steps = 0
        self.saves = 0
        self.outcome: str | None = None
        self._spawn_food()

    @property
    def head(self) -> tuple[int, int]:
        return self.body[-1]

    def _free_cells(self) -> list[tuple[int, int]]:
        taken = set(self.body) | set(self.foods)
        return [(r, c) for r in range(self.height) for c in range(self.width) if (r, c) not in taken]

    def _spawn_food(self) -> None:
        limit = min(self.settings.foods, MAX_FOODS)
        ev = self.settings.expiry
        while len(self.foods) < limit:
            free = self._free_cells()
            if not free:
                break
            cell = self.rng.choice(free)
            self.foods[cell] = (self.rng.randrange(ev) + ev) // 2 if ev > 0 else 0

    def turn(self, direction: Direction) -> None:
        """Steer the snake; reversing onto itself is ignored."""
        self.paused = False
        direction = Direction(direction)
        if direction != self.direction ^ 1:
            self.direction = direction

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def step(self) -> str | None:
        """Advance one tick and return the outcome once the game has ended."""
        if self.outcome or self.paused or self.direction == Direction.STAND:
            return self.outcome
        dr, dc = self.direction.delta
        row, col = self.head[0] + dr, self.head[1] + dc
        outcome = None
        if self.settings.wrap:
            row %= self.height
            col %= self.width
        elif not (0 <= row < self.height and 0 <= col < self.width):
            outcome = "OUCH!"
        if outcome is None and not self.settings.noclip and (row, col) in self.body:
            outcome = "OW!"
        if outcome:
            if self.saves < self.settings.lifesaver:
                self.saves += 1
                return None
            self.outcome = outcome
            return outcome
        self.saves = 0
        new_head = (row, col)
        self.body.append(new_head)
        for cell in list(self.foods):
            if cell == new_head:
                del self.foods[cell]
                self.eaten += 1
                self.pending += self.settings.grow
            elif self.foods[cell]:
                self.foods[cell] -= 1
                if not self.foods[cell]:
                    del self.foods[cell]
        if self.pending > 0:
            self.pending -= 1
        else:
            self.body.pop(0)
        while self.pending < 0:
            if len(self.body) > 1:
                self.body.pop(0)
            self.pending += 1
        self.steps += 1
        if self.settings.shed and self.steps % self.settings.shed == 0:
            self.pending += self.settings.sheds
        self._spawn_food()
        if len(self.body) >= self.settings.goal:
            self.outcome = "YOU WIN!"
        return self.outcome

    def status(self) -> str:
        r, c = self.head
        return (f"X:{c}/{self.width} Y:{r}/{self.height} "
                f"S:{len(self.body)}/{self.settings.goal} B:{self.eaten}")


_KEYS = {"A": Direction.UP, "B": Direction.DOWN, "C": Direction.RIGHT, "D": Direction.LEFT}
_HEADS = {Direction.STAND: "😐", Direction.UP: "😝", Direction.DOWN: "😛",
          Direction.LEFT: "🤪", Direction.RIGHT: "😜"}


def _render(game: Game) -> str:
    out = ["\33[H\33[97m", game.status(), "\33[K\n"]
    out.append("\33[96m+" + "--" * game.width + "+\n")
    body = set(game.body)
    for r in range(game.height):
        out.append("\33[96m|")
        for c in range(game.width):
            cell = (r, c)
            if cell == game.head:
                out.append("\33[91m" + _HEADS[game.direction])
            elif cell in body:
                out.append("\33[92m🍏")
            elif cell in game.foods:
                out.append(FOOD_TILES[(r * game.width + c) % len(FOOD_TILES)])
            else:
                out.append("\u3000")
        out.append("\33[96m|\n")
    out.append("+" + "--" * game.width + "+\n")
    return "".join(out)


def main(argv=None) -> int:
    import termios
    import time
    import tty

    args = sys.argv[1:] if argv is None else list(argv)
    settings = parse_settings(args)
    cols, rows = shutil.get_terminal_size()
    try:
        game = Game(settings, cols // 2 - 1, rows - 3)
    except ValueError as exc:
        print(exc)
        return 1
    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    quit_requested = False
    try:
        tty.setcbreak(fd)
        sys.stdout.write("\33[1m\33[40m\33[?25l\33[2J")
        while not game.outcome and not quit_requested:
            sys.stdout.write(_render(game))
            sys.stdout.flush()
            deadline = time.monotonic() + settings.wait / 1000
            while True:
                left = deadline - time.monotonic()
                if left <= 0 or not select.select([fd], [], [], left)[0]:
                    break
                key = sys.stdin.read(1)
                if key.lower() == "q":
                    quit_requested = True
                    break
                if key == " ":
                    game.toggle_pause()
                elif key == "\33" and sys.stdin.read(1) == "[":
                    arrow = sys.stdin.read(1)
                    if arrow in _KEYS:
                        game.turn(_KEYS[arrow])
                        break
            game.step()
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)
        sys.stdout.write("\33[m\33[2J\33[?25h\33[H")
    if game.outcome:
        print(game.outcome)
    print(game.status())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())