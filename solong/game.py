"""Game state and the rules for moving the player around the map."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from enum import Enum

from .gamemap import GameMap

KEY_ESCAPE = 0xFF1B


class Direction(Enum):
    """A movement direction with its key and offset."""

    UP = ("w", 0, -1)
    LEFT = ("a", -1, 0)
    DOWN = ("s", 0, 1)
    RIGHT = ("d", 1, 0)

    def __init__(self, key: str, dx: int, dy: int):
        self.key = key
        self.dx = dx
        self.dy = dy


class MoveResult(Enum):
    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"
    QUIT = "quit"


_BY_KEYSYM = {ord(direction.key): direction for direction in Direction}


class Game:
    """The running game: the map, the player, collectibles left and steps taken.

    ``on_change`` is called with the game after every successful move,
    before the step counter is increased.
    """

    def __init__(self, rows: Iterable[str] | GameMap, collectibles: int,
                 player: tuple[int, int],
                 on_change: Callable[[Game], object] | None = None):
        self.map = rows if isinstance(rows, GameMap) else GameMap(rows)
        self.collectibles = collectibles
        self.player = (player[0], player[1])
        self.on_change = on_change
        self.steps = 0
        self.finished = False

    @property
    def width(self) -> int:
        return self.map.x_max + 1

    @property
    def height(self) -> int:
        return self.map.y_max + 1

    def _cell(self, x: int, y: int) -> str | None:
        cells = self.map.cells
        if 0 <= y < len(cells) and 0 <= x < len(cells[y]):
            return cells[y][x]
        return None

    def move(self, direction: Direction) -> MoveResult:
        """Try to move the player one cell in ``direction``."""
        if self.finished:
            raise RuntimeError("the game is over")
        x, y = self.player
        tx, ty = x + direction.dx, y + direction.dy
        target = self._cell(tx, ty)
        if target == "E" and not self.collectibles:
            print("YOU WON\n")
            self.finished = True
            return MoveResult.WON
        if target is None or target in ("1", "E"):
            return MoveResult.BLOCKED
        if target == "C":
            self.collectibles -= 1
        self.map.cells[y][x] = "0"
        self.map.cells[ty][tx] = "P"
        self.player = (tx, ty)
        if self.on_change is not None:
            self.on_change(self)
        self.steps += 1
        print(f"Movements: {self.steps}\n")
        return MoveResult.MOVED

    def quit(self) -> MoveResult:
        """End the game at the player's request."""
        print("You quit the game")
        self.finished = True
        return MoveResult.QUIT

    def handle_key(self, key: int) -> MoveResult | None:
        """React to a key symbol; keys without a meaning give None."""
        if key == KEY_ESCAPE:
            return self.quit()
        direction = _BY_KEYSYM.get(key)
        if direction is None:
            return None
        return self.move(direction)

    def tiles(self) -> Iterator[tuple[int, int, str]]:
        """Yield (x, y, character) for every cell of the window, row by row."""
        cells = self.map.cells
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, cells[y][x]