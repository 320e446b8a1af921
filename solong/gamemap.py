"""The game map: reading it from a file and flood-filling it to check routes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from os import PathLike

_NEIGHBOURS = ((1, 0), (0, 1), (-1, 0), (0, -1))

_STEP_BLOCKED = frozenset("cepo1")
_STEP_MARKS = {"C": "c", "E": "e", "P": "p", "0": "o"}

_RESET_BLOCKED = frozenset("CEP01")
_RESET_MARKS = {"c": "C", "e": "E", "p": "P", "o": "0"}

_COLLECT_BLOCKED = frozenset("cEpo1")
_COLLECT_MARKS = {"C": "c", "P": "p", "0": "o"}


class MapError(ValueError):
    """Raised when a map cannot be read or is unusable."""


class GameMap:
    """A grid of map characters, one list of characters per row.

    Rows are given without their line endings. The last column and the
    last row are treated as the border: flood fills never enter them.
    """

    def __init__(self, rows: Iterable[str]):
        self.cells: list[list[str]] = [list(row.removesuffix("\n")) for row in rows]
        if not self.cells or not self.cells[0]:
            raise MapError("map is empty")

    @property
    def x_max(self) -> int:
        """Index of the last column of the first row."""
        return len(self.cells[0]) - 1

    @property
    def y_max(self) -> int:
        """Index of the last row."""
        return len(self.cells) - 1

    @property
    def num_rows(self) -> int:
        return len(self.cells)

    @property
    def rows(self) -> list[str]:
        """The rows as strings."""
        return ["".join(row) for row in self.cells]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.x_max and 0 <= y < self.y_max and x < len(self.cells[y])

    def _flood(self, x: int, y: int, blocked: frozenset[str],
               marks: Mapping[str, str]) -> list[str]:
        """Mark every cell reachable from (x, y); return the original characters."""
        stack = [(x, y)]
        seen: set[tuple[int, int]] = set()
        visited: list[str] = []
        while stack:
            cx, cy = stack.pop()
            if (cx, cy) in seen or not self._inside(cx, cy):
                continue
            cell = self.cells[cy][cx]
            if cell in blocked:
                continue
            seen.add((cx, cy))
            self.cells[cy][cx] = marks.get(cell, cell)
            visited.append(cell)
            stack.extend((cx + dx, cy + dy) for dx, dy in reversed(_NEIGHBOURS))
        return visited

    def step(self, x: int, y: int) -> None:
        """Mark, in lower case, every cell reachable from (x, y) through non-walls."""
        self._flood(x, y, _STEP_BLOCKED, _STEP_MARKS)

    def res_step(self, x: int, y: int) -> None:
        """Undo the marks left by a fill that reached (x, y)."""
        self._flood(x, y, _RESET_BLOCKED, _RESET_MARKS)

    def step_col(self, x: int, y: int) -> int:
        """Mark cells reachable from (x, y) without crossing the exit.

        Returns the number of collectibles found on the way.
        """
        visited = self._flood(x, y, _COLLECT_BLOCKED, _COLLECT_MARKS)
        return sum(1 for cell in visited if cell == "C")


def read_map(path: str | PathLike[str]) -> GameMap:
    """Read a map file, one row per line."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            lines = handle.readlines()
    except OSError as exc:
        raise MapError("map can not be opened") from exc
    if not lines:
        raise MapError("map can not be opened")
    return GameMap(lines)