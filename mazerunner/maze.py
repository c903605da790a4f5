"""The maze grid, its stars and its text file form."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from mazerunner.collectibles import STAR_SYMBOL, Collectible

if TYPE_CHECKING:
    from mazerunner.characters import Character

log = logging.getLogger(__name__)

WALL_CHARS = frozenset("|-+")
DEFAULT_MAZE_FILE = Path("Maze.txt")

_LAYOUT = (
    "+------------------+",
    "|***************-**|",
    "|**---****---**---*|",
    "|**-***************|",
    "|*|*---*|--**|--*|*|",
    "|*|**|**|  |*|***|*|",
    "|*|**|**|--**|***|*|",
    "|****|**|  |*|***|*|",
    "|****|**|--**|--***|",
    "|-*****************|",
    "|**----***---**---*|",
    "|*****-************|",
    "|*|-****|**|*|*****|",
    "|*|**-**|**|*|***-*|",
    "|*--***-|*-|*|--***|",
    "|**|*|*||*||*|*|*|*|",
    "|*-|*|*--*--*|*|*|*|",
    "|******************|",
    "|*---**---****-**--|",
    "+------------------+",
)


class Maze:
    """A square grid of wall, passage and star cells backed by a text file."""

    SIZE = 20

    def __init__(self, path: str | Path = DEFAULT_MAZE_FILE) -> None:
        self.path = Path(path)
        self._grid: list[list[str]] = []
        self.collectibles: list[list[Collectible]] = []
        self.create_layout()

    @property
    def size(self) -> int:
        return self.SIZE

    def create_layout(self) -> None:
        """Reset the grid to the built-in level, reset all stars and save it."""
        self._grid = [list(row) for row in _LAYOUT]
        self.collectibles = [
            [Collectible() for _ in range(self.SIZE)] for _ in range(self.SIZE)
        ]
        self.save()

    def save(self) -> None:
        """Write the grid to the maze file, one row per line."""
        text = "".join("".join(row) + "\n" for row in self._grid)
        self.path.write_text(text, encoding="utf-8")

    def load(self) -> None:
        """Read the grid from the maze file, regenerating it if the file is missing."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            log.warning("Maze file not found! Generating default layout.")
            self.create_layout()
            return
        lines = text.splitlines()
        if len(lines) < self.SIZE or any(len(line) < self.SIZE for line in lines[: self.SIZE]):
            raise ValueError(
                f"maze file {self.path} must hold {self.SIZE} rows of {self.SIZE} cells"
            )
        self._grid = [list(line[: self.SIZE]) for line in lines[: self.SIZE]]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.SIZE and 0 <= y < self.SIZE

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the maze")

    def cell(self, x: int, y: int) -> str:
        """Return the grid character at column ``x``, row ``y``."""
        self._check(x, y)
        return self._grid[y][x]

    def set_cell(self, x: int, y: int, value: str) -> None:
        """Replace the grid character at column ``x``, row ``y``."""
        self._check(x, y)
        if len(value) != 1:
            raise ValueError("a maze cell holds exactly one character")
        self._grid[y][x] = value

    def is_wall(self, x: int, y: int) -> bool:
        return self.cell(x, y) in WALL_CHARS

    def collectible_at(self, x: int, y: int) -> Collectible:
        self._check(x, y)
        return self.collectibles[y][x]

    def all_collected(self) -> bool:
        """True when no star cell still holds an uncollected star."""
        return all(
            self.collectibles[y][x].collected
            for y, row in enumerate(self._grid)
            for x, symbol in enumerate(row)
            if symbol == STAR_SYMBOL
        )

    def render_text(self, status_message: str, player: Character, enemy: Character) -> str:
        """Return the console picture of the maze with score and status."""
        score = getattr(player, "score", 0)
        parts = [f"\nYour Score: {score}\n"]
        for y, row in enumerate(self._grid):
            cells = []
            for x, symbol in enumerate(row):
                if (x, y) == player.position():
                    cells.append("P")
                elif (x, y) == enemy.position():
                    cells.append("X")
                elif symbol == STAR_SYMBOL:
                    cells.append(self.collectibles[y][x].display())
                else:
                    cells.append(symbol)
            parts.append("".join(f"{c} " for c in cells) + "\n")
        parts.append(f"\n{status_message}\n")
        return "".join(parts)

    def display(
        self,
        status_message: str,
        player: Character,
        enemy: Character,
        stream: TextIO | None = None,
    ) -> None:
        """Write the console picture of the maze to ``stream`` (stdout by default)."""
        out = sys.stdout if stream is None else stream
        out.write(self.render_text(status_message, player, enemy))