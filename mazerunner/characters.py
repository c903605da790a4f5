"""Base type for anything that occupies a cell of the maze."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Character:
    """A figure on the maze grid; ``x`` is the column and ``y`` the row."""

    x: int
    y: int

    def position(self) -> tuple[int, int]:
        """Return the current ``(x, y)`` coordinates."""
        return (self.x, self.y)

    def move_to(self, x: int, y: int) -> None:
        """Place the character at column ``x``, row ``y``."""
        self.x = x
        self.y = y