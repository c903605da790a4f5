"""Enemies that wander the maze at random."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mazerunner.characters import Character

if TYPE_CHECKING:
    from mazerunner.maze import Maze

DIRECTIONS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))


@dataclass
class Enemy(Character):
    """A wandering enemy that never steps into walls."""

    def move(self, maze: Maze, rng: random.Random | None = None) -> bool:
        """Try up to four random directions; step into the first open one.

        Returns True if the enemy moved.
        """
        chooser = random if rng is None else rng
        for _ in DIRECTIONS:
            dx, dy = chooser.choice(DIRECTIONS)
            new_x, new_y = self.x + dx, self.y + dy
            if maze.in_bounds(new_x, new_y) and not maze.is_wall(new_x, new_y):
                self.move_to(new_x, new_y)
                return True
        return False