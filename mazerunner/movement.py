"""Moving the player in response to a key."""

from __future__ import annotations

from enum import Enum

from mazerunner.collectibles import STAR_SYMBOL
from mazerunner.maze import Maze
from mazerunner.player import Player

_STEPS = {
    "w": (0, -1),
    "s": (0, 1),
    "a": (-1, 0),
    "d": (1, 0),
}


class MoveOutcome(str, Enum):
    """What a move attempt did; the value is the status message shown."""

    INVALID_KEY = "WASD Keys only, please!"
    OUT_OF_BOUNDS = "Moving out of Maze Grid!"
    BLOCKED = "Cannot move there!"
    COLLECTED = "You just increased points!"
    MOVED = "Moved"


def move_player(maze: Maze, player: Player, direction: str) -> MoveOutcome:
    """Move ``player`` one cell for a WASD key, collecting any star landed on."""
    step = _STEPS.get(direction.lower()) if isinstance(direction, str) else None
    if step is None:
        return MoveOutcome.INVALID_KEY

    new_x, new_y = player.x + step[0], player.y + step[1]
    if not maze.in_bounds(new_x, new_y):
        return MoveOutcome.OUT_OF_BOUNDS
    if maze.is_wall(new_x, new_y):
        return MoveOutcome.BLOCKED

    outcome = MoveOutcome.MOVED
    star = maze.collectible_at(new_x, new_y)
    if maze.cell(new_x, new_y) == STAR_SYMBOL and not star.collected:
        star.collect()
        player.update_score()
        outcome = MoveOutcome.COLLECTED

    player.move_to(new_x, new_y)
    return outcome