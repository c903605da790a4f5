"""The player character and its score."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from mazerunner.characters import Character


@dataclass
class Player(Character):
    """The player, starting in the top-left passage with no points."""

    x: int = 1
    y: int = 1
    score: int = 0

    SCORE_STEP: ClassVar[int] = 10

    def update_score(self) -> None:
        """Add the points for one collected star."""
        self.score += self.SCORE_STEP