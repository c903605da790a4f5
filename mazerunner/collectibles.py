"""Stars that the player picks up."""

from __future__ import annotations

from dataclasses import dataclass

STAR_SYMBOL = "*"
TAKEN_SYMBOL = " "


@dataclass
class Collectible:
    """A single star; it starts uncollected."""

    collected: bool = False

    def collect(self) -> None:
        """Mark the star as taken."""
        self.collected = True

    def display(self) -> str:
        """Return the character used to draw the star in text form."""
        return TAKEN_SYMBOL if self.collected else STAR_SYMBOL