"""The playing field: game state, per-frame updates, drawing and the main loop."""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Sequence
from pathlib import Path

import pygame

from mazerunner.collectibles import STAR_SYMBOL
from mazerunner.enemy import Enemy
from mazerunner.maze import DEFAULT_MAZE_FILE, Maze
from mazerunner.movement import move_player
from mazerunner.player import Player
from mazerunner.scores import DEFAULT_SCORES_FILE, append_score
from mazerunner.screens import (
    BLACK,
    DEEP_BLUE,
    FRAME_RATE,
    RED,
    WHITE,
    Assets,
    load_assets,
    show_game_over_screen,
    show_level_complete_screen,
    show_welcome_screen,
)

log = logging.getLogger(__name__)

TILE_SIZE = 40
HUD_HEIGHT = 50
STAR_SCALE = 0.5
WINDOW_TITLE = "2D Maze Game"
WELCOME_MESSAGE = "Welcome to the Maze"

ENEMY_SPAWNS: tuple[tuple[int, int], ...] = (
    (2, 17),
    (10, 13),
    (7, 6),
    (12, 12),
    (16, 6),
)

# Frames between enemy steps, by level.
ENEMY_MOVE_DELAYS = {1: 30, 2: 15}

_KEY_DIRECTIONS = {
    pygame.K_a: "a",
    pygame.K_LEFT: "a",
    pygame.K_d: "d",
    pygame.K_RIGHT: "d",
    pygame.K_w: "w",
    pygame.K_UP: "w",
    pygame.K_s: "s",
    pygame.K_DOWN: "s",
}


class Game:
    """State of one run: the maze, the player, the enemies and the level."""

    def __init__(self, maze: Maze | None = None, rng: random.Random | None = None) -> None:
        self.maze = Maze() if maze is None else maze
        self.rng = random.Random() if rng is None else rng
        self.player = Player()
        self.enemies = [Enemy(x, y) for x, y in ENEMY_SPAWNS]
        self.level = 1
        self.frame_counter = 0
        self.status_message = WELCOME_MESSAGE

    @property
    def enemy_move_delay(self) -> int:
        """Frames between enemy steps at the current level."""
        return ENEMY_MOVE_DELAYS.get(self.level, ENEMY_MOVE_DELAYS[max(ENEMY_MOVE_DELAYS)])

    def handle_direction(self, direction: str) -> str:
        """Move the player for a WASD key and return the new status message."""
        self.status_message = move_player(self.maze, self.player, direction).value
        return self.status_message

    def tick(self) -> None:
        """Advance one frame, letting the enemies step when their delay has passed."""
        if self.frame_counter % self.enemy_move_delay == 0:
            for enemy in self.enemies:
                enemy.move(self.maze, self.rng)
        self.frame_counter += 1

    def is_caught(self) -> bool:
        """True when an enemy stands on the player's cell."""
        here = self.player.position()
        return any(enemy.position() == here for enemy in self.enemies)

    def is_level_complete(self) -> bool:
        """True when every star has been collected."""
        return self.maze.all_collected()

    def next_level(self) -> None:
        """Start level 2 with a fresh maze, keeping the score earned so far."""
        score = self.player.score
        self.level = 2
        self.maze.create_layout()
        self.maze.load()
        self.player = Player(score=score)
        self.status_message = f"Level {self.level} Started!"

    @staticmethod
    def _tile_origin(x: int, y: int) -> tuple[int, int]:
        return (x * TILE_SIZE, y * TILE_SIZE + HUD_HEIGHT)

    def draw(self, surface: pygame.Surface, assets: Assets) -> None:
        """Draw the maze, stars, characters and status bar onto ``surface``."""
        surface.fill(BLACK)
        tile = (TILE_SIZE, TILE_SIZE)
        wall = pygame.transform.scale(assets.wall, tile)
        passage = pygame.transform.scale(assets.passage, tile)
        size = self.maze.size
        cells = [(x, y) for y in range(size) for x in range(size)]

        for x, y in cells:
            if self.maze.cell(x, y) == " ":
                surface.blit(passage, self._tile_origin(x, y))

        if assets.collectible is not None:
            width = int(assets.collectible.get_width() * STAR_SCALE)
            height = int(assets.collectible.get_height() * STAR_SCALE)
            star = pygame.transform.scale(assets.collectible, (width, height))
            for x, y in cells:
                if self.maze.cell(x, y) == STAR_SYMBOL and not self.maze.collectible_at(x, y).collected:
                    left, top = self._tile_origin(x, y)
                    surface.blit(
                        star,
                        (left + (TILE_SIZE - width) / 2, top + (TILE_SIZE - height) / 2),
                    )

        for x, y in cells:
            if self.maze.is_wall(x, y):
                surface.blit(wall, self._tile_origin(x, y))

        surface.blit(assets.player, self._tile_origin(*self.player.position()))
        for enemy in self.enemies:
            surface.blit(assets.enemy, self._tile_origin(*enemy.position()))

        if Path(assets.text_font).is_file():
            pygame.font.init()
            font = pygame.font.Font(str(assets.text_font), 24)
            width = size * TILE_SIZE
            surface.blit(font.render(self.status_message, True, WHITE), (10, 10))
            surface.blit(font.render(f"Level: {self.level}", True, DEEP_BLUE), (width / 2, 10))
            surface.blit(font.render(f"Score: {self.player.score}", True, RED), (width - 180, 10))


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mazerunner", description="Collect every star and escape the devils.")
    parser.add_argument("--assets", default=".", help="directory holding fonts and images")
    parser.add_argument("--maze", default=str(DEFAULT_MAZE_FILE), help="maze layout file")
    parser.add_argument("--scores", default=str(DEFAULT_SCORES_FILE), help="high-score file")
    return parser.parse_args(argv)


def _play(window: pygame.Surface, assets: Assets, game: Game, nickname: str, scores_path: Path) -> None:
    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return
                direction = _KEY_DIRECTIONS.get(event.key)
                if direction is not None:
                    game.handle_direction(direction)

        game.tick()
        all_collected = game.is_level_complete()
        game.draw(window, assets)
        score = game.player.score

        if game.is_caught():
            append_score(scores_path, nickname, score)
            show_game_over_screen(window, assets, score, scores_path)
            return

        if all_collected:
            append_score(scores_path, nickname, score)
            if show_level_complete_screen(window, assets, game.level, score, scores_path):
                game.next_level()
                continue
            return

        pygame.display.flip()
        clock.tick(FRAME_RATE)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game; returns the process exit status."""
    args = _parse_args(argv)
    maze = Maze(args.maze)
    maze.load()

    pygame.init()
    try:
        side = maze.size * TILE_SIZE
        window = pygame.display.set_mode((side, side + HUD_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            assets = load_assets(args.assets)
        except FileNotFoundError as error:
            log.error("Error: %s", error)
            return 1
        pygame.key.start_text_input()
        nickname = show_welcome_screen(window, assets)
        if nickname is None:
            return 0
        _play(window, assets, Game(maze), nickname, Path(args.scores))
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())