"""Welcome, game-over and level-complete screens and the leaderboard."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

import pygame

from mazerunner.scores import DEFAULT_SCORES_FILE, ScoreEntry, top_scores

log = logging.getLogger(__name__)

TITLE_FONT_FILE = "SuperPixel.ttf"
TEXT_FONT_FILE = "FiraCode.ttf"
WALL_IMAGE = "maze wall.png"
PASSAGE_IMAGE = "passage.png"
PLAYER_IMAGE = "player.png"
ENEMY_IMAGE = "enemy.png"
COLLECTIBLE_IMAGE = "collect.png"
GAME_OVER_IMAGE = "gameover.png"
TROPHY_IMAGE = "trophy.png"

NICKNAME_LIMIT = 16
GAME_OVER_PAUSE_MS = 5000
FRAME_RATE = 60
LEADERBOARD_TITLE = "Top 3 High Scores"
ENTER_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
YELLOW = (255, 255, 0)
SKY_BLUE = (135, 206, 235)
DEEP_BLUE = (0, 150, 255)
TURQUOISE = (64, 224, 208)
DARK_GREY = (50, 50, 50)


@dataclass
class Assets:
    """Font files and images the game draws with."""

    title_font: Path
    text_font: Path
    wall: pygame.Surface
    passage: pygame.Surface
    player: pygame.Surface
    enemy: pygame.Surface
    collectible: pygame.Surface | None = None
    game_over: pygame.Surface | None = None
    trophy: pygame.Surface | None = None


def _require(path: Path, what: str) -> Path:
    if not path.is_file():
        raise FileNotFoundError(f"Could not load {what}: {path}")
    return path


def _optional_image(path: Path, what: str) -> pygame.Surface | None:
    if not path.is_file():
        log.error("Error: Could not load %s texture!", what)
        return None
    return pygame.image.load(str(path))


def load_assets(directory: str | Path = ".") -> Assets:
    """Load fonts and images from ``directory``.

    Fonts and the wall, passage, player and enemy images are required;
    the others are ``None`` when missing.
    """
    base = Path(directory)
    return Assets(
        title_font=_require(base / TITLE_FONT_FILE, "title font"),
        text_font=_require(base / TEXT_FONT_FILE, "text font"),
        wall=pygame.image.load(str(_require(base / WALL_IMAGE, "wall texture"))),
        passage=pygame.image.load(str(_require(base / PASSAGE_IMAGE, "passage texture"))),
        player=pygame.image.load(str(_require(base / PLAYER_IMAGE, "player texture"))),
        enemy=pygame.image.load(str(_require(base / ENEMY_IMAGE, "enemy texture"))),
        collectible=_optional_image(base / COLLECTIBLE_IMAGE, "collectible"),
        game_over=_optional_image(base / GAME_OVER_IMAGE, "game over"),
        trophy=_optional_image(base / TROPHY_IMAGE, "trophy"),
    )


def apply_text_input(nickname: str, text: str) -> str:
    """Return ``nickname`` after typing ``text``.

    A backspace removes the last character; printable ASCII is appended
    while the name is shorter than the limit; anything else is ignored.
    """
    for char in text:
        if char == "\b":
            nickname = nickname[:-1]
        elif ord(char) < 128 and char.isprintable() and len(nickname) < NICKNAME_LIMIT:
            nickname += char
    return nickname


def leaderboard_lines(scores: Iterable[ScoreEntry | tuple[str, int]]) -> list[str]:
    """Format ranked ``name - score`` lines, numbered from 1."""
    return [f"{rank}. {name} - {score}" for rank, (name, score) in enumerate(scores, start=1)]


def _font(path: str | Path | None, size: int, bold: bool = False) -> pygame.font.Font:
    font = pygame.font.Font(None if path is None else str(path), size)
    font.set_bold(bold)
    return font


def _blit_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    color: tuple[int, int, int],
    position: tuple[float, float],
) -> None:
    x, y = position
    for line in text.split("\n"):
        surface.blit(font.render(line, True, color), (x, y))
        y += font.get_linesize()


def _present(surface: pygame.Surface) -> None:
    if surface is pygame.display.get_surface():
        pygame.display.flip()


def _centre(surface: pygame.Surface) -> float:
    return surface.get_width() / 2


def draw_leaderboard(
    surface: pygame.Surface,
    font: str | Path | None,
    scores: Sequence[ScoreEntry | tuple[str, int]],
) -> list[str]:
    """Draw the high-score title and lines using the font file ``font``.

    Returns the score lines drawn.
    """
    _blit_text(surface, _font(font, 30, bold=True), LEADERBOARD_TITLE, TURQUOISE, (250, 600))
    lines = leaderboard_lines(scores)
    line_font = _font(font, 26)
    for index, line in enumerate(lines):
        _blit_text(surface, line_font, line, WHITE, (280, 650 + index * 40))
    return lines


def show_welcome_screen(surface: pygame.Surface, assets: Assets) -> str | None:
    """Ask for a nickname; return it on Enter, or ``None`` if the player quits."""
    c = _centre(surface)
    headline = _font(assets.title_font, 50)
    game_name = _font(assets.title_font, 60)
    tagline = _font(assets.text_font, 40)
    instructions = _font(assets.text_font, 25)
    name_font = _font(assets.text_font, 22)
    input_box = pygame.Rect(int(c - 200), int(c + 60), 400, 50)
    clock = pygame.time.Clock()
    nickname = ""

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return None
            if event.type == pygame.TEXTINPUT:
                nickname = apply_text_input(nickname, event.text)
            elif event.type == pygame.KEYDOWN:
                if event.key in ENTER_KEYS:
                    return nickname
                if event.key == pygame.K_ESCAPE:
                    return None
                if event.key == pygame.K_BACKSPACE:
                    nickname = apply_text_input(nickname, "\b")

        surface.fill(BLACK)
        _blit_text(surface, headline, "WELCOME", SKY_BLUE, (c - 150, c - 300))
        _blit_text(surface, game_name, "THE MAZE RUNNER", DEEP_BLUE, (c - 360, c - 230))
        _blit_text(surface, tagline, "|| Run for your Life ||", TURQUOISE, (c - 230, c - 150))
        _blit_text(
            surface,
            instructions,
            "To Win Outsmart Devils and Collect All Stars",
            SKY_BLUE,
            (c - 300, c - 80),
        )
        _blit_text(
            surface,
            instructions,
            "Use WASD Keys or Arrow Keys to Move",
            SKY_BLUE,
            (c - 250, c - 50),
        )
        pygame.draw.rect(surface, DARK_GREY, input_box)
        _blit_text(surface, instructions, "Your Nickname", WHITE, (c - 100, c + 10))
        _blit_text(surface, name_font, nickname, WHITE, (input_box.x + 10, input_box.y + 10))
        _present(surface)
        clock.tick(FRAME_RATE)


def show_game_over_screen(
    surface: pygame.Surface,
    assets: Assets,
    score: int,
    scores_path: str | Path = DEFAULT_SCORES_FILE,
) -> bool:
    """Show the game-over picture, final score and leaderboard, then pause.

    Returns False, with nothing shown, when the game-over image is missing.
    """
    surface.fill(BLACK)
    if assets.game_over is None:
        log.error("Error: Could not load game over texture!")
        return False

    c = _centre(surface)
    surface.blit(assets.game_over, (c - 250, c - 450))
    _blit_text(surface, _font(assets.text_font, 50, bold=True), " Game Over! \n Caught You!", RED, (c - 180, c))
    _blit_text(
        surface,
        _font(assets.text_font, 40, bold=True),
        f"Your Final Score: {score}",
        DEEP_BLUE,
        (c - 250, c + 150),
    )
    draw_leaderboard(surface, assets.text_font, top_scores(scores_path))
    _present(surface)
    pygame.time.wait(GAME_OVER_PAUSE_MS)
    return True


def show_level_complete_screen(
    surface: pygame.Surface,
    assets: Assets,
    level: int,
    score: int,
    scores_path: str | Path = DEFAULT_SCORES_FILE,
) -> bool:
    """Show the level-complete screen; True if the player presses Enter to go on."""
    surface.fill(BLACK)
    if assets.trophy is None:
        # Without the trophy picture the screen is skipped and play goes on.
        log.error("Error: Could not load trophy texture!")
        return True

    c = _centre(surface)
    surface.blit(assets.trophy, (c - 250, c - 450))
    _blit_text(surface, _font(assets.text_font, 50, bold=True), "Level Complete!", YELLOW, (c - 230, c - 20))
    _blit_text(
        surface,
        _font(assets.text_font, 40, bold=True),
        f"Your Final Score: {score}",
        DEEP_BLUE,
        (c - 250, c + 50),
    )
    if level == 1:
        choice = "Press Enter to move to Next Level \n       Press Esc to Quit"
    else:
        choice = "Press Enter to Play Again \n       Press Esc to Quit"
    _blit_text(surface, _font(assets.text_font, 30), choice, SKY_BLUE, (c - 280, c + 100))
    draw_leaderboard(surface, assets.text_font, top_scores(scores_path))
    _present(surface)

    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            return event.key in ENTER_KEYS