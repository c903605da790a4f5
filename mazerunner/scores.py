"""The high-score file: one ``name score`` pair per line."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NamedTuple

log = logging.getLogger(__name__)

DEFAULT_SCORES_FILE = Path("Scores.txt")


class ScoreEntry(NamedTuple):
    name: str
    score: int


def append_score(path: str | Path, name: str, score: int) -> None:
    """Append one result to the score file."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{name} {score}\n")


def top_scores(path: str | Path = DEFAULT_SCORES_FILE, count: int = 3) -> list[ScoreEntry]:
    """Return up to ``count`` results, highest score first.

    Reading stops at the first pair that does not parse; a missing file
    yields no scores.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        log.error("Error opening the scores file!")
        return []

    tokens = text.split()
    entries: list[ScoreEntry] = []
    for name, raw_score in zip(tokens[::2], tokens[1::2]):
        try:
            entries.append(ScoreEntry(name, int(raw_score)))
        except ValueError:
            break

    entries.sort(key=lambda entry: entry.score, reverse=True)
    return entries[: max(count, 0)]