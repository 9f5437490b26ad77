"""Persistence of the custom rankings text."""

import logging
from pathlib import Path
from typing import Optional, Protocol

from .schemas import SavedRankings
from .utils import load_json_safe, save_json

logger = logging.getLogger('draftboard.storage')


class RankingsStore(Protocol):
    """Anything that can load and save a single rankings text blob."""

    def load(self) -> Optional[str]:
        ...

    def save(self, text: str) -> None:
        ...


class MemoryRankingsStore:
    """Keeps the rankings text in memory only."""

    def __init__(self, text: Optional[str] = None):
        self.text = text

    def load(self) -> Optional[str]:
        return self.text

    def save(self, text: str) -> None:
        self.text = text


class JsonRankingsStore:
    """
    Stores the rankings text in a small JSON file.

    File format:
        {"customPlayerRankings": "1 Ja'Marr Chase WR\\n2 ..."}
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> Optional[str]:
        """Return the saved text, or None if the file is missing or invalid."""
        saved = load_json_safe(self.path, schema=SavedRankings)
        if saved is None:
            logger.debug(f'No saved rankings at {self.path}')
            return None
        return saved.custom_player_rankings

    def save(self, text: str) -> None:
        save_json(self.path, SavedRankings(custom_player_rankings=text))
        logger.debug(f'Saved {len(text)} chars of rankings to {self.path}')
