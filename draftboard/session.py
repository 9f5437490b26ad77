"""Draft board session state: rankings text, team count, and picked players."""

import logging
from collections.abc import Iterator
from typing import Optional

from .config import get_default_source, get_num_teams
from .models import BoardCell, DraftBoard, PlayerRecord
from .parser import parse_player_text_safe
from .presets import DataSource, get_preset_text, to_data_source
from .render import board_cells
from .snake_draft import generate_snake_draft
from .storage import MemoryRankingsStore, RankingsStore

logger = logging.getLogger('draftboard.session')


class PickedSet:
    """Ranks of players marked as drafted."""

    def __init__(self, ranks=()):
        self._ranks: set[int] = set(ranks)

    def toggle(self, rank: int) -> bool:
        """Flip a rank's picked state. Returns True if it is now picked."""
        if rank in self._ranks:
            self._ranks.remove(rank)
            return False
        self._ranks.add(rank)
        return True

    def is_picked(self, rank: int) -> bool:
        return rank in self._ranks

    def clear(self) -> None:
        self._ranks.clear()

    def __contains__(self, rank: object) -> bool:
        return rank in self._ranks

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._ranks))

    def __len__(self) -> int:
        return len(self._ranks)

    def __repr__(self) -> str:
        return f'PickedSet({sorted(self._ranks)})'


class DraftSession:
    """
    Holds the inputs for one draft board and derives everything else.

    Parsed players and the board are recomputed from scratch whenever the
    rankings text or team count changes. Changing the text clears picks,
    since new rankings invalidate earlier ones. While the source is Custom,
    every text change is written through to the store.

    Example:
        session = DraftSession(num_teams=12)
        session.select_source('ESPN')
        session.toggle_picked(1)
        session.board['Team 1'][0]
    """

    def __init__(
        self,
        num_teams: Optional[int] = None,
        store: Optional[RankingsStore] = None,
        default_source: 'DataSource | str | None' = None,
    ):
        self.store = store if store is not None else MemoryRankingsStore()
        self.picked = PickedSet()
        self._num_teams = num_teams if num_teams is not None else get_num_teams()

        saved = self.store.load()
        if saved:
            self._data_source = DataSource.CUSTOM
            self._raw_text = saved
        else:
            source = to_data_source(default_source) if default_source else get_default_source()
            self._data_source = source
            self._raw_text = '' if source is DataSource.CUSTOM else get_preset_text(source)

        self._parse_cache: Optional[tuple[str, list[PlayerRecord], Optional[str]]] = None
        self._board_cache: Optional[tuple[str, int, DraftBoard]] = None

    @property
    def raw_text(self) -> str:
        return self._raw_text

    @raw_text.setter
    def raw_text(self, text: str) -> None:
        # User edit: switch to Custom, persist, clear picks
        self._data_source = DataSource.CUSTOM
        self._set_text(text)

    @property
    def num_teams(self) -> int:
        return self._num_teams

    @num_teams.setter
    def num_teams(self, value: int) -> None:
        self._num_teams = value

    @property
    def data_source(self) -> DataSource:
        return self._data_source

    def select_source(self, source: 'DataSource | str') -> None:
        """Load rankings from a preset, or the stored custom text for Custom."""
        source = to_data_source(source)
        self._data_source = source
        if source is DataSource.CUSTOM:
            self._set_text(self.store.load() or '')
        else:
            self._set_text(get_preset_text(source))
        logger.debug(f'Selected source {source.value}')

    def _set_text(self, text: str) -> None:
        if text != self._raw_text:
            self.picked.clear()
        self._raw_text = text
        if self._data_source is DataSource.CUSTOM:
            self.store.save(text)

    def _parsed(self) -> tuple[list[PlayerRecord], Optional[str]]:
        if self._parse_cache is None or self._parse_cache[0] != self._raw_text:
            players, error = parse_player_text_safe(self._raw_text)
            self._parse_cache = (self._raw_text, players, error)
        return self._parse_cache[1], self._parse_cache[2]

    @property
    def players(self) -> list[PlayerRecord]:
        """Parsed players, or [] if the text has an error."""
        return self._parsed()[0]

    @property
    def error(self) -> Optional[str]:
        """Parse error message for the current text, if any."""
        return self._parsed()[1]

    @property
    def board(self) -> DraftBoard:
        cache = self._board_cache
        if cache is None or cache[0] != self._raw_text or cache[1] != self._num_teams:
            board = generate_snake_draft(self.players, self._num_teams)
            self._board_cache = cache = (self._raw_text, self._num_teams, board)
        return cache[2]

    def toggle_picked(self, rank: int) -> bool:
        """Flip a player's drafted state by rank. Returns the new state."""
        return self.picked.toggle(rank)

    def cells(self) -> list[list[BoardCell]]:
        """Board laid out as rounds of render-ready cells."""
        return board_cells(self.board, self.picked)
