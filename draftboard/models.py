"""Data models for the draft board."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PlayerRecord:
    """A single ranked player parsed from one line of input."""
    rank: int
    name: str
    position: str

    def __str__(self) -> str:
        return f'{self.rank} {self.name} {self.position}'


# Placeholder for a board cell that no player was assigned to
EMPTY_SLOT = None

# team label -> one entry per round (PlayerRecord or EMPTY_SLOT)
DraftBoard = dict[str, list[Optional[PlayerRecord]]]


@dataclass(frozen=True)
class BoardCell:
    """Render-ready view of one (team, round) cell."""
    team: str
    team_index: int  # 0-based physical column
    round: int  # 0-based
    overall_pick: int  # 1-based
    player: Optional[PlayerRecord] = None
    is_picked: bool = False

    @property
    def is_empty(self) -> bool:
        return self.player is None
