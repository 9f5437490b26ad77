"""
Snake draft board layout.

Snake drafts reverse direction each round:
    Round 1: 1, 2, 3, ..., N
    Round 2: N, ..., 3, 2, 1
    Round 3: 1, 2, 3, ..., N

Players are consumed in ranking order and dropped into the team whose turn
it is, producing a team-by-round grid.
"""

import logging
import math
from collections.abc import Iterator, Sequence
from typing import Optional

from .models import EMPTY_SLOT, DraftBoard, PlayerRecord

logger = logging.getLogger('draftboard.snake_draft')


def team_label(team_index: int) -> str:
    """Default label for a 0-based team index ("Team 1" ... "Team N")."""
    return f'Team {team_index + 1}'


def is_forward_round(round_index: int) -> bool:
    """Round 0 runs forward, every other round reverses."""
    return round_index % 2 == 0


def round_count(player_count: int, num_teams: int) -> int:
    """Number of rounds needed to place every player."""
    if player_count <= 0 or num_teams <= 0:
        return 0
    return math.ceil(player_count / num_teams)


def team_for_pick(round_index: int, pick_in_round: int, num_teams: int) -> int:
    """
    0-based team index that makes a given pick within a round.

    Args:
        round_index: 0-based round
        pick_in_round: 0-based pick order within the round
        num_teams: Number of teams in the draft
    """
    if is_forward_round(round_index):
        return pick_in_round
    return num_teams - 1 - pick_in_round


def overall_pick(round_index: int, team_index: int, num_teams: int) -> int:
    """
    1-based overall pick number for a (round, team) cell.

    Uses the same forward/reverse parity as placement, so the pick numbers
    read 1..N across the board in the order players were placed.
    """
    pick_in_round = team_for_pick(round_index, team_index, num_teams)
    return round_index * num_teams + pick_in_round + 1


def pick_slot(pick_number: int, num_teams: int) -> tuple[int, int]:
    """
    Locate an overall pick on the board.

    Args:
        pick_number: Overall pick number (1-based)
        num_teams: Number of teams in draft

    Returns:
        Tuple of (round_index, team_index), both 0-based
    """
    if pick_number < 1:
        raise ValueError('Pick number must be >= 1')
    if num_teams < 1:
        raise ValueError('Team count must be >= 1')

    round_index, pick_in_round = divmod(pick_number - 1, num_teams)
    return round_index, team_for_pick(round_index, pick_in_round, num_teams)


def generate_snake_draft(
    players: Sequence[PlayerRecord],
    num_teams: int,
    team_names: Optional[Sequence[str]] = None,
) -> DraftBoard:
    """
    Distribute ranked players across teams in snake order.

    Every team gets one entry per round. Cells past the last player in the
    final round hold EMPTY_SLOT, so all teams have equal-length lists.

    Args:
        players: Players in ranking order
        num_teams: Number of teams; <= 0 yields an empty board
        team_names: Optional labels to use instead of "Team 1".."Team N"

    Returns:
        Dict of team label -> list of PlayerRecord or EMPTY_SLOT per round.
        Empty dict if there are no players or no teams.

    Example:
        board = generate_snake_draft(players, 3)
        board['Team 3'][1]  # 5th overall pick
    """
    if not players or num_teams <= 0:
        return {}

    labels = _resolve_labels(num_teams, team_names)
    num_rounds = round_count(len(players), num_teams)

    rounds: list[list[Optional[PlayerRecord]]] = [
        [EMPTY_SLOT] * num_teams for _ in range(num_rounds)
    ]

    for index, player in enumerate(players):
        round_index, pick_in_round = divmod(index, num_teams)
        team_index = team_for_pick(round_index, pick_in_round, num_teams)
        rounds[round_index][team_index] = player

    board: DraftBoard = {}
    for team_index, label in enumerate(labels):
        board[label] = [rounds[r][team_index] for r in range(num_rounds)]

    logger.debug(f'Built board: {len(players)} players, {num_teams} teams, {num_rounds} rounds')
    return board


def _resolve_labels(num_teams: int, team_names: Optional[Sequence[str]]) -> list[str]:
    if team_names is None:
        return [team_label(i) for i in range(num_teams)]

    names = list(team_names)
    if len(names) != num_teams:
        raise ValueError(f'Expected {num_teams} team names, got {len(names)}')
    if len(set(names)) != len(names):
        raise ValueError(f'Team names must be unique: {names}')
    return names


def draft_order(board: DraftBoard) -> Iterator[tuple[int, str, int, Optional[PlayerRecord]]]:
    """
    Walk a board in overall pick order.

    Yields:
        (overall_pick, team_label, round_index, player_or_empty)
    """
    labels = list(board)
    num_teams = len(labels)
    if not num_teams:
        return

    num_rounds = len(board[labels[0]])
    for pick_number in range(1, num_rounds * num_teams + 1):
        round_index, team_index = pick_slot(pick_number, num_teams)
        label = labels[team_index]
        yield pick_number, label, round_index, board[label][round_index]
