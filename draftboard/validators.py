"""Validation functions for rankings and draft boards."""

from .models import DraftBoard, PlayerRecord
from .snake_draft import round_count


def validate_rankings(players: list[PlayerRecord]) -> list[str]:
    """
    Check a parsed rankings list for suspicious ranks.

    The parser passes duplicate and out-of-order ranks through unchanged;
    this reports them so a caller can surface them without blocking.

    Checks:
    - Duplicate ranks
    - Ranks that do not increase line over line

    Args:
        players: Parsed players in input order

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    seen = {}
    duplicates = {}
    for player in players:
        if player.rank in seen:
            duplicates.setdefault(player.rank, [seen[player.rank]]).append(player.name)
        else:
            seen[player.rank] = player.name

    for rank, names in sorted(duplicates.items()):
        warnings.append(f'Rank {rank} is used by multiple players: {", ".join(names)}')

    for prev, curr in zip(players, players[1:]):
        if curr.rank <= prev.rank:
            warnings.append(
                f'{curr.name} (rank {curr.rank}) is listed after {prev.name} (rank {prev.rank})'
            )

    return warnings


def validate_board(board: DraftBoard, player_count: int) -> list[str]:
    """
    Check that a board satisfies the layout invariants.

    Checks:
    - Every team has the same number of rounds
    - Round count equals ceil(player_count / team count)
    - Exactly player_count cells are filled
    - Empty slots appear only in the final round

    Args:
        board: Board to check
        player_count: Number of players that were assigned

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    if not board:
        if player_count:
            errors.append(f'Board is empty but {player_count} players were assigned')
        return errors

    lengths = {label: len(slots) for label, slots in board.items()}
    if len(set(lengths.values())) > 1:
        detail = ', '.join(f'{label}={n}' for label, n in lengths.items())
        errors.append(f'Teams have unequal round counts: {detail}')

    expected_rounds = round_count(player_count, len(board))
    for label, n in lengths.items():
        if n != expected_rounds:
            errors.append(f'{label} has {n} rounds (expected {expected_rounds})')

    filled = sum(1 for slots in board.values() for p in slots if p is not None)
    if filled != player_count:
        errors.append(f'Board has {filled} players (expected {player_count})')

    for label, slots in board.items():
        for round_index, player in enumerate(slots[:-1]):
            if player is None:
                errors.append(f'{label} has an empty slot in round {round_index + 1}')

    return errors
