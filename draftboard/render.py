"""Render-ready views of a draft board: cells, text grid, and JSON export."""

from collections.abc import Container

from .constants import DEFAULT_POSITION_COLOR, EMPTY_BOARD_MESSAGE, POSITION_COLORS
from .models import BoardCell, DraftBoard
from .schemas import BoardExport, PlayerEntry
from .snake_draft import overall_pick


def position_color(position: str) -> str:
    """
    Cell colour for a position, matched on its first two letters.

    Examples:
        "WR" -> sky, "rb2" -> emerald, "K" -> gray
    """
    return POSITION_COLORS.get(position[:2].upper(), DEFAULT_POSITION_COLOR)


def board_cells(board: DraftBoard, picked: Container[int] = ()) -> list[list[BoardCell]]:
    """
    Lay a board out as rounds of cells in physical team-column order.

    Args:
        board: Board from generate_snake_draft
        picked: Ranks marked as drafted

    Returns:
        List of rounds, each a list of BoardCell (one per team)
    """
    labels = list(board)
    num_teams = len(labels)
    if not num_teams:
        return []

    num_rounds = len(board[labels[0]])
    rows = []
    for round_index in range(num_rounds):
        row = []
        for team_index, label in enumerate(labels):
            player = board[label][round_index]
            row.append(
                BoardCell(
                    team=label,
                    team_index=team_index,
                    round=round_index,
                    overall_pick=overall_pick(round_index, team_index, num_teams),
                    player=player,
                    is_picked=player is not None and player.rank in picked,
                )
            )
        rows.append(row)
    return rows


def _cell_text(cell: BoardCell) -> str:
    if cell.player is None:
        return ''
    mark = 'x ' if cell.is_picked else ''
    return f'{mark}{cell.overall_pick}. {cell.player.name} ({cell.player.position})'


def format_board_text(board: DraftBoard, picked: Container[int] = (), width: int = 0) -> str:
    """
    Render a board as a fixed-width text grid.

    Each column is a team; each row is a round. Picked players are prefixed
    with "x". Column width is sized to the widest cell unless given.
    """
    rows = board_cells(board, picked)
    if not rows:
        return EMPTY_BOARD_MESSAGE

    labels = list(board)
    texts = [[_cell_text(cell) for cell in row] for row in rows]
    if not width:
        width = max(len(t) for t in labels + [t for row in texts for t in row])

    lines = ['Rd | ' + ' | '.join(label.ljust(width) for label in labels)]
    lines.append('-' * len(lines[0]))
    for round_index, row in enumerate(texts, start=1):
        lines.append(f'{round_index:>2} | ' + ' | '.join(t[:width].ljust(width) for t in row))

    return '\n'.join(line.rstrip() for line in lines)


def board_to_export(board: DraftBoard, picked: Container[int] = ()) -> BoardExport:
    """Convert a board to its JSON export model."""
    teams = {
        label: [
            PlayerEntry(rank=p.rank, name=p.name, position=p.position) if p else None
            for p in slots
        ]
        for label, slots in board.items()
    }
    ranks_on_board = [p.rank for slots in board.values() for p in slots if p]
    return BoardExport(
        num_teams=len(board),
        rounds=len(next(iter(board.values()), [])),
        teams=teams,
        picked=sorted({r for r in ranks_on_board if r in picked}),
    )
