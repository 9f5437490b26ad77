"""Excel export of a draft board."""

import logging
from collections.abc import Container
from pathlib import Path

import openpyxl
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from .constants import PICKED_FONT_COLOR
from .models import BoardCell, DraftBoard
from .render import board_cells, position_color

logger = logging.getLogger('draftboard.excel_export')

SHEET_NAME = 'Draft Board'
COLUMN_WIDTH = 24
HEADER_FILL = PatternFill('solid', fgColor='374151')
HEADER_FONT = Font(bold=True, color='67E8F9')
_DASHED = Side(style='dashed', color='6B7280')
EMPTY_BORDER = Border(left=_DASHED, right=_DASHED, top=_DASHED, bottom=_DASHED)


def format_cell_value(cell: BoardCell) -> str | None:
    """
    Excel text for a board cell.

    Example:
        "Bijan Robinson (RB)\\nRank 2 · Pick 2"
    """
    if cell.player is None:
        return None
    player = cell.player
    return f'{player.name} ({player.position})\nRank {player.rank} · Pick {cell.overall_pick}'


def export_board_to_excel(
    excel_path: Path | str,
    board: DraftBoard,
    picked: Container[int] = (),
    sheet_name: str = SHEET_NAME,
) -> Path:
    """
    Write a board to a new workbook.

    Row 1 holds team names; row r+1 holds round r. Cells are filled by
    position colour, and picked players are struck through.

    Args:
        excel_path: Output .xlsx path
        board: Board from generate_snake_draft
        picked: Ranks marked as drafted
        sheet_name: Worksheet title

    Returns:
        Path written
    """
    excel_path = Path(excel_path)
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = sheet_name

    for col, label in enumerate(board, start=1):
        header = ws.cell(row=1, column=col, value=label)
        header.fill = HEADER_FILL
        header.font = HEADER_FONT
        header.alignment = Alignment(horizontal='center')
        ws.column_dimensions[get_column_letter(col)].width = COLUMN_WIDTH

    for row in board_cells(board, picked):
        for cell in row:
            xl_cell = ws.cell(row=cell.round + 2, column=cell.team_index + 1)
            xl_cell.alignment = Alignment(wrap_text=True, vertical='top')

            if cell.player is None:
                xl_cell.border = EMPTY_BORDER
                continue

            xl_cell.value = format_cell_value(cell)
            xl_cell.fill = PatternFill('solid', fgColor=position_color(cell.player.position))
            if cell.is_picked:
                xl_cell.font = Font(strike=True, color=PICKED_FONT_COLOR)
            else:
                xl_cell.font = Font(bold=True)

    ws.freeze_panes = 'A2'

    excel_path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(excel_path)
    wb.close()
    logger.info(f'Board saved to {excel_path}')
    return excel_path
