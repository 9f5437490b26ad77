from .models import EMPTY_SLOT, BoardCell, DraftBoard, PlayerRecord
from .errors import (
    DraftBoardError,
    ParseError,
    MalformedLineError,
    InvalidRankError,
    InvalidFormatError,
    ConfigError,
)
from .parser import (
    parse_player_line,
    parse_player_text,
    parse_player_text_safe,
    format_player_line,
    format_player_text,
)
from .snake_draft import (
    generate_snake_draft,
    overall_pick,
    pick_slot,
    draft_order,
    team_label,
)
from .presets import DataSource, get_preset_text
from .storage import RankingsStore, JsonRankingsStore, MemoryRankingsStore
from .session import DraftSession, PickedSet
from .render import board_cells, format_board_text, board_to_export, position_color
from .excel_export import export_board_to_excel
from .validators import validate_board, validate_rankings

__all__ = [
    # Models
    'PlayerRecord',
    'DraftBoard',
    'BoardCell',
    'EMPTY_SLOT',
    # Errors
    'DraftBoardError',
    'ParseError',
    'MalformedLineError',
    'InvalidRankError',
    'InvalidFormatError',
    'ConfigError',
    # Parsing
    'parse_player_line',
    'parse_player_text',
    'parse_player_text_safe',
    'format_player_line',
    'format_player_text',
    # Snake draft layout
    'generate_snake_draft',
    'overall_pick',
    'pick_slot',
    'draft_order',
    'team_label',
    # Sources and storage
    'DataSource',
    'get_preset_text',
    'RankingsStore',
    'JsonRankingsStore',
    'MemoryRankingsStore',
    # Session state
    'DraftSession',
    'PickedSet',
    # Rendering
    'board_cells',
    'format_board_text',
    'board_to_export',
    'position_color',
    'export_board_to_excel',
    # Validation
    'validate_board',
    'validate_rankings',
]
