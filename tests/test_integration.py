"""Integration tests for storage, config, rendering, export, and the CLI."""

import json

import openpyxl
import pytest

import draft_board
from draftboard.config import load_config
from draftboard.constants import EMPTY_BOARD_MESSAGE
from draftboard.excel_export import export_board_to_excel
from draftboard.parser import parse_player_text
from draftboard.render import board_cells, board_to_export, format_board_text, position_color
from draftboard.session import DraftSession
from draftboard.snake_draft import generate_snake_draft
from draftboard.storage import JsonRankingsStore

RANKINGS = """\
1 Ja'Marr Chase WR
2 Bijan Robinson RB
3 Justin Jefferson WR
4 Brock Bowers TE
5 Josh Allen QB
6 Saquon Barkley RB
7 Justin Tucker K
"""


@pytest.fixture
def board():
    return generate_snake_draft(parse_player_text(RANKINGS), 3)


@pytest.fixture
def rankings_file(tmp_path):
    path = tmp_path / 'rankings.txt'
    path.write_text(RANKINGS, encoding='utf-8')
    return path


class TestJsonRankingsStore:
    """Tests for custom rankings persistence."""

    def test_missing_file_loads_none(self, tmp_path):
        """Test a store with no file yet loads None."""
        assert JsonRankingsStore(tmp_path / 'missing.json').load() is None

    def test_save_and_load(self, tmp_path):
        """Test saved text loads back unchanged and uses the expected key."""
        path = tmp_path / 'nested' / 'custom.json'
        store = JsonRankingsStore(path)
        store.save(RANKINGS)

        assert store.load() == RANKINGS
        with open(path) as f:
            assert json.load(f) == {'customPlayerRankings': RANKINGS}

    def test_corrupt_file_loads_none(self, tmp_path):
        """Test invalid JSON is treated as no saved rankings."""
        path = tmp_path / 'custom.json'
        path.write_text('{not json', encoding='utf-8')
        assert JsonRankingsStore(path).load() is None

    def test_session_persists_through_store(self, tmp_path):
        """Test a new session picks up text saved by an earlier one."""
        path = tmp_path / 'custom.json'
        first = DraftSession(num_teams=3, store=JsonRankingsStore(path), default_source='ESPN')
        first.raw_text = RANKINGS

        second = DraftSession(num_teams=3, store=JsonRankingsStore(path), default_source='ESPN')
        assert second.raw_text == RANKINGS
        assert len(second.players) == 7


class TestConfig:
    """Tests for board config loading."""

    def test_missing_config_uses_defaults(self, tmp_path):
        """Test defaults when no config file exists."""
        config = load_config(tmp_path / 'board_config.json')
        assert config.num_teams == 10
        assert config.default_source == 'Sleeper'

    def test_config_file(self, tmp_path):
        """Test values are read from the file."""
        path = tmp_path / 'board_config.json'
        path.write_text(json.dumps({'num_teams': 12, 'default_source': 'ESPN', 'log_level': 'debug'}))
        config = load_config(path)
        assert config.num_teams == 12
        assert config.default_source == 'ESPN'
        assert config.log_level == 'DEBUG'

    @pytest.mark.parametrize(
        'data',
        [{'num_teams': 0}, {'default_source': 'CBS'}, {'unknown_key': 1}, {'log_level': 'LOUD'}],
    )
    def test_invalid_config(self, tmp_path, data):
        """Test invalid values and unknown keys are rejected."""
        path = tmp_path / 'board_config.json'
        path.write_text(json.dumps(data))
        with pytest.raises(ValueError):
            load_config(path)


class TestRendering:
    """Tests for text and JSON rendering."""

    def test_position_colors(self):
        """Test colours are keyed on the first two letters, case-insensitively."""
        assert position_color('WR') == position_color('wr3')
        assert position_color('RB') != position_color('WR')
        assert position_color('K') == position_color('DST')

    def test_cells_pick_numbers(self, board):
        """Test cell pick numbers follow the snake in each round."""
        rows = board_cells(board)
        assert [[c.overall_pick for c in row] for row in rows] == [[1, 2, 3], [6, 5, 4], [7, 8, 9]]

    def test_text_grid(self, board):
        """Test the text grid shows teams, picks, and picked marks."""
        text = format_board_text(board, picked={6})
        lines = text.splitlines()

        assert 'Team 1' in lines[0] and 'Team 3' in lines[0]
        assert len(lines) == 5
        assert "1. Ja'Marr Chase (WR)" in lines[2]
        assert 'x 6. Saquon Barkley (RB)' in lines[3]
        assert '7. Justin Tucker (K)' in lines[4]

    def test_empty_board_text(self):
        """Test the placeholder message for an empty board."""
        assert format_board_text({}) == EMPTY_BOARD_MESSAGE

    def test_json_export(self, board):
        """Test the export model keeps empty slots and only on-board picks."""
        export = board_to_export(board, picked={2, 99})
        assert export.num_teams == 3
        assert export.rounds == 3
        assert export.teams['Team 2'][2] is None
        assert export.teams['Team 3'][1].name == 'Brock Bowers'
        assert export.picked == [2]


class TestExcelExport:
    """Tests for writing the board to xlsx."""

    def test_export(self, tmp_path, board):
        """Test headers, cell text, colours, and picked styling."""
        path = export_board_to_excel(tmp_path / 'board.xlsx', board, picked={1})

        wb = openpyxl.load_workbook(path)
        ws = wb['Draft Board']

        assert [ws.cell(row=1, column=c).value for c in (1, 2, 3)] == ['Team 1', 'Team 2', 'Team 3']
        assert ws.cell(row=2, column=1).value == "Ja'Marr Chase (WR)\nRank 1 · Pick 1"
        assert ws.cell(row=3, column=3).value == 'Brock Bowers (TE)\nRank 4 · Pick 4'
        assert ws.cell(row=4, column=2).value is None

        assert ws.cell(row=2, column=1).font.strike
        assert not ws.cell(row=2, column=2).font.strike
        assert ws.cell(row=2, column=2).fill.fgColor.rgb.endswith(position_color('RB'))
        wb.close()


class TestCli:
    """End-to-end tests for draft_board.py."""

    def test_input_file(self, tmp_path, rankings_file, capsys):
        """Test rendering a rankings file with picks."""
        code = draft_board.main([
            '--input', str(rankings_file),
            '--teams', '3',
            '--pick', '1',
            '--rankings-file', str(tmp_path / 'custom.json'),
        ])
        out = capsys.readouterr().out

        assert code == 0
        assert "x 1. Ja'Marr Chase (WR)" in out
        assert not (tmp_path / 'custom.json').exists()

    def test_save_and_exports(self, tmp_path, rankings_file):
        """Test --save persists the rankings and exports are written."""
        custom = tmp_path / 'custom.json'
        code = draft_board.main([
            '--input', str(rankings_file),
            '--teams', '3',
            '--save',
            '--rankings-file', str(custom),
            '--excel', str(tmp_path / 'board.xlsx'),
            '--json', str(tmp_path / 'board.json'),
        ])

        assert code == 0
        assert JsonRankingsStore(custom).load() == RANKINGS
        assert (tmp_path / 'board.xlsx').exists()
        with open(tmp_path / 'board.json') as f:
            exported = json.load(f)
        assert exported['teams']['Team 1'][2]['name'] == 'Justin Tucker'

    def test_parse_error_exit_code(self, tmp_path, capsys):
        """Test a bad rankings file exits 1 with the problem line."""
        bad = tmp_path / 'bad.txt'
        bad.write_text('1 Ja\'Marr Chase WR\nnope\n', encoding='utf-8')
        code = draft_board.main(['--input', str(bad), '--rankings-file', str(tmp_path / 'c.json')])

        assert code == 1
        assert 'Problem line: "nope"' in capsys.readouterr().out

    def test_missing_input_file(self, tmp_path, capsys):
        """Test a missing input file exits 1."""
        code = draft_board.main([
            '--input', str(tmp_path / 'nope.txt'),
            '--rankings-file', str(tmp_path / 'c.json'),
        ])
        assert code == 1
        assert 'Rankings file not found' in capsys.readouterr().out

    def test_preset_source(self, tmp_path, capsys):
        """Test a bundled source with warnings enabled."""
        code = draft_board.main([
            '--source', 'Yahoo',
            '--teams', '12',
            '--warnings',
            '--rankings-file', str(tmp_path / 'c.json'),
        ])
        out = capsys.readouterr().out
        assert code == 0
        assert 'Team 12' in out
        assert '⚠️' not in out
