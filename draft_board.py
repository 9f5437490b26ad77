#!/usr/bin/env python3
"""
Snake Draft Board CLI

Lays out ranked players as a snake draft board and prints it as a grid.
Rankings come from a bundled source (Sleeper, Yahoo, ESPN), a text file,
or the saved custom rankings. One player per line: "rank name... position".

Usage:
    python draft_board.py --source ESPN --teams 12
    python draft_board.py --input my_rankings.txt --teams 10 --pick 1 --pick 2
    python draft_board.py --input my_rankings.txt --save --excel board.xlsx
    pbpaste | python draft_board.py --input - --teams 8
"""

import argparse
import logging
import sys
from pathlib import Path

from draftboard import (
    DraftSession,
    JsonRankingsStore,
    MemoryRankingsStore,
    board_to_export,
    export_board_to_excel,
    format_board_text,
    validate_rankings,
)
from draftboard.config import get_config, get_rankings_path
from draftboard.errors import ConfigError
from draftboard.logging_config import setup_logging
from draftboard.presets import DataSource
from draftboard.utils import save_json

logger = logging.getLogger('draftboard.cli')


def read_rankings(input_path: str) -> str:
    """Read rankings text from a file, or stdin for '-'."""
    if input_path == '-':
        return sys.stdin.read()
    path = Path(input_path)
    if not path.exists():
        raise FileNotFoundError(f'Rankings file not found: {path}')
    return path.read_text(encoding='utf-8')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Fantasy football snake draft board')
    parser.add_argument(
        '--teams', '-t',
        type=int,
        default=None,
        help='Number of teams (default from data/board_config.json)',
    )
    parser.add_argument(
        '--source', '-s',
        choices=[s.value for s in DataSource],
        default=None,
        help='Rankings source to load',
    )
    parser.add_argument(
        '--input', '-i',
        default=None,
        help="Rankings text file ('-' for stdin); becomes the custom rankings",
    )
    parser.add_argument(
        '--pick', '-p',
        type=int,
        action='append',
        default=[],
        metavar='RANK',
        help='Toggle a player as drafted by rank (repeatable)',
    )
    parser.add_argument(
        '--rankings-file',
        default=None,
        help='Where custom rankings are saved (default from config)',
    )
    parser.add_argument(
        '--save',
        action='store_true',
        help='Persist --input as the saved custom rankings',
    )
    parser.add_argument(
        '--excel', '-x',
        default=None,
        help='Also write the board to this .xlsx file',
    )
    parser.add_argument(
        '--json', '-j',
        default=None,
        help='Also write the board to this .json file',
    )
    parser.add_argument(
        '--warnings', '-w',
        action='store_true',
        help='Report duplicate or out-of-order ranks',
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = get_config()
    level = logging.DEBUG if args.verbose else getattr(logging, config.log_level)
    setup_logging(level=level)

    if args.teams is not None and args.teams < 1:
        print(f'❌ Team count must be at least 1, got {args.teams}')
        return 1

    rankings_path = Path(args.rankings_file) if args.rankings_file else get_rankings_path()
    store = JsonRankingsStore(rankings_path)
    if args.input and not args.save:
        # Show the file without overwriting saved rankings
        store = MemoryRankingsStore(store.load())

    try:
        session = DraftSession(num_teams=args.teams, store=store)
        if args.input:
            session.raw_text = read_rankings(args.input)
        elif args.source:
            session.select_source(args.source)
    except (FileNotFoundError, ConfigError) as e:
        print(f'❌ {e}')
        return 1

    if session.error:
        print(f'❌ Parsing Error: {session.error}')
        return 1

    for rank in args.pick:
        session.toggle_picked(rank)

    logger.info(
        f'{session.data_source.value}: {len(session.players)} players, '
        f'{session.num_teams} teams, {len(session.picked)} picked'
    )

    if args.warnings:
        for warning in validate_rankings(session.players):
            print(f'⚠️  {warning}')

    print(format_board_text(session.board, session.picked))

    if args.excel:
        export_board_to_excel(args.excel, session.board, session.picked)
    if args.json:
        save_json(args.json, board_to_export(session.board, session.picked))
        logger.info(f'Board saved to {args.json}')

    return 0


if __name__ == '__main__':
    sys.exit(main())
