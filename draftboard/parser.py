"""Parsing of pasted player rankings text."""

import logging
import re

from .errors import InvalidFormatError, InvalidRankError, MalformedLineError, ParseError
from .models import PlayerRecord

logger = logging.getLogger('draftboard.parser')

# Leading integer prefix, the same leniency as a base-10 parseInt ("12." -> 12)
RANK_PATTERN = re.compile(r'^[+-]?\d+')


def parse_rank(token: str) -> int | None:
    """
    Parse the rank token of a rankings line.

    Examples:
        "12" -> 12
        "12." -> 12
        "RB1" -> None
    """
    match = RANK_PATTERN.match(token)
    if not match:
        return None
    return int(match.group(0))


def parse_player_line(line: str, line_number: int | None = None) -> PlayerRecord:
    """
    Parse one "rank name... position" line into a PlayerRecord.

    The first token is the rank, the last token is the position, and
    everything in between is the player's name joined by single spaces.

    Examples:
        "1 Christian McCaffrey RB" -> PlayerRecord(1, "Christian McCaffrey", "RB")
        "7  Amon-Ra   St. Brown WR" -> PlayerRecord(7, "Amon-Ra St. Brown", "WR")

    Raises:
        MalformedLineError: Fewer than three tokens
        InvalidRankError: First token is not an integer
        InvalidFormatError: Empty name or position
    """
    parts = line.split()

    if len(parts) < 3:
        raise MalformedLineError(line, line_number)

    rank = parse_rank(parts[0])
    if rank is None:
        raise InvalidRankError(line, line_number)

    position = parts[-1]
    name = ' '.join(parts[1:-1])

    if not name or not position:
        raise InvalidFormatError(line, line_number)

    return PlayerRecord(rank=rank, name=name, position=position)


def parse_player_text(text: str) -> list[PlayerRecord]:
    """
    Parse a block of rankings text, one player per line.

    Blank lines are skipped. Parsing is all-or-nothing: the first bad line
    raises and no players are returned. Ranks are neither sorted nor
    deduplicated; output order is input line order.

    Args:
        text: Raw rankings text

    Returns:
        List of PlayerRecord in input order

    Raises:
        ParseError: On the first line that cannot be parsed
    """
    players = []

    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            players.append(parse_player_line(line, line_number))
        except ParseError as e:
            logger.debug(f'Parse failed on line {line_number}: {type(e).__name__}')
            raise

    logger.debug(f'Parsed {len(players)} players')
    return players


def parse_player_text_safe(text: str) -> tuple[list[PlayerRecord], str | None]:
    """
    Parse rankings text without raising.

    Returns:
        Tuple of (players, error_message)
        - players: Parsed players, or an empty list on any error
        - error_message: None if valid, display message if invalid
    """
    try:
        return parse_player_text(text), None
    except ParseError as e:
        logger.warning(str(e))
        return [], str(e)


def format_player_line(player: PlayerRecord) -> str:
    """Serialize a player back to "rank name position" form."""
    return f'{player.rank} {player.name} {player.position}'


def format_player_text(players: list[PlayerRecord]) -> str:
    """Serialize players back to rankings text, one per line."""
    return '\n'.join(format_player_line(p) for p in players)
