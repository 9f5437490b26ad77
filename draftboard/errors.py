"""Exception types for draft board parsing and configuration."""


class DraftBoardError(Exception):
    """Base class for all draftboard errors."""


class ParseError(DraftBoardError, ValueError):
    """
    A rankings line could not be turned into a player.

    Attributes:
        line: The offending line exactly as it appeared in the input
        line_number: 1-based line number within the input text
    """

    reason = 'Could not parse line. Check format.'

    def __init__(self, line: str, line_number: int | None = None):
        self.line = line
        self.line_number = line_number
        super().__init__(f'{self.reason} Problem line: "{line}"')


class MalformedLineError(ParseError):
    """Line has fewer than three whitespace-separated tokens."""

    reason = 'Malformed line detected. Each line must have rank, name, and position.'


class InvalidRankError(ParseError):
    """First token is not an integer."""

    reason = 'Could not parse rank. Rank must be a whole number.'


class InvalidFormatError(ParseError):
    """Derived name or position came out empty."""


class ConfigError(DraftBoardError):
    """Invalid configuration or unknown data source."""
