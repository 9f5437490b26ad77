"""Built-in ranking sources."""

from enum import Enum

from .constants import ESPN_PLAYER_LIST, SLEEPER_PLAYER_LIST, YAHOO_PLAYER_LIST
from .errors import ConfigError


class DataSource(str, Enum):
    SLEEPER = 'Sleeper'
    YAHOO = 'Yahoo'
    ESPN = 'ESPN'
    CUSTOM = 'Custom'


PRESET_TEXT = {
    DataSource.SLEEPER: SLEEPER_PLAYER_LIST,
    DataSource.YAHOO: YAHOO_PLAYER_LIST,
    DataSource.ESPN: ESPN_PLAYER_LIST,
}


def to_data_source(value: 'DataSource | str') -> DataSource:
    """Coerce a source name (case-insensitive) to a DataSource."""
    if isinstance(value, DataSource):
        return value
    for source in DataSource:
        if source.value.lower() == str(value).strip().lower():
            return source
    valid = ', '.join(s.value for s in DataSource)
    raise ConfigError(f'Unknown data source: {value!r} (expected one of: {valid})')


def get_preset_text(source: 'DataSource | str') -> str:
    """
    Get the bundled rankings text for a preset source.

    Raises:
        ConfigError: For Custom (which has no bundled text) or unknown names
    """
    source = to_data_source(source)
    if source is DataSource.CUSTOM:
        raise ConfigError('Custom rankings are loaded from the rankings store, not a preset')
    return PRESET_TEXT[source]


def preset_sources() -> list[DataSource]:
    """Sources that ship with bundled rankings."""
    return list(PRESET_TEXT)
