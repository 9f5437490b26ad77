"""Draft board configuration management."""

import logging
from functools import lru_cache
from pathlib import Path

from .presets import DataSource, to_data_source
from .schemas import BoardConfig
from .utils import load_json

logger = logging.getLogger('draftboard.config')

PROJECT_DIR = Path(__file__).parent.parent
CONFIG_PATH = PROJECT_DIR / 'data' / 'board_config.json'


def load_config(path: Path | str) -> BoardConfig:
    """
    Load and validate a board config file.

    A missing file yields the default settings.

    Raises:
        ValueError: If the file exists but has invalid structure
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f'No config at {path}, using defaults')
        return BoardConfig()
    return load_json(path, schema=BoardConfig)


@lru_cache(maxsize=1)
def get_config() -> BoardConfig:
    """
    Load configuration from data/board_config.json.

    Configuration is cached after first load.

    Example:
        from draftboard.config import get_config
        print(get_config().num_teams)
    """
    return load_config(CONFIG_PATH)


def get_num_teams() -> int:
    """Get the default team count from config."""
    return get_config().num_teams


def get_default_source() -> DataSource:
    """Get the default rankings source from config."""
    return to_data_source(get_config().default_source)


def get_rankings_path() -> Path:
    """Get the custom rankings file path, resolved against the project dir."""
    path = Path(get_config().rankings_path)
    return path if path.is_absolute() else PROJECT_DIR / path


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime.
    """
    get_config.cache_clear()
