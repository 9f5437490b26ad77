"""Pydantic schemas for JSON data validation."""

from pydantic import BaseModel, Field, field_validator

from .constants import CUSTOM_RANKINGS_KEY, DEFAULT_NUM_TEAMS, MAX_NUM_TEAMS


class BoardConfig(BaseModel):
    """Draft board settings."""

    num_teams: int = Field(default=DEFAULT_NUM_TEAMS, ge=1, le=MAX_NUM_TEAMS)
    default_source: str = Field(default='Sleeper', pattern=r'^(Sleeper|Yahoo|ESPN|Custom)$')
    rankings_path: str = Field(default='data/custom_rankings.json', min_length=1)
    log_level: str = Field(default='INFO')

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is a standard logging level name."""
        v = v.upper()
        if v not in {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}:
            raise ValueError(f'Invalid log level: {v}')
        return v

    class Config:
        extra = 'forbid'


class SavedRankings(BaseModel):
    """custom_rankings.json file structure."""

    custom_player_rankings: str = Field(..., alias=CUSTOM_RANKINGS_KEY)

    class Config:
        extra = 'forbid'
        populate_by_name = True


class PlayerEntry(BaseModel):
    """Player as exported to JSON."""

    rank: int
    name: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)

    class Config:
        extra = 'forbid'


class BoardExport(BaseModel):
    """Complete board export (one list per team, None for empty slots)."""

    num_teams: int = Field(..., ge=0)
    rounds: int = Field(..., ge=0)
    teams: dict[str, list[PlayerEntry | None]]
    picked: list[int] = Field(default_factory=list)

    class Config:
        extra = 'forbid'
