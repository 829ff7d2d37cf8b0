"""Pydantic schemas for the persisted league snapshot.

JSON keys are camelCase (``playerId``, ``weekNumber``, ...); Python attributes
are snake_case. Both spellings are accepted when validating input.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .constants import (
    DEFAULT_BEST_SCORES_COUNT,
    DEFAULT_DOUBLE_POINTS_LAST_WEEK,
    DEFAULT_LEAGUE_NAME,
    DEFAULT_NUMBER_OF_WEEKS,
    DEFAULT_SCORING_FORMAT,
    STABLEFORD,
    STROKEPLAY,
)


class ScoringFormat(str, Enum):
    """How individual scores are ordered."""

    STABLEFORD = STABLEFORD  # higher is better
    STROKEPLAY = STROKEPLAY  # lower is better


class Player(BaseModel):
    """Player on a team."""

    id: str = Field(..., min_length=1)
    name: str

    class Config:
        extra = 'forbid'
        frozen = True


class Team(BaseModel):
    """Team with its ordered player list."""

    id: str = Field(..., min_length=1)
    name: str
    players: list[Player] = Field(default_factory=list)

    def get_player(self, player_id: str) -> Optional[Player]:
        """Look up a player on this team by id."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    class Config:
        extra = 'forbid'
        frozen = True


class WeekScore(BaseModel):
    """One player's entry for one week. ``score=None`` means not yet entered."""

    player_id: str = Field(..., alias='playerId')
    team_id: str = Field(..., alias='teamId')
    score: Optional[int] = None

    @property
    def is_entered(self) -> bool:
        return self.score is not None

    class Config:
        extra = 'forbid'
        frozen = True
        populate_by_name = True


class Week(BaseModel):
    """Score entries for one league week."""

    week_number: int = Field(..., ge=1, alias='weekNumber')
    scores: list[WeekScore] = Field(default_factory=list)

    class Config:
        extra = 'forbid'
        frozen = True
        populate_by_name = True


class LeagueConfig(BaseModel):
    """League configuration settings."""

    league_name: str = Field(DEFAULT_LEAGUE_NAME, alias='leagueName')
    scoring_format: ScoringFormat = Field(ScoringFormat(DEFAULT_SCORING_FORMAT), alias='scoringFormat')
    number_of_weeks: int = Field(DEFAULT_NUMBER_OF_WEEKS, ge=1, alias='numberOfWeeks')
    best_scores_count: int = Field(DEFAULT_BEST_SCORES_COUNT, ge=1, alias='bestScoresCount')
    double_points_last_week: bool = Field(
        DEFAULT_DOUBLE_POINTS_LAST_WEEK, alias='doublePointsLastWeek'
    )
    league_points: Optional[list[float]] = Field(None, alias='leaguePoints')

    @field_validator('league_points')
    @classmethod
    def validate_league_points(cls, v):
        """Ensure every finishing position is worth a non-negative amount."""
        if v is None:
            return v
        for position, points in enumerate(v, 1):
            if points < 0:
                raise ValueError(f'League points for position {position} must be >= 0, got {points}')
        return v

    @property
    def is_stableford(self) -> bool:
        return self.scoring_format == ScoringFormat.STABLEFORD

    class Config:
        extra = 'forbid'
        frozen = True
        populate_by_name = True


class LeagueData(BaseModel):
    """Root aggregate: the whole league as stored under a single key."""

    config: LeagueConfig = Field(default_factory=LeagueConfig)
    teams: list[Team] = Field(default_factory=list)
    weeks: list[Week] = Field(default_factory=list)

    @classmethod
    def default(cls) -> 'LeagueData':
        """A new league with default settings and no teams or weeks."""
        return cls()

    def get_week(self, week_number: int) -> Optional[Week]:
        """Return the week with this number, or None if it was never created."""
        for week in self.weeks:
            if week.week_number == week_number:
                return week
        return None

    def get_team(self, team_id: str) -> Optional[Team]:
        for team in self.teams:
            if team.id == team_id:
                return team
        return None

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys, writing ``score: null`` for absent scores."""
        data = self.model_dump(mode='json', by_alias=True)
        if data['config'].get('leaguePoints') is None:
            data['config'].pop('leaguePoints', None)
        return data

    class Config:
        extra = 'forbid'
        frozen = True
