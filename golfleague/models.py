"""Result containers produced by the scoring engine."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class PlayerWeekEntry:
    """One player's line in a team's weekly breakdown."""
    player_id: str
    player_name: str
    score: Optional[int] = None
    counting: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            'playerId': self.player_id,
            'playerName': self.player_name,
            'score': self.score,
            'counting': self.counting,
        }


@dataclass(frozen=True)
class TeamWeekResult:
    """A team's scores for one week and the total of its counting scores."""
    team_id: str
    team_name: str
    all_scores: list[PlayerWeekEntry] = field(default_factory=list)  # roster order
    counting_total: int = 0

    @property
    def has_scores(self) -> bool:
        """True if at least one player has an entered score."""
        return any(entry.score is not None for entry in self.all_scores)

    @property
    def counting_scores(self) -> list[int]:
        """Scores of the counting entries, in roster order."""
        return [e.score for e in self.all_scores if e.counting and e.score is not None]

    def to_dict(self) -> dict[str, Any]:
        return {
            'teamId': self.team_id,
            'teamName': self.team_name,
            'allScores': [entry.to_dict() for entry in self.all_scores],
            'countingTotal': self.counting_total,
        }


@dataclass(frozen=True)
class WeekLeagueResult:
    """A ranked team's finishing position and league points for one week."""
    team_id: str
    team_name: str
    score_total: int
    rank: int
    league_points: float
    adjusted_league_points: float  # after the double-points multiplier

    def to_dict(self) -> dict[str, Any]:
        return {
            'teamId': self.team_id,
            'teamName': self.team_name,
            'scoreTotal': self.score_total,
            'rank': self.rank,
            'leaguePoints': self.league_points,
            'adjustedLeaguePoints': self.adjusted_league_points,
        }


@dataclass(frozen=True)
class StandingsRow:
    """Overall standings line for a team."""
    rank: int
    team_id: str
    team_name: str
    weekly_totals: list[Optional[float]] = field(default_factory=list)  # None = no score that week
    overall_total: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            'rank': self.rank,
            'teamId': self.team_id,
            'teamName': self.team_name,
            'weeklyTotals': list(self.weekly_totals),
            'overallTotal': self.overall_total,
        }


@dataclass(frozen=True)
class WeekStatus:
    """Entry progress for one configured week."""
    week_number: int
    score_count: int
    player_count: int

    @property
    def has_scores(self) -> bool:
        return self.score_count > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            'weekNumber': self.week_number,
            'scoreCount': self.score_count,
            'playerCount': self.player_count,
            'hasScores': self.has_scores,
        }
