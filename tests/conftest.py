"""Shared fixtures for league tests."""

from typing import Optional

import pytest

from golfleague.config import clear_settings_cache
from golfleague.schemas import LeagueConfig, LeagueData, Player, Team, Week, WeekScore

ENV_VARS = [
    'AUTH_USERNAME',
    'AUTH_PASSWORD',
    'KV_REST_API_URL',
    'KV_REST_API_TOKEN',
    'UPSTASH_REDIS_REST_URL',
    'UPSTASH_REDIS_REST_TOKEN',
    'GOLF_LEAGUE_DATA_FILE',
    'GOLF_LEAGUE_STORE_TIMEOUT',
    'GOLF_LEAGUE_ENV',
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test against default settings."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


def build_league(
    weeks: dict[int, dict[str, list[Optional[int]]]],
    scoring_format: str = 'stableford',
    best_scores_count: int = 2,
    number_of_weeks: int = 4,
    double_points_last_week: bool = False,
    league_points: Optional[list[float]] = None,
    team_sizes: Optional[dict[str, int]] = None,
) -> LeagueData:
    """
    Build a league from per-week score lists.

    ``weeks`` maps week number -> team id -> scores in roster order. Player
    ids are '<team>-p<n>'. Teams appear in first-seen order unless
    ``team_sizes`` (team id -> player count) is given.
    """
    if team_sizes is None:
        team_sizes = {}
        for week_scores in weeks.values():
            for team_id, scores in week_scores.items():
                team_sizes[team_id] = max(team_sizes.get(team_id, 0), len(scores))

    teams = [
        Team(
            id=team_id,
            name=f'Team {team_id.upper()}',
            players=[
                Player(id=f'{team_id}-p{n}', name=f'{team_id.upper()} Player {n}')
                for n in range(1, size + 1)
            ],
        )
        for team_id, size in team_sizes.items()
    ]

    week_models = [
        Week(
            week_number=week_number,
            scores=[
                WeekScore(player_id=f'{team_id}-p{n}', team_id=team_id, score=score)
                for team_id, scores in week_scores.items()
                for n, score in enumerate(scores, 1)
            ],
        )
        for week_number, week_scores in weeks.items()
    ]

    config = LeagueConfig(
        league_name='Test League',
        scoring_format=scoring_format,
        number_of_weeks=number_of_weeks,
        best_scores_count=best_scores_count,
        double_points_last_week=double_points_last_week,
        league_points=league_points,
    )
    return LeagueData(config=config, teams=teams, weeks=week_models)


@pytest.fixture
def make_league():
    """Factory fixture wrapping build_league."""
    return build_league


@pytest.fixture
def sample_league():
    """Three teams of three over four weeks, two scores counting."""
    return build_league(
        {
            1: {'a': [36, 30, 28], 'b': [34, 33, None], 'c': [25, 40, 20]},
            2: {'a': [None, None, None], 'b': [31, 29, 35], 'c': [30, 30, 30]},
        },
        best_scores_count=2,
        number_of_weeks=4,
        double_points_last_week=True,
    )
