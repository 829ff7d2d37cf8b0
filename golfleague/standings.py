"""Season standings built from weekly league points."""

import logging
from typing import Optional

from .models import StandingsRow, WeekStatus
from .ranking import compute_week_league_points
from .schemas import LeagueData

logger = logging.getLogger('golfleague.standings')


def compute_standings(league: LeagueData) -> list[StandingsRow]:
    """
    Compute overall standings across all configured weeks.

    Each team gets its adjusted league points for every week 1..numberOfWeeks,
    or None for weeks it posted no score. Rows are ordered by total league
    points (highest first, whatever the scoring format). Equal totals share
    the rank of the first row in the run; the next total resumes at its
    1-based position.

    Args:
        league: League snapshot

    Returns:
        One StandingsRow per team, ranked
    """
    weekly_points: list[dict[str, float]] = []
    for week_number in range(1, league.config.number_of_weeks + 1):
        results = compute_week_league_points(league, week_number)
        weekly_points.append({r.team_id: r.adjusted_league_points for r in results})

    unranked = []
    for team in league.teams:
        weekly_totals: list[Optional[float]] = [points.get(team.id) for points in weekly_points]
        overall_total = sum(total for total in weekly_totals if total is not None)
        unranked.append((team, weekly_totals, overall_total))

    unranked.sort(key=lambda row: row[2], reverse=True)

    rows: list[StandingsRow] = []
    for position, (team, weekly_totals, overall_total) in enumerate(unranked, 1):
        if rows and overall_total == rows[-1].overall_total:
            rank = rows[-1].rank
        else:
            rank = position
        rows.append(
            StandingsRow(
                rank=rank,
                team_id=team.id,
                team_name=team.name,
                weekly_totals=weekly_totals,
                overall_total=overall_total,
            )
        )

    logger.debug(f'Computed standings for {len(rows)} teams over {len(weekly_points)} weeks')
    return rows


def is_week_complete(league: LeagueData, week_number: int) -> bool:
    """True if any score has been entered for the week."""
    week = league.get_week(week_number)
    if week is None:
        return False
    return any(entry.score is not None for entry in week.scores)


def get_week_score_count(league: LeagueData, week_number: int) -> int:
    """Number of entered scores for the week."""
    week = league.get_week(week_number)
    if week is None:
        return 0
    return sum(1 for entry in week.scores if entry.score is not None)


def get_total_player_count(league: LeagueData) -> int:
    """Number of players across all teams."""
    return sum(len(team.players) for team in league.teams)


def get_week_statuses(league: LeagueData) -> list[WeekStatus]:
    """Entry progress for every configured week."""
    player_count = get_total_player_count(league)
    return [
        WeekStatus(
            week_number=week_number,
            score_count=get_week_score_count(league, week_number),
            player_count=player_count,
        )
        for week_number in range(1, league.config.number_of_weeks + 1)
    ]
