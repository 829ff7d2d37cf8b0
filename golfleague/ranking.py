"""Weekly ranking and league point allocation.

Teams that posted at least one score in a week are ranked on their counting
total (best-first for the format). Equal totals are split by comparing the
counting cards one by one, starting from the worst counting card and moving
up to the best; a team with fewer counting cards loses at the first missing
slot. Teams still level after every card share the rank of the first of them
and split the league points of the positions they span evenly.
"""

import logging
from itertools import groupby

from .constants import DOUBLE_POINTS_MULTIPLIER, FALLBACK_POSITION_POINTS
from .models import TeamWeekResult, WeekLeagueResult
from .points import resolve_league_points
from .schemas import LeagueConfig, LeagueData
from .scoring import best_first, compute_week_team_results

logger = logging.getLogger('golfleague.ranking')

# A card slot a team did not fill ranks below every real score
MISSING_CARD = float('inf')


def _badness(value: float, config: LeagueConfig) -> float:
    """Map a score onto a lower-is-better scale for the league's format."""
    return -value if config.is_stableford else value


def ranking_key(
    result: TeamWeekResult,
    config: LeagueConfig,
    depth: int,
) -> tuple[float, tuple[float, ...]]:
    """
    Sort key for a team's weekly result; smaller keys rank higher.

    The first element orders by counting total. The second holds the counting
    cards best-first, padded with missing slots to ``depth`` and reversed so
    the comparison starts at the worst card.

    Args:
        result: Team's aggregated week result
        config: League config (scoring format)
        depth: Largest number of counting cards among the teams being compared
    """
    cards = [_badness(score, config) for score in best_first(result.counting_scores, config)]
    cards.extend([MISSING_CARD] * (depth - len(cards)))
    return _badness(result.counting_total, config), tuple(reversed(cards))


def points_multiplier(config: LeagueConfig, week_number: int) -> int:
    """League points are doubled in the final week when the league opts in."""
    if config.double_points_last_week and week_number == config.number_of_weeks:
        return DOUBLE_POINTS_MULTIPLIER
    return 1


def rank_week_results(
    results: list[TeamWeekResult],
    config: LeagueConfig,
    week_number: int,
) -> list[WeekLeagueResult]:
    """
    Rank aggregated team results for one week and award league points.

    Teams without any entered score are left out entirely.

    Args:
        results: Aggregated results for every team that week
        config: League config
        week_number: Week being ranked (decides the double-points multiplier)

    Returns:
        Ranked results, best first; empty if no team posted a score
    """
    ranked = [result for result in results if result.has_scores]
    if not ranked:
        return []

    points_table = resolve_league_points(config, len(ranked))
    multiplier = points_multiplier(config, week_number)
    depth = max(len(result.counting_scores) for result in ranked)

    def key(result: TeamWeekResult):
        return ranking_key(result, config, depth)

    # sorted() is stable, so fully tied teams keep their team-list order
    ordered = sorted(ranked, key=key)

    week_results = []
    position = 0
    for _, group in groupby(ordered, key=key):
        tied = list(group)
        spanned = range(position, position + len(tied))
        total_points = sum(
            points_table[index] if index < len(points_table) else FALLBACK_POSITION_POINTS
            for index in spanned
        )
        league_points = total_points / len(tied)

        if len(tied) > 1:
            logger.debug(
                f'Week {week_number}: {len(tied)} teams tied at position {position + 1}, '
                f'sharing {league_points:g} points each'
            )

        for result in tied:
            week_results.append(
                WeekLeagueResult(
                    team_id=result.team_id,
                    team_name=result.team_name,
                    score_total=result.counting_total,
                    rank=position + 1,
                    league_points=league_points,
                    adjusted_league_points=league_points * multiplier,
                )
            )
        position += len(tied)

    return week_results


def compute_week_league_points(league: LeagueData, week_number: int) -> list[WeekLeagueResult]:
    """
    Rank all teams for a week and award league points.

    Args:
        league: League snapshot
        week_number: 1-based week number

    Returns:
        Ranked WeekLeagueResult list, best first
    """
    results = compute_week_team_results(league, week_number)
    return rank_week_results(results, league.config, week_number)
