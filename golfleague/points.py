"""League point schedules.

A schedule lists the league points awarded to each finishing position
(index 0 = 1st place). Leagues may configure their own; otherwise a default
is generated for the number of teams that posted a score that week.
"""

import logging

from .schemas import LeagueConfig

logger = logging.getLogger('golfleague.points')


def generate_default_league_points(num_teams: int) -> list[float]:
    """
    Generate the default schedule for ``num_teams`` ranked teams.

    Position k (1-based) earns 2 * (N - k), never less than 1, so the last
    place team still gets a point. For 5 teams: [8, 6, 4, 2, 1].

    Args:
        num_teams: Number of ranked teams

    Returns:
        Points per finishing position (empty when there are no teams)
    """
    if num_teams <= 0:
        return []
    return [float(max(1, 2 * (num_teams - rank))) for rank in range(1, num_teams + 1)]


def resolve_league_points(config: LeagueConfig, num_teams: int) -> list[float]:
    """
    Return the schedule to use for ``num_teams`` ranked teams.

    The configured override is used as-is when it covers every position;
    a shorter override is ignored in favour of the generated default.
    """
    if config.league_points is not None and len(config.league_points) >= num_teams:
        return list(config.league_points)

    if config.league_points is not None:
        logger.debug(
            f'League points override has {len(config.league_points)} positions '
            f'but {num_teams} teams are ranked; using default schedule'
        )
    return generate_default_league_points(num_teams)
