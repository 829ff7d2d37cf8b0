"""Per-team weekly score aggregation.

A team's weekly total is the sum of its best ``bestScoresCount`` entered
scores. "Best" depends on the scoring format:

- Stableford: higher is better, so scores are taken from the top down.
- Stroke play: lower is better, so scores are taken from the bottom up.

Absent scores (not yet entered) are never counted and never treated as zero.
"""

import logging
from collections.abc import Iterable

from .models import PlayerWeekEntry, TeamWeekResult
from .schemas import LeagueConfig, LeagueData, Team, WeekScore

logger = logging.getLogger('golfleague.scoring')


def best_first(scores: Iterable[int], config: LeagueConfig) -> list[int]:
    """Sort individual scores from best to worst under the league's format."""
    return sorted(scores, reverse=config.is_stableford)


def compute_team_week_result(
    team: Team,
    week_scores: Iterable[WeekScore],
    config: LeagueConfig,
) -> TeamWeekResult:
    """
    Select a team's counting scores for one week and total them.

    Args:
        team: Team whose roster is being scored
        week_scores: Score entries for the week (entries for other teams are ignored)
        config: League config supplying scoring format and best-N count

    Returns:
        TeamWeekResult with one entry per player (roster order) and the counting total
    """
    entered: dict[str, WeekScore] = {}
    for entry in week_scores:
        if entry.team_id != team.id:
            continue
        entered.setdefault(entry.player_id, entry)

    scores = []
    for player in team.players:
        entry = entered.get(player.id)
        scores.append(entry.score if entry is not None else None)

    # Stable sort keeps roster order between equal scores
    valid = [(index, score) for index, score in enumerate(scores) if score is not None]
    valid.sort(key=lambda item: item[1], reverse=config.is_stableford)
    counting = valid[: config.best_scores_count]
    counting_indices = {index for index, _ in counting}

    all_scores = [
        PlayerWeekEntry(
            player_id=player.id,
            player_name=player.name,
            score=score,
            counting=index in counting_indices,
        )
        for index, (player, score) in enumerate(zip(team.players, scores))
    ]

    return TeamWeekResult(
        team_id=team.id,
        team_name=team.name,
        all_scores=all_scores,
        counting_total=sum(score for _, score in counting),
    )


def compute_week_team_results(league: LeagueData, week_number: int) -> list[TeamWeekResult]:
    """
    Aggregate every team's scores for a week.

    A week that was never created behaves like a week with every score absent,
    so each team still gets a result (with nothing counting).

    Args:
        league: League snapshot
        week_number: 1-based week number

    Returns:
        One TeamWeekResult per team, in team order
    """
    week = league.get_week(week_number)
    week_scores = week.scores if week is not None else []
    if week is None:
        logger.debug(f'Week {week_number} has not been created; treating all scores as absent')

    return [compute_team_week_result(team, week_scores, league.config) for team in league.teams]
