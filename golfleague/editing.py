"""Snapshot editing operations.

Every function takes a LeagueData snapshot and returns a new one; the input is
never modified. Edits that name an unknown team, player or week return the
snapshot unchanged.
"""

import logging
import uuid
from typing import Any, Optional

from .constants import ID_LENGTH
from .schemas import LeagueConfig, LeagueData, Player, Team, Week, WeekScore

logger = logging.getLogger('golfleague.editing')


def generate_id() -> str:
    """Short random id for a new team or player."""
    return uuid.uuid4().hex[:ID_LENGTH]


def _replace_team(league: LeagueData, team: Team) -> LeagueData:
    teams = [team if t.id == team.id else t for t in league.teams]
    return league.model_copy(update={'teams': teams})


def _without_scores(league: LeagueData, predicate) -> list[Week]:
    return [
        week.model_copy(update={'scores': [s for s in week.scores if not predicate(s)]})
        for week in league.weeks
    ]


def update_config(league: LeagueData, **changes: Any) -> LeagueData:
    """
    Replace config settings, validating the result.

    Args:
        league: League snapshot
        **changes: Config fields by Python name (e.g. number_of_weeks=6)

    Raises:
        pydantic.ValidationError: If the new config is invalid
    """
    config = LeagueConfig.model_validate({**league.config.model_dump(), **changes})
    return league.model_copy(update={'config': config})


def add_team(league: LeagueData, name: Optional[str] = None) -> LeagueData:
    """Append a new empty team, named 'Team N' unless a name is given."""
    team = Team(id=generate_id(), name=name or f'Team {len(league.teams) + 1}')
    return league.model_copy(update={'teams': [*league.teams, team]})


def rename_team(league: LeagueData, team_id: str, name: str) -> LeagueData:
    team = league.get_team(team_id)
    if team is None:
        logger.debug(f'Cannot rename unknown team {team_id}')
        return league
    return _replace_team(league, team.model_copy(update={'name': name}))


def remove_team(league: LeagueData, team_id: str) -> LeagueData:
    """Remove a team along with its score entries in every week."""
    if league.get_team(team_id) is None:
        logger.debug(f'Cannot remove unknown team {team_id}')
        return league
    return league.model_copy(
        update={
            'teams': [t for t in league.teams if t.id != team_id],
            'weeks': _without_scores(league, lambda s: s.team_id == team_id),
        }
    )


def add_player(league: LeagueData, team_id: str, name: Optional[str] = None) -> LeagueData:
    """Append a new player to a team, named 'Player N' unless a name is given."""
    team = league.get_team(team_id)
    if team is None:
        logger.debug(f'Cannot add player to unknown team {team_id}')
        return league
    player = Player(id=generate_id(), name=name or f'Player {len(team.players) + 1}')
    return _replace_team(league, team.model_copy(update={'players': [*team.players, player]}))


def rename_player(league: LeagueData, team_id: str, player_id: str, name: str) -> LeagueData:
    team = league.get_team(team_id)
    if team is None or team.get_player(player_id) is None:
        logger.debug(f'Cannot rename unknown player {player_id} on team {team_id}')
        return league
    players = [
        p.model_copy(update={'name': name}) if p.id == player_id else p for p in team.players
    ]
    return _replace_team(league, team.model_copy(update={'players': players}))


def remove_player(league: LeagueData, team_id: str, player_id: str) -> LeagueData:
    """Remove a player from a team along with their score entries."""
    team = league.get_team(team_id)
    if team is None or team.get_player(player_id) is None:
        logger.debug(f'Cannot remove unknown player {player_id} from team {team_id}')
        return league
    players = [p for p in team.players if p.id != player_id]
    league = _replace_team(league, team.model_copy(update={'players': players}))
    return league.model_copy(
        update={
            'weeks': _without_scores(
                league, lambda s: s.team_id == team_id and s.player_id == player_id
            )
        }
    )


def set_score(
    league: LeagueData,
    week_number: int,
    team_id: str,
    player_id: str,
    score: Optional[int],
) -> LeagueData:
    """
    Enter (or clear, with score=None) a player's score for a week.

    The week and the player's entry are created when missing. Scores for weeks
    outside 1..numberOfWeeks or for players not on the team are ignored.
    """
    if not 1 <= week_number <= league.config.number_of_weeks:
        logger.debug(f'Ignoring score for week {week_number}: outside configured weeks')
        return league
    team = league.get_team(team_id)
    if team is None or team.get_player(player_id) is None:
        logger.debug(f'Ignoring score for unknown player {player_id} on team {team_id}')
        return league

    new_entry = WeekScore(player_id=player_id, team_id=team_id, score=score)
    week = league.get_week(week_number) or Week(week_number=week_number)

    scores = []
    replaced = False
    for entry in week.scores:
        if not replaced and entry.team_id == team_id and entry.player_id == player_id:
            scores.append(new_entry)
            replaced = True
        else:
            scores.append(entry)
    if not replaced:
        scores.append(new_entry)

    return replace_week(league, week.model_copy(update={'scores': scores}))


def replace_week(league: LeagueData, week: Week) -> LeagueData:
    """Swap in a week, appending it if the league does not have it yet."""
    weeks = list(league.weeks)
    for index, existing in enumerate(weeks):
        if existing.week_number == week.week_number:
            weeks[index] = week
            break
    else:
        weeks.append(week)
    return league.model_copy(update={'weeks': weeks})


def blank_week(league: LeagueData, week_number: int) -> Week:
    """A week with an unentered score for every player on every team."""
    scores = [
        WeekScore(player_id=player.id, team_id=team.id, score=None)
        for team in league.teams
        for player in team.players
    ]
    return Week(week_number=week_number, scores=scores)


def ensure_weeks(league: LeagueData) -> LeagueData:
    """
    Lay out weeks 1..numberOfWeeks.

    Existing weeks are kept as they are, missing weeks are created blank, and
    weeks beyond the configured count are dropped.
    """
    weeks = [
        league.get_week(week_number) or blank_week(league, week_number)
        for week_number in range(1, league.config.number_of_weeks + 1)
    ]
    return league.model_copy(update={'weeks': weeks})


def merge_week(latest: LeagueData, local: LeagueData, week_number: int) -> LeagueData:
    """
    Overlay one locally edited week onto the latest stored snapshot.

    Config and teams come from ``latest`` so concurrent setup changes survive;
    only the edited week is taken from ``local``.
    """
    local_week = local.get_week(week_number)
    if local_week is None:
        return latest
    return replace_week(latest, local_week)
