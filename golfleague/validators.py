"""Validation functions for league snapshots.

These checks report problems without raising. The scoring engine never calls
them: it stays total over any well-typed snapshot.
"""

from collections import Counter

from .schemas import LeagueData


def _duplicates(values) -> list[str]:
    return sorted(str(value) for value, count in Counter(values).items() if count > 1)


def validate_teams(league: LeagueData) -> list[str]:
    """
    Validate team and player identity.

    Checks:
    - Team ids are unique
    - Each player id belongs to exactly one team

    Args:
        league: League snapshot

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    duplicate_teams = _duplicates(team.id for team in league.teams)
    if duplicate_teams:
        errors.append(f'Duplicate team ids: {", ".join(duplicate_teams)}')

    player_ids = [player.id for team in league.teams for player in team.players]
    duplicate_players = _duplicates(player_ids)
    if duplicate_players:
        errors.append(f'Players listed more than once: {", ".join(duplicate_players)}')

    return errors


def validate_weeks(league: LeagueData) -> list[str]:
    """
    Validate week numbering and score entries.

    Checks:
    - Week numbers are unique and within the configured number of weeks
    - Every score entry refers to a known team and a player on that team
    - No player has two entries in the same week

    Args:
        league: League snapshot

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    number_of_weeks = league.config.number_of_weeks

    duplicate_weeks = _duplicates(week.week_number for week in league.weeks)
    if duplicate_weeks:
        errors.append(f'Duplicate weeks: {", ".join(duplicate_weeks)}')

    for week in league.weeks:
        label = f'Week {week.week_number}'
        if week.week_number > number_of_weeks:
            errors.append(f'{label} is beyond the configured {number_of_weeks} weeks')

        for entry in week.scores:
            team = league.get_team(entry.team_id)
            if team is None:
                errors.append(f'{label} has a score for unknown team {entry.team_id}')
            elif team.get_player(entry.player_id) is None:
                errors.append(
                    f'{label} has a score for player {entry.player_id} who is not on {team.name}'
                )

        duplicate_entries = _duplicates(
            f'{entry.team_id}/{entry.player_id}' for entry in week.scores
        )
        if duplicate_entries:
            errors.append(f'{label} has duplicate entries: {", ".join(duplicate_entries)}')

    return errors


def validate_league_points(league: LeagueData) -> list[str]:
    """
    Check the league points override against the league.

    Sanity checks:
    - Override covers every team (otherwise the default schedule is used)
    - Override never rewards a lower finish with more points

    Args:
        league: League snapshot

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []
    points = league.config.league_points
    if points is None:
        return warnings

    num_teams = len(league.teams)
    if len(points) < num_teams:
        warnings.append(
            f'League points override lists {len(points)} positions for {num_teams} teams '
            f'(default schedule will be used when more than {len(points)} teams score)'
        )

    for position in range(1, len(points)):
        if points[position] > points[position - 1]:
            warnings.append(
                f'Position {position + 1} earns more league points than position {position} '
                f'({points[position]:g} > {points[position - 1]:g})'
            )

    return warnings


def validate_rosters(league: LeagueData) -> list[str]:
    """Warn about teams that cannot field the full number of counting scores."""
    warnings = []
    best = league.config.best_scores_count
    for team in league.teams:
        if len(team.players) < best:
            warnings.append(
                f'{team.name} has {len(team.players)} players but {best} scores count each week'
            )
    return warnings


def validate_league(league: LeagueData) -> tuple[list[str], list[str]]:
    """
    Validate a whole league snapshot.

    Args:
        league: League snapshot

    Returns:
        Tuple of (errors, warnings)
        - errors: Inconsistent data that should be fixed
        - warnings: Issues to review that do not block scoring
    """
    errors = validate_teams(league) + validate_weeks(league)
    warnings = validate_league_points(league) + validate_rosters(league)
    return errors, warnings
