"""Application boundary around the store, the auth gate and the engine."""

import logging

from .auth import AuthGate
from .editing import ensure_weeks, merge_week
from .models import StandingsRow, TeamWeekResult, WeekLeagueResult, WeekStatus
from .ranking import rank_week_results
from .schemas import LeagueData
from .scoring import compute_week_team_results
from .standings import compute_standings, get_week_statuses
from .store import LeagueStore

logger = logging.getLogger('golfleague.service')


class GolfLeagueError(Exception):
    """Base error for the league application layer."""


class UnauthorizedError(GolfLeagueError):
    """A write was attempted without a valid admin session."""


class StoreWriteError(GolfLeagueError):
    """The store did not accept a write."""


class LeagueService:
    """
    Reads, merges and writes league snapshots.

    Reads are public. Every write goes through the auth gate and replaces the
    stored snapshot as a whole.
    """

    def __init__(self, store: LeagueStore, gate: AuthGate):
        self.store = store
        self.gate = gate

    def load(self) -> LeagueData:
        return self.store.read()

    def save(self, league: LeagueData) -> LeagueData:
        """
        Write a snapshot.

        Raises:
            UnauthorizedError: If the auth gate refuses the write
            StoreWriteError: If the store reports failure
        """
        if not self.gate.is_authorized():
            logger.warning('Rejected league write without a valid session')
            raise UnauthorizedError('Unauthorized')
        if not self.store.write(league):
            raise StoreWriteError('Save failed')
        logger.info(
            f'Saved league "{league.config.league_name}" '
            f'({len(league.teams)} teams, {len(league.weeks)} weeks)'
        )
        return league

    def save_setup(self, league: LeagueData) -> LeagueData:
        """Save config and teams, laying out a week for every configured week number."""
        return self.save(ensure_weeks(league))

    def save_week(self, local: LeagueData, week_number: int) -> LeagueData:
        """
        Save one edited week on top of the latest stored snapshot.

        The latest config and teams are kept so setup changes made since
        ``local`` was loaded are not overwritten.
        """
        if not self.gate.is_authorized():
            logger.warning(f'Rejected week {week_number} write without a valid session')
            raise UnauthorizedError('Not authorized')
        return self.save(merge_week(self.store.read(), local, week_number))

    def standings(self) -> list[StandingsRow]:
        return compute_standings(self.load())

    def week_results(self, week_number: int) -> tuple[list[TeamWeekResult], list[WeekLeagueResult]]:
        """Team breakdowns and ranked league points for one week."""
        league = self.load()
        results = compute_week_team_results(league, week_number)
        return results, rank_week_results(results, league.config, week_number)

    def week_statuses(self) -> list[WeekStatus]:
        return get_week_statuses(self.load())
