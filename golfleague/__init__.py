from .schemas import (
    LeagueConfig,
    LeagueData,
    Player,
    ScoringFormat,
    Team,
    Week,
    WeekScore,
)
from .models import (
    PlayerWeekEntry,
    StandingsRow,
    TeamWeekResult,
    WeekLeagueResult,
    WeekStatus,
)
from .scoring import compute_team_week_result, compute_week_team_results
from .points import generate_default_league_points, resolve_league_points
from .ranking import compute_week_league_points, rank_week_results
from .standings import (
    compute_standings,
    get_total_player_count,
    get_week_score_count,
    get_week_statuses,
    is_week_complete,
)
from .validators import validate_league
from .store import JsonFileStore, MemoryStore, UpstashStore, get_store
from .auth import AuthGate, check_credentials, make_session_token
from .service import GolfLeagueError, LeagueService, StoreWriteError, UnauthorizedError
from .export import export_standings_workbook

__all__ = [
    # Schemas
    'LeagueConfig',
    'LeagueData',
    'Player',
    'ScoringFormat',
    'Team',
    'Week',
    'WeekScore',
    # Results
    'PlayerWeekEntry',
    'StandingsRow',
    'TeamWeekResult',
    'WeekLeagueResult',
    'WeekStatus',
    # Engine
    'compute_team_week_result',
    'compute_week_team_results',
    'generate_default_league_points',
    'resolve_league_points',
    'compute_week_league_points',
    'rank_week_results',
    'compute_standings',
    'get_total_player_count',
    'get_week_score_count',
    'get_week_statuses',
    'is_week_complete',
    'validate_league',
    # Store / auth boundary
    'JsonFileStore',
    'MemoryStore',
    'UpstashStore',
    'get_store',
    'AuthGate',
    'check_credentials',
    'make_session_token',
    'GolfLeagueError',
    'LeagueService',
    'StoreWriteError',
    'UnauthorizedError',
    # Export
    'export_standings_workbook',
]
