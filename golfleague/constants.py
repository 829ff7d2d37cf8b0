"""Constants and defaults for the golf league engine."""

# Scoring formats
STABLEFORD = 'stableford'
STROKEPLAY = 'strokeplay'

# Defaults for a freshly created league
DEFAULT_LEAGUE_NAME = 'Winter Golf League'
DEFAULT_SCORING_FORMAT = STABLEFORD
DEFAULT_NUMBER_OF_WEEKS = 4
DEFAULT_BEST_SCORES_COUNT = 5
DEFAULT_DOUBLE_POINTS_LAST_WEEK = True

# Multiplier applied to league points in the final week when enabled
DOUBLE_POINTS_MULTIPLIER = 2

# Points awarded to a finishing position the schedule does not cover
FALLBACK_POSITION_POINTS = 1

# Storage
LEAGUE_KEY = 'league-data'

# Auth
DEFAULT_AUTH_USERNAME = 'admin'
DEFAULT_AUTH_PASSWORD = 'golf'
SESSION_SALT = 'golf-league-salt'
SESSION_COOKIE_NAME = 'session'
SESSION_MAX_AGE = 60 * 60 * 24 * 30  # 30 days

# Generated ids for teams and players
ID_LENGTH = 7
