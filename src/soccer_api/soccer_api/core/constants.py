"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOKEN_TTL_SECONDS = 2 * 60 * 60
DEFAULT_PAGE_OFFSET = 0
DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100
MIN_PASSWORD_LENGTH = 6
TOKEN_SALT = "soccer-api.auth"

# Range of the INTEGER columns (ids, counters, numero).
MIN_DB_INT = -(2**31)
MAX_DB_INT = 2**31 - 1
