"""Application-wide constants.

Centralizes magic numbers to avoid duplication.
"""

# ============== TIME CONSTANTS (seconds) ==============
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400

# Session TTL in Redis; the JWT's own exp still decides validity
SESSION_TTL_SECONDS = 7 * SECONDS_PER_DAY

# Local cart snapshots; the server cart stays authoritative
CART_SNAPSHOT_TTL_SECONDS = 2 * SECONDS_PER_HOUR
CART_SNAPSHOT_MAX_USERS = 10000

# ============== PAGINATION ==============
DEFAULT_PAGE_SIZE = 5
MAX_VISIBLE_PAGES = 5
PAGE_GAP = "..."

# ============== VALIDATION ==============
MAX_DESCRIPTION_LENGTH = 1000
MIN_PASSWORD_LENGTH = 6
MIN_QUANTITY = 1
MAX_QUANTITY = 99

# ============== RATE LIMITING ==============
RATE_LIMIT_MESSAGES = 30  # per minute
RATE_LIMIT_CALLBACKS = 60  # per minute
