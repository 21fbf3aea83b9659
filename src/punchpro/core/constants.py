"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_METERS = 6_371_000

WORKING_DAYS_PER_MONTH = 22
HOURS_PER_DAY = 8
LATE_PENALTY_RATE = 0.10
OVERTIME_MULTIPLIER = 1.5
TAX_RATE = 0.20

DEFAULT_LATE_GRACE_MINUTES = 5
DEFAULT_HALF_DAY_HOURS = 4.0
DEFAULT_WORK_START = "09:00"

MIN_PASSWORD_LENGTH = 6
DEFAULT_SESSION_DAYS = 7
DEFAULT_HISTORY_LIMIT = 30
