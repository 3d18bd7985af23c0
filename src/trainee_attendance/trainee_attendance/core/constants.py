"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_WORK_START_TIME = "09:00"
DEFAULT_WORK_END_TIME = "18:00"

BLANK_TIME_STEP_MINUTES = 15
# Exclusive upper bound: eight hours.
BLANK_TIME_LIMIT_MINUTES = 480
