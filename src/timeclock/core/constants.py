"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Built-in kiosk credential that always authenticates as the administrator.
ADMIN_PIN = "000000"
ADMIN_WORKER_ID = "admin"
ADMIN_FULL_NAME = "Administrator"

PIN_LENGTH = 6
VERIFICATION_CODE_LENGTH = 6
VERIFICATION_CODE_TTL_MINUTES = 10

MS_PER_HOUR = 3_600_000

WEEKLY_FETCH_DAYS = 7
HISTORY_RANGE_DAYS = {"week": 7, "month": 30, "all": 90}

ALL_REQUESTS_LIMIT = 50

DEMO_ID_PREFIX = "demo-"
