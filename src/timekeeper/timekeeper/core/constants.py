"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PAY_PERIOD_DAYS = 14

USERS_COLLECTION = "users"
SHIFTS_COLLECTION = "shifts"
SETTINGS_COLLECTION = "settings"
SETTINGS_DOC_ID = "config"

DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M"
