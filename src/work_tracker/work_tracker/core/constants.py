"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STORAGE_KEY = "work-tracker-records"

RETENTION_MONTHS = 2
WEEKLY_ALLOWANCE_MIN_HOURS = 15
DEFAULT_HOURLY_WAGE = 10030

DEFAULT_CLOCK_IN = "09:00"
DEFAULT_CLOCK_OUT = "18:00"

GITHUB_API_URL = "https://api.github.com"
DEFAULT_GITHUB_PATH = "data/work-records.json"
DEFAULT_GITHUB_BRANCH = "main"
REMOTE_TIMEOUT_SECONDS = 10.0

MINUTES_PER_DAY = 24 * 60
