import os
import tempfile

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

LOCAL_STORE_PATH = os.getenv("LOCAL_STORE_PATH", os.path.join(tempfile.gettempdir(), "work-records.test.json"))
# never talk to GitHub from tests
GITHUB_CONFIG: dict = {}

DEFAULT_HOURLY_WAGE = 10030
