import os

from .config import github_config_from_env, local_store_path

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

LOCAL_STORE_PATH = local_store_path("work-records.dev.json")
GITHUB_CONFIG = github_config_from_env()

DEFAULT_HOURLY_WAGE = int(os.getenv("DEFAULT_HOURLY_WAGE", "10030"))
