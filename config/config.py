"""Settings shared by every environment module."""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]


def github_config_from_env() -> dict:
    """Owner, repo and token present -> GitHub storage; otherwise local only."""
    return {
        "owner": os.getenv("GITHUB_OWNER"),
        "repo": os.getenv("GITHUB_REPO"),
        "token": os.getenv("GITHUB_TOKEN"),
        "path": os.getenv("GITHUB_PATH", "data/work-records.json"),
        "branch": os.getenv("GITHUB_BRANCH", "main"),
    }


def local_store_path(default_name: str) -> str:
    data_dir = Path(os.getenv("DATA_DIR", str(BASE_DIR / "data")))
    return os.getenv("LOCAL_STORE_PATH", str(data_dir / default_name))
