from __future__ import annotations

import importlib
import sys
from datetime import timedelta
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.work_tracker.work_tracker.common.datetime_utils import now_local, to_iso
from src.work_tracker.work_tracker.container import build_container

DEMO_SHIFTS = [
    ("김민지", "09:00", "18:00", 10030),
    ("이서준", "13:00", "22:00", 10030),
    ("박하늘", "22:00", "06:00", 12000),
]


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        local_store_path=settings.LOCAL_STORE_PATH,
        github_config=settings.GITHUB_CONFIG,
    )
    service = container.record_service

    today = now_local().date()
    for days_ago in range(7):
        work_date = to_iso(today - timedelta(days=days_ago))
        for name, clock_in, clock_out, wage in DEMO_SHIFTS:
            service.add_record(date=work_date, name=name, clock_in=clock_in, clock_out=clock_out, hourly_wage=wage)

    print(f"OK: Seeded {len(service.records)} records -> mode={service.mode.value}")


if __name__ == "__main__":
    main()
