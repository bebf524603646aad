"""Example: use the service layer without Flask.

Controllers are a thin layer; the calculations live in plain services.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.work_tracker.work_tracker.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        local_store_path=settings.LOCAL_STORE_PATH,
        github_config=settings.GITHUB_CONFIG,
    )
    report = container.summary_service.weekly_report()
    print(report.label)
    for s in report.summaries:
        print(f"{s.name:<10} {s.total_hours:6.1f}h  {s.total_pay:12,.0f}원  ({s.record_count}일)")


if __name__ == "__main__":
    main()
