"""Backup work records.

Note: Copies the current record set (GitHub file when configured, otherwise
the local store) into ``backups/`` as plain JSON. Retention drops old records
on every save, so this is the only copy of anything past the cutoff.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.work_tracker.work_tracker.container import build_container
from src.work_tracker.work_tracker.core.exceptions import StorageError


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        local_store_path=settings.LOCAL_STORE_PATH,
        github_config=settings.GITHUB_CONFIG,
    )

    # fetch() skips the retention filter so nothing is lost from the backup
    try:
        if container.remote_storage:
            records = container.remote_storage.fetch().records
        else:
            records = container.local_storage.load()
    except StorageError as e:
        raise SystemExit(f"데이터를 읽을 수 없습니다: {e}")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"work_records_{ts}.json"
    with out_file.open("w", encoding="utf-8") as f:
        json.dump([r.to_dict() for r in records], f, ensure_ascii=False, indent=2)

    print(f"OK: Backup created: {out_file} ({len(records)} records, mode={container.record_service.mode.value})")


if __name__ == "__main__":
    main()
