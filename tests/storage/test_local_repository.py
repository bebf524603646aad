import json

import pytest

from src.work_tracker.work_tracker.core.exceptions import StorageError
from src.work_tracker.work_tracker.storage.local_repository import LocalRecordStorage


def test_missing_file_loads_empty(tmp_path):
    assert LocalRecordStorage(tmp_path / "store.json").load() == []


def test_save_then_load(tmp_path, make_record):
    storage = LocalRecordStorage(tmp_path / "nested" / "store.json")
    records = [make_record("2025-03-05", "김민지", wage=10030), make_record("2025-03-04", "Lee")]

    storage.save(records)

    assert storage.load() == records


def test_single_key_holds_serialized_array_and_other_keys_survive(tmp_path, make_record):
    path = tmp_path / "store.json"
    path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
    storage = LocalRecordStorage(path)

    storage.save([make_record("2025-03-05", "Lee")])

    store = json.loads(path.read_text(encoding="utf-8"))
    assert store["theme"] == "dark"
    items = json.loads(store["work-tracker-records"])
    assert items[0]["clockIn"] == "09:00"
    assert items[0]["workHours"] == 9.0
    # absent wage is omitted, not stored as 0
    assert "hourlyWage" not in items[0]


def test_malformed_file_raises_storage_error(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StorageError):
        LocalRecordStorage(path).load()


def test_malformed_value_raises_storage_error(tmp_path):
    path = tmp_path / "store.json"
    path.write_text(json.dumps({"work-tracker-records": "[{\"id\": 1}"}), encoding="utf-8")

    with pytest.raises(StorageError):
        LocalRecordStorage(path).load()
