from __future__ import annotations

import pytest

from src.work_tracker.work_tracker.main import create_app
from src.work_tracker.work_tracker.container import build_container
from src.work_tracker.work_tracker.core.exceptions import RemoteStorageError
from src.work_tracker.work_tracker.export.excel import XLSX_MIMETYPE


class BrokenRemote:
    def load(self, **kwargs):
        return []

    def save(self, records):
        raise RemoteStorageError("GitHub API error: 502", status_code=502)


def _client(tmp_path, now, remote=None):
    container = build_container(
        local_store_path=tmp_path / "store.json",
        remote_storage=remote,
        clock=lambda: now,
    )
    app = create_app("config.testing", container=container)
    return app.test_client()


@pytest.fixture
def client(tmp_path, fixed_now):
    return _client(tmp_path, fixed_now)


def _add(client, **overrides):
    payload = {"date": "2025-03-05", "name": "김민지", "clockIn": "09:00", "clockOut": "18:00", "hourlyWage": 10030}
    payload.update(overrides)
    return client.post("/api/records", json=payload)


def test_create_and_list(client):
    res = _add(client)

    assert res.status_code == 201
    body = res.get_json()
    assert body["success"] is True
    assert body["record"]["workHours"] == 9.0

    listed = client.get("/api/records").get_json()
    assert [r["name"] for r in listed["records"]] == ["김민지"]
    assert listed["mode"] == "local"


def test_create_rejects_missing_times(client):
    res = _add(client, clockOut="")

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_update_and_delete(client):
    record_id = _add(client).get_json()["record"]["id"]

    res = client.put(f"/api/records/{record_id}", json={"id": record_id, "clockOut": "12:00", "workHours": 99})
    assert res.status_code == 200
    assert res.get_json()["record"]["workHours"] == 3.0

    assert client.put(f"/api/records/{record_id}", json={"color": "red"}).status_code == 400

    assert client.delete(f"/api/records/{record_id}").status_code == 200
    assert client.delete(f"/api/records/{record_id}").status_code == 404


def test_update_unknown_record(client):
    assert client.patch("/api/records/nope", json={"name": "Lee"}).status_code == 404


def test_weekly_summary(client):
    _add(client)
    _add(client, date="2025-03-03", clockIn="09:00", clockOut="17:00")
    _add(client, date="2025-02-28", name="Lee")

    body = client.get("/api/summary/weekly").get_json()

    assert body["label"] == "3월 2일 - 8일"
    assert body["isCurrent"] is True
    assert [s["name"] for s in body["summaries"]] == ["김민지"]
    assert body["summaries"][0]["totalHours"] == 17.0
    assert body["summaries"][0]["totalPayLabel"] == "170,510원"
    assert body["weekly"]["qualifiesForWeeklyAllowance"] is True

    previous = client.get("/api/summary/weekly?offset=-1").get_json()
    assert previous["label"] == "2월 23일 - 3월 1일"
    assert [s["name"] for s in previous["summaries"]] == ["Lee"]


def test_monthly_summary_label(client):
    body = client.get("/api/summary/monthly?offset=-3").get_json()

    assert body["label"] == "2024년 12월"
    assert body["summaries"] == []
    assert body["totalPayLabel"] == "0원"


def test_calendar_month_validation(client):
    assert client.get("/api/calendar?year=2025&month=13").status_code == 400

    body = client.get("/api/calendar").get_json()
    assert body["year"] == 2025
    assert body["month"] == 3


def test_monthly_export(client):
    assert client.get("/export/monthly.xlsx").status_code == 404

    _add(client)
    res = client.get("/export/monthly.xlsx")

    assert res.status_code == 200
    assert res.mimetype == XLSX_MIMETYPE
    assert res.data[:2] == b"PK"


def test_status_and_defaults(client):
    status = client.get("/api/status").get_json()
    assert status["mode"] == "local"
    assert status["is_syncing"] is False

    defaults = client.get("/api/records/defaults").get_json()
    assert defaults["date"] == "2025-03-05"
    assert defaults["clockIn"] == "09:00"
    assert defaults["clockOut"] == "18:00"
    assert defaults["hourlyWage"] == 10030


def test_remote_save_failure_returns_502(tmp_path, fixed_now):
    client = _client(tmp_path, fixed_now, remote=BrokenRemote())

    res = _add(client)

    assert res.status_code == 502
    assert res.get_json()["message"] == "저장에 실패했습니다. 다시 시도해주세요."
    assert client.get("/api/status").get_json()["mode"] == "remote"


@pytest.mark.parametrize(
    "url",
    [
        "/api/summary/weekly?offset=999999999",
        "/api/summary/monthly?offset=999999999",
        "/export/weekly.xlsx?offset=-999999999",
        "/api/calendar?year=10000&month=1",
        "/api/calendar?year=9999&month=12",
    ],
)
def test_out_of_range_period_is_bad_request(client, url):
    res = client.get(url)

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_unpadded_date_is_rejected(client):
    res = _add(client, date="2025-3-5")

    assert res.status_code == 400
    assert client.get("/api/records").get_json()["records"] == []
