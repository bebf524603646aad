from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import to_iso
from ..container import Container
from ..core.constants import DEFAULT_CLOCK_IN, DEFAULT_CLOCK_OUT, DEFAULT_HOURLY_WAGE
from ..core.exceptions import RecordNotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)

# request JSON key -> service field
_FIELD_MAP = {
    "date": "date",
    "name": "name",
    "clockIn": "clock_in",
    "clockOut": "clock_out",
    "hourlyWage": "hourly_wage",
}
# derived or immutable; ignored on update
_IGNORED_FIELDS = {"id", "workHours"}


def register(app: Flask, container: Container) -> None:
    service = container.record_service

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _status() -> dict:
        return {
            "mode": service.mode.value,
            "is_loading": service.is_loading,
            "is_syncing": service.is_syncing,
            "notice": service.last_notice,
        }

    @app.route("/api/status", methods=["GET"], endpoint="api_status")
    def api_status():
        return jsonify({"success": True, **_status()})

    @app.route("/api/records/defaults", methods=["GET"], endpoint="api_records_defaults")
    def api_records_defaults():
        """Initial values for the entry form."""
        return jsonify(
            {
                "success": True,
                "date": to_iso(container.clock().date()),
                "clockIn": DEFAULT_CLOCK_IN,
                "clockOut": DEFAULT_CLOCK_OUT,
                "hourlyWage": app.config.get("DEFAULT_HOURLY_WAGE", DEFAULT_HOURLY_WAGE),
            }
        )

    @app.route("/api/records", methods=["GET"], endpoint="api_records")
    def api_records():
        try:
            records = service.records
        except StorageError:
            logger.exception("Loading records failed")
            return _error("데이터를 불러오는데 실패했습니다.", 500)
        return jsonify({"success": True, "records": [r.to_dict() for r in records], **_status()})

    @app.route("/api/records/reload", methods=["POST"], endpoint="api_records_reload")
    def api_records_reload():
        try:
            records = service.load()
        except StorageError:
            logger.exception("Reloading records failed")
            return _error("데이터를 불러오는데 실패했습니다.", 500)
        return jsonify({"success": True, "records": [r.to_dict() for r in records], **_status()})

    @app.route("/api/records", methods=["POST"], endpoint="api_records_create")
    def api_records_create():
        data = request.get_json(silent=True) or {}
        try:
            record = service.add_record(
                date=data.get("date"),
                name=data.get("name"),
                clock_in=data.get("clockIn"),
                clock_out=data.get("clockOut"),
                hourly_wage=data.get("hourlyWage"),
            )
        except ValidationError as e:
            return _error(str(e), 400)
        except StorageError:
            return _error(service.last_notice or "저장에 실패했습니다.", 502)
        except Exception:
            logger.exception("Unexpected error while adding a record")
            return _error("근무 기록 추가 중 오류가 발생했습니다", 500)

        return jsonify({"success": True, "message": "근무 기록이 추가되었습니다", "record": record.to_dict()}), 201

    @app.route("/api/records/<record_id>", methods=["PUT", "PATCH"], endpoint="api_records_update")
    def api_records_update(record_id: str):
        data = request.get_json(silent=True) or {}

        updates = {}
        for key, value in data.items():
            if key in _IGNORED_FIELDS:
                continue
            if key not in _FIELD_MAP:
                return _error(f"수정할 수 없는 항목입니다: {key}", 400)
            updates[_FIELD_MAP[key]] = value

        try:
            record = service.update_record(record_id, updates)
        except RecordNotFoundError as e:
            return _error(str(e), 404)
        except ValidationError as e:
            return _error(str(e), 400)
        except StorageError:
            return _error(service.last_notice or "저장에 실패했습니다.", 502)
        except Exception:
            logger.exception("Unexpected error while updating record %s", record_id)
            return _error("기록 수정 중 오류가 발생했습니다", 500)

        return jsonify({"success": True, "message": "기록이 수정되었습니다", "record": record.to_dict()})

    @app.route("/api/records/<record_id>", methods=["DELETE"], endpoint="api_records_delete")
    def api_records_delete(record_id: str):
        try:
            service.delete_record(record_id)
        except RecordNotFoundError as e:
            return _error(str(e), 404)
        except StorageError:
            return _error(service.last_notice or "저장에 실패했습니다.", 502)
        except Exception:
            logger.exception("Unexpected error while deleting record %s", record_id)
            return _error("기록 삭제 중 오류가 발생했습니다", 500)

        return jsonify({"success": True, "message": "기록이 삭제되었습니다"})
