from __future__ import annotations

import dataclasses
import logging
from datetime import datetime
from typing import Any, Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import optional_wage, require_iso_date, require_non_empty, require_time
from ..core.enums import StorageMode
from ..core.exceptions import RecordNotFoundError, StorageError, ValidationError
from ..periods.retention import filter_retained
from ..storage.github_repository import GitHubRecordStorage
from ..storage.repository import RecordStorage
from .calculations import calculate_work_hours
from .model import WorkRecord

logger = logging.getLogger(__name__)

LOAD_FALLBACK_NOTICE = "데이터를 불러오는데 실패했습니다. 로컬 데이터를 사용합니다."
SAVE_FAILED_NOTICE = "저장에 실패했습니다. 다시 시도해주세요."

_EDITABLE_FIELDS = {"date", "name", "clock_in", "clock_out", "hourly_wage"}


class WorkRecordService:
    """Owns the in-memory record list and keeps it in sync with storage.

    With a remote store configured, the remote file is the source of truth and
    the local store is a backup copy; otherwise only the local store is used.
    Every save drops records older than the retention cutoff.
    """

    def __init__(
        self,
        local: RecordStorage,
        remote: Optional[GitHubRecordStorage] = None,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._local = local
        self._remote = remote
        self._clock = clock

        self._records: list[WorkRecord] = []
        self._loaded = False
        self.is_loading = True
        self.is_syncing = False
        self.last_notice: Optional[str] = None

    @property
    def mode(self) -> StorageMode:
        return StorageMode.REMOTE if self._remote else StorageMode.LOCAL

    @property
    def records(self) -> list[WorkRecord]:
        if not self._loaded:
            self.load()
        return list(self._records)

    def load(self) -> list[WorkRecord]:
        self.is_loading = True
        try:
            if self._remote:
                try:
                    data = self._remote.load(now=self._clock())
                except StorageError:
                    logger.exception("Failed to load records from GitHub, using local copy")
                    self.last_notice = LOAD_FALLBACK_NOTICE
                    data = self._local.load()
                else:
                    self._local.save(data)
            else:
                data = self._local.load()

            self._records = list(data)
            self._loaded = True
            return list(self._records)
        finally:
            self.is_loading = False

    def _save(self, new_records: Sequence[WorkRecord]) -> None:
        self.is_syncing = True
        filtered = filter_retained(new_records, self._clock())
        # A failed remote write leaves this attempted state in memory.
        self._records = filtered
        try:
            if self._remote:
                self._remote.save(filtered)
            self._local.save(filtered)
        except StorageError:
            logger.exception("Failed to save records")
            self.last_notice = SAVE_FAILED_NOTICE
            raise
        finally:
            self.is_syncing = False

    def _new_id(self) -> str:
        existing = {r.id for r in self._records}
        candidate = int(self._clock().timestamp() * 1000)
        while str(candidate) in existing:
            candidate += 1
        return str(candidate)

    def get_record(self, record_id: str) -> WorkRecord:
        for r in self.records:
            if r.id == record_id:
                return r
        raise RecordNotFoundError(f"근무 기록을 찾을 수 없습니다: {record_id}")

    def add_record(
        self,
        *,
        date: str,
        name: str,
        clock_in: str,
        clock_out: str,
        hourly_wage: Any = None,
    ) -> WorkRecord:
        current = self.records

        name = require_non_empty(name, "이름")
        if not clock_in or not clock_out:
            raise ValidationError("출근시간과 퇴근시간을 입력해주세요")

        clock_in = require_time(clock_in, "출근시간")
        clock_out = require_time(clock_out, "퇴근시간")

        record = WorkRecord(
            id=self._new_id(),
            date=require_iso_date(date, "날짜"),
            name=name,
            clock_in=clock_in,
            clock_out=clock_out,
            work_hours=calculate_work_hours(clock_in, clock_out),
            hourly_wage=optional_wage(hourly_wage),
        )

        updated = sorted([*current, record], key=lambda r: r.date, reverse=True)
        self._save(updated)
        logger.info("Added work record %s for %s on %s", record.id, record.name, record.date)
        return record

    def update_record(self, record_id: str, updates: dict[str, Any]) -> WorkRecord:
        """Edit a record in place (id preserved). Hours are always recomputed."""
        unknown = set(updates) - _EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"수정할 수 없는 항목입니다: {', '.join(sorted(unknown))}")

        current = self.get_record(record_id)

        changes: dict[str, Any] = {}
        if "date" in updates:
            changes["date"] = require_iso_date(updates["date"], "날짜")
        if "name" in updates:
            changes["name"] = require_non_empty(updates["name"], "이름")
        if "clock_in" in updates:
            changes["clock_in"] = require_time(updates["clock_in"], "출근시간")
        if "clock_out" in updates:
            changes["clock_out"] = require_time(updates["clock_out"], "퇴근시간")
        if "hourly_wage" in updates:
            changes["hourly_wage"] = optional_wage(updates["hourly_wage"])

        edited = dataclasses.replace(current, **changes)
        edited = dataclasses.replace(edited, work_hours=calculate_work_hours(edited.clock_in, edited.clock_out))

        self._save([edited if r.id == record_id else r for r in self._records])
        logger.info("Updated work record %s", record_id)
        return edited

    def delete_record(self, record_id: str) -> None:
        self.get_record(record_id)
        self._save([r for r in self._records if r.id != record_id])
        logger.info("Deleted work record %s", record_id)
