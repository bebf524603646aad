from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class WorkRecord:
    """도메인 엔티티: one clock-in/clock-out entry for one person on one date.

    `work_hours` is stored alongside the times it was derived from; callers
    that change `clock_in`/`clock_out` must recompute it.
    """

    id: str
    date: str
    name: str
    clock_in: str
    clock_out: str
    work_hours: float
    hourly_wage: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "date": self.date,
            "name": self.name,
            "clockIn": self.clock_in,
            "clockOut": self.clock_out,
            "workHours": self.work_hours,
        }
        if self.hourly_wage is not None:
            data["hourlyWage"] = self.hourly_wage
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WorkRecord":
        wage = data.get("hourlyWage")
        return cls(
            id=str(data["id"]),
            date=str(data["date"]),
            name=str(data["name"]),
            clock_in=str(data["clockIn"]),
            clock_out=str(data["clockOut"]),
            work_hours=float(data["workHours"]),
            hourly_wage=float(wage) if wage is not None else None,
        )


@dataclass(frozen=True)
class EmployeeSummary:
    """Read-model: per-person totals over a date range (not persisted)."""

    name: str
    total_hours: float
    total_pay: float
    hourly_wage: float
    record_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "totalHours": self.total_hours,
            "totalPay": self.total_pay,
            "hourlyWage": self.hourly_wage,
            "recordCount": self.record_count,
        }


@dataclass(frozen=True)
class WeeklySummary:
    week_start: str
    week_end: str
    total_hours: float
    qualifies_for_weekly_allowance: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "weekStart": self.week_start,
            "weekEnd": self.week_end,
            "totalHours": self.total_hours,
            "qualifiesForWeeklyAllowance": self.qualifies_for_weekly_allowance,
        }


@dataclass(frozen=True)
class EmployeeWorkPeriod:
    """Per-person grouping that keeps the individual records (used by exports)."""

    name: str
    work_days: int
    total_hours: float
    records: list[WorkRecord] = field(default_factory=list)
