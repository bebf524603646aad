from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Optional, Sequence

from ..common.datetime_utils import to_iso
from ..records.calculations import month_total_hours
from ..records.model import WorkRecord
from .resolver import get_week_start


@dataclass(frozen=True)
class CalendarDay:
    date: str
    day: int
    in_month: bool
    is_today: bool
    records: list[WorkRecord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "day": self.day,
            "inMonth": self.in_month,
            "isToday": self.is_today,
            "records": [r.to_dict() for r in self.records],
        }


@dataclass(frozen=True)
class CalendarMonth:
    year: int
    month: int
    weeks: list[list[CalendarDay]]
    monthly_total_hours: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "weeks": [[d.to_dict() for d in week] for week in self.weeks],
            "monthlyTotalHours": self.monthly_total_hours,
        }


def build_calendar_weeks(year: int, month: int) -> list[list[date]]:
    """Whole Sunday..Saturday weeks covering the month."""
    first = date(year, month, 1)
    last = date(year, month, calendar.monthrange(year, month)[1])

    start = get_week_start(first)
    # Saturday on or after the last day
    end = last + timedelta(days=(5 - last.weekday()) % 7)

    weeks: list[list[date]] = []
    current = start
    while current <= end:
        weeks.append([current + timedelta(days=i) for i in range(7)])
        current += timedelta(days=7)
    return weeks


def build_calendar(
    records: Sequence[WorkRecord],
    year: int,
    month: int,
    *,
    today: Optional[date] = None,
) -> CalendarMonth:
    by_date: dict[str, list[WorkRecord]] = {}
    for r in records:
        by_date.setdefault(r.date, []).append(r)

    weeks = []
    for week in build_calendar_weeks(year, month):
        days = []
        for d in week:
            key = to_iso(d)
            days.append(
                CalendarDay(
                    date=key,
                    day=d.day,
                    in_month=d.month == month,
                    is_today=today is not None and d == today,
                    records=sorted(by_date.get(key, []), key=lambda r: r.name),
                )
            )
        weeks.append(days)

    return CalendarMonth(
        year=year,
        month=month,
        weeks=weeks,
        monthly_total_hours=month_total_hours(records, year, month),
    )
