"""Week/month boundaries and their display labels.

Weeks run Sunday..Saturday. Every function that needs "today" takes it as a
parameter; passing nothing falls back to the wall clock.
"""
from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Optional

from ..common.datetime_utils import now_local, parse_iso_date, to_iso


def resolve_today(now: Optional[datetime | date]) -> date:
    now = now or now_local()
    return now.date() if isinstance(now, datetime) else now


def get_week_start(value: date) -> date:
    """Sunday on or before `value`."""
    # date.weekday(): Monday=0 .. Sunday=6; shift so Sunday=0
    day_of_week = (value.weekday() + 1) % 7
    return value - timedelta(days=day_of_week)


def get_week_range(now: Optional[datetime | date] = None, offset: int = 0) -> tuple[str, str]:
    """ISO (start, end) of the week `offset` weeks away from the one containing `now`."""
    target = resolve_today(now) + timedelta(days=offset * 7)
    start = get_week_start(target)
    return to_iso(start), to_iso(start + timedelta(days=6))


def get_this_week_range(now: Optional[datetime | date] = None) -> tuple[str, str]:
    return get_week_range(now)


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def get_month_range(year: int, month: int) -> tuple[str, str]:
    last_day = calendar.monthrange(year, month)[1]
    return to_iso(date(year, month, 1)), to_iso(date(year, month, last_day))


def get_this_month_range(now: Optional[datetime | date] = None) -> tuple[str, str]:
    today = resolve_today(now)
    return get_month_range(today.year, today.month)


def format_date_range(start: str, end: str) -> str:
    """'3월 1일 - 7일' within one month, '3월 29일 - 4월 2일' across months.

    No year is shown; the label is display-only.
    """
    s = parse_iso_date(start)
    e = parse_iso_date(end)

    if s.month == e.month:
        return f"{s.month}월 {s.day}일 - {e.day}일"
    return f"{s.month}월 {s.day}일 - {e.month}월 {e.day}일"
