from __future__ import annotations

import math
from collections import defaultdict
from datetime import date, timedelta
from typing import Iterable, Sequence

from ..common.datetime_utils import parse_iso_date, to_iso
from ..core.constants import MINUTES_PER_DAY, WEEKLY_ALLOWANCE_MIN_HOURS
from .model import WeeklySummary, WorkRecord


def round_one_decimal(value: float) -> float:
    """Round half away from zero on the scaled value (x * 10)."""
    scaled = value * 10
    rounded = math.floor(abs(scaled) + 0.5)
    return math.copysign(rounded, scaled) / 10


def time_to_minutes(value: str) -> int:
    """HH:MM -> minutes since midnight."""
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def calculate_work_hours(clock_in: str, clock_out: str) -> float:
    """Hours between clock-in and clock-out, one decimal.

    A negative difference is a shift crossing midnight once. Equal times are
    a zero-length shift, not a full day.
    """
    diff = time_to_minutes(clock_out) - time_to_minutes(clock_in)
    if diff < 0:
        diff += MINUTES_PER_DAY
    return round_one_decimal(diff / 60)


def get_weekly_records(records: Iterable[WorkRecord], week_start: date) -> list[WorkRecord]:
    start = to_iso(week_start)
    end = to_iso(week_start + timedelta(days=6))
    return [r for r in records if start <= r.date <= end]


def calculate_weekly_summary(records: Sequence[WorkRecord], week_start: date) -> WeeklySummary:
    weekly = get_weekly_records(records, week_start)
    total_hours = sum(r.work_hours for r in weekly)

    return WeeklySummary(
        week_start=to_iso(week_start),
        week_end=to_iso(week_start + timedelta(days=6)),
        total_hours=round_one_decimal(total_hours),
        # 주휴수당: 주 15시간 이상
        qualifies_for_weekly_allowance=total_hours >= WEEKLY_ALLOWANCE_MIN_HOURS,
    )


def group_by_month(records: Iterable[WorkRecord]) -> dict[str, list[WorkRecord]]:
    grouped: dict[str, list[WorkRecord]] = defaultdict(list)
    for r in records:
        grouped[r.date[:7]].append(r)
    return dict(grouped)


def month_total_hours(records: Iterable[WorkRecord], year: int, month: int) -> float:
    total = 0.0
    for r in records:
        d = parse_iso_date(r.date)
        if d.year == year and d.month == month:
            total += r.work_hours
    return total
