from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

from .model import EmployeeSummary, EmployeeWorkPeriod, WorkRecord


@dataclass
class _EmployeeBucket:
    hours: list[float]
    wages: list[float]
    record_count: int = 0


def filter_by_range(records: Iterable[WorkRecord], start_date: Optional[str], end_date: Optional[str]) -> list[WorkRecord]:
    """Keep records with start <= date <= end (lexical ISO compare).

    No filtering unless both bounds are given.
    """
    if not start_date or not end_date:
        return list(records)
    return [r for r in records if start_date <= r.date <= end_date]


def calculate_employee_summaries(
    records: Sequence[WorkRecord],
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> list[EmployeeSummary]:
    """Per-person totals over an optional date range.

    - Grouping is by exact `name` (case and whitespace sensitive).
    - `hourly_wage` is the mean over records that carry a wage; records
      without one are left out of the average.
    - `total_pay` is mean wage * total hours, not the sum of per-record pay.
    - Sorted by total hours descending; ties keep first-seen order.
    """
    buckets: dict[str, _EmployeeBucket] = {}

    for r in filter_by_range(records, start_date, end_date):
        bucket = buckets.get(r.name)
        if bucket is None:
            bucket = _EmployeeBucket(hours=[], wages=[])
            buckets[r.name] = bucket

        bucket.hours.append(r.work_hours)
        if r.hourly_wage is not None:
            bucket.wages.append(r.hourly_wage)
        bucket.record_count += 1

    summaries: list[EmployeeSummary] = []
    for name, bucket in buckets.items():
        total_hours = sum(bucket.hours)
        avg_wage = sum(bucket.wages) / len(bucket.wages) if bucket.wages else 0.0

        summaries.append(
            EmployeeSummary(
                name=name,
                total_hours=total_hours,
                total_pay=avg_wage * total_hours,
                hourly_wage=avg_wage,
                record_count=bucket.record_count,
            )
        )

    # sorted() is stable
    return sorted(summaries, key=lambda s: s.total_hours, reverse=True)


def calculate_employee_work_periods(
    records: Sequence[WorkRecord],
    start_date: str,
    end_date: str,
) -> list[EmployeeWorkPeriod]:
    """Group records per person for export: names ascending, dates ascending."""
    by_name: dict[str, list[WorkRecord]] = {}
    for r in filter_by_range(records, start_date, end_date):
        by_name.setdefault(r.name, []).append(r)

    periods = []
    for name, items in by_name.items():
        items = sorted(items, key=lambda r: r.date)
        periods.append(
            EmployeeWorkPeriod(
                name=name,
                work_days=len(items),
                total_hours=sum(r.work_hours for r in items),
                records=items,
            )
        )

    return sorted(periods, key=lambda p: p.name)


def summarize_totals(summaries: Iterable[EmployeeSummary]) -> tuple[float, float]:
    """(total hours, total pay) across all people."""
    total_hours = 0.0
    total_pay = 0.0
    for s in summaries:
        total_hours += s.total_hours
        total_pay += s.total_pay
    return total_hours, total_pay


def format_currency(amount: float) -> str:
    """12345.6 -> '12,345.6원'; at most three fraction digits, rounded half up."""
    value = Decimal(str(amount)).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return f"{text}원"
