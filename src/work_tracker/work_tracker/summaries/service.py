from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

from ..common.datetime_utils import now_local, parse_iso_date
from ..periods.calendar import CalendarMonth, build_calendar
from ..periods.resolver import format_date_range, get_month_range, get_week_range, shift_month
from ..records.calculations import calculate_weekly_summary
from ..records.model import EmployeeSummary, WeeklySummary
from ..records.service import WorkRecordService
from ..records.summary import calculate_employee_summaries, format_currency, summarize_totals


@dataclass(frozen=True)
class PeriodReport:
    """Read-model for the weekly/monthly summary screens."""

    start: str
    end: str
    label: str
    is_current: bool
    summaries: list[EmployeeSummary]
    total_hours: float
    total_pay: float
    weekly: Optional[WeeklySummary] = None

    def to_dict(self) -> dict[str, Any]:
        data = {
            "start": self.start,
            "end": self.end,
            "label": self.label,
            "isCurrent": self.is_current,
            "summaries": [
                {
                    **s.to_dict(),
                    "hourlyWageLabel": format_currency(s.hourly_wage),
                    "totalPayLabel": format_currency(s.total_pay),
                }
                for s in self.summaries
            ],
            "totalHours": self.total_hours,
            "totalPay": self.total_pay,
            "totalPayLabel": format_currency(self.total_pay),
        }
        if self.weekly is not None:
            data["weekly"] = self.weekly.to_dict()
        return data


class SummaryService:
    def __init__(self, records: WorkRecordService, *, clock: Callable[[], datetime] = now_local):
        self._records = records
        self._clock = clock

    def _report(self, start: str, end: str, label: str, *, is_current: bool, weekly: Optional[WeeklySummary] = None) -> PeriodReport:
        summaries = calculate_employee_summaries(self._records.records, start, end)
        total_hours, total_pay = summarize_totals(summaries)
        return PeriodReport(
            start=start,
            end=end,
            label=label,
            is_current=is_current,
            summaries=summaries,
            total_hours=total_hours,
            total_pay=total_pay,
            weekly=weekly,
        )

    def weekly_report(self, *, offset: int = 0) -> PeriodReport:
        start, end = get_week_range(self._clock(), offset)
        weekly = calculate_weekly_summary(self._records.records, parse_iso_date(start))
        return self._report(start, end, format_date_range(start, end), is_current=offset == 0, weekly=weekly)

    def monthly_report(self, *, offset: int = 0) -> PeriodReport:
        today = self._clock()
        year, month = shift_month(today.year, today.month, offset)
        start, end = get_month_range(year, month)
        return self._report(start, end, f"{year}년 {month}월", is_current=offset == 0)

    def calendar(self, *, year: Optional[int] = None, month: Optional[int] = None) -> CalendarMonth:
        today = self._clock().date()
        return build_calendar(
            self._records.records,
            year or today.year,
            month or today.month,
            today=today,
        )
