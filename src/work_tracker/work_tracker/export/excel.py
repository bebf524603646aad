from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

import pandas as pd

from ..common.datetime_utils import format_korean_date
from ..periods.resolver import get_this_week_range
from ..records.model import EmployeeWorkPeriod, WorkRecord
from ..records.summary import calculate_employee_work_periods

logger = logging.getLogger(__name__)

COLUMNS = ["근무자 이름", "근무 날짜", "출근", "퇴근", "근무시간", "근무자 총 근무시간"]
COLUMN_WIDTHS = [15, 18, 8, 8, 12, 15]

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@dataclass(frozen=True)
class ExcelExport:
    filename: str
    content: bytes


def _hours_label(hours: float) -> str:
    return f"{hours:.1f}시간"


def _blank_row() -> dict[str, str]:
    return {col: "" for col in COLUMNS}


def build_export_rows(periods: Sequence[EmployeeWorkPeriod]) -> list[dict[str, str]]:
    """One row per record, then a per-person subtotal row.

    A blank row separates people; none follows the last person.
    """
    rows: list[dict[str, str]] = []

    for idx, period in enumerate(periods):
        for r in period.records:
            rows.append(
                {
                    "근무자 이름": period.name,
                    "근무 날짜": format_korean_date(r.date),
                    "출근": r.clock_in,
                    "퇴근": r.clock_out,
                    "근무시간": _hours_label(r.work_hours),
                    "근무자 총 근무시간": "",
                }
            )

        subtotal = _blank_row()
        subtotal["근무자 총 근무시간"] = _hours_label(period.total_hours)
        rows.append(subtotal)

        if idx < len(periods) - 1:
            rows.append(_blank_row())

    return rows


def _write_sheet(writer: pd.ExcelWriter, sheet_name: str, rows: list[dict[str, str]]) -> None:
    df = pd.DataFrame(rows, columns=COLUMNS)
    df.to_excel(writer, sheet_name=sheet_name, index=False)

    ws = writer.sheets[sheet_name]
    for col_idx, width in enumerate(COLUMN_WIDTHS):
        ws.column_dimensions[chr(ord("A") + col_idx)].width = width


def export_to_excel(
    periods: Sequence[EmployeeWorkPeriod],
    year: int,
    month: int,
    *,
    all_records: Optional[Sequence[WorkRecord]] = None,
    week_range: Optional[tuple[str, str]] = None,
    now: Optional[datetime] = None,
) -> ExcelExport:
    """Build the workbook: a month sheet, plus a week sheet when records are given.

    The week sheet uses `week_range` or the current week. If it cannot be
    built the month sheet is still returned.
    """
    out = io.BytesIO()

    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        _write_sheet(writer, f"{year}년 {month}월", build_export_rows(periods))

        if all_records:
            try:
                start, end = week_range or get_this_week_range(now)
                weekly_periods = calculate_employee_work_periods(all_records, start, end)
                _write_sheet(writer, f"주간 {start}~{end}", build_export_rows(weekly_periods))
            except Exception:
                logger.exception("Failed to build weekly sheet")

    return ExcelExport(filename=f"근무기록_{year}년_{month}월.xlsx", content=out.getvalue())
