from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional

from ..common.datetime_utils import to_iso
from ..core.constants import RETENTION_MONTHS
from ..records.model import WorkRecord
from .resolver import resolve_today, shift_month


def retention_cutoff(now: Optional[datetime | date] = None, *, months: int = RETENTION_MONTHS) -> str:
    """First day of (current month - months), as ISO string.

    Shared by the save path and the remote load path.
    """
    today = resolve_today(now)
    year, month = shift_month(today.year, today.month, -months)
    return to_iso(date(year, month, 1))


def filter_retained(
    records: Iterable[WorkRecord],
    now: Optional[datetime | date] = None,
    *,
    months: int = RETENTION_MONTHS,
) -> list[WorkRecord]:
    """Drop records dated before the cutoff; the cutoff day itself is kept."""
    cutoff = retention_cutoff(now, months=months)
    return [r for r in records if r.date >= cutoff]
