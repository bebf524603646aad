from __future__ import annotations

from datetime import datetime

import pytest

from src.work_tracker.work_tracker.records.calculations import calculate_work_hours
from src.work_tracker.work_tracker.records.model import WorkRecord


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday; week 2025-03-02 (Sun) .. 2025-03-08 (Sat)
    return datetime(2025, 3, 5, 9, 0, 0)


@pytest.fixture
def make_record():
    counter = {"n": 0}

    def _make(date: str, name: str, clock_in: str = "09:00", clock_out: str = "18:00", wage=None, record_id=None):
        counter["n"] += 1
        return WorkRecord(
            id=record_id or f"r{counter['n']}",
            date=date,
            name=name,
            clock_in=clock_in,
            clock_out=clock_out,
            work_hours=calculate_work_hours(clock_in, clock_out),
            hourly_wage=wage,
        )

    return _make
