from datetime import date, datetime, timedelta

import pytest

from src.work_tracker.work_tracker.periods.resolver import (
    format_date_range,
    get_month_range,
    get_this_month_range,
    get_this_week_range,
    get_week_range,
    get_week_start,
    shift_month,
)


def test_week_start_is_sunday_within_six_days():
    start = date(2024, 12, 25)
    for i in range(60):
        d = start + timedelta(days=i)
        ws = get_week_start(d)
        assert ws.weekday() == 6  # Sunday
        assert 0 <= (d - ws).days <= 6


def test_week_start_of_sunday_is_itself():
    assert get_week_start(date(2025, 3, 2)) == date(2025, 3, 2)
    assert get_week_start(date(2025, 3, 8)) == date(2025, 3, 2)


def test_this_week_range_uses_given_now(fixed_now):
    assert get_this_week_range(fixed_now) == ("2025-03-02", "2025-03-08")


def test_week_range_offsets(fixed_now):
    assert get_week_range(fixed_now, -1) == ("2025-02-23", "2025-03-01")
    assert get_week_range(fixed_now, 1) == ("2025-03-09", "2025-03-15")


def test_week_range_across_year_boundary():
    assert get_week_range(date(2025, 1, 1)) == ("2024-12-29", "2025-01-04")


def test_this_month_range(fixed_now):
    assert get_this_month_range(fixed_now) == ("2025-03-01", "2025-03-31")
    assert get_this_month_range(datetime(2024, 2, 10)) == ("2024-02-01", "2024-02-29")


def test_month_range_december():
    assert get_month_range(2025, 12) == ("2025-12-01", "2025-12-31")


@pytest.mark.parametrize(
    "year, month, offset, expected",
    [
        (2025, 3, 0, (2025, 3)),
        (2025, 1, -2, (2024, 11)),
        (2025, 12, 1, (2026, 1)),
        (2025, 3, -15, (2023, 12)),
    ],
)
def test_shift_month(year, month, offset, expected):
    assert shift_month(year, month, offset) == expected


def test_format_date_range_same_month():
    assert format_date_range("2025-03-01", "2025-03-07") == "3월 1일 - 7일"


def test_format_date_range_across_months():
    assert format_date_range("2025-03-29", "2025-04-02") == "3월 29일 - 4월 2일"


def test_format_date_range_across_years_shows_no_year():
    assert format_date_range("2024-12-29", "2025-01-04") == "12월 29일 - 1월 4일"
