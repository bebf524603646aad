from datetime import date

from src.work_tracker.work_tracker.periods.calendar import build_calendar, build_calendar_weeks


def test_calendar_weeks_cover_month_with_whole_weeks():
    weeks = build_calendar_weeks(2025, 3)

    # 2025-03-01 is a Saturday, 2025-03-31 a Monday
    assert len(weeks) == 6
    assert weeks[0][0] == date(2025, 2, 23)
    assert weeks[0][-1] == date(2025, 3, 1)
    assert weeks[-1][-1] == date(2025, 4, 5)
    for week in weeks:
        assert len(week) == 7
        assert week[0].weekday() == 6


def test_calendar_month_starting_sunday_ending_saturday():
    weeks = build_calendar_weeks(2026, 2)

    assert len(weeks) == 4
    assert weeks[0][0] == date(2026, 2, 1)
    assert weeks[-1][-1] == date(2026, 2, 28)


def test_build_calendar_groups_records_per_day(make_record):
    records = [
        make_record("2025-03-05", "Lee"),
        make_record("2025-03-05", "Kim", "09:00", "13:00"),
        make_record("2025-02-23", "Kim"),
        make_record("2025-04-01", "Kim"),
    ]

    cal = build_calendar(records, 2025, 3, today=date(2025, 3, 5))

    days = {d.date: d for week in cal.weeks for d in week}
    assert [r.name for r in days["2025-03-05"].records] == ["Kim", "Lee"]
    assert days["2025-03-05"].is_today is True
    assert days["2025-03-04"].is_today is False
    assert days["2025-02-23"].in_month is False
    assert len(days["2025-02-23"].records) == 1
    assert days["2025-03-01"].in_month is True

    # only March counts toward the monthly total
    assert cal.monthly_total_hours == 13.0

    data = cal.to_dict()
    assert data["year"] == 2025
    assert data["weeks"][1][3]["date"] == "2025-03-05"
