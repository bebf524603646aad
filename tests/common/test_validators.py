import pytest

from src.work_tracker.work_tracker.common.validators import optional_wage, require_iso_date, require_time
from src.work_tracker.work_tracker.core.exceptions import ValidationError


@pytest.mark.parametrize("value", ["2025-3-5", "2025-03-5", "25-03-05", "2025-02-30", "2025/03/05", "", None])
def test_require_iso_date_rejects_unpadded_or_invalid(value):
    with pytest.raises(ValidationError):
        require_iso_date(value, "날짜")


def test_require_iso_date_returns_canonical_form():
    assert require_iso_date(" 2025-03-05 ", "날짜") == "2025-03-05"


@pytest.mark.parametrize("value", ["09:00\n", "9:00", "24:00", "09:60", " 09:00"])
def test_require_time_rejects_anything_but_hh_mm(value):
    with pytest.raises(ValidationError):
        require_time(value, "출근시간")


def test_require_time_accepts_hh_mm():
    assert require_time("23:59", "퇴근시간") == "23:59"


@pytest.mark.parametrize("value", ["nan", "inf", "-inf", float("nan"), float("inf"), "-1", "abc", True])
def test_optional_wage_rejects_non_finite_and_negative(value):
    with pytest.raises(ValidationError):
        optional_wage(value)


@pytest.mark.parametrize("value, expected", [(None, None), ("", None), ("  ", None), ("10030", 10030.0), (0, 0.0)])
def test_optional_wage_parses(value, expected):
    assert optional_wage(value) == expected
