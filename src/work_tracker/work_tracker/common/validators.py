from __future__ import annotations

import math
import re
from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date, to_iso

_TIME_RE = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")
# zero padded so stored dates compare lexically
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name}을(를) 입력해주세요")
    return str(value).strip()


def require_time(value: Optional[str], field_name: str) -> str:
    if not value or not _TIME_RE.fullmatch(str(value)):
        raise ValidationError(f"{field_name}은(는) HH:MM 형식이어야 합니다")
    return str(value)


def require_iso_date(value: Optional[str], field_name: str) -> str:
    message = f"{field_name}은(는) YYYY-MM-DD 형식이어야 합니다"
    if not isinstance(value, str) or not _DATE_RE.fullmatch(value.strip()):
        raise ValidationError(message)
    try:
        return to_iso(parse_iso_date(value.strip()))
    except ValueError:
        raise ValidationError(message) from None


def optional_wage(value: Any) -> Optional[float]:
    """Blank or missing wage means "not tracked", never zero."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ValidationError("시급은 숫자여야 합니다")
    try:
        wage = float(value)
    except (TypeError, ValueError):
        raise ValidationError("시급은 숫자여야 합니다") from None
    if not math.isfinite(wage):
        raise ValidationError("시급은 숫자여야 합니다")
    if wage < 0:
        raise ValidationError("시급은 0 이상이어야 합니다")
    return wage
