from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_iso(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def format_korean_date(value: str) -> str:
    """YYYY-MM-DD -> YYYY년 M월 D일"""
    d = parse_iso_date(value)
    return f"{d.year}년 {d.month}월 {d.day}일"
