"""Date manipulation utilities"""

from datetime import date, datetime
from typing import Optional, Tuple


def parse_iso_date(value: str | None) -> Optional[date]:
    """Parse YYYY-MM-DD (a trailing time part is ignored); None if missing or invalid"""
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


def parse_month_year(value: str | None) -> Optional[Tuple[int, int]]:
    """Parse a YYYY-MM anchor month into (year, month); None if missing or invalid"""
    if not value:
        return None
    parts = value.strip().split("-")
    if len(parts) < 2:
        return None
    try:
        year, month = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if not 1 <= month <= 12:
        return None
    return year, month


def to_datetime(value: date | datetime) -> datetime:
    """Promote a bare date to midnight; datetimes pass through"""
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def to_date(value: date | datetime) -> date:
    """Drop the time-of-day part"""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_between(start: date | datetime, end: date | datetime) -> int:
    """Whole calendar days from start to end (negative if end is earlier)"""
    return (to_date(end) - to_date(start)).days
