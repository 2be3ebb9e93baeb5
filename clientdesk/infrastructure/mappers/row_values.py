"""
Helpers for reading PostgREST row values.
Timestamps and dates arrive as ISO 8601 strings; numerics may arrive as strings.
"""

from datetime import date, datetime
from typing import Any, Optional


def parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def parse_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def parse_number(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)
