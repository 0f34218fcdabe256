import datetime as _dt
from typing import Optional

# Formats accepted after ISO parsing fails, most common first. Slash dates
# are month first, the way the web client writes them
_DATE_FORMATS = [
    "%Y-%m-%d",           # 2024-01-15
    "%Y-%m-%d %H:%M:%S",  # 2024-01-15 10:30:00
    "%m/%d/%Y",           # 01/15/2024
]


def parse_date(value) -> Optional[_dt.date]:
    """Normalize a stored date value to a calendar date.

    Accepts date/datetime objects, ISO dates and ISO timestamps (the document
    store writes both, with or without a trailing 'Z'). Returns None when the
    value is empty or cannot be parsed; callers treat that as a missing date.
    """
    if value is None:
        return None

    if isinstance(value, _dt.datetime):
        return value.date()
    if isinstance(value, _dt.date):
        return value

    date_str = str(value).strip()
    if not date_str:
        return None

    # Try ISO format first
    try:
        return _dt.datetime.fromisoformat(date_str.replace('Z', '+00:00')).date()
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return _dt.datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue

    return None


def require_date(value, field_name: str = "date") -> _dt.date:
    """Parse a date that must be present, raising ValueError otherwise"""
    parsed = parse_date(value)
    if parsed is None:
        raise ValueError(f"Invalid {field_name}: {value!r}. Expected format: YYYY-MM-DD (e.g., 2025-01-15)")
    return parsed


def add_days(day: _dt.date, days: int) -> _dt.date:
    return day + _dt.timedelta(days=days)


def days_between(start: _dt.date, end: _dt.date) -> int:
    """Whole days from start to end (negative when end is earlier)"""
    return (end - start).days
