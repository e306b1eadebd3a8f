"""Calendar-day helpers for tracking when deadlines were last decayed.

Dates are local wall-clock dates with no time-of-day component. The
elapsed-day count is derived from local-midnight timestamps and truncated
toward zero, so a span crossing a DST change is not corrected.
"""
from datetime import date, datetime
from typing import Optional
import time

DATE_FORMAT = "%Y-%m-%d"
SECONDS_PER_DAY = 60 * 60 * 24


def current_date() -> date:
    """Return today's local date."""
    return date.today()


def _local_midnight(d: date) -> float:
    # isdst=0 for both ends keeps the offset identical on either side
    return time.mktime((d.year, d.month, d.day, 0, 0, 0, 0, 0, 0))


def days_between(old: date, new: date) -> int:
    """Signed whole days from ``old`` to ``new``.

    Negative when the clock moved backward.
    """
    return int((_local_midnight(new) - _local_midnight(old)) / SECONDS_PER_DAY)


def parse_date(text: str) -> Optional[date]:
    """Parse a stored YYYY-MM-DD string; None if empty or malformed."""
    text = text.strip()
    if not text:
        return None
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        return None


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)
