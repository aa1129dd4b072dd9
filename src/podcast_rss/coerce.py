"""Permissive value coercion used by the feed and item setters.

Setters never raise on bad input. Unparseable numbers fall back to 0.
"""

import re
from datetime import date, datetime
from email.utils import format_datetime

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def to_text(value) -> str | None:
    """Coerce a value to text, mapping None and "" to unset."""
    if value is None:
        return None
    text = str(value)
    return text or None


def to_int(value) -> int:
    """Coerce a value to an integer the way a lenient form parser would.

    ``"12abc"`` gives 12, ``"3.9"`` gives 3 and anything unparseable gives 0.
    """
    if value is None:
        return 0
    if isinstance(value, (int, float)):
        try:
            return int(value)
        except (ValueError, OverflowError):
            # nan and inf
            return 0
    match = _LEADING_INT.match(str(value))
    if match is None:
        return 0
    return int(match.group(1))


def to_bool(value) -> bool:
    """Coerce a flag by truthiness."""
    return bool(value)


def format_publish_date(value) -> str | None:
    """Normalize a publish date to RFC 2822 text.

    Pre-formatted strings are stored verbatim. Naive datetimes are rendered
    with a ``-0000`` offset, plain dates as midnight of that day.
    """
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, date):
        return format_datetime(datetime(value.year, value.month, value.day))
    return to_text(value)
