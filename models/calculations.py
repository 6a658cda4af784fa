"""Helper functions for expiry date checks."""

from datetime import date, datetime
from typing import Optional

from dateutil import parser as date_parser

from .expiry_window import ExpiryWindow
from .vehicle_record import ExpiryValue

# Fills in components missing from partial dates ("2024" -> 2024-01-01).
_PARSE_DEFAULT = datetime(2000, 1, 1)


def parse_expiry_date(value: ExpiryValue) -> Optional[date]:
    """
    Parse a cell value into a calendar date.

    - date/datetime values are used as-is (time dropped)
    - text is parsed month-first, ignoring locale
    - anything unparseable, blank or missing returns None
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return date_parser.parse(value.strip(), default=_PARSE_DEFAULT).date()
    except (ValueError, OverflowError):
        return None


def is_expiring(value: ExpiryValue, window: ExpiryWindow) -> bool:
    """True if the value parses to a date inside the window."""
    return window.contains(parse_expiry_date(value))
