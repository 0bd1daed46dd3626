"""Calendar date parsing for offer validity windows."""

import re
from datetime import date, datetime

from ticket_machine.domain.errors import InvalidDateRangeError

ISO_DATE_FORMAT = "%Y-%m-%d"

_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: date | datetime | str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string, or take the calendar date of a date or datetime.

    Raises:
        InvalidDateRangeError: If the string is not a valid calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not _ISO_DATE_PATTERN.match(text):
        raise InvalidDateRangeError()
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise InvalidDateRangeError() from e
