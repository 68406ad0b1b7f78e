"""
Day counting relative to the tax number epoch (1867-01-01).

Positions 2-6 of a Hungarian tax number store the holder's birth date as the
number of days elapsed since 1867-01-01.  The calculation works on calendar
dates only (proleptic Gregorian ordinals), so neither the local timezone nor
daylight-saving transitions can shift the result by a day.
"""

import datetime
import re
from typing import Union

from hungarian_validators.exceptions import InvalidDateFormatError

EPOCH = datetime.date(1867, 1, 1)

DateLike = Union[str, datetime.date, datetime.datetime]

_DATE_FORMAT_ERROR = "Invalid date format. Expected YYYY-MM-DD"
_LEADING_INT_REGEX = re.compile(r"\s*([+-]?[0-9]+)")


def calculate_days_since_1867(date: DateLike) -> int:
    """
    Return the number of days between 1867-01-01 and *date*.

    Parameters
    ----------
    date : str | datetime.date | datetime.datetime
        Either a ``YYYY-MM-DD`` string or a date value.  An aware
        ``datetime`` is converted to UTC before its calendar day is taken;
        a naive one is used as is.

    Returns
    -------
    int
        ``0`` for the epoch itself, negative for earlier dates.

    Raises
    ------
    InvalidDateFormatError
        If a string does not consist of three non-empty numeric components
        separated by ``-``, or the date falls outside the supported range.
    """
    if isinstance(date, str):
        year, month, day = _parse_date_string(date)
    elif isinstance(date, datetime.datetime):
        if date.tzinfo is not None and date.utcoffset() is not None:
            date = date.astimezone(datetime.timezone.utc)
        year, month, day = date.year, date.month, date.day
    elif isinstance(date, datetime.date):
        year, month, day = date.year, date.month, date.day
    else:
        raise TypeError(
            f"Expected a YYYY-MM-DD string or a date, got {type(date).__name__}"
        )

    return _ordinal(year, month, day) - EPOCH.toordinal()


def date_from_days_since_1867(days: int) -> datetime.date:
    """Inverse of :func:`calculate_days_since_1867`."""
    return EPOCH + datetime.timedelta(days=days)


def _parse_date_string(value: str) -> tuple[int, int, int]:
    parts = value.split("-")
    if len(parts) != 3 or not all(parts):
        raise InvalidDateFormatError(_DATE_FORMAT_ERROR)
    return _leading_int(parts[0]), _leading_int(parts[1]), _leading_int(parts[2])


def _leading_int(part: str) -> int:
    # Only the leading ASCII integer counts, so "01T00:00:00Z" is day 1
    match = _LEADING_INT_REGEX.match(part)
    if match is None:
        raise InvalidDateFormatError(_DATE_FORMAT_ERROR)
    return int(match.group(1))


def _ordinal(year: int, month: int, day: int) -> int:
    """
    Proleptic Gregorian ordinal of ``year-month-day``.

    Month and day values outside their usual range roll over into the
    neighbouring months and years (``2023-02-30`` is ``2023-03-02``,
    ``2023-13-01`` is ``2024-01-01``).
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        first_of_month = datetime.date(year, month, 1)
    except ValueError as e:
        raise InvalidDateFormatError(f"Year {year} is out of range") from e
    return first_of_month.toordinal() + day - 1
