"""
Date Parser - Turns an order's pickup date and time strings into one instant.

Orders store pickup date and time as free text entered over several years
and import paths: "2024-03-05", "3/5/2024", "03-05-2024" for dates and
"2:30pm", "14:00", "2:00-3:00 PM", "" for times. parse_instant() is the
single place that resolves them.

The result is either ValidInstant or INVALID. Code that sorts or filters
by pickup time must go through instant_sort_key() / is_within() instead of
comparing results directly.
"""
import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Union

logger = logging.getLogger(__name__)

# Times without am/pm in this window are afternoon pickups ("3:00" is 3 PM)
AFTERNOON_HEURISTIC_HOURS = range(1, 8)

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')
# ASCII digits only: int() alone also takes "0_3" and full-width digits
_DATE_SEGMENT = re.compile(r'[+-]?[0-9]+')


@dataclass(frozen=True)
class ValidInstant:
    """A successfully parsed pickup instant (naive local time)."""
    at: datetime

    @property
    def is_valid(self) -> bool:
        return True


@dataclass(frozen=True)
class InvalidInstant:
    """Marker for a pickup date that could not be parsed."""

    @property
    def is_valid(self) -> bool:
        return False


INVALID = InvalidInstant()

NormalizedInstant = Union[ValidInstant, InvalidInstant]


def _leading_int(text: Optional[str]) -> Optional[int]:
    """Read an integer prefix the way a lenient form field would ("30 " -> 30)."""
    if text is None:
        return None
    match = _LEADING_INT.match(text)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        return None


def parse_date_parts(pickup_date: Optional[str]) -> Optional[tuple[int, int, int]]:
    """
    Split a pickup date into (year, month, day).

    Accepts YYYY-MM-DD, MM/DD/YYYY and MM-DD-YYYY. Returns None when the
    text does not have three integer segments.
    """
    if not pickup_date:
        return None

    separator = '-' if '-' in pickup_date else '/'
    parts = pickup_date.split(separator)
    if len(parts) != 3:
        return None

    if not all(_DATE_SEGMENT.fullmatch(p.strip()) for p in parts):
        return None
    try:
        numbers = [int(p) for p in parts]
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        return None

    if len(parts[0]) == 4:
        year, month, day = numbers
    else:
        month, day, year = numbers
    return year, month, day


def parse_time_parts(pickup_time: Optional[str]) -> tuple[int, int]:
    """
    Resolve a pickup time to (hour, minute) on a 24-hour clock.

    Only the start of a range is used ("2:00-3:00" -> 2:00). Unparseable
    hours or minutes become 0. Without an am/pm suffix, hours 1-7 are taken
    as afternoon; a genuine early-morning entry is misread by this rule.
    """
    time_str = (pickup_time or '').split('-')[0].strip().lower()
    is_pm = 'pm' in time_str
    is_am = 'am' in time_str
    has_am_pm = is_am or is_pm

    pieces = time_str.replace('am', '', 1).replace('pm', '', 1).split(':')
    hours = _leading_int(pieces[0])
    minutes = _leading_int(pieces[1]) if len(pieces) > 1 else None

    if hours is None:
        hours = 0
    if minutes is None:
        minutes = 0

    if has_am_pm and is_pm and hours < 12:
        hours += 12
    elif has_am_pm and is_am and hours == 12:
        hours = 0
    elif not has_am_pm and hours in AFTERNOON_HEURISTIC_HOURS:
        hours += 12

    return hours, minutes


def parse_instant(pickup_date: Optional[str], pickup_time: Optional[str]) -> NormalizedInstant:
    """
    Parse an order's pickup date and time into a single instant.

    Never raises. A missing or malformed date gives INVALID; a missing or
    malformed time falls back to midnight of a valid date. Hours or minutes
    past the end of the day roll into the next day.
    """
    date_parts = parse_date_parts(pickup_date)
    if date_parts is None:
        logger.debug("Unparseable pickup date %r", pickup_date)
        return INVALID

    year, month, day = date_parts
    try:
        day_start = datetime(year, month, day)
    except (ValueError, OverflowError):
        logger.debug("Pickup date %r is not a calendar date", pickup_date)
        return INVALID

    hours, minutes = parse_time_parts(pickup_time)
    try:
        return ValidInstant(day_start + timedelta(hours=hours, minutes=minutes))
    except OverflowError:
        logger.debug("Pickup time %r overflows date %r", pickup_time, pickup_date)
        return INVALID


def parse_order_instant(order) -> NormalizedInstant:
    """Parse any record with `pickup_date` and `pickup_time` attributes."""
    return parse_instant(getattr(order, 'pickup_date', None), getattr(order, 'pickup_time', None))


def instant_sort_key(instant: NormalizedInstant) -> tuple[int, datetime]:
    """Sort key placing INVALID before every valid instant."""
    if isinstance(instant, ValidInstant):
        return 1, instant.at
    return 0, datetime.min


def is_within(instant: NormalizedInstant, start: Optional[datetime] = None, end: Optional[datetime] = None) -> bool:
    """
    Check an instant against an inclusive range. Open bounds are None.

    INVALID is never within a range, including a fully open one.
    """
    if not isinstance(instant, ValidInstant):
        return False
    if start is not None and instant.at < start:
        return False
    if end is not None and instant.at > end:
        return False
    return True


def start_of_day(day: date) -> datetime:
    return datetime(day.year, day.month, day.day)


def end_of_day(day: date) -> datetime:
    return datetime(day.year, day.month, day.day, 23, 59, 59, 999999)
