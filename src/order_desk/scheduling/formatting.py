"""
Display helpers for pickup dates and times.
"""
import re
from datetime import datetime, timedelta
from typing import Optional

MAX_TIME_SLOTS = 100

_ISO_DATE = re.compile(r'^\d{4}-\d{2}-\d{2}$')
_LETTERS = re.compile(r'[a-z]')


def format_time_12_hour(moment: datetime) -> str:
    """Format a datetime as "2:05 PM"."""
    hours = moment.hour % 12 or 12
    am_pm = 'PM' if moment.hour >= 12 else 'AM'
    return f"{hours}:{moment.minute:02d} {am_pm}"


def format_time_display(time_str: Optional[str]) -> str:
    """
    Show a stored time in 12-hour form ("14:00" -> "2:00 PM").

    Text that already has letters ("2:00 PM", "noon") or is not H:MM is
    returned trimmed and otherwise unchanged.
    """
    if not time_str:
        return ''

    clean = time_str.strip()
    if _LETTERS.search(clean.lower()):
        return clean

    parts = clean.split(':')
    if len(parts) < 2:
        return clean

    try:
        hours = int(parts[0])
        minutes = int(parts[1])
    except ValueError:
        return clean

    am_pm = 'PM' if hours >= 12 else 'AM'
    hours = hours % 12 or 12
    return f"{hours}:{minutes:02d} {am_pm}"


def normalize_date_str(date_str: Optional[str]) -> str:
    """Convert MM/DD/YYYY to YYYY-MM-DD for string comparison; ISO input passes through."""
    if not date_str:
        return ''
    if '-' in date_str and len(date_str.split('-')[0]) == 4:
        return date_str

    parts = date_str.split('/')
    if len(parts) == 3:
        month, day, year = parts
        return f"{year}-{month.zfill(2)}-{day.zfill(2)}"
    return date_str


def format_date_for_display(date_str: Optional[str]) -> str:
    """Show any supported pickup date as MM/DD/YYYY."""
    if not date_str:
        return ''

    if _ISO_DATE.match(date_str):
        year, month, day = date_str.split('-')
    elif '/' in date_str:
        parts = date_str.split('/')
        if len(parts) != 3:
            return date_str
        month, day, year = parts
    elif '-' in date_str:
        parts = date_str.split('-')
        if len(parts) != 3:
            return date_str
        if len(parts[0]) == 4:
            year, month, day = parts
        else:
            month, day, year = parts
    else:
        return date_str

    if year and month and day:
        return f"{month.zfill(2)}/{day.zfill(2)}/{year}"
    return date_str


def generate_time_slots(date_str: str, start_time: str, end_time: str, interval_minutes: int) -> list[str]:
    """
    List pickup slot labels between two 24-hour times, both ends included.

    Args:
        date_str: Day of the slots, YYYY-MM-DD
        start_time: First slot, HH:MM
        end_time: Last possible slot, HH:MM
        interval_minutes: Minutes between slots

    Returns:
        Labels like "2:00 PM", at most MAX_TIME_SLOTS of them
    """
    if interval_minutes <= 0:
        return []

    current = datetime.strptime(f"{date_str} {start_time}", "%Y-%m-%d %H:%M")
    end = datetime.strptime(f"{date_str} {end_time}", "%Y-%m-%d %H:%M")
    step = timedelta(minutes=interval_minutes)

    slots = []
    while current <= end and len(slots) < MAX_TIME_SLOTS:
        slots.append(format_time_12_hour(current))
        current += step
    return slots
