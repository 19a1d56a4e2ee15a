"""
Labor - Shift hours, pay and per-employee labor totals.
"""
import logging
import re
import uuid
from datetime import date
from typing import Iterable, Optional

import pandas as pd

from ..engine.models import Employee, WorkShift
from ..exceptions import ShiftError

logger = logging.getLogger(__name__)

_CLOCK_PART = re.compile(r'\s*[0-9]+\s*')


def _minutes_of_day(clock: Optional[str]) -> Optional[int]:
    """HH:MM -> minutes since midnight, or None when either part is missing or not a number."""
    if not clock:
        return None
    pieces = clock.split(':')
    if len(pieces) < 2 or not all(_CLOCK_PART.fullmatch(p) for p in pieces[:2]):
        return None
    return int(pieces[0]) * 60 + int(pieces[1])


def shift_hours(start_time: Optional[str], end_time: Optional[str]) -> float:
    """
    Hours between two same-day HH:MM clock times.

    Returns 0 when either time is empty or malformed, or when the end is
    before the start. Overnight shifts are not supported.
    """
    start = _minutes_of_day(start_time)
    end = _minutes_of_day(end_time)
    if start is None or end is None:
        return 0.0
    if end < start:
        logger.debug("Shift ends before it starts (%s-%s)", start_time, end_time)
        return 0.0
    return (end - start) / 60


def shift_pay(start_time: Optional[str], end_time: Optional[str], hourly_wage: float) -> float:
    return shift_hours(start_time, end_time) * (hourly_wage or 0.0)


def log_shift(employee: Employee, start_time: str, end_time: str, shift_date: Optional[str] = None,
              notes: str = "") -> WorkShift:
    """
    Record a shift for an employee at their current wage.

    Raises:
        ShiftError: The times give no hours worked
    """
    hours = shift_hours(start_time, end_time)
    if hours <= 0:
        raise ShiftError(f"Invalid start or end time: {start_time!r} to {end_time!r}")

    wage = employee.hourly_wage or 0.0
    return WorkShift(
        id=uuid.uuid4().hex,
        employee_id=employee.id,
        employee_name=employee.name or "Unknown",
        date=shift_date or date.today().isoformat(),
        start_time=start_time,
        end_time=end_time,
        hours=hours,
        hourly_wage=wage,
        total_pay=hours * wage,
        notes=notes,
    )


def labor_summary(shifts: Iterable[WorkShift]) -> pd.DataFrame:
    """Hours and pay per employee, highest pay first."""
    rows = [{"employee": s.employee_name, "hours": s.hours, "pay": s.total_pay} for s in shifts]
    if not rows:
        return pd.DataFrame(columns=["employee", "hours", "pay"])

    df = pd.DataFrame(rows).groupby("employee", as_index=False, sort=False)[["hours", "pay"]].sum()
    return df.sort_values("pay", ascending=False, kind="stable").reset_index(drop=True)
