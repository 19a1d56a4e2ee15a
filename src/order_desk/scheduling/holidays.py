"""
Holiday Calendar - US and food-marketing holidays shown on the order calendar.
"""
import calendar
from dataclasses import dataclass
from datetime import date, timedelta

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)


@dataclass(frozen=True)
class Holiday:
    date: date
    name: str


def nth_weekday(year: int, month: int, weekday: int, n: int) -> date:
    """Date of the nth `weekday` (Monday=0) in a month, e.g. 4th Thursday."""
    first = date(year, month, 1)
    offset = (weekday - first.weekday()) % 7
    return first + timedelta(days=offset + 7 * (n - 1))


def last_weekday(year: int, month: int, weekday: int) -> date:
    """Date of the last `weekday` (Monday=0) in a month."""
    last = date(year, month, calendar.monthrange(year, month)[1])
    return last - timedelta(days=(last.weekday() - weekday) % 7)


def get_us_holidays(year: int) -> list[Holiday]:
    """Return the holidays for a year, grouped by month."""
    thanksgiving = nth_weekday(year, 11, THURSDAY, 4)

    return [
        # January
        Holiday(date(year, 1, 1), "New Year's Day"),
        Holiday(nth_weekday(year, 1, MONDAY, 3), "MLK Jr. Day"),

        # February
        Holiday(date(year, 2, 9), "Nat. Pizza Day"),
        Holiday(nth_weekday(year, 2, SUNDAY, 2), "Super Bowl Sun"),
        Holiday(date(year, 2, 13), "Galentine's Day"),
        Holiday(date(year, 2, 14), "Valentine's Day"),
        Holiday(nth_weekday(year, 2, MONDAY, 3), "Presidents' Day"),
        Holiday(date(year, 2, 22), "Nat. Margarita Day"),

        # March
        Holiday(date(year, 3, 8), "Intl. Women's Day"),
        Holiday(date(year, 3, 14), "Pi Day"),
        Holiday(date(year, 3, 17), "St. Patrick's Day"),

        # April
        Holiday(date(year, 4, 1), "April Fools"),
        Holiday(date(year, 4, 8), "Nat. Empanada Day"),

        # May
        Holiday(date(year, 5, 4), "Star Wars Day"),
        Holiday(date(year, 5, 5), "Cinco de Mayo"),
        Holiday(nth_weekday(year, 5, SUNDAY, 2), "Mother's Day"),
        Holiday(last_weekday(year, 5, MONDAY), "Memorial Day"),

        # June
        Holiday(nth_weekday(year, 6, SUNDAY, 3), "Father's Day"),
        Holiday(date(year, 6, 19), "Juneteenth"),

        # July
        Holiday(date(year, 7, 4), "Independence Day"),
        Holiday(nth_weekday(year, 7, SUNDAY, 3), "Nat. Ice Cream Day"),

        # September
        Holiday(nth_weekday(year, 9, MONDAY, 1), "Labor Day"),

        # October
        Holiday(date(year, 10, 4), "Nat. Taco Day"),
        Holiday(nth_weekday(year, 10, MONDAY, 2), "Columbus Day"),
        Holiday(date(year, 10, 31), "Halloween"),

        # November
        Holiday(date(year, 11, 11), "Veterans Day"),
        Holiday(thanksgiving, "Thanksgiving"),
        Holiday(thanksgiving + timedelta(days=1), "Black Friday"),
        Holiday(thanksgiving + timedelta(days=2), "Small Biz Sat"),
        Holiday(thanksgiving + timedelta(days=4), "Cyber Monday"),

        # December
        Holiday(date(year, 12, 24), "Christmas Eve"),
        Holiday(date(year, 12, 25), "Christmas Day"),
        Holiday(date(year, 12, 31), "New Year's Eve"),
    ]


def holidays_on(day: date) -> list[str]:
    """Names of the holidays falling on one day."""
    return [h.name for h in get_us_holidays(day.year) if h.date == day]
