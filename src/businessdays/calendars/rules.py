"""Date rules shared by the holiday calendars."""

from __future__ import annotations

from datetime import date, timedelta

MON, TUE, WED, THU, FRI, SAT, SUN = range(7)


def nth_weekday(year: int, month: int, weekday: int, n: int) -> date:
    first = date(year, month, 1)
    offset = (weekday - first.weekday()) % 7
    return date(year, month, 1 + offset + (n - 1) * 7)


def last_weekday(year: int, month: int, weekday: int) -> date:
    if month == 12:
        cursor = date(year + 1, 1, 1) - timedelta(days=1)
    else:
        cursor = date(year, month + 1, 1) - timedelta(days=1)
    return cursor - timedelta(days=(cursor.weekday() - weekday) % 7)


def weekday_on_or_after(d: date, weekday: int) -> date:
    return d + timedelta(days=(weekday - d.weekday()) % 7)


def easter_sunday(year: int) -> date:
    # Meeus/Jones/Butcher algorithm (Gregorian calendar).
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def nearest_weekday(d: date) -> date:
    """Saturday holidays move back to Friday, Sunday holidays forward to Monday."""
    if d.weekday() == SAT:
        return d - timedelta(days=1)
    if d.weekday() == SUN:
        return d + timedelta(days=1)
    return d


def next_monday_if_weekend(d: date) -> date:
    if d.weekday() >= SAT:
        return weekday_on_or_after(d, MON)
    return d


def christmas_and_boxing_day(year: int) -> tuple[date, date]:
    """Christmas and Boxing Day with Commonwealth weekend substitution."""
    christmas = date(year, 12, 25)
    wd = christmas.weekday()
    if wd == FRI:
        return christmas, date(year, 12, 28)
    if wd == SAT:
        return date(year, 12, 27), date(year, 12, 28)
    if wd == SUN:
        return date(year, 12, 27), date(year, 12, 26)
    return christmas, date(year, 12, 26)
