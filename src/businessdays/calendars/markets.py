from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable

from ._exceptions import CalendarError
from .calendar import HolidayCalendar
from .rules import (
    MON,
    THU,
    SUN,
    christmas_and_boxing_day,
    easter_sunday,
    last_weekday,
    nearest_weekday,
    next_monday_if_weekend,
    nth_weekday,
    weekday_on_or_after,
)


class WeekendsOnly(HolidayCalendar):
    """Saturdays and Sundays are the only non-business days."""


class NullHolidayCalendar(HolidayCalendar):
    """Every day is a business day."""

    weekmask = "1111111"


class USSettlement(HolidayCalendar):
    """US federal holidays, observed on the nearest weekday."""

    def _holidays_for_year(self, year: int) -> Iterable[date]:
        yield nearest_weekday(date(year, 1, 1))
        if year >= 1983:
            yield nth_weekday(year, 1, MON, 3)
        yield nth_weekday(year, 2, MON, 3)
        yield last_weekday(year, 5, MON)
        if year >= 2021:
            yield nearest_weekday(date(year, 6, 19))
        yield nearest_weekday(date(year, 7, 4))
        yield nth_weekday(year, 9, MON, 1)
        yield nth_weekday(year, 10, MON, 2)
        yield nearest_weekday(date(year, 11, 11))
        yield nth_weekday(year, 11, THU, 4)
        yield nearest_weekday(date(year, 12, 25))


# Known one-off NYSE full-closure dates (in addition to recurring holiday rules).
NYSE_SPECIAL_CLOSED_DAYS = frozenset({
    date(2001, 9, 11),  # September 11 attacks
    date(2001, 9, 12),
    date(2001, 9, 13),
    date(2001, 9, 14),
    date(2004, 6, 11),  # National Day of Mourning (Ronald Reagan)
    date(2007, 1, 2),   # National Day of Mourning (Gerald Ford)
    date(2012, 10, 29), # Hurricane Sandy
    date(2012, 10, 30),
    date(2018, 12, 5),  # National Day of Mourning (George H. W. Bush)
    date(2025, 1, 9),   # National Day of Mourning (Jimmy Carter)
})


class USNYSE(HolidayCalendar):
    """New York Stock Exchange full-day closures."""

    def _holidays_for_year(self, year: int) -> Iterable[date]:
        # A Saturday New Year's Day is not observed on the preceding Friday.
        new_year = date(year, 1, 1)
        if new_year.weekday() == SUN:
            yield new_year + timedelta(days=1)
        elif new_year.weekday() < 5:
            yield new_year
        if year >= 1998:
            yield nth_weekday(year, 1, MON, 3)
        yield nth_weekday(year, 2, MON, 3)
        yield easter_sunday(year) - timedelta(days=2)
        yield last_weekday(year, 5, MON)
        if year >= 2022:
            yield nearest_weekday(date(year, 6, 19))
        yield nearest_weekday(date(year, 7, 4))
        yield nth_weekday(year, 9, MON, 1)
        yield nth_weekday(year, 11, THU, 4)
        yield nearest_weekday(date(year, 12, 25))
        yield from (d for d in NYSE_SPECIAL_CLOSED_DAYS if d.year == year)


class BRSettlement(HolidayCalendar):
    """Brazilian banking holidays; none is moved off a weekend."""

    def _holidays_for_year(self, year: int) -> Iterable[date]:
        easter = easter_sunday(year)
        yield date(year, 1, 1)
        yield easter - timedelta(days=48)  # Carnival Monday
        yield easter - timedelta(days=47)  # Carnival Tuesday
        yield easter - timedelta(days=2)
        yield date(year, 4, 21)
        yield date(year, 5, 1)
        yield easter + timedelta(days=60)  # Corpus Christi
        yield date(year, 9, 7)
        yield date(year, 10, 12)
        yield date(year, 11, 2)
        yield date(year, 11, 15)
        if year >= 2024:
            yield date(year, 11, 20)
        yield date(year, 12, 25)


class Australia(HolidayCalendar):
    """
    Australian public holidays for one state or territory.

    Instances for different states are different calendars even though
    they share a display name.
    """

    STATES = ("ACT", "NSW")

    def __init__(self, state: str) -> None:
        if state not in self.STATES:
            raise CalendarError(
                f"Unsupported Australian state {state!r}; expected one of {self.STATES}."
            )
        self._state = state
        super().__init__()

    @property
    def state(self) -> str:
        return self._state

    def _key(self) -> tuple:
        return (self._state,)

    def _holidays_for_year(self, year: int) -> Iterable[date]:
        easter = easter_sunday(year)
        yield next_monday_if_weekend(date(year, 1, 1))
        yield next_monday_if_weekend(date(year, 1, 26))
        yield easter - timedelta(days=2)
        yield easter + timedelta(days=1)
        yield nth_weekday(year, 6, MON, 2)
        yield nth_weekday(year, 10, MON, 1)
        yield from christmas_and_boxing_day(year)

        if self._state == "ACT":
            yield next_monday_if_weekend(date(year, 4, 25))
            yield nth_weekday(year, 3, MON, 2)  # Canberra Day
            if year >= 2018:
                yield weekday_on_or_after(date(year, 5, 27), MON)  # Reconciliation Day
        elif self._state == "NSW":
            yield date(year, 4, 25)
            yield nth_weekday(year, 8, MON, 1)  # Bank Holiday

