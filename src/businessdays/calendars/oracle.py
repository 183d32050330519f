"""
Function-style access to calendar queries.  Every function takes a
calendar handle, a ``CalendarName`` or a registered name as its first
argument, e.g. ``advance_bdays("USNYSE", date(2023, 1, 3), 5)``.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Union

import numpy as np

from .calendar import CountLike, DateLike
from .registry import CalendarLike, resolve_calendar


def calendar_equals(a: CalendarLike, b: CalendarLike) -> bool:
    return resolve_calendar(a) == resolve_calendar(b)


def calendar_hash(calendar: CalendarLike) -> int:
    return hash(resolve_calendar(calendar))


def display_name(calendar: CalendarLike) -> str:
    return resolve_calendar(calendar).name


def advance_bdays(calendar: CalendarLike, anchor: DateLike, count: CountLike) -> Any:
    return resolve_calendar(calendar).advance_bdays(anchor, count)


def is_holiday(calendar: CalendarLike, dt: DateLike) -> Union[bool, np.ndarray]:
    return resolve_calendar(calendar).is_holiday(dt)


def is_bday(calendar: CalendarLike, dt: DateLike) -> Union[bool, np.ndarray]:
    return resolve_calendar(calendar).is_bday(dt)


def to_bday(calendar: CalendarLike, dt: DateLike, forward: bool = True) -> Any:
    return resolve_calendar(calendar).to_bday(dt, forward=forward)


def bdays(calendar: CalendarLike, start: DateLike, end: DateLike) -> Union[int, np.ndarray]:
    return resolve_calendar(calendar).bdays(start, end)


def list_holidays(calendar: CalendarLike, start: DateLike, end: DateLike) -> list[date]:
    return resolve_calendar(calendar).list_holidays(start, end)
