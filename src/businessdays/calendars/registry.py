"""Name -> calendar registry used to resolve symbolic and string calendar names."""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Callable, Union

from ._exceptions import UnknownCalendar
from .calendar import HolidayCalendar
from .markets import (
    Australia,
    BRSettlement,
    NullHolidayCalendar,
    USNYSE,
    USSettlement,
    WeekendsOnly,
)

logger = logging.getLogger(__name__)

CalendarFactory = Callable[[], HolidayCalendar]


class CalendarName(str, Enum):
    WEEKENDS_ONLY = "WeekendsOnly"
    NULL = "NullHolidayCalendar"
    US_SETTLEMENT = "USSettlement"
    USNYSE = "USNYSE"
    NYSE = "NYSE"
    BR_SETTLEMENT = "BRSettlement"
    BRAZIL = "Brazil"
    AUSTRALIA_ACT = "Australia/ACT"
    AUSTRALIA_NSW = "Australia/NSW"


CalendarLike = Union[HolidayCalendar, CalendarName, str]

_FACTORIES: dict[str, CalendarFactory] = {
    CalendarName.WEEKENDS_ONLY.value: WeekendsOnly,
    CalendarName.NULL.value: NullHolidayCalendar,
    CalendarName.US_SETTLEMENT.value: USSettlement,
    CalendarName.USNYSE.value: USNYSE,
    CalendarName.NYSE.value: USNYSE,
    CalendarName.BR_SETTLEMENT.value: BRSettlement,
    CalendarName.BRAZIL.value: BRSettlement,
    CalendarName.AUSTRALIA_ACT.value: lambda: Australia("ACT"),
    CalendarName.AUSTRALIA_NSW.value: lambda: Australia("NSW"),
}
# One shared instance per name so the holiday cache is built once.
_INSTANCES: dict[str, HolidayCalendar] = {}
_LOCK = threading.Lock()


def register_calendar(name: str, factory: CalendarFactory) -> None:
    """Add or replace the calendar built for ``name``."""
    if not isinstance(name, str) or not name:
        raise ValueError(f"Calendar name must be a non-empty string; got {name!r}.")
    if not callable(factory):
        raise TypeError("factory must be callable.")
    with _LOCK:
        replaced = name in _FACTORIES
        _FACTORIES[name] = factory
        _INSTANCES.pop(name, None)
    logger.debug("%s calendar %r", "Replaced" if replaced else "Registered", name)


def registered_calendars() -> list[str]:
    with _LOCK:
        return sorted(_FACTORIES)


def resolve_calendar(calendar: CalendarLike) -> HolidayCalendar:
    """
    Return the calendar handle for a handle, a ``CalendarName`` or a string.

    Raises ``UnknownCalendar`` when the name is not registered.
    """
    if isinstance(calendar, HolidayCalendar):
        return calendar
    if isinstance(calendar, CalendarName):
        name = calendar.value
    elif isinstance(calendar, str):
        name = calendar
    else:
        raise UnknownCalendar(f"Cannot resolve a calendar from {calendar!r}.")

    with _LOCK:
        instance = _INSTANCES.get(name)
        if instance is None:
            factory = _FACTORIES.get(name)
            if factory is None:
                raise UnknownCalendar(f"Unknown calendar {name!r}.")
            instance = factory()
            _INSTANCES[name] = instance
            logger.debug("Resolved calendar %r to %r", name, instance)
    return instance
