# src/businessdays/period/__init__.py
"""
businessdays.period
~~~~~~~~~~~~~~~~~~~

Business-day periods: a signed count of business days tagged with the
holiday calendar it is measured against, with integer-style arithmetic
and date arithmetic through that calendar.

Basic usage::

    from datetime import date
    from businessdays.period import BDay, fld, gcdx

    bd = BDay(5, "USNYSE")
    date(2023, 1, 3) + bd                 # → date(2023, 1, 10)
    bd + BDay(3, "USNYSE")                # → BusinessDayPeriod(8, USNYSE)
    fld(BDay(-10, "USNYSE"), 3)           # → BusinessDayPeriod(-4, USNYSE)

Periods on different calendars never combine::

    BDay(5, "USNYSE") + BDay(3, "Brazil")  # raises CalendarMismatch

Public API
----------
BusinessDayPeriod   The period value type (alias ``BDay``).
RoundingMode        Rounding for ``div``.
PeriodError         Base exception for all period errors.
"""

from __future__ import annotations

from businessdays.period._exceptions import (
    CalendarMismatch,
    InexactResult,
    InvalidMagnitude,
    PeriodError,
)
from businessdays.period.bday import (
    BDay,
    BusinessDayPeriod,
    calendar_of,
    cld,
    compare,
    div,
    fld,
    gcd,
    gcdx,
    iszero,
    lcm,
    magnitude_of,
    mod,
    one,
    rem,
    sign,
    zero,
)
from businessdays.period.integers import RoundingMode

__all__ = [
    "BusinessDayPeriod",
    "BDay",
    "RoundingMode",
    "magnitude_of",
    "calendar_of",
    "compare",
    "div",
    "fld",
    "cld",
    "mod",
    "rem",
    "gcd",
    "lcm",
    "gcdx",
    "zero",
    "one",
    "iszero",
    "sign",
    "PeriodError",
    "InvalidMagnitude",
    "CalendarMismatch",
    "InexactResult",
]
