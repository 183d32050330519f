from __future__ import annotations

import math
import numbers
import re
from datetime import date
from fractions import Fraction
from typing import Any, Union

import numpy as np

from businessdays.calendars import CalendarLike, HolidayCalendar, resolve_calendar

from ._exceptions import CalendarMismatch, InexactResult, InvalidMagnitude
from .integers import RoundingMode, divround, truncated_rem
from .integers import gcdx as _int_gcdx

_INT64 = np.iinfo(np.int64)
_INTEGER_TEXT = re.compile(r"\s*[+-]?[0-9]+\s*")

Scalar = Union[int, float, Fraction, np.integer, np.floating]


def _in_int64(value: int) -> bool:
    return _INT64.min <= value <= _INT64.max


def _as_int(value: Any) -> int | None:
    """``int(value)`` when ``value`` is an integral real number, else None."""
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        try:
            as_int = int(value)
        except (OverflowError, ValueError):   # inf, nan
            return None
        return as_int if as_int == value else None
    return None


def _align_magnitude(value: Any) -> int:
    if isinstance(value, (bool, np.bool_)):
        raise InvalidMagnitude(f"Magnitude must be an integer; got {value!r}.")
    if isinstance(value, str):
        if _INTEGER_TEXT.fullmatch(value) is None:
            raise InvalidMagnitude(f"Cannot parse {value!r} as an integer magnitude.")
        magnitude = int(value)
    else:
        magnitude = _as_int(value)
        if magnitude is None:
            raise InvalidMagnitude(f"Magnitude must be an integer; got {value!r}.")
    if not _in_int64(magnitude):
        raise InvalidMagnitude(f"Magnitude {magnitude} does not fit in a signed 64-bit integer.")
    return magnitude


def _exact(value: Any, action: str) -> int:
    """Checked conversion of an arithmetic result back to a magnitude."""
    as_int = _as_int(value)
    if as_int is None or not _in_int64(as_int):
        raise InexactResult(f"Cannot {action}: {value!r} is not an exact 64-bit integer.")
    return as_int


def _as_fraction(x: numbers.Real, action: str) -> Fraction:
    """Exact rational value of a real scalar; floats convert without rounding."""
    if isinstance(x, numbers.Rational):
        return Fraction(x.numerator, x.denominator)
    as_float = float(x)
    if not math.isfinite(as_float):
        raise InexactResult(f"Cannot {action} a BusinessDayPeriod by {x!r}.")
    return Fraction(as_float)


def _integral_scalar(x: Any, action: str) -> int:
    if not isinstance(x, numbers.Real):
        raise TypeError(f"Cannot {action} a BusinessDayPeriod by {type(x).__name__}.")
    return _exact(x, action)


def _is_date_operand(other: Any) -> bool:
    if isinstance(other, np.ndarray):
        return np.issubdtype(other.dtype, np.datetime64) or other.dtype == object
    return isinstance(other, (date, np.datetime64))


class BusinessDayPeriod:
    """
    A signed number of business days measured against one holiday calendar.

    ``BusinessDayPeriod(5, "USNYSE")`` is five NYSE business days.  The
    calendar may be a handle, a ``CalendarName`` or a registered name;
    the magnitude an integer or an integer literal string.

    Periods only combine with periods on an equal calendar; anything else
    raises ``CalendarMismatch``.  Adding a period to a date walks the
    calendar; a zero period still rolls a non-business date forward::

        date(2023, 1, 13) + BDay(1, "USNYSE")   # → date(2023, 1, 17)
        date(2023, 1, 7) + BDay(0, "USNYSE")    # → date(2023, 1, 9)
    """

    __slots__ = ("_magnitude", "_calendar")

    # Make numpy defer binary operators, so the period is applied to an
    # array of dates as one scalar instead of being broadcast into it.
    __array_ufunc__ = None

    def __init__(self, magnitude: Union[int, str], calendar: CalendarLike) -> None:
        self._magnitude = _align_magnitude(magnitude)
        self._calendar = resolve_calendar(calendar)

    @property
    def magnitude(self) -> int:
        return self._magnitude

    @property
    def calendar(self) -> HolidayCalendar:
        return self._calendar

    def _with(self, value: Any, action: str) -> BusinessDayPeriod:
        return type(self)(_exact(value, action), self._calendar)

    # ── equality / ordering ──────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BusinessDayPeriod):
            return NotImplemented
        return self._magnitude == other._magnitude and self._calendar == other._calendar

    def __hash__(self) -> int:
        return hash((self._calendar, self._magnitude))

    def __lt__(self, other: BusinessDayPeriod) -> bool:
        if not isinstance(other, BusinessDayPeriod):
            return NotImplemented
        _check_calendars(self, other, "compare")
        return self._magnitude < other._magnitude

    def __le__(self, other: BusinessDayPeriod) -> bool:
        if not isinstance(other, BusinessDayPeriod):
            return NotImplemented
        _check_calendars(self, other, "compare")
        return self._magnitude <= other._magnitude

    def __gt__(self, other: BusinessDayPeriod) -> bool:
        if not isinstance(other, BusinessDayPeriod):
            return NotImplemented
        _check_calendars(self, other, "compare")
        return self._magnitude > other._magnitude

    def __ge__(self, other: BusinessDayPeriod) -> bool:
        if not isinstance(other, BusinessDayPeriod):
            return NotImplemented
        _check_calendars(self, other, "compare")
        return self._magnitude >= other._magnitude

    def __bool__(self) -> bool:
        return self._magnitude != 0

    # ── unary ────────────────────────────────────────────────────────────

    def __neg__(self) -> BusinessDayPeriod:
        return self._with(-self._magnitude, "negate")

    def __pos__(self) -> BusinessDayPeriod:
        return self

    def __abs__(self) -> BusinessDayPeriod:
        return self._with(abs(self._magnitude), "take the absolute value")

    # ── addition / subtraction (periods and dates) ───────────────────────

    def __add__(self, other: Any) -> Any:
        if isinstance(other, BusinessDayPeriod):
            _check_calendars(self, other, "add")
            return self._with(self._magnitude + other._magnitude, "add")
        if _is_date_operand(other):
            return self._calendar.advance_bdays(other, self._magnitude)
        return NotImplemented

    def __radd__(self, other: Any) -> Any:
        if _is_date_operand(other):
            return self._calendar.advance_bdays(other, self._magnitude)
        return NotImplemented

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, BusinessDayPeriod):
            _check_calendars(self, other, "subtract")
            return self._with(self._magnitude - other._magnitude, "subtract")
        return NotImplemented

    def __rsub__(self, other: Any) -> Any:
        if _is_date_operand(other):
            return self._calendar.advance_bdays(other, -self._magnitude)
        return NotImplemented

    # ── scaling / division ───────────────────────────────────────────────

    def __mul__(self, other: Any) -> BusinessDayPeriod:
        if isinstance(other, BusinessDayPeriod) or not isinstance(other, numbers.Real):
            return NotImplemented
        if isinstance(other, numbers.Integral):
            return self._with(self._magnitude * int(other), "multiply")
        return self._with(self._magnitude * _as_fraction(other, "multiply"), "multiply")

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Union[float, BusinessDayPeriod]:
        if isinstance(other, BusinessDayPeriod):
            _check_calendars(self, other, "divide")
            return self._magnitude / other._magnitude
        if isinstance(other, numbers.Integral):
            return self._with(Fraction(self._magnitude, int(other)), "divide")
        if isinstance(other, numbers.Real):
            return self._with(Fraction(self._magnitude) / _as_fraction(other, "divide"), "divide")
        return NotImplemented

    def __floordiv__(self, other: Any) -> Union[int, BusinessDayPeriod]:
        if not isinstance(other, (BusinessDayPeriod, numbers.Real)):
            return NotImplemented
        return div(self, other, RoundingMode.DOWN)

    def __mod__(self, other: Any) -> BusinessDayPeriod:
        if not isinstance(other, (BusinessDayPeriod, numbers.Real)):
            return NotImplemented
        return mod(self, other)

    def __divmod__(self, other: Any) -> tuple:
        if not isinstance(other, (BusinessDayPeriod, numbers.Real)):
            return NotImplemented
        return div(self, other, RoundingMode.DOWN), mod(self, other)

    # ── display ──────────────────────────────────────────────────────────

    def __repr__(self) -> str:
        return f"BusinessDayPeriod({self._magnitude}, {self._calendar.name})"

    def __str__(self) -> str:
        unit = "business day" if abs(self._magnitude) == 1 else "business days"
        return f"{self._magnitude} {unit} ({self._calendar.name})"


BDay = BusinessDayPeriod


def _check_calendars(p1: BusinessDayPeriod, p2: BusinessDayPeriod, action: str) -> None:
    if p1.calendar != p2.calendar:
        raise CalendarMismatch(
            f"Cannot {action} BusinessDayPeriod values with different calendars: "
            f"{p1.calendar!r} vs {p2.calendar!r}"
        )


# ── functional API ───────────────────────────────────────────────────────────

def magnitude_of(p: BusinessDayPeriod) -> int:
    return p.magnitude


def calendar_of(p: BusinessDayPeriod) -> HolidayCalendar:
    return p.calendar


def compare(p1: BusinessDayPeriod, p2: BusinessDayPeriod) -> int:
    """-1, 0 or 1 as ``p1`` is shorter than, equal to or longer than ``p2``."""
    _check_calendars(p1, p2, "compare")
    return (p1.magnitude > p2.magnitude) - (p1.magnitude < p2.magnitude)


def div(
    p: BusinessDayPeriod,
    x: Union[BusinessDayPeriod, Scalar],
    mode: RoundingMode = RoundingMode.TO_ZERO,
) -> Union[int, BusinessDayPeriod]:
    """
    Integer division rounded by ``mode``.

    Dividing by a period on the same calendar gives a plain ``int``;
    dividing by an integral scalar gives a period.
    """
    if isinstance(x, BusinessDayPeriod):
        _check_calendars(p, x, "compute div of")
        return divround(p.magnitude, x.magnitude, mode)
    return p._with(divround(p.magnitude, _integral_scalar(x, "divide"), mode), "divide")


def fld(p: BusinessDayPeriod, x: Union[BusinessDayPeriod, Scalar]) -> Union[int, BusinessDayPeriod]:
    return div(p, x, RoundingMode.DOWN)


def cld(p: BusinessDayPeriod, x: Union[BusinessDayPeriod, Scalar]) -> Union[int, BusinessDayPeriod]:
    return div(p, x, RoundingMode.UP)


def mod(p: BusinessDayPeriod, x: Union[BusinessDayPeriod, Scalar]) -> BusinessDayPeriod:
    """Remainder with the sign of the divisor."""
    if isinstance(x, BusinessDayPeriod):
        _check_calendars(p, x, "compute mod of")
        return p._with(p.magnitude % x.magnitude, "compute mod of")
    return p._with(p.magnitude % _integral_scalar(x, "compute mod of"), "compute mod of")


def rem(p: BusinessDayPeriod, x: Union[BusinessDayPeriod, Scalar]) -> BusinessDayPeriod:
    """Remainder with the sign of the dividend."""
    if isinstance(x, BusinessDayPeriod):
        _check_calendars(p, x, "compute rem of")
        return p._with(truncated_rem(p.magnitude, x.magnitude), "compute rem of")
    return p._with(truncated_rem(p.magnitude, _integral_scalar(x, "compute rem of")), "compute rem of")


def gcd(p1: BusinessDayPeriod, p2: BusinessDayPeriod) -> BusinessDayPeriod:
    _check_calendars(p1, p2, "compute gcd of")
    return p1._with(math.gcd(p1.magnitude, p2.magnitude), "compute gcd of")


def lcm(p1: BusinessDayPeriod, p2: BusinessDayPeriod) -> BusinessDayPeriod:
    _check_calendars(p1, p2, "compute lcm of")
    return p1._with(math.lcm(p1.magnitude, p2.magnitude), "compute lcm of")


def gcdx(p1: BusinessDayPeriod, p2: BusinessDayPeriod) -> tuple[BusinessDayPeriod, int, int]:
    """``(g, x, y)`` with ``g`` the gcd period and plain-integer Bézout coefficients."""
    _check_calendars(p1, p2, "compute gcdx of")
    g, x, y = _int_gcdx(p1.magnitude, p2.magnitude)
    return p1._with(g, "compute gcdx of"), x, y


def zero(p: BusinessDayPeriod) -> BusinessDayPeriod:
    return type(p)(0, p.calendar)


def one(p: BusinessDayPeriod) -> int:
    # The multiplicative identity is dimensionless.
    return 1


def iszero(p: BusinessDayPeriod) -> bool:
    return p.magnitude == 0


def sign(p: BusinessDayPeriod) -> int:
    return (p.magnitude > 0) - (p.magnitude < 0)
