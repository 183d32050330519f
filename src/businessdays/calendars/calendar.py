import logging
import threading
from datetime import date, datetime
from typing import Any, Iterable, Optional, Tuple, Union

import numpy as np

from ._exceptions import CalendarError

logger = logging.getLogger(__name__)

DateLike = Union[date, "np.datetime64", "np.ndarray", Iterable[Any]]
CountLike = Union[int, "np.ndarray", Iterable[int]]

_MIN_YEAR = 1
_MAX_YEAR = 9999
_DATE_MIN = np.datetime64(date.min, "D")
_DATE_MAX = np.datetime64(date.max, "D")


def _collapse(value: Any) -> Any:
    # datetime is a date subclass; keep only its calendar-date component.
    return value.date() if isinstance(value, datetime) else value


def _as_datetime64(value: DateLike) -> np.ndarray:
    value = _collapse(value)
    if isinstance(value, date):
        return np.asarray(np.datetime64(value, "D"))
    if isinstance(value, np.datetime64):
        return np.asarray(value).astype("datetime64[D]")
    arr = np.asarray(value)
    if np.issubdtype(arr.dtype, np.datetime64):
        return arr.astype("datetime64[D]")
    if arr.dtype.kind == "U":
        return arr.astype("datetime64[D]")
    flat = [_collapse(v) for v in arr.ravel()]
    for v in flat:
        if not isinstance(v, (date, np.datetime64)):
            raise TypeError(f"Expected dates; got {type(v).__name__} {v!r}.")
    return np.array(flat, dtype="datetime64[D]").reshape(arr.shape)


def _check_date_range(result: np.ndarray) -> None:
    # Outside date.min..date.max numpy converts to day counts, not dates.
    if result.size and (result.min() < _DATE_MIN or result.max() > _DATE_MAX):
        raise OverflowError("Business-day result is outside the datetime.date range.")


def _wrap_result(anchor: DateLike, result: np.ndarray, scalar: bool) -> Any:
    """Shape the numpy result like the caller's input."""
    result = np.asarray(result)
    if scalar:
        if isinstance(anchor, np.datetime64):
            return np.datetime64(result.item(), "D")
        _check_date_range(result)
        return result.item()
    if isinstance(anchor, np.ndarray) and np.issubdtype(anchor.dtype, np.datetime64):
        return result
    _check_date_range(result)
    return result.astype(object)


class HolidayCalendar:
    """
    A configured holiday calendar: a weekly business-day mask plus a rule
    set producing the holidays of each year.

    Calendars are handles compared by value: two instances are equal when
    they are of the same class and built with the same parameters.
    Business-day arithmetic runs on ``numpy.busday_offset`` against a
    holiday table that grows over a horizon of years as queries need it.
    """

    weekmask: str = "1111100"

    _DEFAULT_BUFFER_YEARS: int = 2
    _HOLIDAY_ALLOWANCE: int = 30

    def __init__(self) -> None:
        self._lock = threading.Lock()
        # (first_year, last_year, holidays, busdaycalendar); replaced atomically.
        self._cache: Optional[Tuple[int, int, np.ndarray, np.busdaycalendar]] = None

    # ── rules (override in subclasses) ───────────────────────────────────

    def _holidays_for_year(self, year: int) -> Iterable[date]:
        return ()

    def _key(self) -> tuple:
        return ()

    # ── identity ─────────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return type(self).__name__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HolidayCalendar):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))

    def __reduce__(self):
        return (type(self), self._key())

    def __repr__(self) -> str:
        args = ", ".join(repr(k) for k in self._key())
        return f"{self.name}({args})"

    # ── horizon management ───────────────────────────────────────────────

    @property
    def horizon(self) -> Optional[Tuple[int, int]]:
        """First and last year currently covered by the holiday table."""
        cache = self._cache
        return None if cache is None else (cache[0], cache[1])

    def _min_bdays_per_year(self) -> int:
        return max(self.weekmask.count("1") * 52 - self._HOLIDAY_ALLOWANCE, 1)

    def _build(self, first_year: int, last_year: int) -> Tuple[np.ndarray, np.busdaycalendar]:
        days = set()
        # Observed dates can spill into a neighbouring year.
        for year in range(max(first_year - 1, _MIN_YEAR), min(last_year + 1, _MAX_YEAR) + 1):
            for d in self._holidays_for_year(year):
                if first_year <= d.year <= last_year:
                    days.add(d)
        holidays = np.array(sorted(days), dtype="datetime64[D]")
        return holidays, np.busdaycalendar(weekmask=self.weekmask, holidays=holidays)

    def _cover(self, first_year: int, last_year: int) -> Tuple[np.ndarray, np.busdaycalendar]:
        first_year = max(first_year, _MIN_YEAR)
        last_year = min(last_year, _MAX_YEAR)
        cache = self._cache
        if cache is not None and cache[0] <= first_year and last_year <= cache[1]:
            return cache[2], cache[3]
        with self._lock:
            cache = self._cache
            if cache is not None:
                if cache[0] <= first_year and last_year <= cache[1]:
                    return cache[2], cache[3]
                first_year = min(first_year, cache[0])
                last_year = max(last_year, cache[1])
            holidays, busdaycal = self._build(first_year, last_year)
            self._cache = (first_year, last_year, holidays, busdaycal)
            logger.debug("%r: holiday horizon extended to %d-%d", self, first_year, last_year)
            return holidays, busdaycal

    def _ensure_horizon(
        self, d: np.ndarray, counts: Optional[np.ndarray] = None
    ) -> Tuple[np.ndarray, np.busdaycalendar]:
        d = d[~np.isnat(d)]
        if d.size == 0:
            year = date.today().year
            return self._cover(year, year)
        years = d.astype("datetime64[Y]").astype(np.int64) + 1970
        span = 0
        if counts is not None and counts.size:
            span = int(np.abs(counts).max()) // self._min_bdays_per_year() + 1
        buffer = span + self._DEFAULT_BUFFER_YEARS
        return self._cover(int(years.min()) - buffer, int(years.max()) + buffer)

    # ── queries ──────────────────────────────────────────────────────────

    def is_holiday(self, dt: DateLike) -> Union[bool, np.ndarray]:
        """True where ``dt`` is a holiday under this calendar's rules, weekend or not."""
        d = _as_datetime64(dt)
        holidays, _ = self._ensure_horizon(d)
        result = np.isin(d, holidays)
        return bool(result) if result.ndim == 0 else result

    def is_bday(self, dt: DateLike) -> Union[bool, np.ndarray]:
        d = _as_datetime64(dt)
        _, busdaycal = self._ensure_horizon(d)
        result = np.is_busday(d, busdaycal=busdaycal)
        return bool(result) if np.ndim(result) == 0 else result

    def to_bday(self, dt: DateLike, forward: bool = True) -> Any:
        """Roll ``dt`` to the nearest business day, forward or backward."""
        d = _as_datetime64(dt)
        _, busdaycal = self._ensure_horizon(d)
        roll = "forward" if forward else "backward"
        result = np.busday_offset(d, 0, roll=roll, busdaycal=busdaycal)
        return _wrap_result(dt, result, scalar=d.ndim == 0)

    def advance_bdays(self, anchor: DateLike, count: CountLike) -> Any:
        """
        Roll ``anchor`` forward to a business day, then walk ``count``
        business days forward (positive) or backward (negative).

        A zero count still rolls a non-business anchor forward.  Scalars
        return a ``datetime.date``; arrays broadcast against each other.
        """
        c = np.asarray(count)
        if not np.issubdtype(c.dtype, np.integer):
            raise CalendarError(f"Business-day counts must be integers; got {count!r}.")
        d = _as_datetime64(anchor)
        d, c = np.broadcast_arrays(d, c.astype(np.int64))
        _, busdaycal = self._ensure_horizon(d, c)
        result = np.busday_offset(d, c, roll="forward", busdaycal=busdaycal)
        return _wrap_result(anchor, result, scalar=d.ndim == 0)

    def bdays(self, start: DateLike, end: DateLike) -> Union[int, np.ndarray]:
        """Number of business days in ``[start, end)``; negative when ``end < start``."""
        s = _as_datetime64(start)
        e = _as_datetime64(end)
        _, busdaycal = self._ensure_horizon(np.concatenate([s.ravel(), e.ravel()]))
        result = np.busday_count(s, e, busdaycal=busdaycal)
        return int(result) if np.ndim(result) == 0 else result

    def list_holidays(self, start: DateLike, end: DateLike) -> list[date]:
        """Holidays in the closed interval that fall on a weekmask business day."""
        s = _as_datetime64(start)
        e = _as_datetime64(end)
        if s.ndim or e.ndim:
            raise CalendarError("list_holidays expects scalar dates.")
        holidays, _ = self._ensure_horizon(np.stack([s, e]))
        mask = (holidays >= s) & (holidays <= e) & np.is_busday(holidays, weekmask=self.weekmask)
        return [h.item() for h in holidays[mask]]
