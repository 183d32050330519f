"""Integer division with explicit rounding, truncated remainder and extended gcd."""

from __future__ import annotations

from enum import Enum


class RoundingMode(Enum):
    TO_ZERO = "to_zero"
    DOWN = "down"
    UP = "up"
    NEAREST = "nearest"   # ties to even


def divround(a: int, b: int, mode: RoundingMode = RoundingMode.TO_ZERO) -> int:
    """Quotient of ``a / b`` rounded according to ``mode``, in exact integer arithmetic."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    q, r = divmod(a, b)   # floor quotient; r carries the sign of b
    if r == 0 or mode is RoundingMode.DOWN:
        return q
    if mode is RoundingMode.UP:
        return q + 1
    if mode is RoundingMode.TO_ZERO:
        return q + 1 if (a < 0) != (b < 0) else q
    if mode is RoundingMode.NEAREST:
        twice = 2 * abs(r)
        if twice < abs(b):
            return q
        if twice > abs(b):
            return q + 1
        return q if q % 2 == 0 else q + 1
    raise ValueError(f"Unsupported rounding mode {mode!r}.")


def truncated_rem(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    return a - b * divround(a, b, RoundingMode.TO_ZERO)


def gcdx(a: int, b: int) -> tuple[int, int, int]:
    """
    Extended Euclid: ``(g, x, y)`` with ``g == gcd(a, b) >= 0`` and
    ``a * x + b * y == g``.

    Uses truncated quotients, so ``gcdx(10, 4) == (2, 1, -2)``.
    """
    s0, s1 = 1, 0
    t0, t1 = 0, 1
    x, y = a, b
    while y != 0:
        q = divround(x, y, RoundingMode.TO_ZERO)
        x, y = y, x - q * y
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    if x < 0:
        return -x, -s0, -t0
    return x, s0, t0
