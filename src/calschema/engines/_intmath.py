"""
calschema.engines._intmath
--------------------------
Integer helpers shared by every schema.

All divisions use floor semantics, so that proleptic (negative) years and
day counts behave exactly like positive ones. Schemas may still use shifts
(``>> 2``) and masks (``& 3``) where Python's arithmetic shift already
floors; everything else goes through the helpers below.

The arithmetic engine works in the 32-bit signed domain: linear counts and
deltas that would leave it raise ArithmeticOverflowError.
"""

from __future__ import annotations

from typing import Tuple

from ..core.errors import ArithmeticOverflowError

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1


def divide(n: int, d: int) -> int:
    return n // d


def modulo(n: int, d: int) -> int:
    """Floor modulo: the result has the sign of d."""
    return n % d


def divide_mod(n: int, d: int) -> Tuple[int, int]:
    return divmod(n, d)


def augmented_divide(n: int, d: int) -> Tuple[int, int]:
    """Floor division with a 1-based remainder in 1..d."""
    q, r = divmod(n, d)
    return q, 1 + r


def adjusted_modulo(n: int, d: int) -> int:
    """Modulo giving 1..d instead of 0..d-1."""
    return ((n - 1) % d) + 1


def is_int32(n: int) -> bool:
    return INT32_MIN <= n <= INT32_MAX


def checked_add(a: int, b: int) -> int:
    s = a + b
    if not (INT32_MIN <= s <= INT32_MAX):
        raise ArithmeticOverflowError(f"{a} + {b} overflows the 32-bit domain")
    return s


def checked_mul(a: int, b: int) -> int:
    p = a * b
    if not (INT32_MIN <= p <= INT32_MAX):
        raise ArithmeticOverflowError(f"{a} * {b} overflows the 32-bit domain")
    return p
