"""
Signed 32-bit integer arithmetic.

Every coordinate of a ``Point`` is a signed 32-bit integer. Python ints never
overflow, so each arithmetic result is reduced back into range here. The
overflow policy is wrapping (two's complement, modulo ``2**32``): it is applied
on construction and after every operation, and never raises.

Functions here are used by ``gridpoint.point``.
"""

import logging
import operator
from typing import SupportsIndex

from gridpoint.types import Int32

logger = logging.getLogger(__name__)

I32_MIN: Int32 = -(2**31)
I32_MAX: Int32 = 2**31 - 1
I32_MODULUS = 2**32


def wrap_i32(value: SupportsIndex) -> Int32:
    """Return ``value`` wrapped into the signed 32-bit range.

    Raises:
        TypeError: If ``value`` is not an integer (floats are rejected, not truncated).
    """
    n = operator.index(value)
    if I32_MIN <= n <= I32_MAX:
        return n
    wrapped = (n - I32_MIN) % I32_MODULUS + I32_MIN
    logger.debug("int32 overflow: %d wrapped to %d", n, wrapped)
    return wrapped


def wrapping_add(a: Int32, b: Int32) -> Int32:
    return wrap_i32(a + b)


def wrapping_sub(a: Int32, b: Int32) -> Int32:
    return wrap_i32(a - b)


def wrapping_mul(a: Int32, b: Int32) -> Int32:
    return wrap_i32(a * b)


def wrapping_neg(a: Int32) -> Int32:
    """Negate ``a``; ``-I32_MIN`` wraps back to ``I32_MIN``."""
    return wrap_i32(-a)


def wrapping_abs(a: Int32) -> Int32:
    """Absolute value; ``abs(I32_MIN)`` wraps back to ``I32_MIN``."""
    return wrap_i32(abs(a))


def wrapping_div(a: Int32, b: Int32) -> Int32:
    """Integer division rounding toward zero (not toward negative infinity like ``//``).

    Raises:
        ZeroDivisionError: If ``b`` is zero.
    """
    if b == 0:
        raise ZeroDivisionError("int32 division by zero")
    q = abs(a) // abs(b)
    return wrap_i32(q if (a < 0) == (b < 0) else -q)
