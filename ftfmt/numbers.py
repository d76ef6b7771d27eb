"""Integer helpers with 32-bit C integer semantics."""

from __future__ import annotations

from ftfmt.chars import is_digit

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
UINT_MAX = 2**32 - 1

_SPACES = frozenset("\t\n\v\f\r ")


def _check_int(n: int) -> None:
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")


def _check_uint(n: int) -> None:
    if not 0 <= n <= UINT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit unsigned integer")


def _wrap_int(n: int) -> int:
    n &= UINT_MAX
    return n - 2**32 if n > INT_MAX else n


def abs_uint(n: int) -> int:
    """Absolute value of a 32-bit signed integer, as an unsigned value."""
    _check_int(n)
    return -n if n < 0 else n


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Text without digits gives 0. The result wraps like a 32-bit int.
    """
    pos = 0
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(text) and is_digit(text[pos]):
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return _wrap_int(value * sign)


def int_len(n: int) -> int:
    """Number of characters in the decimal form of n, minus sign included."""
    _check_int(n)
    return len(str(abs_uint(n))) + (n < 0)


def uint_len(n: int) -> int:
    """Number of decimal digits of an unsigned 32-bit integer."""
    _check_uint(n)
    return len(str(n))


def itoa(n: int) -> str:
    """Decimal form of a 32-bit signed integer."""
    _check_int(n)
    digits = str(abs_uint(n))
    return "-" + digits if n < 0 else digits


def utoa(n: int) -> str:
    """Decimal form of a 32-bit unsigned integer."""
    _check_uint(n)
    return str(n)


def smaller(x: int, y: int) -> int:
    """The smaller of two values."""
    return x if x < y else y


def int_bigger(x: int, y: int) -> int:
    """The bigger of two values."""
    return x if x > y else y