"""Turning printf arguments into their text form according to a rule."""

from __future__ import annotations

from ftfmt.chars import str_toupper
from ftfmt.numbers import abs_uint, int_bigger, utoa
from ftfmt.spec import Conversion, ConversionRule, Flag

_UINT_MASK = 2**32 - 1
_ULONG_MASK = 2**64 - 1
_INT_MAX = 2**31 - 1


def _as_int(num: int) -> int:
    """Reduce num to a 32-bit signed value, as a C int argument would be."""
    num &= _UINT_MASK
    return num - 2**32 if num > _INT_MAX else num


def _pad(text: str, fill: str, count: int) -> str:
    return fill * max(count, 0) + text


def convert_char(c: int | str) -> str:
    """The character itself; an int is taken as a byte code."""
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    if isinstance(c, str) and len(c) == 1:
        return c
    raise TypeError("expected a single character or an integer code")


def convert_string(text: str | None, rule: ConversionRule) -> str:
    """The string cut to the precision; None stands for a null string."""
    precision = rule.max_width
    if text is None:
        if precision is None or precision <= 0 or precision >= 6:
            return "(null)"
        return ""
    if precision is None:
        return text
    return text[:precision]


def convert_int(num: int, rule: ConversionRule) -> str:
    """Signed decimal form with precision, zero padding and sign flags."""
    num = _as_int(num)
    precision = rule.max_width
    if precision == 0 and num == 0:
        return ""
    digits = utoa(abs_uint(num))
    extra = int(num < 0 or bool(rule.flags & (Flag.PLUS | Flag.SPACE)))
    if precision is not None and len(digits) < precision:
        digits = _pad(digits, "0", precision - len(digits))
    elif (
        rule.flags & Flag.ZERO
        and len(digits) + extra < rule.min_width
        and precision is None
    ):
        digits = _pad(digits, "0", rule.min_width - len(digits) - extra)
    if num < 0:
        return "-" + digits
    if rule.flags & Flag.PLUS:
        return "+" + digits
    if rule.flags & Flag.SPACE:
        return " " + digits
    return digits


def convert_uint(num: int, rule: ConversionRule) -> str:
    """Unsigned decimal form with precision and zero padding."""
    num &= _UINT_MASK
    precision = rule.max_width
    if precision == 0 and num == 0:
        return ""
    digits = utoa(num)
    if precision is not None and len(digits) < precision:
        digits = _pad(digits, "0", precision - len(digits))
    elif rule.flags & Flag.ZERO and len(digits) < rule.min_width and precision is None:
        digits = _pad(digits, "0", rule.min_width - len(digits))
    return digits


def convert_hex(num: int, rule: ConversionRule) -> str:
    """Hexadecimal form of an unsigned 32-bit value.

    Upper case when the rule's conversion is HEX_UP; '#' adds a 0x prefix to
    non-zero values.
    """
    num &= _UINT_MASK
    precision = rule.max_width
    if num == 0 and precision == 0:
        return ""
    digits = format(num, "x")
    prefixed = bool(num and rule.flags & Flag.HASH)
    extra = 2 if prefixed else 0
    if precision is not None and len(digits) < precision:
        digits = _pad(digits, "0", precision - len(digits))
    elif rule.flags & Flag.ZERO and len(digits) < rule.min_width and precision is None:
        digits = _pad(digits, "0", rule.min_width - len(digits) - extra)
    if prefixed:
        digits = "0x" + digits
    if num and rule.conversion is Conversion.HEX_UP:
        digits = str_toupper(digits)
    return digits


def convert_pointer(address: int | None, rule: ConversionRule) -> str:
    """0x-prefixed hexadecimal address; a null address gives "(nil)"."""
    if not address:
        return "(nil)"
    digits = format(address & _ULONG_MASK, "x")
    length = len(digits) + 2
    precision = -1 if rule.max_width is None else rule.max_width
    padding = int_bigger(rule.min_width, precision)
    if rule.flags & Flag.ZERO and length < padding:
        digits = _pad(digits, "0", padding - length)
    text = "0x" + digits
    if rule.flags & Flag.MINUS:
        return text
    if rule.flags & Flag.PLUS:
        return "+" + text
    if rule.flags & Flag.SPACE:
        return " " + text
    return text