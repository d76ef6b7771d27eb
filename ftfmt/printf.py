"""printf-style formatting driven by conversion rules."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TextIO

from ftfmt.converters import (
    convert_char,
    convert_hex,
    convert_int,
    convert_pointer,
    convert_string,
    convert_uint,
)
from ftfmt.output import put_str
from ftfmt.spec import Conversion, ConversionRule, Flag, parse_rule


def _next_arg(args: Iterator[Any], rule: ConversionRule) -> Any:
    try:
        return next(args)
    except StopIteration:
        kind = rule.conversion.name if rule.conversion else "conversion"
        raise TypeError(f"not enough arguments for {kind}") from None


def _convert(rule: ConversionRule, args: Iterator[Any]) -> str:
    """Text of one conversion, before field-width padding."""
    conversion = rule.conversion
    if conversion is None:
        return ""
    if conversion is Conversion.PERCENT:
        return convert_char("%")
    arg = _next_arg(args, rule)
    if conversion is Conversion.CHAR:
        return convert_char(arg)
    if conversion is Conversion.STR:
        return convert_string(arg, rule)
    if conversion is Conversion.POINTER:
        return convert_pointer(arg, rule)
    if conversion is Conversion.INT:
        return convert_int(arg, rule)
    if conversion is Conversion.UINT:
        return convert_uint(arg, rule)
    return convert_hex(arg, rule)


def _fit(text: str, rule: ConversionRule) -> str:
    """Pad text with spaces to the rule's field width."""
    padding = " " * max(rule.min_width - len(text), 0)
    if rule.flags & Flag.MINUS:
        return text + padding
    return padding + text


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            yield fmt[pos:]
            return
        if percent > pos:
            yield fmt[pos:percent]
        rule, pos = parse_rule(fmt, percent + 1)
        yield _fit(_convert(rule, remaining), rule)


def render(fmt: str, *args: Any) -> str:
    """Format args according to fmt and return the resulting text.

    Supported conversions are c, s, p, d, i, u, x, X and %, with the flags
    '-', '+', ' ', '0' and '#', a field width and a precision. Unknown
    conversion characters are consumed and produce only padding.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to stream (standard output by default).

    Returns the number of characters written.
    """
    return put_str(render(fmt, *args), stream)