"""Conversion specifications of a printf-style format string."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ftfmt.chars import is_digit


class Flag(enum.IntFlag):
    """Flags that may follow the percent sign."""

    PLUS = enum.auto()
    MINUS = enum.auto()
    ZERO = enum.auto()
    SPACE = enum.auto()
    HASH = enum.auto()


class Conversion(enum.Enum):
    """Conversion kinds selected by the final character of a specification."""

    CHAR = "c"
    STR = "s"
    POINTER = "p"
    INT = "d"
    UINT = "u"
    HEX_LOW = "x"
    HEX_UP = "X"
    PERCENT = "%"


_FLAGS = {
    "+": Flag.PLUS,
    "-": Flag.MINUS,
    "0": Flag.ZERO,
    " ": Flag.SPACE,
    "#": Flag.HASH,
}

_CONVERSIONS = {
    "c": Conversion.CHAR,
    "s": Conversion.STR,
    "p": Conversion.POINTER,
    "d": Conversion.INT,
    "i": Conversion.INT,
    "u": Conversion.UINT,
    "x": Conversion.HEX_LOW,
    "X": Conversion.HEX_UP,
    "%": Conversion.PERCENT,
}


@dataclass(frozen=True)
class ConversionRule:
    """A parsed specification.

    min_width is the field width (0 when absent); max_width is the precision,
    None when no '.' was given.
    """

    flags: Flag = Flag(0)
    conversion: Conversion | None = None
    min_width: int = 0
    max_width: int | None = None


def flag_for(c: str) -> Flag:
    """The flag a character stands for, or an empty Flag."""
    return _FLAGS.get(c, Flag(0))


def conversion_for(c: str) -> Conversion | None:
    """The conversion a character selects, or None."""
    return _CONVERSIONS.get(c)


def _read_number(fmt: str, pos: int) -> tuple[int, int]:
    end = pos
    while end < len(fmt) and is_digit(fmt[end]):
        end += 1
    return (int(fmt[pos:end]) if end > pos else 0), end


def parse_rule(fmt: str, pos: int) -> tuple[ConversionRule, int]:
    """Parse the specification starting at pos, just after a '%'.

    Returns the rule and the position after it. The conversion character is
    consumed even when it is not a known one; the rule's conversion is then None.
    """
    if not 0 <= pos <= len(fmt):
        raise IndexError(f"position {pos} outside format of length {len(fmt)}")
    flags = Flag(0)
    while pos < len(fmt) and fmt[pos] in _FLAGS:
        flags |= _FLAGS[fmt[pos]]
        pos += 1
    min_width, pos = _read_number(fmt, pos)
    max_width = None
    if pos < len(fmt) and fmt[pos] == ".":
        max_width, pos = _read_number(fmt, pos + 1)
    conversion = None
    if pos < len(fmt):
        conversion = conversion_for(fmt[pos])
        pos += 1
    return ConversionRule(flags, conversion, min_width, max_width), pos