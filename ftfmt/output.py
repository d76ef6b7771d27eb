"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from ftfmt.numbers import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> int:
    """Write one character; returns the number of characters written."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)}")
    _target(stream).write(c)
    return 1


def put_str(text: str, stream: TextIO | None = None) -> int:
    """Write a string; returns the number of characters written."""
    _target(stream).write(text)
    return len(text)


def put_endl(text: str, stream: TextIO | None = None) -> int:
    """Write a string followed by a newline."""
    return put_str(text, stream) + put_char("\n", stream)


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write the decimal form of a 32-bit signed integer."""
    return put_str(itoa(n), stream)


def put_nchr(c: str, n: int, stream: TextIO | None = None) -> int:
    """Write the character c n times."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)}")
    if n < 0:
        raise ValueError(f"negative repeat count {n}")
    return put_str(c * n, stream)


def put_nstr(text: str, n: int, stream: TextIO | None = None) -> int:
    """Write at most the first n characters of text."""
    if n < 0:
        raise ValueError(f"negative length {n}")
    return put_str(text[:n], stream)