"""String searching, slicing and building helpers with C library semantics."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest


def _char(c: int | str) -> str:
    """Normalise a character argument: a one-character string or a byte code."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c
    raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")


def strchr(text: str, c: int | str) -> int | None:
    """Index of the first occurrence of c in text, or None.

    Searching for the NUL character finds the terminator at len(text).
    """
    ch = _char(c)
    if ch == "\0" and ch not in text:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> int | None:
    """Index of the last occurrence of c in text, or None.

    Searching for the NUL character finds the terminator at len(text).
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of the first occurrence of little lying wholly in big[:length].

    An empty little is found at index 0.
    """
    if length < 0:
        raise ValueError(f"negative length {length}")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters of a and b.

    Returns the difference of the character codes at the first position where
    they differ or where either string ends, or 0 if the first n match.
    """
    if n < 0:
        raise ValueError(f"negative length {n}")
    for left, right in islice(zip_longest(a, b, fillvalue="\0"), n):
        if left == "\0" or right == "\0" or left != right:
            return ord(left) - ord(right)
    return 0


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text from start; empty if start is past the end."""
    if start < 0:
        raise ValueError(f"negative start {start}")
    if length < 0:
        raise ValueError(f"negative length {length}")
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(a: str, b: str) -> str:
    """The concatenation of a and b."""
    return a + b


def strtrim(text: str, charset: str) -> str:
    """text without leading and trailing characters that appear in charset.

    An empty charset trims nothing.
    """
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: int | str) -> list[str]:
    """The non-empty words of text separated by runs of sep."""
    ch = _char(sep)
    return [word for word in text.split(ch) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string made of func(index, char) for every character of text."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(chars: MutableSequence[str], func: Callable[[int, MutableSequence[str]], None]) -> None:
    """Call func(index, chars) for every position, letting it edit chars in place."""
    for index in range(len(chars)):
        func(index, chars)


def strinv(text: str) -> str:
    """text reversed."""
    return text[::-1]