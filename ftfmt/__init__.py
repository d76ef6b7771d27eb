"""A printf-style formatter with character, number, string, buffer and list helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "converters",
    "linked_list",
    "memory",
    "numbers",
    "output",
    "printf",
    "spec",
    "strings",
]