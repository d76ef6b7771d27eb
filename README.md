# ftfmt

`ftfmt` is a small printf-style formatter. It supports the conversions
`%c`, `%s`, `%p`, `%d`, `%i`, `%u`, `%x`, `%X` and `%%`, the flags `-`, `0`,
`+`, space and `#`, a minimum field width, and a precision. It also includes
helpers for characters, integers, strings, byte buffers and linked lists.

## Installation

```
pip install .
```

To run the tests too:

```
pip install ".[test]"
pytest
```

## Formatting

`ftfmt.printf.render` builds the formatted text and returns it.
`ftfmt.printf.printf` writes that text to a stream, which is standard output
unless you pass `stream=`. It returns the number of characters written.

```python
import sys

from ftfmt.printf import printf, render

render("%5d|%-5s|%#x", 42, "ab", 255)   # '   42|ab   |0xff'
render("%.3s", "abcdef")                # 'abc'
render("%p", None)                      # '(nil)'

count = printf("%+d items\n", 7, stream=sys.stdout)
```

The conversions behave as follows:

- `%d`, `%i`, `%u`, `%x` and `%X` treat their argument as a 32-bit value.
  A larger integer wraps around.
- A precision of `0` with a zero value makes `%d`, `%u` and `%x` produce an
  empty field.
- `%s` with `None` produces `(null)`. If the precision is between 1 and 5,
  it produces nothing.
- `%p` expects an integer address. `None` or `0` produces `(nil)`.
- An unknown conversion character is consumed and produces only the field's
  padding.
- If the arguments run out before the conversions do, `render` raises
  `TypeError`. Passing `None` as the format also raises `TypeError`.

## What it does not do

- There are no floating-point conversions.
- There are no length modifiers such as `l` or `h`.
- A width or precision cannot be given as `*`.
- The package has no command-line tool. It is a library only.

## The building blocks

- `ftfmt.spec`: `Flag`, `Conversion` and `ConversionRule`, plus the
  functions `flag_for`, `conversion_for` and `parse_rule`, which reads one
  specification.
- `ftfmt.converters`: `convert_char`, `convert_string`, `convert_int`,
  `convert_uint`, `convert_hex` and `convert_pointer`. Each one turns a single
  value into its text. None of them pads to the field width.
- `ftfmt.chars`: ASCII classification and case helpers, such as `is_alpha`,
  `is_digit`, `to_upper` and `str_tolower`.
- `ftfmt.numbers`: 32-bit integer helpers, such as `atoi`, `itoa`, `utoa`,
  `int_len` and `abs_uint`.
- `ftfmt.strings`: string helpers with C library behaviour, such as
  `strchr`, `strnstr`, `strncmp`, `substr`, `strtrim` and `split`.
- `ftfmt.memory`: operations on `bytearray` buffers, such as `memset`,
  `memmove`, `memcmp`, `calloc`, `strlcpy` and `strlcat`.
- `ftfmt.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, `put_nchr`
  and `put_nstr`. They write to a text stream and return how many characters
  they wrote.
- `ftfmt.linked_list`: `LinkedList` and `Node`.

```python
from ftfmt.linked_list import LinkedList
from ftfmt.strings import split

items = LinkedList(split("  one two  three ", " "))
list(items.map(str.upper, None))        # ['ONE', 'TWO', 'THREE']
```