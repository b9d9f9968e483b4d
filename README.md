# ftlib

A small toolbox of low-level text and buffer helpers with no dependencies
beyond the standard library.

- `ftlib.ctype`: ASCII character classes (`isalpha`, `isdigit`, `isalnum`,
  `isspace`, `isxdigit`, `isascii`, `isprint`, `isupper`, `islower`,
  `isgraph`) and `toupper` / `tolower`. Each accepts a one-character string or
  an integer code; the case functions return the same type they were given.
- `ftlib.numbers`: lenient integer parsing (`atoi` wraps to 32 bits, `atol` and
  `atoll` wrap to 64 bits, `atoi_overflow` raises `OverflowError` instead),
  `itoa`, and digit counting (`nbrlen`, `base_nbrlen`, `longlen`,
  `base_longlen`).
- `ftlib.memory`: operations on mutable bytes-like buffers (`memset`, `bzero`,
  `memcpy`, `memmove`, `memchr`, `memrchr`, `memcmp`, `calloc`, `strlcpy`,
  `strlcat`) and small copying helpers (`strndup`, `splitdup`,
  `char_to_string`). Searches return an index or `None`; spans larger than a
  buffer raise `ValueError`.
- `ftlib.strings`: comparison (`strcmp`, `strncmp`), searching (`strchr`,
  `strrchr`, `strnstr`, returning an index or `None`), `reverse`, `substr`,
  `strtrim`, joining (`strjoin`, `strnjoin`, `threejoin`), `split`, `strmapi`
  and `striteri`.
- `ftlib.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd` write
  to a file descriptor and return the number of bytes written. `putstr_fd`
  writes `(null)` for `None`.
- `ftlib.reader`: read a file descriptor line by line with `LineReader` (or
  iterate over it), or with `get_next_line`, which keeps unread data per
  descriptor between calls. Lines keep their newline; `None` marks the end.
- `ftlib.printf`: `render` formats to a string and `fd_printf` writes to a file
  descriptor. Supported conversions are `%c %s %p %d %i %u %x %X %%`, with the
  `-`, `0`, ` `, `#` and `+` flags, a field width and a precision.
  `parse_spec` parses a single conversion into a `FormatSpec`.

## Installation

```
pip install .
```

## Examples

```python
from ftlib import numbers, strings
from ftlib.printf import render, fd_printf

numbers.atoi("   -42abc")          # -42
numbers.itoa(-2147483648)          # "-2147483648"
strings.split("  a b  c ", " ")    # ["a", "b", "c"]
strings.strtrim("xxhixx", "x")     # "hi"

render("%05d|%-4s|%#x", 42, "ab", 255)   # "00042|ab  |0xff"
fd_printf(1, "hello %s\n", "world")      # writes to stdout, returns 12
```

Reading lines from a descriptor:

```python
import os
from ftlib.reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 10):
    print(line, end="")
os.close(fd)
```

## Errors

A malformed format string (a lone trailing `%`, an unknown conversion, a
missing or mistyped argument) raises `ftlib.printf.FormatError`, a subclass of
`ValueError`. Its `partial` attribute holds the text produced before the
problem; `fd_printf` writes that text before raising. `fd_printf` accepts only
descriptors from 0 to 16 and raises `ValueError` for others.

## Limits

`ftlib.printf` has no floating-point, octal or length-modifier conversions, and
no `*` width or precision taken from the arguments. The package offers no
command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```