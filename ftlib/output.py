"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

from ftlib.numbers import itoa

_NULL_TEXT = "(null)"


def _write_all(fd: int, data: bytes) -> int:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def putchar_fd(c: int | str, fd: int) -> int:
    """Write one character (or the low byte of a code) to fd; return the bytes written."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([c & 0xFF])
    return _write_all(fd, data)


def putstr_fd(s: str | None, fd: int) -> int:
    """Write s to fd, or "(null)" when s is None; return the bytes written."""
    text = _NULL_TEXT if s is None else s
    return _write_all(fd, text.encode("utf-8"))


def putendl_fd(s: str | None, fd: int) -> int:
    """Write s and a newline to fd; return the bytes written."""
    length = putstr_fd(s, fd)
    return length + _write_all(fd, b"\n")


def putnbr_fd(n: int, fd: int) -> int:
    """Write the decimal text of n to fd; return the bytes written."""
    return putstr_fd(itoa(n), fd)