"""Integer parsing, formatting and digit counting."""

from __future__ import annotations

from ftlib.ctype import isdigit, isspace

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a signed two's-complement integer of the given width."""
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: str) -> int:
    """Read optional whitespace, one optional sign and then decimal digits."""
    pos = 0
    while pos < len(text) and isspace(text[pos]):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(text) and isdigit(text[pos]):
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def atoi(text: str) -> int:
    """Parse a leading integer; the result wraps like a 32-bit int."""
    return _wrap(_parse(text), 32)


def atol(text: str) -> int:
    """Parse a leading integer; the result wraps like a 64-bit long."""
    return _wrap(_parse(text), 64)


def atoll(text: str) -> int:
    """Parse a leading integer; the result wraps like a 64-bit long long."""
    return _wrap(_parse(text), 64)


def atoi_overflow(text: str) -> int:
    """Parse a leading integer, raising OverflowError if it does not fit in 32 bits."""
    value = _parse(text)
    if not INT_MIN <= value <= INT_MAX:
        raise OverflowError(f"{text!r} does not fit in a 32-bit int")
    return value


def itoa(n: int) -> str:
    """Decimal text of n."""
    return str(int(n))


def base_longlen(n: int, base: int) -> int:
    """Number of digits of the non-negative n written in base."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if base < 2:
        raise ValueError("base must be at least 2")
    size = 1
    while n >= base:
        n //= base
        size += 1
    return size


def longlen(n: int) -> int:
    """Number of decimal digits of the non-negative n."""
    return base_longlen(n, 10)


def base_nbrlen(n: int, base: int) -> int:
    """Number of digits of n in base, sign not counted; 0 for a negative base."""
    if base < 0:
        return 0
    if base < 2:
        raise ValueError("base must be at least 2")
    return base_longlen(abs(n), base)


def nbrlen(n: int) -> int:
    """Number of decimal digits of n, sign not counted."""
    return base_nbrlen(n, 10)