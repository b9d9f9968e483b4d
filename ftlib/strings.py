"""String comparison, searching, slicing, joining, splitting and mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

_NUL = "\0"


def _as_char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def _compare(pairs) -> int:
    for a, b in pairs:
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def _null_order(s1: str | None, s2: str | None) -> int | None:
    if s1 is None and s2 is None:
        return 0
    if s1 is None:
        return -1
    if s2 is None:
        return 1
    return None


def strcmp(s1: str | None, s2: str | None) -> int:
    """Difference of the first differing character codes, or 0 when equal.

    None sorts before any string and equals None.
    """
    order = _null_order(s1, s2)
    if order is not None:
        return order
    return _compare(zip_longest(s1, s2, fillvalue=_NUL))


def strncmp(s1: str | None, s2: str | None, n: int) -> int:
    """Like strcmp, looking at no more than the first n characters."""
    order = _null_order(s1, s2)
    if order is not None:
        return order
    if n < 0:
        raise ValueError("n must be non-negative")
    return _compare(islice(zip_longest(s1, s2, fillvalue=_NUL), n))


def strchr(s: str | None, c: int | str) -> int | None:
    """Index of the first occurrence of c in s, or None.

    Searching for NUL gives the index of the end of the string.
    """
    if s is None:
        return None
    ch = _as_char(c)
    pos = s.find(ch)
    if pos >= 0:
        return pos
    return len(s) if ch == _NUL else None


def strrchr(s: str | None, c: int | str) -> int | None:
    """Index of the last occurrence of c in s, or None.

    Searching for NUL gives the index of the end of the string.
    """
    if s is None:
        return None
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    pos = s.rfind(ch)
    return None if pos < 0 else pos


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of little in big, where the match must lie within the first length characters."""
    if not little:
        return 0
    if length < 0:
        raise ValueError("length must be non-negative")
    pos = big[:length].find(little)
    return None if pos < 0 else pos


def reverse(s: str) -> str:
    """s with its characters in reverse order."""
    return s[::-1]


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start; empty if start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must be non-negative")
    if not s or start > len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str, charset: str) -> str:
    """s without leading and trailing characters that appear in charset."""
    if s is None or charset is None:
        raise TypeError("strtrim needs a string and a character set")
    return s.strip(charset)


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """s1 followed by s2; a missing side is skipped, and two missing sides give None."""
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")


def strnjoin(s1: str | None, s2: str | None, n: int) -> str | None:
    """s1 followed by exactly the first n characters of s2."""
    if s1 is None and s2 is None:
        return None
    if s2 is None:
        return s1
    if not 0 <= n <= len(s2):
        raise ValueError(f"cannot take {n} characters from a string of {len(s2)}")
    return (s1 or "") + s2[:n]


def threejoin(s1: str | None, s2: str | None, s3: str | None) -> str | None:
    """s1, s2 and s3 joined in order, with the same rules for None as strjoin."""
    first = strjoin(s1, s2)
    if first is None:
        return None
    return strjoin(first, s3)


def split(s: str | None, sep: int | str) -> list[str] | None:
    """Non-empty pieces of s between occurrences of the character sep."""
    if s is None:
        return None
    return [word for word in s.split(_as_char(sep)) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """New string made of f(index, character) for each character of s."""
    if s is None or f is None:
        raise TypeError("strmapi needs a string and a function")
    return "".join(f(i, ch) for i, ch in enumerate(s))


def _terminated_length(s: MutableSequence) -> int:
    for i, item in enumerate(s):
        if item == 0 or item == _NUL:
            return i
    return len(s)


def striteri(s: MutableSequence | None, f: Callable | None) -> None:
    """Call f(index, item) on each item of s up to a NUL; store any result that is not None."""
    if s is None or f is None:
        return
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence")
    for i in range(_terminated_length(s)):
        result = f(i, s[i])
        if result is not None:
            s[i] = result