"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
"""

from __future__ import annotations

_CASE_SHIFT = ord("a") - ord("A")


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def isalpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    return isupper(c) or islower(c)


def isdigit(c: int | str) -> bool:
    """True for a decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for an ASCII letter or a decimal digit."""
    return isalpha(c) or isdigit(c)


def isspace(c: int | str) -> bool:
    """True for space, tab, newline, vertical tab, form feed or carriage return."""
    return _code(c) in (0x20, 0x09, 0x0A, 0x0B, 0x0C, 0x0D)


def isxdigit(c: int | str) -> bool:
    """True for a hexadecimal digit in either case."""
    code = _code(c)
    return (
        isdigit(code)
        or ord("A") <= code <= ord("F")
        or ord("a") <= code <= ord("f")
    )


def isascii(c: int | str) -> bool:
    """True for a code between 0 and 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return ord(" ") <= _code(c) <= ord("~")


def isupper(c: int | str) -> bool:
    """True for an ASCII upper-case letter."""
    return ord("A") <= _code(c) <= ord("Z")


def islower(c: int | str) -> bool:
    """True for an ASCII lower-case letter."""
    return ord("a") <= _code(c) <= ord("z")


def isgraph(c: int | str) -> bool:
    """True for a printable ASCII character other than space."""
    return ord("!") <= _code(c) <= ord("~")


def toupper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; return anything else unchanged, in the same type."""
    code = _code(c)
    if islower(code):
        code -= _CASE_SHIFT
    return chr(code) if isinstance(c, str) else code


def tolower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; return anything else unchanged, in the same type."""
    code = _code(c)
    if isupper(code):
        code += _CASE_SHIFT
    return chr(code) if isinstance(c, str) else code