"""printf-style formatting written to a file descriptor.

Supported conversions are %c, %s, %p, %d, %i, %u, %x, %X and %%, with the
flags "-", "0", " ", "#" and "+", a field width and a precision.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import Any

from ftlib.ctype import isdigit
from ftlib.output import putstr_fd

FOPEN_MAX = 16

_FLAG_CHARS = "0- #+"
_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """A format string or its arguments cannot be rendered.

    ``partial`` holds the output produced before the problem was found.
    """

    def __init__(self, message: str, partial: str = "") -> None:
        super().__init__(message)
        self.partial = partial


@dataclass(frozen=True)
class FormatSpec:
    """One parsed conversion: its flags, width, precision and specifier."""

    minus: bool = False
    zero: bool = False
    alter: bool = False
    space: bool = False
    sign: bool = False
    symbol_sign: str = "0"
    precision: int = -1
    width: int = 0
    specifier: str = ""


def _read_number(fmt: str, pos: int) -> tuple[int | None, int]:
    end = pos
    while end < len(fmt) and isdigit(fmt[end]):
        end += 1
    if end == pos:
        return None, pos
    return int(fmt[pos:end]), end


def parse_spec(fmt: str, pos: int) -> tuple[FormatSpec, int]:
    """Parse the conversion that starts with the '%' at pos.

    Return the spec and the index just past its specifier.
    """
    if not 0 <= pos < len(fmt) or fmt[pos] != "%":
        raise ValueError(f"no conversion starts at index {pos}")
    i = pos + 1
    flags = {"minus": False, "zero": False, "alter": False, "space": False, "sign": False}
    names = {"0": "zero", "-": "minus", " ": "space", "#": "alter", "+": "sign"}
    while i < len(fmt) and fmt[i] in _FLAG_CHARS:
        flags[names[fmt[i]]] = True
        i += 1

    width, i = _read_number(fmt, i)
    precision = -1
    if i < len(fmt) and fmt[i] == ".":
        while i < len(fmt) and fmt[i] == ".":
            i += 1
        value, i = _read_number(fmt, i)
        precision = value or 0

    if i >= len(fmt):
        raise FormatError("conversion has no specifier")
    specifier = fmt[i]
    i += 1

    if flags["minus"]:
        flags["zero"] = False
    if flags["sign"]:
        flags["space"] = False
    spec = FormatSpec(
        **flags,
        precision=precision,
        width=width or 0,
        specifier=specifier,
    )
    return spec, i


def _prefix(spec: FormatSpec) -> str:
    if spec.sign:
        return spec.symbol_sign
    if spec.space:
        return " "
    if spec.alter:
        return "0X" if spec.specifier == "X" else "0x"
    return ""


def _pad(text: str, spec: FormatSpec) -> str:
    """Apply precision, prefix and width padding to a converted value."""
    if spec.precision == -1:
        body = text
    elif spec.specifier == "s":
        body = text[: spec.precision]
    else:
        body = text.rjust(spec.precision, "0")
    fill = max(spec.width - len(body), 0)
    front = " " * fill if not spec.minus and not spec.zero else ""
    zeros = "0" * fill if not spec.minus and spec.zero else ""
    back = " " * fill if spec.minus else ""
    return front + _prefix(spec) + zeros + body + back


def _digits(n: int, base: int, spec: FormatSpec) -> str:
    if base == 10:
        return str(n)
    return format(n, "X" if spec.specifier == "X" else "x")


def _cut_at_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def _next_arg(args: Iterator[Any], spec: FormatSpec) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise FormatError(f"missing argument for %{spec.specifier}") from None


def _int_arg(args: Iterator[Any], spec: FormatSpec) -> int:
    value = _next_arg(args, spec)
    if not isinstance(value, int):
        raise FormatError(f"%{spec.specifier} needs an integer, got {type(value).__name__}")
    return value


def _char_arg(args: Iterator[Any], spec: FormatSpec) -> str:
    value = _next_arg(args, spec)
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c needs a single character, got {value!r}")
        return _cut_at_nul(value)
    if isinstance(value, int):
        return _cut_at_nul(chr(value & 0xFF))
    raise FormatError(f"%c needs a character, got {type(value).__name__}")


def _plain(spec: FormatSpec) -> FormatSpec:
    return replace(spec, space=False, sign=False, zero=False, alter=False)


def _convert(spec: FormatSpec, args: Iterator[Any]) -> str:
    kind = spec.specifier
    if kind == "%":
        return _pad("%", replace(_plain(spec), precision=-1))
    if kind == "c":
        return _pad(_char_arg(args, spec), replace(_plain(spec), precision=-1))
    if kind == "s":
        value = _next_arg(args, spec)
        if value is None:
            raise FormatError("%s got None")
        if not isinstance(value, str):
            raise FormatError(f"%s needs a string, got {type(value).__name__}")
        return _pad(_cut_at_nul(value), _plain(spec))
    if kind == "p":
        value = _next_arg(args, spec)
        if value is None:
            value = 0
        if not isinstance(value, int):
            raise FormatError(f"%p needs an integer address, got {type(value).__name__}")
        spec = replace(spec, precision=-1, alter=True, width=spec.width - 2)
        return _pad(_digits(value & _ULONG_MASK, 16, spec), spec)

    if spec.precision != -1:
        spec = replace(spec, zero=False)
    if kind in ("d", "i"):
        n = _int_arg(args, spec) & _UINT_MASK
        if n > 0x7FFFFFFF:
            n -= 1 << 32
        spec = replace(spec, alter=False)
        if n < 0:
            spec = replace(spec, sign=True, symbol_sign="-", space=False)
            n = -n
        elif spec.sign:
            spec = replace(spec, symbol_sign="+")
        if spec.sign or spec.space:
            spec = replace(spec, width=spec.width - 1)
        return _pad(_digits(n, 10, spec), spec)
    if kind == "u":
        n = _int_arg(args, spec) & _UINT_MASK
        spec = replace(spec, space=False, alter=False, sign=False)
        return _pad(_digits(n, 10, spec), spec)
    if kind in ("x", "X"):
        n = _int_arg(args, spec) & _UINT_MASK
        spec = replace(spec, space=False, sign=False)
        if n == 0:
            spec = replace(spec, alter=False)
        if spec.alter:
            spec = replace(spec, width=spec.width - 2)
        return _pad(_digits(n, 16, spec), spec)
    raise FormatError(f"unknown conversion %{kind}")


def render(fmt: str, *args: Any) -> str:
    """Format args according to fmt and return the text."""
    if fmt is None:
        raise TypeError("format must be a string")
    parts: list[str] = []
    arg_iter = iter(args)
    pos = 0
    while pos < len(fmt):
        pct = fmt.find("%", pos)
        if pct < 0:
            parts.append(fmt[pos:])
            break
        if pct > pos:
            parts.append(fmt[pos:pct])
        if pct + 1 >= len(fmt):
            raise FormatError("format ends with a lone '%'", "".join(parts))
        try:
            spec, pos = parse_spec(fmt, pct)
            parts.append(_convert(spec, arg_iter))
        except FormatError as exc:
            raise FormatError(str(exc), "".join(parts)) from None
    return "".join(parts)


def fd_printf(fd: int, fmt: str, *args: Any) -> int:
    """Format args according to fmt and write the text to fd.

    Return the number of bytes written. On a format error the text produced
    so far is still written and FormatError is raised.
    """
    if fmt is None:
        raise TypeError("format must be a string")
    if fd < 0 or fd > FOPEN_MAX:
        raise ValueError(f"file descriptor {fd} out of range 0..{FOPEN_MAX}")
    try:
        text = render(fmt, *args)
    except FormatError as exc:
        putstr_fd(exc.partial, fd)
        raise
    return putstr_fd(text, fd)