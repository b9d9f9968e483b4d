"""Byte-buffer operations and small copying helpers.

Buffers are mutable bytes-like objects such as bytearray or memoryview.
Strings held in buffers end at the first NUL byte.
"""

from __future__ import annotations

from collections.abc import Iterable


def _check_span(buf, n: int, what: str) -> None:
    if n < 0:
        raise ValueError("n must be non-negative")
    if n > len(buf):
        raise ValueError(f"{what} holds {len(buf)} bytes, {n} requested")


def _cstrlen(buf) -> int:
    data = bytes(buf)
    end = data.find(0)
    return len(data) if end < 0 else end


def memset(buf, c: int, n: int):
    """Set the first n bytes of buf to the low byte of c; return buf."""
    _check_span(buf, n, "buffer")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def memcpy(dest, src, n: int):
    """Copy n bytes from src to dest; return dest."""
    _check_span(dest, n, "destination")
    _check_span(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest, src, n: int):
    """Copy n bytes from src to dest, correct even when they overlap; return dest."""
    _check_span(dest, n, "destination")
    _check_span(src, n, "source")
    if n:
        dest[:n] = bytes(src[:n])
    return dest


def memchr(data, c: int, n: int) -> int | None:
    """Index of the first byte equal to c within the first n bytes, or None."""
    _check_span(data, n, "buffer")
    pos = bytes(data[:n]).find(c & 0xFF)
    return None if pos < 0 else pos


def memrchr(data, c: int, n: int) -> int | None:
    """Index of the last byte equal to c within the first n bytes, or None."""
    _check_span(data, n, "buffer")
    pos = bytes(data[:n]).rfind(c & 0xFF)
    return None if pos < 0 else pos


def memcmp(a, b, n: int) -> int:
    """Difference of the first differing bytes among the first n, or 0."""
    _check_span(a, n, "first buffer")
    _check_span(b, n, "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of nmemb elements of size bytes each."""
    if nmemb < 0 or size < 0:
        raise ValueError("nmemb and size must be non-negative")
    return bytearray(nmemb * size)


def strndup(s: str, n: int) -> str:
    """Copy of at most n characters of s, stopping at a NUL character."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return s[:n].split("\0", 1)[0]


def splitdup(split: Iterable[str] | None) -> list[str] | None:
    """Independent copy of a list of strings; None stays None."""
    if split is None:
        return None
    return [str(item) for item in split]


def char_to_string(c: int | str) -> str:
    """A one-character string made from a character or its code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def strlcpy(dst, src, size: int) -> int:
    """Copy the NUL-ended src into dst, writing at most size bytes with the NUL.

    Return the length of src.
    """
    srclen = _cstrlen(src)
    if size == 0:
        return srclen
    _check_span(dst, size, "destination")
    count = min(srclen, size - 1)
    dst[:count] = bytes(src[:count])
    dst[count] = 0
    return srclen

def strlcat(dst, src, size: int) -> int:
    """Append the NUL-ended src to the NUL-ended dst within size bytes.

    Return the length the full result would have.
    """
    dstlen = _cstrlen(dst)
    srclen = _cstrlen(src)
    if dstlen >= size:
        return size + srclen
    _check_span(dst, size, "destination")
    count = min(srclen, size - 1 - dstlen)
    dst[dstlen:dstlen + count] = bytes(src[:count])
    dst[dstlen + count] = 0
    return dstlen + srclen