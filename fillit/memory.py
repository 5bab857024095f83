"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_len(name: str, data: Bytes, n: int) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if n > len(data):
        raise ValueError(f"{name} holds {len(data)} bytes, {n} requested")


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buf`` to ``c`` (taken modulo 256)."""
    _check_len("buffer", buf, length)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    if n:
        memset(buf, 0, n)


def memalloc(size: int) -> bytearray:
    """Return a new zero-filled buffer of ``size`` bytes."""
    if size < 0:
        raise ValueError(f"negative size {size}")
    return bytearray(size)


def memcpy(dst: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dst``."""
    _check_len("source", src, n)
    _check_len("destination", dst, n)
    dst[:n] = src[:n]
    return dst


def memccpy(dst: bytearray, src: Bytes, c: int, n: int) -> Optional[int]:
    """Copy bytes from ``src`` to ``dst`` up to and including the byte ``c``.

    At most ``n`` bytes are copied. Returns the offset in ``dst`` just past
    the copied ``c``, or None if ``c`` was not among the first ``n`` bytes
    (in which case all ``n`` bytes were copied).
    """
    _check_len("source", src, n)
    stop = bytes(src[:n]).find(bytes([c & 0xFF]))
    count = n if stop < 0 else stop + 1
    _check_len("destination", dst, count)
    dst[:count] = src[:count]
    return None if stop < 0 else count


def memmove(buf: bytearray, dst_offset: int, src_offset: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buf``; the regions may overlap."""
    if min(dst_offset, src_offset, length) < 0:
        raise ValueError("offsets and length must not be negative")
    if max(dst_offset, src_offset) + length > len(buf):
        raise ValueError("region extends past the end of the buffer")
    buf[dst_offset:dst_offset + length] = bytes(buf[src_offset:src_offset + length])
    return buf


def memchr(data: Bytes, c: int, n: int) -> Optional[int]:
    """Offset of the first byte equal to ``c`` in the first ``n`` bytes, or None."""
    _check_len("data", data, n)
    pos = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if pos < 0 else pos


def memcmp(a: Bytes, b: Bytes, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first differing pair, or 0 if equal.
    """
    _check_len("first operand", a, n)
    _check_len("second operand", b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0