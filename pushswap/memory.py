"""Byte-buffer helpers: filling, allocating, searching, comparing and copying."""

from __future__ import annotations

_SIZE_MAX = 2**64 - 1


def _byte(value: int) -> int:
    return value & 0xFF


def _check_length(n: int, *buffers: bytes | bytearray | memoryview) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"length {n} exceeds buffer of {len(buffer)} bytes")


def mem_set(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with the low byte of ``value``."""
    _check_length(n, buffer)
    buffer[:n] = bytes([_byte(value)]) * n
    return buffer


def zero(buffer: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    return mem_set(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count`` elements of ``size`` bytes.

    Raises ``OverflowError`` when the total size does not fit a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > _SIZE_MAX // size:
        raise OverflowError("requested size is too large")
    return bytearray(count * size)


def mem_find(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of ``value`` among the first ``n``."""
    _check_length(n, data)
    index = bytes(data[:n]).find(_byte(value))
    return None if index < 0 else index


def mem_compare(first: bytes | bytearray, second: bytes | bytearray, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_length(n, first, second)
    for left, right in zip(first[:n], second[:n]):
        if left != right:
            return left - right
    return 0


def mem_copy(dest: bytearray, source: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``source`` to the start of ``dest``."""
    _check_length(n, dest, source)
    dest[:n] = source[:n]
    return dest


def mem_move(buffer: bytearray, dest: int, source: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buffer`` from offset ``source`` to ``dest``.

    The regions may overlap; the result is as if the bytes were first copied
    aside.
    """
    if dest < 0 or source < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("length must not be negative")
    if max(dest, source) + n > len(buffer):
        raise ValueError("move reaches past the end of the buffer")
    if n == 0 or dest == source:
        return buffer
    buffer[dest : dest + n] = bytes(buffer[source : source + n])
    return buffer