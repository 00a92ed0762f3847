"""Byte-buffer filling, copying, searching and comparison helpers."""

from __future__ import annotations

from collections.abc import Sequence


def _check_count(n: int, **buffers: Sequence[int]) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for name, buffer in buffers.items():
        if n > len(buffer):
            raise IndexError(f"{name} holds {len(buffer)} bytes, {n} requested")


def fill(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to ``value``.

    Only the low eight bits of ``value`` are used. Returns ``buffer``.
    """
    _check_count(length, buffer=buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def zero(buffer: bytearray, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to zero. Returns ``buffer``."""
    return fill(buffer, 0, length)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """Return a new zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def copy(dst: bytearray, src: Sequence[int], n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dst``.

    Returns ``dst``.
    """
    _check_count(n, dst=dst, src=src)
    dst[:n] = bytes(src[:n])
    return dst


def move(buffer: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buffer`` from ``src_offset`` to ``dst_offset``.

    The regions may overlap; the result is as if the source bytes were
    first copied aside. Returns ``buffer``.
    """
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("length must not be negative")
    if max(dst_offset, src_offset) + n > len(buffer):
        raise IndexError("move reaches past the end of the buffer")
    buffer[dst_offset:dst_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def find_byte(data: Sequence[int], value: int, n: int) -> int:
    """Return the index of the first byte equal to ``value`` among the
    first ``n`` bytes of ``data``, or -1. Only the low eight bits of
    ``value`` are used."""
    _check_count(n, data=data)
    target = value & 0xFF
    for index, byte in enumerate(data[:n]):
        if byte == target:
            return index
    return -1


def compare_bytes(first: Sequence[int], second: Sequence[int], n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of bytes that differ, or 0
    when all ``n`` bytes are equal.
    """
    _check_count(n, first=first, second=second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0