"""Vectored I/O helpers."""

from __future__ import annotations

from collections.abc import Iterable


def iovec_len(bufs: Iterable[bytes | bytearray | memoryview]) -> int:
    """Return the total number of bytes across ``bufs``."""
    return sum(memoryview(buf).nbytes for buf in bufs)