"""A generic NAL unit that is either H.264 or H.265."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Union

from smolrtsp import h264, h265
from smolrtsp.h264 import H264NalHeader
from smolrtsp.h265 import H265NalHeader

NalHeader = Union[H264NalHeader, H265NalHeader]
"""A generic NAL header."""

Buffer = Union[bytes, bytearray, memoryview]

NalStartCodeTester = Callable[[Buffer], int]
"""Returns the length of the start code at the beginning of its argument, or 0."""

START_CODE_3B = b"\x00\x00\x01"
START_CODE_4B = b"\x00\x00\x00\x01"


def nal_header_size(header: NalHeader) -> int:
    """Return the size of ``header`` in bytes."""
    if isinstance(header, H264NalHeader):
        return h264.NAL_HEADER_SIZE
    if isinstance(header, H265NalHeader):
        return h265.NAL_HEADER_SIZE
    raise TypeError(f"not a NAL header: {header!r}")


def nal_fu_size(header: NalHeader) -> int:
    """Return the size of a fragmentation unit header for ``header`` in bytes."""
    if isinstance(header, H264NalHeader):
        return h264.FU_HEADER_SIZE
    if isinstance(header, H265NalHeader):
        return h265.FU_HEADER_SIZE
    raise TypeError(f"not a NAL header: {header!r}")


def serialize_nal_header(header: NalHeader) -> bytes:
    """Return the wire representation of ``header``."""
    if isinstance(header, H264NalHeader):
        return bytes((header.serialize(),))
    if isinstance(header, H265NalHeader):
        return header.serialize()
    raise TypeError(f"not a NAL header: {header!r}")


@dataclass(frozen=True, slots=True)
class NalUnit:
    """A NAL unit: its header and the payload that follows the header."""

    header: NalHeader
    payload: bytes = b""


def test_start_code_3b(data: Buffer) -> int:
    """Return 3 if ``data`` starts with ``00 00 01``, otherwise 0."""
    if len(data) < len(START_CODE_3B):
        return 0
    return len(START_CODE_3B) if bytes(data[:3]) == START_CODE_3B else 0


def test_start_code_4b(data: Buffer) -> int:
    """Return 4 if ``data`` starts with ``00 00 00 01``, otherwise 0."""
    if len(data) < len(START_CODE_4B):
        return 0
    return len(START_CODE_4B) if bytes(data[:4]) == START_CODE_4B else 0


def determine_start_code(data: Buffer) -> NalStartCodeTester | None:
    """Return the start code tester matching the beginning of ``data``.

    Returns ``None`` if ``data`` does not begin with a start code.
    """
    if test_start_code_3b(data):
        return test_start_code_3b
    if test_start_code_4b(data):
        return test_start_code_4b
    return None