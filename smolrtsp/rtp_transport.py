"""Sends RTP packets over a transport, numbering them in sequence."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from smolrtsp.rtp import RtpHeader
from smolrtsp.transport import Buffer, Transport

_U32_MASK = 0xFFFFFFFF


@dataclass(frozen=True, slots=True)
class RawTimestamp:
    """An RTP timestamp given directly in clock-rate units."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _U32_MASK:
            raise ValueError(f"timestamp out of range: {self.value}")


@dataclass(frozen=True, slots=True)
class SysClockUsTimestamp:
    """A timestamp in microseconds of the system clock."""

    time_us: int

    def __post_init__(self) -> None:
        if not 0 <= self.time_us <= 0xFFFFFFFFFFFFFFFF:
            raise ValueError(f"time out of range: {self.time_us}")


RtpTimestamp = Union[RawTimestamp, SysClockUsTimestamp]


def compute_timestamp(ts: RtpTimestamp, clock_rate: int) -> int:
    """Convert ``ts`` to a 32-bit RTP timestamp for ``clock_rate`` Hz."""
    if isinstance(ts, RawTimestamp):
        return ts.value
    if isinstance(ts, SysClockUsTimestamp):
        us_rem = ts.time_us % 1000
        ms = (ts.time_us - us_rem) // 1000
        clock_rate_khz = clock_rate // 1000
        result = ms * clock_rate_khz + int(us_rem * (clock_rate_khz / 1000.0))
        return result & _U32_MASK
    raise TypeError(f"not an RTP timestamp: {ts!r}")


class RtpTransport:
    """Wraps payloads in RTP headers and hands them to a transport."""

    def __init__(self, transport: Transport, payload_ty: int, clock_rate: int) -> None:
        if not 0 <= payload_ty <= 0x7F:
            raise ValueError(f"payload type out of range: {payload_ty}")
        if clock_rate < 0:
            raise ValueError(f"negative clock rate: {clock_rate}")
        self._transport = transport
        self.payload_ty = payload_ty
        self.clock_rate = clock_rate
        self.seq_num = 0
        self.ssrc = random.getrandbits(32)

    def send_packet(
        self,
        ts: RtpTimestamp,
        marker: bool,
        payload_header: Buffer,
        payload: Buffer,
    ) -> None:
        """Send one RTP packet; the sequence number advances only on success."""
        header = RtpHeader(
            marker=marker,
            payload_ty=self.payload_ty,
            sequence_number=self.seq_num,
            timestamp=compute_timestamp(ts, self.clock_rate),
            ssrc=self.ssrc,
        )
        bufs: Iterable[Buffer] = (header.serialize(), payload_header, payload)
        self._transport.transmit(list(bufs))
        self.seq_num = (self.seq_num + 1) & 0xFFFF

    def is_full(self) -> bool:
        return self._transport.is_full()

    def close(self) -> None:
        """Close the underlying transport."""
        self._transport.close()

    def __enter__(self) -> RtpTransport:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()