"""Sends NAL units over RTP, fragmenting large units into FU packets.

See RFC 6184, section 5.8 (H.264) and RFC 7798, section 4.4.3 (H.265).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from smolrtsp.h264 import H264NalHeader
from smolrtsp.nal import NalHeader, NalUnit, nal_header_size, serialize_nal_header
from smolrtsp.rtp_transport import RtpTimestamp, RtpTransport

MAX_H264_NALU_SIZE = 1200
"""The default size above which an H.264 NAL unit is fragmented."""

MAX_H265_NALU_SIZE = 1200
"""The default size above which an H.265 NAL unit is fragmented."""


@dataclass(frozen=True, slots=True)
class NalTransportConfig:
    """Size limits after which NAL units are split into fragmentation units."""

    max_h264_nalu_size: int = field(default=MAX_H264_NALU_SIZE)
    max_h265_nalu_size: int = field(default=MAX_H265_NALU_SIZE)

    def __post_init__(self) -> None:
        if self.max_h264_nalu_size <= 0:
            raise ValueError(f"invalid H.264 size limit: {self.max_h264_nalu_size}")
        if self.max_h265_nalu_size <= 0:
            raise ValueError(f"invalid H.265 size limit: {self.max_h265_nalu_size}")

    def max_size_for(self, header: NalHeader) -> int:
        """Return the limit that applies to units with ``header``."""
        if isinstance(header, H264NalHeader):
            return self.max_h264_nalu_size
        return self.max_h265_nalu_size


class NalTransport:
    """Sends H.264 or H.265 NAL units through an RTP transport."""

    def __init__(
        self, transport: RtpTransport, config: NalTransportConfig | None = None
    ) -> None:
        self._transport = transport
        self.config = config if config is not None else NalTransportConfig()

    def send_packet(self, ts: RtpTimestamp, nalu: NalUnit) -> None:
        """Send ``nalu`` as a single RTP packet, or as FU packets if it is too large."""
        max_packet_size = self.config.max_size_for(nalu.header)
        nalu_size = nal_header_size(nalu.header) + len(nalu.payload)

        if nalu_size < max_packet_size:
            marker = (
                nalu.header.is_coded_slice_idr()
                or nalu.header.is_coded_slice_non_idr()
            )
            self._transport.send_packet(
                ts, marker, serialize_nal_header(nalu.header), nalu.payload
            )
            return

        for fragment, is_first, is_last in _fragments(nalu.payload, max_packet_size):
            fu_header = nalu.header.fu_header(is_first, is_last)
            self._transport.send_packet(ts, is_last, fu_header, fragment)

    def is_full(self) -> bool:
        return self._transport.is_full()

    def close(self) -> None:
        """Close the underlying RTP transport."""
        self._transport.close()

    def __enter__(self) -> NalTransport:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _fragments(
    payload: bytes, max_size: int
) -> Iterator[tuple[memoryview, bool, bool]]:
    """Yield ``(chunk, is_first, is_last)`` for chunks of at most ``max_size`` bytes."""
    view = memoryview(payload)
    starts = range(0, len(view), max_size)
    for index, start in enumerate(starts):
        yield view[start : start + max_size], index == 0, index == len(starts) - 1