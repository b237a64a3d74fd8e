"""RTP fixed header as described by RFC 3550, section 5.1."""

from __future__ import annotations

import struct
from dataclasses import dataclass

_FIXED_HEADER = struct.Struct("!BBHII")
_EXTENSION_HEADER = struct.Struct("!HH")


@dataclass(frozen=True, slots=True)
class RtpHeader:
    """An RTP header; numeric fields hold host values and are written big-endian.

    The CSRC count and the extension length (in 32-bit words) follow from
    ``csrc`` and ``extension_payload``.
    """

    version: int = 2
    padding: bool = False
    extension: bool = False
    marker: bool = False
    payload_ty: int = 0
    sequence_number: int = 0
    timestamp: int = 0
    ssrc: int = 0
    csrc: tuple[int, ...] = ()
    extension_profile: int = 0
    extension_payload: bytes = b""

    def __post_init__(self) -> None:
        if not 0 <= self.version <= 0b11:
            raise ValueError(f"version out of range: {self.version}")
        if len(self.csrc) > 0b1111:
            raise ValueError(f"too many CSRC identifiers: {len(self.csrc)}")
        if not 0 <= self.payload_ty <= 0x7F:
            raise ValueError(f"payload type out of range: {self.payload_ty}")
        if not 0 <= self.sequence_number <= 0xFFFF:
            raise ValueError(f"sequence number out of range: {self.sequence_number}")
        if not 0 <= self.timestamp <= 0xFFFFFFFF:
            raise ValueError(f"timestamp out of range: {self.timestamp}")
        if not 0 <= self.ssrc <= 0xFFFFFFFF:
            raise ValueError(f"SSRC out of range: {self.ssrc}")
        if any(not 0 <= c <= 0xFFFFFFFF for c in self.csrc):
            raise ValueError("CSRC identifier out of range")
        if not 0 <= self.extension_profile <= 0xFFFF:
            raise ValueError(f"extension profile out of range: {self.extension_profile}")
        if len(self.extension_payload) % 4 != 0:
            raise ValueError("extension payload must be a whole number of 32-bit words")
        if self.extension_payload_len > 0xFFFF:
            raise ValueError("extension payload too long")

    @property
    def csrc_count(self) -> int:
        return len(self.csrc)

    @property
    def extension_payload_len(self) -> int:
        """The extension length in 32-bit units."""
        return len(self.extension_payload) // 4

    def size(self) -> int:
        """The size of the serialized header in bytes."""
        result = _FIXED_HEADER.size + 4 * self.csrc_count
        if self.extension:
            result += _EXTENSION_HEADER.size + len(self.extension_payload)
        return result

    def serialize(self) -> bytes:
        """Return the wire representation of this header."""
        first = (
            (self.version << 6)
            | (int(self.padding) << 5)
            | (int(self.extension) << 4)
            | self.csrc_count
        )
        second = (int(self.marker) << 7) | self.payload_ty
        parts = [
            _FIXED_HEADER.pack(
                first, second, self.sequence_number, self.timestamp, self.ssrc
            ),
            struct.pack(f"!{self.csrc_count}I", *self.csrc),
        ]
        if self.extension:
            parts.append(
                _EXTENSION_HEADER.pack(self.extension_profile, self.extension_payload_len)
            )
            parts.append(bytes(self.extension_payload))
        return b"".join(parts)