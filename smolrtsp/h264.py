"""H.264 NAL header representation."""

from __future__ import annotations

from dataclasses import dataclass

from smolrtsp.fragmentation import nal_fu_header

NAL_HEADER_SIZE = 1
"""The size of an H.264 NAL header in bytes."""

FU_HEADER_SIZE = 2
"""The size of an H.264 FU header: FU identifier plus FU header."""

NAL_UNIT_UNSPECIFIED = 0
NAL_UNIT_CODED_SLICE_NON_IDR = 1
NAL_UNIT_CODED_SLICE_DATA_PARTITION_A = 2
NAL_UNIT_CODED_SLICE_DATA_PARTITION_B = 3
NAL_UNIT_CODED_SLICE_DATA_PARTITION_C = 4
NAL_UNIT_CODED_SLICE_IDR = 5
NAL_UNIT_SEI = 6
NAL_UNIT_SPS = 7
NAL_UNIT_PPS = 8
NAL_UNIT_AUD = 9
NAL_UNIT_END_OF_SEQUENCE = 10
NAL_UNIT_END_OF_STREAM = 11
NAL_UNIT_FILLER = 12
NAL_UNIT_SPS_EXT = 13
NAL_UNIT_PREFIX = 14
NAL_UNIT_SUBSET_SPS = 15
NAL_UNIT_DPS = 16
NAL_UNIT_CODED_SLICE_AUX = 19
NAL_UNIT_CODED_SLICE_EXT = 20
NAL_UNIT_CODED_SLICE_EXT_DEPTH_VIEW = 21

_FU_A_IDENTIFIER = 0b01111100  # 0, nal_ref_idc, FU-A (28)


@dataclass(frozen=True, slots=True)
class H264NalHeader:
    """An H.264 NAL header: forbidden_zero_bit f(1), nal_ref_idc u(2), type u(5)."""

    forbidden_zero_bit: bool
    ref_idc: int
    unit_type: int

    def __post_init__(self) -> None:
        if not 0 <= self.ref_idc <= 0b11:
            raise ValueError(f"ref_idc out of range: {self.ref_idc}")
        if not 0 <= self.unit_type <= 0b11111:
            raise ValueError(f"unit_type out of range: {self.unit_type}")

    @classmethod
    def parse(cls, byte_header: int) -> H264NalHeader:
        """Parse a header from its single-octet representation."""
        if not 0 <= byte_header <= 0xFF:
            raise ValueError(f"not an octet: {byte_header}")
        return cls(
            forbidden_zero_bit=(byte_header & 0b10000000) >> 7 == 1,
            ref_idc=(byte_header & 0b01100000) >> 5,
            unit_type=byte_header & 0b00011111,
        )

    def serialize(self) -> int:
        """Return the single-octet representation."""
        return (
            (0b10000000 if self.forbidden_zero_bit else 0)
            | (self.ref_idc << 5)
            | self.unit_type
        ) & 0xFF

    def is_vps(self) -> bool:
        """H.264 has no VPS, so this is always false."""
        return False

    def is_sps(self) -> bool:
        return self.unit_type == NAL_UNIT_SPS

    def is_pps(self) -> bool:
        return self.unit_type == NAL_UNIT_PPS

    def is_coded_slice_idr(self) -> bool:
        return self.unit_type == NAL_UNIT_CODED_SLICE_IDR

    def is_coded_slice_non_idr(self) -> bool:
        return self.unit_type == NAL_UNIT_CODED_SLICE_NON_IDR

    def fu_header(self, is_first_fragment: bool, is_last_fragment: bool) -> bytes:
        """Return the FU-A identifier and FU header (RFC 6184, section 5.8)."""
        fu_identifier = _FU_A_IDENTIFIER
        if self.ref_idc & 0b10 == 0:
            fu_identifier &= 0b00111111
        if self.ref_idc & 0b01 == 0:
            fu_identifier &= 0b01011111
        header = nal_fu_header(is_first_fragment, is_last_fragment, self.unit_type)
        return bytes((fu_identifier, header))