"""H.265 NAL header representation."""

from __future__ import annotations

from dataclasses import dataclass

from smolrtsp.fragmentation import nal_fu_header

NAL_HEADER_SIZE = 2
"""The size of an H.265 NAL header in bytes."""

FU_HEADER_SIZE = 3
"""The size of an H.265 FU header: payload header plus FU header."""

NAL_UNIT_TRAIL_N = 0
NAL_UNIT_TRAIL_R = 1
NAL_UNIT_TSA_N = 2
NAL_UNIT_TSA_R = 3
NAL_UNIT_STSA_N = 4
NAL_UNIT_STSA_R = 5
NAL_UNIT_RADL_N = 6
NAL_UNIT_RADL_R = 7
NAL_UNIT_RASL_N = 8
NAL_UNIT_RASL_R = 9
NAL_UNIT_BLA_W_LP = 16
NAL_UNIT_BLA_W_RADL = 17
NAL_UNIT_BLA_N_LP = 18
NAL_UNIT_IDR_W_RADL = 19
NAL_UNIT_IDR_N_LP = 20
NAL_UNIT_CRA_NUT = 21
NAL_UNIT_VPS_NUT = 32
NAL_UNIT_SPS_NUT = 33
NAL_UNIT_PPS_NUT = 34
NAL_UNIT_AUD_NUT = 35
NAL_UNIT_EOS_NUT = 36
NAL_UNIT_EOB_NUT = 37
NAL_UNIT_FD_NUT = 38
NAL_UNIT_PREFIX_SEI_NUT = 39
NAL_UNIT_SUFFIX_SEI_NUT = 40

_FU_UNIT_TYPE = 49


@dataclass(frozen=True, slots=True)
class H265NalHeader:
    """An H.265 NAL header: forbidden bit, type u(6), layer id u(6), temporal id u(3)."""

    forbidden_zero_bit: bool
    unit_type: int
    nuh_layer_id: int
    nuh_temporal_id_plus1: int

    def __post_init__(self) -> None:
        if not 0 <= self.unit_type <= 0b111111:
            raise ValueError(f"unit_type out of range: {self.unit_type}")
        if not 0 <= self.nuh_layer_id <= 0b111111:
            raise ValueError(f"nuh_layer_id out of range: {self.nuh_layer_id}")
        if not 0 <= self.nuh_temporal_id_plus1 <= 0b111:
            raise ValueError(
                f"nuh_temporal_id_plus1 out of range: {self.nuh_temporal_id_plus1}"
            )

    @classmethod
    def parse(cls, data: bytes) -> H265NalHeader:
        """Parse a header from the first two octets of ``data``."""
        if len(data) < NAL_HEADER_SIZE:
            raise ValueError("an H.265 NAL header needs two octets")
        b0, b1 = data[0], data[1]
        return cls(
            forbidden_zero_bit=bool((b0 & 0b10000000) >> 7),
            unit_type=(b0 & 0b01111110) >> 1,
            nuh_layer_id=((b0 & 0b00000001) << 5) | ((b1 & 0b11111000) >> 3),
            nuh_temporal_id_plus1=b1 & 0b00000111,
        )

    def serialize(self) -> bytes:
        """Return the two-octet representation."""
        b0 = (
            ((int(self.forbidden_zero_bit) & 0b1) << 7)
            | ((self.unit_type & 0b00111111) << 1)
            | ((self.nuh_layer_id & 0b00100000) >> 5)
        )
        b1 = ((self.nuh_layer_id & 0b00011111) << 3) | (
            self.nuh_temporal_id_plus1 & 0b00000111
        )
        return bytes((b0, b1))

    def is_vps(self) -> bool:
        return self.unit_type == NAL_UNIT_VPS_NUT

    def is_sps(self) -> bool:
        return self.unit_type == NAL_UNIT_SPS_NUT

    def is_pps(self) -> bool:
        return self.unit_type == NAL_UNIT_PPS_NUT

    def is_coded_slice_idr(self) -> bool:
        return self.unit_type == NAL_UNIT_IDR_W_RADL

    def is_coded_slice_non_idr(self) -> bool:
        return self.unit_type in (NAL_UNIT_IDR_N_LP, NAL_UNIT_TRAIL_R)

    def fu_header(self, is_first_fragment: bool, is_last_fragment: bool) -> bytes:
        """Return the payload header and FU header (RFC 7798, section 4.4.3)."""
        payload_hdr = H265NalHeader(
            forbidden_zero_bit=self.forbidden_zero_bit,
            unit_type=_FU_UNIT_TYPE,
            nuh_layer_id=self.nuh_layer_id,
            nuh_temporal_id_plus1=self.nuh_temporal_id_plus1,
        ).serialize()
        header = nal_fu_header(is_first_fragment, is_last_fragment, self.unit_type)
        return payload_hdr + bytes((header,))