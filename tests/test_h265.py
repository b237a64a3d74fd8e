import pytest

from smolrtsp.fragmentation import nal_fu_header
from smolrtsp.h265 import (
    FU_HEADER_SIZE,
    NAL_HEADER_SIZE,
    NAL_UNIT_IDR_N_LP,
    NAL_UNIT_IDR_W_RADL,
    NAL_UNIT_PPS_NUT,
    NAL_UNIT_SPS_NUT,
    NAL_UNIT_TRAIL_R,
    NAL_UNIT_VPS_NUT,
    H265NalHeader,
)


def test_parse_serialize_round_trip_all_pairs():
    for b0 in range(256):
        for b1 in range(256):
            data = bytes((b0, b1))
            assert H265NalHeader.parse(data).serialize() == data


def test_construct_then_parse_round_trip():
    header = H265NalHeader(True, NAL_UNIT_SPS_NUT, 45, 6)
    serialized = header.serialize()
    assert len(serialized) == NAL_HEADER_SIZE
    assert H265NalHeader.parse(serialized) == header


def test_parse_ignores_trailing_bytes():
    header = H265NalHeader(False, NAL_UNIT_PPS_NUT, 0, 1)
    assert H265NalHeader.parse(header.serialize() + b"\xff\xff") == header


def test_parse_too_short():
    with pytest.raises(ValueError):
        H265NalHeader.parse(b"\x40")


@pytest.mark.parametrize(
    "unit_type, vps, sps, pps, idr, non_idr",
    [
        (NAL_UNIT_VPS_NUT, True, False, False, False, False),
        (NAL_UNIT_SPS_NUT, False, True, False, False, False),
        (NAL_UNIT_PPS_NUT, False, False, True, False, False),
        (NAL_UNIT_IDR_W_RADL, False, False, False, True, False),
        (NAL_UNIT_IDR_N_LP, False, False, False, False, True),
        (NAL_UNIT_TRAIL_R, False, False, False, False, True),
    ],
)
def test_predicates(unit_type, vps, sps, pps, idr, non_idr):
    header = H265NalHeader(False, unit_type, 0, 1)
    assert header.is_vps() is vps
    assert header.is_sps() is sps
    assert header.is_pps() is pps
    assert header.is_coded_slice_idr() is idr
    assert header.is_coded_slice_non_idr() is non_idr


@pytest.mark.parametrize("first, last", [(True, False), (False, True), (False, False)])
def test_fu_header(first, last):
    header = H265NalHeader(False, NAL_UNIT_IDR_W_RADL, 33, 5)
    fu = header.fu_header(first, last)
    assert len(fu) == FU_HEADER_SIZE
    payload_hdr = H265NalHeader.parse(fu[:2])
    assert payload_hdr.unit_type == 49
    assert payload_hdr.forbidden_zero_bit == header.forbidden_zero_bit
    assert payload_hdr.nuh_layer_id == header.nuh_layer_id
    assert payload_hdr.nuh_temporal_id_plus1 == header.nuh_temporal_id_plus1
    assert fu[2] == nal_fu_header(first, last, NAL_UNIT_IDR_W_RADL)


def test_out_of_range_fields_rejected():
    with pytest.raises(ValueError):
        H265NalHeader(False, 64, 0, 1)
    with pytest.raises(ValueError):
        H265NalHeader(False, 1, 64, 1)
    with pytest.raises(ValueError):
        H265NalHeader(False, 1, 0, 8)