import pytest

from smolrtsp import h264, h265, nal
from smolrtsp.h264 import H264NalHeader
from smolrtsp.h265 import H265NalHeader


def test_header_size_h264():
    header = H264NalHeader.parse(0x65)
    assert nal.nal_header_size(header) == h264.NAL_HEADER_SIZE


def test_header_size_h265():
    header = H265NalHeader(False, h265.NAL_UNIT_VPS_NUT, 0, 1)
    assert nal.nal_header_size(header) == h265.NAL_HEADER_SIZE


def test_fu_size():
    assert nal.nal_fu_size(H264NalHeader.parse(0x65)) == h264.FU_HEADER_SIZE
    assert nal.nal_fu_size(H265NalHeader(False, 1, 0, 1)) == h265.FU_HEADER_SIZE


def test_sizes_reject_other_objects():
    with pytest.raises(TypeError):
        nal.nal_header_size(object())
    with pytest.raises(TypeError):
        nal.nal_fu_size("header")


def test_serialize_h264_round_trip():
    header = H264NalHeader(False, 3, h264.NAL_UNIT_SPS)
    data = nal.serialize_nal_header(header)
    assert len(data) == nal.nal_header_size(header)
    assert H264NalHeader.parse(data[0]) == header


def test_serialize_h265_round_trip():
    header = H265NalHeader(False, h265.NAL_UNIT_IDR_W_RADL, 5, 2)
    data = nal.serialize_nal_header(header)
    assert len(data) == nal.nal_header_size(header)
    assert H265NalHeader.parse(data) == header


def test_nal_unit_holds_fields():
    header = H264NalHeader.parse(0x41)
    unit = nal.NalUnit(header, b"\x01\x02")
    assert unit.header == header
    assert unit.payload == b"\x01\x02"
    assert nal.NalUnit(header).payload == b""


def test_start_code_3b():
    assert nal.test_start_code_3b(b"\x00\x00\x01\x67") == 3
    assert nal.test_start_code_3b(b"\x00\x00") == 0
    assert nal.test_start_code_3b(b"\x00\x00\x00\x01") == 0


def test_start_code_4b():
    assert nal.test_start_code_4b(b"\x00\x00\x00\x01\x67") == 4
    assert nal.test_start_code_4b(b"\x00\x00\x01") == 0
    assert nal.test_start_code_4b(b"\x00\x00\x01\x67") == 0


def test_start_code_accepts_memoryview():
    assert nal.test_start_code_3b(memoryview(b"\x00\x00\x01")) == 3


def test_determine_start_code():
    assert nal.determine_start_code(b"\x00\x00\x01\x09") is nal.test_start_code_3b
    assert nal.determine_start_code(b"\x00\x00\x00\x01\x09") is nal.test_start_code_4b
    assert nal.determine_start_code(b"\x01\x02\x03\x04") is None
    assert nal.determine_start_code(b"") is None


def test_determined_tester_walks_stream():
    stream = nal.START_CODE_4B + b"\x09\xf0" + nal.START_CODE_4B + b"\x67"
    tester = nal.determine_start_code(stream)
    offsets = [i for i in range(len(stream)) if tester(stream[i:])]
    assert offsets == [0, len(nal.START_CODE_4B) + 2]