import pytest

from smolrtsp import sdp
from smolrtsp.sdp import SdpLine, describe


def test_documented_example():
    result = describe(
        [
            (sdp.VERSION, "0"),
            (sdp.ORIGIN, "SmolRTSP 3855320066 3855320129 IN IP4 0.0.0.0"),
            (sdp.SESSION_NAME, "SmolRTSP test"),
            (sdp.CONNECTION, "IN IP4 %s", "0.0.0.0"),
            (sdp.TIME, "0 0"),
            (sdp.MEDIA, "audio %d RTP/AVP %d", 123, 456),
            (sdp.ATTR, "control:audio"),
        ]
    )
    expected = (
        b"v=0\r\n"
        b"o=SmolRTSP 3855320066 3855320129 IN IP4 0.0.0.0\r\n"
        b"s=SmolRTSP test\r\n"
        b"c=IN IP4 0.0.0.0\r\n"
        b"t=0 0\r\n"
        b"m=audio 123 RTP/AVP 456\r\n"
        b"a=control:audio\r\n"
    )
    assert result == expected


def test_line_serialize():
    assert SdpLine(sdp.VERSION, "0").serialize() == b"v=0\r\n"


def test_describe_accepts_line_objects():
    lines = [SdpLine(sdp.ATTR, "control:video"), SdpLine(sdp.TIME, "0 0")]
    assert describe(lines) == b"".join(line.serialize() for line in lines)


def test_describe_mixes_lines_and_tuples():
    result = describe([SdpLine(sdp.VERSION, "0"), (sdp.ATTR, "framerate:%d", 25)])
    assert result.endswith(b"a=framerate:25\r\n")
    assert result.startswith(b"v=0\r\n")


@pytest.mark.parametrize("ty", ["", "vv"])
def test_invalid_type_rejected(ty):
    with pytest.raises(ValueError):
        SdpLine(ty, "0")


def test_empty_description_rejected():
    with pytest.raises(ValueError):
        describe([])


def test_tuple_without_value_rejected():
    with pytest.raises(ValueError):
        describe([(sdp.VERSION,)])