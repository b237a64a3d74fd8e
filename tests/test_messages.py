import pytest

from smolrtsp.messages import (
    HEADER_MAP_CAPACITY,
    Header,
    HeaderMap,
    HeaderMapFullError,
    Request,
    RequestLine,
    Response,
    ResponseLine,
    RtspVersion,
)
from smolrtsp.protocol import HEADER_C_SEQ, HEADER_CONTENT_LENGTH, Method, StatusCode


def test_version_serialize_default():
    assert RtspVersion().serialize() == b"RTSP/1.0"


def test_version_serialize_custom():
    assert RtspVersion(2, 1).serialize() == b"RTSP/2.1"


def test_version_out_of_range():
    with pytest.raises(ValueError):
        RtspVersion(256, 0)


def test_header_serialize():
    assert Header("Session", "42").serialize() == b"Session: 42\r\n"


def test_header_map_find_and_contains():
    hm = HeaderMap([Header("Content-Type", "application/sdp"), Header("Range", "npt=now-")])
    assert hm.find("Range") == "npt=now-"
    assert hm.find("Missing") is None
    assert hm.contains_key("Content-Type")
    assert not hm.contains_key("content-type")


def test_header_map_find_returns_first():
    hm = HeaderMap([Header("A", "1"), Header("A", "2")])
    assert hm.find("A") == "1"


def test_header_map_serialize():
    hm = HeaderMap([Header("A", "1"), Header("B", "2")])
    assert hm.serialize() == b"A: 1\r\nB: 2\r\n\r\n"


def test_empty_header_map_serialize():
    assert HeaderMap().serialize() == b"\r\n"


def test_header_map_capacity():
    hm = HeaderMap(Header(f"K{i}", str(i)) for i in range(HEADER_MAP_CAPACITY - 1))
    assert not hm.is_full()
    hm.append(Header("Last", "x"))
    assert hm.is_full()
    assert len(hm) == HEADER_MAP_CAPACITY
    with pytest.raises(HeaderMapFullError):
        hm.append(Header("Overflow", "y"))
    assert len(hm) == HEADER_MAP_CAPACITY


def test_header_map_eq():
    assert HeaderMap([Header("A", "1")]) == HeaderMap([Header("A", "1")])
    assert not HeaderMap([Header("A", "1")]) == HeaderMap([Header("A", "2")])


def test_request_line_serialize():
    line = RequestLine(Method.DESCRIBE, "rtsp://example.com/media.mp4")
    assert line.serialize() == b"DESCRIBE rtsp://example.com/media.mp4 RTSP/1.0\r\n"


def test_request_line_plain_string_method():
    line = RequestLine("GET_PARAMETER", "*")
    assert line.serialize() == b"GET_PARAMETER * RTSP/1.0\r\n"


def test_response_line_serialize():
    line = ResponseLine(StatusCode.OK, "OK")
    assert line.serialize() == b"RTSP/1.0 200 OK\r\n"


def test_response_line_status_code_value():
    line = ResponseLine(StatusCode.SESSION_NOT_FOUND, "Invalid Session ID")
    assert line.serialize() == b"RTSP/1.0 454 Invalid Session ID\r\n"


def test_response_without_body():
    resp = Response(ResponseLine(StatusCode.OK, "OK"), cseq=3)
    assert resp.serialize() == b"RTSP/1.0 200 OK\r\nCSeq: 3\r\n\r\n"


def test_response_with_body_adds_content_length():
    body = b"v=0\r\n"
    resp = Response(
        ResponseLine(StatusCode.OK, "OK"),
        HeaderMap([Header("Content-Type", "application/sdp")]),
        body,
        cseq=2,
    )
    expected = (
        b"RTSP/1.0 200 OK\r\n"
        b"CSeq: 2\r\n"
        + f"Content-Length: {len(body)}\r\n".encode()
        + b"Content-Type: application/sdp\r\n\r\n"
        + body
    )
    assert resp.serialize() == expected


def test_response_explicit_headers_not_duplicated():
    body = "hello"
    hm = HeaderMap([Header(HEADER_C_SEQ, "9"), Header(HEADER_CONTENT_LENGTH, "5")])
    out = Response(ResponseLine(StatusCode.OK, "OK"), hm, body, cseq=1).serialize()
    assert out.count(b"CSeq:") == 1
    assert out.count(b"Content-Length:") == 1
    assert b"CSeq: 9\r\n" in out
    assert out.endswith(b"\r\n\r\nhello")


def test_request_serialize():
    req = Request(
        RequestLine(Method.SETUP, "rtsp://example.com/audio"),
        HeaderMap([Header("Transport", "RTP/AVP;unicast;client_port=5000-5001")]),
        cseq=7,
    )
    assert req.serialize() == (
        b"SETUP rtsp://example.com/audio RTSP/1.0\r\n"
        b"CSeq: 7\r\n"
        b"Transport: RTP/AVP;unicast;client_port=5000-5001\r\n\r\n"
    )


def test_request_str_body_is_bytes():
    req = Request(RequestLine(Method.ANNOUNCE, "*"), body="abc")
    assert req.body == b"abc"
    assert req.serialize().endswith(b"Content-Length: 3\r\n\r\nabc")


def test_invalid_cseq():
    with pytest.raises(ValueError):
        Request(RequestLine(Method.PLAY, "*"), cseq=-1)
    with pytest.raises(ValueError):
        Response(ResponseLine(StatusCode.OK, "OK"), cseq=1 << 32)
    with pytest.raises(ValueError):
        ResponseLine(70000, "Bad")