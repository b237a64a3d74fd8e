# smolrtsp

Building blocks for RTSP 1.0 servers, using only the standard library
(Python 3.10 or later).

- `smolrtsp.protocol` – `StatusCode` (an `IntEnum`), `Method` (a `str` enum),
  `method_eq`, and `HEADER_*` name constants such as `HEADER_C_SEQ` and
  `HEADER_TRANSPORT`.
- `smolrtsp.messages` – `RtspVersion`, `Header`, `HeaderMap`,
  `HeaderMapFullError`, `RequestLine`, `ResponseLine`, `Request`, `Response`
  and `ok_line()`. Every type has a `serialize()` method returning bytes.
- `smolrtsp.sdp` – `SdpLine`, `describe` and one-letter type constants
  (`VERSION`, `ORIGIN`, `SESSION_NAME`, `CONNECTION`, `TIME`, `MEDIA`, `ATTR`, …).
- `smolrtsp.context` – `Context`, which collects response headers and a body
  and writes the response.
- `smolrtsp.controller` – the `Controller` base class, `ControlFlow` and
  `dispatch`.
- `smolrtsp.rtp` – `RtpHeader` (RFC 3550 fixed header, CSRCs, extension).
- `smolrtsp.rtp_transport` – `RtpTransport`, `RawTimestamp`,
  `SysClockUsTimestamp` and `compute_timestamp`.
- `smolrtsp.transport` – the `Writer` and `Transport` protocols,
  `TcpTransport`, `UdpTransport`, `TransportError` and `dgram_socket`.
- `smolrtsp.h264`, `smolrtsp.h265` – `H264NalHeader`, `H265NalHeader` and
  NAL unit type constants.
- `smolrtsp.nal` – `NalUnit`, `nal_header_size`, `nal_fu_size`,
  `serialize_nal_header`, `determine_start_code`, `test_start_code_3b`,
  `test_start_code_4b`.
- `smolrtsp.nal_transport` – `NalTransport` and `NalTransportConfig`.
- `smolrtsp.fragmentation` – `nal_fu_header`; `smolrtsp.io_vec` – `iovec_len`.

Install it with pip from the project directory. The `test` extra adds pytest
for running the test suite.

## Messages

`Request` and `Response` write `CSeq` (from `cseq`) and, when the body is
not empty, `Content-Length` right after the start line, unless `header_map`
already holds those headers. A `HeaderMap` keeps headers in order and holds
at most 32 of them; `append` raises `HeaderMapFullError` past that.
`find(key)` returns the first matching value or `None`.

```python
from smolrtsp.messages import Header, HeaderMap, Response, ok_line

response = Response(ok_line(), HeaderMap([Header("Public", "DESCRIBE")]), cseq=3)
response.serialize()
# b"RTSP/1.0 200 OK\r\nCSeq: 3\r\nPublic: DESCRIBE\r\n\r\n"
```

## Handling requests

A connection is anything that follows the `Writer` protocol: `write(data)`
returning the number of bytes written, `lock()`, `unlock()` and `filled()`.

Subclass `Controller` and implement all of its methods. `dispatch(conn,
controller, req)` creates a `Context`, calls `before`; unless that returns
`ControlFlow.BREAK`, it calls the handler for `OPTIONS`, `DESCRIBE`, `SETUP`,
`PLAY` or `TEARDOWN`, or `unknown` for any other method; then it calls
`after` with the number of bytes written and returns that number (0 if no
response was sent).

```python
from smolrtsp.controller import ControlFlow, Controller, dispatch
from smolrtsp.protocol import HEADER_PUBLIC, StatusCode


class MyController(Controller):
    def options(self, ctx, req):
        ctx.header(HEADER_PUBLIC, "DESCRIBE, SETUP, TEARDOWN, PLAY")
        ctx.respond_ok()

    def describe(self, ctx, req):
        ctx.respond(StatusCode.NOT_FOUND, "Not Found")

    def setup(self, ctx, req):
        ctx.respond(StatusCode.UNSUPPORTED_TRANSPORT, "Unsupported transport")

    def play(self, ctx, req):
        ctx.respond(StatusCode.SESSION_NOT_FOUND, "Invalid Session ID")

    def teardown(self, ctx, req):
        ctx.respond(StatusCode.SESSION_NOT_FOUND, "Invalid Session ID")

    def unknown(self, ctx, req):
        ctx.respond(StatusCode.METHOD_NOT_ALLOWED, "Unknown method")

    def before(self, ctx, req):
        return ControlFlow.CONTINUE

    def after(self, ret, ctx, req):
        pass
```

`Context.header(key, value)` converts the value with `str`; `body(...)` sets
the body; `respond_internal_error()` sends `500 Internal error`.

## Describing a session

`describe` takes `SdpLine` objects or tuples `(ty, fmt, *args)`; when
arguments are given, `fmt` is formatted with `%`. Each line ends in CRLF.

```python
from smolrtsp import sdp

body = sdp.describe([
    (sdp.VERSION, "0"),
    (sdp.SESSION_NAME, "Example"),
    (sdp.MEDIA, "video 0 RTP/AVP %d", 96),
    (sdp.ATTR, "rtpmap:%d H264/%d", 96, 90000),
])
```

## Streaming

`TcpTransport(writer, channel_id, max_buffer)` writes each packet as an
interleaved frame (`$`, channel, 16-bit length) under the writer's lock and
raises `TransportError` on a short write. `UdpTransport(sock, address)` sends
each packet as one datagram, trying up to 10 times on `EMSGSIZE`.
`dgram_socket(family, address, port)` returns a connected IPv4 or IPv6 UDP
socket, asking for path MTU discovery on IPv4.

`RtpTransport(transport, payload_ty, clock_rate)` picks a random SSRC,
numbers packets from 0 and advances the sequence number only after a
successful send. `NalTransport` sends a unit whole when header plus payload
is below the limit (1200 bytes by default), with the marker set for coded
slices; otherwise it splits the payload into fragmentation units and sets the
marker on the last one.

```python
from smolrtsp.h264 import H264NalHeader
from smolrtsp.nal import NalUnit
from smolrtsp.nal_transport import NalTransport, NalTransportConfig
from smolrtsp.rtp_transport import RawTimestamp, RtpTransport

rtp = RtpTransport(transport, 96, 90000)
nal = NalTransport(rtp, NalTransportConfig())
nal.send_packet(RawTimestamp(0), NalUnit(H264NalHeader.parse(0x65), payload))
```

`determine_start_code(data)` returns `test_start_code_3b` or
`test_start_code_4b` for data beginning with `00 00 01` or `00 00 00 01`, and
`None` otherwise.

## What it does not do

- It does not parse RTSP requests or responses; messages are only built and
  serialised. Turning received bytes into a `Request` is up to the caller.
- It has no server, event loop or command: accepting connections, reading
  requests and calling `dispatch` is left to the application.
- It ships no `Writer` implementation; the application supplies one around
  its connection.
- It does not parse `Transport` or `Session` header values.