"""Per-request context used to build and send an RTSP response."""

from __future__ import annotations

from smolrtsp.messages import (
    Header,
    HeaderMap,
    MessageBody,
    Response,
    ResponseLine,
    RtspVersion,
)
from smolrtsp.protocol import StatusCode
from smolrtsp.transport import Writer


class Context:
    """Collects response headers and a body, then writes the response."""

    def __init__(self, writer: Writer, cseq: int) -> None:
        if not 0 <= cseq <= 0xFFFFFFFF:
            raise ValueError(f"CSeq out of range: {cseq}")
        self._writer = writer
        self._cseq = cseq
        self._header_map = HeaderMap()
        self._body: MessageBody = b""
        self._ret = 0

    @property
    def writer(self) -> Writer:
        """The connection the response is written to."""
        return self._writer

    @property
    def cseq(self) -> int:
        """The sequence number of the request being answered."""
        return self._cseq

    @property
    def ret(self) -> int:
        """The number of bytes written by the last response, or 0."""
        return self._ret

    def header(self, key: str, value: object) -> None:
        """Add a response header; the value is converted with ``str``."""
        self._header_map.append(Header(key, str(value)))

    def body(self, body: MessageBody) -> None:
        """Set the response body."""
        self._body = body

    def respond(self, code: int, reason: str) -> int:
        """Write an ``RTSP/1.0`` response and return the number of bytes written."""
        response = Response(
            start_line=ResponseLine(code, reason, RtspVersion(1, 0)),
            header_map=self._header_map,
            body=self._body,
            cseq=self._cseq,
        )
        self._ret = self._writer.write(response.serialize())
        return self._ret

    def respond_ok(self) -> int:
        """Respond with ``200 OK``."""
        return self.respond(StatusCode.OK, "OK")

    def respond_internal_error(self) -> int:
        """Respond with ``500 Internal error``."""
        return self.respond(StatusCode.INTERNAL_SERVER_ERROR, "Internal error")