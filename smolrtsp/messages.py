"""RTSP message building blocks: versions, headers, start lines, requests and responses."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Union

from smolrtsp.protocol import HEADER_C_SEQ, HEADER_CONTENT_LENGTH, MethodLike, StatusCode

HEADER_MAP_CAPACITY = 32
"""The maximum number of headers a :class:`HeaderMap` holds."""

_CRLF = b"\r\n"
_ENCODING = "utf-8"

MessageBody = Union[bytes, bytearray, memoryview, str]


def _body_bytes(body: MessageBody) -> bytes:
    return body.encode(_ENCODING) if isinstance(body, str) else bytes(body)


@dataclass(frozen=True, slots=True)
class RtspVersion:
    """An RTSP version such as ``RTSP/1.0``."""

    major: int = 1
    minor: int = 0

    def __post_init__(self) -> None:
        for name, value in (("major", self.major), ("minor", self.minor)):
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} version out of range: {value}")

    def __str__(self) -> str:
        return f"RTSP/{self.major}.{self.minor}"

    def serialize(self) -> bytes:
        """Return ``RTSP/<major>.<minor>``."""
        return str(self).encode(_ENCODING)


@dataclass(frozen=True, slots=True)
class Header:
    """A single RTSP header."""

    key: str
    value: str

    def serialize(self) -> bytes:
        """Return ``<key>: <value>`` followed by CRLF."""
        return f"{self.key}: {self.value}".encode(_ENCODING) + _CRLF


class HeaderMapFullError(OverflowError):
    """A header was added to a header map that is already full."""


class HeaderMap:
    """An ordered collection of at most :data:`HEADER_MAP_CAPACITY` headers."""

    def __init__(self, headers: Iterable[Header] = ()) -> None:
        self._headers: list[Header] = []
        for header in headers:
            self.append(header)

    def find(self, key: str) -> str | None:
        """Return the value of the first header named ``key``, or ``None``."""
        return next((h.value for h in self._headers if h.key == key), None)

    def contains_key(self, key: str) -> bool:
        """Return whether a header named ``key`` is present."""
        return any(h.key == key for h in self._headers)

    def append(self, header: Header) -> None:
        """Add ``header`` at the end; raises :class:`HeaderMapFullError` if full."""
        if self.is_full():
            raise HeaderMapFullError(
                f"header map already holds {HEADER_MAP_CAPACITY} headers"
            )
        self._headers.append(header)

    def is_full(self) -> bool:
        """Return whether no more headers can be added."""
        return len(self._headers) >= HEADER_MAP_CAPACITY

    def serialize(self) -> bytes:
        """Return all headers followed by the terminating empty line."""
        return b"".join(h.serialize() for h in self._headers) + _CRLF

    def __iter__(self) -> Iterator[Header]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeaderMap):
            return NotImplemented
        return self._headers == other._headers

    def __repr__(self) -> str:
        return f"HeaderMap({self._headers!r})"


@dataclass(frozen=True, slots=True)
class RequestLine:
    """The first line of an RTSP request."""

    method: MethodLike
    uri: str
    version: RtspVersion = field(default_factory=RtspVersion)

    def serialize(self) -> bytes:
        """Return ``<method> <uri> <version>`` followed by CRLF."""
        return f"{self.method} {self.uri} {self.version}".encode(_ENCODING) + _CRLF


@dataclass(frozen=True, slots=True)
class ResponseLine:
    """The first line of an RTSP response."""

    code: int
    reason: str
    version: RtspVersion = field(default_factory=RtspVersion)

    def __post_init__(self) -> None:
        if not 0 <= int(self.code) <= 0xFFFF:
            raise ValueError(f"status code out of range: {self.code}")

    def serialize(self) -> bytes:
        """Return ``<version> <code> <reason>`` followed by CRLF."""
        return f"{self.version} {int(self.code)} {self.reason}".encode(_ENCODING) + _CRLF


def _serialize_message(
    start_line: bytes, header_map: HeaderMap, body: bytes, cseq: int
) -> bytes:
    implicit = []
    if not header_map.contains_key(HEADER_C_SEQ):
        implicit.append(Header(HEADER_C_SEQ, str(cseq)))
    if body and not header_map.contains_key(HEADER_CONTENT_LENGTH):
        implicit.append(Header(HEADER_CONTENT_LENGTH, str(len(body))))
    return b"".join(
        (
            start_line,
            *(h.serialize() for h in implicit),
            header_map.serialize(),
            body,
        )
    )


def _check_cseq(cseq: int) -> None:
    if not 0 <= cseq <= 0xFFFFFFFF:
        raise ValueError(f"CSeq out of range: {cseq}")


@dataclass(slots=True)
class Request:
    """An RTSP request.

    ``CSeq`` and ``Content-Length`` are written from ``cseq`` and ``body``
    unless ``header_map`` already holds them.
    """

    start_line: RequestLine
    header_map: HeaderMap = field(default_factory=HeaderMap)
    body: MessageBody = b""
    cseq: int = 0

    def __post_init__(self) -> None:
        self.body = _body_bytes(self.body)
        _check_cseq(self.cseq)

    def serialize(self) -> bytes:
        """Return the wire representation of this request."""
        return _serialize_message(
            self.start_line.serialize(), self.header_map, _body_bytes(self.body), self.cseq
        )


@dataclass(slots=True)
class Response:
    """An RTSP response.

    ``CSeq`` and ``Content-Length`` are written from ``cseq`` and ``body``
    unless ``header_map`` already holds them.
    """

    start_line: ResponseLine
    header_map: HeaderMap = field(default_factory=HeaderMap)
    body: MessageBody = b""
    cseq: int = 0

    def __post_init__(self) -> None:
        self.body = _body_bytes(self.body)
        _check_cseq(self.cseq)

    def serialize(self) -> bytes:
        """Return the wire representation of this response."""
        return _serialize_message(
            self.start_line.serialize(), self.header_map, _body_bytes(self.body), self.cseq
        )


def ok_line() -> ResponseLine:
    """Return the ``RTSP/1.0 200 OK`` response line."""
    return ResponseLine(StatusCode.OK, "OK")