"""SDP lines as described by RFC 4566."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Union

VERSION = "v"
"""Protocol Version (``v=``)."""
ORIGIN = "o"
"""Origin (``o=``)."""
SESSION_NAME = "s"
"""Session Name (``s=``)."""
INFO = "i"
"""Session Information (``i=``)."""
URI = "u"
"""URI (``u=``)."""
EMAIL = "e"
"""Email Address (``e=``)."""
PHONE = "p"
"""Phone Number (``p=``)."""
CONNECTION = "c"
"""Connection Data (``c=``)."""
BANDWIDTH = "b"
"""Bandwidth (``b=``)."""
TIME = "t"
"""Timing (``t=``)."""
REPEAT = "r"
"""Repeat Times (``r=``)."""
TIME_ZONES = "z"
"""Time Zones (``z=``)."""
ENCRYPTION_KEYS = "k"
"""Encryption Keys (``k=``)."""
ATTR = "a"
"""Attributes (``a=``)."""
MEDIA = "m"
"""Media Descriptions (``m=``)."""

_ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class SdpLine:
    """A single SDP line: a one-character type and its value."""

    ty: str
    value: str

    def __post_init__(self) -> None:
        if len(self.ty) != 1:
            raise ValueError(f"an SDP type is one character: {self.ty!r}")

    def serialize(self) -> bytes:
        """Return ``<ty>=<value>`` followed by CRLF."""
        return f"{self.ty}={self.value}\r\n".encode(_ENCODING)


LineSpec = Union[SdpLine, tuple[Any, ...]]


def _to_line(spec: LineSpec) -> SdpLine:
    if isinstance(spec, SdpLine):
        return spec
    if len(spec) < 2:
        raise ValueError(f"an SDP line needs a type and a value: {spec!r}")
    ty, fmt, *args = spec
    return SdpLine(ty, fmt % tuple(args) if args else fmt)


def describe(lines: Iterable[LineSpec]) -> bytes:
    """Serialize a non-empty sequence of SDP lines.

    Each item is an :class:`SdpLine` or a tuple ``(ty, fmt, *args)``; when
    arguments are given, ``fmt`` is formatted with the ``%`` operator.
    """
    parsed = [_to_line(spec) for spec in lines]
    if not parsed:
        raise ValueError("an SDP description needs at least one line")
    return b"".join(line.serialize() for line in parsed)