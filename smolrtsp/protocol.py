"""RTSP status codes, methods and header names."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Union


class StatusCode(IntEnum):
    """An RTSP status code."""

    CONTINUE = 100
    OK = 200
    CREATED = 201
    LOW_ON_STORAGE_SPACE = 250
    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    MOVED_TEMPORARILY = 302
    SEE_OTHER = 303
    NOT_MODIFIED = 304
    USE_PROXY = 305
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    PAYMENT_REQUIRED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    PROXY_AUTHENTICATION_REQUIRED = 407
    REQUEST_TIMEOUT = 408
    GONE = 410
    LENGTH_REQUIRED = 411
    PRECONDITION_FAILED = 412
    REQUEST_ENTITY_TOO_LARGE = 413
    REQUEST_URI_TOO_LARGE = 414
    UNSUPPORTED_MEDIA_TYPE = 415
    PARAMETER_NOT_UNDERSTOOD = 451
    CONFERENCE_NOT_FOUND = 452
    NOT_ENOUGH_BANDWIDTH = 453
    SESSION_NOT_FOUND = 454
    METHOD_NOT_VALID_IN_THIS_STATE = 455
    HEADER_FIELD_NOT_VALID_FOR_RESOURCE = 456
    INVALID_RANGE = 457
    PARAMETER_IS_READ_ONLY = 458
    AGGREGATE_OPERATION_NOT_ALLOWED = 459
    ONLY_AGGREGATE_OPERATION_ALLOWED = 460
    UNSUPPORTED_TRANSPORT = 461
    DESTINATION_UNREACHABLE = 462
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    RTSP_VERSION_NOT_SUPPORTED = 505
    OPTION_NOT_SUPPORTED = 551


class Method(str, Enum):
    """A well-known RTSP method."""

    OPTIONS = "OPTIONS"
    DESCRIBE = "DESCRIBE"
    ANNOUNCE = "ANNOUNCE"
    SETUP = "SETUP"
    PLAY = "PLAY"
    PAUSE = "PAUSE"
    TEARDOWN = "TEARDOWN"
    GET_PARAMETER = "GET_PARAMETER"
    SET_PARAMETER = "SET_PARAMETER"
    REDIRECT = "REDIRECT"
    RECORD = "RECORD"

    def __str__(self) -> str:
        return self.value


MethodLike = Union[Method, str]


def _method_text(method: MethodLike) -> str:
    return method.value if isinstance(method, Method) else method


def method_eq(lhs: MethodLike, rhs: MethodLike) -> bool:
    """Compare two methods exactly, octet by octet."""
    return _method_text(lhs) == _method_text(rhs)


HEADER_ACCEPT = "Accept"
HEADER_ACCEPT_ENCODING = "Accept-Encoding"
HEADER_ACCEPT_LANGUAGE = "Accept-Language"
HEADER_ALLOW = "Allow"
HEADER_AUTHORIZATION = "Authorization"
HEADER_BANDWIDTH = "Bandwidth"
HEADER_BLOCKSIZE = "Blocksize"
HEADER_CACHE_CONTROL = "Cache-Control"
HEADER_CONFERENCE = "Conference"
HEADER_CONNECTION = "Connection"
HEADER_CONTENT_BASE = "Content-Base"
HEADER_CONTENT_ENCODING = "Content-Encoding"
HEADER_CONTENT_LANGUAGE = "Content-Language"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_CONTENT_LOCATION = "Content-Location"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_C_SEQ = "CSeq"
HEADER_DATE = "Date"
HEADER_EXPIRES = "Expires"
HEADER_FROM = "From"
HEADER_IF_MODIFIED_SINCE = "If-Modified-Since"
HEADER_LAST_MODIFIED = "Last-Modified"
HEADER_PROXY_AUTHENTICATE = "Proxy-Authenticate"
HEADER_PROXY_REQUIRE = "Proxy-Require"
HEADER_PUBLIC = "Public"
HEADER_RANGE = "Range"
HEADER_REFERER = "Referrer"
HEADER_REQUIRE = "Require"
HEADER_RETRY_AFTER = "Retry-After"
HEADER_RTP_INFO = "RTP-Info"
HEADER_SCALE = "Scale"
HEADER_SESSION = "Session"
HEADER_SERVER = "Server"
HEADER_SPEED = "Speed"
HEADER_TRANSPORT = "Transport"
HEADER_UNSUPPORTED = "Unsupported"
HEADER_USER_AGENT = "User-Agent"
HEADER_VIA = "Via"
HEADER_WWW_AUTHENTICATE = "WWW-Authenticate"