"""Transports carrying RTP packets: interleaved over RTSP/TCP, or UDP."""

from __future__ import annotations

import errno
import socket
import struct
import sys
from collections.abc import Iterable
from types import TracebackType
from typing import Protocol, Union

from smolrtsp.io_vec import iovec_len

Buffer = Union[bytes, bytearray, memoryview]

MAX_RETRANSMITS = 10
"""How many times a UDP datagram is sent again after ``EMSGSIZE``."""

INTERLEAVED_MAGIC = 0x24
"""The ``$`` octet that starts an interleaved binary frame (RFC 2326, 10.12)."""

_INTERLEAVED_HEADER = struct.Struct("!BBH")
_MAX_FRAME_LEN = 0xFFFF

_LINUX_IP_MTU_DISCOVER = 10
_LINUX_IP_PMTUDISC_WANT = 1


class TransportError(OSError):
    """A packet could not be transmitted."""


class Writer(Protocol):
    """The connection an RTSP session writes to."""

    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes written."""

    def lock(self) -> None:
        """Acquire exclusive access to the connection."""

    def unlock(self) -> None:
        """Release exclusive access to the connection."""

    def filled(self) -> int:
        """Return the number of bytes buffered and not yet sent."""


class Transport(Protocol):
    """Something that carries packets made of several buffers."""

    def transmit(self, bufs: Iterable[Buffer]) -> None:
        """Send the concatenation of ``bufs`` as one packet."""

    def is_full(self) -> bool:
        """Return whether the transport cannot take more data right now."""

    def close(self) -> None:
        """Release the transport."""


class _ClosableTransport:
    _closed: bool

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("transport is closed")

    def __enter__(self):
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class TcpTransport(_ClosableTransport):
    """Sends packets interleaved in an RTSP connection on a given channel."""

    def __init__(self, writer: Writer, channel_id: int, max_buffer: int = 0) -> None:
        if not 0 <= channel_id <= 0xFF:
            raise ValueError(f"channel id out of range: {channel_id}")
        if max_buffer < 0:
            raise ValueError(f"negative buffer limit: {max_buffer}")
        self._writer = writer
        self.channel_id = channel_id
        self.max_buffer = max_buffer
        self._closed = False

    def transmit(self, bufs: Iterable[Buffer]) -> None:
        """Write an interleaved frame holding the concatenation of ``bufs``."""
        self._check_open()
        chunks = [bytes(buf) for buf in bufs]
        total = iovec_len(chunks)
        if total > _MAX_FRAME_LEN:
            raise ValueError(f"interleaved frame too long: {total} bytes")
        header = _INTERLEAVED_HEADER.pack(INTERLEAVED_MAGIC, self.channel_id, total)

        self._writer.lock()
        try:
            for chunk in (header, *chunks):
                if self._writer.write(chunk) != len(chunk):
                    raise TransportError(
                        errno.EIO, "short write to the RTSP connection"
                    )
        finally:
            self._writer.unlock()

    def is_full(self) -> bool:
        """Return whether the writer holds more than ``max_buffer`` bytes."""
        return self._writer.filled() > self.max_buffer

    def close(self) -> None:
        self._closed = True


class UdpTransport(_ClosableTransport):
    """Sends each packet as one UDP datagram.

    If ``address`` is omitted, ``sock`` must already be connected.
    """

    def __init__(self, sock: socket.socket, address: tuple | None = None) -> None:
        self._sock = sock
        self._address = address
        self._closed = False

    def transmit(self, bufs: Iterable[Buffer]) -> None:
        """Send ``bufs`` as one datagram, retrying a few times on ``EMSGSIZE``."""
        self._check_open()
        buffers = [memoryview(buf) for buf in bufs]
        last_error: OSError | None = None
        for _ in range(MAX_RETRANSMITS):
            try:
                if self._address is None:
                    self._sock.sendmsg(buffers)
                else:
                    self._sock.sendmsg(buffers, [], 0, self._address)
                return
            except OSError as exc:
                if exc.errno != errno.EMSGSIZE:
                    raise
                last_error = exc
        raise TransportError(
            errno.EMSGSIZE, f"datagram still too large after {MAX_RETRANSMITS} tries"
        ) from last_error

    def is_full(self) -> bool:
        return False

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._sock.close()


def _enable_pmtu_discovery(sock: socket.socket) -> None:
    option = getattr(socket, "IP_MTU_DISCOVER", None)
    if option is None:
        if not sys.platform.startswith("linux"):
            return
        option = _LINUX_IP_MTU_DISCOVER
    want = getattr(socket, "IP_PMTUDISC_WANT", _LINUX_IP_PMTUDISC_WANT)
    sock.setsockopt(socket.IPPROTO_IP, option, want)


def dgram_socket(family: int, address: str, port: int) -> socket.socket:
    """Return a UDP socket connected to ``address``:``port``.

    Path MTU discovery is requested so that the kernel may fragment large
    datagrams.
    """
    if family not in (socket.AF_INET, socket.AF_INET6):
        raise OSError(errno.EAFNOSUPPORT, f"unsupported address family: {family}")
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"port out of range: {port}")

    sock = socket.socket(family, socket.SOCK_DGRAM)
    try:
        sock.connect((address, port))
        if family == socket.AF_INET:
            _enable_pmtu_discovery(sock)
    except OSError:
        sock.close()
        raise
    return sock