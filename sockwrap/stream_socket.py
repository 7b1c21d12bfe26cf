"""Connected, byte-stream sockets such as TCP or UNIX-domain stream sockets."""

from __future__ import annotations

import socket as _socket
import struct
import sys
from datetime import timedelta
from typing import Iterable, Tuple, Union

from .socket import Socket, to_timeval

__all__ = ["StreamSocket"]

_Buffer = Union[bytes, bytearray, memoryview, str]
_Duration = Union[timedelta, float, int]


def _as_bytes(data: _Buffer) -> memoryview:
    if isinstance(data, str):
        data = data.encode()
    return memoryview(data).cast("B")


def _timeout_value(timeout: _Duration) -> bytes:
    """Encode a duration the way SO_RCVTIMEO and SO_SNDTIMEO expect it."""
    seconds, micros = to_timeval(timeout)
    if sys.platform == "win32":
        return struct.pack("I", max(0, seconds * 1000 + micros // 1000))
    return struct.pack("@ll", seconds, micros)


class StreamSocket(Socket):
    """A socket that moves an ordered stream of bytes."""

    COMM_TYPE = _socket.SOCK_STREAM

    @classmethod
    def create(cls, domain: int, protocol: int = 0) -> "StreamSocket":  # type: ignore[override]
        """Open a new stream socket in the given domain."""
        return cls._adopt(_socket.socket(domain, cls.COMM_TYPE, protocol))

    @classmethod
    def pair(  # type: ignore[override]
        cls,
        domain: int = getattr(_socket, "AF_UNIX", 1),
        protocol: int = 0,
    ) -> Tuple["StreamSocket", "StreamSocket"]:
        """Create a pair of connected stream sockets."""
        first, second = _socket.socketpair(domain, cls.COMM_TYPE, protocol)
        return cls._adopt(first), cls._adopt(second)

    def read(self, n: int) -> bytes:
        """Read up to ``n`` bytes with a single receive; empty at end of stream."""
        return self._require().recv(n)

    def read_n(self, n: int) -> bytes:
        """Read until ``n`` bytes have arrived, the stream ends or an error occurs.

        An error raises only when nothing has been read yet; otherwise the
        bytes received so far are returned.
        """
        received = bytearray()
        while len(received) < n:
            try:
                chunk = self.read(n - len(received))
            except InterruptedError:
                continue
            except OSError:
                if not received:
                    raise
                break
            if not chunk:
                break
            received += chunk
        return bytes(received)

    def read_into(self, buffers: Iterable[Union[bytearray, memoryview]]) -> int:
        """Scatter one receive across several writable buffers; return the count."""
        targets = list(buffers)
        if not targets:
            return 0
        nbytes, _ancdata, _flags, _addr = self._require().recvmsg_into(targets)
        return nbytes

    def write(self, data: _Buffer) -> int:
        """Send with a single call; return the number of bytes accepted."""
        return self._require().send(_as_bytes(data))

    def write_n(self, data: _Buffer) -> int:
        """Send the whole buffer, calling ``write`` until done or an error occurs.

        An error raises only when nothing has been written yet; otherwise the
        number of bytes written so far is returned.
        """
        view = _as_bytes(data)
        written = 0
        while written < len(view):
            try:
                count = self.write(view[written:])
            except InterruptedError:
                continue
            except OSError:
                if not written:
                    raise
                break
            if count <= 0:
                break
            written += count
        return written

    def write_vectored(self, buffers: Iterable[_Buffer]) -> int:
        """Gather several buffers into one send; return the number of bytes sent."""
        sources = [_as_bytes(buf) for buf in buffers]
        if not sources:
            return 0
        return self._require().sendmsg(sources)

    def read_timeout(self, timeout: _Duration) -> None:
        """Set how long a read may block; zero means forever."""
        self.set_option(_socket.SOL_SOCKET, _socket.SO_RCVTIMEO, _timeout_value(timeout))

    def write_timeout(self, timeout: _Duration) -> None:
        """Set how long a write may block; zero means forever."""
        self.set_option(_socket.SOL_SOCKET, _socket.SO_SNDTIMEO, _timeout_value(timeout))