"""Ownership wrapper around an operating-system socket handle."""

from __future__ import annotations

import errno
import os
import socket as _socket
from datetime import timedelta
from typing import Any, Optional, Tuple, TypeVar, Union

__all__ = ["INVALID_SOCKET", "Socket", "error_str", "to_timeval"]

INVALID_SOCKET = -1

_MICROS_PER_SECOND = 1_000_000

_S = TypeVar("_S", bound="Socket")


def to_timeval(duration: Union[timedelta, float, int]) -> Tuple[int, int]:
    """Split a duration into whole seconds and microseconds, truncating toward zero.

    ``duration`` is a :class:`datetime.timedelta` or a number of seconds.
    """
    if isinstance(duration, timedelta):
        micros = (
            (duration.days * 86_400 + duration.seconds) * _MICROS_PER_SECOND
            + duration.microseconds
        )
    else:
        micros = int(round(duration * _MICROS_PER_SECOND))
    sign = -1 if micros < 0 else 1
    seconds, remainder = divmod(abs(micros), _MICROS_PER_SECOND)
    return sign * seconds, sign * remainder


def error_str(err: int) -> str:
    """Return the system's description of an error number."""
    return os.strerror(err)


def _native_address(addr: Any) -> Any:
    """Turn an address object into the form the socket module expects."""
    return getattr(addr, "sockaddr", addr)


class Socket:
    """Owns one socket and closes it when replaced, released or closed."""

    def __init__(self, sock: Optional[_socket.socket] = None) -> None:
        self._sock = sock

    @classmethod
    def _adopt(cls: type[_S], sock: _socket.socket) -> _S:
        obj = cls.__new__(cls)
        Socket.__init__(obj, sock)
        return obj

    def _require(self) -> _socket.socket:
        if not self:
            raise OSError(errno.EBADF, "socket is not open")
        assert self._sock is not None
        return self._sock

    @classmethod
    def create(cls: type[_S], domain: int, type: int, protocol: int = 0) -> _S:
        """Open a new socket of the given domain, type and protocol."""
        return cls._adopt(_socket.socket(domain, type, protocol))

    @classmethod
    def pair(
        cls: type[_S],
        domain: int = getattr(_socket, "AF_UNIX", 1),
        type: int = _socket.SOCK_STREAM,
        protocol: int = 0,
    ) -> Tuple[_S, _S]:
        """Create a pair of connected sockets."""
        first, second = _socket.socketpair(domain, type, protocol)
        return cls._adopt(first), cls._adopt(second)

    def clone(self: _S) -> _S:
        """Return a new object owning a duplicate of this socket's handle."""
        return type(self)._adopt(self._require().dup())

    def reset(self, sock: Optional[_socket.socket] = None) -> None:
        """Take ownership of ``sock``, closing any socket held before."""
        old, self._sock = self._sock, sock
        if old is not None:
            old.close()

    def release(self) -> Optional[_socket.socket]:
        """Give up ownership of the socket without closing it."""
        sock, self._sock = self._sock, None
        return sock

    def bind(self, addr: Any) -> None:
        """Bind the socket to a local address."""
        self._require().bind(_native_address(addr))

    def address(self) -> Any:
        """Return the local address the socket is bound to."""
        return self._require().getsockname()

    def peer_address(self) -> Any:
        """Return the address of the connected peer."""
        return self._require().getpeername()

    def get_option(self, level: int, optname: int, buflen: int = 0) -> Union[int, bytes]:
        """Read a socket option: an integer, or raw bytes when ``buflen`` is given."""
        sock = self._require()
        if buflen:
            return sock.getsockopt(level, optname, buflen)
        return sock.getsockopt(level, optname)

    def set_option(self, level: int, optname: int, value: Union[int, bytes]) -> None:
        """Set a socket option from an integer or raw bytes."""
        self._require().setsockopt(level, optname, value)

    def set_non_blocking(self, on: bool = True) -> None:
        """Switch the socket between non-blocking and blocking mode."""
        self._require().setblocking(not on)

    def shutdown(self, how: int = _socket.SHUT_RDWR) -> None:
        """Shut down one or both directions of the connection."""
        self._require().shutdown(how)

    def close(self) -> None:
        """Close the socket; closing a socket that is not open does nothing."""
        sock = self.release()
        if sock is not None:
            sock.close()

    def fileno(self) -> int:
        """Return the OS handle, or ``INVALID_SOCKET`` when not open."""
        if self._sock is None:
            return INVALID_SOCKET
        return self._sock.fileno()

    def __bool__(self) -> bool:
        return self.fileno() != INVALID_SOCKET

    def __enter__(self: _S) -> _S:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fileno={self.fileno()})"