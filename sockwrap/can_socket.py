"""Raw SocketCAN sockets."""

from __future__ import annotations

import fcntl
import socket as _socket
import struct
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from .can_address import CanAddress
from .socket import Socket

__all__ = ["CanSocket"]

_AF_CAN = getattr(_socket, "AF_CAN", 29)
_CAN_RAW = getattr(_socket, "CAN_RAW", 1)
_SIOCGSTAMP = 0x8906
_TIMEVAL = struct.Struct("@ll")
# Size of a classic CAN frame: id, length, padding and eight data bytes.
_CAN_FRAME_SIZE = 16


class CanSocket(Socket):
    """A raw CAN socket bound to one interface."""

    def __init__(self, addr: CanAddress) -> None:
        if not addr:
            raise ValueError("CAN address names no interface")
        super().__init__(_socket.socket(_AF_CAN, _socket.SOCK_RAW, _CAN_RAW))
        try:
            self.bind(addr)
        except BaseException:
            self.close()
            raise

    def _last_stamp(self) -> Tuple[int, int]:
        raw = fcntl.ioctl(self._require().fileno(), _SIOCGSTAMP, bytes(_TIMEVAL.size))
        seconds, micros = _TIMEVAL.unpack(raw)
        return seconds, micros

    def last_frame_time(self) -> datetime:
        """Return when the last frame was received, as an aware UTC datetime."""
        seconds, micros = self._last_stamp()
        epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
        return epoch + timedelta(seconds=seconds, microseconds=micros)

    def last_frame_timestamp(self) -> float:
        """Return when the last frame was received, in seconds since the epoch."""
        seconds, micros = self._last_stamp()
        return float(seconds) + 1.0e-6 * micros

    def recv_from(self, flags: int = 0) -> Tuple[bytes, Optional[CanAddress]]:
        """Receive one frame and the address of the interface it came from."""
        frame, source = self._require().recvfrom(_CAN_FRAME_SIZE, flags)
        if isinstance(source, tuple) and source:
            name = source[0]
            return frame, CanAddress(name) if name else CanAddress(0)
        return frame, None