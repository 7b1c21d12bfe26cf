"""SocketCAN interface addresses."""

from __future__ import annotations

import socket as _socket
from typing import Tuple, Union

__all__ = ["CanAddress"]

_AF_UNSPEC = getattr(_socket, "AF_UNSPEC", 0)


class CanAddress:
    """A CAN interface, named by index or by interface name."""

    ADDRESS_FAMILY = getattr(_socket, "AF_CAN", 29)

    __slots__ = ("_family", "_ifindex")

    def __init__(self, iface: Union[int, str]) -> None:
        if isinstance(iface, int):
            self._family = self.ADDRESS_FAMILY
            self._ifindex = iface
            return
        try:
            index = _socket.if_nametoindex(iface)
        except OSError:
            index = 0
        if index:
            self._family = self.ADDRESS_FAMILY
            self._ifindex = index
        else:
            self._family = _AF_UNSPEC
            self._ifindex = 0

    @classmethod
    def from_sockaddr(cls, family: int, ifindex: int) -> "CanAddress":
        """Build an address from a family and an interface index."""
        if family != cls.ADDRESS_FAMILY:
            raise ValueError("Not a SocketCAN address")
        return cls(ifindex)

    @property
    def family(self) -> int:
        return self._family

    @property
    def ifindex(self) -> int:
        return self._ifindex

    @property
    def iface(self) -> str:
        """The interface name, or "none", "any" or "unknown"."""
        if self._family == _AF_UNSPEC:
            return "none"
        if self._ifindex == 0:
            return "any"
        try:
            return _socket.if_indextoname(self._ifindex)
        except (OSError, OverflowError, ValueError):
            return "unknown"

    @property
    def sockaddr(self) -> Tuple[str]:
        """The address in the form the socket module takes."""
        if self._family == _AF_UNSPEC:
            raise ValueError("CAN address names no interface")
        if self._ifindex == 0:
            return ("",)
        return (self.iface,)

    def __bool__(self) -> bool:
        return self._family != _AF_UNSPEC

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CanAddress):
            return NotImplemented
        return (self._family, self._ifindex) == (other._family, other._ifindex)

    def __hash__(self) -> int:
        return hash((self._family, self._ifindex))

    def __str__(self) -> str:
        return f"can:{self.iface}"

    def __repr__(self) -> str:
        return f"CanAddress(family={self._family}, ifindex={self._ifindex})"