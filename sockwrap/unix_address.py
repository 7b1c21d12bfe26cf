"""UNIX-domain socket addresses."""

from __future__ import annotations

import os
import socket as _socket
from typing import Union

__all__ = ["UnixAddress"]


class UnixAddress:
    """A filesystem path naming a UNIX-domain socket."""

    ADDRESS_FAMILY = getattr(_socket, "AF_UNIX", 1)
    # Size of sun_path in sockaddr_un.
    MAX_PATH_NAME = 108

    __slots__ = ("_path",)

    def __init__(self, path: str) -> None:
        self._path = path[: self.MAX_PATH_NAME]

    @classmethod
    def from_sockaddr(cls, family: int, path: Union[str, bytes]) -> "UnixAddress":
        """Build an address from a family and a path as returned by the OS."""
        if family != cls.ADDRESS_FAMILY:
            raise ValueError("Not a UNIX-domain address")
        if isinstance(path, bytes):
            path = os.fsdecode(path)
        return cls(path)

    @property
    def family(self) -> int:
        return self.ADDRESS_FAMILY

    @property
    def path(self) -> str:
        return self._path

    @property
    def sockaddr(self) -> str:
        """The address in the form the socket module takes."""
        return self._path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnixAddress):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash((self.ADDRESS_FAMILY, self._path))

    def __str__(self) -> str:
        return f"unix:{self._path}"

    def __repr__(self) -> str:
        return f"UnixAddress({self._path!r})"