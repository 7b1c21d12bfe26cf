import socket

import pytest

from sockwrap.unix_address import UnixAddress


def test_path_and_str():
    addr = UnixAddress("/tmp/sock")
    assert addr.path == "/tmp/sock"
    assert str(addr) == "unix:/tmp/sock"


def test_family_is_unix():
    assert UnixAddress("/tmp/sock").family == socket.AF_UNIX


def test_long_path_is_truncated():
    addr = UnixAddress("a" * 200)
    assert len(addr.path) == UnixAddress.MAX_PATH_NAME
    assert addr.path == "a" * UnixAddress.MAX_PATH_NAME


def test_from_sockaddr_round_trip():
    addr = UnixAddress("/tmp/sock")
    assert UnixAddress.from_sockaddr(addr.family, addr.sockaddr) == addr


def test_from_sockaddr_decodes_bytes():
    assert UnixAddress.from_sockaddr(socket.AF_UNIX, b"/tmp/sock").path == "/tmp/sock"


def test_from_sockaddr_rejects_other_family():
    with pytest.raises(ValueError, match="Not a UNIX-domain address"):
        UnixAddress.from_sockaddr(socket.AF_INET, "/tmp/sock")


def test_equality_and_hash():
    assert UnixAddress("/tmp/a") == UnixAddress("/tmp/a")
    assert UnixAddress("/tmp/a") != UnixAddress("/tmp/b")
    assert len({UnixAddress("/tmp/a"), UnixAddress("/tmp/a")}) == 1