import errno
import socket
import struct

import pytest

from sockwrap.socket import INVALID_SOCKET, to_timeval
from sockwrap.stream_socket import StreamSocket

STR = b"This is a test. This is only a test."
N = len(STR)


@pytest.fixture
def connected():
    server = socket.create_server(("127.0.0.1", 0))
    port = server.getsockname()[1]
    client = socket.create_connection(("127.0.0.1", port))
    accepted, _ = server.accept()
    server.close()
    csock = StreamSocket(client)
    ssock = StreamSocket(accepted)
    yield csock, ssock
    csock.close()
    ssock.close()


def test_default_constructor_is_not_open():
    sock = StreamSocket()
    assert not sock
    assert sock.fileno() == INVALID_SOCKET


def test_valid_handle_constructor():
    raw = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    with StreamSocket(raw) as sock:
        assert sock
        assert sock.fileno() == raw.fileno()


def test_invalid_handle_constructor():
    sock = StreamSocket(None)
    assert not sock
    assert sock.fileno() == INVALID_SOCKET


def test_create_gives_stream_socket():
    with StreamSocket.create(socket.AF_INET) as sock:
        assert sock
        assert sock.get_option(socket.SOL_SOCKET, socket.SO_TYPE) == socket.SOCK_STREAM


def test_read_n_write_n(connected):
    csock, ssock = connected
    assert csock.write_n(STR) == N
    assert ssock.read_n(N) == STR

    assert csock.write_n(STR) == N
    assert ssock.read_n(N) == STR


def test_scatter_gather(connected):
    csock, ssock = connected
    header, footer = b"<start>", b"<end>"
    total = len(header) + N + len(footer)
    outv = [header, STR, footer]

    assert csock.write_vectored(outv) == total
    assert csock.write_vectored(outv) == total
    assert csock.write_vectored(outv) == total

    hbuf, buf, fbuf = bytearray(len(header)), bytearray(N), bytearray(len(footer))
    assert ssock.read_into([hbuf, buf, fbuf]) == total
    assert bytes(hbuf) == header
    assert bytes(buf) == STR
    assert bytes(fbuf) == footer


def test_unix_stream_socket_pair():
    sock1, sock2 = StreamSocket.pair()
    with sock1, sock2:
        assert sock1
        assert sock2
        msg = b"Hello there!"
        assert sock1.write_n(msg) == len(msg)
        assert sock2.read_n(len(msg)) == msg


def test_write_accepts_text():
    sock1, sock2 = StreamSocket.pair()
    with sock1, sock2:
        assert sock1.write_n("Hello there!") == len("Hello there!")
        assert sock2.read_n(12) == b"Hello there!"


def test_read_n_returns_partial_data_at_end_of_stream():
    sock1, sock2 = StreamSocket.pair()
    with sock1, sock2:
        sock1.write_n(b"abcde")
        sock1.shutdown(socket.SHUT_WR)
        assert sock2.read_n(10) == b"abcde"
        assert sock2.read(10) == b""


def test_empty_vectors_transfer_nothing():
    sock1, sock2 = StreamSocket.pair()
    with sock1, sock2:
        assert sock1.write_vectored([]) == 0
        assert sock2.read_into([]) == 0


def test_read_on_closed_socket_raises():
    sock = StreamSocket()
    with pytest.raises(OSError) as info:
        sock.read_n(4)
    assert info.value.errno == errno.EBADF


def test_read_timeout_sets_option():
    sock1, sock2 = StreamSocket.pair()
    with sock1, sock2:
        sock1.read_timeout(1.5)
        raw = sock1.get_option(socket.SOL_SOCKET, socket.SO_RCVTIMEO, struct.calcsize("@ll"))
        assert struct.unpack("@ll", raw) == to_timeval(1.5)


def test_write_timeout_sets_option():
    sock1, sock2 = StreamSocket.pair()
    with sock1, sock2:
        sock1.write_timeout(2)
        raw = sock1.get_option(socket.SOL_SOCKET, socket.SO_SNDTIMEO, struct.calcsize("@ll"))
        assert struct.unpack("@ll", raw) == to_timeval(2)


def test_read_n_times_out_with_nothing_read():
    sock1, sock2 = StreamSocket.pair()
    with sock1, sock2:
        sock2.read_timeout(0.05)
        with pytest.raises(BlockingIOError):
            sock2.read_n(4)