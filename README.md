# sockwrap

Small, object-oriented wrappers around BSD sockets. Each socket is held by an
object that owns its handle. The object closes the handle when it is replaced,
closed, or left at the end of a `with` block. Failing system calls raise
`OSError`.

## Installation

```
pip install sockwrap
```

The package needs only the standard library. It targets POSIX systems. The
CAN modules work only on Linux with SocketCAN.

## Modules

### `sockwrap.socket`

- `Socket`: the base class. It holds one `socket.socket`, or nothing.
  - `Socket.create(domain, type, protocol=0)` and
    `Socket.pair(domain=AF_UNIX, type=SOCK_STREAM, protocol=0)` open new
    sockets.
  - `clone()` returns a new object owning a duplicate handle.
  - `reset(sock=None)` takes ownership of `sock` and closes the socket held
    before.
  - `release()` gives up the socket without closing it.
  - `bind(addr)`, `address()`, `peer_address()`. `bind` accepts a plain
    address or an object with a `sockaddr` attribute, such as `UnixAddress`
    or `CanAddress`.
  - `get_option(level, optname, buflen=0)` and
    `set_option(level, optname, value)`.
  - `set_non_blocking(on=True)`, `shutdown(how=SHUT_RDWR)`, `close()`.
  - `fileno()` returns `INVALID_SOCKET` (-1) when nothing is open. A `Socket`
    is false when it holds no open socket.
  - Calling an I/O method on a socket that is not open raises `OSError` with
    `EBADF`. Calling `close()` on a socket that is not open does nothing.
- `to_timeval(duration)` splits a `timedelta` or a number of seconds into
  `(seconds, microseconds)`, truncating toward zero.
- `error_str(err)` returns the system's description of an error number.

### `sockwrap.stream_socket`

`StreamSocket(Socket)` handles connected byte streams:

- `StreamSocket.create(domain, protocol=0)` and
  `StreamSocket.pair(domain=AF_UNIX, protocol=0)`.
- `read(n)` makes a single receive. At end of stream it returns empty bytes.
- `read_n(n)` keeps reading until `n` bytes arrive or the stream ends.
  Interrupted calls are retried. An error is raised only when nothing has been
  read yet; otherwise the bytes received so far are returned.
- `write(data)` makes a single send. `write_n(data)` sends the whole buffer,
  under the same error rule as `read_n`. A `str` is encoded as UTF-8.
- `read_into(buffers)` scatters one receive across several writable buffers.
  `write_vectored(buffers)` gathers several buffers into one send. Both return
  the byte count, and `0` for an empty list.
- `read_timeout(timeout)` and `write_timeout(timeout)` set `SO_RCVTIMEO` and
  `SO_SNDTIMEO` from a `timedelta` or a number of seconds.

### `sockwrap.unix_address`

`UnixAddress(path)` represents a Unix-domain socket path. The path is cut to
108 characters. The object has `path`, `family` and `sockaddr`, and its text
form is `unix:<path>`.

`UnixAddress.from_sockaddr(family, path)` accepts `str` or `bytes`. It raises
`ValueError` for any family other than `AF_UNIX`.

### `sockwrap.can_address` (Linux)

`CanAddress(iface)` takes an interface index or an interface name.
- Index `0` means any interface.
- An unknown name gives an empty address, which is false.
- `iface` returns the interface name, or `"none"`, `"any"` or `"unknown"`.
- The text form is `can:<iface>`.
- `CanAddress.from_sockaddr(family, ifindex)` raises `ValueError` for any
  family other than `AF_CAN`.

### `sockwrap.can_socket` (Linux)

`CanSocket(addr)` opens a raw CAN socket and binds it to a `CanAddress`.
- `recv_from(flags=0)` returns one frame and its source address.
- `last_frame_time()` returns the receive time of the last frame as an aware
  UTC `datetime`.
- `last_frame_timestamp()` returns the same time in seconds since the epoch.

## Examples

A connected pair of Unix-domain stream sockets:

```python
import socket

from sockwrap.stream_socket import StreamSocket

sock1, sock2 = StreamSocket.pair(socket.AF_UNIX, 0)
with sock1, sock2:
    sock1.write_n(b"Hello there!")
    assert sock2.read_n(12) == b"Hello there!"
```

Scatter/gather I/O:

```python
sock1, sock2 = StreamSocket.pair()
with sock1, sock2:
    sock1.write_vectored([b"<start>", b"payload", b"<end>"])
    header, body, footer = bytearray(7), bytearray(7), bytearray(5)
    sock2.read_into([header, body, footer])
```

Unix-domain addresses:

```python
from sockwrap.unix_address import UnixAddress

addr = UnixAddress("/tmp/example.sock")
print(addr)  # unix:/tmp/example.sock
```

## What it does not do

The package has no connector or acceptor classes. To connect or listen, use
`socket.socket` directly, then hand the result to `Socket` or `StreamSocket`.

It also has no datagram socket class and no Internet address class. It has no
command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```