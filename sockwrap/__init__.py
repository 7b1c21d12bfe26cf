"""Object-oriented socket wrappers: owned sockets, stream sockets, Unix-domain and SocketCAN addresses and raw CAN sockets."""

__version__ = "0.1.0"