"""Length-framed message I/O over a TCP connection."""

from __future__ import annotations

import socket
import struct
from typing import Optional, Tuple, Union

from soulseek.protocol.wire import ProtocolError

MAX_MESSAGE_SIZE = 100 * 1024 * 1024

_LENGTH = struct.Struct("<I")
_RECV_CHUNK = 64 * 1024

Address = Union[str, Tuple[str, int]]


def _parse_address(address: Address) -> Tuple[str, int]:
    if not isinstance(address, str):
        host, port = address
        return host, int(port)
    host, sep, port = address.rpartition(":")
    if not sep or not host or not port.isdigit():
        raise ValueError(f"invalid address {address!r}: expected host:port")
    return host.strip("[]"), int(port)


def dial(address: Address, timeout: Optional[float] = None) -> "Connection":
    """Open a TCP connection to *address* ("host:port" or a (host, port) pair).

    *timeout*, in seconds, applies to connecting and to later socket operations.
    """
    host, port = _parse_address(address)
    try:
        sock = socket.create_connection((host, port), timeout=timeout)
    except OSError as exc:
        raise ConnectionError(f"dial {address}: {exc}") from exc
    return Connection(sock)


class Connection:
    """A socket carrying messages framed as a 4-byte length and a payload."""

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock

    def _recv_exactly(self, size: int, what: str) -> bytes:
        received = bytearray()
        while len(received) < size:
            chunk = self._sock.recv(min(size - len(received), _RECV_CHUNK))
            if not chunk:
                raise ConnectionError(
                    f"read message {what}: connection closed after "
                    f"{len(received)} of {size} bytes"
                )
            received += chunk
        return bytes(received)

    def read_message(self) -> bytes:
        """Read the next framed message and return its payload."""
        (length,) = _LENGTH.unpack(self._recv_exactly(_LENGTH.size, "length"))
        if length > MAX_MESSAGE_SIZE:
            raise ProtocolError(
                f"message too large: {length} bytes (max {MAX_MESSAGE_SIZE})"
            )
        return self._recv_exactly(length, "payload")

    def write_message(self, payload: bytes) -> None:
        """Send *payload* preceded by its 4-byte length."""
        payload = bytes(payload)
        try:
            header = _LENGTH.pack(len(payload))
        except struct.error as exc:
            raise ProtocolError(f"message too large: {len(payload)} bytes") from exc
        self._sock.sendall(header + payload)

    def close(self) -> None:
        """Close the underlying socket."""
        self._sock.close()

    def set_timeout(self, timeout: Optional[float]) -> None:
        """Set the timeout in seconds for reads and writes; None blocks forever."""
        self._sock.settimeout(timeout)

    def local_address(self):
        """Return the local address of the socket."""
        return self._sock.getsockname()

    def remote_address(self):
        """Return the address of the remote end."""
        return self._sock.getpeername()

    def write(self, data: bytes) -> int:
        """Send raw bytes without framing and return how many were sent."""
        data = bytes(data)
        self._sock.sendall(data)
        return len(data)

    def read(self, size: int) -> bytes:
        """Receive up to *size* raw bytes without framing; b"" at end of stream."""
        return self._sock.recv(size)

    def __enter__(self) -> "Connection":
        return self

    def __exit__(self, *args) -> None:
        self.close()