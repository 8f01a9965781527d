"""Little-endian integers and length-prefixed strings of the wire format."""

from __future__ import annotations

import struct

MAX_STRING_LENGTH = 10 * 1024 * 1024

_UINT8 = struct.Struct("<B")
_UINT32 = struct.Struct("<I")
_UINT64 = struct.Struct("<Q")


class ProtocolError(ValueError):
    """Raised when protocol data is malformed or a value cannot be encoded."""


class Reader:
    """Decodes protocol values from a bytes payload.

    A read that fails raises ProtocolError and consumes nothing.
    """

    def __init__(self, data: bytes) -> None:
        self._data = memoryview(bytes(data))
        self._pos = 0

    @property
    def remaining(self) -> int:
        """Number of bytes not yet read."""
        return len(self._data) - self._pos

    def _take(self, size: int) -> bytes:
        if size > self.remaining:
            raise ProtocolError(
                f"unexpected end of data: need {size} bytes, {self.remaining} left"
            )
        chunk = bytes(self._data[self._pos : self._pos + size])
        self._pos += size
        return chunk

    def _unpack(self, fmt: struct.Struct) -> int:
        (value,) = fmt.unpack(self._take(fmt.size))
        return value

    def read_uint8(self) -> int:
        """Read a single byte."""
        return self._unpack(_UINT8)

    def read_uint32(self) -> int:
        """Read a little-endian 32-bit unsigned integer."""
        return self._unpack(_UINT32)

    def read_uint64(self) -> int:
        """Read a little-endian 64-bit unsigned integer."""
        return self._unpack(_UINT64)

    def read_string(self) -> str:
        """Read a string stored as a 4-byte length followed by UTF-8 bytes."""
        start = self._pos
        length = self.read_uint32()
        if length > MAX_STRING_LENGTH:
            self._pos = start
            raise ProtocolError(
                f"string length {length} exceeds maximum {MAX_STRING_LENGTH}"
            )
        try:
            raw = self._take(length)
        except ProtocolError:
            self._pos = start
            raise
        return raw.decode("utf-8", errors="replace")

    def read_bytes(self, n: int) -> bytes:
        """Read exactly *n* raw bytes."""
        if n < 0:
            raise ProtocolError(f"invalid byte count: {n}")
        return self._take(n)


class Writer:
    """Encodes protocol values into an in-memory payload."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def _pack(self, fmt: struct.Struct, value: int, kind: str) -> None:
        try:
            self._buffer += fmt.pack(value)
        except struct.error as exc:
            raise ProtocolError(f"{kind} value out of range: {value!r}") from exc

    def write_uint8(self, value: int) -> None:
        """Append a single byte."""
        self._pack(_UINT8, value, "uint8")

    def write_uint32(self, value: int) -> None:
        """Append a little-endian 32-bit unsigned integer."""
        self._pack(_UINT32, value, "uint32")

    def write_uint64(self, value: int) -> None:
        """Append a little-endian 64-bit unsigned integer."""
        self._pack(_UINT64, value, "uint64")

    def write_string(self, value: str) -> None:
        """Append a 4-byte length followed by the UTF-8 bytes of *value*."""
        encoded = value.encode("utf-8")
        self.write_uint32(len(encoded))
        self._buffer += encoded

    def write_bytes(self, data: bytes) -> None:
        """Append raw bytes without a length prefix."""
        self._buffer += bytes(data)

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        return bytes(self._buffer)