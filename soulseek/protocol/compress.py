"""Zlib compression used by compressed peer messages."""

from __future__ import annotations

import zlib

from soulseek.protocol.wire import ProtocolError


def compress(data: bytes) -> bytes:
    """Return *data* compressed as a zlib stream."""
    return zlib.compress(bytes(data))


def decompress(data: bytes) -> bytes:
    """Return the contents of the zlib stream *data*.

    Raises ProtocolError when the stream is invalid or truncated.
    """
    try:
        return zlib.decompress(bytes(data))
    except zlib.error as exc:
        raise ProtocolError(f"decompress: {exc}") from exc