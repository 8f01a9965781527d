"""Handshake messages sent first on a new peer connection."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from soulseek.protocol.codes import InitCode
from soulseek.protocol.wire import ProtocolError, Reader, Writer


@contextmanager
def _decoding(what: str) -> Iterator[None]:
    """Prefix any protocol error raised inside the block with *what*."""
    try:
        yield
    except ProtocolError as exc:
        raise ProtocolError(f"decode {what}: {exc}") from exc


def _after_code(data: bytes, expected: InitCode) -> Reader:
    code = data[0]
    if code != expected:
        raise ProtocolError(f"unexpected init code: {code} (expected {int(expected)})")
    return Reader(data[1:])


@dataclass
class PeerInit:
    """Identifies us and the connection type ("P", "F" or "D") to a peer."""

    username: str
    type: str
    token: int

    def encode(self, writer: Writer) -> None:
        """Write the init code, username, type and token."""
        writer.write_uint8(InitCode.PEER_INIT)
        writer.write_string(self.username)
        writer.write_string(self.type)
        writer.write_uint32(self.token)


def decode_peer_init(data: bytes) -> PeerInit:
    """Parse a PeerInit message given without its length prefix."""
    if not data:
        raise ProtocolError("empty init message")
    reader = _after_code(data, InitCode.PEER_INIT)
    with _decoding("init"):
        return PeerInit(
            username=reader.read_string(),
            type=reader.read_string(),
            token=reader.read_uint32(),
        )


@dataclass
class PierceFirewall:
    """Sent when connecting to a peer on the server's ConnectToPeer instruction."""

    token: int

    def encode(self, writer: Writer) -> None:
        """Write the pierce-firewall code and token."""
        writer.write_uint8(InitCode.PIERCE_FIREWALL)
        writer.write_uint32(self.token)


def decode_pierce_firewall(data: bytes) -> PierceFirewall:
    """Parse a PierceFirewall message given without its length prefix."""
    if len(data) < 5:
        raise ProtocolError(
            f"pierce firewall message too short: {len(data)} bytes (expected 5)"
        )
    reader = _after_code(data, InitCode.PIERCE_FIREWALL)
    with _decoding("pierce firewall"):
        return PierceFirewall(token=reader.read_uint32())