"""Server messages for locating peers and brokering connections to them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from ipaddress import IPv4Address
from typing import ClassVar, Union

from soulseek.protocol.codes import ServerCode
from soulseek.protocol.wire import ProtocolError, Reader, Writer
from soulseek.server.status import ServerMessage


class ConnectionType(str, Enum):
    """Purpose of a peer connection."""

    PEER = "P"
    TRANSFER = "F"
    DISTRIBUTED = "D"


def _connection_type(raw: str) -> Union[ConnectionType, str]:
    try:
        return ConnectionType(raw)
    except ValueError:
        return raw


def _read_reversed_ip(reader: Reader) -> IPv4Address:
    return IPv4Address(bytes(reversed(reader.read_bytes(4))))


def _read_code(reader: Reader, what: str) -> int:
    try:
        return reader.read_uint32()
    except ProtocolError as exc:
        raise ProtocolError(f"decode {what}: {exc}") from exc


@dataclass
class ConnectToPeer:
    """Server instruction to connect to a peer."""

    code: ClassVar[ServerCode] = ServerCode.CONNECT_TO_PEER

    username: str
    type: Union[ConnectionType, str]
    ip_address: IPv4Address
    port: int
    token: int
    is_privileged: bool = False


@dataclass
class ConnectToPeerRequest(ServerMessage):
    """Asks the server to have a peer connect to us."""

    code: ClassVar[ServerCode] = ServerCode.CONNECT_TO_PEER

    token: int
    username: str
    type: Union[ConnectionType, str]

    def encode(self, writer: Writer) -> None:
        """Write the message to *writer*."""
        kind = self.type.value if isinstance(self.type, ConnectionType) else self.type
        writer.write_uint32(self.code)
        writer.write_uint32(self.token)
        writer.write_string(self.username)
        writer.write_string(kind)


def decode_connect_to_peer(reader: Reader) -> ConnectToPeer:
    """Read a ConnectToPeer message, code first, from *reader*."""
    code = _read_code(reader, "connect to peer")
    if code != ServerCode.CONNECT_TO_PEER:
        raise ProtocolError(f"unexpected code: {code}")
    try:
        username = reader.read_string()
        kind = _connection_type(reader.read_string())
        ip_address = _read_reversed_ip(reader)
        port = reader.read_uint32()
        token = reader.read_uint32()
        is_privileged = reader.read_uint8() > 0
    except ProtocolError as exc:
        raise ProtocolError(f"decode connect to peer: {exc}") from exc
    return ConnectToPeer(
        username=username,
        type=kind,
        ip_address=ip_address,
        port=port,
        token=token,
        is_privileged=is_privileged,
    )


@dataclass
class GetPeerAddress(ServerMessage):
    """Asks the server for a peer's address and port."""

    code: ClassVar[ServerCode] = ServerCode.GET_PEER_ADDRESS

    username: str = ""

    def encode(self, writer: Writer) -> None:
        """Write the message to *writer*."""
        writer.write_uint32(self.code)
        writer.write_string(self.username)


@dataclass
class GetPeerAddressResponse:
    """The server's answer with a peer's address and port."""

    code: ClassVar[ServerCode] = ServerCode.GET_PEER_ADDRESS

    username: str
    ip_address: IPv4Address
    port: int


def decode_get_peer_address(reader: Reader) -> GetPeerAddressResponse:
    """Read a GetPeerAddress response, code first, from *reader*."""
    code = _read_code(reader, "get peer address")
    if code != ServerCode.GET_PEER_ADDRESS:
        raise ProtocolError(
            f"unexpected code {code}, expected {int(ServerCode.GET_PEER_ADDRESS)}"
        )
    try:
        username = reader.read_string()
        ip_address = _read_reversed_ip(reader)
        port = reader.read_uint32()
    except ProtocolError as exc:
        raise ProtocolError(f"decode get peer address: {exc}") from exc
    return GetPeerAddressResponse(username=username, ip_address=ip_address, port=port)