"""Login and keep-alive messages exchanged with the server."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from ipaddress import IPv4Address
from typing import ClassVar, Optional

from soulseek.protocol.codes import ServerCode
from soulseek.protocol.wire import ProtocolError, Reader, Writer
from soulseek.server.status import ServerMessage


def _md5_hex(text: str) -> str:
    return hashlib.md5(text.encode("utf-8")).hexdigest()


@dataclass
class LoginRequest(ServerMessage):
    """Authenticates with the server."""

    code: ClassVar[ServerCode] = ServerCode.LOGIN

    username: str
    password: str
    version: int = 170
    minor_version: int = 100

    def encode(self, writer: Writer) -> None:
        """Write the message, with the MD5 of username and password, to *writer*."""
        digest = _md5_hex(self.username + self.password)
        writer.write_uint32(self.code)
        writer.write_string(self.username)
        writer.write_string(self.password)
        writer.write_uint32(self.version)
        writer.write_string(digest)
        writer.write_uint32(self.minor_version)


@dataclass
class LoginResponse:
    """The server's reply to a login request.

    On failure only *message* (the reason) is set.
    """

    code: ClassVar[ServerCode] = ServerCode.LOGIN

    succeeded: bool
    message: str
    ip_address: Optional[IPv4Address] = None
    hash: str = ""
    is_supporter: bool = False


def _read_code(reader: Reader, what: str) -> int:
    try:
        return reader.read_uint32()
    except ProtocolError as exc:
        raise ProtocolError(f"decode {what}: {exc}") from exc


def decode_login_response(reader: Reader) -> LoginResponse:
    """Read a login response, code first, from *reader*."""
    code = _read_code(reader, "login response")
    if code != ServerCode.LOGIN:
        raise ProtocolError(f"unexpected code {code}, want {int(ServerCode.LOGIN)}")
    try:
        succeeded = reader.read_uint8() == 1
        message = reader.read_string()
        if not succeeded:
            return LoginResponse(succeeded=False, message=message)
        ip_address = IPv4Address(bytes(reversed(reader.read_bytes(4))))
        digest = reader.read_string()
        is_supporter = reader.read_uint8() == 1
    except ProtocolError as exc:
        raise ProtocolError(f"decode login response: {exc}") from exc
    return LoginResponse(
        succeeded=True,
        message=message,
        ip_address=ip_address,
        hash=digest,
        is_supporter=is_supporter,
    )


@dataclass
class Ping(ServerMessage):
    """Keep-alive message; the server echoes it back."""

    code: ClassVar[ServerCode] = ServerCode.PING

    def encode(self, writer: Writer) -> None:
        """Write the message to *writer*."""
        writer.write_uint32(self.code)


def decode_ping(reader: Reader) -> None:
    """Check that *reader* holds a ping; raise ProtocolError otherwise."""
    code = _read_code(reader, "ping")
    if code != ServerCode.PING:
        raise ProtocolError(f"unexpected code {code}, want {int(ServerCode.PING)}")