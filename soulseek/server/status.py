"""Server messages that report searches, ports, presence and share counts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from soulseek.protocol.codes import ServerCode
from soulseek.protocol.wire import Writer


class ServerMessage:
    """A message exchanged with the server, identified by its code."""

    code: ClassVar[ServerCode]

    def encode(self, writer: Writer) -> None:
        """Write the message code to *writer*; subclasses add their fields."""
        writer.write_uint32(self.code)


@dataclass
class FileSearch(ServerMessage):
    """Sends a search query; results come back from peers under *token*."""

    code: ClassVar[ServerCode] = ServerCode.FILE_SEARCH

    token: int
    query: str

    def encode(self, writer: Writer) -> None:
        """Write the code, the token and the query."""
        super().encode(writer)
        writer.write_uint32(self.token)
        writer.write_string(self.query)


@dataclass
class SetListenPort(ServerMessage):
    """Reports the port we listen on for incoming peer connections."""

    code: ClassVar[ServerCode] = ServerCode.SET_LISTEN_PORT

    port: int

    def encode(self, writer: Writer) -> None:
        """Write the code and the port."""
        super().encode(writer)
        writer.write_uint32(self.port)


class UserPresence(IntEnum):
    """Online status of a user."""

    OFFLINE = 0
    AWAY = 1
    ONLINE = 2

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass
class SetOnlineStatus(ServerMessage):
    """Sets our presence status."""

    code: ClassVar[ServerCode] = ServerCode.SET_ONLINE_STATUS

    status: UserPresence

    def encode(self, writer: Writer) -> None:
        """Write the code and the status."""
        super().encode(writer)
        writer.write_uint32(self.status)


@dataclass
class SharedFoldersAndFiles(ServerMessage):
    """Reports how many directories and files we share."""

    code: ClassVar[ServerCode] = ServerCode.SHARED_FOLDERS_AND_FILES

    directories: int
    files: int

    def encode(self, writer: Writer) -> None:
        """Write the code, the directory count and the file count."""
        super().encode(writer)
        writer.write_uint32(self.directories)
        writer.write_uint32(self.files)