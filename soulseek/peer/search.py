"""Search results sent by a peer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from soulseek.peer.file import File, decode_file
from soulseek.protocol.codes import PeerCode
from soulseek.protocol.compress import decompress
from soulseek.protocol.wire import ProtocolError, Reader


@dataclass
class SearchResponse:
    """Search results from a single peer."""

    code: ClassVar[PeerCode] = PeerCode.SEARCH_RESPONSE

    username: str
    token: int
    files: list[File] = field(default_factory=list)
    locked_files: list[File] = field(default_factory=list)
    has_free_slot: bool = False
    upload_speed: int = 0
    queue_length: int = 0


def decode_search_response(data: bytes) -> SearchResponse:
    """Parse a compressed search response that starts with its 4-byte code."""
    if len(data) < 4:
        raise ProtocolError(f"data too short: {len(data)} bytes")
    return _decode_payload(decompress(data[4:]))


def _decode_files(reader: Reader) -> list[File]:
    count = reader.read_uint32()
    return [decode_file(reader) for _ in range(count)]


def _decode_payload(data: bytes) -> SearchResponse:
    reader = Reader(data)
    try:
        username = reader.read_string()
        token = reader.read_uint32()
        files = _decode_files(reader)
        has_free_slot = reader.read_uint8() == 1
        upload_speed = reader.read_uint32()
        queue_length = reader.read_uint32()
        reader.read_uint32()  # reserved
        locked_files = _decode_files(reader)
    except ProtocolError as exc:
        raise ProtocolError(f"decode search response: {exc}") from exc
    return SearchResponse(
        username=username,
        token=token,
        files=files,
        locked_files=locked_files,
        has_free_slot=has_free_slot,
        upload_speed=upload_speed,
        queue_length=queue_length,
    )