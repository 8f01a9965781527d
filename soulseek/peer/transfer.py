"""Peer messages that negotiate, queue and report file transfers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Tuple, Type, TypeVar, Union

from soulseek.peer.handshake import _decoding
from soulseek.protocol.codes import PeerCode
from soulseek.protocol.wire import ProtocolError, Reader, Writer

_Layout = Tuple[Tuple[str, str], ...]
_M = TypeVar("_M", bound="PeerMessage")


class PeerMessage:
    """A message exchanged on a peer connection, identified by its code.

    Subclasses with only fixed fields list them in ``_layout`` as
    (attribute, kind) pairs, where kind names a Reader method suffix.
    """

    code: ClassVar[PeerCode]
    _name: ClassVar[str] = "peer message"
    _layout: ClassVar[_Layout] = ()

    def encode(self, writer: Writer) -> None:
        """Write the message code to *writer*; subclasses add their fields."""
        writer.write_uint32(self.code)

    @classmethod
    def _decode(cls: Type[_M], payload: bytes) -> _M:
        reader = _open(payload, cls.code, cls._name)
        with _decoding(cls._name):
            values = {
                attribute: getattr(reader, f"read_{kind}")()
                for attribute, kind in cls._layout
            }
        return cls(**values)


class TransferDirection(IntEnum):
    """Whether the sender of a TransferRequest downloads or uploads."""

    DOWNLOAD = 0
    UPLOAD = 1


def _direction(raw: int) -> Union[TransferDirection, int]:
    try:
        return TransferDirection(raw)
    except ValueError:
        return raw


def _open(payload: bytes, expected: PeerCode, what: str) -> Reader:
    reader = Reader(payload)
    with _decoding(what):
        code = reader.read_uint32()
    if code != expected:
        raise ProtocolError(f"unexpected code {code}, expected {int(expected)}")
    return reader


@dataclass
class TransferRequest(PeerMessage):
    """Requests a download or offers an upload; file_size is sent for uploads only."""

    code: ClassVar[PeerCode] = PeerCode.TRANSFER_REQUEST
    _name: ClassVar[str] = "transfer request"

    direction: Union[TransferDirection, int] = TransferDirection.DOWNLOAD
    token: int = 0
    filename: str = ""
    file_size: int = 0

    def encode(self, writer: Writer) -> None:
        """Write the request, adding the file size for uploads."""
        super().encode(writer)
        writer.write_uint32(self.direction)
        writer.write_uint32(self.token)
        writer.write_string(self.filename)
        if self.direction == TransferDirection.UPLOAD:
            writer.write_uint64(self.file_size)


def decode_transfer_request(payload: bytes) -> TransferRequest:
    """Parse a TransferRequest payload that starts with its code."""
    what = TransferRequest._name
    reader = _open(payload, TransferRequest.code, what)
    with _decoding(what):
        direction = _direction(reader.read_uint32())
        token = reader.read_uint32()
        filename = reader.read_string()
        file_size = (
            reader.read_uint64() if direction == TransferDirection.UPLOAD else 0
        )
    return TransferRequest(
        direction=direction, token=token, filename=filename, file_size=file_size
    )


@dataclass
class TransferResponse(PeerMessage):
    """Answers a TransferRequest: a file size when allowed, a reason otherwise."""

    code: ClassVar[PeerCode] = PeerCode.TRANSFER_RESPONSE
    _name: ClassVar[str] = "transfer response"

    token: int = 0
    allowed: bool = False
    file_size: int = 0
    reason: str = ""

    def encode(self, writer: Writer) -> None:
        """Write the response with either the file size or the reason."""
        super().encode(writer)
        writer.write_uint32(self.token)
        if self.allowed:
            writer.write_uint8(1)
            writer.write_uint64(self.file_size)
        else:
            writer.write_uint8(0)
            writer.write_string(self.reason)


def decode_transfer_response(payload: bytes) -> TransferResponse:
    """Parse a TransferResponse payload that starts with its code."""
    what = TransferResponse._name
    reader = _open(payload, TransferResponse.code, what)
    with _decoding(what):
        token = reader.read_uint32()
        if reader.read_uint8() == 1:
            return TransferResponse(
                token=token, allowed=True, file_size=reader.read_uint64()
            )
        return TransferResponse(token=token, allowed=False, reason=reader.read_string())


@dataclass
class QueueDownload(PeerMessage):
    """Asks a peer to add a file to its upload queue."""

    code: ClassVar[PeerCode] = PeerCode.QUEUE_DOWNLOAD
    _name: ClassVar[str] = "queue download"
    _layout: ClassVar[_Layout] = (("filename", "string"),)

    filename: str = ""

    def encode(self, writer: Writer) -> None:
        """Write the code and the filename."""
        super().encode(writer)
        writer.write_string(self.filename)


def decode_queue_download(payload: bytes) -> QueueDownload:
    """Parse a QueueDownload payload that starts with its code."""
    return QueueDownload._decode(payload)


@dataclass
class PlaceInQueueResponse(PeerMessage):
    """Reports the 1-based position of a file in a peer's upload queue."""

    code: ClassVar[PeerCode] = PeerCode.PLACE_IN_QUEUE_RESPONSE
    _name: ClassVar[str] = "place in queue response"
    _layout: ClassVar[_Layout] = (("filename", "string"), ("place", "uint32"))

    filename: str = ""
    place: int = 0

    def encode(self, writer: Writer) -> None:
        """Write the code, the filename and the queue position."""
        super().encode(writer)
        writer.write_string(self.filename)
        writer.write_uint32(self.place)


def decode_place_in_queue_response(payload: bytes) -> PlaceInQueueResponse:
    """Parse a PlaceInQueueResponse payload that starts with its code."""
    return PlaceInQueueResponse._decode(payload)


@dataclass
class PlaceInQueueRequest(PeerMessage):
    """Asks for the current queue position of a file."""

    code: ClassVar[PeerCode] = PeerCode.PLACE_IN_QUEUE_REQUEST
    _name: ClassVar[str] = "place in queue request"
    _layout: ClassVar[_Layout] = (("filename", "string"),)

    filename: str = ""

    def encode(self, writer: Writer) -> None:
        """Write the code and the filename."""
        super().encode(writer)
        writer.write_string(self.filename)


def decode_place_in_queue_request(payload: bytes) -> PlaceInQueueRequest:
    """Parse a PlaceInQueueRequest payload that starts with its code."""
    return PlaceInQueueRequest._decode(payload)


@dataclass
class UploadFailed(PeerMessage):
    """Reports that a transfer failed mid-stream."""

    code: ClassVar[PeerCode] = PeerCode.UPLOAD_FAILED
    _name: ClassVar[str] = "upload failed"
    _layout: ClassVar[_Layout] = (("filename", "string"),)

    filename: str = ""

    def encode(self, writer: Writer) -> None:
        """Write the code and the filename."""
        super().encode(writer)
        writer.write_string(self.filename)


def decode_upload_failed(payload: bytes) -> UploadFailed:
    """Parse an UploadFailed payload that starts with its code."""
    return UploadFailed._decode(payload)


@dataclass
class UploadDenied(PeerMessage):
    """Reports that a transfer was refused, with the reason."""

    code: ClassVar[PeerCode] = PeerCode.UPLOAD_DENIED
    _name: ClassVar[str] = "upload denied"
    _layout: ClassVar[_Layout] = (("filename", "string"), ("reason", "string"))

    filename: str = ""
    reason: str = ""

    def encode(self, writer: Writer) -> None:
        """Write the code, the filename and the reason."""
        super().encode(writer)
        writer.write_string(self.filename)
        writer.write_string(self.reason)


def decode_upload_denied(payload: bytes) -> UploadDenied:
    """Parse an UploadDenied payload that starts with its code."""
    return UploadDenied._decode(payload)