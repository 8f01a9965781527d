"""File entries as they appear in search results and browse responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union

from soulseek.protocol.wire import Reader, Writer


class AttributeType(IntEnum):
    """Kind of a file attribute."""

    BIT_RATE = 0
    LENGTH = 1
    BIT_DEPTH = 2
    SAMPLE_RATE = 4
    VBR = 5


def _attribute_type(raw: int) -> Union[AttributeType, int]:
    try:
        return AttributeType(raw)
    except ValueError:
        return raw


@dataclass(frozen=True)
class FileAttribute:
    """A single (type, value) attribute of a file.

    The type is an AttributeType when known, otherwise the raw number.
    """

    type: Union[AttributeType, int]
    value: int


@dataclass
class File:
    """A shared file: its path within the share, size, extension and attributes."""

    filename: str
    size: int
    extension: str = ""
    attributes: list[FileAttribute] = field(default_factory=list)
    code: int = 1

    def _attribute(self, kind: AttributeType) -> int:
        value = 0
        for attribute in self.attributes:
            if attribute.type == kind:
                value = attribute.value
        return value

    @property
    def bit_rate(self) -> int:
        """Bit rate in kbps, 0 if not available."""
        return self._attribute(AttributeType.BIT_RATE)

    @property
    def duration(self) -> int:
        """Duration in seconds, 0 if not available."""
        return self._attribute(AttributeType.LENGTH)

    @property
    def bit_depth(self) -> int:
        """Bit depth, 0 if not available."""
        return self._attribute(AttributeType.BIT_DEPTH)

    @property
    def sample_rate(self) -> int:
        """Sample rate in Hz, 0 if not available."""
        return self._attribute(AttributeType.SAMPLE_RATE)

    @property
    def is_vbr(self) -> bool:
        """True if the file is encoded with a variable bit rate."""
        return self._attribute(AttributeType.VBR) == 1


def decode_file(reader: Reader) -> File:
    """Read one file entry from *reader*."""
    code = reader.read_uint8()
    filename = reader.read_string()
    size = reader.read_uint64()
    extension = reader.read_string()
    count = reader.read_uint32()
    attributes = []
    for _ in range(count):
        kind = _attribute_type(reader.read_uint32())
        attributes.append(FileAttribute(kind, reader.read_uint32()))
    return File(
        filename=filename,
        size=size,
        extension=extension,
        attributes=attributes,
        code=code,
    )


def encode_file(writer: Writer, file: File) -> None:
    """Write *file* to *writer*."""
    writer.write_uint8(file.code)
    writer.write_string(file.filename)
    writer.write_uint64(file.size)
    writer.write_string(file.extension)
    writer.write_uint32(len(file.attributes))
    for attribute in file.attributes:
        writer.write_uint32(int(attribute.type))
        writer.write_uint32(attribute.value)