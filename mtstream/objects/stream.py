# mtstream/objects/stream.py
"""Stream bookkeeping records: header, settings, debris, terminator."""
from dataclasses import dataclass
from typing import ClassVar, Optional

from construct import Struct

from ..layouts import Bytes, UInt16, UInt32
from .base import DataObject, DataObjectType


@dataclass
class StreamHeader(DataObject):
    """First record of every stream. Always 38 bytes including the tag."""

    TYPE: ClassVar[DataObjectType] = DataObjectType.STREAM_HEADER
    SIZE_FIELD: ClassVar[str] = 'size_including_tag'
    LAYOUT: ClassVar[Struct] = Struct(
        "marker" / UInt32,
        "size_including_tag" / UInt32,
        "name" / Bytes(16),
        "project_id" / Bytes(2),
        "unknown1" / Bytes(4),    # Seems to be consistent across builds
        "unknown2" / UInt16,      # 0
    )

    marker: int = 0
    size_including_tag: int = 0
    name: bytes = b''
    project_id: bytes = b''
    unknown1: bytes = b''
    unknown2: int = 0


@dataclass
class Unknown3ec(DataObject):
    TYPE: ClassVar[DataObjectType] = DataObjectType.UNKNOWN_3EC
    REVISIONS: ClassVar[tuple] = (2,)
    SIZE_FIELD: ClassVar[str] = 'size_including_tag'
    LAYOUT: ClassVar[Struct] = Struct(
        "marker" / UInt32,
        "size_including_tag" / UInt32,
        "unknown1" / Bytes(2),
        "unknown2" / UInt32,
        "unknown3" / UInt16,
        "unknown4" / UInt16,
    )

    marker: int = 0
    size_including_tag: int = 0
    unknown1: bytes = b''
    unknown2: int = 0
    unknown3: int = 0
    unknown4: int = 0


@dataclass
class Unknown17(DataObject):
    TYPE: ClassVar[DataObjectType] = DataObjectType.UNKNOWN_17
    SIZE_FIELD: ClassVar[str] = 'size_including_tag'
    LAYOUT: ClassVar[Struct] = Struct(
        "marker" / UInt32,
        "size_including_tag" / UInt32,
        "unknown1" / Bytes(6),
    )

    marker: int = 0
    size_including_tag: int = 0
    unknown1: bytes = b''


@dataclass
class Unknown19(DataObject):
    TYPE: ClassVar[DataObjectType] = DataObjectType.UNKNOWN_19
    SIZE_FIELD: ClassVar[str] = 'size_including_tag'
    LAYOUT: ClassVar[Struct] = Struct(
        "marker" / UInt32,
        "size_including_tag" / UInt32,
        "unknown1" / Bytes(2),
    )

    marker: int = 0
    size_including_tag: int = 0
    unknown1: bytes = b''


@dataclass
class Debris(DataObject):
    """Leftover of a deleted object. Marker and size only."""

    TYPE: ClassVar[DataObjectType] = DataObjectType.DEBRIS
    SIZE_FIELD: ClassVar[str] = 'size_including_tag'
    LAYOUT: ClassVar[Struct] = Struct(
        "marker" / UInt32,
        "size_including_tag" / UInt32,
    )

    marker: int = 0
    size_including_tag: int = 0


@dataclass
class EndOfStream(DataObject):
    TYPE: ClassVar[DataObjectType] = DataObjectType.END_OF_STREAM
    REVISIONS: ClassVar[Optional[tuple]] = None
    LAYOUT: ClassVar[Struct] = Struct(
        "unknown1" / UInt32,
        "unknown2" / UInt32,
    )

    unknown1: int = 0
    unknown2: int = 0
