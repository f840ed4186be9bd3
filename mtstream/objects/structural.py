# mtstream/objects/structural.py
"""Structural definitions: project, sections, scenes and elements."""
from dataclasses import dataclass, field
from enum import IntFlag
from typing import ClassVar

from construct import Struct

from ..layouts import Bytes, UInt16, UInt32
from .base import DataObject, DataObjectType
from .primitives import Rect, RectField


class StructuralFlags(IntFlag):
    NOT_DIRECT_TO_SCREEN = 0x00001000
    HIDDEN = 0x00008000
    PAUSED = 0x00010000
    EXPANDED_IN_EDITOR = 0x00800000
    CACHE_BITMAP = 0x02000000
    SELECTED_IN_EDITOR = 0x10000000


class AnimationFlags(IntFlag):
    MAINTAIN_RATE = 0x02000000      # mToon
    PLAY_EVERY_FRAME = 0x02000000   # QuickTime
    LOOP = 0x08000000


# Leading fields shared by every structural definition
_HEADER = [
    "unknown1" / UInt32,
    "size_including_tag" / UInt32,
    "unknown2" / UInt32,
]


class StructuralDef(DataObject):
    """Common behaviour of structural definitions."""

    SIZE_FIELD: ClassVar[str] = 'size_including_tag'
    NAME_LENGTH_FIELD: ClassVar[str] = 'length_of_name'
    FLAGS_FIELD: ClassVar[str] = 'flags'

    def has_flag(self, flag: StructuralFlags) -> bool:
        return bool(getattr(self, self.FLAGS_FIELD) & flag)


@dataclass
class ProjectStructuralDef(StructuralDef):
    TYPE: ClassVar[DataObjectType] = DataObjectType.PROJECT_STRUCTURAL_DEF
    REVISIONS: ClassVar[tuple] = (1,)
    NAME_LENGTH_FIELD: ClassVar[str] = 'name_length'
    LAYOUT: ClassVar[Struct] = Struct(
        *_HEADER,
        "flags" / UInt32,
        "name_length" / UInt16,
    )

    unknown1: int = 0         # Seems to always be 0x16
    size_including_tag: int = 0
    unknown2: int = 0
    flags: int = 0
    name_length: int = 0
    name: bytes = b''


@dataclass
class SectionStructuralDef(StructuralDef):
    TYPE: ClassVar[DataObjectType] = DataObjectType.SECTION_STRUCTURAL_DEF
    REVISIONS: ClassVar[tuple] = (1,)
    LAYOUT: ClassVar[Struct] = Struct(
        *_HEADER,
        "length_of_name" / UInt16,
        "flags" / UInt32,
        "unknown4" / UInt16,
        "section_id" / UInt16,
        "segment_id" / UInt32,
    )

    unknown1: int = 0
    size_including_tag: int = 0
    unknown2: int = 0
    length_of_name: int = 0
    flags: int = 0
    unknown4: int = 0
    section_id: int = 0
    segment_id: int = 0
    name: bytes = b''


@dataclass
class SubsectionStructuralDef(StructuralDef):
    TYPE: ClassVar[DataObjectType] = DataObjectType.SUBSECTION_STRUCTURAL_DEF
    LAYOUT: ClassVar[Struct] = Struct(
        *_HEADER,
        "length_of_name" / UInt16,
        "flags" / UInt32,
        "section_id" / UInt16,
    )

    unknown1: int = 0
    size_including_tag: int = 0
    unknown2: int = 0
    length_of_name: int = 0
    flags: int = 0
    section_id: int = 0
    name: bytes = b''


@dataclass
class SceneStructuralDef(StructuralDef):
    TYPE: ClassVar[DataObjectType] = DataObjectType.SCENE_STRUCTURAL_DEF
    REVISIONS: ClassVar[tuple] = (1,)
    STREAM_LOCATOR_STREAM_ID_MASK: ClassVar[int] = 0xff
    LAYOUT: ClassVar[Struct] = Struct(
        *_HEADER,
        "length_of_name" / UInt16,
        "flags" / UInt32,
        "unknown4" / Bytes(2),
        "section_id" / UInt16,
        "rect1" / RectField,
        "rect2" / RectField,
        "stream_locator" / UInt32,
        "unknown11" / Bytes(4),
    )

    unknown1: int = 0
    size_including_tag: int = 0
    unknown2: int = 0
    length_of_name: int = 0
    flags: int = 0
    unknown4: bytes = b''
    section_id: int = 0
    rect1: Rect = field(default_factory=Rect)
    rect2: Rect = field(default_factory=Rect)
    # 1-based index, sometimes observed with 0x10000000 set
    stream_locator: int = 0
    unknown11: bytes = b''
    name: bytes = b''

    @property
    def stream_id(self) -> int:
        return self.stream_locator & self.STREAM_LOCATOR_STREAM_ID_MASK


@dataclass
class ImageStructuralDef(StructuralDef):
    TYPE: ClassVar[DataObjectType] = DataObjectType.IMAGE_STRUCTURAL_DEF
    REVISIONS: ClassVar[tuple] = (2,)
    LAYOUT: ClassVar[Struct] = Struct(
        *_HEADER,
        "length_of_name" / UInt16,
        "flags" / UInt32,
        "unknown4" / Bytes(2),
        "section_id" / UInt16,
        "rect1" / RectField,
        "rect2" / RectField,
        "image_asset_id" / UInt32,
        "stream_locator" / UInt32,
        "unknown7" / Bytes(4),
    )

    unknown1: int = 0
    size_including_tag: int = 0
    unknown2: int = 0
    length_of_name: int = 0
    flags: int = 0
    unknown4: bytes = b''
    section_id: int = 0
    rect1: Rect = field(default_factory=Rect)
    rect2: Rect = field(default_factory=Rect)
    image_asset_id: int = 0
    stream_locator: int = 0
    unknown7: bytes = b''
    name: bytes = b''


@dataclass
class MovieStructuralDef(StructuralDef):
    TYPE: ClassVar[DataObjectType] = DataObjectType.MOVIE_STRUCTURAL_DEF
    REVISIONS: ClassVar[tuple] = (2,)
    LAYOUT: ClassVar[Struct] = Struct(
        *_HEADER,
        "length_of_name" / UInt16,
        "flags" / UInt32,
        "layer" / UInt16,
        "unknown3" / Bytes(44),
        "section_id" / UInt16,
        "unknown5" / Bytes(2),
        "rect1" / RectField,
        "rect2" / RectField,
        "asset_id" / UInt32,
        "unknown7" / UInt32,
        "volume" / UInt16,
        "animation_flags" / UInt32,
        "unknown10" / Bytes(4),
        "unknown11" / Bytes(4),
        "stream_locator" / UInt32,
        "unknown13" / Bytes(4),
    )

    unknown1: int = 0
    size_including_tag: int = 0
    unknown2: int = 0
    length_of_name: int = 0
    flags: int = 0
    layer: int = 0
    unknown3: bytes = b''
    section_id: int = 0
    unknown5: bytes = b''
    rect1: Rect = field(default_factory=Rect)
    rect2: Rect = field(default_factory=Rect)
    asset_id: int = 0
    unknown7: int = 0
    volume: int = 0
    animation_flags: int = 0
    unknown10: bytes = b''
    unknown11: bytes = b''
    stream_locator: int = 0
    unknown13: bytes = b''
    name: bytes = b''

    @property
    def loops(self) -> bool:
        return bool(self.animation_flags & AnimationFlags.LOOP)

    @property
    def plays_every_frame(self) -> bool:
        return bool(self.animation_flags & AnimationFlags.PLAY_EVERY_FRAME)


@dataclass
class MToonStructuralDef(StructuralDef):
    TYPE: ClassVar[DataObjectType] = DataObjectType.MTOON_STRUCTURAL_DEF
    REVISIONS: ClassVar[tuple] = (2,)
    FLAGS_FIELD: ClassVar[str] = 'structural_flags'
    LAYOUT: ClassVar[Struct] = Struct(
        *_HEADER,
        "length_of_name" / UInt16,
        "structural_flags" / UInt32,
        "unknown3" / Bytes(2),
        "animation_flags" / UInt32,
        "unknown4" / Bytes(4),
        "section_id" / UInt16,
        "rect1" / RectField,
        "rect2" / RectField,
        "unknown5" / UInt32,
        "rate_times_10000" / UInt32,
        "stream_locator" / UInt32,
        "unknown6" / UInt32,
    )

    unknown1: int = 0
    size_including_tag: int = 0
    unknown2: int = 0
    length_of_name: int = 0
    structural_flags: int = 0
    unknown3: bytes = b''
    animation_flags: int = 0
    unknown4: bytes = b''
    section_id: int = 0
    rect1: Rect = field(default_factory=Rect)
    rect2: Rect = field(default_factory=Rect)
    unknown5: int = 0
    rate_times_10000: int = 0
    stream_locator: int = 0
    unknown6: int = 0
    name: bytes = b''

    @property
    def frame_rate(self) -> float:
        return self.rate_times_10000 / 10000.0

    @property
    def loops(self) -> bool:
        return bool(self.animation_flags & AnimationFlags.LOOP)

    @property
    def maintains_rate(self) -> bool:
        return bool(self.animation_flags & AnimationFlags.MAINTAIN_RATE)
