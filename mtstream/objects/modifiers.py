# mtstream/objects/modifiers.py
"""Modifier records: behaviors, plug-in modifiers, obsolete cursors."""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Optional
import logging

from construct import Struct

from ..constants import TAG_AND_REVISION_SIZE
from ..errors import InconsistentLengthError
from ..layouts import Bytes, UInt16, UInt32
from ..reader import DataReader, SerializationProperties, SystemType
from .base import DataObject, DataObjectType
from .primitives import Event, EventField, Point, PointField

logger = logging.getLogger(__name__)


@dataclass
class BehaviorModifier(DataObject):
    """Behavior header. Its child modifiers follow as separate records."""

    TYPE: ClassVar[DataObjectType] = DataObjectType.BEHAVIOR_MODIFIER
    REVISIONS: ClassVar[tuple] = (1,)
    SIZE_FIELD: ClassVar[str] = 'size_including_tag'
    NAME_LENGTH_FIELD: ClassVar[str] = 'length_of_name'
    LAYOUT: ClassVar[Struct] = Struct(
        "unknown1" / UInt32,
        "size_including_tag" / UInt32,
        "unknown2" / Bytes(2),
        "unknown3" / UInt32,
        "unknown4" / UInt32,
        "unknown5" / UInt16,
        "unknown6" / UInt32,
        "editor_layout_position" / PointField,
        "length_of_name" / UInt16,
        "num_children" / UInt16,
        "flags" / UInt32,
        "enable_when" / EventField,
        "disable_when" / EventField,
        "unknown7" / Bytes(2),
    )

    unknown1: int = 0
    size_including_tag: int = 0
    unknown2: bytes = b''
    unknown3: int = 0
    unknown4: int = 0
    unknown5: int = 0
    unknown6: int = 0
    editor_layout_position: Point = field(default_factory=Point)
    length_of_name: int = 0
    num_children: int = 0
    flags: int = 0
    enable_when: Event = field(default_factory=Event)
    disable_when: Event = field(default_factory=Event)
    unknown7: bytes = b''
    name: bytes = b''


@dataclass
class PlugInModifier(DataObject):
    """Modifier implemented by a plug-in, with opaque private data.

    The private data length is derived from ``weird_size``: Mac streams
    count the whole record, Windows streams count name plus private data.
    """

    TYPE: ClassVar[DataObjectType] = DataObjectType.PLUG_IN_MODIFIER
    REVISIONS: ClassVar[Optional[tuple]] = None    # Plug-ins version themselves
    NAME_LENGTH_FIELD: ClassVar[str] = 'length_of_name'
    LAYOUT: ClassVar[Struct] = Struct(
        "plugin" / Bytes(16),
        "unknown1" / UInt32,
        "weird_size" / UInt32,
        "unknown2" / Bytes(20),
        "length_of_name" / UInt16,
    )
    # Tag, revision and the fixed layout
    HEADER_SIZE: ClassVar[int] = TAG_AND_REVISION_SIZE + 46

    plugin: bytes = b''
    unknown1: int = 0
    weird_size: int = 0
    unknown2: bytes = b''
    length_of_name: int = 0
    name: bytes = b''
    private_data_size: int = 0
    private_data: bytes = b''

    def _load_fields(self, reader: DataReader, revision: int,
                     sp: SerializationProperties) -> None:
        start = reader.position
        super()._load_fields(reader, revision, sp)

        if sp.system_type is SystemType.MAC:
            self.private_data_size = self.weird_size - self.HEADER_SIZE - self.length_of_name
        else:
            self.private_data_size = self.weird_size - self.length_of_name

        if self.private_data_size < 0:
            raise InconsistentLengthError(
                f"Plug-in modifier size {self.weird_size} is smaller than "
                f"its header and {self.length_of_name} byte name",
                start
            )
        self.private_data = reader.read_bytes(self.private_data_size)


class CursorIndex(IntEnum):
    INACTIVE = 0
    INTERACT = 1
    HAND_GRAB_BW = 2
    HAND_OPEN_BW = 3
    HAND_POINT_UP = 4
    HAND_POINT_RIGHT = 5
    HAND_POINT_LEFT = 6
    HAND_POINT_DOWN = 7
    HAND_GRAB_COLOR = 8
    HAND_OPEN_COLOR = 9
    ARROW = 10
    PENCIL = 11
    SMILEY = 12
    WAIT = 13
    HIDDEN = 14


MAC_ONLY_CURSOR_PART = Struct(
    "apply_when" / EventField,
    "unknown1" / UInt32,
    "unknown2" / UInt16,
    "cursor_index" / UInt32,
)


@dataclass
class MacOnlyCursorPart:
    apply_when: Event = field(default_factory=Event)
    unknown1: int = 0
    unknown2: int = 0
    cursor_index: int = 0

    @property
    def cursor(self) -> Optional[CursorIndex]:
        try:
            return CursorIndex(self.cursor_index)
        except ValueError:
            return None


@dataclass
class MacOnlyCursorModifier(DataObject):
    """Obsolete cursor modifier. Only Mac streams carry the cursor part."""

    TYPE: ClassVar[DataObjectType] = DataObjectType.MAC_ONLY_CURSOR_MODIFIER
    SIZE_FIELD: ClassVar[str] = 'size_including_tag'
    NAME_LENGTH_FIELD: ClassVar[str] = 'length_of_name'
    LAYOUT: ClassVar[Struct] = Struct(
        "unknown1" / UInt32,
        "size_including_tag" / UInt32,
        "unknown2" / UInt32,
        "unknown3" / UInt32,
        "unknown4" / UInt16,
        "unknown5" / UInt32,
        "unknown6" / Bytes(4),
        "length_of_name" / UInt16,
    )

    unknown1: int = 0
    size_including_tag: int = 0
    unknown2: int = 0
    unknown3: int = 0
    unknown4: int = 0
    unknown5: int = 0
    unknown6: bytes = b''
    length_of_name: int = 0
    name: bytes = b''
    mac_only_part: Optional[MacOnlyCursorPart] = None

    @property
    def has_mac_only_part(self) -> bool:
        return self.mac_only_part is not None

    def _load_fields(self, reader: DataReader, revision: int,
                     sp: SerializationProperties) -> None:
        super()._load_fields(reader, revision, sp)
        if sp.system_type is SystemType.MAC:
            parsed = reader.parse(MAC_ONLY_CURSOR_PART)
            self.mac_only_part = MacOnlyCursorPart(
                apply_when=parsed.apply_when,
                unknown1=parsed.unknown1,
                unknown2=parsed.unknown2,
                cursor_index=parsed.cursor_index
            )
        else:
            logger.debug("Cursor modifier has no Windows part")
            self.mac_only_part = None
