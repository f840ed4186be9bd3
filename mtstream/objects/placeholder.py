# mtstream/objects/placeholder.py
"""Stand-in record for tags this package does not decode."""
from dataclasses import dataclass
from typing import ClassVar, Optional

from construct import Struct

from ..constants import PLACEHOLDER_MIN_SIZE
from ..errors import InconsistentLengthError
from ..layouts import UInt32
from ..reader import DataReader, SerializationProperties
from .base import DataObject, DataObjectType


@dataclass
class NotYetImplemented(DataObject):
    """Skips a record it cannot decode, keeping the raw tag.

    ``name`` holds a human readable label for tags known to exist but
    not decoded here; it is None for tags nobody has identified.
    """

    TYPE: ClassVar[DataObjectType] = DataObjectType.UNKNOWN
    REVISIONS: ClassVar[Optional[tuple]] = None
    SIZE_FIELD: ClassVar[str] = 'size_including_tag'
    LAYOUT: ClassVar[Struct] = Struct(
        "unknown" / UInt32,
        "size_including_tag" / UInt32,
    )

    actual_type: int = 0
    name: Optional[str] = None
    revision: Optional[int] = None
    unknown: int = 0
    size_including_tag: int = 0

    @property
    def type(self) -> DataObjectType:
        if self.name is not None:
            return DataObjectType.NOT_YET_IMPLEMENTED
        return DataObjectType.UNKNOWN

    @property
    def record_name(self) -> str:
        if self.name is not None:
            return f"{self.name} (0x{self.actual_type:x})"
        return f"unknown record 0x{self.actual_type:x}"

    def _load_fields(self, reader: DataReader, revision: int,
                     sp: SerializationProperties) -> None:
        start = reader.position
        self.revision = revision
        self._assign(reader.parse(self.LAYOUT))
        if self.size_including_tag < PLACEHOLDER_MIN_SIZE:
            raise InconsistentLengthError(
                f"{self.record_name} declares {self.size_including_tag} bytes, "
                f"less than its {PLACEHOLDER_MIN_SIZE} byte header",
                start
            )
