# mtstream/objects/base.py
"""Base data object and the shared record decode skeleton."""
from dataclasses import fields, is_dataclass
from enum import IntEnum
from typing import Any, ClassVar, Dict, Optional, Tuple
import logging

from construct import Construct

from ..constants import TAG_AND_REVISION_SIZE
from ..errors import InconsistentLengthError, UnsupportedRevisionError
from ..reader import DataReader, SerializationProperties, SystemType

logger = logging.getLogger(__name__)


class DataObjectType(IntEnum):
    """Record kinds, valued by their type tag in the stream.

    UNKNOWN and NOT_YET_IMPLEMENTED are reported by placeholder records;
    NOT_YET_IMPLEMENTED never appears on the wire.
    """
    NOT_YET_IMPLEMENTED = -1
    UNKNOWN = 0

    PROJECT_STRUCTURAL_DEF = 0x2
    SECTION_STRUCTURAL_DEF = 0x3
    MOVIE_STRUCTURAL_DEF = 0x5
    MTOON_STRUCTURAL_DEF = 0x6
    IMAGE_STRUCTURAL_DEF = 0x7
    SCENE_STRUCTURAL_DEF = 0x8
    ASSET_CATALOG = 0xd
    MOVIE_ASSET = 0x10
    AUDIO_ASSET = 0x11
    UNKNOWN_17 = 0x17
    UNKNOWN_19 = 0x19
    COLOR_TABLE_ASSET = 0x1e
    SUBSECTION_STRUCTURAL_DEF = 0x21
    PROJECT_LABEL_MAP = 0x22
    BEHAVIOR_MODIFIER = 0x2c6
    MAC_ONLY_CURSOR_MODIFIER = 0x3ca   # Obsolete
    STREAM_HEADER = 0x3e9
    UNKNOWN_3EC = 0x3ec
    END_OF_STREAM = 0xffff
    DEBRIS = 0xfffffffe
    PLUG_IN_MODIFIER = 0xffffffff


# Raw byte fields rendered as text rather than hex
TEXT_FIELDS = frozenset({'name', 'plugin'})


def decode_name(raw: bytes, system_type: Optional[SystemType] = None) -> str:
    """Render a stored name, stopping at the first NUL."""
    text = raw.split(b'\0', 1)[0]
    encoding = 'mac_roman' if system_type is SystemType.MAC else 'cp1252'
    return text.decode(encoding, 'replace')


def to_json_value(value: Any, system_type: Optional[SystemType] = None,
                  key: Optional[str] = None) -> Any:
    """Convert decoded values into JSON-friendly types."""
    if is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: to_json_value(getattr(value, f.name), system_type, f.name)
            for f in fields(value)
        }
    if isinstance(value, (bytes, bytearray)):
        if key in TEXT_FIELDS:
            return decode_name(bytes(value), system_type)
        return bytes(value).hex()
    if isinstance(value, (list, tuple)):
        return [to_json_value(item, system_type) for item in value]
    return value


class DataObject:
    """Base class for all stream records.

    Subclasses are dataclasses describing one record shape. The default
    ``load`` parses ``LAYOUT``, then the name whose length lives in
    ``NAME_LENGTH_FIELD``, then checks ``SIZE_FIELD`` against what was
    consumed. Records with variable sections override ``_load_fields``.
    """

    TYPE: ClassVar[DataObjectType]

    # Known layout revisions; None accepts any revision
    REVISIONS: ClassVar[Optional[Tuple[int, ...]]] = (0,)
    LAYOUT: ClassVar[Optional[Construct]] = None
    SIZE_FIELD: ClassVar[Optional[str]] = None
    NAME_LENGTH_FIELD: ClassVar[Optional[str]] = None

    @property
    def type(self) -> DataObjectType:
        return self.TYPE

    @property
    def record_name(self) -> str:
        return type(self).__name__

    def load(self, reader: DataReader, revision: int,
             sp: SerializationProperties) -> None:
        """Populate this record from the reader.

        Args:
            reader: Reader positioned just after the tag and revision
            revision: Revision number that preceded the record
            sp: Serialization properties of the stream

        Raises:
            DataReadError: If the record cannot be decoded. Field values
                are meaningless after a failure.
        """
        start = reader.position
        layout_revision = self.resolve_revision(revision, start)
        self._load_fields(reader, layout_revision, sp)
        self._check_declared_size(reader, start)
        logger.debug(
            f"Decoded {self.record_name} revision {revision} "
            f"({reader.position - start} bytes at offset {start})"
        )

    def resolve_revision(self, revision: int, position: Optional[int] = None) -> int:
        """Pick the layout revision used to decode ``revision``.

        Unknown revisions use the closest older layout; revisions older
        than every known layout are rejected.
        """
        if self.REVISIONS is None or revision in self.REVISIONS:
            return revision

        older = [known for known in self.REVISIONS if known < revision]
        if not older:
            raise UnsupportedRevisionError(self.record_name, revision, self.REVISIONS, position)

        layout_revision = max(older)
        logger.warning(
            f"{self.record_name} revision {revision} is not a known layout, "
            f"decoding as revision {layout_revision}"
        )
        return layout_revision

    def _load_fields(self, reader: DataReader, revision: int,
                     sp: SerializationProperties) -> None:
        if self.LAYOUT is not None:
            self._assign(reader.parse(self.LAYOUT))
        if self.NAME_LENGTH_FIELD is not None:
            self.name = reader.read_name(getattr(self, self.NAME_LENGTH_FIELD))

    def _assign(self, parsed) -> None:
        for key, value in parsed.items():
            if not key.startswith('_'):
                setattr(self, key, value)

    def declared_size(self) -> Optional[int]:
        """Size the record claims for itself, counting tag and revision."""
        if self.SIZE_FIELD is None:
            return None
        return getattr(self, self.SIZE_FIELD)

    def _check_declared_size(self, reader: DataReader, start: int) -> None:
        declared = self.declared_size()
        if declared is None:
            return

        consumed = reader.position - start + TAG_AND_REVISION_SIZE
        if consumed > declared:
            raise InconsistentLengthError(
                f"{self.record_name} declares {declared} bytes "
                f"but its fields span {consumed}",
                start
            )
        if consumed < declared:
            logger.debug(
                f"Skipping {declared - consumed} undecoded bytes "
                f"at the end of {self.record_name}"
            )
            reader.skip(declared - consumed)

    def to_dict(self, system_type: Optional[SystemType] = None) -> Dict[str, Any]:
        """Convert decoded fields to a dictionary for JSON output."""
        return to_json_value(self, system_type)
