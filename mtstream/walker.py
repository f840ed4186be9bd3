# mtstream/walker.py
"""Sequential walk over every record of a project stream."""
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional
import logging

from .constants import STREAM_HEADER_TAG, TAG_SIZE
from .errors import DataReadError, InvalidMarkerError, TruncatedError
from .factory import create_object_from_type
from .layouts import UInt32
from .objects.base import DataObject, DataObjectType
from .reader import DataReader, SerializationProperties, SystemType

logger = logging.getLogger(__name__)


@dataclass
class StreamRecord:
    """One decoded record and where it came from."""
    offset: int
    tag: int
    revision: int
    obj: DataObject

    @property
    def type(self) -> DataObjectType:
        return self.obj.type


def _parse_tag(raw: bytes, byte_swapped: bool) -> int:
    return UInt32.parse(raw, byte_swapped=byte_swapped)


def detect_serialization_properties(first_bytes: bytes) -> SerializationProperties:
    """Work out byte order and platform from the stream's first tag.

    Every stream opens with a stream header. Mac projects store it
    big-endian, Windows projects little-endian.

    Raises:
        TruncatedError: If fewer than four bytes are given
        InvalidMarkerError: If neither byte order yields the header tag
    """
    if len(first_bytes) < TAG_SIZE:
        raise TruncatedError(TAG_SIZE, len(first_bytes), 0)

    raw = bytes(first_bytes[:TAG_SIZE])
    if _parse_tag(raw, byte_swapped=True) == STREAM_HEADER_TAG:
        return SerializationProperties.for_system(SystemType.MAC)
    if _parse_tag(raw, byte_swapped=False) == STREAM_HEADER_TAG:
        return SerializationProperties.for_system(SystemType.WINDOWS)
    raise InvalidMarkerError(
        "stream header tag", STREAM_HEADER_TAG, _parse_tag(raw, byte_swapped=True), 0
    )


class StreamWalker:
    """Decode the records of a stream in order.

    Iterating yields ``StreamRecord`` objects until a clean end of input
    or an end-of-stream record. A stream with no records at all raises
    TruncatedError. Decode failures propagate and end the walk; the stream
    cannot be resynchronised after one.
    """

    def __init__(self, stream: BinaryIO,
                 properties: Optional[SerializationProperties] = None):
        """Initialize walker.

        Args:
            stream: Binary source with a ``read(size)`` method
            properties: Serialization properties; detected from the
                stream header tag when omitted
        """
        self._stream = stream
        self.properties = properties
        self._reader: Optional[DataReader] = None
        self._pending_tag: Optional[bytes] = None
        self.records_read = 0
        self.finished = False

    def _ensure_reader(self) -> DataReader:
        if self._reader is not None:
            return self._reader

        if self.properties is None:
            first = self._stream.read(TAG_SIZE)
            self.properties = detect_serialization_properties(first)
            self._pending_tag = first
            logger.info(
                f"Detected {self.properties.system_type.name} stream "
                f"({'big' if self.properties.is_byte_swapped else 'little'}-endian)"
            )

        self._reader = DataReader(self._stream, self.properties.is_byte_swapped)
        if self._pending_tag is not None:
            self._reader.position = len(self._pending_tag)
        return self._reader

    def _read_tag(self, reader: DataReader) -> Optional[int]:
        if self._pending_tag is not None:
            raw, self._pending_tag = self._pending_tag, None
        else:
            raw = reader.read(TAG_SIZE)
            if not raw:
                return None
            if len(raw) < TAG_SIZE:
                raise TruncatedError(TAG_SIZE, len(raw), reader.position - len(raw))
        return _parse_tag(raw, reader.byte_swapped)

    def read_record(self) -> Optional[StreamRecord]:
        """Decode the next record, or return None at the end of the stream."""
        if self.finished:
            return None

        try:
            reader = self._ensure_reader()
            offset = reader.position - (len(self._pending_tag) if self._pending_tag else 0)
            tag = self._read_tag(reader)
            if tag is None:
                self.finished = True
                if self.records_read == 0:
                    # A stream always opens with its header record
                    raise TruncatedError(TAG_SIZE, 0, offset)
                return None

            revision = reader.read_u16()
            obj = create_object_from_type(tag)
            obj.load(reader, revision, self.properties)
        except DataReadError as e:
            # The cursor is unreliable after a failure
            self.finished = True
            logger.error(f"Failed to decode stream at record {self.records_read}: {e}")
            raise

        self.records_read += 1
        if obj.type == DataObjectType.END_OF_STREAM:
            self.finished = True
        return StreamRecord(offset=offset, tag=tag, revision=revision, obj=obj)

    def __iter__(self) -> Iterator[StreamRecord]:
        while True:
            record = self.read_record()
            if record is None:
                return
            yield record

    def objects_of_type(self, object_type: DataObjectType) -> Iterator[DataObject]:
        """Yield the remaining records of one type."""
        for record in self:
            if record.obj.type == object_type:
                yield record.obj
