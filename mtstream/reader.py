# mtstream/reader.py
"""Byte source wrapper and per-session serialization properties."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, BinaryIO
import logging

from construct import Construct, SizeofError, StreamError

from .constants import SKIP_CHUNK_SIZE
from .errors import InconsistentLengthError, TruncatedError
from .layouts import SInt16, UInt8, UInt16, UInt32

logger = logging.getLogger(__name__)


class SystemType(Enum):
    """Platform the project was authored on."""
    MAC = auto()
    WINDOWS = auto()


@dataclass(frozen=True)
class SerializationProperties:
    """Decode context shared by every record of one stream.

    Attributes:
        is_byte_swapped: True when multi-byte integers are stored big-endian
        system_type: Authoring platform, selects platform-specific tails
    """
    is_byte_swapped: bool
    system_type: SystemType

    @classmethod
    def for_system(cls, system_type: SystemType) -> 'SerializationProperties':
        """Default properties for a platform (Mac streams are big-endian)."""
        return cls(
            is_byte_swapped=system_type is SystemType.MAC,
            system_type=system_type
        )


class DataReader:
    """Sequential reader over a binary stream.

    Only ever reads forward. Every integer goes through the byte-order
    aware layouts; raw byte blocks are returned untouched.
    """

    def __init__(self, stream: BinaryIO, byte_swapped: bool = False):
        """Initialize reader.

        Args:
            stream: Any object with a ``read(size)`` method
            byte_swapped: True when integers are stored big-endian
        """
        self._stream = stream
        self.byte_swapped = byte_swapped
        self.position = 0

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes, file-object style.

        Used by construct while parsing layouts; short results are
        detected by the caller.
        """
        data = self._stream.read(size)
        self.position += len(data)
        return data

    def tell(self) -> int:
        return self.position

    def parse(self, layout: Construct) -> Any:
        """Parse a construct layout at the current position."""
        start = self.position
        try:
            return layout.parse_stream(self, byte_swapped=self.byte_swapped)
        except StreamError as e:
            raise TruncatedError(
                layout.sizeof() if _has_static_size(layout) else -1,
                self.position - start,
                start
            ) from e

    def read_bytes(self, size: int) -> bytes:
        """Read exactly ``size`` raw bytes."""
        if size < 0:
            raise InconsistentLengthError(f"Negative read size {size}", self.position)
        start = self.position
        data = self.read(size)
        if len(data) != size:
            raise TruncatedError(size, len(data), start)
        return data

    def read_name(self, length: int) -> bytes:
        """Read the raw bytes of a length-prefixed name."""
        return self.read_bytes(length)

    def skip(self, size: int) -> None:
        """Consume ``size`` opaque bytes without keeping them."""
        if size < 0:
            raise InconsistentLengthError(f"Negative skip size {size}", self.position)
        start = self.position
        remaining = size
        while remaining > 0:
            data = self.read(min(remaining, SKIP_CHUNK_SIZE))
            if not data:
                raise TruncatedError(size, size - remaining, start)
            remaining -= len(data)

    def read_u8(self) -> int:
        return self.parse(UInt8)

    def read_u16(self) -> int:
        return self.parse(UInt16)

    def read_u32(self) -> int:
        return self.parse(UInt32)

    def read_s16(self) -> int:
        return self.parse(SInt16)


def _has_static_size(layout: Construct) -> bool:
    try:
        layout.sizeof()
        return True
    except SizeofError:
        return False
