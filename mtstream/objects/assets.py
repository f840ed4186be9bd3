# mtstream/objects/assets.py
"""Asset records: color tables, audio and QuickTime movies."""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, List, Optional, Union

from construct import Adapter, Array, Struct

from ..layouts import Bytes, UInt8, UInt16, UInt32
from ..reader import DataReader, SerializationProperties, SystemType
from .base import DataObject, DataObjectType

COLOR_TABLE_SIZE = 256


@dataclass
class ColorDef:
    """16-bit per channel color table entry."""
    red: int = 0
    green: int = 0
    blue: int = 0

    @property
    def rgb8(self) -> tuple:
        """Color reduced to 8 bits per channel."""
        return (self.red >> 8, self.green >> 8, self.blue >> 8)


class ColorDefAdapter(Adapter):
    def _decode(self, obj, context, path):
        return ColorDef(red=obj.red, green=obj.green, blue=obj.blue)


ColorDefField = ColorDefAdapter(Struct(
    "red" / UInt16,
    "green" / UInt16,
    "blue" / UInt16,
))


@dataclass
class ColorTableAsset(DataObject):
    TYPE: ClassVar[DataObjectType] = DataObjectType.COLOR_TABLE_ASSET
    SIZE_FIELD: ClassVar[str] = 'size_including_tag'
    LAYOUT: ClassVar[Struct] = Struct(
        "marker" / UInt32,
        "size_including_tag" / UInt32,
        "unknown1" / Bytes(4),
        "asset_id" / UInt32,
        "unknown2" / UInt32,      # Usually zero
        "colors" / Array(COLOR_TABLE_SIZE, ColorDefField),
    )

    marker: int = 0
    size_including_tag: int = 0
    unknown1: bytes = b''
    asset_id: int = 0
    unknown2: int = 0
    colors: List[ColorDef] = field(default_factory=list)

    def _assign(self, parsed) -> None:
        super()._assign(parsed)
        self.colors = list(self.colors)


class AudioEncoding(IntEnum):
    UNCOMPRESSED = 0
    MACE3 = 3
    MACE6 = 4


AUDIO_MAC_PART = Struct(
    "unknown4" / Bytes(4),
    "unknown5" / Bytes(5),
    "unknown6" / Bytes(3),
    "unknown8" / Bytes(20),
    "unknown13" / Bytes(10),
)

AUDIO_WIN_PART = Struct(
    "unknown9" / Bytes(3),
    "unknown10" / Bytes(3),
    "unknown11" / Bytes(15),
    "unknown12" / Bytes(12),
)


@dataclass
class AudioAssetMacPart:
    unknown4: bytes = b''
    unknown5: bytes = b''
    unknown6: bytes = b''
    unknown8: bytes = b''
    unknown13: bytes = b''


@dataclass
class AudioAssetWinPart:
    unknown9: bytes = b''
    unknown10: bytes = b''
    unknown11: bytes = b''
    unknown12: bytes = b''


def _load_platform_part(reader: DataReader, sp: SerializationProperties,
                        mac_layout: Struct, mac_type, win_layout: Struct, win_type):
    """Read the one platform-specific tail matching the stream's system."""
    if sp.system_type is SystemType.MAC:
        layout, part_type = mac_layout, mac_type
    else:
        layout, part_type = win_layout, win_type
    parsed = reader.parse(layout)
    return part_type(**{key: value for key, value in parsed.items() if not key.startswith('_')})


@dataclass
class AudioAsset(DataObject):
    """Sampled sound asset. Sample data lives at ``file_position``."""

    TYPE: ClassVar[DataObjectType] = DataObjectType.AUDIO_ASSET
    REVISIONS: ClassVar[tuple] = (2,)
    LAYOUT: ClassVar[Struct] = Struct(
        "marker" / UInt32,
        "asset_and_data_combined_size" / UInt32,
        "unknown2" / Bytes(4),
        "asset_id" / UInt32,
        "unknown3" / Bytes(20),
        "sample_rate1" / UInt16,
        "bits_per_sample" / UInt8,
        "encoding1" / UInt8,
        "channels" / UInt8,
        "coded_duration" / Bytes(4),
        "sample_rate2" / UInt16,
        "file_position" / UInt32,
        "size" / UInt32,
    )

    marker: int = 0
    asset_and_data_combined_size: int = 0
    unknown2: bytes = b''
    asset_id: int = 0
    unknown3: bytes = b''
    sample_rate1: int = 0
    bits_per_sample: int = 0
    encoding1: int = 0
    channels: int = 0
    coded_duration: bytes = b''
    sample_rate2: int = 0
    file_position: int = 0
    size: int = 0
    platform: Union[AudioAssetMacPart, AudioAssetWinPart, None] = None

    @property
    def encoding(self) -> Optional[AudioEncoding]:
        try:
            return AudioEncoding(self.encoding1)
        except ValueError:
            return None

    def _load_fields(self, reader: DataReader, revision: int,
                     sp: SerializationProperties) -> None:
        super()._load_fields(reader, revision, sp)
        self.platform = _load_platform_part(
            reader, sp,
            AUDIO_MAC_PART, AudioAssetMacPart,
            AUDIO_WIN_PART, AudioAssetWinPart
        )


MOVIE_MAC_PART = Struct(
    "unknown5" / Bytes(38),
    "unknown6" / Bytes(12),
)

MOVIE_WIN_PART = Struct(
    "unknown3" / Bytes(72),
    "unknown4" / Bytes(12),
    "unknown7" / Bytes(12),
)


@dataclass
class MovieAssetMacPart:
    unknown5: bytes = b''
    unknown6: bytes = b''


@dataclass
class MovieAssetWinPart:
    unknown3: bytes = b''
    unknown4: bytes = b''
    unknown7: bytes = b''


@dataclass
class MovieAsset(DataObject):
    """QuickTime movie asset; the movie data is located by offset."""

    TYPE: ClassVar[DataObjectType] = DataObjectType.MOVIE_ASSET
    LAYOUT: ClassVar[Struct] = Struct(
        "marker" / UInt32,
        "asset_and_data_combined_size" / UInt32,
        "unknown1" / Bytes(4),
        "asset_id" / UInt32,
        "movie_data_pos" / UInt32,
        "moov_atom_pos" / UInt32,
        "movie_data_size" / UInt32,
    )

    marker: int = 0
    asset_and_data_combined_size: int = 0
    unknown1: bytes = b''
    asset_id: int = 0
    movie_data_pos: int = 0
    moov_atom_pos: int = 0
    movie_data_size: int = 0
    platform: Union[MovieAssetMacPart, MovieAssetWinPart, None] = None

    def _load_fields(self, reader: DataReader, revision: int,
                     sp: SerializationProperties) -> None:
        super()._load_fields(reader, revision, sp)
        self.platform = _load_platform_part(
            reader, sp,
            MOVIE_MAC_PART, MovieAssetMacPart,
            MOVIE_WIN_PART, MovieAssetWinPart
        )
