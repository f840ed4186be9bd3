# mtstream/objects/catalog.py
"""Asset catalog: ordered table of asset names, types and positions."""
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import ClassVar, List, Optional

from construct import Struct

from ..constants import ASSET_CATALOG_NAME_SIZE_BIAS
from ..errors import InconsistentLengthError
from ..layouts import Bytes, UInt16, UInt32
from ..reader import DataReader, SerializationProperties
from .base import DataObject, DataObjectType


class AssetTypeID(IntEnum):
    """Asset kinds as stored in catalog entries."""
    COLOR_TABLE = 0x02
    IMAGE = 0x0e
    MTOON = 0x10
    UNKNOWN_1F = 0x1f        # Appears to be an image, but always nameless
    WAVEFORM_SOUND = 0x54
    MOVIE = 0x55
    MIDI = 0x5c


class AssetFlags(IntFlag):
    EXTERNAL = 0x4000


class AssetCatalogFlags(IntFlag):
    DELETED = 1
    LIMIT_ONE_PER_SEGMENT = 2


# Entries gained the secondary flags word in revision 4
FLAGS2_REVISION = 4

_ENTRY_FIELDS = [
    "flags1" / UInt32,
    "name_length" / UInt16,
    "always_zero" / UInt16,
    "unknown1" / UInt32,          # Possibly scene ID
    "file_position" / UInt32,     # Static in some titles
    "asset_type" / UInt32,
]

ASSET_INFO_LAYOUT = Struct(*_ENTRY_FIELDS, "flags2" / UInt32)
ASSET_INFO_LAYOUT_NO_FLAGS2 = Struct(*_ENTRY_FIELDS)


@dataclass
class AssetInfo:
    """One catalog entry."""
    flags1: int = 0
    name_length: int = 0
    always_zero: int = 0
    unknown1: int = 0
    file_position: int = 0
    asset_type: int = 0
    flags2: int = 0
    name: bytes = b''

    @property
    def asset_type_id(self) -> Optional[AssetTypeID]:
        try:
            return AssetTypeID(self.asset_type)
        except ValueError:
            return None

    @property
    def is_deleted(self) -> bool:
        return bool(self.flags1 & AssetCatalogFlags.DELETED)

    @property
    def limit_one_per_segment(self) -> bool:
        return bool(self.flags1 & AssetCatalogFlags.LIMIT_ONE_PER_SEGMENT)

    @property
    def is_external(self) -> bool:
        return bool(self.flags2 & AssetFlags.EXTERNAL)

    @classmethod
    def load(cls, reader: DataReader, revision: int) -> 'AssetInfo':
        layout = ASSET_INFO_LAYOUT if revision >= FLAGS2_REVISION else ASSET_INFO_LAYOUT_NO_FLAGS2
        parsed = reader.parse(layout)
        info = cls(**{key: value for key, value in parsed.items() if not key.startswith('_')})
        info.name = reader.read_name(info.name_length)
        return info


@dataclass
class AssetCatalog(DataObject):
    """Catalog of every asset in the project, in stream order.

    Order matters: consumers look assets up by position.
    """

    TYPE: ClassVar[DataObjectType] = DataObjectType.ASSET_CATALOG
    REVISIONS: ClassVar[tuple] = (2, 4)
    LAYOUT: ClassVar[Struct] = Struct(
        "marker" / UInt32,
        "total_name_size_plus_22" / UInt32,
        "unknown1" / Bytes(4),
        "num_assets" / UInt32,
    )

    marker: int = 0
    total_name_size_plus_22: int = 0
    unknown1: bytes = b''
    num_assets: int = 0
    assets: List[AssetInfo] = field(default_factory=list)

    def _load_fields(self, reader: DataReader, revision: int,
                     sp: SerializationProperties) -> None:
        start = reader.position
        self._assign(reader.parse(self.LAYOUT))

        self.assets = []
        for _ in range(self.num_assets):
            self.assets.append(AssetInfo.load(reader, revision))

        name_total = ASSET_CATALOG_NAME_SIZE_BIAS + sum(a.name_length for a in self.assets)
        if name_total != self.total_name_size_plus_22:
            raise InconsistentLengthError(
                f"Asset catalog declares {self.total_name_size_plus_22} name bytes "
                f"(plus 22) but its entries hold {name_total}",
                start
            )
