"""
Object factory: maps stream type tags to record classes
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Type

from .objects.base import DataObject, DataObjectType
from .objects.stream import (
    StreamHeader,
    Unknown3ec,
    Unknown17,
    Unknown19,
    Debris,
    EndOfStream
)
from .objects.label_map import ProjectLabelMap
from .objects.catalog import AssetCatalog
from .objects.structural import (
    ProjectStructuralDef,
    SectionStructuralDef,
    SubsectionStructuralDef,
    SceneStructuralDef,
    ImageStructuralDef,
    MovieStructuralDef,
    MToonStructuralDef
)
from .objects.modifiers import (
    BehaviorModifier,
    PlugInModifier,
    MacOnlyCursorModifier
)
from .objects.assets import (
    ColorTableAsset,
    AudioAsset,
    MovieAsset
)
from .objects.placeholder import NotYetImplemented

# Records known to exist that are skipped rather than decoded
PLACEHOLDER_LABELS: Mapping[int, str] = MappingProxyType({
    # Reported by placeholders, never stored in a stream
    int(DataObjectType.NOT_YET_IMPLEMENTED): "not yet implemented",

    0x3e8: "project catalog",
    0x3ea: "project header",

    # Elements
    0xa: "sound element",
    0x15: "text label element",

    # Modifiers
    0x27: "alias modifier",
    0x136: "change scene modifier",
    0x140: "return modifier",
    0x1a4: "sound effect modifier",
    0x1388: "simple motion modifier",
    0x208: "drag motion modifier",
    0x21b: "path motion modifier",
    0x226: "vector motion modifier",
    0x26c: "scene transition modifier",
    0x276: "element transition modifier",
    0x29a: "shared scene modifier",
    0x2bc: "if messenger",
    0x2da: "messenger",
    0x2df: "set modifier",
    0x2e4: "timer messenger",
    0x2ee: "collision detection messenger",
    0x2f8: "boundary detection messenger",
    0x302: "keyboard messenger",
    0x32a: "text style modifier",
    0x334: "graphic modifier",
    0x384: "image effect modifier",
    0x3c0: "miniscript modifier",
    0x4b0: "gradient modifier",
    0x4c4: "color table modifier",
    0x4d8: "save and restore modifier",

    # Variables
    0x2c7: "compound variable",
    0x321: "boolean variable",
    0x322: "integer variable",
    0x324: "integer range variable",
    0x326: "point variable",
    0x327: "vector variable",
    0x328: "floating point variable",
    0x329: "string variable",
    0x33e: "object reference variable",

    # Assets
    0xe: "image asset",
    0xf: "mToon asset",
    0x1f: "text asset",
})


class ObjectRegistry:
    """
    Immutable table of record classes keyed by type tag
    Built once and shared; lookups never modify it
    """

    def __init__(self):
        classes = [
            StreamHeader,
            Unknown3ec,
            Unknown17,
            Unknown19,
            Debris,
            EndOfStream,
            ProjectLabelMap,
            AssetCatalog,

            # Structure
            ProjectStructuralDef,
            SectionStructuralDef,
            SubsectionStructuralDef,
            SceneStructuralDef,
            ImageStructuralDef,
            MovieStructuralDef,
            MToonStructuralDef,

            # Modifiers
            BehaviorModifier,
            PlugInModifier,
            MacOnlyCursorModifier,

            # Assets
            ColorTableAsset,
            AudioAsset,
            MovieAsset
        ]
        table: Dict[int, Type[DataObject]] = {}
        for object_class in classes:
            table[int(object_class.TYPE)] = object_class
        self._classes: Mapping[int, Type[DataObject]] = MappingProxyType(table)

    def get_class(self, tag: int) -> Optional[Type[DataObject]]:
        """Record class for a tag, or None if the tag is not decoded"""
        return self._classes.get(tag)

    def create(self, tag: int) -> DataObject:
        """
        Create an empty record for the given type tag

        Args:
            tag: Type tag read from the stream

        Returns:
            Fresh record of the matching class, or a NotYetImplemented
            placeholder carrying the raw tag
        """
        object_class = self._classes.get(tag)
        if object_class is not None:
            return object_class()
        return NotYetImplemented(actual_type=tag, name=PLACEHOLDER_LABELS.get(tag))

    def supports_type(self, tag: int) -> bool:
        """Check if a tag decodes to a real record rather than a placeholder"""
        return tag in self._classes

    def list_supported_types(self) -> Dict[int, str]:
        """
        List all decoded tags

        Returns:
            Dictionary mapping tags to record class names
        """
        return {tag: object_class.__name__ for tag, object_class in sorted(self._classes.items())}


# Global registry instance
object_registry = ObjectRegistry()


def create_object_from_type(tag: int) -> DataObject:
    """Create an empty record for ``tag`` using the global registry"""
    return object_registry.create(tag)


def supports_type(tag: int) -> bool:
    return object_registry.supports_type(tag)


def list_supported_types() -> Dict[int, str]:
    return object_registry.list_supported_types()
