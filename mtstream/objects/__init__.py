# mtstream/objects/__init__.py
"""Record variants of a project stream."""
from .base import DataObject, DataObjectType, decode_name, to_json_value
from .primitives import Event, Point, Rect
from .stream import Debris, EndOfStream, StreamHeader, Unknown3ec, Unknown17, Unknown19
from .label_map import LabelTree, ProjectLabelMap, SuperGroup
from .catalog import AssetCatalog, AssetCatalogFlags, AssetFlags, AssetInfo, AssetTypeID
from .structural import (
    AnimationFlags,
    ImageStructuralDef,
    MovieStructuralDef,
    MToonStructuralDef,
    ProjectStructuralDef,
    SceneStructuralDef,
    SectionStructuralDef,
    StructuralFlags,
    SubsectionStructuralDef,
)
from .modifiers import (
    BehaviorModifier,
    CursorIndex,
    MacOnlyCursorModifier,
    MacOnlyCursorPart,
    PlugInModifier,
)
from .assets import (
    AudioAsset,
    AudioAssetMacPart,
    AudioAssetWinPart,
    AudioEncoding,
    ColorDef,
    ColorTableAsset,
    MovieAsset,
    MovieAssetMacPart,
    MovieAssetWinPart,
)
from .placeholder import NotYetImplemented

__all__ = [
    'DataObject',
    'DataObjectType',
    'decode_name',
    'to_json_value',
    'Event',
    'Point',
    'Rect',
    'StreamHeader',
    'Unknown3ec',
    'Unknown17',
    'Unknown19',
    'Debris',
    'EndOfStream',
    'LabelTree',
    'SuperGroup',
    'ProjectLabelMap',
    'AssetCatalog',
    'AssetCatalogFlags',
    'AssetFlags',
    'AssetInfo',
    'AssetTypeID',
    'StructuralFlags',
    'AnimationFlags',
    'ProjectStructuralDef',
    'SectionStructuralDef',
    'SubsectionStructuralDef',
    'SceneStructuralDef',
    'ImageStructuralDef',
    'MovieStructuralDef',
    'MToonStructuralDef',
    'BehaviorModifier',
    'PlugInModifier',
    'CursorIndex',
    'MacOnlyCursorModifier',
    'MacOnlyCursorPart',
    'ColorDef',
    'ColorTableAsset',
    'AudioEncoding',
    'AudioAsset',
    'AudioAssetMacPart',
    'AudioAssetWinPart',
    'MovieAsset',
    'MovieAssetMacPart',
    'MovieAssetWinPart',
    'NotYetImplemented',
]
