# mtstream/__init__.py
"""Typed decoder for authoring-tool project data streams."""
from .errors import (
    DataReadError,
    DataReadErrorKind,
    InconsistentLengthError,
    InvalidMarkerError,
    TruncatedError,
    UnsupportedRevisionError,
)
from .reader import DataReader, SerializationProperties, SystemType
from .objects import DataObject, DataObjectType, NotYetImplemented
from .factory import create_object_from_type, list_supported_types, supports_type
from .walker import StreamRecord, StreamWalker, detect_serialization_properties

__version__ = '0.1.0'

__all__ = [
    'DataReadError',
    'DataReadErrorKind',
    'InconsistentLengthError',
    'InvalidMarkerError',
    'TruncatedError',
    'UnsupportedRevisionError',
    'DataReader',
    'SerializationProperties',
    'SystemType',
    'DataObject',
    'DataObjectType',
    'NotYetImplemented',
    'create_object_from_type',
    'list_supported_types',
    'supports_type',
    'StreamRecord',
    'StreamWalker',
    'detect_serialization_properties',
]
