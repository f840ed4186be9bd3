# mtstream/objects/primitives.py
"""Small fixed structures embedded in several records."""
from dataclasses import dataclass

from construct import Adapter, Struct

from ..layouts import SInt16, UInt32
from ..reader import DataReader


@dataclass
class Rect:
    top: int = 0
    left: int = 0
    bottom: int = 0
    right: int = 0

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @classmethod
    def load(cls, reader: DataReader) -> 'Rect':
        """Read an 8 byte rectangle (four s16)."""
        return reader.parse(RectField)


@dataclass
class Point:
    top: int = 0
    left: int = 0

    @classmethod
    def load(cls, reader: DataReader) -> 'Point':
        """Read a 4 byte point (two s16)."""
        return reader.parse(PointField)


@dataclass
class Event:
    """Reference to a message: event id plus event-specific info."""
    event_id: int = 0
    event_info: int = 0

    @classmethod
    def load(cls, reader: DataReader) -> 'Event':
        return reader.parse(EventField)


# Layout adapters
class RectAdapter(Adapter):
    def _decode(self, obj, context, path):
        return Rect(top=obj.top, left=obj.left, bottom=obj.bottom, right=obj.right)


class PointAdapter(Adapter):
    def _decode(self, obj, context, path):
        return Point(top=obj.top, left=obj.left)


class EventAdapter(Adapter):
    def _decode(self, obj, context, path):
        return Event(event_id=obj.event_id, event_info=obj.event_info)


RectField = RectAdapter(Struct(
    "top" / SInt16,
    "left" / SInt16,
    "bottom" / SInt16,
    "right" / SInt16,
))

PointField = PointAdapter(Struct(
    "top" / SInt16,
    "left" / SInt16,
))

EventField = EventAdapter(Struct(
    "event_id" / UInt32,
    "event_info" / UInt32,
))
