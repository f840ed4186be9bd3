# mtstream/objects/label_map.py
"""Project label map: super groups holding recursive label trees."""
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, List, Optional
import logging

from construct import Struct

from ..constants import LABEL_MAP_CONSTANT, MAX_LABEL_TREE_DEPTH
from ..errors import InconsistentLengthError, InvalidMarkerError
from ..layouts import UInt32
from ..reader import DataReader, SerializationProperties
from .base import DataObject, DataObjectType

logger = logging.getLogger(__name__)

LABEL_TREE_HEADER = Struct(
    "name_length" / UInt32,
    "is_group" / UInt32,
    "id" / UInt32,
    "unknown1" / UInt32,
    "flags" / UInt32,
)

SUPER_GROUP_HEADER = Struct(
    "name_length" / UInt32,
    "unknown1" / UInt32,
    "unknown2" / UInt32,
)


def _public(parsed) -> dict:
    return {key: value for key, value in parsed.items() if not key.startswith('_')}


@dataclass
class LabelTree:
    """One label or label group. Owns its children."""

    EXPANDED_IN_EDITOR: ClassVar[int] = 0x80000000

    name_length: int = 0
    is_group: int = 0
    id: int = 0
    unknown1: int = 0
    flags: int = 0
    name: bytes = b''
    num_children: int = 0
    children: List['LabelTree'] = field(default_factory=list)

    @property
    def expanded_in_editor(self) -> bool:
        return bool(self.flags & self.EXPANDED_IN_EDITOR)

    def walk(self) -> Iterator['LabelTree']:
        """Yield this node and its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass
class SuperGroup:
    """Named root of one label tree."""
    name_length: int = 0
    unknown1: int = 0
    unknown2: int = 0
    name: bytes = b''
    tree: LabelTree = field(default_factory=LabelTree)


def load_label_tree(reader: DataReader, revision: int, depth: int = 0) -> LabelTree:
    """Read a label tree node and, recursively, all of its children.

    Children are read in stream order, each one completely before the
    next. The declared child count is never used to preallocate, so a
    count that overruns the stream ends in TruncatedError.
    """
    if depth > MAX_LABEL_TREE_DEPTH:
        raise InconsistentLengthError(
            f"Label tree nested deeper than {MAX_LABEL_TREE_DEPTH} levels",
            reader.position
        )

    node = LabelTree(**_public(reader.parse(LABEL_TREE_HEADER)))
    node.name = reader.read_name(node.name_length)
    node.num_children = reader.read_u32()
    for _ in range(node.num_children):
        node.children.append(load_label_tree(reader, revision, depth + 1))
    return node


def load_super_group(reader: DataReader, revision: int) -> SuperGroup:
    group = SuperGroup(**_public(reader.parse(SUPER_GROUP_HEADER)))
    group.name = reader.read_name(group.name_length)
    group.tree = load_label_tree(reader, revision)
    return group


@dataclass
class ProjectLabelMap(DataObject):
    """Label hierarchy of the whole project.

    Any failure inside a tree aborts the whole map; there is no
    partial result.
    """

    TYPE: ClassVar[DataObjectType] = DataObjectType.PROJECT_LABEL_MAP
    LAYOUT: ClassVar[Struct] = Struct(
        "marker" / UInt32,
        "unknown1" / UInt32,      # Always 0x16
        "num_super_groups" / UInt32,
        "next_available_id" / UInt32,
    )

    marker: int = 0
    unknown1: int = 0
    num_super_groups: int = 0
    next_available_id: int = 0
    super_groups: List[SuperGroup] = field(default_factory=list)

    def _load_fields(self, reader: DataReader, revision: int,
                     sp: SerializationProperties) -> None:
        start = reader.position
        self._assign(reader.parse(self.LAYOUT))
        if self.unknown1 != LABEL_MAP_CONSTANT:
            raise InvalidMarkerError(
                "label map constant", LABEL_MAP_CONSTANT, self.unknown1, start
            )

        self.super_groups = []
        for _ in range(self.num_super_groups):
            self.super_groups.append(load_super_group(reader, revision))
        logger.debug(f"Label map holds {len(self.super_groups)} super groups")

    def iter_labels(self) -> Iterator[LabelTree]:
        """Every label node of every super group, in stream order."""
        for group in self.super_groups:
            yield from group.tree.walk()

    def find_label(self, label_id: int) -> Optional[LabelTree]:
        for label in self.iter_labels():
            if label.id == label_id:
                return label
        return None
