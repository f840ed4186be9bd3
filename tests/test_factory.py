"""
Tests for tag dispatch and placeholder records
"""

import pytest

from mtstream.errors import InconsistentLengthError, TruncatedError
from mtstream.factory import (
    PLACEHOLDER_LABELS,
    ObjectRegistry,
    create_object_from_type,
    list_supported_types,
    object_registry,
    supports_type,
)
from mtstream.objects import DataObjectType, NotYetImplemented, PlugInModifier, StreamHeader
from tests import helpers
from tests.helpers import decode

WIRE_TYPES = [t for t in DataObjectType
              if t not in (DataObjectType.UNKNOWN, DataObjectType.NOT_YET_IMPLEMENTED)]


class TestDispatch:
    """Test creating records from type tags"""

    @pytest.mark.parametrize('object_type', WIRE_TYPES, ids=[t.name for t in WIRE_TYPES])
    def test_known_tag_reports_same_type(self, object_type):
        obj = create_object_from_type(int(object_type))
        assert obj.type == object_type
        assert not isinstance(obj, NotYetImplemented)

    @pytest.mark.parametrize('object_type', list(DataObjectType),
                             ids=[t.name for t in DataObjectType])
    def test_every_member_reports_same_type(self, object_type):
        """Placeholder members included"""
        assert create_object_from_type(int(object_type)).type == object_type

    def test_fresh_instance_each_call(self):
        first = create_object_from_type(0x3e9)
        second = create_object_from_type(0x3e9)
        assert isinstance(first, StreamHeader)
        assert first is not second

    def test_plug_in_tag(self):
        assert isinstance(create_object_from_type(0xffffffff), PlugInModifier)

    def test_unrecognized_tag(self):
        obj = create_object_from_type(0x12345)
        assert isinstance(obj, NotYetImplemented)
        assert obj.actual_type == 0x12345
        assert obj.type == DataObjectType.UNKNOWN
        assert obj.name is None

    def test_labelled_tag(self):
        obj = create_object_from_type(0x2da)
        assert isinstance(obj, NotYetImplemented)
        assert obj.actual_type == 0x2da
        assert obj.type == DataObjectType.NOT_YET_IMPLEMENTED
        assert obj.name == "messenger"

    def test_labels_never_shadow_decoded_tags(self):
        assert not any(supports_type(tag) for tag in PLACEHOLDER_LABELS)


class TestRegistry:
    """Test registry queries"""

    def test_supports_type(self):
        assert supports_type(0x22)
        assert not supports_type(0x2da)

    def test_list_supported_types(self):
        supported = list_supported_types()
        assert supported[0xd] == 'AssetCatalog'
        assert supported[0xfffffffe] == 'Debris'
        assert len(supported) == len(WIRE_TYPES)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            object_registry._classes[0x1] = StreamHeader

    def test_registries_agree(self):
        assert ObjectRegistry().list_supported_types() == list_supported_types()


class TestNotYetImplemented:
    """Test placeholder decoding"""

    def test_skips_declared_bytes(self, sp):
        body = helpers.placeholder(size=20, big=sp.is_byte_swapped) + b'\x01'
        obj = create_object_from_type(0x2da)
        reader = decode(obj, body, 3, sp)

        assert reader.position == 14
        assert obj.size_including_tag == 20
        assert obj.revision == 3
        assert reader.read_u8() == 1

    def test_minimum_size(self, mac):
        obj = create_object_from_type(0x2da)
        reader = decode(obj, helpers.placeholder(size=14), 0, mac)
        assert reader.position == 8

    def test_size_below_header(self, mac):
        obj = create_object_from_type(0x999)
        with pytest.raises(InconsistentLengthError):
            decode(obj, helpers.placeholder(size=13), 0, mac)

    def test_truncated_body(self, mac):
        body = helpers.placeholder(size=30)
        for cut in range(len(body)):
            with pytest.raises(TruncatedError):
                decode(create_object_from_type(0x2da), body[:cut], 0, mac)

    def test_dict_keeps_raw_tag(self, win):
        obj = create_object_from_type(0x321)
        decode(obj, helpers.placeholder(size=16, big=False), 1, win)
        result = obj.to_dict(win.system_type)
        assert result['actual_type'] == 0x321
        assert result['name'] == "boolean variable"
        assert result['revision'] == 1
