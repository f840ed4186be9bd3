"""
Tests for revision resolution
"""

import logging
import pytest

from mtstream.errors import DataReadErrorKind, UnsupportedRevisionError
from mtstream.objects import AssetCatalog, Debris, SectionStructuralDef, Unknown3ec
from tests import helpers
from tests.helpers import decode


class TestRevisionPolicy:
    """Known, newer and older revisions"""

    def test_known_revision_is_silent(self, mac, caplog):
        with caplog.at_level(logging.WARNING):
            decode(SectionStructuralDef(), helpers.section_def(), 1, mac)
        assert not caplog.records

    def test_newer_revision_falls_back_with_warning(self, mac, caplog):
        obj = SectionStructuralDef()
        with caplog.at_level(logging.WARNING):
            decode(obj, helpers.section_def(b'Main'), 3, mac)
        assert obj.name == b'Main'
        assert any("revision 3" in record.getMessage() for record in caplog.records)
        assert caplog.records[0].levelno == logging.WARNING

    def test_between_known_revisions_uses_older_layout(self, mac, caplog):
        """Revision 3 of the catalog is read with the revision 2 entry layout"""
        names = [b'One']
        body = helpers.asset_catalog(
            [helpers.asset_info(b'One', 0x0e, with_flags2=False)], names
        )
        obj = AssetCatalog()
        with caplog.at_level(logging.WARNING):
            reader = decode(obj, body, 3, mac)
        assert reader.position == len(body)
        assert obj.assets[0].name == b'One'
        assert "decoding as revision 2" in caplog.text

    def test_older_revision_is_rejected(self, mac):
        with pytest.raises(UnsupportedRevisionError) as excinfo:
            decode(Unknown3ec(), helpers.unknown_3ec(), 1, mac)
        assert excinfo.value.kind is DataReadErrorKind.UNSUPPORTED_REVISION
        assert excinfo.value.revision == 1

    def test_resolve_revision(self):
        assert Debris().resolve_revision(0) == 0
        assert AssetCatalog().resolve_revision(4) == 4
        assert AssetCatalog().resolve_revision(7) == 4
        with pytest.raises(UnsupportedRevisionError):
            AssetCatalog().resolve_revision(1)
