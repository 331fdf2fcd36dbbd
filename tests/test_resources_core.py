"""
Resources core: namespace translation, records, location helpers.
"""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from quarry.resources.core import (
    ResourceRecord,
    ScanRequest,
    archive_location,
    bare_to_path,
    directory_location,
    remove_leading_slash,
    remove_trailing_slash,
    translate_namespace,
)


# ============================================================================
# Namespace translation
# ============================================================================

class TestTranslateNamespace:

    def test_dotted(self):
        assert translate_namespace("io.github.mighten.scan") == "io/github/mighten/scan"

    def test_single_segment(self):
        assert translate_namespace("a") == "a"

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            translate_namespace("")

    def test_scan_request_derives_path(self):
        assert ScanRequest("a.b.c").translated_path == "a/b/c"

    def test_scan_request_rejects_empty(self):
        with pytest.raises(ValueError):
            ScanRequest("")


# ============================================================================
# Records
# ============================================================================

class TestResourceRecord:

    def test_fields(self):
        r = ResourceRecord(base="jar:file:/x.jar!", name="a/B.class")
        assert r.base == "jar:file:/x.jar!"
        assert r.name == "a/B.class"
        assert str(r) == "a/B.class"

    def test_frozen(self):
        r = ResourceRecord(base="b", name="n")
        with pytest.raises(FrozenInstanceError):
            r.name = "other"

    def test_equality(self):
        assert ResourceRecord("b", "n") == ResourceRecord("b", "n")


# ============================================================================
# Slash helpers
# ============================================================================

class TestSlashHelpers:

    @pytest.mark.parametrize("raw, expected", [
        ("/a/b", "a/b"),
        ("\\a\\b", "a\\b"),
        ("a/b", "a/b"),
        ("//a", "/a"),
    ])
    def test_remove_leading_slash(self, raw, expected):
        assert remove_leading_slash(raw) == expected

    @pytest.mark.parametrize("raw, expected", [
        ("a/b/", "a/b"),
        ("a/b\\", "a/b"),
        ("a/b", "a/b"),
        ("a//", "a/"),
    ])
    def test_remove_trailing_slash(self, raw, expected):
        assert remove_trailing_slash(raw) == expected


# ============================================================================
# Locations
# ============================================================================

class TestLocations:

    def test_directory_location(self, tmp_path):
        loc = directory_location(tmp_path / "io" / "github")
        assert loc.startswith("file:/")
        assert loc.endswith("/io/github/")

    def test_directory_location_percent_encodes(self, tmp_path):
        loc = directory_location(tmp_path / "with space" / "pkg")
        assert "with%20space" in loc
        assert " " not in loc

    def test_archive_location(self, tmp_path):
        loc = archive_location(tmp_path / "app.jar", "io/github/")
        assert loc.startswith("jar:file:/")
        assert loc.endswith("app.jar!/io/github/")

    def test_bare_to_path_plain(self):
        assert bare_to_path("/srv/classes") == Path("/srv/classes")

    def test_bare_to_path_drive_letter(self):
        assert bare_to_path("/C:/classes") == Path("C:/classes")
