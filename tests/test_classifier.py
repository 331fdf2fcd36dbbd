"""
Root classification: decoding, base derivation, archive detection.
"""

from pathlib import Path

import pytest

from quarry.resources.classifier import classify, decode_location, is_archive_location
from quarry.resources.faults import MalformedLocationFault


class TestDecode:

    def test_percent_escapes(self):
        assert decode_location("file:/srv/my%20classes/a") == "file:/srv/my classes/a"

    def test_plus_is_not_space(self):
        assert decode_location("file:/srv/c++/a") == "file:/srv/c++/a"

    def test_archive_detection_uses_raw_location(self):
        assert is_archive_location("jar:file:/x.jar!/a/")
        assert is_archive_location("zip:file:/x.zip!/a/")
        assert not is_archive_location("file:/srv/jar:/a/")


class TestDirectoryRoots:

    def test_base_strips_namespace_and_scheme(self):
        root = classify("file:/srv/classes/io/github/", "io/github")
        assert root.is_archive is False
        assert root.base == "/srv/classes/"
        assert root.decoded == "file:/srv/classes/io/github"
        assert root.directory == Path("/srv/classes/io/github")

    def test_without_trailing_slash(self):
        root = classify("file:/srv/classes/io/github", "io/github")
        assert root.base == "/srv/classes/"

    def test_decoded_before_base_is_derived(self):
        root = classify("file:/srv/my%20classes/a/", "a")
        assert root.base == "/srv/my classes/"
        assert root.directory == Path("/srv/my classes/a")

    def test_unknown_scheme_falls_back_to_directory(self):
        root = classify("vfs:/bundle/a/", "a")
        assert root.is_archive is False
        assert root.base == "vfs:/bundle/"

    def test_location_is_kept_verbatim(self):
        loc = "file:/srv/my%20classes/a/"
        assert classify(loc, "a").location == loc


class TestArchiveRoots:

    def test_archive_base(self):
        root = classify("jar:file:/srv/lib/app.jar!/io/github/", "io/github")
        assert root.is_archive is True
        assert root.base == "jar:file:/srv/lib/app.jar!/"
        assert root.directory is None

    def test_encoded_archive_path(self):
        root = classify("jar:file:/srv/my%20lib/app.jar!/a/", "a")
        assert root.base == "jar:file:/srv/my lib/app.jar!/"


class TestMalformed:

    def test_empty_location(self):
        with pytest.raises(MalformedLocationFault):
            classify("", "a")

    def test_location_not_ending_with_path(self):
        with pytest.raises(MalformedLocationFault) as exc_info:
            classify("file:/srv/classes/other/", "io/github")
        assert exc_info.value.code == "LOCATION_MALFORMED"
        assert exc_info.value.metadata["location"] == "file:/srv/classes/other/"

    def test_non_utf8_escape_keeps_raw_bytes(self):
        root = classify("file:/srv/cls%FF/a/", "a")
        assert root.base == "/srv/cls\udcff/"
        assert root.directory == Path("/srv/cls\udcff/a")
