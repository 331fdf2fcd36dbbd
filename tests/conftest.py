"""
Shared test fixtures for the Quarry test suite.
"""

from pathlib import Path

import pytest

from quarry.testing import SCAN_LAYOUT, make_archive, make_tree


@pytest.fixture
def class_tree(tmp_path) -> Path:
    """Directory search-path entry holding the scan layout."""
    return make_tree(tmp_path / "classes", SCAN_LAYOUT)


@pytest.fixture
def class_jar(tmp_path) -> Path:
    """Archive search-path entry holding the scan layout."""
    return make_archive(tmp_path / "lib" / "app.jar", SCAN_LAYOUT)


@pytest.fixture
def expected_classes():
    return {
        "io.github.mighten.scan.custom.AnnotationScan",
        "io.github.mighten.scan.custom.Level1Class",
        "io.github.mighten.scan.custom.level2.Level2Class",
    }
