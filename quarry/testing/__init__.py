"""
Quarry Testing - Helpers for exercising resource scans.

Usage:
    from quarry.testing import make_tree, make_archive, StubSearchPath

    def test_scan(tmp_path):
        make_tree(tmp_path, {"a/B.class": b""})
        ...

Components:
    - make_tree / make_archive: Lay out search-path entries on disk
    - StubSearchPath:           Provider returning canned locations
    - SpyArchiveMounter:        Mounter recording the nodes it opened
"""

from .utils import SCAN_LAYOUT, SCAN_NAMESPACE, make_archive, make_tree
from .doubles import SpyArchiveMounter, StubSearchPath

__all__ = [
    "SCAN_LAYOUT",
    "SCAN_NAMESPACE",
    "make_archive",
    "make_tree",
    "SpyArchiveMounter",
    "StubSearchPath",
]
