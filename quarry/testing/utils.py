"""
Quarry Testing - Search-path entry builders.

Helpers that lay out directory trees and zip archives under a scratch
directory so scans can run against real storage.
"""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Dict, Iterable


SCAN_NAMESPACE = "io.github.mighten.scan"

SCAN_LAYOUT: Dict[str, bytes] = {
    "io/github/mighten/scan/custom/Level1Class.class": b"\xca\xfe\xba\xbe",
    "io/github/mighten/scan/custom/AnnotationScan.class": b"\xca\xfe\xba\xbe",
    "io/github/mighten/scan/custom/level2/Level2Class.class": b"\xca\xfe\xba\xbe",
    "io/github/mighten/scan/custom/readme.txt": b"not a class",
    "io/github/other/Unrelated.class": b"\xca\xfe\xba\xbe",
}


def make_tree(root: Path, files: Dict[str, bytes]) -> Path:
    """
    Write ``files`` under ``root``.

    Args:
        root: Directory to create the tree in
        files: Mapping of slash-separated relative names to contents

    Returns:
        ``root``
    """
    for name, data in files.items():
        target = root.joinpath(*name.split("/"))
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    return root


def _parents(name: str) -> Iterable[str]:
    parts = name.split("/")[:-1]
    for i in range(1, len(parts) + 1):
        yield "/".join(parts[:i]) + "/"


def make_archive(path: Path, files: Dict[str, bytes], *, dir_entries: bool = True) -> Path:
    """
    Write a zip archive holding ``files``.

    Args:
        path: Archive to create (parents are created)
        files: Mapping of member names to contents
        dir_entries: Also write ``a/``, ``a/b/`` directory members,
            as jar tools do

    Returns:
        ``path``
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as zf:
        written = set()
        for name, data in files.items():
            if dir_entries:
                for parent in _parents(name):
                    if parent not in written:
                        zf.writestr(parent, b"")
                        written.add(parent)
            zf.writestr(name, data)
    return path
