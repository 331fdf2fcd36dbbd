"""
Quarry resources — Directory and archive walkers.

Both walkers visit every entry under a root, keep regular files only and
yield one ResourceRecord per file. Names are normalized identically: the
base prefix is removed, a single leading separator stripped, and forward
slashes used regardless of the host separator.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from .archive import ArchiveNode
from .core import (
    FILE_SCHEME,
    ResourceRecord,
    RootRecord,
    bare_to_path,
    posix_string,
    remove_leading_slash,
    remove_trailing_slash,
)
from .faults import TraversalFault

logger = logging.getLogger("quarry.resources.walkers")


class DirectoryWalker:
    """Walks a plain directory tree."""

    def walk(self, root: RootRecord) -> Iterator[ResourceRecord]:
        """
        Yield a record for every regular file under ``root.directory``.

        Symlinked directories are listed but not descended into.

        Raises:
            TraversalFault: On any I/O failure while listing a directory
        """
        base_dir = posix_string(bare_to_path(remove_trailing_slash(root.base)))
        top = root.directory if root.directory is not None else bare_to_path(root.decoded)

        def _fail(err: OSError) -> None:
            raise TraversalFault(str(top), err.strerror or str(err), entry=err.filename) from err

        for dirpath, _dirnames, filenames in os.walk(top, onerror=_fail):
            for filename in filenames:
                file = Path(dirpath, filename)
                if not file.is_file():
                    continue

                path = posix_string(file)
                yield ResourceRecord(
                    base=FILE_SCHEME + path,
                    name=remove_leading_slash(path[len(base_dir):]),
                )


class ArchiveWalker:
    """Walks a mounted archive node."""

    def walk(self, root: RootRecord, node: ArchiveNode) -> Iterator[ResourceRecord]:
        """
        Yield a record for every regular member under ``node``.

        All records share ``root.base`` with its trailing slash stripped.

        Raises:
            TraversalFault: If the node was closed before the walk finished
        """
        base = remove_trailing_slash(root.base)

        for info in node.files():
            if node.closed:
                raise TraversalFault(str(node.archive), "archive closed during walk", entry=info.filename)
            yield ResourceRecord(base=base, name=remove_leading_slash(info.filename))
