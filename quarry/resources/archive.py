"""
Quarry resources — Archive mounting.

An archive is opened once, its member index read into memory, and members
filtered by prefix. No virtual filesystem is mounted; the node behaves
like a read-only view of one directory inside the archive.
"""

from __future__ import annotations

import logging
import stat
import zipfile
from pathlib import Path
from typing import Iterator, List, Optional

from .classifier import decode_location
from .core import (
    ARCHIVE_SCHEMES,
    ARCHIVE_SEPARATOR,
    FILE_SCHEME,
    bare_to_path,
)
from .faults import ArchiveOpenFault, MalformedLocationFault

logger = logging.getLogger("quarry.resources.archive")


def split_archive_location(location: str) -> tuple[Path, str]:
    """
    Split ``jar:file:/x.jar!/a/b/`` into ``(Path('/x.jar'), 'a/b')``.

    Raises:
        MalformedLocationFault: If the location has no archive scheme,
            no ``!/`` separator, or points at a non-local archive
    """
    decoded = decode_location(location)

    for scheme in ARCHIVE_SCHEMES:
        if decoded.startswith(scheme):
            decoded = decoded[len(scheme):]
            break
    else:
        raise MalformedLocationFault(location, "missing archive scheme")

    archive, sep, inner = decoded.partition(ARCHIVE_SEPARATOR)
    if not sep:
        raise MalformedLocationFault(location, f"missing '{ARCHIVE_SEPARATOR}' separator")
    if not archive.startswith(FILE_SCHEME):
        raise MalformedLocationFault(location, "archive is not a local file")

    return bare_to_path(archive[len(FILE_SCHEME):]), inner.strip("/")


class ArchiveNode:
    """
    Read-only view of one directory inside an open archive.

    Use as a context manager; the archive handle is closed on exit
    whether or not the walk succeeded.
    """

    def __init__(self, archive: Path, path: str, handle: zipfile.ZipFile, index: List[zipfile.ZipInfo]):
        self.archive = archive
        self.path = path
        self._handle: Optional[zipfile.ZipFile] = handle
        self._index = index

    def __repr__(self) -> str:
        return f"<ArchiveNode {self.archive}!/{self.path} members={len(self._index)}>"

    def __enter__(self) -> "ArchiveNode":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._handle is None

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
            logger.debug("archive closed: %s", self.archive)

    def members(self) -> Iterator[zipfile.ZipInfo]:
        """Every member under this node, in archive order."""
        return iter(self._index)

    def files(self) -> Iterator[zipfile.ZipInfo]:
        """Regular-file members only; directories and symlinks are skipped."""
        for info in self._index:
            if is_regular_member(info):
                yield info


def is_regular_member(info: zipfile.ZipInfo) -> bool:
    if info.is_dir():
        return False
    file_type = stat.S_IFMT(info.external_attr >> 16)
    # Members written without unix file-type bits count as regular
    return file_type == 0 or file_type == stat.S_IFREG


class ArchiveMounter:
    """Opens archive-backed roots."""

    def mount(self, translated_path: str, location: str) -> ArchiveNode:
        """
        Resolve the node for ``translated_path`` inside the archive at ``location``.

        Args:
            translated_path: Slash form of the scanned namespace
            location: Archive root location, e.g. ``jar:file:/x.jar!/a/b/``

        Returns:
            An open ArchiveNode (caller must close it)

        Raises:
            MalformedLocationFault: If the location cannot be parsed
            ArchiveOpenFault: If the archive cannot be opened or holds no
                member under ``translated_path``
        """
        archive, _ = split_archive_location(location)
        path = translated_path.strip("/")

        try:
            handle = zipfile.ZipFile(archive)
        except (OSError, zipfile.BadZipFile) as e:
            raise ArchiveOpenFault(str(archive), path, str(e)) from e

        prefix = path + "/"
        index = [info for info in handle.infolist() if info.filename.startswith(prefix)]

        if not index:
            handle.close()
            raise ArchiveOpenFault(str(archive), path, "path does not exist in archive")

        logger.debug("archive mounted: %s!/%s (%d members)", archive, path, len(index))
        return ArchiveNode(archive, path, handle, index)
