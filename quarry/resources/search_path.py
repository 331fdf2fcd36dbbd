"""
Quarry resources — Search-path providers.

A provider answers one question: which roots currently expose a relative
path? Roots are reported as location identifiers in provider order.
Overlapping entries are reported once per entry, never deduplicated.
"""

from __future__ import annotations

import logging
import sys
import zipfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .core import archive_location, directory_location
from .faults import LocationLookupFault

logger = logging.getLogger("quarry.resources.search_path")

DEFAULT_ARCHIVE_SUFFIXES = (".jar", ".zip", ".whl", ".egg")


class SearchPathProvider(ABC):
    """Enumerates the roots exposing a relative path."""

    @abstractmethod
    def find_roots(self, relative_path: str) -> List[str]:
        """
        Return the location of every root exposing ``relative_path``.

        Args:
            relative_path: Forward-slash path, e.g. ``io/github/mighten``

        Returns:
            Location identifiers in provider order (possibly empty)

        Raises:
            LocationLookupFault: If an entry cannot be inspected
        """
        ...


class StaticSearchPath(SearchPathProvider):
    """
    Fixed, ordered list of directories and archives configured at startup.

    Entries that do not exist are skipped. Files whose suffix is not an
    archive suffix are ignored.
    """

    def __init__(
        self,
        entries: Iterable[str | Path],
        archive_suffixes: Sequence[str] = DEFAULT_ARCHIVE_SUFFIXES,
    ):
        self.entries: List[Path] = [Path(e) for e in entries]
        self.archive_suffixes = tuple(s.lower() for s in archive_suffixes)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} entries={len(self.entries)}>"

    def find_roots(self, relative_path: str) -> List[str]:
        relative_path = relative_path.strip("/")
        roots: List[str] = []

        for entry in self._iter_entries():
            location = self._probe(entry, relative_path)
            if location is not None:
                logger.debug("root found: %s", location)
                roots.append(location)

        return roots

    def _iter_entries(self) -> Iterable[Path]:
        return iter(self.entries)

    def _probe(self, entry: Path, relative_path: str) -> Optional[str]:
        """Return the location of ``relative_path`` under ``entry``, if exposed."""
        try:
            if entry.is_dir():
                candidate = entry / relative_path
                if candidate.is_dir():
                    return directory_location(candidate)
                return None

            if entry.is_file() and entry.suffix.lower() in self.archive_suffixes:
                if self._archive_exposes(entry, relative_path):
                    return archive_location(entry, relative_path)
                return None

        except (OSError, UnicodeError, zipfile.BadZipFile) as e:
            raise LocationLookupFault(relative_path, str(e), entry=str(entry)) from e

        logger.debug("skipping search path entry %s", entry)
        return None

    @staticmethod
    def _archive_exposes(archive: Path, relative_path: str) -> bool:
        prefix = relative_path + "/"
        with zipfile.ZipFile(archive) as zf:
            return any(name.startswith(prefix) for name in zf.namelist())


class SysPathSearchPath(StaticSearchPath):
    """
    Search path backed by the live ``sys.path``.

    The entries are re-read on every lookup so that paths added at runtime
    are honoured. Empty entries stand for the current working directory.
    """

    def __init__(self, archive_suffixes: Sequence[str] = DEFAULT_ARCHIVE_SUFFIXES):
        super().__init__([], archive_suffixes)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"

    def _iter_entries(self) -> Iterable[Path]:
        for entry in list(sys.path):
            yield Path(entry or ".")
