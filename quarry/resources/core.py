"""
Quarry resources — Core types and path helpers.

Defines the uniform record produced for every discovered file, the scan
request, the classified root, and the string helpers shared by the
classifier and both walkers so directory and archive scans normalize
names identically.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Callable, Optional, TypeVar
from urllib.parse import quote


R = TypeVar("R")

FILE_SCHEME = "file:"
ARCHIVE_SCHEMES = ("jar:", "zip:")
ARCHIVE_SEPARATOR = "!/"

_DRIVE_PREFIX = re.compile(r"^/[A-Za-z]:")


# ============================================================================
# Records
# ============================================================================

@dataclass(frozen=True, slots=True)
class ResourceRecord:
    """
    One discovered regular file.

    Attributes:
        base: Origin identifier of the root that produced the record.
            Archive roots share one value per root (``jar:file:/x.jar!``);
            directory roots carry ``file:`` plus the file's own path.
        name: Path relative to the search-path entry, forward slashes
            only, never starting with ``/``.
    """
    base: str
    name: str

    def __str__(self) -> str:
        return self.name


Mapper = Callable[[ResourceRecord], Optional[R]]


@dataclass(frozen=True, slots=True)
class ScanRequest:
    """A namespace to scan, e.g. ``io.github.mighten.scan``."""
    namespace: str

    def __post_init__(self) -> None:
        if not isinstance(self.namespace, str) or not self.namespace:
            raise ValueError("namespace must be a non-empty dotted string")

    @property
    def translated_path(self) -> str:
        return translate_namespace(self.namespace)


@dataclass(frozen=True, slots=True)
class RootRecord:
    """
    A root location classified for one scan call.

    Attributes:
        location: Location identifier as reported by the provider
        decoded: Percent-decoded location, trailing separator stripped
        base: Root prefix with the translated path and ``file:`` removed
        is_archive: Whether the root lives inside an archive
        directory: Native directory to walk (directory-backed roots only)
    """
    location: str
    decoded: str
    base: str
    is_archive: bool
    directory: Optional[Path] = None


# ============================================================================
# Helpers
# ============================================================================

def translate_namespace(namespace: str) -> str:
    """Convert ``a.b.c`` to ``a/b/c``."""
    if not isinstance(namespace, str) or not namespace:
        raise ValueError("namespace must be a non-empty dotted string")
    return namespace.replace(".", "/")


def remove_leading_slash(s: str) -> str:
    if s.startswith("/") or s.startswith("\\"):
        s = s[1:]
    return s


def remove_trailing_slash(s: str) -> str:
    if s.endswith("/") or s.endswith("\\"):
        s = s[:-1]
    return s


def posix_string(path: Path) -> str:
    """Absolute posix form of ``path``, always starting with ``/``."""
    text = path.absolute().as_posix()
    if not text.startswith("/"):
        # Windows drive paths: C:/x -> /C:/x
        text = "/" + text
    return text


def bare_to_path(bare: str) -> Path:
    """Turn a decoded ``file:``-less location back into a native path."""
    if _DRIVE_PREFIX.match(bare):
        bare = bare[1:]
    return Path(bare)


def quote_path(text: str, safe: str = "/:") -> str:
    """
    Percent-encode a path, keeping undecodable filename bytes.

    Names that are not valid UTF-8 arrive as lone surrogates; they are
    encoded back to their raw bytes so ``unquote(..., errors="surrogateescape")``
    restores the same string.
    """
    return quote(text.encode("utf-8", "surrogateescape"), safe=safe)


def directory_location(directory: Path) -> str:
    """Location identifier for a directory root."""
    return FILE_SCHEME + quote_path(posix_string(directory)) + "/"


def archive_location(archive: Path, inner: str) -> str:
    """Location identifier for ``inner`` inside a zip archive."""
    inner = str(PurePosixPath(inner)).strip("/")
    return (
        ARCHIVE_SCHEMES[0]
        + FILE_SCHEME
        + quote_path(posix_string(archive))
        + ARCHIVE_SEPARATOR
        + quote_path(inner, safe="/")
        + "/"
    )
