"""
Quarry resources — Classpath-style resource discovery.

Finds every root on the search path exposing a dotted namespace, whether
a plain directory tree or a directory inside a zip archive, and maps each
regular file below it through a caller-supplied function.

Architecture:
    SearchPathProvider -> classify() -> ArchiveMounter -> walkers -> ResultCollector

Usage::

    from quarry.resources import StaticSearchPath, class_name_mapper, scan

    provider = StaticSearchPath(["build/classes", "lib/app.jar"])
    classes = scan("io.github.mighten.scan", class_name_mapper(), provider)
"""

from .core import (
    ResourceRecord,
    RootRecord,
    ScanRequest,
    translate_namespace,
)

from .search_path import (
    DEFAULT_ARCHIVE_SUFFIXES,
    SearchPathProvider,
    StaticSearchPath,
    SysPathSearchPath,
)

from .classifier import classify
from .archive import ArchiveMounter, ArchiveNode
from .walkers import ArchiveWalker, DirectoryWalker
from .collector import ResultCollector
from .resolver import ResourceResolver, scan

from .mappers import class_name_mapper, module_name_mapper, suffix_filter

from .faults import (
    ResourceFault,
    LocationLookupFault,
    MalformedLocationFault,
    ArchiveOpenFault,
    TraversalFault,
)

__all__ = [
    # Core types
    "ResourceRecord",
    "RootRecord",
    "ScanRequest",
    "translate_namespace",
    # Search path
    "DEFAULT_ARCHIVE_SUFFIXES",
    "SearchPathProvider",
    "StaticSearchPath",
    "SysPathSearchPath",
    # Pipeline
    "classify",
    "ArchiveMounter",
    "ArchiveNode",
    "ArchiveWalker",
    "DirectoryWalker",
    "ResultCollector",
    "ResourceResolver",
    "scan",
    # Mappers
    "class_name_mapper",
    "module_name_mapper",
    "suffix_filter",
    # Faults
    "ResourceFault",
    "LocationLookupFault",
    "MalformedLocationFault",
    "ArchiveOpenFault",
    "TraversalFault",
]
