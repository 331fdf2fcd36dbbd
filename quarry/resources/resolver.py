"""
Quarry resources — Scan entry point.

Control flow for one call:
    translate namespace -> enumerate roots -> classify each root
    -> mount (archive) or resolve (directory) -> walk -> collect

Results of all roots are appended in root order. Any fault aborts the
call and discards everything collected so far.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from .archive import ArchiveMounter
from .classifier import classify
from .collector import ResultCollector
from .core import Mapper, R, ResourceRecord, RootRecord, ScanRequest
from .faults import LocationLookupFault, ResourceFault
from .search_path import SearchPathProvider, SysPathSearchPath
from .walkers import ArchiveWalker, DirectoryWalker

_default_logger = logging.getLogger("quarry.resources")


class ResourceResolver:
    """
    Scans every root exposing a namespace, in directories and archives.

    Args:
        namespace: Dotted namespace, e.g. ``io.github.mighten.scan``
        provider: Search-path provider (defaults to the live ``sys.path``)
        mounter: Archive mounter (override in tests)
        logger: Logger receiving scan diagnostics

    Example:
        ```python
        resolver = ResourceResolver("myapp.plugins", StaticSearchPath(["build/"]))
        names = resolver.scan(lambda r: r.name if r.name.endswith(".py") else None)
        ```
    """

    def __init__(
        self,
        namespace: str,
        provider: Optional[SearchPathProvider] = None,
        *,
        mounter: Optional[ArchiveMounter] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.request = ScanRequest(namespace)
        self.provider = provider or SysPathSearchPath()
        self.mounter = mounter or ArchiveMounter()
        self.logger = logger or _default_logger
        self._directory_walker = DirectoryWalker()
        self._archive_walker = ArchiveWalker()

    @property
    def namespace(self) -> str:
        return self.request.namespace

    def roots(self) -> List[RootRecord]:
        """Enumerate and classify every root exposing the namespace."""
        path = self.request.translated_path
        return [classify(location, path) for location in self._find_locations(path)]

    def scan(self, mapper: Mapper) -> List[R]:
        """
        Map every regular file under the namespace.

        Args:
            mapper: Called once per record; returning None drops the record

        Returns:
            Mapped results, per-root visitation order, roots in provider order

        Raises:
            LocationLookupFault: Root enumeration failed
            MalformedLocationFault: A root location could not be parsed
            ArchiveOpenFault: An archive root could not be mounted
            TraversalFault: A walk hit an I/O failure
        """
        path = self.request.translated_path
        self.logger.debug("scan path: %s", path)

        collector: ResultCollector[R] = ResultCollector(mapper)
        locations = self._find_locations(path)

        for location in locations:
            root = classify(location, path)
            if root.is_archive:
                with self.mounter.mount(path, location) as node:
                    collector.collect(self._trace(self._archive_walker.walk(root, node)))
            else:
                collector.collect(self._trace(self._directory_walker.walk(root)))

        self.logger.info(
            "scanned '%s': %d root(s), %d result(s)",
            self.namespace, len(locations), len(collector),
        )
        return collector.results

    def _find_locations(self, path: str) -> List[str]:
        try:
            return list(self.provider.find_roots(path))
        except ResourceFault:
            raise
        except Exception as e:
            raise LocationLookupFault(path, str(e) or type(e).__name__) from e

    def _trace(self, records: Iterable[ResourceRecord]) -> Iterator[ResourceRecord]:
        for record in records:
            self.logger.debug("found resource: %r", record)
            yield record


def scan(
    namespace: str,
    mapper: Mapper,
    provider: Optional[SearchPathProvider] = None,
    *,
    logger: Optional[logging.Logger] = None,
) -> List[R]:
    """Shortcut for ``ResourceResolver(namespace, provider).scan(mapper)``."""
    return ResourceResolver(namespace, provider, logger=logger).scan(mapper)
