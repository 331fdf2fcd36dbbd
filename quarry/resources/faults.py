"""
Quarry resources — Fault domain integration.

Defines typed discovery faults. Every one of them is fatal to the
enclosing scan: there is no per-root isolation and no partial result.
"""

from __future__ import annotations

from typing import Any, Optional

from quarry.faults.core import Fault, FaultDomain, Severity


# Register resource discovery fault domain
FaultDomain.RESOURCES = FaultDomain("resources", "Resource discovery faults")


class ResourceFault(Fault):
    """Base class for all resource discovery faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.FATAL,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.RESOURCES,
            severity=severity,
            retryable=False,
            public=False,
            metadata=metadata,
        )


class LocationLookupFault(ResourceFault):
    """The search-path provider failed to enumerate roots for a path."""

    def __init__(self, path: str, reason: str, *, entry: Optional[str] = None):
        super().__init__(
            code="LOCATION_LOOKUP_FAILED",
            message=f"Failed to enumerate roots for '{path}': {reason}",
            metadata={"path": path, "entry": entry, "reason": reason},
        )


class MalformedLocationFault(ResourceFault):
    """A reported root location cannot be parsed into a usable identifier."""

    def __init__(self, location: str, reason: str):
        super().__init__(
            code="LOCATION_MALFORMED",
            message=f"Malformed root location '{location}': {reason}",
            metadata={"location": location, "reason": reason},
        )


class ArchiveOpenFault(ResourceFault):
    """An archive root could not be opened, or the path is absent inside it."""

    def __init__(self, archive: str, path: str, reason: str):
        super().__init__(
            code="ARCHIVE_OPEN_FAILED",
            message=f"Cannot mount '{path}' in archive '{archive}': {reason}",
            metadata={"archive": archive, "path": path, "reason": reason},
        )


class TraversalFault(ResourceFault):
    """I/O failure while walking a directory or archive root."""

    def __init__(self, root: str, reason: str, *, entry: Optional[str] = None):
        super().__init__(
            code="TRAVERSAL_FAILED",
            message=f"Failed to walk '{root}': {reason}",
            metadata={"root": root, "entry": entry, "reason": reason},
        )
