"""
Quarry - Classpath-style resource discovery for Python

Complete integration of:
- Resources: Namespace scanning over directory trees and zip archives
- Faults: Structured error handling with fault domains
- Config: Layered search-path configuration (YAML, JSON, .env, environment)
- CLI: ``quarry scan`` / ``quarry roots``
"""

__version__ = "0.1.0"

from .config import ConfigError, ConfigLoader, ScanConfig, build_provider

from .faults import Fault, FaultDomain, Severity

from .resources import (
    ResourceRecord,
    RootRecord,
    ScanRequest,
    translate_namespace,
    SearchPathProvider,
    StaticSearchPath,
    SysPathSearchPath,
    ArchiveMounter,
    ResultCollector,
    ResourceResolver,
    scan,
    class_name_mapper,
    module_name_mapper,
    suffix_filter,
    ResourceFault,
    LocationLookupFault,
    MalformedLocationFault,
    ArchiveOpenFault,
    TraversalFault,
)

__all__ = [
    "__version__",
    # Config
    "ConfigError",
    "ConfigLoader",
    "ScanConfig",
    "build_provider",
    # Faults
    "Fault",
    "FaultDomain",
    "Severity",
    # Resources
    "ResourceRecord",
    "RootRecord",
    "ScanRequest",
    "translate_namespace",
    "SearchPathProvider",
    "StaticSearchPath",
    "SysPathSearchPath",
    "ArchiveMounter",
    "ResultCollector",
    "ResourceResolver",
    "scan",
    "class_name_mapper",
    "module_name_mapper",
    "suffix_filter",
    "ResourceFault",
    "LocationLookupFault",
    "MalformedLocationFault",
    "ArchiveOpenFault",
    "TraversalFault",
]
