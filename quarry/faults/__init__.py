"""
QuarryFaults - Structured fault handling.

Errors in Quarry are typed fault signals carrying a stable code, a domain
and a severity, so callers can log, serialize or branch on them without
parsing messages.

Core exports:
- Fault: Base fault class
- FaultDomain: Domain enumeration
- Severity: Severity levels

Subsystem faults live next to their subsystem:
- quarry.resources.faults: Resource discovery faults
"""

from .core import (
    DOMAIN_DEFAULTS,
    Fault,
    FaultDomain,
    Severity,
)

__all__ = [
    "DOMAIN_DEFAULTS",
    "Fault",
    "FaultDomain",
    "Severity",
]
