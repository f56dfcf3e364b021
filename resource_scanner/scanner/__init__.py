"""Scanning pipeline: sanitize, discover, select, and the scan entry point."""

from resource_scanner.scanner.discovery import classify_failure, discover, view_to_world
from resource_scanner.scanner.engine import (
    ResourceScanner,
    ScanPlan,
    estimate_cost,
    nominal_cost,
    scan,
)
from resource_scanner.scanner.sanitize import known_in, sanitize
from resource_scanner.scanner.selection import ScanResult, select

__all__ = [
    "ResourceScanner",
    "ScanPlan",
    "ScanResult",
    "classify_failure",
    "discover",
    "estimate_cost",
    "known_in",
    "nominal_cost",
    "sanitize",
    "scan",
    "select",
    "view_to_world",
]
