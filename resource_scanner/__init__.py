"""Spatial content scanner for agents exploring a partially known grid world."""

from resource_scanner.errors import (
    DisclosureExhausted,
    EmptyCandidateSet,
    InsufficientResource,
    InvalidShapeParameter,
    ToolError,
    ToolErrorKind,
    Unclassified,
)
from resource_scanner.scanner import ResourceScanner, ScanPlan, ScanResult, scan
from resource_scanner.domain import (
    Content,
    ContentKind,
    GridCoordinate,
    KnownMapSnapshot,
    ScanShape,
    ShapeKind,
)

__version__ = "0.1.0"

__all__ = [
    "Content",
    "ContentKind",
    "DisclosureExhausted",
    "EmptyCandidateSet",
    "GridCoordinate",
    "InsufficientResource",
    "InvalidShapeParameter",
    "KnownMapSnapshot",
    "ResourceScanner",
    "ScanPlan",
    "ScanResult",
    "ScanShape",
    "ShapeKind",
    "ToolError",
    "ToolErrorKind",
    "Unclassified",
    "scan",
]
