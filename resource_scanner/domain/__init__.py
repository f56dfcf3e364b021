"""Domain layer: coordinates, contents, shapes, geometry, and the map service."""

from resource_scanner.domain.content import EMPTY, Content, ContentKind, parse_content_kind
from resource_scanner.domain.coordinate import GridCoordinate
from resource_scanner.domain.geometry import generate, shape_offsets
from resource_scanner.domain.grid_world import Explorer, GridWorld
from resource_scanner.domain.map_service import (
    Agent,
    DiscoveryFailure,
    DiscoveryFailureReason,
    KnownMapSnapshot,
    MapService,
)
from resource_scanner.domain.shapes import ScanShape, ShapeKind

__all__ = [
    "Agent",
    "Content",
    "ContentKind",
    "DiscoveryFailure",
    "DiscoveryFailureReason",
    "EMPTY",
    "Explorer",
    "GridCoordinate",
    "GridWorld",
    "KnownMapSnapshot",
    "MapService",
    "ScanShape",
    "ShapeKind",
    "generate",
    "parse_content_kind",
    "shape_offsets",
]
