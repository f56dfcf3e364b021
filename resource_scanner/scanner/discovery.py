"""Fetch the contents of the cells a scan still needs.

The minimal area scan reads the agent's free local view. Every other scan
asks the map service to disclose exactly the still-unknown cells, once,
without retrying. Service failures are translated into tool errors.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from resource_scanner.config.constants import LOCAL_VIEW_SIZE
from resource_scanner.domain.content import Content
from resource_scanner.domain.coordinate import GridCoordinate
from resource_scanner.domain.map_service import (
    Agent,
    DiscoveryFailure,
    DiscoveryFailureReason,
    LocalView,
    MapService,
)
from resource_scanner.domain.shapes import ScanShape
from resource_scanner.errors import (
    DisclosureExhausted,
    InsufficientResource,
    ToolError,
    Unclassified,
)

logger = logging.getLogger(__name__)


def classify_failure(failure: DiscoveryFailure) -> ToolError:
    """Map a map-service failure onto the tool error taxonomy."""
    if failure.reason is DiscoveryFailureReason.NOT_ENOUGH_ENERGY:
        return InsufficientResource()
    if failure.reason is DiscoveryFailureReason.NO_MORE_DISCOVERY:
        return DisclosureExhausted()
    return Unclassified(f"discovery failed: {failure}")


def view_to_world(view: LocalView, center: GridCoordinate) -> dict[GridCoordinate, Content]:
    """Translate a local view window centered on ``center`` into world coordinates.

    ``None`` entries (off-grid or unknowable cells) are skipped.
    """
    half = LOCAL_VIEW_SIZE // 2
    cells: dict[GridCoordinate, Content] = {}
    for dy, view_row in enumerate(view):
        for dx, content in enumerate(view_row):
            if content is None:
                continue
            col = center.col + dx - half
            row = center.row + dy - half
            if col < 0 or row < 0:
                raise Unclassified(f"local view reported content off-grid at ({col}, {row})")
            cells[GridCoordinate(col, row)] = content
    return cells


def discover(
    service: MapService,
    agent: Agent,
    remaining: Sequence[GridCoordinate],
    shape: ScanShape,
) -> dict[GridCoordinate, Content | None]:
    """Return the contents of ``remaining`` (or of the local view for the minimal area).

    Raises :class:`InsufficientResource`, :class:`DisclosureExhausted` or
    :class:`Unclassified` when the map service refuses the request.
    """
    if shape.uses_local_view:
        position = agent.position()
        logger.debug("reading local view around %s", position)
        return dict(view_to_world(service.local_view(agent), position))
    if not remaining:
        logger.debug("nothing left to disclose for %s", shape)
        return {}
    logger.info("requesting disclosure of %d cell(s) for %s", len(remaining), shape)
    try:
        return service.disclose(agent, remaining)
    except DiscoveryFailure as exc:
        raise classify_failure(exc) from exc
