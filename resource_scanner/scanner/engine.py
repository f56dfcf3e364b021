"""Scan entry point: shape -> candidates -> sanitize -> discover -> select.

A call either returns a :data:`ScanResult` or raises a
:class:`~resource_scanner.errors.ToolError`; there is no partial result.
The known-map snapshot and the agent's energy are only ever changed by the
map service while it serves the single discovery request of a call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from resource_scanner.config.constants import DISCOVERY_COST_PER_CELL
from resource_scanner.domain.content import Content
from resource_scanner.domain.coordinate import GridCoordinate
from resource_scanner.domain.geometry import generate
from resource_scanner.domain.map_service import Agent, KnownMapSnapshot, MapService
from resource_scanner.domain.shapes import DIAGONAL_KINDS, STRAIGHT_KINDS, ScanShape, ShapeKind
from resource_scanner.errors import EmptyCandidateSet
from resource_scanner.scanner.discovery import discover
from resource_scanner.scanner.sanitize import known_in, sanitize
from resource_scanner.scanner.selection import ScanResult, select

logger = logging.getLogger(__name__)


def scan(
    world_bound: int,
    agent: Agent,
    shape: ScanShape,
    want: Content,
    service: MapService,
) -> ScanResult:
    """Find the cell with the most ``want`` content inside ``shape`` around ``agent``.

    Cells already known are read from the snapshot instead of being
    disclosed again, so repeating a scan over a fully known region issues
    no disclosure request.

    Raises:
        InvalidShapeParameter: the extent breaks the shape's rule.
        EmptyCandidateSet: the shape covers no in-bounds cell.
        InsufficientResource, DisclosureExhausted, Unclassified: the map
            service refused the disclosure or broke its contract.
    """
    shape.validate()
    candidates = _covered(shape, agent, world_bound)
    return _resolve(candidates, agent, shape, want, service, service.known_map())


def _covered(shape: ScanShape, agent: Agent, world_bound: int) -> tuple[GridCoordinate, ...]:
    candidates = generate(shape, agent.position(), world_bound)
    if not candidates:
        raise EmptyCandidateSet()
    return candidates


def _resolve(
    candidates: tuple[GridCoordinate, ...],
    agent: Agent,
    shape: ScanShape,
    want: Content,
    service: MapService,
    snapshot: KnownMapSnapshot,
) -> ScanResult:
    """Select over the covered cells, disclosing only the unknown ones.

    The local view may report cells outside ``candidates`` (a caller bound
    smaller than the service grid); those are dropped before selection.
    """
    position = agent.position()
    remaining = sanitize(candidates, snapshot)
    logger.debug(
        "%s at %s: %d candidate(s), %d unknown",
        shape,
        position.as_tuple(),
        len(candidates),
        len(remaining),
    )

    cells: dict[GridCoordinate, Content | None] = dict(known_in(candidates, snapshot))
    covered = set(candidates)
    discovered = discover(service, agent, remaining, shape)
    cells.update((coord, content) for coord, content in discovered.items() if coord in covered)
    return select(cells, want)


def nominal_cost(shape: ScanShape) -> int:
    """Published energy cost of a shape, assuming no cell in it is known yet.

    The minimal area is free because it uses the local view. Larger areas
    are quoted for their outer ring, stars for their four arms.
    """
    shape.validate()
    n = shape.extent
    if shape.uses_local_view:
        return 0
    if shape.kind is ShapeKind.AREA:
        return 4 * DISCOVERY_COST_PER_CELL * (n - 1)
    if shape.kind in STRAIGHT_KINDS or shape.kind in DIAGONAL_KINDS:
        return DISCOVERY_COST_PER_CELL * n
    return 4 * DISCOVERY_COST_PER_CELL * n


def estimate_cost(
    shape: ScanShape, position: GridCoordinate, world_bound: int, known: KnownMapSnapshot
) -> int:
    """Energy a scan would be charged right now, given what is already known."""
    if shape.uses_local_view:
        shape.validate()
        return 0
    remaining = sanitize(generate(shape, position, world_bound), known)
    return DISCOVERY_COST_PER_CELL * len(remaining)


@dataclass(frozen=True)
class ScanPlan:
    """Side-effect-free preview of a scan."""

    shape: ScanShape
    candidates: tuple[GridCoordinate, ...]
    to_disclose: tuple[GridCoordinate, ...]
    estimated_cost: int
    affordable: bool


class ResourceScanner:
    """Scanner bound to one map service.

    The world bound is taken from the service's known-map snapshot on every
    call, so the scanner itself keeps no state between scans.
    """

    def __init__(self, service: MapService) -> None:
        self.service = service

    def scan(self, agent: Agent, shape: ScanShape, want: Content) -> ScanResult:
        # an invalid shape must not reach the service
        shape.validate()
        snapshot = self.service.known_map()
        candidates = _covered(shape, agent, snapshot.size)
        return _resolve(candidates, agent, shape, want, self.service, snapshot)

    def plan(self, agent: Agent, shape: ScanShape) -> ScanPlan:
        """Preview the cells and energy a scan would use, without scanning."""
        shape.validate()
        snapshot = self.service.known_map()
        position = agent.position()
        candidates = generate(shape, position, snapshot.size)
        to_disclose = () if shape.uses_local_view else sanitize(candidates, snapshot)
        cost = estimate_cost(shape, position, snapshot.size, snapshot)
        return ScanPlan(
            shape=shape,
            candidates=candidates,
            to_disclose=to_disclose,
            estimated_cost=cost,
            affordable=cost <= agent.resource_budget(),
        )
