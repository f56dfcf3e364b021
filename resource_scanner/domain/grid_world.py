"""In-memory square grid world acting as the map service for an explorer.

Disclosure invariant: energy and the disclosure budget are charged only for
cells that were unknown before the request, and a refused request changes
nothing (no energy charged, no cell revealed).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from random import Random
from typing import TYPE_CHECKING

from resource_scanner.config.constants import (
    DISCOVERY_COST_PER_CELL,
    DISCOVERY_LIMIT,
    INITIAL_ENERGY,
    LOCAL_VIEW_SIZE,
)
from resource_scanner.domain.content import EMPTY, Content
from resource_scanner.domain.coordinate import GridCoordinate
from resource_scanner.domain.map_service import (
    DiscoveryFailure,
    DiscoveryFailureReason,
    KnownMapSnapshot,
    LocalView,
)

if TYPE_CHECKING:
    from resource_scanner.config.types import WorldConfig

logger = logging.getLogger(__name__)


@dataclass
class Explorer:
    """A robot walking the grid; its energy is spent by the world."""

    coordinate: GridCoordinate
    energy: int = INITIAL_ENERGY

    def position(self) -> GridCoordinate:
        return self.coordinate

    def resource_budget(self) -> int:
        return self.energy


@dataclass
class GridWorld:
    """Square world of contents plus the explorer's partial knowledge of it."""

    size: int
    tiles: list[list[Content]]  # [row][col]
    known: list[list[bool]]  # [row][col]
    discoveries_left: int = DISCOVERY_LIMIT
    cost_per_cell: int = DISCOVERY_COST_PER_CELL
    disclosed_total: int = field(default=0, init=False)

    @classmethod
    def empty(cls, size: int, discovery_limit: int = DISCOVERY_LIMIT) -> GridWorld:
        """World of ``size`` x ``size`` empty cells, nothing known."""
        if size < 1:
            raise ValueError("size must be >= 1")
        return cls(
            size=size,
            tiles=[[EMPTY for _ in range(size)] for _ in range(size)],
            known=[[False for _ in range(size)] for _ in range(size)],
            discoveries_left=discovery_limit,
        )

    @classmethod
    def create(cls, config: WorldConfig, rng: Random) -> GridWorld:
        """Initialize a world with randomly scattered contents, nothing known."""
        world = cls.empty(config.world_size, discovery_limit=config.discovery_limit)
        size = config.world_size
        all_cells = [(col, row) for row in range(size) for col in range(size)]
        for col, row in rng.sample(all_cells, config.n_contents):
            kind = rng.choice(config.content_kinds)
            quantity = rng.randint(1, config.max_quantity)
            world.tiles[row][col] = Content(kind, quantity)
        logger.debug("created %dx%d world with %d contents", size, size, config.n_contents)
        return world

    def in_bounds(self, coord: GridCoordinate) -> bool:
        return coord.col < self.size and coord.row < self.size

    def place(self, coord: GridCoordinate, content: Content) -> None:
        """Put ``content`` in a cell (used to hand-build worlds)."""
        if not self.in_bounds(coord):
            raise ValueError(f"{coord} is outside the {self.size}x{self.size} world")
        self.tiles[coord.row][coord.col] = content

    def content_at(self, coord: GridCoordinate) -> Content:
        return self.tiles[coord.row][coord.col]

    def spawn(self, coord: GridCoordinate, energy: int = INITIAL_ENERGY) -> Explorer:
        """Create an explorer at ``coord``; its own cell becomes known."""
        if not self.in_bounds(coord):
            raise ValueError(f"{coord} is outside the {self.size}x{self.size} world")
        self.known[coord.row][coord.col] = True
        return Explorer(coordinate=coord, energy=energy)

    def teleport(self, explorer: Explorer, coord: GridCoordinate) -> None:
        """Move ``explorer`` to ``coord``; its new cell becomes known."""
        if not self.in_bounds(coord):
            raise ValueError(f"{coord} is outside the {self.size}x{self.size} world")
        explorer.coordinate = coord
        self.known[coord.row][coord.col] = True

    # -- map service ---------------------------------------------------------

    def known_map(self) -> KnownMapSnapshot:
        return KnownMapSnapshot.from_rows(
            [
                [self.tiles[row][col] if self.known[row][col] else None for col in range(self.size)]
                for row in range(self.size)
            ]
        )

    def local_view(self, explorer: Explorer) -> LocalView:
        """Free window around the explorer; off-grid cells are None."""
        half = LOCAL_VIEW_SIZE // 2
        center = explorer.position()
        view: LocalView = []
        for dy in range(-half, half + 1):
            view_row: list[Content | None] = []
            for dx in range(-half, half + 1):
                col, row = center.col + dx, center.row + dy
                if 0 <= col < self.size and 0 <= row < self.size:
                    self.known[row][col] = True
                    view_row.append(self.tiles[row][col])
                else:
                    view_row.append(None)
            view.append(view_row)
        return view

    def disclose(
        self, explorer: Explorer, coordinates: Iterable[GridCoordinate]
    ) -> dict[GridCoordinate, Content | None]:
        """Reveal ``coordinates``, charging energy for each newly known cell."""
        requested = list(dict.fromkeys(coordinates))
        outside = [coord for coord in requested if not self.in_bounds(coord)]
        if outside:
            raise DiscoveryFailure(
                DiscoveryFailureReason.OUT_OF_BOUNDS,
                f"{len(outside)} coordinate(s) outside the {self.size}x{self.size} world",
            )
        fresh = [coord for coord in requested if not self.known[coord.row][coord.col]]
        cost = len(fresh) * self.cost_per_cell
        if cost > explorer.energy:
            raise DiscoveryFailure(
                DiscoveryFailureReason.NOT_ENOUGH_ENERGY,
                f"need {cost}, have {explorer.energy}",
            )
        if len(fresh) > self.discoveries_left:
            raise DiscoveryFailure(
                DiscoveryFailureReason.NO_MORE_DISCOVERY,
                f"{len(fresh)} requested, {self.discoveries_left} left",
            )
        explorer.energy -= cost
        self.discoveries_left -= len(fresh)
        self.disclosed_total += len(fresh)
        for coord in fresh:
            self.known[coord.row][coord.col] = True
        return {coord: self.tiles[coord.row][coord.col] for coord in requested}
