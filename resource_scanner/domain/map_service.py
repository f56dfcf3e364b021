"""Interfaces the scanner consumes from the map service and the agent.

The map service owns the known-map snapshot and the agent's energy; the
scanner only reads the former and asks the service to disclose cells.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from resource_scanner.domain.content import Content
from resource_scanner.domain.coordinate import GridCoordinate

LocalView = list[list[Content | None]]
"""Square window indexed ``[row][col]`` around the agent; None marks off-grid cells."""


class DiscoveryFailureReason(Enum):
    """Why the map service refused a disclosure request."""

    NOT_ENOUGH_ENERGY = "not_enough_energy"
    NO_MORE_DISCOVERY = "no_more_discovery"
    OUT_OF_BOUNDS = "out_of_bounds"
    OTHER = "other"


class DiscoveryFailure(Exception):
    """Raised by a map service when a disclosure request cannot be honored."""

    def __init__(self, reason: DiscoveryFailureReason, detail: str = "") -> None:
        message = reason.value if not detail else f"{reason.value}: {detail}"
        super().__init__(message)
        self.reason = reason
        self.detail = detail


@dataclass(frozen=True)
class KnownMapSnapshot:
    """Read-only partial knowledge of the world, indexed ``[row][col]``.

    A ``None`` entry is an unknown cell. Coordinates outside the grid are
    reported as unknown.
    """

    rows: tuple[tuple[Content | None, ...], ...]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Content | None]]) -> KnownMapSnapshot:
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("known map rows must all have the same length")
        return cls(tuple(tuple(row) for row in rows))

    @classmethod
    def unknown(cls, size: int) -> KnownMapSnapshot:
        """A ``size`` x ``size`` snapshot with nothing known."""
        return cls(tuple(tuple(None for _ in range(size)) for _ in range(size)))

    @property
    def size(self) -> int:
        """Number of rows (the world is square)."""
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def content_at(self, coord: GridCoordinate) -> Content | None:
        if coord.row >= len(self.rows) or coord.col >= self.width:
            return None
        return self.rows[coord.row][coord.col]

    def is_known(self, coord: GridCoordinate) -> bool:
        return self.content_at(coord) is not None

    def known_count(self) -> int:
        return sum(1 for row in self.rows for cell in row if cell is not None)


class Agent(Protocol):
    """Read accessors the scanner needs from the agent."""

    def position(self) -> GridCoordinate: ...

    def resource_budget(self) -> int: ...


class MapService(Protocol):
    """External collaborator that owns the world and the agent's knowledge of it."""

    def known_map(self) -> KnownMapSnapshot: ...

    def local_view(self, agent: Agent) -> LocalView: ...

    def disclose(
        self, agent: Agent, coordinates: Iterable[GridCoordinate]
    ) -> dict[GridCoordinate, Content | None]: ...
