"""Pattern geometry: which world cells a scan shape covers.

Each shape kind has a small offset rule relative to the agent. Offsets are
translated to world space and clipped to ``[0, world_bound)`` in one place,
so no offset rule needs to know about the world edges.

Rays (straight and diagonal) start one cell away from the agent and never
include the agent cell. Areas and stars always include it. Star arms are
symmetric: a star of extent ``n`` reaches ``n`` cells in each of its four
directions.
"""

from __future__ import annotations

from collections.abc import Iterable

from resource_scanner.domain.coordinate import GridCoordinate
from resource_scanner.domain.shapes import ScanShape, ShapeKind

Offset = tuple[int, int]

DIRECTIONS: dict[ShapeKind, Offset] = {
    ShapeKind.UP: (0, -1),
    ShapeKind.DOWN: (0, 1),
    ShapeKind.LEFT: (-1, 0),
    ShapeKind.RIGHT: (1, 0),
    ShapeKind.DIAGONAL_UPPER_LEFT: (-1, -1),
    ShapeKind.DIAGONAL_UPPER_RIGHT: (1, -1),
    ShapeKind.DIAGONAL_LOWER_LEFT: (-1, 1),
    ShapeKind.DIAGONAL_LOWER_RIGHT: (1, 1),
}
"""Unit step (dx, dy) of every ray kind; dy < 0 points toward row 0."""

STAR_ARMS: dict[ShapeKind, tuple[ShapeKind, ...]] = {
    ShapeKind.STRAIGHT_STAR: (ShapeKind.UP, ShapeKind.DOWN, ShapeKind.LEFT, ShapeKind.RIGHT),
    ShapeKind.DIAGONAL_STAR: (
        ShapeKind.DIAGONAL_UPPER_LEFT,
        ShapeKind.DIAGONAL_UPPER_RIGHT,
        ShapeKind.DIAGONAL_LOWER_LEFT,
        ShapeKind.DIAGONAL_LOWER_RIGHT,
    ),
}


def area_offsets(extent: int) -> list[Offset]:
    """Square of side ``extent`` centered on the origin, origin included."""
    half = extent // 2
    return [(dx, dy) for dy in range(-half, half + 1) for dx in range(-half, half + 1)]


def ray_offsets(direction: Offset, extent: int) -> list[Offset]:
    """``extent`` cells along ``direction``, starting one step from the origin."""
    dx, dy = direction
    return [(dx * i, dy * i) for i in range(1, extent + 1)]


def star_offsets(arms: Iterable[Offset], extent: int) -> list[Offset]:
    """Origin plus one ray of length ``extent`` per arm direction."""
    offsets: list[Offset] = [(0, 0)]
    for direction in arms:
        offsets.extend(ray_offsets(direction, extent))
    return offsets


def shape_offsets(shape: ScanShape) -> list[Offset]:
    """Agent-relative offsets covered by ``shape`` (may contain duplicates)."""
    if shape.kind is ShapeKind.AREA:
        return area_offsets(shape.extent)
    if shape.kind in STAR_ARMS:
        return star_offsets((DIRECTIONS[arm] for arm in STAR_ARMS[shape.kind]), shape.extent)
    return ray_offsets(DIRECTIONS[shape.kind], shape.extent)


def clip_to_world(
    agent: GridCoordinate, offsets: Iterable[Offset], world_bound: int
) -> tuple[GridCoordinate, ...]:
    """Translate offsets to world space, drop out-of-bounds cells and duplicates.

    The result is sorted in ``(col, row)`` order.
    """
    cells: set[GridCoordinate] = set()
    for dx, dy in offsets:
        col = agent.col + dx
        row = agent.row + dy
        if 0 <= col < world_bound and 0 <= row < world_bound:
            cells.add(GridCoordinate(col, row))
    return tuple(sorted(cells))


def generate(
    shape: ScanShape, agent: GridCoordinate, world_bound: int
) -> tuple[GridCoordinate, ...]:
    """Return the in-bounds world cells covered by ``shape`` around ``agent``.

    Raises :class:`~resource_scanner.errors.InvalidShapeParameter` for an
    invalid extent. An empty tuple means the shape lies entirely off-grid.
    """
    shape.validate()
    if world_bound < 0:
        raise ValueError("world_bound must be >= 0")
    return clip_to_world(agent, shape_offsets(shape), world_bound)
