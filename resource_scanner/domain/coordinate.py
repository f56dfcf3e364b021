"""World-space grid coordinates.

Columns grow to the right and rows grow downward, so row 0 is the top edge
of the world. Coordinates are never negative.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class GridCoordinate:
    """An immutable (col, row) cell address in world space."""

    col: int
    row: int

    def __post_init__(self) -> None:
        for name in ("col", "row"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

    @classmethod
    def from_tuple(cls, value: tuple[int, int]) -> GridCoordinate:
        """Build a coordinate from a plain ``(col, row)`` pair."""
        col, row = value
        return cls(col=col, row=row)

    def as_tuple(self) -> tuple[int, int]:
        return (self.col, self.row)

    def __add__(self, other: GridCoordinate) -> GridCoordinate:
        if not isinstance(other, GridCoordinate):
            return NotImplemented
        return GridCoordinate(self.col + other.col, self.row + other.row)

    def __sub__(self, other: GridCoordinate) -> GridCoordinate:
        if not isinstance(other, GridCoordinate):
            return NotImplemented
        # Raises ValueError through __post_init__ when a component underflows.
        return GridCoordinate(self.col - other.col, self.row - other.row)
