"""Scan shapes: a closed set of kinds, each with one integer extent."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from resource_scanner.config.constants import LOCAL_VIEW_SIZE, MIN_AREA_EXTENT, MIN_RAY_EXTENT
from resource_scanner.errors import InvalidShapeParameter


class ShapeKind(Enum):
    """Named scan geometries."""

    AREA = "area"
    UP = "up"
    RIGHT = "right"
    LEFT = "left"
    DOWN = "down"
    DIAGONAL_UPPER_LEFT = "diagonal_upper_left"
    DIAGONAL_UPPER_RIGHT = "diagonal_upper_right"
    DIAGONAL_LOWER_LEFT = "diagonal_lower_left"
    DIAGONAL_LOWER_RIGHT = "diagonal_lower_right"
    STRAIGHT_STAR = "straight_star"
    DIAGONAL_STAR = "diagonal_star"


STRAIGHT_KINDS = frozenset({ShapeKind.UP, ShapeKind.RIGHT, ShapeKind.LEFT, ShapeKind.DOWN})
DIAGONAL_KINDS = frozenset(
    {
        ShapeKind.DIAGONAL_UPPER_LEFT,
        ShapeKind.DIAGONAL_UPPER_RIGHT,
        ShapeKind.DIAGONAL_LOWER_LEFT,
        ShapeKind.DIAGONAL_LOWER_RIGHT,
    }
)
STAR_KINDS = frozenset({ShapeKind.STRAIGHT_STAR, ShapeKind.DIAGONAL_STAR})


@dataclass(frozen=True)
class ScanShape:
    """A shape kind plus its extent.

    For ``AREA`` the extent is the side length of a square centered on the
    agent and must be odd and >= 3. For every other kind it is the arm
    length and must be >= 1. Construction does not validate; call
    :meth:`validate` before using the shape.
    """

    kind: ShapeKind
    extent: int

    def is_valid(self) -> bool:
        if isinstance(self.extent, bool) or not isinstance(self.extent, int):
            return False
        if self.kind is ShapeKind.AREA:
            return self.extent >= MIN_AREA_EXTENT and self.extent % 2 == 1
        return self.extent >= MIN_RAY_EXTENT

    def validate(self) -> None:
        """Raise :class:`InvalidShapeParameter` if the extent breaks the kind's rule."""
        if not self.is_valid():
            raise InvalidShapeParameter(
                f"Invalid Size: {self.kind.value} does not accept extent {self.extent!r}"
            )

    @property
    def uses_local_view(self) -> bool:
        """True for the minimal area, which equals the agent's free local view."""
        return self.kind is ShapeKind.AREA and self.extent == LOCAL_VIEW_SIZE

    @classmethod
    def parse(cls, raw: str) -> ScanShape:
        """Parse ``<kind>:<extent>``, e.g. ``area:5`` or ``diagonal_star:2``."""
        kind_raw, sep, extent_raw = raw.strip().partition(":")
        if not sep:
            raise ValueError(f"shape must use <kind>:<extent> format, got {raw!r}")
        try:
            kind = ShapeKind(kind_raw.strip().lower())
        except ValueError as exc:
            valid = ", ".join(k.value for k in ShapeKind)
            raise ValueError(f"shape kind must be one of {valid}") from exc
        try:
            extent = int(extent_raw)
        except ValueError as exc:
            raise ValueError(f"shape extent must be an integer, got {extent_raw!r}") from exc
        return cls(kind, extent)

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.extent}"
