"""Pick the best cell holding the wanted content."""

from __future__ import annotations

from collections.abc import Mapping

from resource_scanner.domain.content import Content
from resource_scanner.domain.coordinate import GridCoordinate
from resource_scanner.errors import Unclassified

ScanResult = tuple[GridCoordinate, int] | None
"""Winning cell and its quantity, or None when nothing matched."""


def select(cells: Mapping[GridCoordinate, Content | None], want: Content) -> ScanResult:
    """Return the matching cell with the largest quantity.

    Cells match on content kind only. Equal quantities are broken by the
    smallest ``(col, row)`` coordinate. A cell without a content payload is
    a map-service contract violation and raises :class:`Unclassified`.
    """
    best: tuple[GridCoordinate, int] | None = None
    for coord in sorted(cells):
        content = cells[coord]
        if content is None:
            raise Unclassified(f"disclosed cell {coord.as_tuple()} has no content")
        if not content.matches(want):
            continue
        if best is None or content.quantity > best[1]:
            best = (coord, content.quantity)
    return best
