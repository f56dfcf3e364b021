"""Split scan candidates into cells still unknown and cells already known."""

from __future__ import annotations

from collections.abc import Iterable

from resource_scanner.domain.content import Content
from resource_scanner.domain.coordinate import GridCoordinate
from resource_scanner.domain.map_service import KnownMapSnapshot


def sanitize(
    candidates: Iterable[GridCoordinate], known: KnownMapSnapshot
) -> tuple[GridCoordinate, ...]:
    """Return the candidates whose content is still unknown, sorted and unique.

    Idempotent: sanitizing the output again against the same snapshot
    returns it unchanged.
    """
    return tuple(sorted({coord for coord in candidates if not known.is_known(coord)}))


def known_in(
    candidates: Iterable[GridCoordinate], known: KnownMapSnapshot
) -> dict[GridCoordinate, Content]:
    """Return the candidates already known, with their content."""
    covered: dict[GridCoordinate, Content] = {}
    for coord in sorted(set(candidates)):
        content = known.content_at(coord)
        if content is not None:
            covered[coord] = content
    return covered
