"""Configuration dataclasses for the reference world and scan surveys.

All frozen dataclasses that parameterise world generation and survey runs
live here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from resource_scanner.config.constants import (
    DISCOVERY_LIMIT,
    INITIAL_ENERGY,
    MAX_CONTENT_QUANTITY,
    MAX_SURVEY_SCANS,
    N_CONTENTS,
    WORLD_SIZE,
)
from resource_scanner.domain.content import ContentKind

if TYPE_CHECKING:
    from resource_scanner.domain.shapes import ScanShape

__all__ = [
    "MAX_SURVEY_SCANS",
    "SurveyConfig",
    "WorldConfig",
]

DEFAULT_CONTENT_KINDS: tuple[ContentKind, ...] = (
    ContentKind.COIN,
    ContentKind.ROCK,
    ContentKind.TREE,
    ContentKind.FISH,
    ContentKind.GARBAGE,
)

DEFAULT_SURVEY_SHAPES: tuple[str, ...] = (
    "area:3",
    "area:5",
    "straight_star:2",
    "diagonal_star:2",
    "up:3",
    "diagonal_lower_right:3",
)


@dataclass(frozen=True)
class WorldConfig:
    """Parameters of a randomly generated reference world."""

    world_size: int = WORLD_SIZE
    n_contents: int = N_CONTENTS
    content_kinds: tuple[ContentKind, ...] = DEFAULT_CONTENT_KINDS
    """Kinds drawn uniformly when scattering contents."""
    max_quantity: int = MAX_CONTENT_QUANTITY
    initial_energy: int = INITIAL_ENERGY
    discovery_limit: int = DISCOVERY_LIMIT
    """Total cells the map service will disclose over the world's lifetime."""

    def __post_init__(self) -> None:
        if self.world_size < 1:
            raise ValueError("world_size must be >= 1")
        if self.n_contents < 0:
            raise ValueError("n_contents must be >= 0")
        if self.n_contents > self.world_size * self.world_size:
            raise ValueError("n_contents cannot exceed world cells")
        if not self.content_kinds:
            raise ValueError("content_kinds must not be empty")
        if ContentKind.NONE in self.content_kinds:
            raise ValueError("content_kinds must not include the empty kind")
        if self.max_quantity < 1:
            raise ValueError("max_quantity must be >= 1")
        if self.initial_energy < 0:
            raise ValueError("initial_energy must be >= 0")
        if self.discovery_limit < 0:
            raise ValueError("discovery_limit must be >= 0")


def _default_shapes() -> tuple[ScanShape, ...]:
    from resource_scanner.domain.shapes import ScanShape

    return tuple(ScanShape.parse(raw) for raw in DEFAULT_SURVEY_SHAPES)


@dataclass(frozen=True)
class SurveyConfig:
    """Settings for a batch of scans performed in one seeded world."""

    world: WorldConfig = field(default_factory=WorldConfig)
    n_scans: int = 50
    shapes: tuple[ScanShape, ...] = field(default_factory=_default_shapes)
    want: ContentKind = ContentKind.COIN
    seed: int = 0
    out_dir: Path = Path("data")

    def __post_init__(self) -> None:
        if self.n_scans < 1:
            raise ValueError("n_scans must be >= 1")
        if self.n_scans > MAX_SURVEY_SCANS:
            raise ValueError("n_scans exceeds safety threshold; reduce n_scans")
        if not self.shapes:
            raise ValueError("shapes must not be empty")
        invalid = [str(shape) for shape in self.shapes if not shape.is_valid()]
        if invalid:
            raise ValueError(f"invalid survey shapes: {', '.join(invalid)}")
        if self.want is ContentKind.NONE:
            raise ValueError("want must be a non-empty content kind")
