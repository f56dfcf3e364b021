"""Cell contents: a category discriminator plus a quantity."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ContentKind(Enum):
    """Closed set of content categories a world cell may hold."""

    NONE = "none"
    ROCK = "rock"
    TREE = "tree"
    GARBAGE = "garbage"
    FIRE = "fire"
    COIN = "coin"
    BIN = "bin"
    CRATE = "crate"
    BANK = "bank"
    WATER = "water"
    MARKET = "market"
    FISH = "fish"
    BUSH = "bush"
    SCARECROW = "scarecrow"


@dataclass(frozen=True)
class Content:
    """What a single cell holds.

    Two contents *match* when their kinds are equal; the quantity only
    matters when ranking matches against each other.
    """

    kind: ContentKind
    quantity: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"quantity must be an integer, got {self.quantity!r}")
        if self.quantity < 0:
            raise ValueError("quantity must be >= 0")

    def matches(self, other: Content) -> bool:
        return self.kind is other.kind


def parse_content_kind(raw: str) -> ContentKind:
    """Parse a content kind from its lowercase name."""
    try:
        return ContentKind(raw.strip().lower())
    except ValueError as exc:
        valid = ", ".join(kind.value for kind in ContentKind)
        raise ValueError(f"content kind must be one of {valid}") from exc


EMPTY = Content(ContentKind.NONE, 0)
"""Content of a cell that holds nothing."""
