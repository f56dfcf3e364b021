"""Tool-level error taxonomy shared by every scanning component.

The set is closed: callers branch on the subclass (or on ``kind``), and
``Unclassified`` carries any external failure the other kinds do not cover.
None of these errors is recovered from inside the scanner.
"""

from __future__ import annotations

from enum import Enum


class ToolErrorKind(Enum):
    """Stable identifiers for the tool error classes."""

    INVALID_SHAPE_PARAMETER = "invalid_shape_parameter"
    EMPTY_CANDIDATE_SET = "empty_candidate_set"
    INSUFFICIENT_RESOURCE = "insufficient_resource"
    DISCLOSURE_EXHAUSTED = "disclosure_exhausted"
    UNCLASSIFIED = "unclassified"


class ToolError(Exception):
    """Base class for every error a scan call can raise."""

    kind: ToolErrorKind = ToolErrorKind.UNCLASSIFIED
    default_message = "Tool Error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class InvalidShapeParameter(ToolError):
    """The shape extent fails its validity rule; raised before any external call."""

    kind = ToolErrorKind.INVALID_SHAPE_PARAMETER
    default_message = "Invalid Size"


class EmptyCandidateSet(ToolError):
    """The shape covers no in-bounds cell from the agent position."""

    kind = ToolErrorKind.EMPTY_CANDIDATE_SET
    default_message = "Empty Coordinates"


class InsufficientResource(ToolError):
    """The map service refused the disclosure for lack of energy."""

    kind = ToolErrorKind.INSUFFICIENT_RESOURCE
    default_message = "Not Enough Energy"


class DisclosureExhausted(ToolError):
    """The map service reached its own disclosure ceiling."""

    kind = ToolErrorKind.DISCLOSURE_EXHAUSTED
    default_message = "No More Discovery"


class Unclassified(ToolError):
    """Any other failure, carried with a human-readable description."""

    kind = ToolErrorKind.UNCLASSIFIED

    def __init__(self, description: str) -> None:
        super().__init__(description)
        self.description = description
