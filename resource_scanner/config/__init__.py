"""Configuration layer: constants and typed config dataclasses."""

from resource_scanner.config.constants import (
    DISCOVERY_COST_PER_CELL,
    DISCOVERY_LIMIT,
    FLUSH_THRESHOLD,
    INITIAL_ENERGY,
    LOCAL_VIEW_SIZE,
    MAX_CONTENT_QUANTITY,
    MAX_SURVEY_SCANS,
    MIN_AREA_EXTENT,
    MIN_RAY_EXTENT,
    N_CONTENTS,
    WORLD_SIZE,
)
from resource_scanner.config.types import SurveyConfig, WorldConfig

__all__ = [
    "DISCOVERY_COST_PER_CELL",
    "DISCOVERY_LIMIT",
    "FLUSH_THRESHOLD",
    "INITIAL_ENERGY",
    "LOCAL_VIEW_SIZE",
    "MAX_CONTENT_QUANTITY",
    "MAX_SURVEY_SCANS",
    "MIN_AREA_EXTENT",
    "MIN_RAY_EXTENT",
    "N_CONTENTS",
    "SurveyConfig",
    "WORLD_SIZE",
    "WorldConfig",
]
