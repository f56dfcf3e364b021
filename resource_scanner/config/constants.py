"""Centralized domain constants for scanning and the reference grid world.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

LOCAL_VIEW_SIZE = 3
"""Side length of the free local view window centered on the agent."""

MIN_AREA_EXTENT = 3
"""Smallest valid side length for an area scan (must also be odd)."""

MIN_RAY_EXTENT = 1
"""Smallest valid arm length for ray, diagonal and star scans."""

DISCOVERY_COST_PER_CELL = 3
"""Energy charged by the map service for each newly disclosed cell."""

WORLD_SIZE = 20
"""Default side length of the square reference world."""

N_CONTENTS = 40
"""Default number of non-empty cells scattered in the reference world."""

MAX_CONTENT_QUANTITY = 10
"""Upper bound (inclusive) for randomly generated content quantities."""

INITIAL_ENERGY = 1_000
"""Default energy budget of a freshly created explorer."""

DISCOVERY_LIMIT = 200
"""Default number of cells the map service agrees to disclose per world."""

FLUSH_THRESHOLD = 8_192
"""Flush scan log rows to Parquet once this in-memory row count is reached."""

MAX_SURVEY_SCANS = 1_000_000
"""Safety cap on the number of scans a single survey may perform."""
