"""Text and Matplotlib renderings of known maps and scan footprints."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.patches import Patch

from resource_scanner.domain.content import Content
from resource_scanner.domain.coordinate import GridCoordinate
from resource_scanner.domain.map_service import KnownMapSnapshot
from resource_scanner.io.paths import resolve_within_base

UNKNOWN_CELL = 0
KNOWN_CELL = 1
MATCHING_CELL = 2

CELL_COLORS = ["#e5e7eb", "#9ca3af", "#f59e0b"]
"""Unknown, known, and matching-content cells."""
GRID_LINE_COLOR = "#ffffff"
FOOTPRINT_COLOR = "#2563eb"
AGENT_COLOR = "#dc2626"
HIT_COLOR = "#16a34a"
_FIGURE_DPI = 120


def format_known_map(
    snapshot: KnownMapSnapshot, want: Content, agent: GridCoordinate | None = None
) -> str:
    """ASCII dump: ``o`` matching, ``x`` other known, space unknown, ``r`` agent."""
    lines: list[str] = []
    for row_idx, row in enumerate(snapshot.rows):
        chars: list[str] = []
        for col_idx, content in enumerate(row):
            if agent is not None and (col_idx, row_idx) == agent.as_tuple():
                chars.append("r")
            elif content is None:
                chars.append(" ")
            elif content.matches(want):
                chars.append("o")
            else:
                chars.append("x")
        lines.append("".join(chars))
    return "\n".join(lines)


def build_knowledge_array(snapshot: KnownMapSnapshot, want: Content) -> np.ndarray:
    """Return (H, W) int array: 0 unknown, 1 known, 2 known with matching content."""
    grid = np.full((snapshot.size, snapshot.width), UNKNOWN_CELL, dtype=int)
    for row_idx, row in enumerate(snapshot.rows):
        for col_idx, content in enumerate(row):
            if content is None:
                continue
            grid[row_idx, col_idx] = MATCHING_CELL if content.matches(want) else KNOWN_CELL
    return grid


def _knowledge_cmap() -> tuple[ListedColormap, BoundaryNorm]:
    cmap = ListedColormap(CELL_COLORS)
    norm = BoundaryNorm([-0.5, 0.5, 1.5, 2.5], cmap.N)
    return cmap, norm


def render_scan_footprint(
    snapshot: KnownMapSnapshot,
    candidates: Iterable[GridCoordinate],
    agent: GridCoordinate,
    output_path: Path,
    want: Content,
    hit: GridCoordinate | None = None,
    base_dir: Path | None = None,
) -> Path:
    """Save a PNG of the known map with the scan footprint overlaid.

    Returns the resolved output path. When *base_dir* is given the output
    must stay inside it.
    """
    if base_dir is not None:
        output_path = resolve_within_base(output_path, base_dir)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    grid = build_knowledge_array(snapshot, want)
    cmap, norm = _knowledge_cmap()
    fig, ax = plt.subplots(figsize=(6, 6))
    try:
        ax.imshow(grid, cmap=cmap, norm=norm, origin="upper", aspect="equal")
        h, w = grid.shape
        for x in range(w + 1):
            ax.axvline(x - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)
        for y in range(h + 1):
            ax.axhline(y - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)

        footprint = list(candidates)
        if footprint:
            ax.scatter(
                [c.col for c in footprint],
                [c.row for c in footprint],
                marker="s",
                s=40,
                facecolors="none",
                edgecolors=FOOTPRINT_COLOR,
                linewidths=1.0,
            )
        ax.scatter([agent.col], [agent.row], marker="o", s=60, color=AGENT_COLOR)
        if hit is not None:
            ax.scatter([hit.col], [hit.row], marker="*", s=120, color=HIT_COLOR)

        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_title(f"Scan for {want.kind.value}")
        handles = [
            Patch(facecolor=CELL_COLORS[UNKNOWN_CELL], edgecolor="gray", label="Unknown"),
            Patch(facecolor=CELL_COLORS[KNOWN_CELL], edgecolor="gray", label="Known"),
            Patch(facecolor=CELL_COLORS[MATCHING_CELL], edgecolor="gray", label="Match"),
        ]
        ax.legend(handles=handles, loc="upper right", fontsize=7)
        fig.savefig(output_path, dpi=_FIGURE_DPI, bbox_inches="tight")
    finally:
        plt.close(fig)
    return output_path
