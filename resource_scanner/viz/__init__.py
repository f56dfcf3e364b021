"""Visualization layer: ASCII and Matplotlib renderings of scans."""

from resource_scanner.viz.render import (
    build_knowledge_array,
    format_known_map,
    render_scan_footprint,
)

__all__ = [
    "build_knowledge_array",
    "format_known_map",
    "render_scan_footprint",
]
