"""Path construction helpers for survey output directories."""

from __future__ import annotations

from pathlib import Path


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Resolve *path* and ensure it stays within the trusted *base_dir*.

    Raises :exc:`ValueError` if the resolved path escapes the base directory.
    """
    candidate = path if path.is_absolute() else base_dir / path
    resolved = candidate.resolve()
    base_resolved = base_dir.resolve()
    if resolved != base_resolved and base_resolved not in resolved.parents:
        raise ValueError(f"Path escapes base_dir: {path}")
    return resolved


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def figures_dir(out_dir: Path) -> Path:
    """Return path to the figures subdirectory within an output directory."""
    return out_dir / "figures"


def scan_log_path(out_dir: Path) -> Path:
    """Return path to the scan log Parquet file."""
    return logs_dir(out_dir) / "scan_log.parquet"


def footprint_figure_path(out_dir: Path, scan_index: int) -> Path:
    """Return path to the footprint PNG of one survey scan."""
    return figures_dir(out_dir) / f"scan_{scan_index:05d}.png"
