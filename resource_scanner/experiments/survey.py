"""Scan survey: many scans by one explorer in a seeded world, logged to Parquet."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from random import Random

import pyarrow.parquet as pq

from resource_scanner.config.constants import FLUSH_THRESHOLD
from resource_scanner.config.types import SurveyConfig
from resource_scanner.domain.content import Content
from resource_scanner.domain.coordinate import GridCoordinate
from resource_scanner.domain.geometry import generate
from resource_scanner.domain.grid_world import GridWorld
from resource_scanner.errors import ToolError
from resource_scanner.io.paths import footprint_figure_path, logs_dir, scan_log_path
from resource_scanner.io.persistence import flush_scan_columns, new_scan_columns
from resource_scanner.io.schemas import SCAN_LOG_SCHEMA_VERSION
from resource_scanner.scanner.engine import ResourceScanner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanRecord:
    """Outcome of one survey scan."""

    scan_index: int
    shape: str
    extent: int
    agent_col: int
    agent_row: int
    want: str
    found: bool
    target_col: int | None
    target_row: int | None
    quantity: int | None
    energy_before: int
    energy_after: int
    error: str | None


def _append_row(columns: dict[str, list[int | str | bool | None]], record: ScanRecord) -> None:
    columns["schema_version"].append(SCAN_LOG_SCHEMA_VERSION)
    for key, value in asdict(record).items():
        columns[key].append(value)


def run_scan_survey(config: SurveyConfig, render: bool = False) -> list[ScanRecord]:
    """Run ``config.n_scans`` scans from random positions and persist the scan log.

    Each scan teleports the explorer to a random cell and uses a shape drawn
    from ``config.shapes``. Failed scans are recorded with their error kind;
    the survey keeps going. Energy and disclosure budget are shared across
    the whole survey, as is the explorer's knowledge of the world.
    """
    out_dir = Path(config.out_dir).resolve()
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    log_path = scan_log_path(out_dir)

    rng = Random(config.seed)
    world = GridWorld.create(config.world, rng)
    size = world.size
    explorer = world.spawn(
        GridCoordinate(rng.randrange(size), rng.randrange(size)),
        energy=config.world.initial_energy,
    )
    scanner = ResourceScanner(world)
    want = Content(config.want)

    records: list[ScanRecord] = []
    columns = new_scan_columns()
    writer: pq.ParquetWriter | None = None
    try:
        for scan_index in range(config.n_scans):
            world.teleport(explorer, GridCoordinate(rng.randrange(size), rng.randrange(size)))
            shape = rng.choice(config.shapes)
            position = explorer.position()
            energy_before = explorer.energy
            result = None
            error: str | None = None
            try:
                result = scanner.scan(explorer, shape, want)
            except ToolError as exc:
                error = exc.kind.value
                logger.warning(
                    "scan %d (%s at %s) failed: %s", scan_index, shape, position.as_tuple(), exc
                )

            record = ScanRecord(
                scan_index=scan_index,
                shape=shape.kind.value,
                extent=shape.extent,
                agent_col=position.col,
                agent_row=position.row,
                want=config.want.value,
                found=result is not None,
                target_col=result[0].col if result is not None else None,
                target_row=result[0].row if result is not None else None,
                quantity=result[1] if result is not None else None,
                energy_before=energy_before,
                energy_after=explorer.energy,
                error=error,
            )
            records.append(record)
            _append_row(columns, record)
            if len(columns["scan_index"]) >= FLUSH_THRESHOLD:
                writer = flush_scan_columns(columns, log_path, writer)

            if render:
                from resource_scanner.viz.render import render_scan_footprint

                render_scan_footprint(
                    world.known_map(),
                    generate(shape, position, size),
                    position,
                    footprint_figure_path(out_dir, scan_index),
                    want,
                    hit=result[0] if result is not None else None,
                    base_dir=out_dir,
                )

            if (scan_index + 1) % 100 == 0:
                logger.info("completed %d/%d scans", scan_index + 1, config.n_scans)

        writer = flush_scan_columns(columns, log_path, writer)
    finally:
        if writer is not None:
            writer.close()

    logger.info(
        "survey finished: %d scans, %d found, %d energy left",
        len(records),
        sum(1 for r in records if r.found),
        explorer.energy,
    )
    return records


def summarize_survey(records: list[ScanRecord], out_dir: Path) -> dict[str, object]:
    """Compact JSON-serializable summary of a survey run."""
    return {
        "scans": len(records),
        "found": sum(1 for r in records if r.found),
        "failed": sum(1 for r in records if r.error is not None),
        "energy_left": records[-1].energy_after if records else None,
        "scan_log": str(scan_log_path(out_dir)),
    }
