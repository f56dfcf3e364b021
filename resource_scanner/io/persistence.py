"""Parquet persistence helpers for the scan log stream."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from resource_scanner.io.schemas import SCAN_LOG_COLUMNS, SCAN_LOG_SCHEMA


def new_scan_columns() -> dict[str, list[int | str | bool | None]]:
    """Empty column buffers matching :data:`SCAN_LOG_SCHEMA`."""
    return {name: [] for name in SCAN_LOG_COLUMNS}


def flush_scan_columns(
    scan_columns: dict[str, list[int | str | bool | None]],
    log_path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated scan rows to Parquet and clear in-memory buffers."""
    if not scan_columns["scan_index"]:
        return writer
    table = pa.Table.from_pydict(scan_columns, schema=SCAN_LOG_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(log_path, SCAN_LOG_SCHEMA)
    writer.write_table(table)
    for values in scan_columns.values():
        values.clear()
    return writer


def read_scan_log(log_path: Path) -> list[dict[str, object]]:
    """Load a scan log back as a list of row dicts."""
    return pq.read_table(log_path).to_pylist()
