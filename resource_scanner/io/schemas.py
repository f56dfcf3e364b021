"""Parquet schema definitions for scan survey artifacts.

Every module that writes or reads scan logs works against these column
contracts.
"""

from __future__ import annotations

import pyarrow as pa

SCAN_LOG_SCHEMA_VERSION = 1

SCAN_LOG_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("scan_index", pa.int64()),
        ("shape", pa.string()),
        ("extent", pa.int64()),
        ("agent_col", pa.int64()),
        ("agent_row", pa.int64()),
        ("want", pa.string()),
        ("found", pa.bool_()),
        ("target_col", pa.int64()),
        ("target_row", pa.int64()),
        ("quantity", pa.int64()),
        ("energy_before", pa.int64()),
        ("energy_after", pa.int64()),
        ("error", pa.string()),
    ]
)

SCAN_LOG_COLUMNS = SCAN_LOG_SCHEMA.names
