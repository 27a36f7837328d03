"""Parquet schema definitions for persisted survey artifacts.

Every module that writes or reads session logs works against these column
contracts.
"""

from __future__ import annotations

import pyarrow as pa

SURVEY_SCHEMA_VERSION = 1

VISITED_SCHEMA = pa.schema(
    [
        ("step", pa.int64()),
        ("horizontal", pa.int64()),
        ("depth", pa.int64()),
    ]
)

MAP_POINTS_SCHEMA = pa.schema(
    [
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("terrain", pa.string()),
    ]
)

SCAN_LOG_SCHEMA = pa.schema(
    [
        ("step", pa.int64()),
        ("horizontal", pa.int64()),
        ("depth", pa.int64()),
        ("sample", pa.string()),
    ]
)
