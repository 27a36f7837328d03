"""I/O layer: loaders, Parquet schemas, output paths, and persistence."""

from subsurvey.io.loaders import load_commands, load_scan_table
from subsurvey.io.persistence import SessionArtifacts, read_map_points, write_session
from subsurvey.io.schemas import (
    MAP_POINTS_SCHEMA,
    SCAN_LOG_SCHEMA,
    SURVEY_SCHEMA_VERSION,
    VISITED_SCHEMA,
)

__all__ = [
    "MAP_POINTS_SCHEMA",
    "SCAN_LOG_SCHEMA",
    "SURVEY_SCHEMA_VERSION",
    "SessionArtifacts",
    "VISITED_SCHEMA",
    "load_commands",
    "load_scan_table",
    "read_map_points",
    "write_session",
]
