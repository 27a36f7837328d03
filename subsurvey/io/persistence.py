"""Parquet/JSON persistence for finished survey sessions."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from subsurvey.domain.session import SurveySession
from subsurvey.domain.survey_map import SurveyMap
from subsurvey.io.paths import (
    logs_dir,
    map_points_path,
    scan_log_path,
    summary_path,
    visited_log_path,
)
from subsurvey.io.schemas import (
    MAP_POINTS_SCHEMA,
    SCAN_LOG_SCHEMA,
    SURVEY_SCHEMA_VERSION,
    VISITED_SCHEMA,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionArtifacts:
    """Paths written by :func:`write_session`."""

    visited: Path
    map_points: Path
    scans: Path
    summary: Path


_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _int64_column(name: str, values: list[int]) -> list[int]:
    """Return *values* unchanged, or raise ValueError naming *name* if any overflows int64."""
    for value in values:
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise ValueError(f"Column {name!r} value {value} does not fit in int64")
    return values


def _visited_table(session: SurveySession) -> pa.Table:
    visited = session.visited()
    return pa.Table.from_pydict(
        {
            "step": list(range(len(visited))),
            "horizontal": _int64_column("horizontal", [p.horizontal for p in visited]),
            "depth": _int64_column("depth", [p.depth for p in visited]),
        },
        schema=VISITED_SCHEMA,
    )


def _map_points_table(survey_map: SurveyMap) -> pa.Table:
    points = sorted(survey_map.points().items(), key=lambda item: (item[0][1], item[0][0]))
    return pa.Table.from_pydict(
        {
            "x": _int64_column("x", [x for (x, _), _ in points]),
            "y": _int64_column("y", [y for (_, y), _ in points]),
            "terrain": [char for _, char in points],
        },
        schema=MAP_POINTS_SCHEMA,
    )


def _scan_log_table(session: SurveySession) -> pa.Table:
    scans = session.scans()
    return pa.Table.from_pydict(
        {
            "step": [s.step for s in scans],
            "horizontal": _int64_column("horizontal", [s.position.horizontal for s in scans]),
            "depth": _int64_column("depth", [s.position.depth for s in scans]),
            "sample": ["".join(s.sample) for s in scans],
        },
        schema=SCAN_LOG_SCHEMA,
    )


def write_session(session: SurveySession, out_dir: Path) -> SessionArtifacts:
    """Persist visited positions, map points, scans, and a JSON summary under *out_dir*.

    Coordinates are stored as int64; a session that travelled beyond that range
    raises :exc:`ValueError` naming the column, before any file is written.
    """
    out_dir = Path(out_dir)
    visited = _visited_table(session)
    map_points = _map_points_table(session.survey_map)
    scans = _scan_log_table(session)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    artifacts = SessionArtifacts(
        visited=visited_log_path(out_dir),
        map_points=map_points_path(out_dir),
        scans=scan_log_path(out_dir),
        summary=summary_path(out_dir),
    )
    pq.write_table(visited, artifacts.visited)
    pq.write_table(map_points, artifacts.map_points)
    pq.write_table(scans, artifacts.scans)

    summary = {"schema_version": SURVEY_SCHEMA_VERSION, **session.summary()}
    artifacts.summary.write_text(json.dumps(summary, ensure_ascii=False, indent=2))
    logger.info("Wrote survey artifacts to %s", out_dir)
    return artifacts


def read_map_points(path: Path) -> SurveyMap:
    """Rebuild a :class:`SurveyMap` from a ``map_points.parquet`` file."""
    table = pq.read_table(path)
    missing = {f.name for f in MAP_POINTS_SCHEMA} - set(table.column_names)
    if missing:
        raise ValueError(f"Map points file is missing columns: {sorted(missing)}")
    xs = table.column("x").to_pylist()
    ys = table.column("y").to_pylist()
    terrain = table.column("terrain").to_pylist()
    return SurveyMap.from_points(
        {(x, y): char for x, y, char in zip(xs, ys, terrain, strict=True)}
    )
