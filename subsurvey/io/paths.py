"""Path construction helpers for survey output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def visited_log_path(out_dir: Path) -> Path:
    """Return path to the visited-positions Parquet file."""
    return logs_dir(out_dir) / "visited.parquet"


def map_points_path(out_dir: Path) -> Path:
    """Return path to the survey-map points Parquet file."""
    return logs_dir(out_dir) / "map_points.parquet"


def scan_log_path(out_dir: Path) -> Path:
    """Return path to the successful-scans Parquet file."""
    return logs_dir(out_dir) / "scans.parquet"


def summary_path(out_dir: Path) -> Path:
    """Return path to the session summary JSON file."""
    return out_dir / "summary.json"
