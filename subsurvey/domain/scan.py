"""Scan source contract: 3x3 terrain samples looked up by absolute coordinate.

A sample is 9 single characters, row-major from the row above the scan
point (see ``SCAN_OFFSETS``). Missing data is ``None``, never an error.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Protocol, TypeAlias

from subsurvey.config.constants import SCAN_SAMPLE_LENGTH

ScanSample: TypeAlias = tuple[str, ...]
"""Exactly ``SCAN_SAMPLE_LENGTH`` single-character strings."""

Coordinate: TypeAlias = tuple[int, int]

_SCAN_KEY_RE = re.compile(r"^\s*\(\s*(-?[0-9]+)\s*,\s*(-?[0-9]+)\s*\)\s*$")


class ScanDataError(ValueError):
    """Raised for a malformed scan key or sample."""


class ScanSource(Protocol):
    def query(self, x: int, y: int) -> ScanSample | None: ...


def scan_key(x: int, y: int) -> str:
    """External table key for a coordinate, e.g. ``"(6,-2)"``."""
    return f"({x},{y})"


def parse_scan_key(key: str) -> Coordinate:
    """Inverse of :func:`scan_key`; raises :exc:`ScanDataError` on anything else."""
    match = _SCAN_KEY_RE.match(key)
    if match is None:
        raise ScanDataError(f"Invalid scan key: {key!r}. Expected '(x,y)'")
    return int(match.group(1)), int(match.group(2))


def validate_sample(raw: Sequence[str] | str) -> ScanSample:
    """Return *raw* as a :data:`ScanSample`, checking length and cell width.

    A plain 9-character string is accepted as shorthand for its characters.
    """
    sample = tuple(raw)
    if len(sample) != SCAN_SAMPLE_LENGTH:
        raise ScanDataError(
            f"Scan sample must have {SCAN_SAMPLE_LENGTH} cells, got {len(sample)}"
        )
    for cell in sample:
        if not isinstance(cell, str) or len(cell) != 1:
            raise ScanDataError(f"Scan cells must be single characters, got {cell!r}")
    return sample


class TableScanSource:
    """In-memory scan source backed by a coordinate-keyed table."""

    def __init__(self, table: Mapping[Coordinate, Sequence[str] | str] | None = None) -> None:
        self._table: dict[Coordinate, ScanSample] = {
            (int(x), int(y)): validate_sample(raw) for (x, y), raw in (table or {}).items()
        }

    def query(self, x: int, y: int) -> ScanSample | None:
        return self._table.get((x, y))

    def coordinates(self) -> list[Coordinate]:
        return sorted(self._table)

    def __len__(self) -> int:
        return len(self._table)
