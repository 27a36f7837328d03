"""File loaders for command scripts and scan tables."""

from __future__ import annotations

import json
from pathlib import Path

from subsurvey.domain.scan import Coordinate, ScanDataError, TableScanSource, parse_scan_key


def load_commands(path: Path) -> list[str]:
    """Return the non-blank lines of a command script, stripped."""
    text = Path(path).read_text(encoding="utf-8")
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_scan_table(path: Path) -> TableScanSource:
    """Load a JSON scan table keyed by ``"(x,y)"``.

    Values are lists of 9 single characters or a 9-character string.
    Raises :exc:`ScanDataError` for a non-object payload, a bad key, or a bad
    sample; two keys naming the same coordinate are also rejected.
    """
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ScanDataError(f"Scan table must be a JSON object: {path}")

    table: dict[Coordinate, list[str] | str] = {}
    for key, raw in payload.items():
        coordinate = parse_scan_key(key)
        if coordinate in table:
            raise ScanDataError(f"Duplicate scan coordinate {coordinate} in {path}")
        if not isinstance(raw, (list, str)):
            raise ScanDataError(f"Scan sample for {key} must be a list or string")
        table[coordinate] = raw
    return TableScanSource(table)
