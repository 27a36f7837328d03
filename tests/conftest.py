from __future__ import annotations

import json
from pathlib import Path

import pytest

from subsurvey.domain.scan import TableScanSource

# Rows are y-1, y, y+1; columns x-1, x, x+1.
ORIGIN_SAMPLE = list("abcdefghi")
TEN_TEN_SAMPLE = list("#.#.~.#.#")


@pytest.fixture
def source() -> TableScanSource:
    return TableScanSource({(0, 0): ORIGIN_SAMPLE, (10, 10): TEN_TEN_SAMPLE})


@pytest.fixture
def scan_table_path(tmp_path: Path) -> Path:
    path = tmp_path / "scanner-data.json"
    path.write_text(json.dumps({"(0,0)": ORIGIN_SAMPLE, "(10,10)": TEN_TEN_SAMPLE}))
    return path


@pytest.fixture
def commands_path(tmp_path: Path) -> Path:
    path = tmp_path / "input.txt"
    path.write_text("down 1\n\nforward 10\n")
    return path
