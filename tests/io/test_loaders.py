"""Tests for subsurvey.io.loaders module."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from subsurvey.domain.scan import ScanDataError
from subsurvey.io.loaders import load_commands, load_scan_table


def test_load_commands_skips_blank_lines(commands_path: Path) -> None:
    assert load_commands(commands_path) == ["down 1", "forward 10"]


def test_load_scan_table(scan_table_path: Path) -> None:
    source = load_scan_table(scan_table_path)
    assert len(source) == 2
    assert source.query(0, 0) == tuple("abcdefghi")
    assert source.query(10, 10) == tuple("#.#.~.#.#")
    assert source.query(1, 1) is None


def test_load_scan_table_accepts_strings_and_negatives(tmp_path: Path) -> None:
    path = tmp_path / "scan.json"
    path.write_text(json.dumps({"(-3,-4)": "123456789"}))
    assert load_scan_table(path).query(-3, -4) == tuple("123456789")


@pytest.mark.parametrize(
    ("payload", "match"),
    [
        ([["a"] * 9], "JSON object"),
        ({"3,4": ["a"] * 9}, "Invalid scan key"),
        ({"(0,0)": ["a"] * 8}, "9 cells"),
        ({"(0,0)": 5}, "list or string"),
        ({"(0,0)": "a" * 9, "( 0 , 0 )": "b" * 9}, "Duplicate"),
    ],
)
def test_load_scan_table_rejects_malformed(tmp_path: Path, payload: object, match: str) -> None:
    path = tmp_path / "scan.json"
    path.write_text(json.dumps(payload))
    with pytest.raises(ScanDataError, match=match):
        load_scan_table(path)
