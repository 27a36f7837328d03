"""Tests for subsurvey.domain.scan module."""

from __future__ import annotations

import pytest

from subsurvey.domain.scan import (
    ScanDataError,
    TableScanSource,
    parse_scan_key,
    scan_key,
    validate_sample,
)


class TestScanKeys:
    def test_format(self) -> None:
        assert scan_key(6, 10) == "(6,10)"
        assert scan_key(-2, -7) == "(-2,-7)"

    @pytest.mark.parametrize("coordinate", [(0, 0), (-1, 3), (12, -40), (-5, -5)])
    def test_parse_inverts_format(self, coordinate: tuple[int, int]) -> None:
        assert parse_scan_key(scan_key(*coordinate)) == coordinate

    def test_parse_tolerates_whitespace(self) -> None:
        assert parse_scan_key(" ( 3 , -4 ) ") == (3, -4)

    @pytest.mark.parametrize("key", ["3,4", "(3;4)", "(a,1)", "(1.5,2)", "(1,2,3)", ""])
    def test_parse_rejects_malformed(self, key: str) -> None:
        with pytest.raises(ScanDataError, match="Invalid scan key"):
            parse_scan_key(key)


class TestValidateSample:
    def test_list_and_string_forms(self) -> None:
        assert validate_sample(list("abcdefghi")) == tuple("abcdefghi")
        assert validate_sample("abcdefghi") == tuple("abcdefghi")

    def test_wrong_length(self) -> None:
        with pytest.raises(ScanDataError, match="9 cells"):
            validate_sample(list("abc"))

    def test_multi_character_cell(self) -> None:
        with pytest.raises(ScanDataError, match="single characters"):
            validate_sample(["ab"] + list("cdefghij"))


class TestTableScanSource:
    def test_query_hit_and_miss(self) -> None:
        source = TableScanSource({(1, 2): "abcdefghi"})
        assert source.query(1, 2) == tuple("abcdefghi")
        assert source.query(2, 1) is None

    def test_invalid_sample_rejected_at_construction(self) -> None:
        with pytest.raises(ScanDataError):
            TableScanSource({(0, 0): "short"})

    def test_empty_source(self) -> None:
        source = TableScanSource()
        assert len(source) == 0
        assert source.query(0, 0) is None

    def test_coordinates_sorted(self) -> None:
        source = TableScanSource({(3, 0): "a" * 9, (-1, 5): "b" * 9})
        assert source.coordinates() == [(-1, 5), (3, 0)]
