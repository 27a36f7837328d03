"""Tests for subsurvey.viz.render: PNG output of survey maps."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from subsurvey.domain.survey_map import SurveyMap
from subsurvey.viz.render import _build_terrain_array, _terrain_cmap, render_survey_map


def test_build_terrain_array_indexes_symbols() -> None:
    survey_map = SurveyMap.from_points({(0, 0): "#", (2, 0): ".", (1, 1): "#"})
    grid, symbols = _build_terrain_array(survey_map)
    assert symbols == ["#", "."]
    empty = len(symbols)
    expected = np.array([[0, empty, 1], [empty, 0, empty]])
    assert np.array_equal(grid, expected)


def test_terrain_cmap_has_empty_slot() -> None:
    cmap, norm = _terrain_cmap(3)
    assert cmap.N == 4
    assert len(norm.boundaries) == 5


def test_render_survey_map_writes_png(tmp_path: Path) -> None:
    survey_map = SurveyMap.from_points({(-1, -1): "#", (1, 2): "~"})
    output = render_survey_map(survey_map, tmp_path / "maps" / "survey.png", dpi=50)
    assert output.exists()
    assert output.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_render_empty_map_raises(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="empty survey map"):
        render_survey_map(SurveyMap(), tmp_path / "out.png")
