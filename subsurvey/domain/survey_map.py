"""Sparse survey map assembled from overlapping 3x3 scan samples.

Each ingested sample is projected onto the scan point and its 8 neighbours
and upserted into a ``(x, y) -> character`` mapping. Scans overlap by
construction, so a later write for the same coordinate replaces the earlier
one (last write wins). The sparse map can be materialized as a dense grid
whose rows are ``y - min_y`` and columns ``x - min_x``.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import TextIO

import numpy as np

from subsurvey.config.constants import (
    BLANK_CELL,
    MAP_BORDER,
    MAP_TITLE,
    NO_MAP_DATA_MESSAGE,
    SCAN_OFFSETS,
)
from subsurvey.domain.navigation import Position
from subsurvey.domain.scan import Coordinate, ScanSample, ScanSource, validate_sample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundingBox:
    """Smallest axis-aligned rectangle containing every mapped coordinate."""

    min_x: int = 0
    max_x: int = 0
    min_y: int = 0
    max_y: int = 0
    width: int = 0
    height: int = 0

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0


class SurveyMap:
    """Sparse terrain map keyed by absolute integer coordinates."""

    def __init__(self) -> None:
        self._points: dict[Coordinate, str] = {}

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    def ingest(self, position: Position, source: ScanSource) -> int:
        """Query *source* at *position* and merge the sample, if any.

        Returns the number of cells written (0 when the source has no data).
        """
        sample = source.query(position.horizontal, position.depth)
        if sample is None:
            logger.debug("No scan data at (%d,%d)", position.horizontal, position.depth)
            return 0
        return self.ingest_sample(position, sample)

    def ingest_sample(self, position: Position, sample: ScanSample) -> int:
        """Project a 9-cell *sample* centred on *position* into the map."""
        cells = validate_sample(sample)
        x, y = position.horizontal, position.depth
        for (dx, dy), char in zip(SCAN_OFFSETS, cells, strict=True):
            self._points[(x + dx, y + dy)] = char
        logger.debug("Ingested scan at (%d,%d); map has %d points", x, y, len(self._points))
        return len(cells)

    def clear(self) -> None:
        self._points.clear()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def window(self, position: Position) -> ScanSample | None:
        """The 3x3 cells around *position* in sample order, or ``None`` if any is unmapped."""
        x, y = position.horizontal, position.depth
        cells = [self._points.get((x + dx, y + dy)) for dx, dy in SCAN_OFFSETS]
        if any(cell is None for cell in cells):
            return None
        return tuple(cells)

    def points(self) -> dict[Coordinate, str]:
        return dict(self._points)

    def get(self, x: int, y: int) -> str | None:
        return self._points.get((x, y))

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, coordinate: object) -> bool:
        return coordinate in self._points

    # ------------------------------------------------------------------
    # Bounding box and dense rendering
    # ------------------------------------------------------------------

    def bounding_box(self) -> BoundingBox:
        """Bounding box of all mapped points; all-zero when the map is empty."""
        if not self._points:
            return BoundingBox()
        xs = [x for x, _ in self._points]
        ys = [y for _, y in self._points]
        min_x, max_x, min_y, max_y = min(xs), max(xs), min(ys), max(ys)
        return BoundingBox(
            min_x=min_x,
            max_x=max_x,
            min_y=min_y,
            max_y=max_y,
            width=max_x - min_x + 1,
            height=max_y - min_y + 1,
        )

    def to_array(self) -> np.ndarray:
        """Return the dense ``(height, width)`` grid as a ``<U1`` array.

        Uncovered cells hold ``BLANK_CELL``; an empty map gives shape ``(0, 0)``.
        """
        box = self.bounding_box()
        grid = np.full((box.height, box.width), BLANK_CELL, dtype="<U1")
        for (x, y), char in self._points.items():
            grid[y - box.min_y, x - box.min_x] = char
        return grid

    def render(self) -> list[list[str]]:
        """Dense row-major grid of characters; ``[]`` when nothing was scanned."""
        if not self._points:
            return []
        return [list(row) for row in self.to_array().tolist()]

    def render_lines(self) -> list[str]:
        return ["".join(row) for row in self.render()]

    def print_map(self, stream: TextIO | None = None) -> None:
        """Write a bordered view of the map, or a notice when it is empty."""
        out = stream if stream is not None else sys.stdout
        lines = self.render_lines()
        if not lines:
            print(NO_MAP_DATA_MESSAGE, file=out)
            return
        print(f"\n{MAP_TITLE}", file=out)
        for line in lines:
            print(line, file=out)
        print(f"{MAP_BORDER}\n", file=out)

    @classmethod
    def from_points(cls, points: dict[Coordinate, str]) -> SurveyMap:
        """Rebuild a map from previously exported points."""
        survey_map = cls()
        for (x, y), char in points.items():
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"Map cell at ({x},{y}) must be a single character")
            survey_map._points[(int(x), int(y))] = char
        return survey_map
