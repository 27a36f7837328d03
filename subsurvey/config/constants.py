"""Centralized constants for navigation and survey-map assembly.

Scan-window geometry, mode thresholds, and display strings that appear
across multiple modules are defined here. Consuming modules should import
from this module rather than defining their own inline literals.
"""

from __future__ import annotations

SCAN_WINDOW_SIZE = 3
"""Side length of the square terrain window returned by one scan."""

SCAN_SAMPLE_LENGTH = SCAN_WINDOW_SIZE * SCAN_WINDOW_SIZE
"""Number of characters in one scan sample."""

SCAN_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (0, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)
"""(dx, dy) for each sample index, row-major from the row above the scan point."""

BLANK_CELL = " "
"""Placeholder written into dense-grid cells no scan has covered."""

MODE_CHANGE_THRESHOLD = 5
"""down/up values strictly above this switch the operational mode to DIVING/ASCENDING."""

DEFAULT_MAX_DEPTH = 1000
"""Depth limit used by the standard submarine preset."""

DEFAULT_MAX_SPEED = 100
"""Largest forward value accepted by the standard submarine preset."""

MAP_TITLE = "=== SCANNED MAP ==="
"""Header line written above a printed map."""

MAP_BORDER = "=" * len(MAP_TITLE)
"""Closing line written below a printed map."""

NO_MAP_DATA_MESSAGE = "No map data available"
"""Written instead of a map when nothing was ever scanned."""
