"""Configuration layer: constants and typed config dataclasses."""

from subsurvey.config.constants import (
    BLANK_CELL,
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_SPEED,
    MAP_BORDER,
    MAP_TITLE,
    MODE_CHANGE_THRESHOLD,
    NO_MAP_DATA_MESSAGE,
    SCAN_OFFSETS,
    SCAN_SAMPLE_LENGTH,
    SCAN_WINDOW_SIZE,
)
from subsurvey.config.types import (
    NavigationMode,
    StartState,
    SubmarineConfig,
    SurveyConfig,
)

__all__ = [
    "BLANK_CELL",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_MAX_SPEED",
    "MAP_BORDER",
    "MAP_TITLE",
    "MODE_CHANGE_THRESHOLD",
    "NO_MAP_DATA_MESSAGE",
    "NavigationMode",
    "SCAN_OFFSETS",
    "SCAN_SAMPLE_LENGTH",
    "SCAN_WINDOW_SIZE",
    "StartState",
    "SubmarineConfig",
    "SurveyConfig",
]
