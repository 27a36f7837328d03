"""Submarine navigation and scan-to-map terrain survey."""

from subsurvey.config.types import NavigationMode, StartState, SubmarineConfig, SurveyConfig
from subsurvey.domain import (
    AimState,
    BoundingBox,
    Command,
    Direction,
    Navigator,
    ParseError,
    Position,
    ScanDataError,
    SurveyMap,
    SurveySession,
    TableScanSource,
    navigate,
    parse_command,
)

__all__ = [
    "AimState",
    "BoundingBox",
    "Command",
    "Direction",
    "NavigationMode",
    "Navigator",
    "ParseError",
    "Position",
    "ScanDataError",
    "StartState",
    "SubmarineConfig",
    "SurveyConfig",
    "SurveyMap",
    "SurveySession",
    "TableScanSource",
    "navigate",
    "parse_command",
]
