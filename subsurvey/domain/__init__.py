"""Domain layer: commands, navigation rules, scan sources, and the survey map."""

from subsurvey.domain.commands import Command, Direction, ParseError, parse_command, parse_script
from subsurvey.domain.history import NavigationHistory, Snapshot
from subsurvey.domain.modes import (
    ModalNavigator,
    ModeTransitionError,
    OperationalMode,
    can_execute,
    next_mode,
)
from subsurvey.domain.monitoring import DepthAlarm, PositionLog, Telemetry
from subsurvey.domain.navigation import (
    AimState,
    LimitExceededError,
    NavigationObserver,
    Navigator,
    Position,
    apply_aimed,
    apply_command,
    apply_simple,
    navigate,
)
from subsurvey.domain.scan import (
    ScanDataError,
    ScanSample,
    ScanSource,
    TableScanSource,
    parse_scan_key,
    scan_key,
    validate_sample,
)
from subsurvey.domain.session import ScanRecord, SurveySession
from subsurvey.domain.survey_map import BoundingBox, SurveyMap

__all__ = [
    "AimState",
    "BoundingBox",
    "Command",
    "DepthAlarm",
    "Direction",
    "LimitExceededError",
    "ModalNavigator",
    "ModeTransitionError",
    "NavigationHistory",
    "NavigationObserver",
    "Navigator",
    "OperationalMode",
    "ParseError",
    "Position",
    "PositionLog",
    "ScanDataError",
    "ScanRecord",
    "ScanSample",
    "ScanSource",
    "Snapshot",
    "SurveyMap",
    "SurveySession",
    "TableScanSource",
    "Telemetry",
    "apply_aimed",
    "apply_command",
    "apply_simple",
    "can_execute",
    "navigate",
    "next_mode",
    "parse_command",
    "parse_scan_key",
    "parse_script",
    "scan_key",
    "validate_sample",
]
