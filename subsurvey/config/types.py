"""Configuration dataclasses for navigators and survey sessions.

All frozen dataclasses that parameterise a submarine (limits, starting
state) or a survey run (rule variant, scan bookkeeping, output location)
live here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from subsurvey.config.constants import DEFAULT_MAX_DEPTH, DEFAULT_MAX_SPEED

__all__ = [
    "NavigationMode",
    "StartState",
    "SubmarineConfig",
    "SurveyConfig",
]


class NavigationMode(Enum):
    """Rule variant used to apply movement commands."""

    SIMPLE = "simple"
    AIMED = "aimed"


@dataclass(frozen=True)
class StartState:
    """Initial horizontal position, depth, and aim of a submarine."""

    horizontal: int = 0
    depth: int = 0
    aim: int = 0


@dataclass(frozen=True)
class SubmarineConfig:
    """Optional operating limits and bookkeeping for one navigator.

    ``None`` disables a limit. Limits are checked by the navigator: a forward
    value above ``max_speed`` is rejected before moving, and a move that would
    end deeper than ``max_depth`` is rejected without changing state.
    """

    start: StartState = StartState()
    max_depth: int | None = None
    max_speed: int | None = None
    record_commands: bool = False

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        if self.max_speed is not None and self.max_speed < 0:
            raise ValueError("max_speed must be >= 0")
        if self.max_depth is not None and self.start.depth > self.max_depth:
            raise ValueError("start depth exceeds max_depth")

    @classmethod
    def standard(cls) -> SubmarineConfig:
        """Default limits for a regular patrol."""
        return cls(max_depth=DEFAULT_MAX_DEPTH, max_speed=DEFAULT_MAX_SPEED)

    @classmethod
    def surface(cls) -> SubmarineConfig:
        """Surface running: never below the waterline, reduced speed."""
        return cls(start=StartState(), max_depth=0, max_speed=50)

    @classmethod
    def deep_dive(cls) -> SubmarineConfig:
        """Start already submerged and pitched down, slow but deep."""
        return cls(start=StartState(horizontal=0, depth=100, aim=10), max_depth=5000, max_speed=20)

    @classmethod
    def testing(cls) -> SubmarineConfig:
        """Tight limits with command recording enabled."""
        return cls(max_depth=100, max_speed=50, record_commands=True)


@dataclass(frozen=True)
class SurveyConfig:
    """Runtime settings for one survey session."""

    mode: NavigationMode = NavigationMode.AIMED
    record_scans: bool = True
    out_dir: Path | None = None
