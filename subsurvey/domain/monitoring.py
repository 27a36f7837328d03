"""Navigator observers: position log, depth alarm, and movement telemetry.

Each class satisfies :class:`~subsurvey.domain.navigation.NavigationObserver`
and is attached with ``Navigator.subscribe``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from subsurvey.domain.commands import Command
from subsurvey.domain.navigation import AimState

logger = logging.getLogger(__name__)


@dataclass
class PositionLog:
    """Records every state the navigator reaches."""

    _entries: list[AimState] = field(default_factory=list)

    def notify(self, command: Command, before: AimState, after: AimState) -> None:
        self._entries.append(after)

    def entries(self) -> list[AimState]:
        return list(self._entries)


@dataclass
class DepthAlarm:
    """Latches once a depth strictly greater than ``max_depth`` is observed."""

    max_depth: int
    triggered: bool = False

    def notify(self, command: Command, before: AimState, after: AimState) -> None:
        if after.depth > self.max_depth and not self.triggered:
            logger.warning("Depth alarm: %d exceeds %d", after.depth, self.max_depth)
            self.triggered = True


@dataclass
class Telemetry:
    """Counts executed commands and the total horizontal distance covered."""

    command_count: int = 0
    total_distance: int = 0

    def notify(self, command: Command, before: AimState, after: AimState) -> None:
        self.command_count += 1
        self.total_distance += abs(after.horizontal - before.horizontal)
