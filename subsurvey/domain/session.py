"""Survey session: navigate, log every visited position, and map what is scanned.

The session owns the navigator, the visited-positions log, the successful
scan records, and the survey map. Positions are processed strictly in the
order they are visited, starting with one scan attempt at the start point.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from subsurvey.config.types import SubmarineConfig, SurveyConfig
from subsurvey.domain.commands import Command, parse_script
from subsurvey.domain.navigation import AimState, Navigator, Position
from subsurvey.domain.scan import ScanSample, ScanSource
from subsurvey.domain.survey_map import SurveyMap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanRecord:
    """One successful scan: where it was taken and what it returned."""

    step: int
    position: Position
    sample: ScanSample


class SurveySession:
    """Drives a :class:`Navigator` and feeds each visited position to a :class:`SurveyMap`."""

    def __init__(
        self,
        source: ScanSource,
        config: SurveyConfig | None = None,
        submarine: SubmarineConfig | None = None,
    ) -> None:
        self.config = config or SurveyConfig()
        self.source = source
        self.navigator = Navigator(mode=self.config.mode, config=submarine)
        self.survey_map = SurveyMap()
        self._visited: list[Position] = []
        self._scans: list[ScanRecord] = []
        self._scan_count = 0
        self._record(self.navigator.position())

    def _record(self, position: Position) -> None:
        step = len(self._visited)
        self._visited.append(position)
        if not self.survey_map.ingest(position, self.source):
            logger.debug(
                "Step %d: no scan data at (%d,%d)", step, position.horizontal, position.depth
            )
            return
        self._scan_count += 1
        sample = self.survey_map.window(position)
        if self.config.record_scans and sample is not None:
            self._scans.append(ScanRecord(step=step, position=position, sample=sample))

    def execute(self, command: Command | str) -> AimState:
        """Apply one command, log the new position, and scan there."""
        state = self.navigator.execute(command)
        self._record(state.position)
        return state

    def run(self, lines: Iterable[str]) -> AimState:
        """Parse a whole script first, then execute it; a bad line executes nothing."""
        for command in parse_script(lines):
            self.execute(command)
        return self.navigator.state()

    def visited(self) -> list[Position]:
        return list(self._visited)

    def scans(self) -> list[ScanRecord]:
        return list(self._scans)

    def position(self) -> Position:
        return self.navigator.position()

    def state(self) -> AimState:
        return self.navigator.state()

    def result(self) -> int:
        return self.navigator.result()

    def summary(self) -> dict[str, object]:
        """JSON-serializable digest of the session."""
        state = self.navigator.state()
        box = self.survey_map.bounding_box()
        return {
            "mode": self.config.mode.value,
            "horizontal": state.horizontal,
            "depth": state.depth,
            "aim": state.aim,
            "result": self.navigator.result(),
            "visited_positions": len(self._visited),
            "successful_scans": self._scan_count,
            "map_points": len(self.survey_map),
            "bounding_box": {
                "min_x": box.min_x,
                "max_x": box.max_x,
                "min_y": box.min_y,
                "max_y": box.max_y,
                "width": box.width,
                "height": box.height,
            },
        }
