"""Operational-mode state machine layered on the aimed navigation rule.

Legal commands per mode:
- SURFACED: forward and down. forward stays SURFACED and never changes
  depth, down steers and starts DIVING.
- DIVING, CRUISING, ASCENDING: everything. down/up above the threshold
  switch to DIVING/ASCENDING, any other command settles into CRUISING.
- EMERGENCY: nothing. It is entered only explicitly.
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum

from subsurvey.config.constants import MODE_CHANGE_THRESHOLD
from subsurvey.domain.commands import Command, Direction, parse_command
from subsurvey.domain.navigation import AimState, Position, apply_aimed


class OperationalMode(Enum):
    SURFACED = "SURFACED"
    DIVING = "DIVING"
    CRUISING = "CRUISING"
    ASCENDING = "ASCENDING"
    EMERGENCY = "EMERGENCY"


class ModeTransitionError(ValueError):
    """Raised when a command is not legal in the current operational mode."""


_CRUISING_FAMILY = frozenset(
    {OperationalMode.DIVING, OperationalMode.CRUISING, OperationalMode.ASCENDING}
)

_LEGAL_DIRECTIONS: dict[OperationalMode, frozenset[Direction]] = {
    OperationalMode.SURFACED: frozenset({Direction.FORWARD, Direction.DOWN}),
    OperationalMode.DIVING: frozenset(Direction),
    OperationalMode.CRUISING: frozenset(Direction),
    OperationalMode.ASCENDING: frozenset(Direction),
    OperationalMode.EMERGENCY: frozenset(),
}


def apply_surfaced(command: Command, state: AimState) -> AimState:
    """Surface running: forward moves without diving whatever the aim, down only steers."""
    if command.direction is Direction.FORWARD:
        return replace(state, horizontal=state.horizontal + command.value)
    return apply_aimed(command, state)


def can_execute(mode: OperationalMode, command: Command) -> bool:
    return command.direction in _LEGAL_DIRECTIONS[mode]


def next_mode(mode: OperationalMode, command: Command) -> OperationalMode:
    """Mode entered after *command* is executed in *mode* (legality is not checked)."""
    if mode is OperationalMode.SURFACED:
        return OperationalMode.DIVING if command.direction is Direction.DOWN else mode
    if mode in _CRUISING_FAMILY:
        if command.direction is Direction.UP and command.value > MODE_CHANGE_THRESHOLD:
            return OperationalMode.ASCENDING
        if command.direction is Direction.DOWN and command.value > MODE_CHANGE_THRESHOLD:
            return OperationalMode.DIVING
        return OperationalMode.CRUISING
    return mode


class ModalNavigator:
    """Aimed navigator that also tracks and enforces an operational mode."""

    def __init__(
        self,
        initial_mode: OperationalMode = OperationalMode.SURFACED,
        initial_state: AimState | None = None,
    ) -> None:
        self._mode = initial_mode
        self._state = initial_state or AimState()

    @property
    def mode(self) -> OperationalMode:
        return self._mode

    def execute(self, command: Command | str) -> AimState:
        """Apply *command* if legal; otherwise raise and leave mode and state untouched."""
        parsed = command if isinstance(command, Command) else parse_command(command)
        if not can_execute(self._mode, parsed):
            raise ModeTransitionError(
                f"Cannot execute {parsed.direction.value} in state {self._mode.value}"
            )
        if self._mode is OperationalMode.SURFACED:
            self._state = apply_surfaced(parsed, self._state)
        else:
            self._state = apply_aimed(parsed, self._state)
        self._mode = next_mode(self._mode, parsed)
        return self._state

    def declare_emergency(self) -> None:
        self._mode = OperationalMode.EMERGENCY

    def state(self) -> AimState:
        return self._state

    def position(self) -> Position:
        return self._state.position

    def result(self) -> int:
        return self._state.horizontal * self._state.depth
