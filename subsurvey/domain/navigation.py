"""Submarine navigation state and the two movement rule variants.

Rule invariants (aimed variant):
- ``aim`` changes only on down/up commands.
- ``horizontal`` changes only on forward commands, by the command value.
- ``depth`` changes only on forward commands, by ``aim * value``.

Values are never sign-checked: ``forward -3`` moves backwards.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from functools import reduce
from typing import Protocol

from subsurvey.config.types import NavigationMode, SubmarineConfig
from subsurvey.domain.commands import Command, Direction, parse_command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    """Horizontal position and depth of the submarine."""

    horizontal: int = 0
    depth: int = 0

    @property
    def product(self) -> int:
        return self.horizontal * self.depth


@dataclass(frozen=True)
class AimState:
    """Full navigator state: position plus the aim accumulator."""

    horizontal: int = 0
    depth: int = 0
    aim: int = 0

    @property
    def position(self) -> Position:
        return Position(horizontal=self.horizontal, depth=self.depth)


class LimitExceededError(ValueError):
    """Raised when a command breaks a configured speed or depth limit."""


class NavigationObserver(Protocol):
    def notify(self, command: Command, before: AimState, after: AimState) -> None: ...


def apply_simple(command: Command, state: AimState) -> AimState:
    """Part-one rule: down/up change depth directly, forward changes horizontal."""
    if command.direction is Direction.FORWARD:
        return replace(state, horizontal=state.horizontal + command.value)
    if command.direction is Direction.DOWN:
        return replace(state, depth=state.depth + command.value)
    return replace(state, depth=state.depth - command.value)


def apply_aimed(command: Command, state: AimState) -> AimState:
    """Aim rule: down/up steer, forward moves and dives by ``aim * value``."""
    if command.direction is Direction.FORWARD:
        return replace(
            state,
            horizontal=state.horizontal + command.value,
            depth=state.depth + state.aim * command.value,
        )
    if command.direction is Direction.DOWN:
        return replace(state, aim=state.aim + command.value)
    return replace(state, aim=state.aim - command.value)


_RULES: dict[NavigationMode, Callable[[Command, AimState], AimState]] = {
    NavigationMode.SIMPLE: apply_simple,
    NavigationMode.AIMED: apply_aimed,
}


def apply_command(command: Command, state: AimState, mode: NavigationMode) -> AimState:
    """Apply *command* to *state* under the rule variant *mode*."""
    return _RULES[mode](command, state)


def _as_command(command: Command | str) -> Command:
    return command if isinstance(command, Command) else parse_command(command)


def navigate(
    commands: Iterable[Command | str],
    mode: NavigationMode = NavigationMode.AIMED,
    initial: AimState | None = None,
) -> AimState:
    """Fold a command sequence into a final state, starting from *initial* or the origin."""
    rule = _RULES[mode]
    return reduce(
        lambda state, command: rule(_as_command(command), state),
        commands,
        initial or AimState(),
    )


class Navigator:
    """Stateful navigator: applies one command at a time and hands out snapshots."""

    def __init__(
        self,
        mode: NavigationMode = NavigationMode.AIMED,
        config: SubmarineConfig | None = None,
    ) -> None:
        self.mode = mode
        self.config = config or SubmarineConfig()
        start = self.config.start
        self._state = AimState(horizontal=start.horizontal, depth=start.depth, aim=start.aim)
        self._observers: list[NavigationObserver] = []
        self._command_log: list[str] = []

    def execute(self, command: Command | str) -> AimState:
        """Parse (if needed), check limits, apply, and notify observers.

        Raises :exc:`ParseError` for malformed text and
        :exc:`LimitExceededError` when a configured limit would be broken;
        in both cases the state is unchanged.
        """
        parsed = _as_command(command)
        max_speed = self.config.max_speed
        if (
            max_speed is not None
            and parsed.direction is Direction.FORWARD
            and parsed.value > max_speed
        ):
            raise LimitExceededError(f"Speed limit exceeded: {parsed.value} > {max_speed}")

        before = self._state
        after = apply_command(parsed, before, self.mode)
        max_depth = self.config.max_depth
        if max_depth is not None and after.depth > max_depth:
            raise LimitExceededError(f"Depth limit exceeded: {after.depth} > {max_depth}")

        self._state = after
        if self.config.record_commands:
            self._command_log.append(f"{parsed.direction.value} {parsed.value}")
        for observer in list(self._observers):
            observer.notify(parsed, before, after)
        return after

    def subscribe(self, observer: NavigationObserver) -> Callable[[], None]:
        """Register *observer*; the returned callable unregisters it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            # Observers may be dataclasses that compare equal; match by identity.
            self._observers = [o for o in self._observers if o is not observer]

        return unsubscribe

    def state(self) -> AimState:
        return self._state

    def position(self) -> Position:
        return self._state.position

    def result(self) -> int:
        """Product of horizontal position and depth."""
        return self._state.horizontal * self._state.depth

    def command_log(self) -> list[str]:
        return list(self._command_log)

    def restore(self, state: AimState) -> None:
        """Replace the current state without notifying observers."""
        logger.debug("Restoring navigator state to %s", state)
        self._state = state
