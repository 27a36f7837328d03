"""Tests for subsurvey.domain.modes module."""

from __future__ import annotations

import pytest

from subsurvey.domain.commands import Command, Direction
from subsurvey.domain.modes import (
    ModalNavigator,
    ModeTransitionError,
    OperationalMode,
    can_execute,
    next_mode,
)
from subsurvey.domain.navigation import AimState, Position


class TestModeRules:
    def test_surfaced_rejects_up(self) -> None:
        assert not can_execute(OperationalMode.SURFACED, Command(Direction.UP, 1))
        assert can_execute(OperationalMode.SURFACED, Command(Direction.FORWARD, 1))
        assert can_execute(OperationalMode.SURFACED, Command(Direction.DOWN, 1))

    @pytest.mark.parametrize(
        "mode", [OperationalMode.DIVING, OperationalMode.CRUISING, OperationalMode.ASCENDING]
    )
    def test_cruising_family_accepts_everything(self, mode: OperationalMode) -> None:
        for direction in Direction:
            assert can_execute(mode, Command(direction, 1))

    def test_emergency_accepts_nothing(self) -> None:
        for direction in Direction:
            assert not can_execute(OperationalMode.EMERGENCY, Command(direction, 1))

    def test_surfaced_transitions(self) -> None:
        surfaced = OperationalMode.SURFACED
        assert next_mode(surfaced, Command(Direction.FORWARD, 9)) is surfaced
        assert next_mode(surfaced, Command(Direction.DOWN, 1)) is OperationalMode.DIVING

    def test_threshold_is_strict(self) -> None:
        cruising = OperationalMode.CRUISING
        assert next_mode(cruising, Command(Direction.DOWN, 5)) is cruising
        assert next_mode(cruising, Command(Direction.DOWN, 6)) is OperationalMode.DIVING
        assert next_mode(cruising, Command(Direction.UP, 5)) is cruising
        assert next_mode(cruising, Command(Direction.UP, 6)) is OperationalMode.ASCENDING

    def test_settles_back_to_cruising(self) -> None:
        assert (
            next_mode(OperationalMode.DIVING, Command(Direction.FORWARD, 100))
            is OperationalMode.CRUISING
        )
        assert (
            next_mode(OperationalMode.ASCENDING, Command(Direction.DOWN, 2))
            is OperationalMode.CRUISING
        )


class TestModalNavigator:
    def test_starts_surfaced(self) -> None:
        nav = ModalNavigator()
        assert nav.mode is OperationalMode.SURFACED
        assert nav.state() == AimState()

    def test_up_while_surfaced_raises_and_keeps_state(self) -> None:
        nav = ModalNavigator()
        nav.execute("forward 3")
        with pytest.raises(ModeTransitionError, match="Cannot execute up in state SURFACED"):
            nav.execute("up 1")
        assert nav.mode is OperationalMode.SURFACED
        assert nav.position() == Position(3, 0)

    def test_sequence_of_modes(self) -> None:
        nav = ModalNavigator()
        nav.execute("down 2")
        assert nav.mode is OperationalMode.DIVING
        nav.execute("forward 4")
        assert nav.mode is OperationalMode.CRUISING
        nav.execute("up 8")
        assert nav.mode is OperationalMode.ASCENDING
        nav.execute("down 10")
        assert nav.mode is OperationalMode.DIVING
        assert nav.state() == AimState(horizontal=4, depth=8, aim=4)

    def test_matches_aimed_rule(self) -> None:
        nav = ModalNavigator()
        for text in ["forward 5", "down 5", "forward 8", "up 3", "down 8", "forward 2"]:
            nav.execute(text)
        assert nav.result() == 900

    def test_emergency_blocks_commands(self) -> None:
        nav = ModalNavigator()
        nav.execute("down 1")
        nav.declare_emergency()
        with pytest.raises(ModeTransitionError):
            nav.execute("forward 1")
        assert nav.position() == Position(0, 0)

    def test_surfaced_forward_ignores_aim(self) -> None:
        nav = ModalNavigator(initial_state=AimState(horizontal=0, depth=0, aim=4))
        nav.execute("forward 2")
        assert nav.state() == AimState(horizontal=2, depth=0, aim=4)
        nav.execute("down 1")
        assert nav.mode is OperationalMode.DIVING
        nav.execute("forward 2")
        assert nav.state() == AimState(horizontal=4, depth=10, aim=5)
