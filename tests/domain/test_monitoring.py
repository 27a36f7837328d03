"""Tests for navigator observers in subsurvey.domain.monitoring."""

from __future__ import annotations

from subsurvey.domain.monitoring import DepthAlarm, PositionLog, Telemetry
from subsurvey.domain.navigation import AimState, Navigator


def test_position_log_records_each_state() -> None:
    nav = Navigator()
    log = PositionLog()
    nav.subscribe(log)
    nav.execute("down 2")
    nav.execute("forward 3")
    assert log.entries() == [AimState(0, 0, 2), AimState(3, 6, 2)]


def test_position_log_entries_are_a_copy() -> None:
    nav = Navigator()
    log = PositionLog()
    nav.subscribe(log)
    nav.execute("forward 1")
    log.entries().clear()
    assert len(log.entries()) == 1


def test_depth_alarm_latches_above_limit() -> None:
    nav = Navigator()
    alarm = DepthAlarm(max_depth=10)
    nav.subscribe(alarm)
    nav.execute("down 5")
    nav.execute("forward 2")
    assert not alarm.triggered  # depth 10 is not above the limit
    nav.execute("forward 1")
    assert alarm.triggered
    nav.execute("up 10")
    nav.execute("forward 5")
    assert alarm.triggered


def test_telemetry_counts_commands_and_distance() -> None:
    nav = Navigator()
    telemetry = Telemetry()
    nav.subscribe(telemetry)
    for text in ["forward 5", "down 1", "forward -3"]:
        nav.execute(text)
    assert telemetry.command_count == 3
    assert telemetry.total_distance == 8


def test_unsubscribe_stops_notifications() -> None:
    nav = Navigator()
    telemetry = Telemetry()
    unsubscribe = nav.subscribe(telemetry)
    nav.execute("forward 1")
    unsubscribe()
    unsubscribe()
    nav.execute("forward 1")
    assert telemetry.command_count == 1


def test_unsubscribe_removes_only_its_own_observer() -> None:
    nav = Navigator()
    first = Telemetry()
    second = Telemetry()
    assert first == second
    nav.subscribe(first)
    unsubscribe_second = nav.subscribe(second)
    unsubscribe_second()
    nav.execute("forward 1")
    assert (first.command_count, second.command_count) == (1, 0)
