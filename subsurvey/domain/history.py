"""Snapshot history with undo/redo for a :class:`Navigator`."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from subsurvey.domain.navigation import AimState, Navigator


@dataclass(frozen=True)
class Snapshot:
    """Navigator state captured at a point in time."""

    state: AimState
    taken_at: datetime


@dataclass
class NavigationHistory:
    """Linear snapshot history; saving after an undo discards the redo branch."""

    _snapshots: list[Snapshot] = field(default_factory=list)
    _index: int = -1

    def save(self, navigator: Navigator) -> Snapshot:
        del self._snapshots[self._index + 1 :]
        snapshot = Snapshot(state=navigator.state(), taken_at=datetime.now(timezone.utc))
        self._snapshots.append(snapshot)
        self._index += 1
        return snapshot

    def undo(self, navigator: Navigator) -> bool:
        if not self.can_undo:
            return False
        self._index -= 1
        navigator.restore(self._snapshots[self._index].state)
        return True

    def redo(self, navigator: Navigator) -> bool:
        if not self.can_redo:
            return False
        self._index += 1
        navigator.restore(self._snapshots[self._index].state)
        return True

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._snapshots) - 1

    def snapshots(self) -> list[Snapshot]:
        return list(self._snapshots)
