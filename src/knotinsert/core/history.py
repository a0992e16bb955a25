"""Bounded undo history of editor snapshots."""

from collections import deque
from dataclasses import dataclass

from knotinsert.domain import Knot

DEFAULT_HISTORY_CAPACITY = 10


@dataclass(frozen=True)
class EditSnapshot:
    """Full editor state captured before a structural edit.

    Attributes:
        knots: Copies of every knot of the path
        progress: Progress marker value, or None if no marker was set
    """

    knots: tuple[Knot, ...]
    progress: float | None


class EditHistory:
    """Fixed-capacity stack of snapshots.

    Pushing onto a full history evicts the oldest snapshot. Popping returns
    the newest one.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")
        self._snapshots: deque[EditSnapshot] = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def capacity(self) -> int:
        """Maximum number of snapshots retained."""
        # maxlen is always set by __init__
        return self._snapshots.maxlen or 0

    def push(self, snapshot: EditSnapshot) -> None:
        """Store a snapshot, evicting the oldest one when full."""
        self._snapshots.append(snapshot)

    def pop(self) -> EditSnapshot | None:
        """Remove and return the newest snapshot, or None if empty."""
        if not self._snapshots:
            return None
        return self._snapshots.pop()

    def snapshots(self) -> list[EditSnapshot]:
        """Get retained snapshots, oldest first."""
        return list(self._snapshots)

    def clear(self) -> None:
        """Drop every snapshot."""
        self._snapshots.clear()
