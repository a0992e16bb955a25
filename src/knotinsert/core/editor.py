"""Editing session driving a Bezier path from discrete user requests.

The session is the single owner of a BezierPath and of the progress marker.
Front ends call one method per input event (add, drag start/update/end,
split, delete, set progress, undo); each call is applied immediately and
returns a result describing the change, so callers redraw by polling the
session rather than subscribing to notifications.

Every structural edit first pushes a snapshot of the path and progress onto
a bounded history, enabling single-step undo.
"""

from collections.abc import Iterable

from knotinsert.config import EditorConfig
from knotinsert.core.history import EditHistory, EditSnapshot
from knotinsert.core.path import BezierPath
from knotinsert.domain import HandleRef, Knot, Point
from knotinsert.utils import EditLogger


class EditorSession:
    """Applies editing requests to a path and keeps undo history.

    Example:
        session = EditorSession()
        session.add_knot()
        session.add_knot()
        session.set_progress(0.5)
        session.marker       # point halfway along the path
        session.split()      # 1
        session.undo()       # True, back to two knots
    """

    def __init__(
        self,
        config: EditorConfig | None = None,
        path: BezierPath | None = None,
        logger: EditLogger | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            config: Editor settings (defaults if None)
            path: Path to edit (an empty path if None)
            logger: Edit logger (a default one if None)
        """
        self.config = config if config is not None else EditorConfig()
        self._path = path if path is not None else BezierPath()
        self._progress: float | None = None
        self._history = EditHistory(self.config.history_capacity)
        self._drag_ref: HandleRef | None = None
        self._drag_start = Point.zero()
        self.edit_logger = logger if logger is not None else EditLogger()

    @property
    def path(self) -> BezierPath:
        """The path being edited."""
        return self._path

    @property
    def progress(self) -> float | None:
        """Current progress marker value, or None if unset."""
        return self._progress

    @property
    def marker(self) -> Point | None:
        """Position of the progress marker on the path.

        Recomputed on every access from the current path and progress, so it
        is never stale. None if no progress is set or the path has fewer than
        two knots.
        """
        if self._progress is None:
            return None
        return self._path.point_at(self._progress)

    @property
    def dragging(self) -> HandleRef | None:
        """Handle currently being dragged, if any."""
        return self._drag_ref

    @property
    def history(self) -> EditHistory:
        """Undo history of this session."""
        return self._history

    @property
    def history_size(self) -> int:
        """Number of undo steps available."""
        return len(self._history)

    def snapshot(self) -> EditSnapshot:
        """Capture the current path and progress."""
        return EditSnapshot(knots=self._path.snapshot(), progress=self._progress)

    def _capture(self) -> None:
        self._history.push(self.snapshot())

    def restore(self, knots: Iterable[Knot], progress: float | None = None) -> None:
        """Replace the whole path and the progress marker.

        Any drag in progress is cancelled. History is left untouched.

        Args:
            knots: New knots of the path
            progress: New progress marker value
        """
        self._path.replace_all(knots)
        self._progress = progress
        self._drag_ref = None

    def set_progress(self, value: float | None) -> None:
        """Move the progress marker, or hide it with None.

        Values are clamped to [0, 1] so the marker stays on the path.
        """
        self._progress = None if value is None else min(max(value, 0.0), 1.0)

    def add_knot(self, position: Point | None = None) -> int:
        """Append a symmetric knot to the path.

        Without a position the knot is placed diagonally, at
        ``(count + 1) * knot_spacing`` on both axes.

        Args:
            position: Anchor of the new knot

        Returns:
            Index of the new knot
        """
        if position is None:
            offset = (len(self._path) + 1) * self.config.knot_spacing
            position = Point(offset, offset)

        self._capture()
        control = Point(*self.config.default_control_offset)
        index = self._path.append(Knot(anchor=position, control_offset=control))
        self.edit_logger.log_knot_added(index, position.x, position.y)
        return index

    def begin_drag(self, point: Point) -> HandleRef | None:
        """Pick up the handle nearest to point.

        Args:
            point: Pointer position where the drag started

        Returns:
            The picked handle, or None if no handle is within the hit radius
        """
        ref = self._path.hit_test(point, self.config.hit_radius)
        self._drag_ref = ref
        if ref is None:
            return None

        self._capture()
        self._drag_start = self._path.get_handle(ref)
        self.edit_logger.log_drag_start(ref.knot_index, ref.kind.name)
        return ref

    def update_drag(self, translation: Point) -> bool:
        """Move the dragged handle by the total translation since drag start.

        Args:
            translation: Pointer offset from the drag start position

        Returns:
            True if a handle was moved, False if no drag is active
        """
        if self._drag_ref is None:
            return False
        self._path.set_handle(self._drag_ref, self._drag_start + translation)
        return True

    def end_drag(self) -> HandleRef | None:
        """Release the dragged handle.

        Returns:
            The released handle, or None if no drag was active
        """
        ref = self._drag_ref
        self._drag_ref = None
        if ref is not None:
            final = self._path.get_handle(ref)
            self.edit_logger.log_drag_end(ref.knot_index, ref.kind.name, final.x, final.y)
        return ref

    def split(self) -> int | None:
        """Insert a knot at the progress marker.

        The marker is cleared afterwards since it now sits on a knot.

        Returns:
            Index of the inserted knot, or None if there is no marker or the
            path has fewer than two knots
        """
        progress = self._progress
        if progress is None or self._path.progress_to_segment(progress) is None:
            self.edit_logger.log_split(progress, None)
            return None

        self._capture()
        index = self._path.subdivide_at(progress)
        self._progress = None
        self.edit_logger.log_split(progress, index)
        return index

    def delete_nearest(self) -> int | None:
        """Delete the knot closest to the progress marker.

        Returns:
            Index of the removed knot, or None if there is no marker or the
            path has fewer than two knots
        """
        progress = self._progress
        if progress is None or self._path.progress_to_segment(progress) is None:
            self.edit_logger.log_deletion(progress, None)
            return None

        self._capture()
        index = self._path.remove_nearest_to(progress)
        self.edit_logger.log_deletion(progress, index)
        return index

    def undo(self) -> bool:
        """Restore the state captured before the last structural edit.

        Returns:
            True if a snapshot was restored, False if history was empty
        """
        snapshot = self._history.pop()
        if snapshot is None:
            self.edit_logger.log_undo(False, 0)
            return False

        self.restore(snapshot.knots, snapshot.progress)
        self.edit_logger.log_undo(True, len(self._history))
        return True
