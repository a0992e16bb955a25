"""Multi-segment cubic Bezier path.

A path is an ordered list of knots; segment i spans knot i to knot i+1. A
single global progress value in [0, 1] locates a position on the whole path:
each of the N-1 segments takes an equal 1/(N-1) share of the range, so
progress is uniform per segment rather than by arc length.

Mutating methods return a small result describing what changed (the index
of the inserted or removed knot, or None when nothing happened) instead of
notifying observers.
"""

import math
from collections.abc import Iterable, Iterator
from typing import Any, NamedTuple

from knotinsert.core.geometry import distance
from knotinsert.core.segment import BezierSegment
from knotinsert.domain import HandleKind, HandleRef, Knot, Point
from knotinsert.exceptions import InvalidHandleError


class SegmentPosition(NamedTuple):
    """A progress value resolved to a segment.

    Attributes:
        index: Segment index, clamped to [0, segment_count - 1]
        t: Local curve parameter within the segment
    """

    index: int
    t: float


class BezierPath:
    """An ordered chain of knots forming connected cubic Bezier segments.

    Paths with fewer than two knots have no segments; every progress-based
    operation returns None or does nothing on them.

    Example:
        path = BezierPath([
            Knot(Point(0, 0), Point(40, 0)),
            Knot(Point(160, 160), Point(40, 0)),
        ])
        path.point_at(0.5)      # Point(x=80.0, y=80.0)
        path.subdivide_at(0.5)  # 1, the index of the new knot
    """

    def __init__(self, knots: Iterable[Knot] = ()) -> None:
        """Initialize the path.

        Args:
            knots: Initial knots; they are copied, not shared
        """
        self._knots: list[Knot] = [knot.copy() for knot in knots]

    def __len__(self) -> int:
        return len(self._knots)

    def __iter__(self) -> Iterator[Knot]:
        return iter(self._knots)

    def __getitem__(self, index: int) -> Knot:
        return self._knots[index]

    def __repr__(self) -> str:
        return f"BezierPath(knots={self._knots!r})"

    @property
    def knots(self) -> list[Knot]:
        """Knots of the path, in order (the list itself is a copy)."""
        return list(self._knots)

    @property
    def segment_count(self) -> int:
        """Number of segments, max(knot count - 1, 0)."""
        return max(len(self._knots) - 1, 0)

    def segment(self, index: int) -> BezierSegment:
        """Get the segment starting at knot index.

        Raises:
            IndexError: If index is not a valid segment index
        """
        if not 0 <= index < self.segment_count:
            raise IndexError(f"Segment index {index} out of range")
        return BezierSegment(self._knots[index], self._knots[index + 1])

    def segments(self) -> list[BezierSegment]:
        """Get all segments in path order."""
        return [self.segment(i) for i in range(self.segment_count)]

    def append(self, knot: Knot) -> int:
        """Append a knot to the end of the path.

        Returns:
            Index of the appended knot
        """
        self._knots.append(knot.copy())
        return len(self._knots) - 1

    def replace_all(self, knots: Iterable[Knot]) -> None:
        """Replace every knot of the path with copies of the given knots."""
        self._knots = [knot.copy() for knot in knots]

    def snapshot(self) -> tuple[Knot, ...]:
        """Return independent copies of all knots."""
        return tuple(knot.copy() for knot in self._knots)

    def progress_to_segment(self, progress: float) -> SegmentPosition | None:
        """Map a global progress value to a segment and local parameter.

        The progress is scaled so that each segment spans a unit interval.
        The segment index is the integer part, clamped to the valid range;
        the local parameter is what remains and is not clamped. At
        progress == 1 this yields the last segment with t == 1.

        Args:
            progress: Position along the whole path, normally in [0, 1]

        Returns:
            SegmentPosition, or None if the path has fewer than two knots

        Examples:
            >>> path = BezierPath([Knot(Point(0, 0)), Knot(Point(1, 0)), Knot(Point(2, 0))])
            >>> path.progress_to_segment(0.75)
            SegmentPosition(index=1, t=0.5)
            >>> path.progress_to_segment(1.0)
            SegmentPosition(index=1, t=1.0)
        """
        segment_count = self.segment_count
        if segment_count < 1:
            return None

        raw = progress * segment_count
        index = min(max(math.floor(raw), 0), segment_count - 1)
        return SegmentPosition(index=index, t=raw - index)

    def point_at(self, progress: float) -> Point | None:
        """Evaluate the point at a global progress value.

        Args:
            progress: Position along the whole path

        Returns:
            Point on the curve, or None if the path has fewer than two knots
        """
        position = self.progress_to_segment(progress)
        if position is None:
            return None
        return self.segment(position.index).evaluate(position.t)

    def subdivide_at(self, progress: float) -> int | None:
        """Insert a knot at a global progress value without changing the shape.

        The segment containing progress is split with De Casteljau's
        algorithm: its two knots are replaced by three. The outer handles of
        the original knots (incoming of the first, outgoing of the second)
        are carried over so the neighbouring segments are untouched.

        Args:
            progress: Position along the whole path

        Returns:
            Index of the inserted knot, or None if the path has fewer than
            two knots
        """
        position = self.progress_to_segment(progress)
        if position is None:
            return None

        index = position.index
        start, end = self._knots[index], self._knots[index + 1]
        first, middle, last = BezierSegment(start, end).subdivide(position.t)

        first.incoming_offset = start.incoming_control - start.anchor
        last.control_offset = end.control_offset

        self._knots[index : index + 2] = [first, middle, last]
        return index + 1

    def remove_nearest_to(self, progress: float) -> int | None:
        """Delete the segment endpoint closest to a global progress value.

        Within the resolved segment, a local parameter above 0.5 removes the
        segment's end knot; anything else removes its start knot.

        Args:
            progress: Position along the whole path

        Returns:
            Index of the removed knot, or None if the path has fewer than
            two knots
        """
        position = self.progress_to_segment(progress)
        if position is None:
            return None

        index = position.index + 1 if position.t > 0.5 else position.index
        del self._knots[index]
        return index

    def hit_test(self, point: Point, max_distance: float) -> HandleRef | None:
        """Find the handle nearest to a point.

        Handles are enumerated knot by knot, in the order anchor, outgoing,
        incoming. A handle is a candidate when its distance to point is less
        than max_distance; among equally near candidates the first one in
        enumeration order wins.

        Args:
            point: Query position, e.g. a pointer location
            max_distance: Search radius

        Returns:
            Reference to the nearest handle, or None if none is in range
        """
        best: HandleRef | None = None
        best_distance = max_distance

        for knot_index, knot in enumerate(self._knots):
            for kind in HandleKind:
                handle_distance = distance(knot.handle(kind), point)
                if handle_distance >= max_distance:
                    continue
                if best is None or handle_distance < best_distance:
                    best = HandleRef(knot_index, kind)
                    best_distance = handle_distance

        return best

    def _knot_for(self, ref: HandleRef) -> Knot:
        if not 0 <= ref.knot_index < len(self._knots):
            raise InvalidHandleError(ref, f"path has {len(self._knots)} knots")
        return self._knots[ref.knot_index]

    def get_handle(self, ref: HandleRef) -> Point:
        """Read the global position of a handle.

        Raises:
            InvalidHandleError: If the knot index or kind is invalid
        """
        return self._knot_for(ref).handle(ref.kind)

    def set_handle(self, ref: HandleRef, value: Point) -> None:
        """Move a handle to a global position.

        Raises:
            InvalidHandleError: If the knot index or kind is invalid
        """
        self._knot_for(ref).set_handle(ref.kind, value)

    def flatten(self, tolerance: float) -> list[Point]:
        """Approximate the whole path with a polyline.

        Args:
            tolerance: Maximum distance between polyline and curve

        Returns:
            Polyline points; a single-knot path yields its anchor and an
            empty path yields an empty list
        """
        if len(self._knots) < 2:
            return [knot.anchor for knot in self._knots]

        points: list[Point] = []
        for segment in self.segments():
            flattened = segment.flatten(tolerance)
            points.extend(flattened if not points else flattened[1:])
        return points

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the list of knots
        """
        return {"knots": [knot.to_dict() for knot in self._knots]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BezierPath":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a path

        Returns:
            BezierPath instance
        """
        return cls(Knot.from_dict(k) for k in data["knots"])
