"""Cubic Bezier segment between two consecutive knots.

A segment owns no state of its own: its four control points are derived
from the start knot's anchor and outgoing handle and the end knot's incoming
handle and anchor.
"""

from dataclasses import dataclass

from knotinsert.core._bezier import flatten_cubic
from knotinsert.core.geometry import lerp
from knotinsert.domain import Knot, Point


@dataclass(frozen=True)
class BezierSegment:
    """The cubic Bezier curve spanning two knots.

    Attributes:
        start: Knot at t=0
        end: Knot at t=1
    """

    start: Knot
    end: Knot

    def control_points(self) -> tuple[Point, Point, Point, Point]:
        """Return the control polygon (P0, P1, P2, P3)."""
        return (
            self.start.anchor,
            self.start.outgoing_control,
            self.end.incoming_control,
            self.end.anchor,
        )

    def evaluate(self, t: float) -> Point:
        """Evaluate the curve at parameter t.

        Uses the Bernstein form
        ``(1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3``.

        Args:
            t: Curve parameter, normally in [0, 1]

        Returns:
            Point on the curve
        """
        p0, p1, p2, p3 = self.control_points()
        u = 1.0 - t
        return (
            (u * u * u) * p0
            + (3.0 * u * u * t) * p1
            + (3.0 * u * t * t) * p2
            + (t * t * t) * p3
        )

    def subdivide(self, t: float) -> tuple[Knot, Knot, Knot]:
        """Split the segment at t with De Casteljau's algorithm.

        The three returned knots describe two segments that exactly retrace
        the [0, t] and [t, 1] portions of this one. Only the inner handles are
        set: the first knot's incoming handle and the last knot's outgoing
        handle sit on their anchors, so callers keep the original outer
        handles themselves.

        Args:
            t: Split parameter in [0, 1]

        Returns:
            Tuple of (start knot, new middle knot, end knot)
        """
        p0, p1, p2, p3 = self.control_points()

        # First level
        a = lerp(p0, p1, t)
        b = lerp(p1, p2, t)
        c = lerp(p2, p3, t)

        # Second level
        d = lerp(a, b, t)
        e = lerp(b, c, t)

        # Third level: the point on the curve
        f = lerp(d, e, t)

        zero = Point.zero()
        first = Knot(anchor=p0, control_offset=a - p0, incoming_offset=zero)
        middle = Knot(anchor=f, control_offset=e - f, incoming_offset=d - f)
        last = Knot(anchor=p3, control_offset=zero, incoming_offset=c - p3)
        return first, middle, last

    def flatten(self, tolerance: float) -> list[Point]:
        """Approximate the segment with a polyline.

        Args:
            tolerance: Maximum distance between polyline and curve

        Returns:
            Points from start anchor to end anchor
        """
        return flatten_cubic(self.control_points(), tolerance)
