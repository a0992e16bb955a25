"""Vector operations for curve evaluation and handle editing.

This module provides the geometry kernel used by segments and paths:
- Componentwise addition, subtraction and scalar scaling
- Dot product, length and distance
- Safe normalization
- Linear interpolation
- Projection of a point onto a line or line segment

All functions are pure and stateless.
"""

import math

from knotinsert.domain import Point


def add(a: Point, b: Point) -> Point:
    """Add two vectors componentwise."""
    return Point(a.x + b.x, a.y + b.y)


def subtract(a: Point, b: Point) -> Point:
    """Subtract vector b from vector a componentwise."""
    return Point(a.x - b.x, a.y - b.y)


def scale(a: Point | float, b: Point | float) -> Point:
    """Multiply a vector by a scalar.

    The arguments may be given in either order, so ``scale(p, 2.0)`` and
    ``scale(2.0, p)`` are equivalent.

    Args:
        a: Vector or scalar
        b: Scalar or vector

    Returns:
        The scaled vector

    Raises:
        TypeError: If neither or both arguments are points
    """
    if isinstance(a, Point) and not isinstance(b, Point):
        return Point(a.x * b, a.y * b)
    if isinstance(b, Point) and not isinstance(a, Point):
        return Point(b.x * a, b.y * a)
    raise TypeError("scale() takes exactly one Point and one scalar")


def divide(a: Point, scalar: float) -> Point:
    """Divide a vector by a scalar via multiplication by its reciprocal.

    Raises:
        ZeroDivisionError: If scalar is exactly zero
    """
    return scale(a, 1.0 / scalar)


def dot(a: Point, b: Point) -> float:
    """Dot product of two vectors."""
    return a.x * b.x + a.y * b.y


def length_squared(a: Point) -> float:
    """Squared length of a vector."""
    return dot(a, a)


def length(a: Point) -> float:
    """Euclidean length of a vector."""
    return math.sqrt(length_squared(a))


def normalize(a: Point) -> Point:
    """Scale a vector to unit length.

    Args:
        a: Vector to normalize

    Returns:
        Unit vector in the direction of a, or the zero vector if a has
        zero length

    Examples:
        >>> normalize(Point(0.0, 5.0))
        Point(x=0.0, y=1.0)
        >>> normalize(Point(0.0, 0.0))
        Point(x=0.0, y=0.0)
    """
    vector_length = length(a)
    if vector_length > 0:
        return divide(a, vector_length)
    return Point.zero()


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return length(subtract(a, b))


def lerp(start: Point, end: Point, t: float) -> Point:
    """Linearly interpolate between two points.

    t is not clamped: values outside [0, 1] extrapolate along the line.

    Args:
        start: Point returned at t=0
        end: Point returned at t=1
        t: Interpolation parameter

    Returns:
        ``start + (end - start) * t``
    """
    return add(start, scale(subtract(end, start), t))


def project_percent(
    point: Point, line_p1: Point, line_p2: Point, clamp_to_segment: bool = False
) -> float:
    """Find the line parameter of the point's orthogonal projection.

    The returned t places ``line_p1 + t * (line_p2 - line_p1)`` at the point
    of the infinite line through line_p1 and line_p2 closest to point.

    Args:
        point: The point to project
        line_p1: First point of the line (t=0)
        line_p2: Second point of the line (t=1)
        clamp_to_segment: Clamp t to [0, 1] to stay within the segment

    Returns:
        Line parameter t. Returns 0.0 for a degenerate line where
        line_p1 == line_p2.

    Examples:
        >>> project_percent(Point(1.0, 1.0), Point(0.0, 0.0), Point(2.0, 0.0))
        0.5
        >>> project_percent(Point(5.0, 1.0), Point(0.0, 0.0), Point(2.0, 0.0), True)
        1.0
    """
    direction = subtract(line_p2, line_p1)
    line_length_sq = length_squared(direction)
    if line_length_sq == 0.0:
        return 0.0

    t = dot(subtract(point, line_p1), direction) / line_length_sq
    if clamp_to_segment:
        t = max(0.0, min(1.0, t))
    return t


def project(
    point: Point, line_p1: Point, line_p2: Point, clamp_to_segment: bool = False
) -> Point:
    """Project a point onto a line or line segment.

    Args:
        point: The point to project
        line_p1: First point of the line
        line_p2: Second point of the line
        clamp_to_segment: Keep the result between line_p1 and line_p2

    Returns:
        Closest point on the line (or segment) to point
    """
    t = project_percent(point, line_p1, line_p2, clamp_to_segment)
    return lerp(line_p1, line_p2, t)
