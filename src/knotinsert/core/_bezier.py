"""Internal Bezier curve flattening algorithm.

This is an internal module containing the helper behind
BezierSegment.flatten. Not intended for public use.
"""

from knotinsert.core.geometry import distance, lerp, project
from knotinsert.domain import Point

# Subdividing a cubic 16 times yields up to 65536 line segments
MAX_FLATTEN_DEPTH = 16


def flatten_cubic(
    points: tuple[Point, Point, Point, Point], tolerance: float, depth: int = 0
) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm to split at t=0.5 until both inner control
    points lie within tolerance of the chord. The curve stays inside its
    control polygon, so the chord is then within tolerance of the curve.

    Args:
        points: Control points (p0, p1, p2, p3)
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, starting at p0 and ending at p3
    """
    p0, p1, p2, p3 = points

    flat = all(
        distance(control, project(control, p0, p3, True)) <= tolerance
        for control in (p1, p2)
    )
    if flat or depth >= MAX_FLATTEN_DEPTH:
        return [p0, p3]

    # First level
    q1 = lerp(p0, p1, 0.5)
    q2 = lerp(p1, p2, 0.5)
    q3 = lerp(p2, p3, 0.5)

    # Second level
    r1 = lerp(q1, q2, 0.5)
    r2 = lerp(q2, q3, 0.5)

    # Third level (midpoint)
    mid = lerp(r1, r2, 0.5)

    left = flatten_cubic((p0, q1, r1, mid), tolerance, depth + 1)
    right = flatten_cubic((mid, r2, q3, p3), tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right
