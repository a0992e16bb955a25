"""Core curve math and editing model for knotinsert.

This module contains the core algorithms for:

- Vector geometry (interpolation, projection, normalization)
- Cubic Bezier evaluation and De Casteljau subdivision
- Progress-based addressing of a multi-segment path
- Editing requests with bounded undo history

Key functions:
- lerp: Linear interpolation between two points
- project_percent: Line parameter of a point's projection
- project: Closest point on a line or segment
- normalize: Unit vector, zero-safe
- distance: Euclidean distance between points

Key classes:
- BezierSegment: Cubic curve between two knots
- BezierPath: Ordered chain of knots with progress-based operations
- EditHistory: Fixed-capacity snapshot stack
- EditorSession: Applies user requests to a path
"""

from knotinsert.core.editor import EditorSession
from knotinsert.core.geometry import (
    add,
    distance,
    divide,
    dot,
    length,
    length_squared,
    lerp,
    normalize,
    project,
    project_percent,
    scale,
    subtract,
)
from knotinsert.core.history import EditHistory, EditSnapshot
from knotinsert.core.path import BezierPath, SegmentPosition
from knotinsert.core.segment import BezierSegment

__all__ = [
    # Path classes
    "BezierPath",
    "BezierSegment",
    # Editing classes
    "EditHistory",
    "EditSnapshot",
    "EditorSession",
    "SegmentPosition",
    # Geometry functions
    "add",
    "distance",
    "divide",
    "dot",
    "length",
    "length_squared",
    "lerp",
    "normalize",
    "project",
    "project_percent",
    "scale",
    "subtract",
]
