"""Domain models for knotinsert.

This module contains the value types a Bezier path is built from. All models
are designed to be:

- Plain dataclasses with no rendering or UI dependencies
- Cheap to copy for undo snapshots
- Serializable to dictionaries for the file layer

Key classes:
- Point: A 2D point or vector
- Knot: An anchor with its control offsets
- HandleKind: Anchor, outgoing or incoming handle of a knot
- HandleRef: A handle addressed by knot index and kind
"""

from knotinsert.domain.knot import HandleKind, HandleRef, Knot
from knotinsert.domain.point import Point

__all__: list[str] = [
    # Enums
    "HandleKind",
    # Core types
    "Point",
    "Knot",
    "HandleRef",
]
