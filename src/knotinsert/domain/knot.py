"""Knots and handle references for Bezier path editing.

This module defines the editable building block of a path:
- Knot: An anchor point plus its control offsets
- HandleKind: Enum naming the three draggable points of a knot
- HandleRef: A (knot index, handle kind) pair addressing one handle in a path
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from knotinsert.domain.point import Point
from knotinsert.exceptions import InvalidHandleError


class HandleKind(IntEnum):
    """Draggable point of a knot.

    Values match the numeric handle index used by editor front ends:
    - ANCHOR: The point the curve passes through
    - OUTGOING: Control point toward the next segment
    - INCOMING: Control point from the previous segment
    """

    ANCHOR = 0
    OUTGOING = 1
    INCOMING = 2


@dataclass(frozen=True, slots=True)
class HandleRef:
    """Address of a single handle within a path.

    Attributes:
        knot_index: Index of the knot in the path
        kind: Which of the knot's three points is addressed
    """

    knot_index: int
    kind: HandleKind


def _check_kind(kind: object) -> HandleKind:
    try:
        return HandleKind(kind)
    except ValueError:
        raise InvalidHandleError(kind, "not a handle kind") from None


@dataclass
class Knot:
    """One anchor of a path with its tangent handles.

    The outgoing control point is always ``anchor + control_offset``. A
    symmetric knot (``incoming_offset is None``) mirrors that offset for the
    incoming control point, so both handles stay collinear through the anchor
    and of equal length, and writing either handle rewrites the shared
    offset. An asymmetric knot stores the incoming offset separately; knots
    produced by subdivision are asymmetric so that the split retraces the
    original curve exactly.

    Attributes:
        anchor: Point the curve passes through
        control_offset: Outgoing control point relative to the anchor
        incoming_offset: Incoming control point relative to the anchor, or
            None to mirror control_offset
    """

    anchor: Point
    control_offset: Point = field(default_factory=Point.zero)
    incoming_offset: Point | None = None

    @property
    def is_symmetric(self) -> bool:
        """True if the incoming handle mirrors the outgoing one."""
        return self.incoming_offset is None

    @property
    def outgoing_control(self) -> Point:
        """Outgoing control point in global coordinates."""
        return self.anchor + self.control_offset

    @outgoing_control.setter
    def outgoing_control(self, value: Point) -> None:
        self.control_offset = value - self.anchor

    @property
    def incoming_control(self) -> Point:
        """Incoming control point in global coordinates."""
        if self.incoming_offset is None:
            return self.anchor - self.control_offset
        return self.anchor + self.incoming_offset

    @incoming_control.setter
    def incoming_control(self, value: Point) -> None:
        if self.incoming_offset is None:
            self.control_offset = self.anchor - value
        else:
            self.incoming_offset = value - self.anchor

    def handle(self, kind: HandleKind) -> Point:
        """Get the global position of one handle.

        Args:
            kind: Handle to read

        Returns:
            Position of the handle

        Raises:
            InvalidHandleError: If kind is not a HandleKind value
        """
        kind = _check_kind(kind)
        if kind is HandleKind.ANCHOR:
            return self.anchor
        if kind is HandleKind.OUTGOING:
            return self.outgoing_control
        return self.incoming_control

    def set_handle(self, kind: HandleKind, value: Point) -> None:
        """Move one handle to a global position.

        Moving the anchor keeps the control offsets, so both control points
        travel with it.

        Args:
            kind: Handle to move
            value: New global position

        Raises:
            InvalidHandleError: If kind is not a HandleKind value
        """
        kind = _check_kind(kind)
        if kind is HandleKind.ANCHOR:
            self.anchor = value
        elif kind is HandleKind.OUTGOING:
            self.outgoing_control = value
        else:
            self.incoming_control = value

    def __getitem__(self, index: int) -> Point:
        """Lenient numeric handle access.

        Indices outside 0..2 fall back to the anchor instead of raising.
        """
        if index in (0, 1, 2):
            return self.handle(HandleKind(index))
        return self.anchor

    def __setitem__(self, index: int, value: Point) -> None:
        """Lenient numeric handle write.

        Indices outside 0..2 are ignored instead of raising.
        """
        if index in (0, 1, 2):
            self.set_handle(HandleKind(index), value)

    def copy(self) -> "Knot":
        """Return an independent copy of this knot."""
        return Knot(
            anchor=self.anchor,
            control_offset=self.control_offset,
            incoming_offset=self.incoming_offset,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the knot
        """
        return {
            "anchor": self.anchor.to_dict(),
            "control": self.control_offset.to_dict(),
            "incoming": (
                self.incoming_offset.to_dict()
                if self.incoming_offset is not None
                else None
            ),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Knot":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a knot

        Returns:
            Knot instance
        """
        incoming = data.get("incoming")
        return cls(
            anchor=Point.from_dict(data["anchor"]),
            control_offset=Point.from_dict(data["control"]),
            incoming_offset=Point.from_dict(incoming) if incoming is not None else None,
        )
