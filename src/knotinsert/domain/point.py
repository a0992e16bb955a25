"""Two-dimensional point type used throughout knotinsert.

A Point doubles as a vector: anchors, control points and offsets between
them all share this single value type.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or vector) in 2D space.

    Immutable and hashable for use in sets/dicts. Arithmetic operators are
    componentwise; multiplication and division take a scalar on either side.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    @classmethod
    def zero(cls) -> "Point":
        """Return the zero vector."""
        return cls(0.0, 0.0)

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, scalar: float) -> "Point":
        return Point(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Point":
        return Point(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> "Point":
        """Divide by a scalar through its reciprocal.

        Raises:
            ZeroDivisionError: If scalar is exactly zero
        """
        return self * (1.0 / scalar)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))
