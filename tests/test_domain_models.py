"""Tests for domain models to verify they work correctly."""

import pytest

from knotinsert.domain import HandleKind, HandleRef, Knot, Point
from knotinsert.exceptions import InvalidHandleError

TOLERANCE = 1e-9


def assert_point_close(actual: Point, expected: Point) -> None:
    assert abs(actual.x - expected.x) < TOLERANCE, f"{actual} != {expected}"
    assert abs(actual.y - expected.y) < TOLERANCE, f"{actual} != {expected}"


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_point_arithmetic(self) -> None:
        """Test componentwise operators."""
        a = Point(1.0, 2.0)
        b = Point(3.0, 5.0)
        assert a + b == Point(4.0, 7.0)
        assert b - a == Point(2.0, 3.0)
        assert -a == Point(-1.0, -2.0)

    def test_scalar_multiplication_is_commutative(self) -> None:
        """Test scalar multiply from either side."""
        p = Point(1.5, -2.0)
        assert p * 2.0 == Point(3.0, -4.0)
        assert 2.0 * p == Point(3.0, -4.0)

    def test_division(self) -> None:
        """Test division by a scalar."""
        assert Point(4.0, 8.0) / 4.0 == Point(1.0, 2.0)

    def test_division_by_zero_raises(self) -> None:
        """Dividing by exactly zero raises ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            _ = Point(1.0, 1.0) / 0.0

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, 200.0)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_zero(self) -> None:
        """Test the zero vector factory."""
        assert Point.zero() == Point(0.0, 0.0)


class TestKnotAccessors:
    """Tests for the global control point accessors of a symmetric knot."""

    def test_default_offset_is_zero(self) -> None:
        """A knot without offset has both controls on its anchor."""
        knot = Knot(Point(10.0, 20.0))
        assert knot.outgoing_control == Point(10.0, 20.0)
        assert knot.incoming_control == Point(10.0, 20.0)
        assert knot.is_symmetric

    def test_controls_mirror_the_offset(self) -> None:
        """Outgoing is anchor + offset, incoming is anchor - offset."""
        knot = Knot(Point(100.0, 100.0), Point(40.0, 10.0))
        assert knot.outgoing_control == Point(140.0, 110.0)
        assert knot.incoming_control == Point(60.0, 90.0)

    @pytest.mark.parametrize(
        "target",
        [Point(0.0, 0.0), Point(123.4, -56.7), Point(1e-3, 1e6)],
    )
    def test_outgoing_round_trip(self, target: Point) -> None:
        """Setting the outgoing control and reading it back yields the same point."""
        knot = Knot(Point(10.0, 20.0), Point(5.0, 5.0))
        knot.outgoing_control = target
        assert_point_close(knot.outgoing_control, target)

    @pytest.mark.parametrize(
        "target",
        [Point(0.0, 0.0), Point(123.4, -56.7), Point(1e-3, 1e6)],
    )
    def test_incoming_round_trip(self, target: Point) -> None:
        """Setting the incoming control and reading it back yields the same point."""
        knot = Knot(Point(10.0, 20.0), Point(5.0, 5.0))
        knot.incoming_control = target
        assert_point_close(knot.incoming_control, target)

    def test_writing_one_side_moves_the_other(self) -> None:
        """Both accessors are views over the same offset."""
        knot = Knot(Point(0.0, 0.0), Point(10.0, 0.0))
        knot.outgoing_control = Point(0.0, 30.0)
        assert knot.control_offset == Point(0.0, 30.0)
        assert knot.incoming_control == Point(0.0, -30.0)

        knot.incoming_control = Point(5.0, 0.0)
        assert knot.outgoing_control == Point(-5.0, 0.0)

    def test_asymmetric_knot_keeps_sides_independent(self) -> None:
        """An explicit incoming offset is not touched by outgoing writes."""
        knot = Knot(Point(0.0, 0.0), Point(10.0, 0.0), incoming_offset=Point(-3.0, 0.0))
        assert not knot.is_symmetric
        assert knot.incoming_control == Point(-3.0, 0.0)

        knot.outgoing_control = Point(20.0, 5.0)
        assert knot.incoming_control == Point(-3.0, 0.0)

        knot.incoming_control = Point(-1.0, -1.0)
        assert knot.incoming_offset == Point(-1.0, -1.0)
        assert knot.outgoing_control == Point(20.0, 5.0)


class TestKnotHandles:
    """Tests for handle access by kind and by numeric index."""

    def test_handle_by_kind(self) -> None:
        """Each handle kind reads the matching point."""
        knot = Knot(Point(50.0, 50.0), Point(10.0, 0.0))
        assert knot.handle(HandleKind.ANCHOR) == Point(50.0, 50.0)
        assert knot.handle(HandleKind.OUTGOING) == Point(60.0, 50.0)
        assert knot.handle(HandleKind.INCOMING) == Point(40.0, 50.0)

    def test_moving_anchor_carries_controls(self) -> None:
        """Moving the anchor keeps the control offset."""
        knot = Knot(Point(0.0, 0.0), Point(10.0, 0.0))
        knot.set_handle(HandleKind.ANCHOR, Point(100.0, 100.0))
        assert knot.outgoing_control == Point(110.0, 100.0)
        assert knot.incoming_control == Point(90.0, 100.0)

    def test_invalid_kind_raises(self) -> None:
        """A value outside the enumeration is rejected."""
        knot = Knot(Point(0.0, 0.0))
        with pytest.raises(InvalidHandleError):
            knot.handle(7)  # type: ignore[arg-type]
        with pytest.raises(InvalidHandleError):
            knot.set_handle(-1, Point(1.0, 1.0))  # type: ignore[arg-type]

    def test_numeric_index_matches_kinds(self) -> None:
        """Indices 0, 1, 2 address anchor, outgoing and incoming."""
        knot = Knot(Point(50.0, 50.0), Point(10.0, 0.0))
        assert knot[0] == knot.anchor
        assert knot[1] == knot.outgoing_control
        assert knot[2] == knot.incoming_control

        knot[1] = Point(50.0, 80.0)
        assert knot.control_offset == Point(0.0, 30.0)

    def test_out_of_range_index_reads_anchor(self) -> None:
        """Reading an unknown index falls back to the anchor."""
        knot = Knot(Point(5.0, 6.0), Point(1.0, 1.0))
        assert knot[3] == Point(5.0, 6.0)
        assert knot[-1] == Point(5.0, 6.0)

    def test_out_of_range_index_write_is_ignored(self) -> None:
        """Writing an unknown index changes nothing."""
        knot = Knot(Point(5.0, 6.0), Point(1.0, 1.0))
        knot[5] = Point(99.0, 99.0)
        assert knot == Knot(Point(5.0, 6.0), Point(1.0, 1.0))


class TestKnotCopyAndSerialization:
    """Tests for knot copies and dictionaries."""

    def test_copy_is_independent(self) -> None:
        """Mutating a copy leaves the original untouched."""
        original = Knot(Point(1.0, 2.0), Point(3.0, 4.0))
        clone = original.copy()
        clone.outgoing_control = Point(50.0, 50.0)
        assert original.control_offset == Point(3.0, 4.0)

    def test_symmetric_serialization(self) -> None:
        """A symmetric knot stores no incoming offset."""
        knot = Knot(Point(1.0, 2.0), Point(3.0, 4.0))
        data = knot.to_dict()
        assert data["incoming"] is None
        assert Knot.from_dict(data) == knot

    def test_asymmetric_serialization(self) -> None:
        """An asymmetric knot keeps its incoming offset."""
        knot = Knot(Point(1.0, 2.0), Point(3.0, 4.0), Point(-1.0, 0.5))
        restored = Knot.from_dict(knot.to_dict())
        assert restored == knot
        assert not restored.is_symmetric


class TestHandleRef:
    """Tests for HandleRef."""

    def test_handle_ref_is_hashable(self) -> None:
        """Handle references can be used as dictionary keys."""
        refs = {HandleRef(0, HandleKind.ANCHOR), HandleRef(0, HandleKind.ANCHOR)}
        assert len(refs) == 1

    def test_kind_values_match_numeric_index(self) -> None:
        """HandleKind values follow the anchor, outgoing, incoming order."""
        assert [int(kind) for kind in HandleKind] == [0, 1, 2]
