"""Tests for domain models to verify they work correctly."""

import math

import pytest

from hcontours.domain import (
    OFF_IMAGE,
    Contour,
    Direction,
    EdgePoint,
    LuminanceField,
    PixelPoint,
    rgb_luminance,
)


class TestDirection:
    """Tests for Direction enum."""

    def test_turn_left_is_quarter_turn_anticlockwise(self) -> None:
        """Test turning left from each orthogonal direction."""
        assert Direction.NORTH.turn_left() == Direction.WEST
        assert Direction.WEST.turn_left() == Direction.SOUTH
        assert Direction.SOUTH.turn_left() == Direction.EAST
        assert Direction.EAST.turn_left() == Direction.NORTH

    def test_turn_right_is_quarter_turn_clockwise(self) -> None:
        """Test turning right from each orthogonal direction."""
        assert Direction.NORTH.turn_right() == Direction.EAST
        assert Direction.EAST.turn_right() == Direction.SOUTH
        assert Direction.SOUTH.turn_right() == Direction.WEST
        assert Direction.WEST.turn_right() == Direction.NORTH

    def test_turns_wrap_diagonals(self) -> None:
        """Test that diagonal directions wrap around the compass."""
        assert Direction.NORTH_WEST.turn_left() == Direction.SOUTH_WEST
        assert Direction.SOUTH_WEST.turn_right() == Direction.NORTH_WEST

    def test_turning_does_not_mutate(self) -> None:
        """Test that turning returns a new value."""
        facing = Direction.EAST
        facing.turn_left()
        assert facing == Direction.EAST

    def test_reverse(self) -> None:
        """Test reversing directions."""
        assert Direction.EAST.reverse() == Direction.WEST
        assert Direction.NORTH_EAST.reverse() == Direction.SOUTH_WEST

    def test_offsets(self) -> None:
        """Test pixel offsets for each direction."""
        assert Direction.NORTH_WEST.offset == (-1, -1)
        assert Direction.NORTH.offset == (0, -1)
        assert Direction.NORTH_EAST.offset == (1, -1)
        assert Direction.EAST.offset == (1, 0)
        assert Direction.SOUTH_EAST.offset == (1, 1)
        assert Direction.SOUTH.offset == (0, 1)
        assert Direction.SOUTH_WEST.offset == (-1, 1)
        assert Direction.WEST.offset == (-1, 0)


class TestPixelPoint:
    """Tests for PixelPoint class."""

    def test_step(self) -> None:
        """Test stepping to a neighbour."""
        assert PixelPoint(2, 2).step(Direction.NORTH) == PixelPoint(2, 1)
        assert PixelPoint(2, 2).step(Direction.SOUTH_WEST) == PixelPoint(1, 3)

    def test_backstep(self) -> None:
        """Test stepping against a direction."""
        assert PixelPoint(0, 0).backstep(Direction.EAST) == PixelPoint(-1, 0)

    def test_hashable(self) -> None:
        """Test that pixel points can be used in sets."""
        assert {PixelPoint(1, 1), PixelPoint(1, 1)} == {PixelPoint(1, 1)}

    def test_immutable(self) -> None:
        """Test that pixel points are immutable."""
        p = PixelPoint(1, 2)
        with pytest.raises(AttributeError):
            p.x = 3  # type: ignore


class TestEdgePoint:
    """Tests for EdgePoint class."""

    def test_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert EdgePoint(1.5, 0.998).to_tuple() == (1.5, 0.998)

    def test_is_close_within_tolerance(self) -> None:
        """Test closeness on both axes."""
        assert EdgePoint(1.0, 1.0).is_close(EdgePoint(1.0005, 0.9995))
        assert not EdgePoint(1.0, 1.0).is_close(EdgePoint(1.002, 1.0))
        assert not EdgePoint(1.0, 1.0).is_close(EdgePoint(1.0, 1.002))

    def test_angle_to(self) -> None:
        """Test headings between points."""
        origin = EdgePoint(0.0, 0.0)
        assert origin.angle_to(EdgePoint(1.0, 0.0)) == pytest.approx(0.0)
        assert origin.angle_to(EdgePoint(0.0, 1.0)) == pytest.approx(math.pi / 2)
        assert origin.angle_to(EdgePoint(-1.0, 0.0)) == pytest.approx(math.pi)

    def test_distance_to(self) -> None:
        """Test Euclidean distance."""
        assert EdgePoint(0.0, 0.0).distance_to(EdgePoint(3.0, 4.0)) == pytest.approx(5.0)

    def test_str(self) -> None:
        """Test string form with three decimals."""
        assert str(EdgePoint(0.998, 1.5)) == "{0.998, 1.500}"


class TestContour:
    """Tests for Contour class."""

    def test_from_tuples(self) -> None:
        """Test building a contour from coordinate pairs."""
        contour = Contour.from_tuples([(0, 0), (1, 0)])
        assert len(contour) == 2
        assert contour[1] == EdgePoint(1.0, 0.0)
        assert isinstance(contour[0].x, float)

    def test_is_closed(self) -> None:
        """Test closed and open contours."""
        assert Contour.from_tuples([(0, 0), (1, 0), (1, 1), (0, 0)]).is_closed()
        assert not Contour.from_tuples([(0, 0), (1, 0), (1, 1)]).is_closed()

    def test_short_contour_is_not_closed(self) -> None:
        """Test that a single point is not a closed contour."""
        assert not Contour.from_tuples([(0, 0)]).is_closed()
        assert not Contour.from_tuples([]).is_closed()

    def test_length(self) -> None:
        """Test path length."""
        contour = Contour.from_tuples([(0, 0), (3, 4), (3, 0)])
        assert contour.length() == pytest.approx(9.0)

    def test_is_close(self) -> None:
        """Test contour comparison with tolerance."""
        a = Contour.from_tuples([(0, 0), (1, 0)])
        b = Contour.from_tuples([(0.0004, 0), (1, 0.0004)])
        c = Contour.from_tuples([(0, 0)])
        assert a.is_close(b)
        assert not a.is_close(c)

    def test_iteration(self) -> None:
        """Test iterating over points."""
        contour = Contour.from_tuples([(0, 0), (1, 1)])
        assert [p.to_tuple() for p in contour] == [(0.0, 0.0), (1.0, 1.0)]


class TestLuminanceField:
    """Tests for LuminanceField class."""

    def test_from_rows(self) -> None:
        """Test building a field from rows."""
        field = LuminanceField.from_rows([[1, 2, 3], [4, 5, 6]])
        assert field.width == 3
        assert field.height == 2
        assert field.get(2, 1) == 6
        assert field.get(0, 1) == 4

    def test_off_image_reads_white(self) -> None:
        """Test that coordinates off the image read as OFF_IMAGE."""
        field = LuminanceField.from_rows([[0, 0], [0, 0]])
        assert field.get(-1, 0) == OFF_IMAGE
        assert field.get(0, -1) == OFF_IMAGE
        assert field.get(2, 0) == OFF_IMAGE
        assert field.get(0, 2) == OFF_IMAGE

    def test_contains(self) -> None:
        """Test on-image checks."""
        field = LuminanceField.from_rows([[0, 0], [0, 0]])
        assert field.contains(1, 1)
        assert not field.contains(2, 1)

    def test_ragged_rows_rejected(self) -> None:
        """Test that rows of different length are rejected."""
        with pytest.raises(ValueError):
            LuminanceField.from_rows([[0, 0], [0]])

    def test_wrong_value_count_rejected(self) -> None:
        """Test that the value buffer must match the dimensions."""
        with pytest.raises(ValueError):
            LuminanceField(width=2, height=2, values=bytes(3))

    def test_from_rgb(self) -> None:
        """Test building a field from RGB triples."""
        field = LuminanceField.from_rgb(2, 1, [(255, 255, 255), (0, 0, 0)])
        assert field.get(0, 0) == 255
        assert field.get(1, 0) == 0


class TestRgbLuminance:
    """Tests for rgb_luminance function."""

    def test_primaries(self) -> None:
        """Test weighting of each channel."""
        assert rgb_luminance(255, 0, 0) == 76
        assert rgb_luminance(0, 255, 0) == 150
        assert rgb_luminance(0, 0, 255) == 29

    def test_grey_is_unchanged(self) -> None:
        """Test that greys map to themselves."""
        assert rgb_luminance(0, 0, 0) == 0
        assert rgb_luminance(128, 128, 128) == 128
        assert rgb_luminance(255, 255, 255) == 255
