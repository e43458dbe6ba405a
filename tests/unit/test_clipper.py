"""Tests for breaking contours at the image edge."""

import pytest

from hcontours.core.clipper import (
    edge_crossing,
    intercept_horizontal,
    intercept_vertical,
    is_off_image,
    split_at_edges,
)
from hcontours.core.scanner import find_contours
from hcontours.domain import Contour, EdgePoint, LuminanceField


def as_text(contour: Contour) -> str:
    """Points as they appear in SVG output."""
    return " ".join(f"{p.x:.2f},{p.y:.2f}" for p in contour)


class TestIsOffImage:
    """Tests for is_off_image function."""

    @pytest.mark.parametrize(
        ("x", "y", "expected"),
        [
            (0.0, 0.0, False),
            (4.0, 3.0, False),
            (2.0, 1.5, False),
            (-0.001, 1.0, True),
            (1.0, -0.001, True),
            (4.001, 1.0, True),
            (1.0, 3.001, True),
        ],
    )
    def test_edges_are_on_image(self, x: float, y: float, expected: bool) -> None:
        """Test that the edge itself counts as on the image."""
        assert is_off_image(EdgePoint(x, y), 4, 3) is expected


class TestIntercepts:
    """Tests for edge intercept helpers."""

    def test_intercept_vertical(self) -> None:
        """Test meeting a vertical edge."""
        p = intercept_vertical(EdgePoint(1.0, 1.0), EdgePoint(-1.0, 3.0), 0.0)
        assert p.to_tuple() == pytest.approx((0.0, 2.0))

    def test_intercept_horizontal(self) -> None:
        """Test meeting a horizontal edge."""
        p = intercept_horizontal(EdgePoint(1.0, 1.0), EdgePoint(3.0, -1.0), 0.0)
        assert p.to_tuple() == pytest.approx((2.0, 0.0))

    def test_vertical_line_meets_horizontal_edge(self) -> None:
        """Test that a vertical segment keeps its x coordinate."""
        p = intercept_horizontal(EdgePoint(1.0, 1.0), EdgePoint(1.0, -1.0), 0.0)
        assert p.to_tuple() == (1.0, 0.0)

    def test_edge_crossing_left(self) -> None:
        """Test crossing the left edge."""
        p = edge_crossing(EdgePoint(-1.0, 3.0), EdgePoint(1.0, 1.0), 4, 4)
        assert p.to_tuple() == pytest.approx((0.0, 2.0))

    def test_edge_crossing_bottom(self) -> None:
        """Test crossing the bottom edge."""
        p = edge_crossing(EdgePoint(2.0, 5.0), EdgePoint(1.0, 3.0), 4, 4)
        assert p.to_tuple() == pytest.approx((1.5, 4.0))

    def test_edge_crossing_corner(self) -> None:
        """Test a segment leaving past a corner ends on the image boundary."""
        p = edge_crossing(EdgePoint(5.0, 6.0), EdgePoint(3.0, 3.0), 4, 4)
        assert not is_off_image(p, 4, 4)
        assert p.y == pytest.approx(4.0)


class TestSplitAtEdges:
    """Tests for split_at_edges function."""

    def test_contour_inside_image_is_whole(self, square_field: LuminanceField) -> None:
        """Test that a contour that stays on the image comes back closed."""
        contour = find_contours(square_field, 128).contours[0]
        pieces = split_at_edges(contour, 4, 4)
        assert len(pieces) == 1
        assert pieces[0].is_closed()

    def test_edge_shapes(self, edge_field: LuminanceField) -> None:
        """Test the pieces of shapes touching the image edge."""
        contours = find_contours(edge_field, 128).contours

        top_left = split_at_edges(contours[0], 8, 8)
        assert [as_text(p) for p in top_left] == [
            "1.00,0.50 1.50,0.00",
            "2.50,0.00 3.00,0.50 3.00,1.50 1.50,3.00 0.50,3.00 0.00,2.50",
            "0.00,1.50 1.00,0.50",
        ]
        assert not any(p.is_closed() for p in top_left)

        border = split_at_edges(contours[1], 8, 8)
        assert [as_text(p) for p in border] == [
            "4.00,0.50 4.50,0.00",
            "0.00,4.50 0.50,4.00 2.50,4.00 4.00,2.50 4.00,0.50",
        ]

        middle = split_at_edges(contours[2], 8, 8)
        assert [as_text(p) for p in middle] == [
            "5.00,4.50 5.50,4.00 6.00,4.50 6.00,5.50 5.50,6.00 4.50,6.00 4.00,5.50 5.00,4.50",
        ]
        assert middle[0].is_closed()

    def test_pieces_end_on_edge(self, corner_field: LuminanceField) -> None:
        """Test that no piece contains an off-image point."""
        for contour in find_contours(corner_field, 128).contours:
            for piece in split_at_edges(contour, 4, 4):
                assert all(not is_off_image(p, 4, 4) for p in piece)

    def test_entirely_off_image(self) -> None:
        """Test that a contour never touching the image yields no pieces."""
        contour = Contour.from_tuples([(-1, -1), (-2, -1), (-2, -2), (-1, -1)])
        assert split_at_edges(contour, 4, 4) == []
