"""Breaking contours at the image edge into open polylines.

A contour around a shape that touches the image edge runs just outside the
image along that edge. Pen plotters should not draw those parts, so the
contour is cut where it leaves the image and each remaining run becomes an
open polyline ending exactly on the edge.

Key functions:
- is_off_image: Test whether a point lies outside the image
- intercept_vertical: Where a line meets a vertical edge
- intercept_horizontal: Where a line meets a horizontal edge
- edge_crossing: Where a segment leaving the image crosses its edge
- split_at_edges: Break a contour into on-image pieces
"""

from hcontours.core.compressor import compress
from hcontours.domain import ANGLE_TOLERANCE, POINT_TOLERANCE, Contour, EdgePoint


def is_off_image(point: EdgePoint, width: int, height: int) -> bool:
    """Check whether ``point`` lies outside ``[0, width] x [0, height]``."""
    return point.x < 0 or point.y < 0 or point.x > width or point.y > height


def intercept_vertical(p1: EdgePoint, p2: EdgePoint, x: float) -> EdgePoint:
    """Point where the line through ``p1`` and ``p2`` meets the vertical line at ``x``."""
    m = (p2.y - p1.y) / (p2.x - p1.x)
    c = p1.y - m * p1.x
    return EdgePoint(x, m * x + c)


def intercept_horizontal(p1: EdgePoint, p2: EdgePoint, y: float) -> EdgePoint:
    """Point where the line through ``p1`` and ``p2`` meets the horizontal line at ``y``.

    A vertical line keeps its x coordinate.
    """
    if p2.x == p1.x:
        return EdgePoint(p1.x, y)
    m = (p2.y - p1.y) / (p2.x - p1.x)
    c = p1.y - m * p1.x
    return EdgePoint((y - c) / m, y)


def edge_crossing(
    outside: EdgePoint, inside: EdgePoint, width: int, height: int
) -> EdgePoint:
    """Point where the segment from ``inside`` to ``outside`` crosses the image edge.

    Args:
        outside: Off-image end of the segment
        inside: On-image end of the segment
        width: Image width
        height: Image height

    Returns:
        The crossing point on the image boundary
    """
    point = outside
    if point.x < 0:
        point = intercept_vertical(inside, point, 0.0)
    if point.x > width:
        point = intercept_vertical(inside, point, float(width))
    if point.y < 0:
        point = intercept_horizontal(inside, point, 0.0)
    if point.y > height:
        point = intercept_horizontal(inside, point, float(height))
    return point


def split_at_edges(
    contour: Contour,
    width: int,
    height: int,
    angle_tolerance: float = ANGLE_TOLERANCE,
    point_tolerance: float = POINT_TOLERANCE,
) -> list[Contour]:
    """Break a contour into the runs that lie on the image.

    Each run starts and ends on the image edge where the contour crosses
    it. A contour that never leaves the image comes back whole and closed.
    Every piece is compressed.

    Args:
        contour: Traced contour
        width: Image width
        height: Image height
        angle_tolerance: Heading tolerance passed to compression
        point_tolerance: Point tolerance passed to compression

    Returns:
        Compressed pieces in contour order; empty if the contour never
        touches the image
    """
    points = contour.points
    pieces: list[Contour] = []
    run: list[EdgePoint] | None = None

    def finish(run_points: list[EdgePoint]) -> None:
        pieces.append(
            compress(Contour.from_points(run_points), angle_tolerance, point_tolerance)
        )

    for i, point in enumerate(points):
        if is_off_image(point, width, height):
            if run is not None:
                run.append(edge_crossing(point, points[i - 1], width, height))
                finish(run)
                run = None
            continue

        if run is None:
            run = []
            if i > 0:
                # Coming back onto the image: start on the edge
                run.append(edge_crossing(points[i - 1], point, width, height))
        run.append(point)

    if run is not None:
        finish(run)

    return pieces
