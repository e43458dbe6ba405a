"""Removal of redundant collinear vertices from contours."""

from hcontours.domain import ANGLE_TOLERANCE, POINT_TOLERANCE, Contour


def same_angle(a1: float, a2: float, tolerance: float = ANGLE_TOLERANCE) -> bool:
    """Check whether two angles in radians are close enough to be equal."""
    return abs(a1 - a2) < tolerance


def compress(
    contour: Contour,
    angle_tolerance: float = ANGLE_TOLERANCE,
    point_tolerance: float = POINT_TOLERANCE,
) -> Contour:
    """Combine consecutive moves in the same direction.

    Drops every vertex that repeats the previous kept vertex or continues
    the current heading. The first and last points are always kept, so a
    closed contour stays closed.

    Args:
        contour: Contour to simplify
        angle_tolerance: Maximum heading difference (radians) for collinear moves
        point_tolerance: Per-axis tolerance for zero-length moves

    Returns:
        New contour with the same shape and fewer vertices. Contours of
        fewer than three points are returned unchanged.

    Note:
        Headings are compared against the last kept vertex only, so a run
        of moves whose heading drifts slowly can lose another vertex when
        compressed a second time. Compression is idempotent for contours
        made of straight runs.

    Examples:
        >>> c = Contour.from_tuples([(0, 0), (1, 0), (2, 0), (2, 1)])
        >>> [p.to_tuple() for p in compress(c)]
        [(0.0, 0.0), (2.0, 0.0), (2.0, 1.0)]
    """
    points = contour.points
    if len(points) < 3:
        return contour

    anchor = points[0]
    heading = anchor.angle_to(points[1])
    kept = [anchor]

    for current, following in zip(points[1:-1], points[2:]):
        if current.is_close(anchor, point_tolerance):
            continue
        next_heading = current.angle_to(following)
        if same_angle(heading, next_heading, angle_tolerance):
            continue
        kept.append(current)
        anchor = current
        heading = next_heading

    kept.append(points[-1])
    return Contour.from_points(kept)
