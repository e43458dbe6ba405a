"""Boundary tracing for a single connected shape.

The tracer walks clockwise round the boundary of one 8-connected shape
(y grows downwards), keeping the inside of the shape on its right. At every
step it holds an adjacent pair of pixels, one inside the shape and one
outside, and emits a sub-pixel point interpolated between them.

Key functions:
- weighted_average: Interpolate a boundary point between two pixels
- start_state: Tracer state for a freshly discovered shape
- advance: One pure transition of the tracer state machine
- trace_contour: Trace a complete closed contour
"""

import logging
from dataclasses import dataclass

from hcontours.domain import Contour, Direction, EdgePoint, LuminanceSource, PixelPoint
from hcontours.exceptions import WeightedAverageError

logger = logging.getLogger(__name__)

# Direction of travel when the raster scan bumps into a shape. Tied to the
# left-to-right scan order in find_contours().
APPROACH_DIRECTION = Direction.EAST

# Off-image points are pinned this far outside the image edge
EDGE_OFFSET = 0.001


def weighted_average(
    outside: PixelPoint,
    inside: PixelPoint,
    outside_value: int,
    inside_value: int,
    threshold: int,
    width: int,
    height: int,
) -> EdgePoint:
    """Interpolate the boundary point between an outside and an inside pixel.

    The point lies where the threshold falls between the two luminance
    values, shifted by half a pixel so that pixel edges sit on integers.
    An axis on which the outside pixel is off the image is pinned just
    beyond the image edge instead.

    Args:
        outside: Pixel outside the shape (luminance >= threshold)
        inside: Adjacent pixel inside the shape (luminance < threshold)
        outside_value: Luminance of ``outside``
        inside_value: Luminance of ``inside``
        threshold: Luminance cutoff
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        Sub-pixel boundary point

    Raises:
        WeightedAverageError: If the values do not straddle the threshold

    Examples:
        >>> p = weighted_average(PixelPoint(1, 0), PixelPoint(1, 1), 200, 20, 80, 3, 3)
        >>> round(p.x, 3), round(p.y, 3)
        (1.5, 1.167)
    """
    if outside_value == inside_value or not inside_value < threshold <= outside_value:
        raise WeightedAverageError(outside_value, threshold, inside_value)

    proportion = (outside_value - threshold) / (outside_value - inside_value)

    if outside.x < 0:
        x = -EDGE_OFFSET
    elif outside.x >= width:
        x = width + EDGE_OFFSET
    else:
        x = outside.x + (inside.x - outside.x) * proportion + 0.5

    if outside.y < 0:
        y = -EDGE_OFFSET
    elif outside.y >= height:
        y = height + EDGE_OFFSET
    else:
        y = outside.y + (inside.y - outside.y) * proportion + 0.5

    return EdgePoint(x, y)


@dataclass(frozen=True, slots=True)
class TracerState:
    """Position of the tracer on a shape boundary.

    Attributes:
        inside: Current pixel inside the shape
        outside: Adjacent pixel outside the shape, to the left of travel
        facing: Direction of travel
    """

    inside: PixelPoint
    outside: PixelPoint
    facing: Direction

    def edge_point(self, luminance: LuminanceSource, threshold: int) -> EdgePoint:
        """Boundary point between this state's inside and outside pixels."""
        return weighted_average(
            self.outside,
            self.inside,
            luminance.get(self.outside.x, self.outside.y),
            luminance.get(self.inside.x, self.inside.y),
            threshold,
            luminance.width,
            luminance.height,
        )


def start_state(start: PixelPoint) -> TracerState:
    """State for a shape first met at ``start`` while scanning.

    The facing direction is the scan direction; the outside pixel is the
    one the scan has just left.
    """
    return TracerState(
        inside=start,
        outside=start.backstep(APPROACH_DIRECTION),
        facing=APPROACH_DIRECTION,
    )


def advance(state: TracerState, luminance: LuminanceSource, threshold: int) -> TracerState:
    """Take one step along the boundary.

    Looks one pixel ahead of both the inside and the outside pixel:

    - if the pixel ahead of the outside one is really inside, it becomes the
      inside pixel and the tracer turns left;
    - otherwise, if the pixel ahead of the inside one is really outside, it
      becomes the outside pixel and the tracer turns right;
    - otherwise both pixels move straight ahead.

    Args:
        state: Current tracer state
        luminance: Luminance source
        threshold: Luminance cutoff

    Returns:
        The next tracer state
    """
    next_outside = state.outside.step(state.facing)
    next_inside = state.inside.step(state.facing)

    if luminance.get(next_outside.x, next_outside.y) < threshold:
        return TracerState(next_outside, state.outside, state.facing.turn_left())
    if luminance.get(next_inside.x, next_inside.y) >= threshold:
        return TracerState(state.inside, next_inside, state.facing.turn_right())
    return TracerState(next_inside, next_outside, state.facing)


@dataclass(frozen=True)
class TraceResult:
    """Output of tracing one shape.

    Attributes:
        contour: Closed contour, starting and ending at the same point
        visited: Every inside pixel the tracer stood on, including the start
        length: Path length of the contour in pixels
    """

    contour: Contour
    visited: frozenset[PixelPoint]
    length: float


def trace_contour(luminance: LuminanceSource, threshold: int, start: PixelPoint) -> TraceResult:
    """Trace the boundary of the shape containing ``start``.

    ``start`` must be the first inside pixel of its shape in raster order,
    so the pixel to its left is outside.

    The trace stops only when it is back on the start pixel facing the
    initial direction. Thin or pinched shapes pass through the start pixel
    mid-trace facing some other way.

    Args:
        luminance: Luminance source
        threshold: Luminance cutoff; pixels below it are inside
        start: First inside pixel of the shape in raster order

    Returns:
        TraceResult with the closed contour, visited pixels and length

    Raises:
        WeightedAverageError: If ``start`` is not a valid starting pixel
    """
    state = start_state(start)
    previous = state.edge_point(luminance, threshold)
    points = [previous]
    visited = {start}
    length = 0.0

    state = TracerState(state.inside, state.outside, state.facing.turn_left())
    final_facing = state.facing

    while True:
        state = advance(state, luminance, threshold)
        visited.add(state.inside)

        point = state.edge_point(luminance, threshold)
        points.append(point)
        length += previous.distance_to(point)
        previous = point

        if state.inside == start and state.facing == final_facing:
            break

    logger.debug(
        "Traced contour from (%d, %d): %d points, length %.3f",
        start.x,
        start.y,
        len(points),
        length,
    )
    return TraceResult(contour=Contour.from_points(points), visited=frozenset(visited), length=length)
