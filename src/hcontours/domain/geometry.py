"""Point and direction types for boundary tracing.

This module defines the small value types the tracer steps through:
- Direction: One of the eight compass directions around a pixel
- PixelPoint: An integer pixel coordinate
- EdgePoint: A sub-pixel point on the continuous image plane
"""

import math
from dataclasses import dataclass
from enum import IntEnum

# Points closer than this on both axes are treated as the same point
POINT_TOLERANCE = 0.001

# Headings closer than this (radians) are treated as the same direction
ANGLE_TOLERANCE = 0.01


class Direction(IntEnum):
    """Compass direction around a pixel.

    Numbered clockwise from the top-left neighbour::

        0 1 2
        7 . 3
        6 5 4

    Turning is pure: ``turn_left`` and ``turn_right`` return a new member
    rather than mutating anything.
    """

    NORTH_WEST = 0
    NORTH = 1
    NORTH_EAST = 2
    EAST = 3
    SOUTH_EAST = 4
    SOUTH = 5
    SOUTH_WEST = 6
    WEST = 7

    def turn_left(self) -> "Direction":
        """Return the direction a quarter turn anticlockwise."""
        return Direction((self + 6) % 8)

    def turn_right(self) -> "Direction":
        """Return the direction a quarter turn clockwise."""
        return Direction((self + 2) % 8)

    def reverse(self) -> "Direction":
        """Return the opposite direction."""
        return Direction((self + 4) % 8)

    @property
    def offset(self) -> tuple[int, int]:
        """Pixel offset (dx, dy) of one step in this direction."""
        return _OFFSETS[self]


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH_WEST: (-1, -1),
    Direction.NORTH: (0, -1),
    Direction.NORTH_EAST: (1, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH_EAST: (1, 1),
    Direction.SOUTH: (0, 1),
    Direction.SOUTH_WEST: (-1, 1),
    Direction.WEST: (-1, 0),
}


@dataclass(frozen=True, slots=True)
class PixelPoint:
    """Integer pixel coordinate.

    Attributes:
        x: Column index (0 is the left edge)
        y: Row index (0 is the top edge)
    """

    x: int
    y: int

    def step(self, direction: Direction) -> "PixelPoint":
        """Return the neighbouring pixel one step along ``direction``."""
        dx, dy = direction.offset
        return PixelPoint(self.x + dx, self.y + dy)

    def backstep(self, direction: Direction) -> "PixelPoint":
        """Return the neighbouring pixel one step against ``direction``."""
        return self.step(direction.reverse())


@dataclass(frozen=True, slots=True)
class EdgePoint:
    """A point on the continuous image plane.

    Pixel edges fall on integer coordinates, so the centre of pixel (0, 0)
    is at (0.5, 0.5).

    Attributes:
        x: Horizontal position
        y: Vertical position
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def is_close(self, other: "EdgePoint", tolerance: float = POINT_TOLERANCE) -> bool:
        """Check whether two points coincide within ``tolerance`` on each axis."""
        return abs(self.x - other.x) < tolerance and abs(self.y - other.y) < tolerance

    def angle_to(self, other: "EdgePoint") -> float:
        """Angle in radians of the move from this point to ``other``."""
        return math.atan2(other.y - self.y, other.x - self.x)

    def distance_to(self, other: "EdgePoint") -> float:
        """Euclidean distance to ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"{{{self.x:.3f}, {self.y:.3f}}}"
