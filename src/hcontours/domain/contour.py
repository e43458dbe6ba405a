"""Contour type produced by the boundary tracer."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from hcontours.domain.geometry import POINT_TOLERANCE, EdgePoint


@dataclass(frozen=True)
class Contour:
    """An ordered sequence of sub-pixel boundary points.

    A traced contour is geometrically closed: its first and last points
    coincide. Contours split at the image edge are open polylines.
    Contours are never modified in place; every transform builds a new one.

    Attributes:
        points: Boundary points in tracing order
    """

    points: tuple[EdgePoint, ...]

    @classmethod
    def from_points(cls, points: Iterable[EdgePoint]) -> "Contour":
        """Build a contour from any iterable of points."""
        return cls(points=tuple(points))

    @classmethod
    def from_tuples(cls, coords: Iterable[tuple[float, float]]) -> "Contour":
        """Build a contour from (x, y) pairs."""
        return cls(points=tuple(EdgePoint(float(x), float(y)) for x, y in coords))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[EdgePoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> EdgePoint:
        return self.points[index]

    def is_closed(self, tolerance: float = POINT_TOLERANCE) -> bool:
        """Check whether the first and last points coincide.

        Args:
            tolerance: Per-axis tolerance for point equality

        Returns:
            True for a closed polygon, False for an open polyline
        """
        if len(self.points) < 2:
            return False
        return self.points[0].is_close(self.points[-1], tolerance)

    def is_close(self, other: "Contour", tolerance: float = POINT_TOLERANCE) -> bool:
        """Check whether two contours have matching points within ``tolerance``."""
        if len(self.points) != len(other.points):
            return False
        return all(a.is_close(b, tolerance) for a, b in zip(self.points, other.points))

    def length(self) -> float:
        """Total path length along the points."""
        return sum(a.distance_to(b) for a, b in zip(self.points, self.points[1:]))

    def __str__(self) -> str:
        return "{" + ", ".join(str(p) for p in self.points) + "}"
