"""Raster scan that finds every shape at a threshold exactly once."""

import logging
from dataclasses import dataclass, field

from hcontours.core.tracer import trace_contour
from hcontours.domain import Contour, LuminanceSource, PixelPoint

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Contours found at one threshold.

    Attributes:
        threshold: Luminance cutoff used for the scan
        contours: Raw traced contours in scan order
        length: Total path length of all contours in pixels
    """

    threshold: int
    contours: list[Contour] = field(default_factory=list)
    length: float = 0.0


def find_contours(luminance: LuminanceSource, threshold: int) -> ScanResult:
    """Trace every shape in ``luminance`` at ``threshold``.

    Scans rows top to bottom and columns left to right. A trace starts at
    an inside pixel only when it has not been visited by an earlier trace
    and the scan is not already inside a run of inside pixels on this row.
    Each 8-connected shape is traced once however concave it is.

    A one-pixel-wide open line is traced around both sides, so its contour
    is closed even though the line is not.

    Args:
        luminance: Luminance source
        threshold: Luminance cutoff; pixels below it are inside

    Returns:
        ScanResult with contours in scan order and their total length
    """
    width, height = luminance.width, luminance.height
    seen = bytearray(width * height)
    result = ScanResult(threshold=threshold)

    for y in range(height):
        skipping = False
        for x in range(width):
            if luminance.get(x, y) >= threshold:
                skipping = False
                continue

            if not seen[x + y * width] and not skipping:
                traced = trace_contour(luminance, threshold, PixelPoint(x, y))
                result.contours.append(traced.contour)
                result.length += traced.length
                for pixel in traced.visited:
                    seen[pixel.x + pixel.y * width] = 1
            skipping = True

    logger.debug(
        "Threshold %d: %d contours, length %.3f",
        threshold,
        len(result.contours),
        result.length,
    )
    return result
