"""Domain models for hcontours.

This module contains the value types shared by the engine and the I/O
layers. All models are immutable:

- Direction: Compass direction with pure turn operations
- PixelPoint: Integer pixel coordinate
- EdgePoint: Sub-pixel point on the continuous image plane
- Contour: Ordered sequence of edge points
- LuminanceField: Grey levels per pixel with an off-image sentinel
"""

from hcontours.domain.contour import Contour
from hcontours.domain.geometry import (
    ANGLE_TOLERANCE,
    POINT_TOLERANCE,
    Direction,
    EdgePoint,
    PixelPoint,
)
from hcontours.domain.luminance import (
    OFF_IMAGE,
    LuminanceField,
    LuminanceSource,
    rgb_luminance,
)

__all__: list[str] = [
    # Constants
    "ANGLE_TOLERANCE",
    "OFF_IMAGE",
    "POINT_TOLERANCE",
    # Enums
    "Direction",
    # Core types
    "PixelPoint",
    "EdgePoint",
    "Contour",
    "LuminanceField",
    "LuminanceSource",
    "rgb_luminance",
]
