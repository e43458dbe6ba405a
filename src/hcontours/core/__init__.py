"""Core contouring algorithms for hcontours.

This module contains the core algorithms for:

- Boundary tracing (sub-pixel edge points, the tracer state machine)
- Shape discovery (raster scan that traces each shape once)
- Contour simplification (collinear and duplicate point removal)
- Edge clipping (splitting contours where they leave the image)

All tracing functions are pure: they read a luminance source and return
new values.

Key functions:
- weighted_average: Sub-pixel edge point between an inside and outside pixel
- advance: One step of the boundary tracer
- trace_contour: Follow a shape boundary back to its start
- find_contours: Trace every shape at a threshold
- compress: Drop redundant contour points
- split_at_edges: Break a contour into on-image pieces

Key classes:
- TracerState: Tracer position and heading
- ContourProcessor: Runs the whole pipeline for an image
"""

from hcontours.core.clipper import edge_crossing, is_off_image, split_at_edges
from hcontours.core.compressor import compress, same_angle
from hcontours.core.processor import (
    ContourProcessor,
    ThresholdResult,
    describe_options,
    render_threshold,
)
from hcontours.core.scanner import ScanResult, find_contours
from hcontours.core.tracer import (
    TraceResult,
    TracerState,
    advance,
    start_state,
    trace_contour,
    weighted_average,
)

__all__ = [
    # Processor
    "ContourProcessor",
    # Scanner
    "ScanResult",
    "ThresholdResult",
    # Tracer
    "TraceResult",
    "TracerState",
    "advance",
    # Compressor
    "compress",
    "describe_options",
    # Clipper
    "edge_crossing",
    "find_contours",
    "is_off_image",
    "render_threshold",
    "same_angle",
    "split_at_edges",
    "start_state",
    "trace_contour",
    "weighted_average",
]
