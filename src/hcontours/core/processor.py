"""Processing orchestration for the contouring pipeline.

This module coordinates the full workflow for one image: decode, trace
every threshold, lay the contours out on the page and save the SVG.

Key components:
- render_threshold: Trace and shape the contours of a single threshold
- describe_options: One-line summary of the options for the SVG header
- ContourProcessor: Main orchestrator class for image processing
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from hcontours.config import HContoursSettings, TraceConfig
from hcontours.core.clipper import split_at_edges
from hcontours.core.compressor import compress
from hcontours.core.scanner import find_contours
from hcontours.domain import Contour, LuminanceSource
from hcontours.io import ImageReader, SvgWriter
from hcontours.utils import ProcessingLogger, ProcessingStats, configure_logging


@dataclass
class ThresholdResult:
    """Contours of one threshold, ready to draw.

    Attributes:
        threshold: Luminance cutoff
        contours: Number of traced contours
        pieces: Shapes to draw; compressed closed contours in clip mode,
            edge-split pieces otherwise
        length: Total traced length in pixels
        duration_ms: Time spent tracing and shaping
    """

    threshold: int
    contours: int = 0
    pieces: list[Contour] = field(default_factory=list)
    length: float = 0.0
    duration_ms: float = 0.0


def render_threshold(
    luminance: LuminanceSource,
    threshold: int,
    clip: bool,
    trace_config: TraceConfig | None = None,
) -> ThresholdResult:
    """Trace one threshold and shape its contours for drawing.

    Args:
        luminance: Luminance source
        threshold: Luminance cutoff
        clip: Keep contours whole (for an SVG clip path) instead of
            breaking them at the image edge
        trace_config: Simplification tolerances (defaults if None)

    Returns:
        ThresholdResult with the shapes to draw
    """
    trace_config = trace_config or TraceConfig()
    start_time = time.time()

    scan = find_contours(luminance, threshold)
    result = ThresholdResult(
        threshold=threshold,
        contours=len(scan.contours),
        length=scan.length,
    )

    for contour in scan.contours:
        if clip:
            result.pieces.append(
                compress(contour, trace_config.angle_tolerance, trace_config.point_tolerance)
            )
        else:
            result.pieces.extend(
                split_at_edges(
                    contour,
                    luminance.width,
                    luminance.height,
                    trace_config.angle_tolerance,
                    trace_config.point_tolerance,
                )
            )

    result.duration_ms = (time.time() - start_time) * 1000
    return result


def _flag(value: bool) -> str:
    return "true" if value else "false"


def describe_options(
    settings: HContoursSettings,
    image_path: Path,
    width: int,
    height: int,
) -> str:
    """Summarise the options used, for the SVG header comment."""
    thresholds = settings.thresholds
    page = settings.page
    render = settings.render
    paper = page.paper_size
    levels = " ".join(str(t) for t in thresholds.resolve())
    count = -1 if thresholds.explicit else thresholds.count

    return (
        f'infile: "{image_path}", width: {width}, height: {height}, '
        f"thresholds: [{levels}], tcount: {count}, margin: {page.margin_mm:.2f}, "
        f'paper: "{page.paper}", paperSize: {{{paper.width:.2f}, {paper.height:.2f}}}, '
        f"image: {_flag(render.image)}, clip: {_flag(render.clip)}, "
        f"debug: {_flag(render.debug)}, linewidth: {page.line_width:.2f}, "
        f'framewidth: {page.frame_width:.2f}, colours: "{render.colours or ""}"'
    )


class ContourProcessor:
    """Orchestrates contour extraction for one image.

    Manages the complete workflow:
    1. Load the image and compute its luminance
    2. Resolve the threshold levels
    3. Trace each threshold, lightest first, into its own layer
    4. Record per-threshold and total lengths
    5. Save the SVG document

    Example:
        settings = HContoursSettings()
        processor = ContourProcessor(settings)
        stats = processor.process(
            image_path=Path("photo.png"),
            output_path=Path("photo.svg"),
        )
    """

    def __init__(self, config: HContoursSettings) -> None:
        """Initialize contour processor with configuration.

        Args:
            config: Settings for thresholds, page layout and rendering
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=False,
        )
        self.processing_logger = ProcessingLogger(self.logger)

    def process(
        self,
        image_path: Path,
        output_path: Path | None = None,
        progress_callback: Callable[[ThresholdResult, float], None] | None = None,
        image_callback: Callable[[str, int, int], None] | None = None,
    ) -> ProcessingStats:
        """Process an image into a contour SVG.

        Args:
            image_path: Path to the input image
            output_path: Path for the SVG (derived from the options if None)
            progress_callback: Optional callback(result, scale) after each
                threshold; ``scale`` converts pixels to millimetres
            image_callback: Optional callback(format, width, height) once the
                image has been decoded

        Returns:
            ProcessingStats with counts, lengths and timing

        Raises:
            FileNotFoundError: If the image does not exist
            ImageLoadError: If the image cannot be decoded
            SvgWriteError: If the SVG cannot be written
        """
        stats = self.processing_logger.stats
        stats.start_time = time.time()

        settings = self.config
        if output_path is None:
            output_path = SvgWriter.get_output_path(
                image_path, settings.thresholds, settings.page, settings.render
            )

        self.logger.info(
            "Starting image processing",
            input=str(image_path),
            output=str(output_path),
        )

        with ImageReader(image_path) as reader:
            luminance = reader.luminance()
            image_format = reader.format

        width, height = luminance.width, luminance.height
        stats.image_format = image_format
        stats.image_width = width
        stats.image_height = height
        self.processing_logger.log_image_loaded(str(image_path), width, height)

        if image_callback is not None:
            image_callback(image_format, width, height)

        thresholds = sorted(settings.thresholds.resolve())

        writer = SvgWriter(output_path)
        scale = writer.start(
            settings.page,
            settings.render,
            image_path,
            width,
            height,
            thresholds,
            options=describe_options(settings, image_path, width, height),
        )

        results: dict[int, ThresholdResult] = {}

        # Layers run from the highest threshold down
        for index in reversed(range(len(thresholds))):
            threshold = thresholds[index]
            self.processing_logger.log_threshold_start(threshold)
            writer.layer(threshold, "contour", index)

            result = render_threshold(luminance, threshold, settings.render.clip, settings.trace)
            if settings.render.clip:
                writer.closed_path(result.pieces)
            else:
                writer.plot_pieces(result.pieces)

            for i, piece in enumerate(result.pieces):
                self.processing_logger.log_contour_traced(
                    threshold, i, len(piece), piece.is_closed()
                )
            self.processing_logger.log_threshold_complete(
                threshold=threshold,
                contours=result.contours,
                pieces=len(result.pieces),
                length=result.length,
                duration_ms=result.duration_ms,
            )
            results[index] = result

            if progress_callback is not None:
                progress_callback(result, scale)

        writer.end_layer()

        for index in range(len(thresholds)):
            result = results[index]
            writer.write_comment(
                f"{result.contours} contours found at threshold {result.threshold}, "
                f"with length {result.length * scale / 1000:.2f}m"
            )
        writer.write_comment(f"Total contour length: {stats.total_length * scale / 1000:.2f}m")

        writer.finish()
        writer.save()

        stats.scale = scale
        stats.output_path = output_path
        stats.end_time = time.time()

        self.logger.info(
            "Processing complete",
            thresholds=stats.threshold_count,
            contours=stats.contour_count,
            pieces=stats.piece_count,
            length_m=round(stats.total_length * scale / 1000, 3),
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return stats
