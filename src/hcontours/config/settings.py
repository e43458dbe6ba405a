"""Configuration settings for hcontours."""

import math
import re
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from hcontours.domain import ANGLE_TOLERANCE, POINT_TOLERANCE
from hcontours.exceptions import PaperSizeError

COLOUR_PATTERN = re.compile(r"^[0-9a-f]{6}(-[0-9a-f]{6}|(,[0-9a-f]{6})*)$")


@dataclass(frozen=True)
class PaperSize:
    """Paper dimensions in millimetres."""

    width: float
    height: float


PAPER_SIZES: dict[str, PaperSize] = {
    "A4L": PaperSize(width=297, height=210),
    "A4P": PaperSize(width=210, height=297),
    "A3L": PaperSize(width=420, height=297),
    "A3P": PaperSize(width=297, height=420),
}


def mm_or_inch(value: float, limit: float) -> float:
    """Treat ``value`` as inches when it is no bigger than ``limit``.

    Returns:
        The value in millimetres
    """
    if value > limit:
        return value
    return value * 25.4


def parse_paper_size(paper: str) -> PaperSize:
    """Parse a named paper size or a ``WIDTHxHEIGHT`` string.

    Dimensions of 30 or less are taken as inches.

    Args:
        paper: ``A4L``, ``A4P``, ``A3L``, ``A3P`` or e.g. ``200x300`` / ``5x7``

    Returns:
        Paper dimensions in millimetres

    Raises:
        PaperSizeError: If the string cannot be understood
    """
    name = paper.upper()
    dims = name.split("X")

    if len(dims) == 1:
        if name not in PAPER_SIZES:
            raise PaperSizeError(paper)
        return PAPER_SIZES[name]

    if len(dims) != 2:
        raise PaperSizeError(paper)

    try:
        width = float(dims[0])
        height = float(dims[1])
    except ValueError as e:
        raise PaperSizeError(paper) from e

    if width <= 0 or height <= 0:
        raise PaperSizeError(paper)

    return PaperSize(width=mm_or_inch(width, 30), height=mm_or_inch(height, 30))


def even_thresholds(count: int) -> list[int]:
    """Return ``count`` threshold levels evenly spaced between 0 and 256.

    Examples:
        >>> even_thresholds(3)
        [64, 128, 192]
    """
    step = 256.0 / (count + 1)
    return [math.floor(step * i + 0.5) for i in range(1, count + 1)]


class TraceConfig(BaseModel):
    """Tolerances used when simplifying traced contours."""

    angle_tolerance: float = Field(
        default=ANGLE_TOLERANCE,
        gt=0.0,
        le=0.5,
        description="Headings closer than this (radians) count as collinear",
    )
    point_tolerance: float = Field(
        default=POINT_TOLERANCE,
        gt=0.0,
        le=0.1,
        description="Points closer than this on both axes count as the same point",
    )


class ThresholdConfig(BaseModel):
    """Which luminance levels to trace."""

    levels: list[int] | None = Field(
        default=None,
        description="Explicit threshold levels, each 0..255",
    )
    count: int = Field(
        default=1,
        ge=1,
        le=255,
        description="Number of evenly-spaced levels (unless levels are given)",
    )

    @field_validator("levels")
    @classmethod
    def _check_levels(cls, levels: list[int] | None) -> list[int] | None:
        if levels is None:
            return None
        if not levels:
            raise ValueError("At least one threshold level is required")
        for level in levels:
            if not 0 <= level <= 255:
                raise ValueError(f"Threshold {level} is outside 0..255")
        return levels

    @property
    def explicit(self) -> bool:
        """Whether the levels were given explicitly."""
        return self.levels is not None

    def resolve(self) -> list[int]:
        """Return the threshold levels to trace."""
        if self.levels is not None:
            return list(self.levels)
        return even_thresholds(self.count)


class PageConfig(BaseModel):
    """Paper and line geometry for the output document."""

    paper: str = Field(
        default="A4L",
        description="Paper size and orientation (A4L|A4P|A3L|A3P or WxH)",
    )
    margin: float = Field(
        default=15.0,
        ge=0.0,
        description="Minimum margin in mm (2 or less is taken as inches)",
    )
    line_width: float = Field(
        default=0.5,
        gt=0.0,
        description="Width of contour lines in mm",
    )
    frame_width: float = Field(
        default=0.0,
        ge=0.0,
        description="Width of frame lines in mm (0 for no frame)",
    )

    @field_validator("paper")
    @classmethod
    def _check_paper(cls, paper: str) -> str:
        try:
            parse_paper_size(paper)
        except PaperSizeError as e:
            raise ValueError(str(e)) from e
        return paper

    @model_validator(mode="after")
    def _check_margin(self) -> "PageConfig":
        size = self.paper_size
        margin = self.margin_mm
        if size.width < margin * 3 or size.height < margin * 3:
            raise ValueError(
                f"Margin {margin:g} mm is too big for paper size "
                f"{size.width:g} x {size.height:g} mm"
            )
        return self

    @property
    def paper_size(self) -> PaperSize:
        """Paper dimensions in millimetres."""
        return parse_paper_size(self.paper)

    @property
    def margin_mm(self) -> float:
        """Margin in millimetres."""
        return mm_or_inch(self.margin, 2)


class RenderConfig(BaseModel):
    """How contours are drawn into the document."""

    clip: bool = Field(
        default=False,
        description="Clip contours at the image border instead of breaking them",
    )
    image: bool = Field(
        default=False,
        description="Use the source image as the document background",
    )
    debug: bool = Field(
        default=False,
        description="Draw paper and plot limits",
    )
    colours: str | None = Field(
        default=None,
        description="Fill colours: rrggbb, rrggbb,rrggbb,... or rrggbb-rrggbb",
    )

    @field_validator("colours")
    @classmethod
    def _check_colours(cls, colours: str | None) -> str | None:
        if colours is None or colours == "":
            return None
        colours = colours.lower()
        if not COLOUR_PATTERN.match(colours):
            raise ValueError(f"Invalid colour specification '{colours}'")
        return colours


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class HContoursSettings(BaseModel):
    """Main application settings."""

    trace: TraceConfig = Field(default_factory=TraceConfig)
    thresholds: ThresholdConfig = Field(default_factory=ThresholdConfig)
    page: PageConfig = Field(default_factory=PageConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> HContoursSettings:
    """Get default application settings."""
    return HContoursSettings()
