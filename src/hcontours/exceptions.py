"""Exception hierarchy for hcontours."""


class HContoursError(Exception):
    """Base exception for all hcontours errors."""

    pass


class ImageError(HContoursError):
    """Errors related to reading the source image."""

    pass


class ImageLoadError(ImageError):
    """Error loading or decoding an image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


class OutputError(HContoursError):
    """Errors related to writing output documents."""

    pass


class SvgWriteError(OutputError):
    """Error writing an SVG file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write SVG '{path}': {reason}")


class ConfigError(HContoursError):
    """Invalid option values."""

    pass


class PaperSizeError(ConfigError):
    """Paper size string could not be understood."""

    def __init__(self, paper: str) -> None:
        self.paper = paper
        super().__init__(f"Can't make head nor tail of paper size '{paper}'")


class ColourSpecError(ConfigError):
    """Colour specification could not be understood."""

    def __init__(self, spec: str) -> None:
        self.spec = spec
        super().__init__(
            f"Invalid colour specification '{spec}': expected rrggbb, "
            "rrggbb,rrggbb,... or rrggbb-rrggbb"
        )


class GeometryError(HContoursError):
    """Errors in geometric calculations."""

    pass


class WeightedAverageError(GeometryError):
    """Pixel pair does not straddle the threshold.

    The scanner and tracer only ever present pairs with
    ``inside < threshold <= outside``, so this signals a caller bug and
    aborts the trace.
    """

    def __init__(self, outside: int, threshold: int, inside: int) -> None:
        self.outside = outside
        self.threshold = threshold
        self.inside = inside
        super().__init__(
            f"Invalid values for outside pixel ({outside}), "
            f"threshold ({threshold}) and inside pixel ({inside})"
        )
