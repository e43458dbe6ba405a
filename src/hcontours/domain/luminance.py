"""Read-only luminance access over a decoded image."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

# Luminance of anything off the image; always classified as outside
OFF_IMAGE = 255


def rgb_luminance(r: int, g: int, b: int) -> int:
    """Grey level of an RGB triple, ``Y = 0.299 R + 0.587 G + 0.114 B``.

    Rounds half up so results match integer-rounding image tools.
    """
    return int(0.299 * r + 0.587 * g + 0.114 * b + 0.5)


class LuminanceSource(Protocol):
    """Anything the tracer can read luminance from."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def get(self, x: int, y: int) -> int: ...


@dataclass(frozen=True)
class LuminanceField:
    """Integer luminance (0..255) per pixel, row-major.

    Coordinates outside the image return ``OFF_IMAGE`` so a tracer can
    step past the edge without special cases.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        values: ``width * height`` luminance values, row by row
    """

    width: int
    height: int
    values: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Image dimensions must not be negative")
        if len(self.values) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} values, got {len(self.values)}"
            )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "LuminanceField":
        """Build a field from a list of rows of grey values.

        Example:
            field = LuminanceField.from_rows([
                [255, 255, 255],
                [255, 0, 255],
                [255, 255, 255],
            ])
        """
        height = len(rows)
        width = len(rows[0]) if height else 0
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same length")
        return cls(width=width, height=height, values=bytes(v for row in rows for v in row))

    @classmethod
    def from_rgb(
        cls, width: int, height: int, pixels: Iterable[tuple[int, int, int]]
    ) -> "LuminanceField":
        """Build a field from row-major RGB triples."""
        return cls(
            width=width,
            height=height,
            values=bytes(rgb_luminance(r, g, b) for r, g, b in pixels),
        )

    def contains(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies on the image."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        """Luminance at (x, y), or ``OFF_IMAGE`` outside the image."""
        if not self.contains(x, y):
            return OFF_IMAGE
        return self.values[y * self.width + x]
