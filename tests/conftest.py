"""Shared fixtures: small luminance grids with known contours.

Grids are white (255) with black (0) shapes, traced at threshold 128.
"""

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest
from PIL import Image

from hcontours.domain import LuminanceField

BLACK = 0
WHITE = 255


def field_from_black(width: int, height: int, black: Iterable[tuple[int, int]]) -> LuminanceField:
    """Build a white field with the given pixels set to black."""
    rows = [[WHITE] * width for _ in range(height)]
    for x, y in black:
        rows[y][x] = BLACK
    return LuminanceField.from_rows(rows)


@pytest.fixture
def make_field() -> Callable[[int, int, Iterable[tuple[int, int]]], LuminanceField]:
    """Factory for white fields with black pixels."""
    return field_from_black


@pytest.fixture
def square_field() -> LuminanceField:
    """4x4 image with a 2x2 black square in the middle."""
    return field_from_black(4, 4, [(1, 1), (2, 1), (1, 2), (2, 2)])


@pytest.fixture
def corner_field() -> LuminanceField:
    """4x4 image with black L-shapes in the top-left and bottom-right corners."""
    return field_from_black(4, 4, [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)])


@pytest.fixture
def edge_field() -> LuminanceField:
    """8x8 image with three shapes, two of them touching the image edge."""
    top_left = [(1, 0), (2, 0), (0, 1), (1, 1), (2, 1), (0, 2), (1, 2)]
    border = (
        [(x, 0) for x in range(4, 8)]
        + [(7, y) for y in range(8)]
        + [(x, 7) for x in range(8)]
        + [(0, y) for y in range(4, 8)]
        + [(1, 4), (2, 4), (3, 3), (4, 1), (4, 2)]
    )
    middle = [(5, 4), (4, 5), (5, 5)]
    return field_from_black(8, 8, top_left + border + middle)


@pytest.fixture
def write_png(tmp_path: Path) -> Callable[[LuminanceField, str], Path]:
    """Factory that saves a field as a greyscale PNG in ``tmp_path``."""

    def _write(luminance: LuminanceField, name: str = "image.png") -> Path:
        path = tmp_path / name
        image = Image.frombytes("L", (luminance.width, luminance.height), luminance.values)
        image.save(path)
        return path

    return _write
