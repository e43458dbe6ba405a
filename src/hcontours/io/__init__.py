"""Image and SVG I/O layer for hcontours.

This module handles decoding source images with Pillow and writing the
traced contours as SVG documents.

Key classes:
- ImageReader: Load images and expose their luminance
- SvgWriter: Lay contours out on a page and save them as SVG
"""

from hcontours.io.reader import ImageReader
from hcontours.io.writer import SvgWriter, calc_sizes, expand_colours

__all__ = [
    "ImageReader",
    "SvgWriter",
    "calc_sizes",
    "expand_colours",
]
