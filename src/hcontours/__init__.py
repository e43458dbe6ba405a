"""hcontours - Turn raster images into plotter-ready contour drawings.

hcontours traces the boundaries of dark regions in an image at one or more
luminance thresholds and writes them as an SVG with one layer per
threshold, laid out on a chosen paper size for a pen plotter.

Example:
    $ hcontours -T 3 photo.png

This will create photo-hc-T3m15pA4L.svg with contours at luminance 64,
128 and 192.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
