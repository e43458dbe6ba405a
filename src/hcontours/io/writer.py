"""SVG writer for plotter-ready contour documents.

This module provides the SvgWriter class that lays traced contours out on
a page and writes them as an SVG file with one Inkscape layer per
threshold.
"""

import math
from collections.abc import Iterable
from pathlib import Path

from hcontours import __version__
from hcontours.config import PageConfig, PaperSize, RenderConfig, ThresholdConfig
from hcontours.config.settings import COLOUR_PATTERN
from hcontours.domain import Contour
from hcontours.exceptions import ColourSpecError, SvgWriteError

SVG_NAMESPACES = (
    'xmlns="http://www.w3.org/2000/svg" '
    'xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape"'
)
CLIP_REF = 'clip-path="url(#clip1)"'


def calc_sizes(
    image_width: int,
    image_height: int,
    margin: float,
    paper: PaperSize,
    frame_width: float,
) -> tuple[tuple[float, float], float]:
    """Fit the image inside the paper margins.

    The image is scaled to fill the printable width or height, whichever
    is tighter, and centred along the other axis.

    Args:
        image_width: Image width in pixels
        image_height: Image height in pixels
        margin: Minimum margin in mm
        paper: Paper dimensions in mm
        frame_width: Frame line width in mm

    Returns:
        Tuple of ((translate_x, translate_y), scale) in mm and mm per pixel
    """
    print_width = paper.width - 2 * margin - 2 * frame_width
    print_height = paper.height - 2 * margin - 2 * frame_width
    image_aspect = image_width / image_height
    print_aspect = print_width / print_height

    if image_aspect > print_aspect:
        scale = print_width / image_width
        translate = (margin + frame_width, (paper.height - image_height * scale) / 2)
    else:
        scale = print_height / image_height
        translate = ((paper.width - image_width * scale) / 2, margin + frame_width)

    return translate, scale


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def expand_colours(spec: str | None, threshold_count: int) -> list[str]:
    """Turn a colour specification into per-layer fill colours.

    Index ``i`` colours the ``i``-th lowest threshold. A range also
    provides the background colour as its last entry.

    Args:
        spec: ``rrggbb``, ``rrggbb,rrggbb,...`` or ``rrggbb-rrggbb``
        threshold_count: Number of threshold layers

    Returns:
        Lower-case hex colours without ``#``; empty when ``spec`` is empty

    Raises:
        ColourSpecError: If ``spec`` is malformed

    Examples:
        >>> expand_colours("111111-999999", 4)
        ['111111', '333333', '555555', '777777', '999999']
    """
    if not spec:
        return []

    spec = spec.lower()
    if not COLOUR_PATTERN.match(spec):
        raise ColourSpecError(spec)

    if len(spec) == 6:
        # One colour for the contours and one for the background
        return [spec, spec]

    if spec[6] == ",":
        return spec.split(",")

    first, last = spec[:6], spec[7:]
    total = threshold_count + 1
    colours = [first] * total

    if total > 2:
        start = [int(first[i : i + 2], 16) for i in (0, 2, 4)]
        end = [int(last[i : i + 2], 16) for i in (0, 2, 4)]
        steps = [(e - s) / (total - 1) for s, e in zip(start, end)]
        for i in range(1, total):
            channels = [s + _round_half_away(i * step) for s, step in zip(start, steps)]
            colours[i] = "".join(f"{c:02x}" for c in channels)

    colours[-1] = last
    return colours


def format_points(contour: Contour) -> str:
    """Format contour points as an SVG points list."""
    return "".join(f"{p.x:.2f},{p.y:.2f} " for p in contour)


class SvgWriter:
    """Writes contour layers into an SVG document.

    The document is built in memory and written by ``save()``.

    Example:
        writer = SvgWriter(Path("out.svg"))
        scale = writer.start(page, render, image_path, width, height, thresholds)
        writer.layer(128, "contour", 0)
        writer.plot_pieces(pieces)
        writer.save()
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the SVG writer.

        Args:
            output_path: Path where the SVG will be saved
        """
        self._output_path = output_path
        self._parts: list[str] = []
        self._current_layer: int | None = None
        self._colours: list[str] = []
        self._path_counter = 0
        self._polygon_counter = 0
        self._polyline_counter = 0

    @property
    def output_path(self) -> Path:
        """Path the document will be saved to."""
        return self._output_path

    def write(self, text: str) -> None:
        """Append raw text to the document."""
        self._parts.append(text)

    def write_comment(self, text: str) -> None:
        """Append an XML comment line."""
        self.write(f"<!-- {text} -->\n")

    def getvalue(self) -> str:
        """Return the document built so far."""
        return "".join(self._parts)

    def start(
        self,
        page: PageConfig,
        render: RenderConfig,
        image_path: Path,
        width: int,
        height: int,
        thresholds: list[int],
        options: str | None = None,
    ) -> float:
        """Write the document header, page group and background layer.

        Args:
            page: Paper and line geometry
            render: Rendering options
            image_path: Source image (referenced when embedding the background)
            width: Image width in pixels
            height: Image height in pixels
            thresholds: Threshold levels that will be drawn
            options: Option summary to record in a comment

        Returns:
            Scale from image pixels to paper millimetres
        """
        paper = page.paper_size
        margin = page.margin_mm
        self._colours = expand_colours(render.colours, len(thresholds))

        self.write('<?xml version="1.0" encoding="UTF-8"?>\n')
        self.write_comment(f"{self._output_path}, created by hcontours version {__version__}")
        if options:
            self.write_comment(f"Options used: {options}")

        self.write(
            f'<svg width="{paper.width:g}mm" height="{paper.height:g}mm" '
            f'viewBox="0 0 {paper.width:g} {paper.height:g}" '
            f'style="background-color:white" {SVG_NAMESPACES} encoding="UTF-8" >\n'
        )

        if render.debug:
            self.write(
                f'<rect id="papersize" width="{paper.width:g}" height="{paper.height:g}" '
                'stroke="blue" stroke-dasharray="4" fill="none"/>\n'
            )

        (tx, ty), scale = calc_sizes(width, height, margin, paper, page.frame_width)

        if render.debug:
            self.write(
                f'<rect id="plotsize" width="{width * scale:g}" height="{height * scale:g}" '
                f'x="{tx:g}" y="{ty:g}" stroke="green" stroke-dasharray="3" fill="none"/>\n'
            )

        # Stroke width is given in mm, so undo the page scaling
        self.write(
            f'<g stroke="black" stroke-width="{page.line_width / scale:.4f}" '
            'stroke-linecap="round" stroke-linejoin="round" fill="none" '
            f'transform="translate({tx:.4f},{ty:.4f}) scale({scale:.4f})">\n'
        )

        # Hides the off-image parts of clipped contours under wide lines
        clippage = page.line_width / 2 / scale if render.clip else 0.0

        if render.clip:
            self.write(
                '<defs><clipPath id="clip1" ><rect id="cliprect" '
                f'width="{width - clippage * 2:.4f}" height="{height - clippage * 2:.4f}" '
                f'x="{clippage:.4f}" y="{clippage:.4f}" /></clipPath></defs>\n'
            )

        self.layer(0, "background", len(thresholds))

        if render.image:
            self.write(
                f'<image id="background" href="{image_path.name}" width="{width}" '
                f'height="{height}" {CLIP_REF} />\n'
            )

        if self._colours:
            self.write(
                f'<rect id="plotsize" width="{width:g}" height="{height:g}" stroke="none" />\n'
            )

        if page.frame_width > 0.0:
            frame = page.frame_width / scale
            w = width + frame
            h = height + frame
            x = -frame / 2
            y = -frame / 2
            if render.clip:
                w -= 2 * clippage
                h -= 2 * clippage
                x += clippage
                y += clippage
            self.write(
                f'<rect id="frame" width="{w:.4f}" height="{h:.4f}" x="{x:.4f}" '
                f'y="{y:.4f}" stroke-width="{frame:.4f}" />\n'
            )

        return scale

    def _start_layer(self, level: int, label: str, colour_index: int) -> None:
        fill = ""
        if self._colours:
            fill = f'fill="#{self._colours[colour_index % len(self._colours)]}"'
        self.write(
            f'<g inkscape:groupmode="layer" inkscape:label="{level} {label}" '
            f'stroke="black" {fill} >\n'
        )
        self._current_layer = level

    def end_layer(self) -> None:
        """Close the current layer, if any."""
        if self._current_layer is not None:
            self.write("</g>\n")
        self._current_layer = None

    def layer(self, level: int, label: str, colour_index: int) -> None:
        """Switch to the layer for ``level``, closing any other open layer.

        Args:
            level: Threshold the layer belongs to (0 for the background)
            label: Layer label suffix
            colour_index: Index into the fill colours
        """
        if level == self._current_layer:
            return
        self.end_layer()
        self._start_layer(level, label, colour_index)

    def polygon(self, contour: Contour) -> None:
        """Write a closed contour as a polygon."""
        self.write(f'<polygon id="{self._polygon_counter}"  points="{format_points(contour)}" />\n')
        self._polygon_counter += 1

    def polyline(self, contour: Contour) -> None:
        """Write an open contour as a polyline."""
        self.write(f'<polyline id="{self._polyline_counter}" points="{format_points(contour)}" />\n')
        self._polyline_counter += 1

    def plot_pieces(self, pieces: Iterable[Contour]) -> None:
        """Write contour pieces: polygons when closed, polylines otherwise."""
        for piece in pieces:
            if piece.is_closed():
                self.polygon(piece)
            else:
                self.polyline(piece)

    def closed_path(self, contours: Iterable[Contour]) -> None:
        """Write contours as closed loops of one clipped path.

        Example output:
            <path id="0" clip-path="url(#clip1)"  d="M 1.00,2.00 L 2.00,2.00 Z " />
        """
        self.write(f'<path id="{self._path_counter}" {CLIP_REF}  d="')
        self._path_counter += 1
        for contour in contours:
            command = "M"
            for p in contour:
                self.write(f"{command} {p.x:.2f},{p.y:.2f} ")
                command = "L"
            self.write("Z ")
        self.write('" />\n')

    def finish(self) -> None:
        """Close any open layer and the page group."""
        self.end_layer()
        self.write("</g>\n</svg>\n")

    def save(self) -> None:
        """Write the document to the output path.

        Raises:
            SvgWriteError: If the file cannot be written
        """
        try:
            self._output_path.write_text(self.getvalue(), encoding="utf-8")
        except OSError as e:
            raise SvgWriteError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_output_path(
        input_path: Path,
        thresholds: ThresholdConfig,
        page: PageConfig,
        render: RenderConfig,
    ) -> Path:
        """Generate an output path that records the options used.

        Converts: photo.png -> photo-hc-T1m15pA4L.svg
                  photo.png -> photo-hc-t44,55m15p5x7FIC.svg

        Args:
            input_path: Source image path
            thresholds: Threshold options
            page: Page options
            render: Rendering options

        Returns:
            Path next to the input with an option suffix and ``.svg``
        """
        if thresholds.explicit:
            levels = ",".join(str(t) for t in thresholds.resolve())
            threshold_part = f"t{levels}"
        else:
            threshold_part = f"T{thresholds.count}"

        frame_part = f"F{page.frame_width:g}" if page.frame_width > 0.0 else ""
        image_part = "I" if render.image else ""
        clip_part = "C" if render.clip else ""
        colour_part = render.colours or ""

        suffix = (
            f"-hc-{threshold_part}m{page.margin_mm:g}p{page.paper}"
            f"{frame_part}{image_part}{clip_part}{colour_part}"
        )
        return input_path.parent / f"{input_path.stem}{suffix}.svg"
