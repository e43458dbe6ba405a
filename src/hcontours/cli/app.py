"""CLI application entry point for hcontours.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from hcontours import __version__
from hcontours.cli.output import (
    console,
    print_error,
    print_header,
    print_image_info,
    print_page_info,
    print_step,
    print_success,
    print_threshold,
)
from hcontours.config import (
    HContoursSettings,
    LoggingConfig,
    PageConfig,
    RenderConfig,
    ThresholdConfig,
)
from hcontours.core import ContourProcessor, ThresholdResult
from hcontours.exceptions import HContoursError, ImageLoadError, SvgWriteError
from hcontours.io import SvgWriter

# Create the Typer app
app = typer.Typer(
    name="hcontours",
    help="Trace luminance contours in an image and write them as a plotter-ready SVG.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]hcontours[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_levels(text: str) -> list[int]:
    """Parse a comma-separated list of threshold levels.

    Raises:
        ValueError: If an entry is not an integer
    """
    return [int(part) for part in text.split(",") if part.strip()]


@app.command()
def contour(
    input_image: Annotated[
        Path,
        typer.Argument(
            help="Path to input image (PNG, JPEG, ...)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-hc-{options}.svg)",
        ),
    ] = None,
    thresholds: Annotated[
        str | None,
        typer.Option(
            "--thresholds",
            "-t",
            help="Threshold levels (0..255), comma separated (e.g. 64,128)",
        ),
    ] = None,
    tcount: Annotated[
        int,
        typer.Option(
            "--tcount",
            "-T",
            help="Number of evenly-spaced threshold levels (unless overridden by --thresholds)",
            min=1,
            max=255,
        ),
    ] = 1,
    margin: Annotated[
        float,
        typer.Option(
            "--margin",
            "-m",
            help="Minimum margin in mm (2 or less is taken as inches)",
            min=0.0,
        ),
    ] = 15.0,
    paper: Annotated[
        str,
        typer.Option(
            "--paper",
            "-p",
            help="Paper size and orientation (A4L|A4P|A3L|A3P or WxH, 30 or less in inches)",
        ),
    ] = "A4L",
    linewidth: Annotated[
        float,
        typer.Option(
            "--linewidth",
            "-l",
            help="Width of contour lines in mm",
        ),
    ] = 0.5,
    framewidth: Annotated[
        float,
        typer.Option(
            "--framewidth",
            "-f",
            help="Width of frame lines in mm (0 for no frame)",
        ),
    ] = 0.0,
    image: Annotated[
        bool,
        typer.Option(
            "--image",
            "-i",
            help="Use the image as the SVG background",
        ),
    ] = False,
    clip: Annotated[
        bool,
        typer.Option(
            "--clip",
            "-c",
            help="Clip contours at the image edge instead of breaking them",
        ),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Draw paper and plot limits",
        ),
    ] = False,
    colours: Annotated[
        str | None,
        typer.Option(
            "--colours",
            "-k",
            help="Fill colours: rrggbb, rrggbb,rrggbb,... or a range rrggbb-rrggbb",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Trace the contours of an image at one or more luminance thresholds.

    Each threshold becomes an Inkscape layer of an SVG sized for the chosen
    paper, ready for a pen plotter.

    Example:
        hcontours -T 3 photo.png

    This will create photo-hc-T3m15pA4L.svg with contours at luminance 64,
    128 and 192.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_image.exists():
        print_error(
            f"Input file not found: {input_image}",
            details=f"The file '{input_image}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_image.is_file():
        print_error(
            f"Input path is not a file: {input_image}",
            details="Please provide a path to an image file.",
        )
        raise typer.Exit(code=1)

    levels = None
    if thresholds is not None:
        try:
            levels = parse_levels(thresholds)
        except ValueError:
            print_error(
                f"Invalid thresholds: {thresholds}",
                details="Give whole numbers between 0 and 255, separated by commas.",
            )
            raise typer.Exit(code=1)

    # Create settings from CLI arguments
    try:
        settings = HContoursSettings(
            thresholds=ThresholdConfig(levels=levels, count=tcount),
            page=PageConfig(
                paper=paper,
                margin=margin,
                line_width=linewidth,
                frame_width=framewidth,
            ),
            render=RenderConfig(
                clip=clip,
                image=image,
                debug=debug,
                colours=colours,
            ),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except ValidationError as e:
        print_error("Invalid options", details=_format_validation_error(e))
        raise typer.Exit(code=1)

    # Print header
    if not quiet:
        print_header(__version__)

    try:
        if not quiet:
            print_step("Loading image")

        def loaded(image_format: str, width: int, height: int) -> None:
            print_image_info(
                image_path=str(input_image),
                image_format=image_format,
                width=width,
                height=height,
            )
            print_page_info(
                paper=settings.page.paper,
                margin=settings.page.margin_mm,
                thresholds=sorted(settings.thresholds.resolve()),
            )
            print_step("Tracing")

        if output is None:
            actual_output_path = SvgWriter.get_output_path(
                input_image, settings.thresholds, settings.page, settings.render
            )
        else:
            actual_output_path = output

        def report(result: ThresholdResult, scale: float) -> None:
            print_threshold(
                threshold=result.threshold,
                contours=result.contours,
                pieces=len(result.pieces),
                length_m=result.length * scale / 1000,
                verbose=verbose,
            )

        processor = ContourProcessor(settings)
        stats = processor.process(
            image_path=input_image,
            output_path=actual_output_path,
            progress_callback=None if quiet else report,
            image_callback=None if quiet else loaded,
        )

        file_size = _format_file_size(actual_output_path)

        if not quiet:
            print_success(
                output_path=str(actual_output_path),
                file_size=file_size,
                total_time_s=stats.duration_seconds,
                contours=stats.contour_count,
                total_length_m=stats.total_length * (stats.scale or 0.0) / 1000,
                avg_time_ms=stats.avg_threshold_time_ms,
            )

    except FileNotFoundError as e:
        print_error(f"Input file not found: {e}")
        raise typer.Exit(code=1)
    except ImageLoadError as e:
        print_error(f"Could not load image: {e.reason}")
        raise typer.Exit(code=1)
    except SvgWriteError as e:
        print_error(f"Could not save SVG: {e.reason}")
        raise typer.Exit(code=1)
    except HContoursError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_validation_error(error: ValidationError) -> str:
    """Join pydantic error messages into one line per problem."""
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        message = item["msg"]
        messages.append(f"{location}: {message}" if location else message)
    return "\n  ".join(messages)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.0f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
    except OSError:
        return "unknown"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
