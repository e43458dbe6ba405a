"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted step, summary and error messages.
"""

from rich.console import Console
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]hcontours[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_image_info(image_path: str, image_format: str, width: int, height: int) -> None:
    """Print source image information.

    Args:
        image_path: Path to the image file
        image_format: Image format from the file suffix (e.g. "PNG")
        width: Image width in pixels
        height: Image height in pixels
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(image_path)
    line.append(f" ({image_format})")
    console.print(line)
    console.print(f"  {width:,} {SYM_DOT} {height:,} pixels")


def print_page_info(paper: str, margin: float, thresholds: list[int]) -> None:
    """Print page layout and threshold levels."""
    levels = ", ".join(str(t) for t in thresholds)
    console.print(f"  paper {paper} {SYM_DOT} margin {margin:g}mm {SYM_DOT} thresholds {levels}")


def print_threshold(threshold: int, contours: int, pieces: int, length_m: float, verbose: bool) -> None:
    """Print the result of one threshold.

    Args:
        threshold: Luminance cutoff
        contours: Number of traced contours
        pieces: Number of drawn shapes
        length_m: Contour length on paper in metres
        verbose: Whether to show the drawn shape count
    """
    line = f"  [green]{contours}[/green] contours found at threshold {threshold}, with length {length_m:.2f}m"
    if verbose:
        line += f" {SYM_DOT} {pieces} shapes"
    console.print(line)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    contours: int,
    total_length_m: float,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total processing time in seconds
        contours: Number of contours over all thresholds
        total_length_m: Total contour length on paper in metres
        avg_time_ms: Average processing time per threshold in milliseconds
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(f"  {contours} contours {SYM_DOT} Total contour length: {total_length_m:.2f}m")

    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.1f}ms avg per threshold")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
