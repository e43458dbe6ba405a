"""Logging utilities for hcontours."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_installed_handlers: list[logging.Handler] = []


@dataclass
class ProcessingStats:
    """Statistics from processing run."""

    threshold_count: int = 0
    contour_count: int = 0
    piece_count: int = 0
    total_length: float = 0.0
    threshold_timings_ms: list[float] = field(default_factory=list)
    image_format: str | None = None
    image_width: int = 0
    image_height: int = 0
    scale: float | None = None
    output_path: Path | None = None
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_threshold_time_ms(self) -> float | None:
        """Average time spent per threshold."""
        if not self.threshold_timings_ms:
            return None
        return sum(self.threshold_timings_ms) / len(self.threshold_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("hcontours")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking processing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_image_loaded(self, path: str, width: int, height: int) -> None:
        """Log the decoded source image."""
        self._logger.info("Image loaded", path=path, width=width, height=height)

    def log_threshold_start(self, threshold: int) -> None:
        """Log start of a threshold pass."""
        self._logger.debug("Tracing threshold", threshold=threshold)

    def log_threshold_complete(
        self,
        threshold: int,
        contours: int,
        pieces: int,
        length: float,
        duration_ms: float,
    ) -> None:
        """Log a finished threshold pass."""
        self._logger.info(
            "Threshold traced",
            threshold=threshold,
            contours=contours,
            pieces=pieces,
            length=round(length, 3),
            duration_ms=round(duration_ms, 2),
        )
        self._stats.threshold_count += 1
        self._stats.contour_count += contours
        self._stats.piece_count += pieces
        self._stats.total_length += length
        self._stats.threshold_timings_ms.append(duration_ms)

    def log_contour_traced(self, threshold: int, index: int, points: int, closed: bool) -> None:
        """Log details of one traced contour."""
        self._logger.debug(
            "Contour traced",
            threshold=threshold,
            index=index,
            points=points,
            closed=closed,
        )

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
