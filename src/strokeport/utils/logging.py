"""Logging utilities for Strokeport."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by configure_logging(), removed again on reconfiguration
_installed_handlers: list[logging.Handler] = []

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


@dataclass
class ExportStats:
    """Statistics from an export run."""

    exported_count: int = 0
    empty_count: int = 0
    error_count: int = 0
    strokes_drawn: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate export duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def _handler(
    handler: logging.Handler, level: int, renderer: structlog.types.Processor
) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            foreign_pre_chain=_SHARED_PROCESSORS,
        )
    )
    return handler


def reset_logging() -> None:
    """Remove and close the handlers installed by configure_logging()."""
    root_logger = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    The log file receives one JSON object per event, the console a readable
    key=value line. Calling this again replaces the previous handlers.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    reset_logging()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        _installed_handlers.append(
            _handler(
                logging.FileHandler(log_file, encoding="utf-8"),
                getattr(logging, file_level.upper()),
                structlog.processors.JSONRenderer(),
            )
        )

    _installed_handlers.append(
        _handler(
            logging.StreamHandler(),
            logging.ERROR if quiet else getattr(logging, console_level.upper()),
            structlog.dev.ConsoleRenderer(colors=False),
        )
    )

    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("strokeport")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file is not None else None,
        file_level=file_level,
    )

    return logger


class ExportLogger:
    """Logger for tracking export progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ExportStats()

    def log_export_start(self, input_path: str) -> None:
        """Log start of an export."""
        self._stats.start_time = time.perf_counter()
        self._logger.debug("Exporting stroke content", input=input_path)

    def log_content_loaded(
        self,
        input_path: str,
        stroke_counts: dict[str, int],
        has_background: bool,
    ) -> None:
        """Log loaded stroke content."""
        self._logger.debug(
            "Stroke content loaded",
            input=input_path,
            strokes=sum(stroke_counts.values()),
            kinds=stroke_counts,
            background=has_background,
        )

    def log_export_complete(
        self,
        input_path: str,
        output_path: str,
        strokes: int,
        size: tuple[float, float],
    ) -> None:
        """Log a written export."""
        self._stats.end_time = time.perf_counter()
        self._logger.info(
            "Stroke content exported",
            input=input_path,
            output=output_path,
            strokes=strokes,
            width=round(size[0], 3),
            height=round(size[1], 3),
            duration_ms=round(self._stats.duration_seconds * 1000.0, 2),
        )
        self._stats.exported_count += 1
        self._stats.strokes_drawn += strokes

    def log_nothing_to_export(self, input_path: str) -> None:
        """Log content without bounds."""
        self._stats.end_time = time.perf_counter()
        self._logger.info("Nothing to export", input=input_path)
        self._stats.empty_count += 1

    def log_export_error(self, input_path: str, error: Exception) -> None:
        """Log a failed export."""
        self._stats.end_time = time.perf_counter()
        self._logger.error(
            "Export failed",
            input=input_path,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((input_path, str(error)))

    @property
    def stats(self) -> ExportStats:
        """Get current export statistics."""
        return self._stats
