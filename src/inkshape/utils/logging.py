"""Logging utilities for Inkshape."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class RecognitionStats:
    """Statistics from a recognition run."""

    stroke_count: int = 0
    matched: Counter[str] = field(default_factory=Counter)
    no_match_count: int = 0
    too_short_count: int = 0
    durations_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def matched_count(self) -> int:
        """Strokes recognized as any shape."""
        return sum(self.matched.values())

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_stroke_time_ms(self) -> float | None:
        """Average recognition time per attempted stroke."""
        if not self.durations_ms:
            return None
        return sum(self.durations_ms) / len(self.durations_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

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

    logger = structlog.get_logger("inkshape")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


class RecognitionLogger:
    """Logger for tracking recognition outcomes and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger or _stdlib_bound_logger()
        self._stats = RecognitionStats()

    def log_recognized(self, stroke_index: int, kind: str, duration_ms: float) -> None:
        """Log a stroke recognized as a shape."""
        self._logger.info(
            "Stroke recognized",
            stroke=stroke_index,
            kind=kind,
            duration_ms=round(duration_ms, 3),
        )
        self._stats.stroke_count += 1
        self._stats.matched[kind] += 1
        self._stats.durations_ms.append(duration_ms)

    def log_no_match(self, stroke_index: int, point_count: int, duration_ms: float) -> None:
        """Log a stroke no detector accepted."""
        self._logger.debug(
            "No shape matched",
            stroke=stroke_index,
            points=point_count,
            duration_ms=round(duration_ms, 3),
        )
        self._stats.stroke_count += 1
        self._stats.no_match_count += 1
        self._stats.durations_ms.append(duration_ms)

    def log_too_short(self, stroke_index: int, point_count: int) -> None:
        """Log a stroke with too few points to attempt recognition."""
        self._logger.debug("Stroke too short", stroke=stroke_index, points=point_count)
        self._stats.stroke_count += 1
        self._stats.too_short_count += 1

    @property
    def stats(self) -> RecognitionStats:
        """Get current recognition statistics."""
        return self._stats


def _stdlib_bound_logger() -> structlog.stdlib.BoundLogger:
    """A structlog logger that forwards to stdlib logging without global configuration."""
    return structlog.wrap_logger(
        logging.getLogger("inkshape"),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
