"""Logging utilities for Plottext."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on each call
_installed_handlers: list[logging.Handler] = []


@dataclass
class CompileStats:
    """Statistics from one compilation."""

    characters_placed: int = 0
    glyphs_traced: int = 0
    glyphs_skipped: int = 0
    commands_emitted: int = 0
    skipped_chars: list[str] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate compilation duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
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

    logger = structlog.get_logger("plottext")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class CompileLogger:
    """Logger for tracking compilation progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = CompileStats()

    def log_layout(self, lines: int, characters: int, scale: float) -> None:
        """Log layout results."""
        self._logger.debug(
            "Text laid out",
            lines=lines,
            characters=characters,
            scale=scale,
        )
        self._stats.characters_placed += characters

    def log_glyph_traced(self, char: str, commands: int, contours: int) -> None:
        """Log a traced glyph."""
        self._logger.debug(
            "Glyph traced",
            char=char,
            commands=commands,
            contours=contours,
        )
        self._stats.glyphs_traced += 1
        self._stats.commands_emitted += commands

    def log_glyph_skipped(self, char: str, reason: str) -> None:
        """Log a character that produced no motion."""
        self._logger.debug("Glyph skipped", char=char, reason=reason)
        self._stats.glyphs_skipped += 1
        self._stats.skipped_chars.append(char)

    def log_geometry_error(self, char: str, error: Exception) -> None:
        """Log bad outline data that aborts the compilation."""
        self._logger.error(
            "Geometry error",
            char=char,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> CompileStats:
        """Get current compilation statistics."""
        return self._stats
