"""Logging utilities for Knotinsert."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

FILE_HANDLER_NAME = "knotinsert.file"
CONSOLE_HANDLER_NAME = "knotinsert.console"
HANDLER_NAMES = (FILE_HANDLER_NAME, CONSOLE_HANDLER_NAME)


@dataclass
class EditStats:
    """Counters of edits applied during a session."""

    knots_added: int = 0
    splits: int = 0
    deletions: int = 0
    drags: int = 0
    undos: int = 0

    @property
    def mutation_count(self) -> int:
        """Number of structural edits (everything except undo)."""
        return self.knots_added + self.splits + self.deletions + self.drags


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling it again replaces the handlers installed by the previous call.

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

    for handler in list(root_logger.handlers):
        if handler.get_name() in HANDLER_NAMES:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
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

    logger = structlog.get_logger("knotinsert")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class EditLogger:
    """Logger for editor requests and edit statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("knotinsert")
        self._stats = EditStats()

    def log_knot_added(self, index: int, x: float, y: float) -> None:
        """Log an appended knot."""
        self._logger.debug("Knot added", index=index, x=round(x, 3), y=round(y, 3))
        self._stats.knots_added += 1

    def log_split(self, progress: float | None, index: int | None) -> None:
        """Log a subdivision request and the inserted knot index."""
        if index is None:
            self._logger.debug("Split ignored", progress=progress)
            return
        self._logger.info("Segment split", progress=progress, inserted=index)
        self._stats.splits += 1

    def log_deletion(self, progress: float | None, index: int | None) -> None:
        """Log a delete request and the removed knot index."""
        if index is None:
            self._logger.debug("Delete ignored", progress=progress)
            return
        self._logger.info("Knot removed", progress=progress, removed=index)
        self._stats.deletions += 1

    def log_drag_start(self, knot_index: int, handle: str) -> None:
        """Log a handle picked up for dragging."""
        self._logger.debug("Drag started", knot=knot_index, handle=handle)
        self._stats.drags += 1

    def log_drag_end(self, knot_index: int, handle: str, x: float, y: float) -> None:
        """Log a handle released after dragging."""
        self._logger.debug(
            "Drag ended", knot=knot_index, handle=handle, x=round(x, 3), y=round(y, 3)
        )

    def log_undo(self, restored: bool, remaining: int) -> None:
        """Log an undo request."""
        if not restored:
            self._logger.debug("Undo ignored, history empty")
            return
        self._logger.info("Undo", remaining=remaining)
        self._stats.undos += 1

    @property
    def stats(self) -> EditStats:
        """Get current edit statistics."""
        return self._stats
