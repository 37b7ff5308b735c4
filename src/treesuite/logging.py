"""Logging setup for the TREESUITE CLI.

Two handlers hang off the root logger:

- a Rich console handler on stderr (stdout is reserved for ``--json``), and
- an optional flight recorder: a memory buffer of DEBUG records written to a
  file once a failing test or hook logs a WARNING, so a failing run can be
  diagnosed after the fact without rerunning it with ``-vv``.

Tests often log through their own loggers; the console marks those records
with the logger's top-level name so they stand apart from the engine's output.
"""

from __future__ import annotations

import logging
import sys
from importlib.metadata import version
from logging.handlers import MemoryHandler
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from pathlib import Path

PROJECT_PREFIX = "treesuite"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"


class ThirdPartyPrefixFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Set ``record.prefix`` to ``"[name]"`` for records of foreign loggers.

    Records of TREESUITE's own loggers get an empty prefix. Nothing is dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.partition(".")[0]
        record.prefix = "" if top == PROJECT_PREFIX else f"[{top}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a RichHandler writing to stderr.

    Args:
        level: Minimum level shown. Debug mode always shows DEBUG.
        debug_mode: Show timestamps, logger names and source locations.
        color: Enable colored output.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system="auto" if color else None, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Return a memory handler that dumps its buffer to *path* on trouble.

    The file is truncated on the first write of a run and only created when
    something is actually flushed.

    Args:
        path: Target file.
        capacity: Number of records kept in memory.
        flush_level: Records at this level or above trigger a write.
        flush_on_close: Also write the buffer when the handler is closed.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: logging.Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_capacity: int | None,
    logger_levels: dict[str, int],
) -> None:
    """Log the effective logging setup.

    One INFO line summarizes the run; the rest is DEBUG and normally only shows
    up in the flight recorder.

    Args:
        logger: Logger used to emit the messages.
        app_version: TREESUITE version.
        level: Effective console level.
        handlers: Handlers attached to the root logger.
        log_path: Flight-recorder output file.
        flight_capacity: Flight-recorder capacity, or None when it is off.
        logger_levels: Per-logger level overrides.
    """
    recording = flight_capacity is not None
    logger.info(
        "TREESUITE %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if recording else "OFF",
    )
    logger.debug(
        "Python: %s, Click: %s, Rich: %s",
        sys.version.split()[0],
        version("click"),
        version("rich"),
    )
    logger.debug("Handlers: %s", ", ".join(type(h).__name__ for h in handlers))
    if recording:
        logger.debug("Flight recorder: path=%s, capacity=%d", log_path, flight_capacity)
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
    )
