# topmark:header:start
#
#   project      : TagPrint
#   file         : logging.py
#   file_relpath : src/tagprint/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagPrint logging with a TRACE level and chalk-colored records.

Renderers log their per-tag decisions at TRACE, which sits below DEBUG so
that enabling DEBUG stays readable on large documents.

Diagnostics go to ``stderr``: ``stdout`` carries rendered output, and ANSI
attribute rendering must not be interleaved with log records.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "TAGPRINT_LOG_LEVEL"


class TagprintLogger(logging.Logger):
    """Logger class adding a `trace()` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(TagprintLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Ordered from most to least severe; the first threshold reached wins.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[..., str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim.red(message)


def parse_log_level(value: str) -> int | None:
    """Return the numeric level for a level name or number, or None if unknown.

    Examples:
        >>> parse_log_level("trace") == TRACE_LEVEL
        True
        >>> parse_log_level("10")
        10
    """
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return the level requested through ``TAGPRINT_LOG_LEVEL``, if any."""
    val = os.environ.get(LOG_LEVEL_ENV)
    return parse_log_level(val) if val else None


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Configure the ``tagprint`` logger hierarchy.

    When ``level`` is None the environment is consulted via
    [`resolve_env_log_level`][tagprint.config.logging.resolve_env_log_level];
    the fallback is CRITICAL, which keeps the library silent.

    Args:
        level (int | None): Explicit log level.
        stream (TextIO | None): Destination stream. Defaults to `sys.stderr`.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    pkg_logger = logging.getLogger("tagprint")
    pkg_logger.setLevel(level)
    for handler in pkg_logger.handlers[:]:
        pkg_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False


def get_logger(name: str) -> TagprintLogger:
    """Return the `TagprintLogger` called ``name``."""
    return cast("TagprintLogger", logging.getLogger(name))
