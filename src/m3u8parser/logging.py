"""structlog setup for the m3u8-parser command line tool.

Library modules only ask for loggers; nothing here runs on import. Loggers
are lazy proxies, so whichever configuration is active when an event is
emitted is the one that renders it.
"""

import logging
import sys
from typing import Literal, TextIO

import structlog

LogFormat = Literal["console", "json"]


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def _renderers(format: LogFormat, stream: TextIO) -> list[structlog.typing.Processor]:
    if format == "json":
        return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=stream.isatty())]


def configure_logging(
    level: str = "WARNING",
    format: LogFormat = "console",
    stream: TextIO | None = None,
) -> None:
    """Route log events to `stream` (stderr by default), never to stdout.

    Playlist text and JSON listings go to stdout, so log output must stay
    off it.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: "console" for human-readable lines, "json" for one object per line
        stream: Text stream to write events to
    """
    out = stream or sys.stderr

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            *_renderers(format, out),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=out),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None):
    """Return a lazy logger carrying `logger_name` when given.

    Until an application configures structlog, its defaults apply.
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()
