"""Structured logging — structlog events rendered through stdlib handlers."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog

LOG_FORMATS = ("console", "json")

# Third-party loggers that are noisy at the worker's own level.
_QUIET_LOGGERS = {
    "uvicorn.access": "WARNING",
    "uvicorn.error": "INFO",
    "httpx": "WARNING",
}


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format not in LOG_FORMATS:
        raise ValueError(f"UPGRADEWORKER_LOG_FORMAT must be one of {LOG_FORMATS}, got {log_format!r}")
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(level: str | None = None, *, stream: str = "ext://sys.stdout") -> None:
    """Route structlog and stdlib records through one handler on *stream*.

    *level* is normally ``WorkerConfig.log_level``; without it the
    ``UPGRADEWORKER_LOG_LEVEL`` variable applies (default INFO). The
    renderer comes from ``UPGRADEWORKER_LOG_FORMAT`` (console or json).
    The CLI passes ``ext://sys.stderr`` so stdout stays free for results.
    """
    log_level = (level or os.environ.get("UPGRADEWORKER_LOG_LEVEL", "INFO")).upper()
    renderer = _renderer(os.environ.get("UPGRADEWORKER_LOG_FORMAT", "console").lower())
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    loggers = {name: {"level": lvl} for name, lvl in _QUIET_LOGGERS.items()}
    loggers["upgradeworker"] = {"level": log_level}
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": shared,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "worker": {
                    "class": "logging.StreamHandler",
                    "stream": stream,
                    "formatter": "structlog",
                },
            },
            "root": {"handlers": ["worker"], "level": log_level},
            "loggers": loggers,
        }
    )
