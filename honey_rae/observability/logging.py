from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

_HANDLER_NAME = "honey_rae"


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def build_handler(json_logs: bool = True) -> logging.Handler:
    """Stdout handler rendering both structlog and stdlib records.

    Stdlib records keep their ``extra=`` fields (ticket ids and the like) in the rendered event.
    """

    renderer: Any = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(colors=False)
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=[*_shared_processors(), structlog.stdlib.ExtraAdder()],
        )
    )
    return handler


def configure_logging(level: int = logging.INFO, json_logs: bool = True) -> None:
    """Route structlog and stdlib logging (uvicorn included) through one handler.

    Calling it again only adjusts the level.
    """

    root = logging.getLogger()
    handler = next((h for h in root.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        structlog.configure(
            processors=[*_shared_processors(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )
        handler = build_handler(json_logs)
        root.handlers = [handler]

    root.setLevel(level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = [handler]
        uvicorn_logger.propagate = False
        uvicorn_logger.setLevel(level)
