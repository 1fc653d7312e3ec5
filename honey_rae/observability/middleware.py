from __future__ import annotations

import uuid
from collections.abc import Iterable
from time import perf_counter
from typing import Any, Callable

import structlog
from starlette.datastructures import Headers, MutableHeaders

from honey_rae.observability.metrics import get_metrics

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger("honey_rae.access")


class RequestContextMiddleware:
    """Binds a request id to the log context, echoes it back, and records access logs and HTTP metrics.

    A client-supplied ``X-Request-ID`` is reused so callers can correlate their own logs.
    """

    def __init__(self, app: Callable[..., Any], unmetered_paths: Iterable[str] = ("/metrics",)) -> None:
        self.app = app
        self.unmetered_paths = frozenset(unmetered_paths)

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        request_id = Headers(scope=scope).get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        client = scope.get("client")
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=scope.get("method"),
            path=scope.get("path"),
            client=client[0] if client else None,
        )

        status_code = 500
        started = perf_counter()

        async def send_with_request_id(message: dict[str, Any]) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = int(message["status"])
                MutableHeaders(scope=message)[REQUEST_ID_HEADER] = request_id
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            elapsed_ms = round((perf_counter() - started) * 1000.0, 2)
            if scope.get("path") not in self.unmetered_paths:
                get_metrics().observe_http_request(elapsed_ms=elapsed_ms, status_code=status_code)

            log = logger.error if status_code >= 500 else logger.info
            log("http_request", status_code=status_code, elapsed_ms=elapsed_ms)
            structlog.contextvars.clear_contextvars()
