from __future__ import annotations

from dataclasses import asdict, dataclass, field
from threading import Lock
from typing import Any

TICKET_EVENTS = ("created", "replaced", "deleted", "completed")


@dataclass
class _LatencyAgg:
    count: int = 0
    sum_ms: float = 0.0
    max_ms: float = 0.0

    def observe(self, elapsed_ms: float) -> None:
        self.count += 1
        self.sum_ms += float(elapsed_ms)
        if elapsed_ms > self.max_ms:
            self.max_ms = float(elapsed_ms)


@dataclass
class _StatusCounts:
    by_class: dict[str, int] = field(default_factory=dict)

    def observe(self, status_code: int) -> None:
        key = f"{status_code // 100}xx"
        self.by_class[key] = self.by_class.get(key, 0) + 1


class InMemoryMetrics:
    """Thread-safe, process-local metrics (resets on restart)."""

    def __init__(self) -> None:
        self._lock = Lock()
        self.http_requests_total: int = 0
        self.http_request_ms = _LatencyAgg()
        self.http_status = _StatusCounts()
        self.ticket_events: dict[str, int] = {name: 0 for name in TICKET_EVENTS}

    def observe_http_request(self, elapsed_ms: float, status_code: int) -> None:
        with self._lock:
            self.http_requests_total += 1
            self.http_request_ms.observe(elapsed_ms)
            self.http_status.observe(status_code)

    def observe_ticket_event(self, event: str) -> None:
        if event not in self.ticket_events:
            raise ValueError(f"Unknown ticket event: {event}")
        with self._lock:
            self.ticket_events[event] += 1

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return {
                "counters": {
                    "http_requests_total": self.http_requests_total,
                    **{f"tickets_{name}_total": count for name, count in self.ticket_events.items()},
                },
                "http_status": dict(self.http_status.by_class),
                "latency_ms": {
                    "http_request_ms": asdict(self.http_request_ms),
                },
            }

    def reset(self) -> None:
        with self._lock:
            self.http_requests_total = 0
            self.http_request_ms = _LatencyAgg()
            self.http_status = _StatusCounts()
            self.ticket_events = {name: 0 for name in TICKET_EVENTS}


_METRICS: InMemoryMetrics | None = None


def get_metrics() -> InMemoryMetrics:
    global _METRICS
    if _METRICS is None:
        _METRICS = InMemoryMetrics()
    return _METRICS


def reset_metrics() -> None:
    """Reset metrics counters/aggregates (used by tests)."""

    get_metrics().reset()
