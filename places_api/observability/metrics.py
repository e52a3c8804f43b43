from __future__ import annotations

from dataclasses import asdict, dataclass
from threading import Lock
from typing import Any


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


class InMemoryMetrics:
    """Thread-safe, process-local metrics (resets on restart)."""

    def __init__(self) -> None:
        self._lock = Lock()
        self.http_requests_total: int = 0
        self.http_responses_by_status: dict[str, int] = {}
        self.store_mutations_total: dict[str, int] = {}
        self.http_request_ms = _LatencyAgg()

    def observe_http_request(self, elapsed_ms: float, status_code: int) -> None:
        with self._lock:
            self.http_requests_total += 1
            key = str(status_code)
            self.http_responses_by_status[key] = self.http_responses_by_status.get(key, 0) + 1
            self.http_request_ms.observe(elapsed_ms)

    def observe_store_mutation(self, kind: str) -> None:
        with self._lock:
            self.store_mutations_total[kind] = self.store_mutations_total.get(kind, 0) + 1

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return {
                "counters": {
                    "http_requests_total": self.http_requests_total,
                    "http_responses_by_status": dict(self.http_responses_by_status),
                    "store_mutations_total": dict(self.store_mutations_total),
                },
                "latency_ms": {
                    "http_request_ms": asdict(self.http_request_ms),
                },
            }

    def reset(self) -> None:
        with self._lock:
            self.http_requests_total = 0
            self.http_responses_by_status = {}
            self.store_mutations_total = {}
            self.http_request_ms = _LatencyAgg()


_METRICS: InMemoryMetrics | None = None


def get_metrics() -> InMemoryMetrics:
    global _METRICS
    if _METRICS is None:
        _METRICS = InMemoryMetrics()
    return _METRICS


def reset_metrics() -> None:
    """Reset metrics counters/aggregates (used by tests)."""

    get_metrics().reset()
