# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request metrics for the phastly client.

Provides:
- RequestMetrics: In-process counters of request outcomes
- PrometheusRequestMetrics: Optional Prometheus counters and histograms,
  available when prometheus_client is installed
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)

# Outcome labels
OUTCOME_SUCCESS = "success"
OUTCOME_EMPTY_RESPONSE = "empty_response"
OUTCOME_TRANSPORT_ERROR = "transport_error"
OUTCOME_TIMEOUT = "timeout"
OUTCOME_DECODE_ERROR = "decode_error"

OUTCOMES = (
    OUTCOME_SUCCESS,
    OUTCOME_EMPTY_RESPONSE,
    OUTCOME_TRANSPORT_ERROR,
    OUTCOME_TIMEOUT,
    OUTCOME_DECODE_ERROR,
)

LATENCY_BUCKETS = [0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0]

# Type declarations for optional prometheus_client imports
if TYPE_CHECKING:
    from prometheus_client import Counter as CounterType, Histogram as HistogramType
else:
    CounterType = object
    HistogramType = object

# Try to import prometheus_client for optional Prometheus metrics
try:
    from prometheus_client import Counter as _Counter, Histogram as _Histogram

    Counter: type[CounterType] | None = _Counter
    Histogram: type[HistogramType] | None = _Histogram
    PROMETHEUS_AVAILABLE = True
except ImportError:
    Counter = None
    Histogram = None
    PROMETHEUS_AVAILABLE = False


@dataclass
class RequestMetrics:
    """
    Outcome counters for requests issued by one dispatcher.

    Thread Safety:
        All updates take a threading.Lock, so one instance may be shared by
        dispatchers running on different event loops.

    Example:
        >>> metrics = RequestMetrics()
        >>> metrics.record("GET", OUTCOME_SUCCESS)
        >>> metrics.snapshot()["successes"]
        1
    """

    requests_total: int = 0
    successes: int = 0
    empty_responses: int = 0
    transport_errors: int = 0
    timeouts: int = 0
    decode_errors: int = 0
    per_method: dict[str, int] = field(default_factory=lambda: defaultdict(int))

    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def record(self, method: str, outcome: str) -> None:
        """Count one finished request."""
        if outcome not in OUTCOMES:
            raise ValueError(f"Unknown outcome: {outcome!r}")
        with self._lock:
            self.requests_total += 1
            self.per_method[method] += 1
            if outcome == OUTCOME_SUCCESS:
                self.successes += 1
            elif outcome == OUTCOME_EMPTY_RESPONSE:
                self.empty_responses += 1
            elif outcome == OUTCOME_TRANSPORT_ERROR:
                self.transport_errors += 1
            elif outcome == OUTCOME_TIMEOUT:
                self.timeouts += 1
            else:
                self.decode_errors += 1

    @property
    def failures(self) -> int:
        return self.requests_total - self.successes

    def snapshot(self) -> dict[str, Any]:
        """Return a copy of the current counters."""
        with self._lock:
            return {
                "requests_total": self.requests_total,
                "successes": self.successes,
                "empty_responses": self.empty_responses,
                "transport_errors": self.transport_errors,
                "timeouts": self.timeouts,
                "decode_errors": self.decode_errors,
                "per_method": dict(self.per_method),
            }

    def reset(self) -> None:
        with self._lock:
            self.requests_total = 0
            self.successes = 0
            self.empty_responses = 0
            self.transport_errors = 0
            self.timeouts = 0
            self.decode_errors = 0
            self.per_method = defaultdict(int)


class PrometheusRequestMetrics:
    """
    Optional Prometheus metrics for API requests.

    Only instantiated if prometheus_client is available.

    Metrics:
        - phastly_requests_total: Counter of requests by method and outcome
        - phastly_request_duration_seconds: Histogram of request durations

    Usage:
        >>> if PROMETHEUS_AVAILABLE:
        ...     prom_metrics = PrometheusRequestMetrics()
        ...     prom_metrics.observe("GET", OUTCOME_SUCCESS, 0.12)
    """

    def __init__(self, registry: Any | None = None) -> None:
        """
        Initialize Prometheus request metrics.

        Args:
            registry: Optional CollectorRegistry. If None, uses the default registry.

        Raises:
            ImportError: If prometheus_client is not available.
        """
        if not PROMETHEUS_AVAILABLE or Counter is None or Histogram is None:
            raise ImportError(
                "prometheus_client is not available. "
                "Install with: pip install phastly[metrics]"
            )

        self.requests_total = Counter(
            "phastly_requests_total",
            "Total Fastly API requests",
            ["method", "outcome"],
            registry=registry,
        )

        self.request_duration_seconds = Histogram(
            "phastly_request_duration_seconds",
            "Duration of Fastly API requests",
            ["method"],
            buckets=LATENCY_BUCKETS,
            registry=registry,
        )

        logger.info("Prometheus request metrics initialized")

    def observe(self, method: str, outcome: str, duration_seconds: float) -> None:
        """
        Observe a finished request.

        Args:
            method: HTTP method
            outcome: One of the OUTCOME_* labels
            duration_seconds: Wall time spent waiting on the transport
        """
        self.requests_total.labels(method=method, outcome=outcome).inc()
        self.request_duration_seconds.labels(method=method).observe(duration_seconds)


# Module-level singleton for Prometheus metrics (optional)
_prometheus_request_metrics: PrometheusRequestMetrics | None = None
_prometheus_lock = threading.Lock()


def get_prometheus_request_metrics() -> PrometheusRequestMetrics | None:
    """
    Get or create the Prometheus request metrics singleton.

    Returns:
        PrometheusRequestMetrics instance if prometheus_client is available,
        None otherwise.
    """
    global _prometheus_request_metrics

    if not PROMETHEUS_AVAILABLE:
        return None

    # Double-checked locking: prometheus_client rejects duplicate registration
    if _prometheus_request_metrics is None:
        with _prometheus_lock:
            if _prometheus_request_metrics is None:
                try:
                    _prometheus_request_metrics = PrometheusRequestMetrics()
                except Exception as e:
                    logger.warning(
                        f"Failed to initialize Prometheus request metrics: {e}"
                    )
                    return None

    return _prometheus_request_metrics


def reset_prometheus_request_metrics() -> None:
    """Reset the Prometheus request metrics singleton (mainly for testing)."""
    global _prometheus_request_metrics
    _prometheus_request_metrics = None


__all__ = [
    "LATENCY_BUCKETS",
    "OUTCOMES",
    "OUTCOME_DECODE_ERROR",
    "OUTCOME_EMPTY_RESPONSE",
    "OUTCOME_SUCCESS",
    "OUTCOME_TIMEOUT",
    "OUTCOME_TRANSPORT_ERROR",
    "PROMETHEUS_AVAILABLE",
    "PrometheusRequestMetrics",
    "RequestMetrics",
    "get_prometheus_request_metrics",
    "reset_prometheus_request_metrics",
]
