# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Observability for the phastly client.

Classes:
    RequestMetrics: In-process counters of request outcomes.
    PrometheusRequestMetrics: Optional Prometheus metrics.

Functions:
    get_prometheus_request_metrics: Get or create the Prometheus metrics singleton.
    reset_prometheus_request_metrics: Reset the Prometheus metrics singleton.

Constants:
    PROMETHEUS_AVAILABLE: Whether prometheus_client is available.
"""

from .metrics import (
    LATENCY_BUCKETS,
    OUTCOME_DECODE_ERROR,
    OUTCOME_EMPTY_RESPONSE,
    OUTCOME_SUCCESS,
    OUTCOME_TIMEOUT,
    OUTCOME_TRANSPORT_ERROR,
    OUTCOMES,
    PROMETHEUS_AVAILABLE,
    PrometheusRequestMetrics,
    RequestMetrics,
    get_prometheus_request_metrics,
    reset_prometheus_request_metrics,
)

__all__ = [
    "LATENCY_BUCKETS",
    "OUTCOMES",
    # Outcome labels
    "OUTCOME_DECODE_ERROR",
    "OUTCOME_EMPTY_RESPONSE",
    "OUTCOME_SUCCESS",
    "OUTCOME_TIMEOUT",
    "OUTCOME_TRANSPORT_ERROR",
    # Constants
    "PROMETHEUS_AVAILABLE",
    "PrometheusRequestMetrics",
    # Metrics
    "RequestMetrics",
    "get_prometheus_request_metrics",
    "reset_prometheus_request_metrics",
]
