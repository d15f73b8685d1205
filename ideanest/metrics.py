"""Prometheus metric definitions for the evaluation client."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

# --- Evaluation ---

evaluation_outcomes_total = Counter(
    "ideanest_evaluation_outcomes_total",
    "Primary evaluation requests by classified outcome",
    labelnames=["outcome"],
)

# --- Auxiliary analyses ---

auxiliary_requests_total = Counter(
    "ideanest_auxiliary_requests_total",
    "Auxiliary analysis requests by kind and the path that served them",
    labelnames=["kind", "source"],
)

# --- Remote service ---

remote_request_seconds = Histogram(
    "ideanest_remote_request_seconds",
    "Latency of calls to the evaluation service",
    labelnames=["endpoint"],
    buckets=(0.25, 0.5, 1, 2, 5, 10, 30, 60),
)
