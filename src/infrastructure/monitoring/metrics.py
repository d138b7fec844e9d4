"""
Prometheus metrics for route planning.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Dedicated registry so repeated app construction in tests never re-registers
registry = CollectorRegistry()

ROUTE_PLANS_GENERATED = Counter(
    "route_plans_generated_total",
    "Total number of route plan previews generated",
    registry=registry,
)

ROUTE_PLAN_DAYS = Histogram(
    "route_plan_days",
    "Number of working days in generated route plans",
    buckets=[1, 2, 3, 5, 10, 20, 50],
    registry=registry,
)

ROUTE_COMMITS = Counter(
    "route_commits_total",
    "Route plan commit attempts by outcome",
    ["outcome"],
    registry=registry,
)

JOBS_ASSIGNED = Counter(
    "jobs_assigned_total",
    "Total number of jobs assigned through committed route plans",
    registry=registry,
)

API_REQUESTS = Counter(
    "api_requests_total",
    "Total number of API requests",
    ["method", "endpoint", "status_code"],
    registry=registry,
)

API_REQUEST_DURATION = Histogram(
    "api_request_duration_seconds",
    "Time spent processing API requests",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0],
    registry=registry,
)


def record_plan_generated(days: int) -> None:
    """Record a generated route plan preview."""
    ROUTE_PLANS_GENERATED.inc()
    ROUTE_PLAN_DAYS.observe(days)


def record_commit_outcome(outcome: str, assigned_count: int = 0) -> None:
    """Record a commit attempt: ``success``, ``conflict`` or ``store_error``."""
    ROUTE_COMMITS.labels(outcome=outcome).inc()
    if assigned_count:
        JOBS_ASSIGNED.inc(assigned_count)


def record_api_request(
    method: str, endpoint: str, status_code: int, duration: float
) -> None:
    """Record API request metrics."""
    API_REQUESTS.labels(
        method=method, endpoint=endpoint, status_code=str(status_code)
    ).inc()
    API_REQUEST_DURATION.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get metrics in Prometheus format."""
    return generate_latest(registry)


def get_metrics_content_type() -> str:
    """Get Prometheus metrics content type."""
    return CONTENT_TYPE_LATEST
