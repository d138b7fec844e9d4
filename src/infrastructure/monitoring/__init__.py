"""
Monitoring package.
"""

from .health_checks import HealthChecker
from .metrics import (
    get_metrics,
    get_metrics_content_type,
    record_api_request,
    record_commit_outcome,
    record_plan_generated,
)

__all__ = [
    "HealthChecker",
    "get_metrics",
    "get_metrics_content_type",
    "record_api_request",
    "record_commit_outcome",
    "record_plan_generated",
]
