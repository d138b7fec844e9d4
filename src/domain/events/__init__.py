"""
Domain events package.
"""

from .route_plan_committed import RoutePlanCommitted

__all__ = [
    "RoutePlanCommitted",
]
