"""
Application services package.
"""

from .job_pool_index import JobPoolIndex, RegionSummary
from .route_generator import RouteGenerator, generate_route

__all__ = [
    "JobPoolIndex",
    "RegionSummary",
    "RouteGenerator",
    "generate_route",
]
