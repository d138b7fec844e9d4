"""
Domain entities package.
"""

from .job import Job
from .route_plan import JobAssignment, RouteDay, RoutePlan
from .technician import Technician

__all__ = [
    "Job",
    "JobAssignment",
    "RouteDay",
    "RoutePlan",
    "Technician",
]
