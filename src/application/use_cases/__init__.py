"""
Use cases package.

This package contains the business logic use cases that orchestrate
the application services and repositories.
"""

from .commit_route_plan import (
    CommitRoutePlanRequest,
    CommitRoutePlanResult,
    CommitRoutePlanUseCase,
)
from .get_technician_route import GetTechnicianRouteUseCase, RouteStop
from .update_job_status import UpdateJobStatusUseCase

__all__ = [
    "CommitRoutePlanRequest",
    "CommitRoutePlanResult",
    "CommitRoutePlanUseCase",
    "GetTechnicianRouteUseCase",
    "RouteStop",
    "UpdateJobStatusUseCase",
]
