"""
API schemas for the route planning service.
"""

from .common import ErrorResponse
from .job import JobResponse, JobStatusUpdateRequest
from .route_plan import (
    RegionListResponse,
    RouteCommitRequest,
    RouteCommitResponse,
    RoutePlanResponse,
    RoutePreviewRequest,
)
from .technician import TechnicianResponse, TechnicianRouteResponse

__all__ = [
    "ErrorResponse",
    "JobResponse",
    "JobStatusUpdateRequest",
    "RegionListResponse",
    "RouteCommitRequest",
    "RouteCommitResponse",
    "RoutePlanResponse",
    "RoutePreviewRequest",
    "TechnicianResponse",
    "TechnicianRouteResponse",
]
