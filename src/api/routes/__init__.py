"""
API routes package.
"""

from .health import router as health_router
from .jobs import router as jobs_router
from .route_planner import router as route_planner_router
from .technicians import router as technicians_router

__all__ = [
    "health_router",
    "jobs_router",
    "route_planner_router",
    "technicians_router",
]
