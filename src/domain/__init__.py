"""
Domain package.
"""

from .entities import *
from .events import *
from .exceptions import *
from .value_objects import *

__all__ = [
    # Entities
    "Job",
    "JobAssignment",
    "RouteDay",
    "RoutePlan",
    "Technician",
    # Events
    "RoutePlanCommitted",
    # Exceptions
    "AssignmentConflictError",
    "AssignmentError",
    "AssignmentStoreError",
    "JobStatusError",
    "ValidationError",
    # Value Objects
    "Address",
    "JobStatus",
    "TechnicianRole",
]
