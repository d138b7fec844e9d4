"""
Domain exceptions package.
"""

from .assignment_error import (
    AssignmentConflictError,
    AssignmentError,
    AssignmentStoreError,
    JobStatusError,
)
from .validation_error import (
    InvalidFormatError,
    InvalidRouteParameterError,
    JobNotFoundError,
    RequiredFieldError,
    TechnicianNotFoundError,
    ValidationError,
)

__all__ = [
    "AssignmentConflictError",
    "AssignmentError",
    "AssignmentStoreError",
    "InvalidFormatError",
    "InvalidRouteParameterError",
    "JobNotFoundError",
    "JobStatusError",
    "RequiredFieldError",
    "TechnicianNotFoundError",
    "ValidationError",
]
