"""
Domain value objects package.
"""

from .address import UNKNOWN_REGION, Address
from .job_status import JobStatus
from .technician_role import TechnicianRole

__all__ = [
    "Address",
    "JobStatus",
    "TechnicianRole",
    "UNKNOWN_REGION",
]
