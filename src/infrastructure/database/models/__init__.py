"""
Database models package.
"""

from .base import Base, BaseModel
from .job import JobModel
from .technician import TechnicianModel

__all__ = [
    "Base",
    "BaseModel",
    "JobModel",
    "TechnicianModel",
]
