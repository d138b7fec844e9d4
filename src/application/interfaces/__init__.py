"""
Application interfaces package.
"""

from .repositories import JobRepositoryInterface, TechnicianRepositoryInterface

__all__ = [
    "JobRepositoryInterface",
    "TechnicianRepositoryInterface",
]
