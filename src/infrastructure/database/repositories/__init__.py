"""
Database repositories package.
"""

from .job_repository import JobRepository
from .technician_repository import TechnicianRepository
from .transaction_repository import TransactionService

__all__ = [
    "JobRepository",
    "TechnicianRepository",
    "TransactionService",
]
