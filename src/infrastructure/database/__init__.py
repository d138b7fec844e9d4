"""
Database package.
"""

from .connection import get_database_health

__all__ = ["get_database_health"]
