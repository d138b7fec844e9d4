"""
Infrastructure package.

Persistence adapters for the job store and technician directory, plus
monitoring.
"""
