"""
Route Planning Service.

Groups unassigned field jobs by region, previews multi-day technician
routes and commits them as a single all-or-nothing assignment.
"""

__version__ = "0.1.0"
__description__ = "Route Planning Service"
