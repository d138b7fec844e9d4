"""
Job status value object.
"""

from enum import Enum


class JobStatus(str, Enum):
    """Job lifecycle status enumeration."""

    UNASSIGNED = "unassigned"
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    WAITING_PICKUP = "waiting_pickup"
    COMPLETED = "completed"

    def is_assignable(self) -> bool:
        """Check if a job in this status may be placed on a route."""
        return self == self.UNASSIGNED

    def is_final(self) -> bool:
        """Check if status is final (no more transitions)."""
        return self == self.COMPLETED

    def is_field_update(self) -> bool:
        """Check if a technician may move a job into this status."""
        return self in [self.IN_PROGRESS, self.WAITING_PICKUP, self.COMPLETED]
