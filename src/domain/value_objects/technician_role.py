"""
Technician role value object.
"""

from enum import Enum


class TechnicianRole(str, Enum):
    """Technician role enumeration."""

    LEAD_TECH = "lead_tech"
    ASSISTANT_TECH = "assistant_tech"
    ADMIN = "admin"

    def can_lead(self) -> bool:
        """Check if role may own a route as lead technician."""
        return self == self.LEAD_TECH

    def can_assist(self) -> bool:
        """Check if role may ride along as assistant."""
        return self in [self.LEAD_TECH, self.ASSISTANT_TECH]

    def is_field_role(self) -> bool:
        """Check if role works job sites."""
        return self in [self.LEAD_TECH, self.ASSISTANT_TECH]
