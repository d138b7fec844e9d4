"""
Technician domain entity.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from src.domain.value_objects.technician_role import TechnicianRole


class Technician:
    """Technician entity representing a field technician.

    Technicians do not own jobs; jobs reference technicians.
    """

    def __init__(
        self,
        id: UUID,
        name: str,
        role: TechnicianRole,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        is_active: bool = True,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        if not name or not name.strip():
            raise ValueError("Technician name is required")

        self.id = id
        self.name = name
        self.role = TechnicianRole(role)
        self.email = email
        self.phone = phone
        self.is_active = is_active
        self.created_at = created_at or datetime.now(timezone.utc)
        self.updated_at = updated_at or datetime.now(timezone.utc)

    def can_lead(self) -> bool:
        """Check if technician can be assigned as route lead."""
        return self.is_active and self.role.can_lead()

    def can_assist(self) -> bool:
        """Check if technician can be assigned as assistant."""
        return self.is_active and self.role.can_assist()

    def to_dict(self) -> dict:
        """Convert technician to dictionary."""
        return {
            "id": str(self.id),
            "name": self.name,
            "role": self.role.value,
            "email": self.email,
            "phone": self.phone,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
