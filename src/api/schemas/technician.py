"""
Technician API schemas.
"""

from datetime import date
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities.technician import Technician
from src.domain.value_objects.technician_role import TechnicianRole

from .job import JobResponse


class TechnicianResponse(BaseModel):
    """Technician response schema."""

    id: UUID
    name: str
    role: TechnicianRole
    email: Optional[str] = None
    phone: Optional[str] = None
    is_active: bool

    @classmethod
    def from_entity(cls, technician: Technician) -> "TechnicianResponse":
        return cls(
            id=technician.id,
            name=technician.name,
            role=technician.role,
            email=technician.email,
            phone=technician.phone,
            is_active=technician.is_active,
        )


class TechnicianStopSchema(BaseModel):
    """Stop on a technician's day."""

    route_order: int
    role: str
    partner_name: Optional[str] = None
    job: JobResponse


class TechnicianRouteResponse(BaseModel):
    """A technician's stops for one date."""

    technician_id: UUID
    date: date
    stops: List[TechnicianStopSchema]
