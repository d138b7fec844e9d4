"""
Technician SQLAlchemy model.
"""

from sqlalchemy import Boolean, Column, String
from sqlalchemy.orm import relationship

from src.domain.value_objects.technician_role import TechnicianRole

from . import BaseModel


class TechnicianModel(BaseModel):
    """Technician database model."""

    __tablename__ = "technicians"

    name = Column(String(255), nullable=False)
    email = Column(String(255))
    phone = Column(String(20))
    role = Column(
        String(50), nullable=False, default=TechnicianRole.LEAD_TECH.value, index=True
    )
    is_active = Column(Boolean, nullable=False, default=True)

    # Relationships
    led_jobs = relationship(
        "JobModel", foreign_keys="JobModel.lead_tech_id", back_populates="lead_tech"
    )
    assisted_jobs = relationship(
        "JobModel",
        foreign_keys="JobModel.assistant_tech_id",
        back_populates="assistant_tech",
    )

    def __repr__(self) -> str:
        return f"<Technician(id={self.id}, name={self.name}, role={self.role})>"
