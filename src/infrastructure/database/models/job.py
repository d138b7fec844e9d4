"""
Job SQLAlchemy model.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship

from src.domain.value_objects.job_status import JobStatus

from . import BaseModel


class JobModel(BaseModel):
    """Job database model."""

    __tablename__ = "jobs"

    store_number = Column(String(50))
    job_type = Column(String(100))
    notes = Column(Text)

    # Ticket fields, editable after import
    service_ticket_number = Column(String(100))
    description = Column(Text)
    special_instructions = Column(Text)
    start_time = Column(String(20))

    # Address fields
    street = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False, default="")
    state = Column(String(2), nullable=False, default="", index=True)
    zip_code = Column(String(10), nullable=False)

    status = Column(
        String(50), default=JobStatus.UNASSIGNED.value, nullable=False, index=True
    )
    completed_at = Column(DateTime(timezone=True))

    # Scheduling fields, all null while the job sits in the pool
    scheduled_date = Column(Date, index=True)
    route_order = Column(Integer)
    lead_tech_id = Column(Uuid(as_uuid=True), ForeignKey("technicians.id"))
    assistant_tech_id = Column(Uuid(as_uuid=True), ForeignKey("technicians.id"))

    # Relationships
    lead_tech = relationship(
        "TechnicianModel", foreign_keys=[lead_tech_id], back_populates="led_jobs"
    )
    assistant_tech = relationship(
        "TechnicianModel",
        foreign_keys=[assistant_tech_id],
        back_populates="assisted_jobs",
    )

    __table_args__ = (
        UniqueConstraint(
            "lead_tech_id",
            "scheduled_date",
            "route_order",
            name="uq_jobs_lead_tech_date_route_order",
        ),
        Index("ix_jobs_lead_tech_date", "lead_tech_id", "scheduled_date"),
        Index("ix_jobs_assistant_tech_date", "assistant_tech_id", "scheduled_date"),
        CheckConstraint(
            "scheduled_date IS NULL OR "
            "(lead_tech_id IS NOT NULL AND route_order IS NOT NULL)",
            name="ck_jobs_scheduled_has_crew",
        ),
    )

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, zip_code={self.zip_code}, status={self.status})>"
