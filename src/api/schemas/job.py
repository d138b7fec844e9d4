"""
Job-related API schemas.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.domain.entities.job import Job
from src.domain.value_objects.job_status import JobStatus

from .common import TimestampMixin


class AddressSchema(BaseModel):
    """Address schema."""

    street: str = Field(..., min_length=1, max_length=255)
    city: str = Field("", max_length=100)
    state: str = Field("", max_length=2)
    zip_code: str = Field(..., min_length=1, max_length=10)

    @field_validator("state")
    @classmethod
    def validate_state(cls, v):
        return v.upper()


class JobResponse(TimestampMixin):
    """Job response schema."""

    id: UUID
    store_number: Optional[str] = None
    job_type: Optional[str] = None
    notes: Optional[str] = None
    service_ticket_number: Optional[str] = None
    description: Optional[str] = None
    special_instructions: Optional[str] = None
    start_time: Optional[str] = None
    address: AddressSchema
    status: JobStatus
    scheduled_date: Optional[date] = None
    route_order: Optional[int] = None
    lead_tech_id: Optional[UUID] = None
    assistant_tech_id: Optional[UUID] = None
    completed_at: Optional[datetime] = Field(
        None, description="Job completion timestamp"
    )

    model_config = {"from_attributes": True}

    @classmethod
    def from_entity(cls, job: Job) -> "JobResponse":
        return cls(
            id=job.id,
            store_number=job.store_number,
            job_type=job.job_type,
            notes=job.notes,
            service_ticket_number=job.service_ticket_number,
            description=job.description,
            special_instructions=job.special_instructions,
            start_time=job.start_time,
            address=AddressSchema(**job.address.to_dict()),
            status=job.status,
            scheduled_date=job.scheduled_date,
            route_order=job.route_order,
            lead_tech_id=job.lead_tech_id,
            assistant_tech_id=job.assistant_tech_id,
            completed_at=job.completed_at,
            created_at=job.created_at,
            updated_at=job.updated_at,
        )


class JobStatusUpdateRequest(BaseModel):
    """Field status update request."""

    status: JobStatus = Field(
        ..., description="One of in_progress, waiting_pickup, completed"
    )


class JobTicketUpdateRequest(BaseModel):
    """Ticket details patch. Omitted or empty fields keep their value."""

    service_ticket_number: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    special_instructions: Optional[str] = None
    start_time: Optional[str] = Field(None, max_length=20, examples=["08:30"])
