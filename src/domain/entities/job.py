"""Job domain entity."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from src.domain.exceptions.assignment_error import JobStatusError
from src.domain.value_objects.address import Address
from src.domain.value_objects.job_status import JobStatus


@dataclass
class Job:
    """Field job tied to a physical site.

    Scheduling state lives on the job itself: a job with a ``scheduled_date``
    always carries a ``lead_tech_id`` and a ``route_order``.
    """

    address: Address
    id: UUID = field(default_factory=uuid4)
    store_number: Optional[str] = None
    job_type: Optional[str] = None
    notes: Optional[str] = None
    service_ticket_number: Optional[str] = None
    description: Optional[str] = None
    special_instructions: Optional[str] = None
    start_time: Optional[str] = None
    status: JobStatus = JobStatus.UNASSIGNED
    scheduled_date: Optional[date] = None
    route_order: Optional[int] = None
    lead_tech_id: Optional[UUID] = None
    assistant_tech_id: Optional[UUID] = None
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate job data."""
        if not self.address:
            raise ValueError("Job address is required")

        self.status = JobStatus(self.status)

        if self.scheduled_date is not None:
            if self.lead_tech_id is None:
                raise ValueError("Scheduled job requires a lead technician")
            if self.route_order is None or self.route_order < 1:
                raise ValueError("Scheduled job requires a positive route order")

        # Set timestamps if not provided
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = datetime.now(timezone.utc)

    @property
    def zip_code(self) -> str:
        return self.address.zip_code

    @property
    def is_unassigned(self) -> bool:
        """Check if job is still in the pool of routable work."""
        return self.scheduled_date is None and self.status.is_assignable()

    def assign(
        self,
        scheduled_date: date,
        route_order: int,
        lead_tech_id: UUID,
        assistant_tech_id: Optional[UUID] = None,
    ) -> None:
        """Place the job on a technician's route."""
        if not self.is_unassigned:
            raise JobStatusError(self.status.value, JobStatus.SCHEDULED.value)
        if route_order < 1:
            raise ValueError("Route order is 1-based")

        self.scheduled_date = scheduled_date
        self.route_order = route_order
        self.lead_tech_id = lead_tech_id
        self.assistant_tech_id = assistant_tech_id
        self.status = JobStatus.SCHEDULED
        self.updated_at = datetime.now(timezone.utc)

    def update_status(self, status: JobStatus) -> None:
        """Apply a field status update from a technician."""
        status = JobStatus(status)
        if not status.is_field_update():
            raise JobStatusError(self.status.value, status.value)
        if self.scheduled_date is None or self.status.is_final():
            raise JobStatusError(self.status.value, status.value)

        self.status = status
        now = datetime.now(timezone.utc)
        if status == JobStatus.COMPLETED:
            self.completed_at = now
        self.updated_at = now

    def update_ticket_fields(
        self,
        service_ticket_number: Optional[str] = None,
        description: Optional[str] = None,
        special_instructions: Optional[str] = None,
        start_time: Optional[str] = None,
    ) -> bool:
        """
        Patch the ticket details a technician fills in on site.

        Missing or empty values leave the current value untouched, so a
        ticket field can be corrected but never blanked.

        Returns:
            True if any field changed
        """
        updates = {
            "service_ticket_number": service_ticket_number,
            "description": description,
            "special_instructions": special_instructions,
            "start_time": start_time,
        }
        changed = False
        for name, value in updates.items():
            if value and value != getattr(self, name):
                setattr(self, name, value)
                changed = True

        if changed:
            self.updated_at = datetime.now(timezone.utc)
        return changed

    def to_dict(self) -> dict:
        """Convert job to dictionary."""
        return {
            "id": str(self.id),
            "store_number": self.store_number,
            "job_type": self.job_type,
            "notes": self.notes,
            "service_ticket_number": self.service_ticket_number,
            "description": self.description,
            "special_instructions": self.special_instructions,
            "start_time": self.start_time,
            "address": self.address.to_dict(),
            "status": self.status.value,
            "scheduled_date": self.scheduled_date.isoformat()
            if self.scheduled_date
            else None,
            "route_order": self.route_order,
            "lead_tech_id": str(self.lead_tech_id) if self.lead_tech_id else None,
            "assistant_tech_id": str(self.assistant_tech_id)
            if self.assistant_tech_id
            else None,
        }
