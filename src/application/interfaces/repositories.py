"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Iterable, List, Optional, Sequence
from uuid import UUID

from src.domain.entities.job import Job
from src.domain.entities.route_plan import JobAssignment
from src.domain.entities.technician import Technician
from src.domain.value_objects.technician_role import TechnicianRole


class JobRepositoryInterface(ABC):
    """Job store interface."""

    @abstractmethod
    async def get_by_id(self, job_id: UUID) -> Optional[Job]:
        """Get job by ID."""
        pass

    @abstractmethod
    async def create(self, job: Job) -> Job:
        """Create a new job."""
        pass

    @abstractmethod
    async def find_unassigned(self) -> List[Job]:
        """Find every job whose scheduled date is still empty."""
        pass

    @abstractmethod
    async def find_by_ids(self, job_ids: Iterable[UUID]) -> List[Job]:
        """Find jobs by ID, silently skipping unknown IDs."""
        pass

    @abstractmethod
    async def find_scheduled_for_technician(
        self, technician_id: UUID, scheduled_date: date
    ) -> List[Job]:
        """Find jobs on a date where the technician is lead or assistant."""
        pass

    @abstractmethod
    async def find_booked_for_lead(
        self, technician_id: UUID, dates: Iterable[date]
    ) -> List[Job]:
        """Find jobs already led by the technician on any of the dates."""
        pass

    @abstractmethod
    async def assign_unscheduled(
        self,
        assignments: Sequence[JobAssignment],
        lead_tech_id: UUID,
        assistant_tech_id: Optional[UUID] = None,
    ) -> int:
        """
        Conditionally write scheduling fields onto every job in the batch.

        Each job is only updated if it is still unassigned. If any job fails
        that check, AssignmentConflictError is raised naming every offending
        job and the caller must roll back.

        Returns:
            Number of jobs updated
        """
        pass

    @abstractmethod
    async def update_status(self, job: Job) -> Job:
        """Persist a job's status fields."""
        pass

    @abstractmethod
    async def update_ticket_fields(self, job: Job) -> Job:
        """Persist a job's ticket details."""
        pass


class TechnicianRepositoryInterface(ABC):
    """Technician directory interface."""

    @abstractmethod
    async def get_by_id(self, technician_id: UUID) -> Optional[Technician]:
        """Get technician by ID."""
        pass

    @abstractmethod
    async def list_active(
        self, roles: Optional[Iterable[TechnicianRole]] = None
    ) -> List[Technician]:
        """List active technicians, optionally restricted to roles."""
        pass

    @abstractmethod
    async def create(self, technician: Technician) -> Technician:
        """Create a new technician."""
        pass
