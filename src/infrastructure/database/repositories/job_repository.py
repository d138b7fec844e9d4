"""Job repository implementation."""

from datetime import date, datetime, timezone
from typing import Iterable, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories import JobRepositoryInterface
from src.config.logging import get_logger
from src.domain.entities.job import Job
from src.domain.entities.route_plan import JobAssignment
from src.domain.exceptions.assignment_error import AssignmentConflictError
from src.domain.value_objects.address import Address
from src.domain.value_objects.job_status import JobStatus
from src.infrastructure.database.models.job import JobModel

logger = get_logger(__name__)

# SQLite names the columns instead of the constraint
ROUTE_SLOT_CONSTRAINT_MARKERS = ("uq_jobs_lead_tech_date_route_order", "jobs.route_order")


class JobRepository(JobRepositoryInterface):
    """Job repository implementation.

    Methods flush but never commit; transaction boundaries belong to
    TransactionService.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, job_id: UUID) -> Optional[Job]:
        """Get job by ID."""
        stmt = select(JobModel).where(JobModel.id == job_id)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def create(self, job: Job) -> Job:
        """Create a new job."""
        job_model = JobModel(
            id=job.id,
            store_number=job.store_number,
            job_type=job.job_type,
            notes=job.notes,
            service_ticket_number=job.service_ticket_number,
            description=job.description,
            special_instructions=job.special_instructions,
            start_time=job.start_time,
            street=job.address.street,
            city=job.address.city,
            state=job.address.state,
            zip_code=job.address.zip_code,
            status=job.status.value,
            scheduled_date=job.scheduled_date,
            route_order=job.route_order,
            lead_tech_id=job.lead_tech_id,
            assistant_tech_id=job.assistant_tech_id,
            completed_at=job.completed_at,
            created_at=job.created_at,
            updated_at=job.updated_at,
        )

        self.db.add(job_model)
        await self.db.flush()
        await self.db.refresh(job_model)

        return self._model_to_entity(job_model)

    async def find_unassigned(self) -> List[Job]:
        """Find every job with no scheduled date."""
        stmt = select(JobModel).where(
            and_(
                JobModel.scheduled_date.is_(None),
                JobModel.status == JobStatus.UNASSIGNED.value,
            )
        )
        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def find_by_ids(self, job_ids: Iterable[UUID]) -> List[Job]:
        """Find jobs by ID, skipping unknown IDs."""
        ids = list(job_ids)
        if not ids:
            return []
        stmt = select(JobModel).where(JobModel.id.in_(ids))
        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def find_scheduled_for_technician(
        self, technician_id: UUID, scheduled_date: date
    ) -> List[Job]:
        """Find jobs on a date where the technician is lead or assistant."""
        stmt = (
            select(JobModel)
            .where(
                and_(
                    JobModel.scheduled_date == scheduled_date,
                    or_(
                        JobModel.lead_tech_id == technician_id,
                        JobModel.assistant_tech_id == technician_id,
                    ),
                )
            )
            .order_by(JobModel.route_order.asc())
        )
        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def find_booked_for_lead(
        self, technician_id: UUID, dates: Iterable[date]
    ) -> List[Job]:
        """Find jobs already led by the technician on any of the dates."""
        days = list(dates)
        if not days:
            return []
        stmt = select(JobModel).where(
            and_(
                JobModel.lead_tech_id == technician_id,
                JobModel.scheduled_date.in_(days),
            )
        )
        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def assign_unscheduled(
        self,
        assignments: Sequence[JobAssignment],
        lead_tech_id: UUID,
        assistant_tech_id: Optional[UUID] = None,
    ) -> int:
        """Conditionally schedule every job in the batch.

        Rows are locked and checked before any update is issued, so a stale
        plan is reported in full. Each UPDATE repeats the ``scheduled_date IS
        NULL`` predicate to catch writers that slip past the lock on backends
        without row locking.
        """
        if not assignments:
            return 0

        job_ids = [assignment.job.id for assignment in assignments]
        stmt = (
            select(JobModel.id, JobModel.scheduled_date, JobModel.status)
            .where(JobModel.id.in_(job_ids))
            .with_for_update()
        )
        result = await self.db.execute(stmt)
        current = {row.id: row for row in result.all()}

        conflicts = [
            job_id
            for job_id in job_ids
            if job_id not in current
            or current[job_id].scheduled_date is not None
            or current[job_id].status != JobStatus.UNASSIGNED.value
        ]
        if conflicts:
            raise AssignmentConflictError(conflicts)

        now = datetime.now(timezone.utc)
        updated = 0
        for assignment in assignments:
            stmt = (
                update(JobModel)
                .where(
                    and_(
                        JobModel.id == assignment.job.id,
                        JobModel.scheduled_date.is_(None),
                    )
                )
                .values(
                    scheduled_date=assignment.scheduled_date,
                    route_order=assignment.route_order,
                    lead_tech_id=lead_tech_id,
                    assistant_tech_id=assistant_tech_id,
                    status=JobStatus.SCHEDULED.value,
                    updated_at=now,
                )
            )
            try:
                result = await self.db.execute(stmt)
            except IntegrityError as e:
                # A concurrent commit for the same lead and date took the slot
                if not _is_route_slot_violation(e):
                    raise
                raise AssignmentConflictError(
                    [assignment.job.id],
                    reason="route slot already taken for the lead technician",
                )
            if result.rowcount != 1:
                raise AssignmentConflictError([assignment.job.id])
            updated += 1

        await self.db.flush()

        logger.debug(
            "Jobs assigned in batch",
            count=updated,
            lead_tech_id=str(lead_tech_id),
        )
        return updated

    async def update_status(self, job: Job) -> Job:
        """Persist a job's status fields."""
        stmt = select(JobModel).where(JobModel.id == job.id)
        result = await self.db.execute(stmt)
        job_model = result.scalar_one_or_none()

        if not job_model:
            raise ValueError(f"Job {job.id} not found")

        job_model.status = job.status.value
        job_model.completed_at = job.completed_at
        job_model.updated_at = job.updated_at

        await self.db.flush()
        await self.db.refresh(job_model)

        return self._model_to_entity(job_model)

    async def update_ticket_fields(self, job: Job) -> Job:
        """Persist a job's ticket details."""
        stmt = select(JobModel).where(JobModel.id == job.id)
        result = await self.db.execute(stmt)
        job_model = result.scalar_one_or_none()

        if not job_model:
            raise ValueError(f"Job {job.id} not found")

        job_model.service_ticket_number = job.service_ticket_number
        job_model.description = job.description
        job_model.special_instructions = job.special_instructions
        job_model.start_time = job.start_time
        job_model.updated_at = job.updated_at

        await self.db.flush()
        await self.db.refresh(job_model)

        return self._model_to_entity(job_model)

    def _model_to_entity(self, model: JobModel) -> Job:
        """Convert SQLAlchemy model to domain entity."""
        address = Address(
            street=model.street,
            city=model.city or "",
            state=model.state or "",
            zip_code=model.zip_code,
        )

        return Job(
            id=model.id,
            address=address,
            store_number=model.store_number,
            job_type=model.job_type,
            notes=model.notes,
            service_ticket_number=model.service_ticket_number,
            description=model.description,
            special_instructions=model.special_instructions,
            start_time=model.start_time,
            status=JobStatus(model.status),
            scheduled_date=model.scheduled_date,
            route_order=model.route_order,
            lead_tech_id=model.lead_tech_id,
            assistant_tech_id=model.assistant_tech_id,
            completed_at=model.completed_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


def _is_route_slot_violation(error: IntegrityError) -> bool:
    message = str(error.orig)
    return any(marker in message for marker in ROUTE_SLOT_CONSTRAINT_MARKERS)
