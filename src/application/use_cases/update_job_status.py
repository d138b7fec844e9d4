"""Update job status use case."""

from uuid import UUID

from src.application.interfaces.repositories import JobRepositoryInterface
from src.config.logging import get_logger
from src.domain.entities.job import Job
from src.domain.exceptions.validation_error import JobNotFoundError
from src.domain.value_objects.job_status import JobStatus
from src.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


class UpdateJobStatusUseCase:
    """Use case for a technician moving a scheduled job through the field lifecycle."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.job_repo = job_repo
        self.transaction_service = transaction_service

    async def execute(self, job_id: UUID, status: JobStatus) -> Job:
        job = await self.job_repo.get_by_id(job_id)
        if not job:
            raise JobNotFoundError(job_id)

        previous = job.status
        # Raises JobStatusError for unassigned, completed or non-field statuses
        job.update_status(status)

        updated = await self.transaction_service.execute_in_transaction(
            lambda: self.job_repo.update_status(job)
        )

        logger.info(
            "Job status updated",
            job_id=str(job_id),
            previous_status=previous.value,
            status=updated.status.value,
        )
        return updated
