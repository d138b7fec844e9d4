"""Update job ticket use case."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from src.application.interfaces.repositories import JobRepositoryInterface
from src.config.logging import get_logger
from src.domain.entities.job import Job
from src.domain.exceptions.validation_error import JobNotFoundError
from src.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class UpdateJobTicketRequest:
    """Ticket details to patch; empty values are ignored."""

    service_ticket_number: Optional[str] = None
    description: Optional[str] = None
    special_instructions: Optional[str] = None
    start_time: Optional[str] = None


class UpdateJobTicketUseCase:
    """Use case for a technician editing a job's ticket details."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.job_repo = job_repo
        self.transaction_service = transaction_service

    async def execute(self, job_id: UUID, request: UpdateJobTicketRequest) -> Job:
        job = await self.job_repo.get_by_id(job_id)
        if not job:
            raise JobNotFoundError(job_id)

        changed = job.update_ticket_fields(
            service_ticket_number=request.service_ticket_number,
            description=request.description,
            special_instructions=request.special_instructions,
            start_time=request.start_time,
        )
        if not changed:
            logger.debug("Job ticket unchanged", job_id=str(job_id))
            return job

        updated = await self.transaction_service.execute_in_transaction(
            lambda: self.job_repo.update_ticket_fields(job)
        )

        logger.info("Job ticket updated", job_id=str(job_id))
        return updated
