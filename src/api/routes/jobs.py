"""Job endpoints."""

from uuid import UUID

from fastapi import APIRouter

from src.api.dependencies import (
    JobRepositoryDep,
    UpdateJobStatusUseCaseDep,
    UpdateJobTicketUseCaseDep,
)
from src.api.schemas.job import (
    JobResponse,
    JobStatusUpdateRequest,
    JobTicketUpdateRequest,
)
from src.application.use_cases.update_job_ticket import UpdateJobTicketRequest
from src.domain.exceptions.validation_error import JobNotFoundError

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: UUID, job_repository: JobRepositoryDep):
    """Get a single job with its scheduling state."""
    job = await job_repository.get_by_id(job_id)
    if not job:
        raise JobNotFoundError(job_id)
    return JobResponse.from_entity(job)


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job_ticket(
    job_id: UUID,
    request: JobTicketUpdateRequest,
    use_case: UpdateJobTicketUseCaseDep,
):
    """Patch ticket number, description, special instructions or start time."""
    job = await use_case.execute(
        job_id, UpdateJobTicketRequest(**request.model_dump())
    )
    return JobResponse.from_entity(job)


@router.patch("/{job_id}/status", response_model=JobResponse)
async def update_job_status(
    job_id: UUID,
    request: JobStatusUpdateRequest,
    use_case: UpdateJobStatusUseCaseDep,
):
    """Technician field update: in progress, waiting pickup or completed."""
    job = await use_case.execute(job_id, request.status)
    return JobResponse.from_entity(job)
