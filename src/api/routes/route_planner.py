"""Route planner endpoints: region filters, plan preview and commit."""

from fastapi import APIRouter, status

from src.api.dependencies import (
    CommitRoutePlanUseCaseDep,
    JobPoolIndexDep,
    JobRepositoryDep,
    RouteGeneratorDep,
)
from src.api.schemas.common import ErrorResponse
from src.api.schemas.job import JobResponse
from src.api.schemas.route_plan import (
    RegionGroup,
    RegionListResponse,
    RouteCommitRequest,
    RouteCommitResponse,
    RoutePlanResponse,
    RoutePreviewRequest,
)
from src.application.services.job_pool_index import RegionSummary
from src.application.use_cases.commit_route_plan import CommitRoutePlanRequest
from src.config.logging import get_logger
from src.config.settings import settings
from src.domain.entities.route_plan import RouteDay, RoutePlan
from src.domain.exceptions.assignment_error import AssignmentConflictError
from src.domain.exceptions.validation_error import RequiredFieldError
from src.infrastructure.monitoring.metrics import (
    record_commit_outcome,
    record_plan_generated,
)

logger = get_logger(__name__)
router = APIRouter(prefix="/route-planner", tags=["route-planner"])


def _region_response(summary: RegionSummary) -> RegionListResponse:
    return RegionListResponse(
        total_unassigned=summary.total_unassigned,
        regions=[
            RegionGroup(
                name=name,
                count=count,
                jobs=[JobResponse.from_entity(job) for job in summary.groups[name]],
            )
            for name, count in summary.regions
        ],
    )


@router.get("/regions", response_model=RegionListResponse)
async def list_regions(job_pool: JobPoolIndexDep):
    """Unassigned jobs grouped by state, largest state first."""
    return _region_response(await job_pool.region_summary())


@router.get("/regions/{state}/cities", response_model=RegionListResponse)
async def list_cities(state: str, job_pool: JobPoolIndexDep):
    """Unassigned jobs of one state grouped by city."""
    return _region_response(await job_pool.city_summary(state))


@router.post(
    "/preview",
    response_model=RoutePlanResponse,
    responses={400: {"model": ErrorResponse}},
)
async def preview_route(
    request: RoutePreviewRequest,
    job_pool: JobPoolIndexDep,
    generator: RouteGeneratorDep,
):
    """Generate a route plan for the selected region. Nothing is written."""
    jobs = await job_pool.select_jobs(request.state, request.cities)
    max_per_day = (
        settings.ROUTE_DEFAULT_MAX_PER_DAY
        if request.max_per_day is None
        else request.max_per_day
    )

    plan = generator.generate(
        jobs,
        start_date=request.start_date,
        max_per_day=max_per_day,
        skip_weekday=request.skip_weekday,
    )
    record_plan_generated(len(plan))

    logger.info(
        "Route plan previewed",
        state=request.state,
        cities=request.cities,
        jobs=plan.total_jobs,
        days=len(plan),
        max_per_day=max_per_day,
    )
    return RoutePlanResponse.from_entity(plan)


@router.post(
    "/commit",
    response_model=RouteCommitResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def commit_route(
    request: RouteCommitRequest,
    job_repository: JobRepositoryDep,
    use_case: CommitRoutePlanUseCaseDep,
):
    """Assign every job of a previewed plan to the crew, all or nothing."""
    if not request.lead_tech_id:
        raise RequiredFieldError("lead_tech_id")

    requested_ids = [job_id for day in request.days for job_id in day.job_ids]
    jobs_by_id = {
        job.id: job for job in await job_repository.find_by_ids(set(requested_ids))
    }
    missing = [job_id for job_id in requested_ids if job_id not in jobs_by_id]
    if missing:
        record_commit_outcome("conflict")
        raise AssignmentConflictError(missing, reason="no longer exist")

    plan = RoutePlan(
        days=[
            RouteDay(date=day.date, jobs=[jobs_by_id[job_id] for job_id in day.job_ids])
            for day in request.days
            if day.job_ids
        ]
    )

    result = await use_case.execute(
        CommitRoutePlanRequest(
            plan=plan,
            lead_tech_id=request.lead_tech_id,
            assistant_tech_id=request.assistant_tech_id,
        )
    )
    return RouteCommitResponse(assigned_count=result.assigned_count)
