"""
FastAPI dependency injection container.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.services.job_pool_index import JobPoolIndex
from src.application.services.route_generator import RouteGenerator
from src.application.use_cases.commit_route_plan import CommitRoutePlanUseCase
from src.application.use_cases.get_technician_route import GetTechnicianRouteUseCase
from src.application.use_cases.update_job_status import UpdateJobStatusUseCase
from src.application.use_cases.update_job_ticket import UpdateJobTicketUseCase
from src.config.database import get_db_session
from src.config.settings import settings
from src.infrastructure.database.repositories.job_repository import JobRepository
from src.infrastructure.database.repositories.technician_repository import (
    TechnicianRepository,
)
from src.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from src.infrastructure.monitoring.health_checks import HealthChecker


# Database Dependencies
async def get_job_repository(
    db: AsyncSession = Depends(get_db_session),
) -> JobRepository:
    """Get job repository instance."""
    return JobRepository(db)


async def get_technician_repository(
    db: AsyncSession = Depends(get_db_session),
) -> TechnicianRepository:
    """Get technician repository instance."""
    return TechnicianRepository(db)


async def get_transaction_service(
    db: AsyncSession = Depends(get_db_session),
) -> TransactionService:
    """Get transaction service bound to the request session."""
    return TransactionService(db)


# Service Dependencies
async def get_job_pool_index(
    job_repo: JobRepository = Depends(get_job_repository),
) -> JobPoolIndex:
    """Get job pool index instance."""
    return JobPoolIndex(job_repo)


async def get_route_generator() -> RouteGenerator:
    """Get route generator configured with the working calendar."""
    return RouteGenerator(
        skip_weekday=settings.ROUTE_SKIP_WEEKDAY,
        max_per_day_limit=settings.ROUTE_MAX_PER_DAY_LIMIT,
    )


async def get_commit_route_plan_use_case(
    job_repo: JobRepository = Depends(get_job_repository),
    technician_repo: TechnicianRepository = Depends(get_technician_repository),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> CommitRoutePlanUseCase:
    """Get commit use case instance."""
    return CommitRoutePlanUseCase(job_repo, technician_repo, transaction_service)


async def get_technician_route_use_case(
    job_repo: JobRepository = Depends(get_job_repository),
    technician_repo: TechnicianRepository = Depends(get_technician_repository),
) -> GetTechnicianRouteUseCase:
    """Get technician route use case instance."""
    return GetTechnicianRouteUseCase(job_repo, technician_repo)


async def get_update_job_status_use_case(
    job_repo: JobRepository = Depends(get_job_repository),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> UpdateJobStatusUseCase:
    """Get job status use case instance."""
    return UpdateJobStatusUseCase(job_repo, transaction_service)


async def get_update_job_ticket_use_case(
    job_repo: JobRepository = Depends(get_job_repository),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> UpdateJobTicketUseCase:
    """Get job ticket use case instance."""
    return UpdateJobTicketUseCase(job_repo, transaction_service)


async def get_health_checker() -> HealthChecker:
    """Get health checker instance."""
    return HealthChecker()


# Type aliases for cleaner dependency injection
JobRepositoryDep = Annotated[JobRepository, Depends(get_job_repository)]
TechnicianRepositoryDep = Annotated[
    TechnicianRepository, Depends(get_technician_repository)
]
JobPoolIndexDep = Annotated[JobPoolIndex, Depends(get_job_pool_index)]
RouteGeneratorDep = Annotated[RouteGenerator, Depends(get_route_generator)]
CommitRoutePlanUseCaseDep = Annotated[
    CommitRoutePlanUseCase, Depends(get_commit_route_plan_use_case)
]
TechnicianRouteUseCaseDep = Annotated[
    GetTechnicianRouteUseCase, Depends(get_technician_route_use_case)
]
UpdateJobStatusUseCaseDep = Annotated[
    UpdateJobStatusUseCase, Depends(get_update_job_status_use_case)
]
UpdateJobTicketUseCaseDep = Annotated[
    UpdateJobTicketUseCase, Depends(get_update_job_ticket_use_case)
]
HealthCheckerDep = Annotated[HealthChecker, Depends(get_health_checker)]
