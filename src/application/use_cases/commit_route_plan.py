"""Commit route plan use case."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from src.application.interfaces.repositories import (
    JobRepositoryInterface,
    TechnicianRepositoryInterface,
)
from src.config.logging import get_logger
from src.domain.entities.route_plan import JobAssignment, RoutePlan
from src.domain.events.route_plan_committed import RoutePlanCommitted
from src.domain.exceptions.assignment_error import (
    AssignmentConflictError,
    AssignmentStoreError,
)
from src.domain.exceptions.validation_error import (
    RequiredFieldError,
    ValidationError,
)
from src.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from src.infrastructure.monitoring.metrics import record_commit_outcome

logger = get_logger(__name__)


@dataclass
class CommitRoutePlanRequest:
    """Request for committing a generated route plan."""

    plan: RoutePlan
    lead_tech_id: Optional[UUID]
    assistant_tech_id: Optional[UUID] = None


@dataclass
class CommitRoutePlanResult:
    """Result of a route plan commit."""

    assigned_count: int
    event: Optional[RoutePlanCommitted] = None


class CommitRoutePlanUseCase:
    """Atomically assign every job of a route plan to a technician crew.

    Either every job in the plan is scheduled or none is. Jobs that were
    assigned elsewhere after the plan was generated abort the whole commit.
    """

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        technician_repo: TechnicianRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.job_repo = job_repo
        self.technician_repo = technician_repo
        self.transaction_service = transaction_service

    async def execute(self, request: CommitRoutePlanRequest) -> CommitRoutePlanResult:
        """Validate the crew and plan, then write all assignments in one transaction."""
        plan = request.plan

        logger.info(
            "Starting route plan commit",
            lead_tech_id=str(request.lead_tech_id) if request.lead_tech_id else None,
            assistant_tech_id=str(request.assistant_tech_id)
            if request.assistant_tech_id
            else None,
            days=len(plan),
            total_jobs=plan.total_jobs,
        )

        await self._validate_crew(request.lead_tech_id, request.assistant_tech_id)
        assignments = plan.assignments()
        self._validate_plan(plan, assignments)

        if not assignments:
            logger.info("Empty route plan, nothing to assign")
            return CommitRoutePlanResult(assigned_count=0)

        async def write_assignments() -> int:
            booked = await self.job_repo.find_booked_for_lead(
                request.lead_tech_id, plan.dates
            )
            if booked:
                raise AssignmentConflictError(
                    [job.id for job in booked],
                    reason="already booked for the lead technician on plan dates",
                )
            assigned = await self.job_repo.assign_unscheduled(
                assignments,
                lead_tech_id=request.lead_tech_id,
                assistant_tech_id=request.assistant_tech_id,
            )
            if assigned != len(assignments):
                # Raised inside the transaction so the partial batch is rolled back
                raise AssignmentStoreError(
                    f"expected {len(assignments)} updates, store reported {assigned}"
                )
            return assigned

        try:
            assigned_count = await self.transaction_service.execute_in_transaction(
                write_assignments
            )
        except AssignmentConflictError as e:
            record_commit_outcome("conflict")
            logger.warning(
                "Route plan commit rejected, plan is stale",
                conflicting_job_ids=e.job_ids,
                reason=e.reason,
            )
            raise
        except AssignmentStoreError as e:
            record_commit_outcome("store_error")
            logger.error("Route plan commit failed in job store", error=str(e))
            raise
        except SQLAlchemyError as e:
            record_commit_outcome("store_error")
            logger.error("Route plan commit failed in job store", error=str(e))
            raise AssignmentStoreError(str(e))

        event = RoutePlanCommitted(
            lead_tech_id=request.lead_tech_id,
            assistant_tech_id=request.assistant_tech_id,
            assigned_count=assigned_count,
            committed_at=datetime.now(timezone.utc),
            dates=plan.dates,
        )
        record_commit_outcome("success", assigned_count)
        logger.info("Route plan committed", **event.to_log_fields())

        return CommitRoutePlanResult(assigned_count=assigned_count, event=event)

    async def _validate_crew(
        self, lead_tech_id: Optional[UUID], assistant_tech_id: Optional[UUID]
    ) -> None:
        if not lead_tech_id:
            raise RequiredFieldError("lead_tech_id")

        lead = await self.technician_repo.get_by_id(lead_tech_id)
        if not lead:
            raise ValidationError(f"Lead technician {lead_tech_id} not found")
        if not lead.can_lead():
            raise ValidationError(
                f"Technician {lead_tech_id} cannot lead a route (role={lead.role.value}, "
                f"active={lead.is_active})"
            )

        if assistant_tech_id is None:
            return

        if assistant_tech_id == lead_tech_id:
            raise ValidationError("Assistant technician must differ from the lead")

        assistant = await self.technician_repo.get_by_id(assistant_tech_id)
        if not assistant:
            raise ValidationError(f"Assistant technician {assistant_tech_id} not found")
        if not assistant.can_assist():
            raise ValidationError(
                f"Technician {assistant_tech_id} cannot assist on a route "
                f"(role={assistant.role.value}, active={assistant.is_active})"
            )

    def _validate_plan(self, plan: RoutePlan, assignments: List[JobAssignment]) -> None:
        dates = plan.dates
        if any(later <= earlier for earlier, later in zip(dates, dates[1:])):
            raise ValidationError("Route plan dates must be strictly increasing")

        seen = set()
        duplicates = []
        for assignment in assignments:
            if assignment.job.id in seen:
                duplicates.append(str(assignment.job.id))
            seen.add(assignment.job.id)
        if duplicates:
            raise ValidationError(
                f"Route plan lists jobs more than once: {', '.join(duplicates)}"
            )
