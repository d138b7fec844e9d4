"""Technician daily route use case."""

from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional
from uuid import UUID

from src.application.interfaces.repositories import (
    JobRepositoryInterface,
    TechnicianRepositoryInterface,
)
from src.config.logging import get_logger
from src.domain.entities.job import Job
from src.domain.exceptions.validation_error import TechnicianNotFoundError

logger = get_logger(__name__)

LEAD = "lead"
ASSISTANT = "assistant"


@dataclass
class RouteStop:
    """One stop on a technician's day."""

    job: Job
    route_order: int
    role: str
    partner_name: Optional[str] = None


class GetTechnicianRouteUseCase:
    """Use case for listing a technician's stops for a day, in visit order."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        technician_repo: TechnicianRepositoryInterface,
    ):
        self.job_repo = job_repo
        self.technician_repo = technician_repo

    async def execute(self, technician_id: UUID, day: date) -> List[RouteStop]:
        technician = await self.technician_repo.get_by_id(technician_id)
        if not technician:
            raise TechnicianNotFoundError(technician_id)

        jobs = await self.job_repo.find_scheduled_for_technician(technician_id, day)
        names: Dict[UUID, Optional[str]] = {}

        stops = []
        for job in jobs:
            if job.lead_tech_id == technician_id:
                role, partner_id = LEAD, job.assistant_tech_id
            else:
                role, partner_id = ASSISTANT, job.lead_tech_id

            stops.append(
                RouteStop(
                    job=job,
                    route_order=job.route_order,
                    role=role,
                    partner_name=await self._name_of(partner_id, names),
                )
            )

        stops.sort(key=lambda stop: (stop.route_order, stop.role))

        logger.debug(
            "Technician route loaded",
            technician_id=str(technician_id),
            date=day.isoformat(),
            stops=len(stops),
        )
        return stops

    async def _name_of(
        self, technician_id: Optional[UUID], cache: Dict[UUID, Optional[str]]
    ) -> Optional[str]:
        if technician_id is None:
            return None
        if technician_id not in cache:
            partner = await self.technician_repo.get_by_id(technician_id)
            cache[technician_id] = partner.name if partner else None
        return cache[technician_id]
