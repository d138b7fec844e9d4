"""Technician endpoints."""

from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Query

from src.api.dependencies import TechnicianRepositoryDep, TechnicianRouteUseCaseDep
from src.api.schemas.job import JobResponse
from src.api.schemas.technician import (
    TechnicianResponse,
    TechnicianRouteResponse,
    TechnicianStopSchema,
)
from src.domain.value_objects.technician_role import TechnicianRole

router = APIRouter(prefix="/technicians", tags=["technicians"])


@router.get("/", response_model=List[TechnicianResponse])
async def list_technicians(
    technician_repository: TechnicianRepositoryDep,
    role: Optional[TechnicianRole] = None,
):
    """List active technicians, field roles by default."""
    roles = [role] if role else [r for r in TechnicianRole if r.is_field_role()]
    technicians = await technician_repository.list_active(roles)
    return [TechnicianResponse.from_entity(t) for t in technicians]


@router.get("/{technician_id}/route", response_model=TechnicianRouteResponse)
async def get_technician_route(
    technician_id: UUID,
    use_case: TechnicianRouteUseCaseDep,
    day: date = Query(..., alias="date"),
):
    """A technician's stops for one day, as lead or assistant, in visit order."""
    stops = await use_case.execute(technician_id, day)
    return TechnicianRouteResponse(
        technician_id=technician_id,
        date=day,
        stops=[
            TechnicianStopSchema(
                route_order=stop.route_order,
                role=stop.role,
                partner_name=stop.partner_name,
                job=JobResponse.from_entity(stop.job),
            )
            for stop in stops
        ],
    )
