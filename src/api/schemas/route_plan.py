"""
Route planner API schemas.
"""

from datetime import date
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.domain.entities.route_plan import RouteDay, RoutePlan

from .job import JobResponse


class RegionGroup(BaseModel):
    """Jobs of one state or city."""

    name: str
    count: int
    jobs: List[JobResponse]


class RegionListResponse(BaseModel):
    """Regions sorted by job count, largest first."""

    total_unassigned: int
    regions: List[RegionGroup]


class RoutePreviewRequest(BaseModel):
    """Route preview request."""

    state: str = Field(..., min_length=1, max_length=10)
    cities: List[str] = Field(
        default_factory=list, description="Empty list means the whole state"
    )
    start_date: date
    max_per_day: Optional[int] = Field(
        None, description="Stops per working day, defaults to the configured value"
    )
    skip_weekday: Optional[int] = Field(
        None, ge=0, le=6, description="0=Monday ... 6=Sunday"
    )

    @field_validator("state")
    @classmethod
    def validate_state(cls, v):
        return v.strip().upper()


class RouteStopSchema(BaseModel):
    """Planned stop within a route day."""

    route_order: int
    job: JobResponse


class RouteDaySchema(BaseModel):
    """One working day of a plan."""

    date: date
    weekday: str
    city_summary: str
    stops: List[RouteStopSchema]

    @classmethod
    def from_entity(cls, day: RouteDay) -> "RouteDaySchema":
        return cls(
            date=day.date,
            weekday=day.date.strftime("%A"),
            city_summary=day.city_summary(),
            stops=[
                RouteStopSchema(route_order=order, job=JobResponse.from_entity(job))
                for order, job in day.stops()
            ],
        )


class RoutePlanResponse(BaseModel):
    """Generated route plan preview."""

    total_jobs: int
    days: List[RouteDaySchema]

    @classmethod
    def from_entity(cls, plan: RoutePlan) -> "RoutePlanResponse":
        return cls(
            total_jobs=plan.total_jobs,
            days=[RouteDaySchema.from_entity(day) for day in plan],
        )


class CommitDaySchema(BaseModel):
    """Day of a plan being committed, job IDs in visit order."""

    date: date
    job_ids: List[UUID] = Field(default_factory=list)


class RouteCommitRequest(BaseModel):
    """Route commit request."""

    days: List[CommitDaySchema] = Field(default_factory=list)
    lead_tech_id: Optional[UUID] = None
    assistant_tech_id: Optional[UUID] = None


class RouteCommitResponse(BaseModel):
    """Route commit result."""

    assigned_count: int
