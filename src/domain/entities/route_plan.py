"""
Route plan entities.

A plan is an in-memory preview; it only becomes durable when committed,
at which point it collapses into per-job assignments.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Iterator, List, Tuple

from src.domain.entities.job import Job


@dataclass(frozen=True)
class JobAssignment:
    """Scheduling fields to write onto a single job."""

    job: Job
    scheduled_date: date
    route_order: int


@dataclass(frozen=True)
class RouteDay:
    """One working day of a plan, jobs in visit order."""

    date: date
    jobs: Tuple[Job, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "jobs", tuple(self.jobs))

    def __len__(self) -> int:
        return len(self.jobs)

    def stops(self) -> Iterator[Tuple[int, Job]]:
        """Yield ``(route_order, job)`` pairs, route order starting at 1."""
        return enumerate(self.jobs, start=1)

    def cities(self) -> List[str]:
        """Distinct cities in visit order."""
        seen = []
        for job in self.jobs:
            if job.address.locality not in seen:
                seen.append(job.address.locality)
        return seen

    def city_summary(self) -> str:
        """Short label such as ``"Atlanta, Decatur +2 more"``."""
        cities = self.cities()
        if len(cities) <= 2:
            return ", ".join(cities)
        return f"{cities[0]}, {cities[1]} +{len(cities) - 2} more"


@dataclass(frozen=True)
class RoutePlan:
    """Ordered sequence of route days."""

    days: Tuple[RouteDay, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "days", tuple(self.days))

    def __iter__(self) -> Iterator[RouteDay]:
        return iter(self.days)

    def __len__(self) -> int:
        return len(self.days)

    @property
    def total_jobs(self) -> int:
        return sum(len(day) for day in self.days)

    @property
    def is_empty(self) -> bool:
        return self.total_jobs == 0

    @property
    def dates(self) -> List[date]:
        return [day.date for day in self.days]

    def assignments(self) -> List[JobAssignment]:
        """Flatten the plan into per-job scheduling assignments."""
        return [
            JobAssignment(job=job, scheduled_date=day.date, route_order=order)
            for day in self.days
            for order, job in day.stops()
        ]
