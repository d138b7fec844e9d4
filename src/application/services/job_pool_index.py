"""
Job pool index: the unassigned jobs grouped by region.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from src.application.interfaces.repositories import JobRepositoryInterface
from src.config.logging import get_logger
from src.domain.entities.job import Job

logger = get_logger(__name__)


@dataclass
class RegionSummary:
    """Region counts for the planner filters, largest region first.

    ``groups`` holds the jobs the counts were taken from, so counts and job
    lists always describe the same read of the store.
    """

    total_unassigned: int
    regions: List[Tuple[str, int]] = field(default_factory=list)
    groups: Dict[str, List[Job]] = field(default_factory=dict)

    @classmethod
    def from_groups(cls, groups: Dict[str, List[Job]]) -> "RegionSummary":
        return cls(
            total_unassigned=sum(len(jobs) for jobs in groups.values()),
            regions=summarize(groups),
            groups=groups,
        )


def group_by_state(jobs: Iterable[Job]) -> Dict[str, List[Job]]:
    """Group jobs by state code."""
    groups: Dict[str, List[Job]] = {}
    for job in jobs:
        groups.setdefault(job.address.region, []).append(job)
    return groups


def group_by_city(jobs: Iterable[Job]) -> Dict[str, List[Job]]:
    """Group jobs by city."""
    groups: Dict[str, List[Job]] = {}
    for job in jobs:
        groups.setdefault(job.address.locality, []).append(job)
    return groups


def summarize(groups: Dict[str, List[Job]]) -> List[Tuple[str, int]]:
    return sorted(
        ((name, len(jobs)) for name, jobs in groups.items()),
        key=lambda item: (-item[1], item[0]),
    )


class JobPoolIndex:
    """Read-only projection over the job store's unassigned jobs.

    Every call re-queries the store, so results always reflect the jobs
    unassigned at query time.
    """

    def __init__(self, job_repo: JobRepositoryInterface):
        self.job_repo = job_repo

    async def _unassigned(self) -> List[Job]:
        jobs = await self.job_repo.find_unassigned()
        # The store query filters on scheduled_date; status is checked too
        return [job for job in jobs if job.is_unassigned]

    async def list_unassigned_by_region(self) -> Dict[str, List[Job]]:
        """Map state code to its unassigned jobs. Empty when none exist."""
        groups = group_by_state(await self._unassigned())
        logger.debug("Unassigned jobs grouped by state", regions=len(groups))
        return groups

    async def list_unassigned_by_city(self, state: str) -> Dict[str, List[Job]]:
        """Map city to unassigned jobs within one state."""
        by_state = await self.list_unassigned_by_region()
        return group_by_city(by_state.get(state.upper(), by_state.get(state, [])))

    async def select_jobs(
        self, state: str, cities: Optional[Iterable[str]] = None
    ) -> List[Job]:
        """
        Jobs of a state, optionally narrowed to some of its cities.

        An empty or missing city selection means the whole state.
        """
        by_state = await self.list_unassigned_by_region()
        state_jobs = by_state.get(state.upper(), by_state.get(state, []))
        wanted = set(cities or [])
        if not wanted:
            return state_jobs
        return [job for job in state_jobs if job.address.locality in wanted]

    async def region_summary(self) -> RegionSummary:
        """State counts sorted by size, plus the overall unassigned total."""
        return RegionSummary.from_groups(await self.list_unassigned_by_region())

    async def city_summary(self, state: str) -> RegionSummary:
        """City counts within a state sorted by size."""
        return RegionSummary.from_groups(await self.list_unassigned_by_city(state))
