"""
Route generator.

Buckets a set of unassigned jobs into consecutive working days. Jobs are
ordered by ZIP code as a cheap stand-in for geographic clustering: adjacent
ZIP codes tend to be near each other, but nothing here measures distance.
"""

from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Sequence, Union

from src.domain.entities.job import Job
from src.domain.entities.route_plan import RouteDay, RoutePlan
from src.domain.exceptions.validation_error import (
    InvalidFormatError,
    InvalidRouteParameterError,
    ValidationError,
)

SUNDAY = 6


def _route_sort_key(job: Job) -> tuple:
    # ZIP first, job id breaks ties so input order never changes the plan
    return (job.address.zip_code, str(job.id))


def parse_start_date(value: Union[date, str]) -> date:
    """Coerce a date, datetime or ISO ``YYYY-MM-DD`` string to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            raise InvalidFormatError("start_date", "YYYY-MM-DD")
    raise InvalidFormatError("start_date", "YYYY-MM-DD")


def _validate_max_per_day(max_per_day: int, limit: Optional[int]) -> None:
    if isinstance(max_per_day, bool) or not isinstance(max_per_day, int):
        raise InvalidRouteParameterError("max_per_day", max_per_day, "must be an integer")
    # Zero would never consume a job and the day walk would not terminate
    if max_per_day < 1:
        raise InvalidRouteParameterError("max_per_day", max_per_day, "must be at least 1")
    if limit is not None and max_per_day > limit:
        raise InvalidRouteParameterError(
            "max_per_day", max_per_day, f"must be at most {limit}"
        )


def _validate_skip_weekday(skip_weekday: int) -> None:
    if (
        isinstance(skip_weekday, bool)
        or not isinstance(skip_weekday, int)
        or not 0 <= skip_weekday <= 6
    ):
        raise InvalidRouteParameterError(
            "skip_weekday", skip_weekday, "must be 0 (Monday) through 6 (Sunday)"
        )


def _ensure_unique(jobs: Sequence[Job]) -> None:
    seen = set()
    duplicates = []
    for job in jobs:
        if job.id in seen:
            duplicates.append(str(job.id))
        seen.add(job.id)
    if duplicates:
        raise ValidationError(f"Duplicate jobs in route input: {', '.join(duplicates)}")


def working_days(start_date: date, skip_weekday: int) -> Iterable[date]:
    """Yield calendar days from ``start_date`` onward, skipping one weekday."""
    current = start_date
    while True:
        if current.weekday() != skip_weekday:
            yield current
        current += timedelta(days=1)


def generate_route(
    jobs: Iterable[Job],
    start_date: Union[date, str],
    max_per_day: int,
    skip_weekday: int = SUNDAY,
    max_per_day_limit: Optional[int] = None,
) -> RoutePlan:
    """
    Split jobs into a multi-day route plan.

    Args:
        jobs: Unassigned jobs to schedule
        start_date: First candidate day of the route
        max_per_day: Stops per working day, at least 1
        skip_weekday: Non-working weekday, ``date.weekday()`` numbering
        max_per_day_limit: Optional upper bound for ``max_per_day``

    Returns:
        RoutePlan whose days are strictly increasing, never fall on
        ``skip_weekday`` and hold at most ``max_per_day`` jobs each.
    """
    start = parse_start_date(start_date)
    _validate_max_per_day(max_per_day, max_per_day_limit)
    _validate_skip_weekday(skip_weekday)

    ordered: List[Job] = sorted(jobs, key=_route_sort_key)
    _ensure_unique(ordered)

    days = []
    calendar = working_days(start, skip_weekday)
    for offset in range(0, len(ordered), max_per_day):
        days.append(
            RouteDay(date=next(calendar), jobs=ordered[offset : offset + max_per_day])
        )

    return RoutePlan(days=days)


class RouteGenerator:
    """Route generator bound to the configured working calendar."""

    def __init__(self, skip_weekday: int = SUNDAY, max_per_day_limit: Optional[int] = None):
        _validate_skip_weekday(skip_weekday)
        self.skip_weekday = skip_weekday
        self.max_per_day_limit = max_per_day_limit

    def generate(
        self,
        jobs: Iterable[Job],
        start_date: Union[date, str],
        max_per_day: int,
        skip_weekday: Optional[int] = None,
    ) -> RoutePlan:
        """Generate a plan, falling back to the configured skip weekday."""
        return generate_route(
            jobs,
            start_date,
            max_per_day,
            self.skip_weekday if skip_weekday is None else skip_weekday,
            max_per_day_limit=self.max_per_day_limit,
        )
