"""
Unit tests for the route generator.
"""

import random
from datetime import date, datetime, timedelta

import pytest

from src.application.services.route_generator import (
    SUNDAY,
    RouteGenerator,
    generate_route,
    parse_start_date,
    working_days,
)
from src.domain.exceptions.validation_error import (
    InvalidFormatError,
    InvalidRouteParameterError,
    ValidationError,
)


@pytest.fixture
def seven_jobs(job_factory):
    return [job_factory(zip_code=f"3030{i}") for i in range(7)]


class TestGenerateRoute:
    """Test generate_route."""

    def test_seven_jobs_three_per_day_from_monday(self, seven_jobs, monday):
        plan = generate_route(seven_jobs, monday, max_per_day=3)

        assert plan.dates == [
            date(2024, 6, 3),
            date(2024, 6, 4),
            date(2024, 6, 5),
        ]
        assert [len(day) for day in plan] == [3, 3, 1]

    def test_saturday_start_skips_sunday(self, job_factory, saturday):
        jobs = [job_factory(zip_code=f"2920{i}") for i in range(5)]

        plan = generate_route(jobs, saturday, max_per_day=2)

        assert plan.dates == [
            date(2024, 6, 1),
            date(2024, 6, 3),
            date(2024, 6, 4),
        ]
        assert [len(day) for day in plan] == [2, 2, 1]

    def test_start_on_skip_day_moves_to_next_day(self, job_factory):
        sunday = date(2024, 6, 2)

        plan = generate_route([job_factory()], sunday, max_per_day=1)

        assert plan.dates == [date(2024, 6, 3)]

    def test_empty_input_gives_empty_plan(self, monday):
        plan = generate_route([], monday, max_per_day=3)

        assert plan.is_empty is True
        assert len(plan) == 0

    def test_jobs_ordered_by_zip_code(self, job_factory, monday):
        jobs = [job_factory(zip_code=z) for z in ("30318", "30303", "30309", "30301")]

        plan = generate_route(jobs, monday, max_per_day=2)

        zips = [job.zip_code for day in plan for job in day.jobs]
        assert zips == ["30301", "30303", "30309", "30318"]

    def test_every_job_appears_exactly_once(self, job_factory, monday):
        jobs = [job_factory(zip_code=f"{30000 + i % 7}") for i in range(23)]

        plan = generate_route(jobs, monday, max_per_day=4)

        planned = [job.id for day in plan for job in day.jobs]
        assert sorted(map(str, planned)) == sorted(str(job.id) for job in jobs)
        assert plan.total_jobs == 23

    def test_days_respect_calendar_rules(self, job_factory):
        jobs = [job_factory(zip_code=f"{40000 + i}") for i in range(40)]

        plan = generate_route(jobs, date(2024, 6, 5), max_per_day=3)

        dates = plan.dates
        assert all(later > earlier for earlier, later in zip(dates, dates[1:]))
        assert all(d.weekday() != SUNDAY for d in dates)
        assert all(1 <= len(day) <= 3 for day in plan)
        assert all(len(day) == 3 for day in list(plan)[:-1])

    def test_custom_skip_weekday(self, job_factory, monday):
        jobs = [job_factory(zip_code=f"3030{i}") for i in range(3)]

        # Skip Tuesday
        plan = generate_route(jobs, monday, max_per_day=1, skip_weekday=1)

        assert plan.dates == [date(2024, 6, 3), date(2024, 6, 5), date(2024, 6, 6)]

    def test_result_does_not_depend_on_input_order(self, job_factory, monday):
        jobs = [job_factory(zip_code=z) for z in ("30301", "30301", "30302", "30301")]
        shuffled = list(jobs)
        random.Random(7).shuffle(shuffled)

        first = generate_route(jobs, monday, max_per_day=2)
        second = generate_route(shuffled, monday, max_per_day=2)

        assert [[j.id for j in day.jobs] for day in first] == [
            [j.id for j in day.jobs] for day in second
        ]

    def test_accepts_iso_string_start(self, seven_jobs):
        plan = generate_route(seven_jobs, "2024-06-03", max_per_day=7)

        assert plan.dates == [date(2024, 6, 3)]

    @pytest.mark.parametrize("max_per_day", [0, -1])
    def test_max_per_day_below_one_is_rejected(self, seven_jobs, monday, max_per_day):
        with pytest.raises(InvalidRouteParameterError) as exc_info:
            generate_route(seven_jobs, monday, max_per_day=max_per_day)

        assert exc_info.value.parameter == "max_per_day"

    def test_max_per_day_zero_rejected_even_without_jobs(self, monday):
        with pytest.raises(InvalidRouteParameterError):
            generate_route([], monday, max_per_day=0)

    def test_max_per_day_must_be_integer(self, seven_jobs, monday):
        with pytest.raises(InvalidRouteParameterError):
            generate_route(seven_jobs, monday, max_per_day=True)

    def test_max_per_day_limit(self, seven_jobs, monday):
        with pytest.raises(InvalidRouteParameterError, match="at most 5"):
            generate_route(seven_jobs, monday, max_per_day=6, max_per_day_limit=5)

    def test_invalid_skip_weekday(self, seven_jobs, monday):
        with pytest.raises(InvalidRouteParameterError):
            generate_route(seven_jobs, monday, max_per_day=2, skip_weekday=7)

    def test_duplicate_jobs_rejected(self, job_factory, monday):
        job = job_factory()

        with pytest.raises(ValidationError, match="Duplicate"):
            generate_route([job, job], monday, max_per_day=2)

    def test_does_not_mutate_jobs(self, seven_jobs, monday):
        generate_route(seven_jobs, monday, max_per_day=3)

        assert all(job.is_unassigned for job in seven_jobs)


class TestParseStartDate:
    """Test start date coercion."""

    def test_date_passthrough(self, monday):
        assert parse_start_date(monday) == monday

    def test_datetime_truncated(self):
        assert parse_start_date(datetime(2024, 6, 3, 15, 30)) == date(2024, 6, 3)

    def test_iso_string(self):
        assert parse_start_date(" 2024-06-03 ") == date(2024, 6, 3)

    @pytest.mark.parametrize("value", ["06/03/2024", "2024-13-01", "", None, 20240603])
    def test_malformed(self, value):
        with pytest.raises(InvalidFormatError):
            parse_start_date(value)


class TestWorkingDays:
    def test_skips_weekday(self, saturday):
        days = working_days(saturday, SUNDAY)

        assert [next(days) for _ in range(3)] == [
            saturday,
            saturday + timedelta(days=2),
            saturday + timedelta(days=3),
        ]


class TestRouteGenerator:
    """Test the configured generator."""

    def test_uses_configured_skip_weekday(self, job_factory):
        # Skip Saturday
        generator = RouteGenerator(skip_weekday=5)
        jobs = [job_factory(zip_code=f"3030{i}") for i in range(2)]

        plan = generator.generate(jobs, date(2024, 6, 1), max_per_day=1)

        assert plan.dates == [date(2024, 6, 2), date(2024, 6, 3)]

    def test_override_skip_weekday(self, job_factory, saturday):
        generator = RouteGenerator(skip_weekday=5)
        jobs = [job_factory(zip_code=f"3030{i}") for i in range(2)]

        plan = generator.generate(jobs, saturday, max_per_day=1, skip_weekday=SUNDAY)

        assert plan.dates == [date(2024, 6, 1), date(2024, 6, 3)]

    def test_applies_configured_limit(self, seven_jobs, monday):
        generator = RouteGenerator(max_per_day_limit=4)

        with pytest.raises(InvalidRouteParameterError):
            generator.generate(seven_jobs, monday, max_per_day=5)

    def test_rejects_invalid_configuration(self):
        with pytest.raises(InvalidRouteParameterError):
            RouteGenerator(skip_weekday=-1)
