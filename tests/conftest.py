"""
Pytest configuration and fixtures.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import date
from typing import AsyncGenerator
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from src.application.interfaces.repositories import (
    JobRepositoryInterface,
    TechnicianRepositoryInterface,
)
from src.config.settings import Settings
from src.domain.entities.job import Job
from src.domain.entities.technician import Technician
from src.domain.value_objects.address import Address
from src.domain.value_objects.technician_role import TechnicianRole
from src.infrastructure.database.models import Base
from src.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def make_job(zip_code: str = "30301", city: str = "Atlanta", state: str = "GA", **kwargs) -> Job:
    """Build an unassigned job at a generated street address."""
    address = Address(
        street=kwargs.pop("street", "100 Peachtree St"),
        city=city,
        state=state,
        zip_code=zip_code,
    )
    return Job(address=address, **kwargs)


def make_technician(
    name: str = "Dana Lead",
    role: TechnicianRole = TechnicianRole.LEAD_TECH,
    **kwargs,
) -> Technician:
    return Technician(id=kwargs.pop("id", uuid4()), name=name, role=role, **kwargs)


@pytest.fixture
def test_settings():
    """Test settings configuration."""
    return Settings(
        ENVIRONMENT="test",
        DATABASE_URL=TEST_DATABASE_URL,
        DEBUG=True,
        LOG_LEVEL="DEBUG",
    )


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def mock_job_repository():
    """Mock job repository."""
    mock_repo = AsyncMock(spec=JobRepositoryInterface)

    mock_repo.get_by_id = AsyncMock(return_value=None)
    mock_repo.find_unassigned = AsyncMock(return_value=[])
    mock_repo.find_by_ids = AsyncMock(return_value=[])
    mock_repo.find_scheduled_for_technician = AsyncMock(return_value=[])
    mock_repo.find_booked_for_lead = AsyncMock(return_value=[])
    mock_repo.assign_unscheduled = AsyncMock(return_value=0)
    mock_repo.update_status = AsyncMock()
    mock_repo.update_ticket_fields = AsyncMock()

    return mock_repo


@pytest.fixture
def mock_technician_repository():
    """Mock technician repository."""
    mock_repo = AsyncMock(spec=TechnicianRepositoryInterface)

    mock_repo.get_by_id = AsyncMock(return_value=None)
    mock_repo.list_active = AsyncMock(return_value=[])

    return mock_repo


@pytest.fixture
def mock_transaction_service():
    """Transaction service that runs the operation without a session."""
    mock_service = AsyncMock(spec=TransactionService)

    async def run(operation):
        return await operation()

    mock_service.execute_in_transaction = AsyncMock(side_effect=run)

    return mock_service


@pytest.fixture
def lead_technician():
    return make_technician(name="Dana Lead")


@pytest.fixture
def assistant_technician():
    return make_technician(name="Sam Helper", role=TechnicianRole.ASSISTANT_TECH)


@pytest.fixture
def job_factory():
    """Factory for unassigned jobs."""
    return make_job


@pytest.fixture
def technician_factory():
    """Factory for technicians."""
    return make_technician


@pytest.fixture
def monday():
    """2024-06-03, a Monday."""
    return date(2024, 6, 3)


@pytest.fixture
def saturday():
    """2024-06-01, a Saturday."""
    return date(2024, 6, 1)
