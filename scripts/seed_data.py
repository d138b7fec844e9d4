#!/usr/bin/env python3
"""
Seed database with technicians and unassigned jobs for development.
"""

import asyncio
import sys
from pathlib import Path
from uuid import uuid4

# Make the src package importable when run as a script
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import func, select

from src.config.database import close_database_connections, get_async_session_factory
from src.config.logging import configure_logging, get_logger
from src.domain.entities.job import Job
from src.domain.entities.technician import Technician
from src.domain.value_objects.address import Address
from src.domain.value_objects.technician_role import TechnicianRole
from src.infrastructure.database.models.technician import TechnicianModel
from src.infrastructure.database.repositories.job_repository import JobRepository
from src.infrastructure.database.repositories.technician_repository import (
    TechnicianRepository,
)

logger = get_logger(__name__)

TECHNICIANS = [
    ("Marcus Reed", TechnicianRole.LEAD_TECH, "marcus@example.com"),
    ("Dana Whitfield", TechnicianRole.LEAD_TECH, "dana@example.com"),
    ("Luis Ortega", TechnicianRole.ASSISTANT_TECH, "luis@example.com"),
    ("Priya Shah", TechnicianRole.ASSISTANT_TECH, "priya@example.com"),
]

# (store number, street, city, state, zip)
SITES = [
    ("1012", "55 Peachtree St NE", "Atlanta", "GA", "30303"),
    ("1013", "1801 Howell Mill Rd", "Atlanta", "GA", "30318"),
    ("1017", "2685 Metropolitan Pkwy", "Atlanta", "GA", "30315"),
    ("1020", "3535 Peachtree Rd", "Atlanta", "GA", "30326"),
    ("1031", "125 E Trinity Pl", "Decatur", "GA", "30030"),
    ("1044", "1350 Scenic Hwy", "Snellville", "GA", "30078"),
    ("1052", "50 Ackerman Dr", "Marietta", "GA", "30060"),
    ("2003", "1919 Gervais St", "Columbia", "SC", "29201"),
    ("2004", "7201 Two Notch Rd", "Columbia", "SC", "29223"),
    ("2011", "1 Poinsett Hwy", "Greenville", "SC", "29609"),
    ("3001", "4400 Sharon Rd", "Charlotte", "NC", "28211"),
    ("3002", "9559 South Blvd", "Charlotte", "NC", "28273"),
]


async def seed_database() -> None:
    """Insert sample technicians and jobs unless technicians already exist."""
    async with get_async_session_factory()() as session:
        existing = await session.execute(select(func.count(TechnicianModel.id)))
        if existing.scalar() > 0:
            logger.info("Database already has data, skipping seed")
            return

        technician_repo = TechnicianRepository(session)
        for name, role, email in TECHNICIANS:
            await technician_repo.create(
                Technician(id=uuid4(), name=name, role=role, email=email)
            )

        job_repo = JobRepository(session)
        for store_number, street, city, state, zip_code in SITES:
            await job_repo.create(
                Job(
                    address=Address(
                        street=street, city=city, state=state, zip_code=zip_code
                    ),
                    store_number=store_number,
                    job_type="maintenance",
                )
            )

        await session.commit()
        logger.info(
            "Seed data created", technicians=len(TECHNICIANS), jobs=len(SITES)
        )


async def main() -> None:
    configure_logging()
    try:
        await seed_database()
    finally:
        await close_database_connections()


if __name__ == "__main__":
    asyncio.run(main())
