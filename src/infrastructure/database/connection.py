"""
Database connection health utilities.
"""

import time
from typing import Any, Dict

from sqlalchemy import text

from src.config.database import get_engine
from src.config.logging import get_logger

logger = get_logger(__name__)


async def get_database_health() -> Dict[str, Any]:
    """Check database connectivity and round-trip time."""
    try:
        start_time = time.time()

        async with get_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))

        response_time = (time.time() - start_time) * 1000

        return {
            "status": "healthy",
            "response_time_ms": round(response_time, 2),
            "dialect": get_engine().dialect.name,
        }

    except Exception as e:
        logger.error("Database health check failed", error=str(e))
        return {"status": "unhealthy", "error": str(e)}
