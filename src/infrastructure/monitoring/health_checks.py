"""
Health check implementations for the application.
"""

import asyncio
from typing import Any, Dict

from src.config.logging import get_logger
from src.config.settings import settings
from src.infrastructure.database.connection import get_database_health

logger = get_logger(__name__)


class HealthChecker:
    """Health checker for application components."""

    def __init__(self, timeout: float = None):
        self.timeout = timeout or settings.HEALTH_CHECK_TIMEOUT
        self.checks = {
            "database": get_database_health,
        }

    async def check_all_components(self) -> Dict[str, Any]:
        """Run every component check and report overall status."""
        components = {}

        for check_name, check_func in self.checks.items():
            try:
                components[check_name] = await asyncio.wait_for(
                    check_func(), timeout=self.timeout
                )
            except asyncio.TimeoutError:
                logger.error("Health check timed out", check_name=check_name)
                components[check_name] = {"status": "unhealthy", "error": "timeout"}
            except Exception as e:
                logger.error(
                    "Health check failed", check_name=check_name, error=str(e)
                )
                components[check_name] = {"status": "error", "error": str(e)}

        healthy = all(c.get("status") == "healthy" for c in components.values())
        return {
            "status": "healthy" if healthy else "unhealthy",
            "components": components,
        }

    async def check_readiness(self) -> bool:
        """Check if the service can serve planner traffic."""
        result = await self.check_all_components()
        return result["status"] == "healthy"
