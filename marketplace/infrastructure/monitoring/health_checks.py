"""
Health check implementations for the application.
"""

import asyncio
import time
from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.config.database import check_database_connection
from marketplace.config.logging import get_logger
from marketplace.config.settings import settings

logger = get_logger(__name__)


class HealthChecker:
    """Health checker for application components."""

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session
        self.checks = {
            "database": self._check_database,
        }

    async def check_all_components(self) -> Dict[str, Any]:
        """Run all health checks."""
        results = {}

        for check_name, check_func in self.checks.items():
            try:
                results[check_name] = await asyncio.wait_for(
                    check_func(), timeout=settings.HEALTH_CHECK_TIMEOUT
                )
            except Exception as e:
                logger.error("Health check failed", check_name=check_name, error=str(e))
                results[check_name] = {"status": "error", "error": str(e)}

        return results

    async def check_readiness(self) -> bool:
        """Check whether every component reports healthy."""
        results = await self.check_all_components()
        return all(result["status"] == "healthy" for result in results.values())

    async def _check_database(self) -> Dict[str, Any]:
        started = time.perf_counter()
        healthy = await check_database_connection(self.db_session)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        if healthy:
            return {"status": "healthy", "response_time_ms": elapsed_ms}
        return {"status": "unhealthy", "error": "Database did not answer SELECT 1"}
