"""
Transaction service for managing database transactions centrally.
"""

from typing import Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.config.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TransactionService:
    """Commits or rolls back the unit of work shared by one use case."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.logger = logger

    async def execute_in_transaction(self, operation: Callable[[], Awaitable[T]]) -> T:
        """
        Run ``operation`` and commit, or roll back everything it wrote.

        Args:
            operation: Async callable performing the repository work

        Returns:
            Whatever ``operation`` returned

        Raises:
            Exception: Re-raises the failure after rolling back
        """
        try:
            result = await operation()
            await self.session.commit()
            self.logger.debug("Transaction committed")
            return result

        except Exception as e:
            await self.session.rollback()
            self.logger.warning(
                "Transaction rolled back", error=str(e), error_type=type(e).__name__
            )
            raise

    async def commit(self) -> None:
        """Explicitly commit the current transaction."""
        await self.session.commit()
        self.logger.debug("Transaction committed")

    async def rollback(self) -> None:
        """Explicitly rollback the current transaction."""
        await self.session.rollback()
        self.logger.debug("Transaction rolled back")
