"""
Transaction service wrapping a unit of work on one session.
"""

from typing import Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TransactionService:
    """Commit-or-rollback boundary for a session.

    Repositories only flush. Everything flushed inside
    ``execute_in_transaction`` becomes visible to other sessions at once
    on commit, or not at all.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def execute_in_transaction(self, operation: Callable[[], Awaitable[T]]) -> T:
        """
        Run ``operation`` and commit, or roll back and re-raise.

        Args:
            operation: Async callable performing the writes

        Returns:
            Result of the operation
        """
        try:
            result = await operation()
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            logger.warning(
                "Transaction rolled back",
                error_type=type(e).__name__,
                error=str(e),
            )
            raise

        logger.debug("Transaction committed")
        return result

