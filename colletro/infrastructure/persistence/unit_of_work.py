"""Unit of work over one AsyncSession."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession


class SqlAlchemyUnitOfWork:
    """Outermost transaction() commits or rolls back; nested calls use savepoints.

    A session may already hold an implicit transaction from earlier reads
    (autobegin); the outermost block commits it as well.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._depth = 0

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        if self._depth > 0:
            self._depth += 1
            try:
                async with self._session.begin_nested():
                    yield
            finally:
                self._depth -= 1
            return

        self._depth += 1
        try:
            yield
            await self._session.commit()
        except BaseException:
            await self._session.rollback()
            raise
        finally:
            self._depth -= 1
