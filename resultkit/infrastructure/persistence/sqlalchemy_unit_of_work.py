"""SQLAlchemy unit of work.

Wraps one AsyncSession per scope. On exit the session commits, unless the
scope raised or something marked it rollback-only, in which case every
change made through the session is rolled back. The session is always
closed.

Following hexagonal architecture:
- This is an infrastructure concern
- Repositories receive uow.session; the rollback observer only ever sees
  the UnitOfWorkProtocol surface

Usage:
    engine = create_async_engine(database_url, pool_pre_ping=True)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    async with SqlAlchemyUnitOfWork(session_factory) as uow:
        uow.session.add(user)
        return await register_user(command)  # Failure → rollback
"""

from types import TracebackType
from typing import Self

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from resultkit.core.errors import UnitOfWorkError
from resultkit.infrastructure.persistence.unit_of_work import BaseUnitOfWork


class SqlAlchemyUnitOfWork(BaseUnitOfWork):
    """Unit of work backed by an AsyncSession.

    Args:
        session_factory: Factory producing a fresh AsyncSession per scope.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__()
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    @property
    def session(self) -> AsyncSession:
        """Session of the active scope.

        Raises:
            UnitOfWorkError: Outside of `async with`.
        """
        if self._session is None:
            raise UnitOfWorkError("SqlAlchemyUnitOfWork has no active session")
        return self._session

    async def __aenter__(self) -> Self:
        self._bind()
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        session = self.session
        try:
            if exc_type is not None or self.is_rollback_only:
                await session.rollback()
            else:
                await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
            self._session = None
            self._unbind()
