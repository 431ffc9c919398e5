"""Persistence component providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from quorum.config import Settings
from quorum.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
)
from quorum.persistence.database import create_engine, create_session_factory
from quorum.persistence.repository import (
    PostgresAnswerRepository,
    PostgresNotificationRepository,
    PostgresQuestionRepository,
    PostgresUserRepository,
)
from quorum.util.di.base import ProviderBase
from quorum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repository slot: PostgreSQL in production, in-memory in tests."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories sharing one session per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """One pooled engine per process, disposed with the container."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Request-wide unit of work.

        Commits when the request finishes cleanly and rolls back otherwise.
        A vote or acceptance commits together with its notification row;
        a failed notification insert is confined to its own savepoint.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Rolling back request transaction", error=str(e))
                await session.rollback()
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def users(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def questions(self, session: AsyncSession) -> QuestionRepository:
        return PostgresQuestionRepository(session)

    @provide(scope=Scope.REQUEST)
    def answers(self, session: AsyncSession) -> AnswerRepository:
        return PostgresAnswerRepository(session)

    @provide(scope=Scope.REQUEST)
    def notifications(self, session: AsyncSession) -> NotificationRepository:
        return PostgresNotificationRepository(session)
