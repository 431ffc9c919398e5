"""Mock persistence providers for testing."""

from dishka import Scope, provide

from quorum.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
)
from quorum.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryNotificationRepository,
    InMemoryQuestionRepository,
    InMemoryUserRepository,
)
from quorum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so that state written in one request is
    visible to the next within the same container. Each test builds its
    own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_question_repository(self) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository()

    @provide(scope=Scope.APP)
    def get_answer_repository(self) -> AnswerRepository:
        """Provide in-memory answer repository."""
        return InMemoryAnswerRepository()

    @provide(scope=Scope.APP)
    def get_notification_repository(self) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository()
