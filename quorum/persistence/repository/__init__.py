"""PostgreSQL repository implementations."""

from quorum.persistence.repository.answer import PostgresAnswerRepository
from quorum.persistence.repository.notification import (
    PostgresNotificationRepository,
)
from quorum.persistence.repository.question import PostgresQuestionRepository
from quorum.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresNotificationRepository",
]
