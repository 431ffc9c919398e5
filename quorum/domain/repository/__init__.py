"""Repository interfaces for Quorum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from quorum.domain.repository.answer import AnswerRepository
from quorum.domain.repository.notification import NotificationRepository
from quorum.domain.repository.question import QuestionRepository
from quorum.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "QuestionRepository",
    "AnswerRepository",
    "NotificationRepository",
]
