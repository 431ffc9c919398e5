"""Domain model entities for Quorum."""

from quorum.domain.model.answer import Answer
from quorum.domain.model.notification import NotificationEvent
from quorum.domain.model.question import Question
from quorum.domain.model.user import User
from quorum.domain.model.votable import Votable

__all__ = [
    "User",
    "Votable",
    "Question",
    "Answer",
    "NotificationEvent",
]
