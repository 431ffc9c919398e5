"""Domain value objects for Quorum."""

from quorum.domain.value.identifiers import (
    AnswerId,
    NotificationId,
    QuestionId,
    UserId,
)
from quorum.domain.value.types import (
    NotificationKind,
    QuestionStatus,
    Username,
    VotableType,
    VoteSet,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "NotificationId",
    # Types
    "VoteType",
    "VotableType",
    "VoteSet",
    "QuestionStatus",
    "NotificationKind",
    "Username",
]
