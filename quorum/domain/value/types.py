"""Enums and value objects for votes, statuses and notifications."""

import re
from enum import Enum

from pydantic import Field, field_validator, model_validator

from quorum.domain.value.common import RootValueObject, ValueObject
from quorum.domain.value.identifiers import UserId


class VoteType(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"

    @property
    def past_tense(self) -> str:
        """Verb used in notification text ("upvoted" / "downvoted")."""
        return f"{self.value}voted"


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class QuestionStatus(str, Enum):
    """Lifecycle status of a question.

    Only open questions accept new answers or a change of accepted answer.
    """

    OPEN = "open"
    CLOSED = "closed"
    DUPLICATE = "duplicate"
    ON_HOLD = "on-hold"


class NotificationKind(str, Enum):
    """Kind of notification event."""

    ANSWER = "answer"
    VOTE = "vote"
    ACCEPT = "accept"
    SYSTEM = "system"


class VoteSet(ValueObject):
    """Upvoters and downvoters of a single votable.

    The two sets are disjoint: a user contributes at most one vote.
    """

    upvoters: frozenset[UserId] = Field(default_factory=frozenset)
    downvoters: frozenset[UserId] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def validate_disjoint(self) -> "VoteSet":
        """Reject a user appearing as both upvoter and downvoter."""
        overlap = self.upvoters & self.downvoters
        if overlap:
            raise ValueError(
                f"Users cannot both upvote and downvote: {sorted(map(str, overlap))}"
            )
        return self

    @property
    def vote_count(self) -> int:
        """Net score: upvotes minus downvotes."""
        return len(self.upvoters) - len(self.downvoters)

    def vote_of(self, user_id: UserId) -> VoteType | None:
        """Return the user's current vote, if any."""
        if user_id in self.upvoters:
            return VoteType.UP
        if user_id in self.downvoters:
            return VoteType.DOWN
        return None


class Username(RootValueObject[str]):
    """Public username of a user.

    3-30 characters: letters, numbers and underscores.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[a-zA-Z0-9_]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, numbers and underscores"
            )
        return v
