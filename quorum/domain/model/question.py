"""Question aggregate root.

A question owns its acceptance state: ``accepted_answer_id`` is a single
optional reference, so at most one answer can be accepted at any time.
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from quorum.domain.model.votable import Votable
from quorum.domain.value import AnswerId, QuestionId, QuestionStatus, VotableType


class Question(Votable):
    """Question aggregate root."""

    votable_type: ClassVar[VotableType] = VotableType.QUESTION

    id: QuestionId
    title: str = Field(min_length=10, max_length=300)
    content: str = Field(min_length=20)
    status: QuestionStatus = QuestionStatus.OPEN
    accepted_answer_id: Optional[AnswerId] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_open(self) -> bool:
        """Whether the question still accepts answers and acceptance changes."""
        return self.status == QuestionStatus.OPEN
