"""Answer entity.

Whether an answer is accepted is owned by its question
(``Question.accepted_answer_id``), never stored on the answer itself.
"""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from quorum.domain.model.votable import Votable
from quorum.domain.value import AnswerId, QuestionId, VotableType


class Answer(Votable):
    """Answer to a question."""

    votable_type: ClassVar[VotableType] = VotableType.ANSWER

    id: AnswerId
    question_id: QuestionId
    content: str = Field(min_length=20)
    created_at: datetime = Field(default_factory=datetime.now)
