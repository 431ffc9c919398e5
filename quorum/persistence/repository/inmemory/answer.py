"""In-memory answer repository for testing."""

from typing import Optional

from quorum.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    VersionConflictError,
)
from quorum.domain.model.answer import Answer
from quorum.domain.repository.answer import AnswerRepository
from quorum.domain.value import AnswerId, QuestionId, UserId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_question_and_author(
        self, question_id: QuestionId, author_id: UserId
    ) -> Optional[Answer]:
        """Find the answer a user wrote for a question."""
        for answer in self._answers.values():
            if answer.question_id == question_id and answer.author_id == author_id:
                return answer
        return None

    async def add(self, answer: Answer) -> Answer:
        """Insert a new answer, one per author and question."""
        for stored in self._answers.values():
            if (
                stored.question_id == answer.question_id
                and stored.author_id == answer.author_id
            ):
                raise BusinessRuleViolationError(
                    "You have already answered this question"
                )
        self._answers[answer.id] = answer
        return answer

    async def save(self, answer: Answer) -> Answer:
        """Compare-and-set update."""
        stored = self._answers.get(answer.id)
        if stored is None:
            raise NotFoundError("Answer", str(answer.id))
        if stored.version != answer.version:
            raise VersionConflictError("Answer", str(answer.id), answer.version)

        saved = answer.model_copy(update={"version": answer.version + 1})
        self._answers[answer.id] = saved
        return saved

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer."""
        return self._answers.pop(answer_id, None) is not None
