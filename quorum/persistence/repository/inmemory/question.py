"""In-memory question repository for testing."""

from typing import Optional

from quorum.domain.error import NotFoundError, VersionConflictError
from quorum.domain.model.question import Question
from quorum.domain.repository.question import QuestionRepository
from quorum.domain.value import QuestionId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def add(self, question: Question) -> Question:
        """Insert a new question."""
        self._questions[question.id] = question
        return question

    async def save(self, question: Question) -> Question:
        """Compare-and-set update.

        No await happens between the version check and the write, so this
        is atomic within the event loop.
        """
        stored = self._questions.get(question.id)
        if stored is None:
            raise NotFoundError("Question", str(question.id))
        if stored.version != question.version:
            raise VersionConflictError("Question", str(question.id), question.version)

        saved = question.model_copy(update={"version": question.version + 1})
        self._questions[question.id] = saved
        return saved
