"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quorum.domain.model.answer import Answer
from quorum.domain.value import AnswerId, QuestionId, UserId


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Updates use optimistic concurrency, like QuestionRepository.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question_and_author(
        self, question_id: QuestionId, author_id: UserId
    ) -> Optional[Answer]:
        """Find the answer a user wrote for a question.

        Args:
            question_id: The question's ID
            author_id: The answer author's ID

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, answer: Answer) -> Answer:
        """Insert a new answer.

        Args:
            answer: The answer to insert

        Returns:
            The stored answer

        Raises:
            BusinessRuleViolationError: If the author already has an answer
                on the same question
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Compare-and-set update of an existing answer.

        Args:
            answer: New state, carrying the version it was loaded at

        Returns:
            The stored answer with its version incremented

        Raises:
            VersionConflictError: If the stored version differs
            NotFoundError: If the answer doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer.

        Args:
            answer_id: The answer to delete

        Returns:
            True if the answer existed and was deleted
        """
        pass
