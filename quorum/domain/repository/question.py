"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quorum.domain.model.question import Question
from quorum.domain.value import QuestionId


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Updates use optimistic concurrency: ``save`` only succeeds when the
    stored revision still equals ``question.version``.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, question: Question) -> Question:
        """Insert a new question.

        Args:
            question: The question to insert

        Returns:
            The stored question
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Compare-and-set update of an existing question.

        Args:
            question: New state, carrying the version it was loaded at

        Returns:
            The stored question with its version incremented

        Raises:
            VersionConflictError: If the stored version differs
            NotFoundError: If the question doesn't exist
        """
        pass
