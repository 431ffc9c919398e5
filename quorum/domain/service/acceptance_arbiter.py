"""Acceptance arbiter: at most one accepted answer per question."""

from dataclasses import dataclass

from quorum.domain.error import MismatchedQuestionError
from quorum.domain.model import Answer, Question
from quorum.domain.value import AnswerId

from .base import Service


@dataclass(frozen=True)
class AcceptanceOutcome:
    """Result of an acceptance transition.

    Attributes:
        question: Question carrying its new acceptance state
        changed: Whether the acceptance state changed
    """

    question: Question
    changed: bool


class AcceptanceArbiter(Service):
    """Owns the accepted-answer reference of a question.

    Exclusivity is structural: ``Question.accepted_answer_id`` holds a
    single optional reference, so accepting a new answer replaces the old
    one. Authorization is the caller's job.
    """

    def accept(self, question: Question, answer: Answer) -> AcceptanceOutcome:
        """Mark ``answer`` as the accepted answer of ``question``.

        Args:
            question: Current question state
            answer: Answer to accept

        Returns:
            Outcome; ``changed`` is False if the answer was already accepted

        Raises:
            MismatchedQuestionError: If the answer belongs to another question
        """
        if answer.question_id != question.id:
            raise MismatchedQuestionError(str(answer.id), str(question.id))

        if question.accepted_answer_id == answer.id:
            return AcceptanceOutcome(question=question, changed=False)

        return AcceptanceOutcome(
            question=question.model_copy(update={"accepted_answer_id": answer.id}),
            changed=True,
        )

    def release(self, question: Question, answer_id: AnswerId) -> AcceptanceOutcome:
        """Clear acceptance if it references ``answer_id``.

        Args:
            question: Current question state
            answer_id: Answer that is going away

        Returns:
            Outcome; ``changed`` is False if that answer wasn't accepted
        """
        if question.accepted_answer_id != answer_id:
            return AcceptanceOutcome(question=question, changed=False)

        return AcceptanceOutcome(
            question=question.model_copy(update={"accepted_answer_id": None}),
            changed=True,
        )
