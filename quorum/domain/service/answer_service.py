"""Answer domain service."""

from uuid import uuid4

import logfire

from quorum.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    QuestionClosedError,
)
from quorum.domain.model import Answer
from quorum.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from quorum.domain.value import AnswerId, QuestionId, UserId

from .base import Service
from .notification_dispatcher import NotificationDispatcher
from .notification_service import NotificationService


class AnswerService(Service):
    """Domain service for answer submission and removal."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        user_repository: UserRepository,
        notification_dispatcher: NotificationDispatcher,
        notification_service: NotificationService,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
            user_repository: User repository
            notification_dispatcher: Builds notification events
            notification_service: Delivers notification events
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.user_repository = user_repository
        self.notification_dispatcher = notification_dispatcher
        self.notification_service = notification_service

    async def submit_answer(
        self, author_id: UserId, question_id: QuestionId, content: str
    ) -> Answer:
        """Submit an answer to an open question.

        Notifies the question's author unless they answered themselves.

        Args:
            author_id: Answering user
            question_id: Question being answered
            content: Answer text

        Returns:
            Created answer

        Raises:
            NotFoundError: If the question or author doesn't exist
            QuestionClosedError: If the question is not open
            BusinessRuleViolationError: If the author already answered
        """
        with logfire.span(
            "answer_service.submit_answer",
            author_id=str(author_id),
            question_id=str(question_id),
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                raise NotFoundError("Question", str(question_id))

            if not question.is_open:
                raise QuestionClosedError(str(question_id), question.status.value)

            author = await self.user_repository.find_by_id(author_id)
            if not author:
                raise NotFoundError("User", str(author_id))

            existing = await self.answer_repository.find_by_question_and_author(
                question_id, author_id
            )
            if existing:
                logfire.warn(
                    "Duplicate answer attempt",
                    author_id=str(author_id),
                    question_id=str(question_id),
                )
                raise BusinessRuleViolationError(
                    "You have already answered this question"
                )

            answer = await self.answer_repository.add(
                Answer(
                    id=AnswerId(uuid4()),
                    question_id=question_id,
                    author_id=author_id,
                    content=content,
                )
            )
            logfire.info(
                "Answer created", answer_id=str(answer.id), question_id=str(question_id)
            )

            event = self.notification_dispatcher.for_answer_created(
                question, answer, author
            )
            await self.notification_service.deliver(event)

            return answer

    async def delete_answer(self, actor_id: UserId, answer_id: AnswerId) -> Answer:
        """Delete an answer on behalf of its author.

        Releasing the question's acceptance, if this was the accepted
        answer, is left to InteractionService.handle_answer_deleted.

        Args:
            actor_id: User performing the deletion
            answer_id: Answer to delete

        Returns:
            The deleted answer

        Raises:
            NotFoundError: If the answer doesn't exist
            NotAuthorizedError: If the actor didn't write the answer
        """
        with logfire.span(
            "answer_service.delete_answer",
            actor_id=str(actor_id),
            answer_id=str(answer_id),
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                raise NotFoundError("Answer", str(answer_id))

            if answer.author_id != actor_id:
                logfire.warn(
                    "Answer deletion by non-author rejected",
                    actor_id=str(actor_id),
                    answer_id=str(answer_id),
                )
                raise NotAuthorizedError(
                    "delete", "answer", str(answer_id), str(actor_id)
                )

            if not await self.answer_repository.delete(answer_id):
                # Removed by a concurrent request after our read
                raise NotFoundError("Answer", str(answer_id))

            logfire.info(
                "Answer deleted",
                answer_id=str(answer_id),
                question_id=str(answer.question_id),
            )
            return answer
