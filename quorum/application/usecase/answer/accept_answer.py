"""Accept answer use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.base import BaseUseCase
from quorum.domain.service import InteractionService
from quorum.domain.value import AnswerId, QuestionId, UserId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    question_id: str  # UUID string
    answer_id: str  # UUID string
    user_id: str  # Must be the question's author


class AcceptAnswerResponse(BaseModel):
    """Accept answer response."""

    question_id: str
    accepted_answer_id: Optional[str]
    changed: bool


class AcceptAnswerUseCase(BaseUseCase[AcceptAnswerRequest, AcceptAnswerResponse]):
    """Use case for accepting an answer to a question."""

    def __init__(self, interaction_service: InteractionService) -> None:
        """Initialize accept answer use case.

        Args:
            interaction_service: Interaction domain service
        """
        self.interaction_service = interaction_service

    async def execute(self, request: AcceptAnswerRequest) -> AcceptAnswerResponse:
        """Execute accept answer flow.

        Args:
            request: Accept answer request

        Returns:
            Whether the accepted answer changed

        Raises:
            DomainError: See InteractionService.accept_answer
        """
        outcome = await self.interaction_service.accept_answer(
            actor_id=UserId(UUID(request.user_id)),
            question_id=QuestionId(UUID(request.question_id)),
            answer_id=AnswerId(UUID(request.answer_id)),
        )

        accepted = outcome.question.accepted_answer_id
        return AcceptAnswerResponse(
            question_id=str(outcome.question.id),
            accepted_answer_id=str(accepted) if accepted else None,
            changed=outcome.changed,
        )
