"""Submit answer use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from quorum.application.usecase.base import BaseUseCase
from quorum.domain.service import AnswerService
from quorum.domain.value import QuestionId, UserId


class SubmitAnswerRequest(BaseModel):
    """Submit answer request."""

    question_id: str  # UUID string
    author_id: str
    content: str = Field(min_length=20)


class SubmitAnswerResponse(BaseModel):
    """Submit answer response."""

    answer_id: str
    question_id: str
    content: str
    vote_count: int
    created_at: datetime


class SubmitAnswerUseCase(BaseUseCase[SubmitAnswerRequest, SubmitAnswerResponse]):
    """Use case for answering a question."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize submit answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: SubmitAnswerRequest) -> SubmitAnswerResponse:
        """Execute submit answer flow.

        Args:
            request: Submit answer request

        Returns:
            Created answer details

        Raises:
            DomainError: See AnswerService.submit_answer
        """
        answer = await self.answer_service.submit_answer(
            author_id=UserId(UUID(request.author_id)),
            question_id=QuestionId(UUID(request.question_id)),
            content=request.content,
        )

        return SubmitAnswerResponse(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            content=answer.content,
            vote_count=answer.vote_count,
            created_at=answer.created_at,
        )
