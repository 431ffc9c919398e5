"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.base import BaseUseCase
from quorum.domain.service import AnswerService, InteractionService
from quorum.domain.value import AnswerId, UserId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: str  # UUID string
    user_id: str  # Must be the answer's author


class DeleteAnswerResponse(BaseModel):
    """Delete answer response."""

    answer_id: str
    question_id: str
    acceptance_released: bool


class DeleteAnswerUseCase(BaseUseCase[DeleteAnswerRequest, DeleteAnswerResponse]):
    """Use case for deleting an answer.

    Deleting the accepted answer leaves its question with no accepted
    answer.
    """

    def __init__(
        self,
        answer_service: AnswerService,
        interaction_service: InteractionService,
    ) -> None:
        """Initialize delete answer use case.

        Args:
            answer_service: Answer domain service
            interaction_service: Interaction domain service
        """
        self.answer_service = answer_service
        self.interaction_service = interaction_service

    async def execute(self, request: DeleteAnswerRequest) -> DeleteAnswerResponse:
        """Execute the use case.

        Args:
            request: Delete answer request

        Returns:
            The deleted answer's IDs and whether an acceptance was released

        Raises:
            NotFoundError: If the answer doesn't exist
            NotAuthorizedError: If the user didn't write the answer
            TransientFailureError: If releasing the acceptance kept conflicting
            ValueError: If an ID is not a valid UUID
        """
        answer = await self.answer_service.delete_answer(
            UserId(UUID(request.user_id)), AnswerId(UUID(request.answer_id))
        )
        released = await self.interaction_service.handle_answer_deleted(
            answer.question_id, answer.id
        )

        return DeleteAnswerResponse(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            acceptance_released=released,
        )
