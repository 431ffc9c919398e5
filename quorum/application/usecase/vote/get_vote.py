"""Get vote use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.base import BaseUseCase
from quorum.domain.service import InteractionService
from quorum.domain.value import UserId, VotableType, VoteType


class GetVoteRequest(BaseModel):
    """Get vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    user_id: str


class GetVoteResponse(BaseModel):
    """Get vote response."""

    vote_type: Optional[VoteType]


class GetVoteUseCase(BaseUseCase[GetVoteRequest, GetVoteResponse]):
    """Use case for reading a user's vote on a question or answer."""

    def __init__(self, interaction_service: InteractionService) -> None:
        self.interaction_service = interaction_service

    async def execute(self, request: GetVoteRequest) -> GetVoteResponse:
        vote_type = await self.interaction_service.get_vote(
            user_id=UserId(UUID(request.user_id)),
            votable_type=request.votable_type,
            votable_id=UUID(request.votable_id),
        )
        return GetVoteResponse(vote_type=vote_type)
