"""Cast vote use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.base import BaseUseCase
from quorum.domain.service import InteractionService
from quorum.domain.value import UserId, VotableType, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    user_id: str  # Voting user
    vote_type: VoteType


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    votable_type: VotableType
    votable_id: str
    vote_count: int
    resulting_vote: Optional[VoteType]  # None when the vote was withdrawn


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for voting on a question or answer."""

    def __init__(self, interaction_service: InteractionService) -> None:
        """Initialize cast vote use case.

        Args:
            interaction_service: Interaction domain service
        """
        self.interaction_service = interaction_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            New net score and the voter's resulting vote

        Raises:
            DomainError: See InteractionService.cast_vote
        """
        outcome = await self.interaction_service.cast_vote(
            voter_id=UserId(UUID(request.user_id)),
            votable_type=request.votable_type,
            votable_id=UUID(request.votable_id),
            vote_type=request.vote_type,
        )

        return CastVoteResponse(
            votable_type=request.votable_type,
            votable_id=str(outcome.votable.id),
            vote_count=outcome.vote_count,
            resulting_vote=outcome.resulting_vote,
        )
