"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from quorum.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteRequest,
    GetVoteResponse,
    GetVoteUseCase,
)
from quorum.domain.error import DomainError
from quorum.domain.value import VotableType, VoteType
from quorum.interface.error import to_http_exception

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    actor_id: str
    vote_type: VoteType


async def _cast_vote(
    votable_type: VotableType,
    votable_id: str,
    request: CastVoteAPIRequest,
    use_case: CastVoteUseCase,
) -> CastVoteResponse:
    try:
        return await use_case.execute(
            CastVoteRequest(
                votable_type=votable_type,
                votable_id=votable_id,
                user_id=request.actor_id,
                vote_type=request.vote_type,
            )
        )
    except DomainError as e:
        logfire.info(
            "Vote rejected",
            votable_type=votable_type.value,
            votable_id=votable_id,
            error=str(e),
        )
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


async def _get_vote(
    votable_type: VotableType,
    votable_id: str,
    actor_id: str,
    use_case: GetVoteUseCase,
) -> GetVoteResponse:
    try:
        return await use_case.execute(
            GetVoteRequest(
                votable_type=votable_type,
                votable_id=votable_id,
                user_id=actor_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post("/questions/{question_id}/vote", response_model=CastVoteResponse)
async def vote_on_question(
    question_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Cast or toggle a vote on a question.

    Repeating the current vote withdraws it; the opposite vote switches it.

    Args:
        question_id: Question UUID
        request: Voter and vote direction
        cast_vote_use_case: Cast vote use case from DI

    Returns:
        New net score and the voter's resulting vote

    Raises:
        HTTPException: On self-votes (400), insufficient reputation (403),
            unknown question or user (404) or persistent contention (503)
    """
    return await _cast_vote(
        VotableType.QUESTION, question_id, request, cast_vote_use_case
    )


@router.get("/questions/{question_id}/vote", response_model=GetVoteResponse)
async def get_question_vote(
    question_id: str,
    actor_id: str,
    get_vote_use_case: FromDishka[GetVoteUseCase],
) -> GetVoteResponse:
    """Get a user's current vote on a question."""
    return await _get_vote(
        VotableType.QUESTION, question_id, actor_id, get_vote_use_case
    )


@router.post("/answers/{answer_id}/vote", response_model=CastVoteResponse)
async def vote_on_answer(
    answer_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Cast or toggle a vote on an answer.

    Args:
        answer_id: Answer UUID
        request: Voter and vote direction
        cast_vote_use_case: Cast vote use case from DI

    Returns:
        New net score and the voter's resulting vote
    """
    return await _cast_vote(VotableType.ANSWER, answer_id, request, cast_vote_use_case)


@router.get("/answers/{answer_id}/vote", response_model=GetVoteResponse)
async def get_answer_vote(
    answer_id: str,
    actor_id: str,
    get_vote_use_case: FromDishka[GetVoteUseCase],
) -> GetVoteResponse:
    """Get a user's current vote on an answer."""
    return await _get_vote(VotableType.ANSWER, answer_id, actor_id, get_vote_use_case)
