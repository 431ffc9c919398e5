"""Answer routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from quorum.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerResponse,
    DeleteAnswerUseCase,
    SubmitAnswerRequest,
    SubmitAnswerResponse,
    SubmitAnswerUseCase,
)
from quorum.domain.error import DomainError
from quorum.interface.error import to_http_exception

router = APIRouter(tags=["answers"], route_class=DishkaRoute)


class SubmitAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    author_id: str
    content: str = Field(min_length=20)


class AcceptAnswerAPIRequest(BaseModel):
    """API request for accepting an answer."""

    actor_id: str


@router.post(
    "/questions/{question_id}/answers",
    response_model=SubmitAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_answer(
    question_id: str,
    request: SubmitAnswerAPIRequest,
    submit_answer_use_case: FromDishka[SubmitAnswerUseCase],
) -> SubmitAnswerResponse:
    """Answer an open question.

    Args:
        question_id: Question UUID
        request: Answer author and content
        submit_answer_use_case: Submit answer use case from DI

    Returns:
        Created answer details

    Raises:
        HTTPException: If the question is missing (404), not open (409) or
            already answered by this author (400)
    """
    try:
        use_case_request = SubmitAnswerRequest(
            question_id=question_id,
            author_id=request.author_id,
            content=request.content,
        )
        return await submit_answer_use_case.execute(use_case_request)
    except DomainError as e:
        logfire.info("Answer rejected", question_id=question_id, error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post(
    "/questions/{question_id}/answers/{answer_id}/accept",
    response_model=AcceptAnswerResponse,
)
async def accept_answer(
    question_id: str,
    answer_id: str,
    request: AcceptAnswerAPIRequest,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
) -> AcceptAnswerResponse:
    """Mark an answer as the question's accepted answer.

    Only the question's author may accept. Accepting a different answer
    replaces the previous acceptance; accepting the current one again
    reports ``changed: false``.

    Args:
        question_id: Question UUID
        answer_id: Answer UUID
        request: Acting user
        accept_answer_use_case: Accept answer use case from DI

    Returns:
        Accepted answer and whether it changed
    """
    try:
        use_case_request = AcceptAnswerRequest(
            question_id=question_id,
            answer_id=answer_id,
            user_id=request.actor_id,
        )
        return await accept_answer_use_case.execute(use_case_request)
    except DomainError as e:
        logfire.info(
            "Acceptance rejected",
            question_id=question_id,
            answer_id=answer_id,
            error=str(e),
        )
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/answers/{answer_id}", response_model=DeleteAnswerResponse)
async def delete_answer(
    answer_id: str,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    actor_id: str = Query(...),
) -> DeleteAnswerResponse:
    """Delete an answer on behalf of its author.

    Deleting the accepted answer leaves the question with none accepted.

    Args:
        answer_id: Answer UUID
        delete_answer_use_case: Delete answer use case from DI
        actor_id: Acting user, who must be the answer's author

    Returns:
        Deleted answer and whether an acceptance was released

    Raises:
        HTTPException: If the answer is missing (404) or the actor is not
            its author (403)
    """
    try:
        use_case_request = DeleteAnswerRequest(answer_id=answer_id, user_id=actor_id)
        return await delete_answer_use_case.execute(use_case_request)
    except DomainError as e:
        logfire.info("Answer deletion rejected", answer_id=answer_id, error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
