"""Answer use cases."""

from .accept_answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
)
from .delete_answer import (
    DeleteAnswerRequest,
    DeleteAnswerResponse,
    DeleteAnswerUseCase,
)
from .submit_answer import (
    SubmitAnswerRequest,
    SubmitAnswerResponse,
    SubmitAnswerUseCase,
)

__all__ = [
    "AcceptAnswerRequest",
    "AcceptAnswerResponse",
    "AcceptAnswerUseCase",
    "DeleteAnswerRequest",
    "DeleteAnswerResponse",
    "DeleteAnswerUseCase",
    "SubmitAnswerRequest",
    "SubmitAnswerResponse",
    "SubmitAnswerUseCase",
]
