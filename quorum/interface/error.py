"""Interface layer errors.

Maps domain errors onto HTTP responses.
"""

from fastapi import HTTPException, status

from quorum.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    InsufficientReputationError,
    MismatchedQuestionError,
    NotAuthorizedError,
    NotFoundError,
    QuestionClosedError,
    SelfVoteForbiddenError,
    TransientFailureError,
    VersionConflictError,
)

# Most specific first; the first matching entry wins
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (SelfVoteForbiddenError, status.HTTP_400_BAD_REQUEST),
    (InsufficientReputationError, status.HTTP_403_FORBIDDEN),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (MismatchedQuestionError, status.HTTP_400_BAD_REQUEST),
    (QuestionClosedError, status.HTTP_409_CONFLICT),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (BusinessRuleViolationError, status.HTTP_400_BAD_REQUEST),
    (VersionConflictError, status.HTTP_409_CONFLICT),
    (TransientFailureError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def status_for(error: DomainError) -> int:
    """Return the HTTP status code for a domain error."""
    for error_type, code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


def to_http_exception(error: DomainError) -> HTTPException:
    """Convert a domain error into an HTTPException.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException carrying the mapped status and the error message
    """
    code = status_for(error)
    headers = None
    if code == status.HTTP_503_SERVICE_UNAVAILABLE:
        headers = {"Retry-After": "1"}
    return HTTPException(status_code=code, detail=str(error), headers=headers)
