"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from quorum.domain.model import Answer, NotificationEvent, Question, User, Votable
from quorum.domain.value import (
    AnswerId,
    NotificationId,
    NotificationKind,
    QuestionId,
    QuestionStatus,
    UserId,
    Username,
    VoteSet,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value is not None else None


def _user_ids(values: Optional[Iterable[Any]]) -> frozenset[UserId]:
    return frozenset(UserId(_uuid(v)) for v in values or [])


def _vote_set(row: Dict[str, Any]) -> VoteSet:
    return VoteSet(
        upvoters=_user_ids(row.get("upvoters")),
        downvoters=_user_ids(row.get("downvoters")),
    )


def _vote_columns(votable: Votable) -> Dict[str, Any]:
    # Sorted so that rewritten arrays are stable between saves
    return {
        "upvoters": sorted(votable.votes.upvoters, key=str),
        "downvoters": sorted(votable.votes.downvoters, key=str),
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        reputation=row["reputation"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "username": user.username.root,
        "reputation": user.reputation,
        "created_at": user.created_at,
    }


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    accepted = _optional_uuid(row.get("accepted_answer_id"))
    return Question(
        id=QuestionId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        content=row["content"],
        status=QuestionStatus(row["status"]),
        votes=_vote_set(row),
        accepted_answer_id=AnswerId(accepted) if accepted else None,
        version=row["version"],
        created_at=row["created_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Args:
        question: Question domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": question.id,
        "author_id": question.author_id,
        "title": question.title,
        "content": question.content,
        "status": question.status.value,
        "accepted_answer_id": question.accepted_answer_id,
        "version": question.version,
        "created_at": question.created_at,
        **_vote_columns(question),
    }


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        votes=_vote_set(row),
        version=row["version"],
        created_at=row["created_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return {
        "id": answer.id,
        "question_id": answer.question_id,
        "author_id": answer.author_id,
        "content": answer.content,
        "version": answer.version,
        "created_at": answer.created_at,
        **_vote_columns(answer),
    }


def row_to_notification(row: Dict[str, Any]) -> NotificationEvent:
    """Convert database row to NotificationEvent domain model."""
    sender = _optional_uuid(row.get("sender_id"))
    question = _optional_uuid(row.get("question_id"))
    answer = _optional_uuid(row.get("answer_id"))
    return NotificationEvent(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        sender_id=UserId(sender) if sender else None,
        kind=NotificationKind(row["kind"]),
        title=row["title"],
        message=row["message"],
        question_id=QuestionId(question) if question else None,
        answer_id=AnswerId(answer) if answer else None,
        is_read=row["is_read"],
        read_at=row.get("read_at"),
        created_at=row["created_at"],
    )


def notification_to_dict(event: NotificationEvent) -> Dict[str, Any]:
    """Convert NotificationEvent domain model to database dict."""
    return {
        "id": event.id,
        "recipient_id": event.recipient_id,
        "sender_id": event.sender_id,
        "kind": event.kind.value,
        "title": event.title,
        "message": event.message,
        "question_id": event.question_id,
        "answer_id": event.answer_id,
        "is_read": event.is_read,
        "read_at": event.read_at,
        "created_at": event.created_at,
    }
