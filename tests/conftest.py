"""Test configuration and fixtures."""

from uuid import uuid4

import logfire

from quorum.domain.model import Answer, Question, User
from quorum.domain.value import (
    AnswerId,
    QuestionId,
    QuestionStatus,
    UserId,
    Username,
)

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(username: str = "test_user", reputation: int = 100) -> User:
    """Helper function to build a user with enough reputation to vote."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        reputation=reputation,
    )


def make_question(
    author_id: UserId,
    title: str = "How do I reverse a linked list?",
    status: QuestionStatus = QuestionStatus.OPEN,
) -> Question:
    """Helper function to build an open question."""
    return Question(
        id=QuestionId(uuid4()),
        author_id=author_id,
        title=title,
        content="I have a singly linked list and want to reverse it in place.",
        status=status,
    )


def make_answer(question_id: QuestionId, author_id: UserId) -> Answer:
    """Helper function to build an answer to ``question_id``."""
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        author_id=author_id,
        content="Walk the list once, flipping each next pointer as you go.",
    )
