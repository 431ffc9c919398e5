"""Notification dispatcher.

Translates committed state changes into notification events. Decisions
are taken from the resulting state, never from the triggering request:
a vote that toggles off, or an acceptance that changes nothing, yields no
event. The dispatcher only builds events; NotificationService delivers them.
"""

from typing import Optional
from uuid import uuid4

from quorum.domain.model import Answer, NotificationEvent, Question, User, Votable
from quorum.domain.value import NotificationId, NotificationKind, UserId

from .acceptance_arbiter import AcceptanceOutcome
from .base import Service
from .vote_ledger import VoteOutcome


class NotificationDispatcher(Service):
    """Builds zero or one notification per state transition."""

    def for_vote(
        self, votable: Votable, voter: User, outcome: VoteOutcome
    ) -> Optional[NotificationEvent]:
        """Notify a votable's author about a vote.

        Args:
            votable: The votable as it was voted on
            voter: The voting user
            outcome: Result of the vote

        Returns:
            Vote notification, or None when the vote was toggled off or
            the voter is the author
        """
        if outcome.resulting_vote is None or votable.author_id == voter.id:
            return None

        content_type = votable.votable_type.value
        verb = outcome.resulting_vote.past_tense
        message = f"{voter.username} {verb} your {content_type}"
        if isinstance(votable, Question):
            question_id, answer_id = votable.id, None
            message = f'{message} "{votable.title}"'
        elif isinstance(votable, Answer):
            question_id, answer_id = votable.question_id, votable.id
        else:
            raise TypeError(f"Unsupported votable: {type(votable).__name__}")

        return NotificationEvent(
            id=NotificationId(uuid4()),
            recipient_id=votable.author_id,
            sender_id=voter.id,
            kind=NotificationKind.VOTE,
            title=f"Your {content_type} was {verb}",
            message=message,
            question_id=question_id,
            answer_id=answer_id,
        )

    def for_acceptance(
        self, question: Question, answer: Answer, outcome: AcceptanceOutcome
    ) -> Optional[NotificationEvent]:
        """Notify an answer's author that their answer was accepted.

        Args:
            question: The question whose answer was accepted
            answer: The accepted answer
            outcome: Result of the acceptance

        Returns:
            Accept notification, or None if nothing changed
        """
        if not outcome.changed:
            return None

        return NotificationEvent(
            id=NotificationId(uuid4()),
            recipient_id=answer.author_id,
            sender_id=question.author_id,
            kind=NotificationKind.ACCEPT,
            title="Your answer was accepted",
            message=f'Your answer to "{question.title}" was accepted',
            question_id=question.id,
            answer_id=answer.id,
        )

    def for_answer_created(
        self, question: Question, answer: Answer, answerer: User
    ) -> Optional[NotificationEvent]:
        """Notify a question's author about a new answer.

        Returns:
            Answer notification, or None if authors answer their own question
        """
        if question.author_id == answer.author_id:
            return None

        return NotificationEvent(
            id=NotificationId(uuid4()),
            recipient_id=question.author_id,
            sender_id=answer.author_id,
            kind=NotificationKind.ANSWER,
            title="New answer to your question",
            message=f'{answerer.username} answered your question "{question.title}"',
            question_id=question.id,
            answer_id=answer.id,
        )

    def for_system(
        self, recipient_id: UserId, title: str, message: str
    ) -> NotificationEvent:
        """Build a platform notification with no sender."""
        return NotificationEvent(
            id=NotificationId(uuid4()),
            recipient_id=recipient_id,
            sender_id=None,
            kind=NotificationKind.SYSTEM,
            title=title,
            message=message,
        )
