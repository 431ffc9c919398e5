"""Interaction domain service.

Orchestrates votes and answer acceptance. Each operation is a
load-compute-save unit against a single record: the new state is computed
by a pure transition (VoteLedger, AcceptanceArbiter) and written with a
compare-and-set save. On a version conflict the whole unit is re-run, up to
``max_attempts`` times. Notifications are built from the committed outcome
and delivered afterwards; delivery problems never fail the operation.
"""

from typing import Awaitable, Callable, TypeVar
from uuid import UUID

import logfire

from quorum.domain.error import (
    InsufficientReputationError,
    NotAuthorizedError,
    NotFoundError,
    QuestionClosedError,
    SelfVoteForbiddenError,
    TransientFailureError,
    VersionConflictError,
)
from quorum.domain.model import Answer, Question, User, Votable
from quorum.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from quorum.domain.value import AnswerId, QuestionId, UserId, VotableType, VoteType

from .acceptance_arbiter import AcceptanceArbiter, AcceptanceOutcome
from .base import Service
from .notification_dispatcher import NotificationDispatcher
from .notification_service import NotificationService
from .reputation_policy import ReputationPolicy
from .vote_ledger import VoteLedger, VoteOutcome

T = TypeVar("T")


class InteractionService(Service):
    """Domain service for voting and answer acceptance."""

    def __init__(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        reputation_policy: ReputationPolicy,
        vote_ledger: VoteLedger,
        acceptance_arbiter: AcceptanceArbiter,
        notification_dispatcher: NotificationDispatcher,
        notification_service: NotificationService,
        max_attempts: int = 3,
    ) -> None:
        """Initialize interaction service.

        Args:
            user_repository: User repository (identity and reputation)
            question_repository: Question repository
            answer_repository: Answer repository
            reputation_policy: Reputation gates
            vote_ledger: Vote toggle transitions
            acceptance_arbiter: Accepted-answer transitions
            notification_dispatcher: Builds notification events
            notification_service: Delivers notification events
            max_attempts: Attempts per operation before a version conflict
                is surfaced as TransientFailureError
        """
        self.user_repository = user_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.reputation_policy = reputation_policy
        self.vote_ledger = vote_ledger
        self.acceptance_arbiter = acceptance_arbiter
        self.notification_dispatcher = notification_dispatcher
        self.notification_service = notification_service
        self.max_attempts = max_attempts

    async def cast_vote(
        self,
        voter_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        vote_type: VoteType,
    ) -> VoteOutcome:
        """Cast, switch or withdraw a vote on a question or answer.

        Casting the same vote twice withdraws it; casting the opposite vote
        switches it.

        Args:
            voter_id: Voting user
            votable_type: Question or answer
            votable_id: ID of the question or answer
            vote_type: Up or down

        Returns:
            Vote outcome with the new net score and the voter's resulting vote

        Raises:
            NotFoundError: If the voter or votable doesn't exist
            SelfVoteForbiddenError: If the voter authored the votable
            InsufficientReputationError: If the voter may not vote yet
            TransientFailureError: If concurrent writes kept conflicting
        """
        with logfire.span(
            "cast_vote",
            voter_id=str(voter_id),
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            vote_type=vote_type.value,
        ):
            voter = await self._get_user(voter_id)

            async def attempt() -> VoteOutcome:
                votable = await self._get_votable(votable_type, votable_id)

                if votable.author_id == voter.id:
                    logfire.warn(
                        "Self-vote rejected",
                        voter_id=str(voter_id),
                        votable_id=str(votable_id),
                    )
                    raise SelfVoteForbiddenError(votable_type.value, str(votable_id))

                # Reputation is owned elsewhere; read it fresh on every attempt
                reputation = await self.user_repository.get_reputation(voter.id)
                if reputation is None:
                    raise NotFoundError("User", str(voter_id))
                current = voter.model_copy(update={"reputation": reputation})

                if not self.reputation_policy.can_vote(current):
                    logfire.warn(
                        "Vote rejected for reputation",
                        voter_id=str(voter_id),
                        reputation=reputation,
                    )
                    raise InsufficientReputationError(
                        "vote",
                        self.reputation_policy.settings.vote_threshold,
                        reputation,
                    )

                outcome = self.vote_ledger.apply_vote(votable, voter.id, vote_type)
                saved = await self._save_votable(outcome.votable)
                return VoteOutcome(
                    votable=saved,
                    vote_count=outcome.vote_count,
                    resulting_vote=outcome.resulting_vote,
                )

            outcome = await self._with_retry("cast_vote", attempt)

            logfire.info(
                "Vote recorded",
                votable_id=str(votable_id),
                vote_count=outcome.vote_count,
                resulting_vote=(
                    outcome.resulting_vote.value if outcome.resulting_vote else None
                ),
            )

            event = self.notification_dispatcher.for_vote(
                outcome.votable, voter, outcome
            )
            await self.notification_service.deliver(event)

            return outcome

    async def get_vote(
        self, user_id: UserId, votable_type: VotableType, votable_id: UUID
    ) -> VoteType | None:
        """Return a user's current vote on a question or answer.

        Raises:
            NotFoundError: If the votable doesn't exist
        """
        votable = await self._get_votable(votable_type, votable_id)
        return self.vote_ledger.vote_of(votable, user_id)

    async def accept_answer(
        self, actor_id: UserId, question_id: QuestionId, answer_id: AnswerId
    ) -> AcceptanceOutcome:
        """Accept an answer on behalf of the question's author.

        Accepting a different answer replaces the previous acceptance;
        accepting the current one again changes nothing.

        Args:
            actor_id: User performing the acceptance
            question_id: Question ID
            answer_id: Answer to accept

        Returns:
            Acceptance outcome (``changed`` is False for a repeat acceptance)

        Raises:
            NotFoundError: If the question or answer doesn't exist
            NotAuthorizedError: If the actor didn't author the question
            QuestionClosedError: If the question is not open
            MismatchedQuestionError: If the answer belongs to another question
            TransientFailureError: If concurrent writes kept conflicting
        """
        with logfire.span(
            "accept_answer",
            actor_id=str(actor_id),
            question_id=str(question_id),
            answer_id=str(answer_id),
        ):
            answer = await self._get_answer(answer_id)

            async def attempt() -> AcceptanceOutcome:
                question = await self._get_question(question_id)

                if question.author_id != actor_id:
                    logfire.warn(
                        "Acceptance by non-author rejected",
                        actor_id=str(actor_id),
                        question_id=str(question_id),
                    )
                    raise NotAuthorizedError(
                        "accept answers on",
                        "question",
                        str(question_id),
                        str(actor_id),
                    )

                if not question.is_open:
                    raise QuestionClosedError(str(question_id), question.status.value)

                outcome = self.acceptance_arbiter.accept(question, answer)
                if not outcome.changed:
                    return outcome

                saved = await self.question_repository.save(outcome.question)
                return AcceptanceOutcome(question=saved, changed=True)

            outcome = await self._with_retry("accept_answer", attempt)

            logfire.info(
                "Answer acceptance processed",
                question_id=str(question_id),
                answer_id=str(answer_id),
                changed=outcome.changed,
            )

            event = self.notification_dispatcher.for_acceptance(
                outcome.question, answer, outcome
            )
            await self.notification_service.deliver(event)

            return outcome

    async def handle_answer_deleted(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> bool:
        """Release a question's acceptance when its accepted answer goes away.

        No notification is sent.

        Returns:
            True if the deleted answer was the accepted one
        """
        with logfire.span(
            "handle_answer_deleted",
            question_id=str(question_id),
            answer_id=str(answer_id),
        ):

            async def attempt() -> bool:
                question = await self._get_question(question_id)
                outcome = self.acceptance_arbiter.release(question, answer_id)
                if outcome.changed:
                    await self.question_repository.save(outcome.question)
                return outcome.changed

            return await self._with_retry("handle_answer_deleted", attempt)

    async def _with_retry(
        self, operation: str, attempt: Callable[[], Awaitable[T]]
    ) -> T:
        """Run a load-compute-save unit, re-running it on version conflicts."""
        last_conflict: VersionConflictError | None = None
        for attempt_number in range(1, self.max_attempts + 1):
            try:
                return await attempt()
            except VersionConflictError as e:
                last_conflict = e
                logfire.warn(
                    "Version conflict",
                    operation=operation,
                    attempt=attempt_number,
                    max_attempts=self.max_attempts,
                    error=str(e),
                )

        raise TransientFailureError(operation, self.max_attempts) from last_conflict

    async def _get_user(self, user_id: UserId) -> User:
        user = await self.user_repository.find_by_id(user_id)
        if not user:
            raise NotFoundError("User", str(user_id))
        return user

    async def _get_question(self, question_id: QuestionId) -> Question:
        question = await self.question_repository.find_by_id(question_id)
        if not question:
            raise NotFoundError("Question", str(question_id))
        return question

    async def _get_answer(self, answer_id: AnswerId) -> Answer:
        answer = await self.answer_repository.find_by_id(answer_id)
        if not answer:
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def _get_votable(
        self, votable_type: VotableType, votable_id: UUID
    ) -> Votable:
        if votable_type == VotableType.QUESTION:
            return await self._get_question(QuestionId(votable_id))
        return await self._get_answer(AnswerId(votable_id))

    async def _save_votable(self, votable: Votable) -> Votable:
        if isinstance(votable, Question):
            return await self.question_repository.save(votable)
        if isinstance(votable, Answer):
            return await self.answer_repository.save(votable)
        raise TypeError(f"Unsupported votable: {type(votable).__name__}")
