"""Domain layer DI providers."""

from dishka import Scope, provide

from quorum.config import InteractionSettings, ReputationSettings
from quorum.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
)
from quorum.domain.service import (
    AcceptanceArbiter,
    AnswerService,
    InteractionService,
    NotificationDispatcher,
    NotificationService,
    ReputationPolicy,
    VoteLedger,
)
from quorum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    The pure components (policy, ledger, arbiter, dispatcher) are stateless
    and shared app-wide. Services touching repositories are REQUEST-scoped
    to align with the repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_reputation_policy(self, settings: ReputationSettings) -> ReputationPolicy:
        """Provide reputation policy."""
        return ReputationPolicy(settings=settings)

    @provide(scope=Scope.APP)
    def get_vote_ledger(self) -> VoteLedger:
        """Provide vote ledger."""
        return VoteLedger()

    @provide(scope=Scope.APP)
    def get_acceptance_arbiter(self) -> AcceptanceArbiter:
        """Provide acceptance arbiter."""
        return AcceptanceArbiter()

    @provide(scope=Scope.APP)
    def get_notification_dispatcher(self) -> NotificationDispatcher:
        """Provide notification dispatcher."""
        return NotificationDispatcher()

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification delivery service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_interaction_service(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        reputation_policy: ReputationPolicy,
        vote_ledger: VoteLedger,
        acceptance_arbiter: AcceptanceArbiter,
        notification_dispatcher: NotificationDispatcher,
        notification_service: NotificationService,
        settings: InteractionSettings,
    ) -> InteractionService:
        """Provide interaction domain service."""
        return InteractionService(
            user_repository=user_repository,
            question_repository=question_repository,
            answer_repository=answer_repository,
            reputation_policy=reputation_policy,
            vote_ledger=vote_ledger,
            acceptance_arbiter=acceptance_arbiter,
            notification_dispatcher=notification_dispatcher,
            notification_service=notification_service,
            max_attempts=settings.max_attempts,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        user_repository: UserRepository,
        notification_dispatcher: NotificationDispatcher,
        notification_service: NotificationService,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
            user_repository=user_repository,
            notification_dispatcher=notification_dispatcher,
            notification_service=notification_service,
        )
