"""Application layer DI providers."""

from dishka import Scope, provide

from quorum.application.usecase.answer import (
    AcceptAnswerUseCase,
    DeleteAnswerUseCase,
    SubmitAnswerUseCase,
)
from quorum.application.usecase.notification import (
    ClearNotificationsUseCase,
    DeleteNotificationUseCase,
    GetNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from quorum.application.usecase.vote import CastVoteUseCase, GetVoteUseCase
from quorum.domain.service import (
    AnswerService,
    InteractionService,
    NotificationService,
)
from quorum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, interaction_service: InteractionService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(interaction_service=interaction_service)

    @provide(scope=Scope.REQUEST)
    def get_get_vote_use_case(
        self, interaction_service: InteractionService
    ) -> GetVoteUseCase:
        """Provide get vote use case."""
        return GetVoteUseCase(interaction_service=interaction_service)

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_accept_answer_use_case(
        self, interaction_service: InteractionService
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(interaction_service=interaction_service)

    @provide(scope=Scope.REQUEST)
    def get_submit_answer_use_case(
        self, answer_service: AnswerService
    ) -> SubmitAnswerUseCase:
        """Provide submit answer use case."""
        return SubmitAnswerUseCase(answer_service=answer_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_answer_use_case(
        self,
        answer_service: AnswerService,
        interaction_service: InteractionService,
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(
            answer_service=answer_service,
            interaction_service=interaction_service,
        )

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_get_notifications_use_case(
        self, notification_service: NotificationService
    ) -> GetNotificationsUseCase:
        """Provide get notifications use case."""
        return GetNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_all_notifications_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllNotificationsReadUseCase:
        """Provide mark all notifications read use case."""
        return MarkAllNotificationsReadUseCase(
            notification_service=notification_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_notification_use_case(
        self, notification_service: NotificationService
    ) -> DeleteNotificationUseCase:
        """Provide delete notification use case."""
        return DeleteNotificationUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_clear_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ClearNotificationsUseCase:
        """Provide clear notifications use case."""
        return ClearNotificationsUseCase(notification_service=notification_service)
