"""Mark notifications read use cases."""

from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.base import BaseUseCase
from quorum.domain.service import NotificationService
from quorum.domain.value import NotificationId, UserId

from .get_notifications import NotificationItem


class MarkNotificationReadRequest(BaseModel):
    """Mark one notification read request."""

    user_id: str
    notification_id: str


class MarkNotificationReadResponse(BaseModel):
    """Mark one notification read response."""

    notification: NotificationItem


class MarkNotificationReadUseCase(
    BaseUseCase[MarkNotificationReadRequest, MarkNotificationReadResponse]
):
    """Use case for marking one of a user's notifications as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: MarkNotificationReadRequest
    ) -> MarkNotificationReadResponse:
        """Execute the use case.

        Raises:
            NotFoundError: If the user has no such notification
            ValueError: If an ID is not a valid UUID
        """
        event = await self.notification_service.mark_read(
            UserId(UUID(request.user_id)),
            NotificationId(UUID(request.notification_id)),
        )
        return MarkNotificationReadResponse(
            notification=NotificationItem.from_event(event)
        )


class MarkAllNotificationsReadRequest(BaseModel):
    """Mark all notifications read request."""

    user_id: str


class MarkAllNotificationsReadResponse(BaseModel):
    """Mark all notifications read response."""

    updated: int


class MarkAllNotificationsReadUseCase(
    BaseUseCase[MarkAllNotificationsReadRequest, MarkAllNotificationsReadResponse]
):
    """Use case for marking all of a user's notifications as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: MarkAllNotificationsReadRequest
    ) -> MarkAllNotificationsReadResponse:
        updated = await self.notification_service.mark_all_read(
            UserId(UUID(request.user_id))
        )
        return MarkAllNotificationsReadResponse(updated=updated)
