"""Delete notifications use cases."""

from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.base import BaseUseCase
from quorum.domain.service import NotificationService
from quorum.domain.value import NotificationId, UserId


class DeleteNotificationRequest(BaseModel):
    """Delete one notification request."""

    user_id: str
    notification_id: str


class DeleteNotificationResponse(BaseModel):
    """Delete one notification response."""

    notification_id: str
    deleted: bool = True


class DeleteNotificationUseCase(
    BaseUseCase[DeleteNotificationRequest, DeleteNotificationResponse]
):
    """Use case for deleting one of a user's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: DeleteNotificationRequest
    ) -> DeleteNotificationResponse:
        """Execute the use case.

        Raises:
            NotFoundError: If the user has no such notification
            ValueError: If an ID is not a valid UUID
        """
        await self.notification_service.delete_notification(
            UserId(UUID(request.user_id)),
            NotificationId(UUID(request.notification_id)),
        )
        return DeleteNotificationResponse(notification_id=request.notification_id)


class ClearNotificationsRequest(BaseModel):
    """Clear all notifications request."""

    user_id: str


class ClearNotificationsResponse(BaseModel):
    """Clear all notifications response."""

    removed: int


class ClearNotificationsUseCase(
    BaseUseCase[ClearNotificationsRequest, ClearNotificationsResponse]
):
    """Use case for deleting all of a user's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: ClearNotificationsRequest
    ) -> ClearNotificationsResponse:
        removed = await self.notification_service.clear_notifications(
            UserId(UUID(request.user_id))
        )
        return ClearNotificationsResponse(removed=removed)
