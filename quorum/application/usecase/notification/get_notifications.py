"""Get notifications use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from quorum.application.usecase.base import BaseUseCase
from quorum.domain.model import NotificationEvent
from quorum.domain.service import NotificationService
from quorum.domain.value import NotificationKind, UserId


class GetNotificationsRequest(BaseModel):
    """Get notifications request."""

    user_id: str
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    unread_only: bool = False


class NotificationItem(BaseModel):
    """A single notification."""

    notification_id: str
    kind: NotificationKind
    sender_id: Optional[str]
    title: str
    message: str
    question_id: Optional[str]
    answer_id: Optional[str]
    is_read: bool
    read_at: Optional[datetime]
    created_at: datetime

    @classmethod
    def from_event(cls, event: NotificationEvent) -> "NotificationItem":
        """Build the API view of a notification event."""
        return cls(
            notification_id=str(event.id),
            kind=event.kind,
            sender_id=str(event.sender_id) if event.sender_id else None,
            title=event.title,
            message=event.message,
            question_id=str(event.question_id) if event.question_id else None,
            answer_id=str(event.answer_id) if event.answer_id else None,
            is_read=event.is_read,
            read_at=event.read_at,
            created_at=event.created_at,
        )


class GetNotificationsResponse(BaseModel):
    """Get notifications response.

    ``total`` counts the notifications matching the request's filter;
    ``unread_count`` always counts all of the user's unread ones.
    """

    notifications: list[NotificationItem]
    total: int
    unread_count: int


class GetNotificationsUseCase(
    BaseUseCase[GetNotificationsRequest, GetNotificationsResponse]
):
    """Use case for listing a user's notifications, newest first."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: GetNotificationsRequest
    ) -> GetNotificationsResponse:
        user_id = UserId(UUID(request.user_id))
        events = await self.notification_service.get_notifications(
            user_id,
            limit=request.limit,
            offset=request.offset,
            unread_only=request.unread_only,
        )
        total = await self.notification_service.count_notifications(
            user_id, unread_only=request.unread_only
        )
        unread_count = await self.notification_service.count_notifications(
            user_id, unread_only=True
        )

        return GetNotificationsResponse(
            notifications=[NotificationItem.from_event(e) for e in events],
            total=total,
            unread_count=unread_count,
        )
