"""Notification delivery boundary."""

from typing import List, Optional

import logfire

from quorum.domain.error import NotFoundError, NotificationDeliveryFailedError
from quorum.domain.model import NotificationEvent
from quorum.domain.repository import NotificationRepository
from quorum.domain.value import NotificationId, UserId

from .base import Service


class NotificationService(Service):
    """Hands notification events to the sink and manages each user's inbox.

    Delivery is fire-and-forget relative to the operation that produced
    the event: failures are logged here and never reach the caller.
    """

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification sink
        """
        self.notification_repository = notification_repository

    async def deliver(self, event: Optional[NotificationEvent]) -> bool:
        """Enqueue an event for delivery.

        Args:
            event: Event to deliver (None is a no-op)

        Returns:
            True if the event was enqueued, False if there was nothing to
            deliver or the sink rejected it
        """
        if event is None:
            return False

        try:
            await self.notification_repository.enqueue(event)
        except NotificationDeliveryFailedError as e:
            logfire.error(
                "Notification delivery failed",
                notification_id=str(event.id),
                kind=event.kind.value,
                recipient_id=str(event.recipient_id),
                error=str(e),
            )
            return False

        logfire.info(
            "Notification enqueued",
            notification_id=str(event.id),
            kind=event.kind.value,
            recipient_id=str(event.recipient_id),
        )
        return True

    async def get_notifications(
        self,
        recipient_id: UserId,
        limit: int = 20,
        offset: int = 0,
        unread_only: bool = False,
    ) -> List[NotificationEvent]:
        """List a user's notifications, newest first."""
        return await self.notification_repository.find_by_recipient(
            recipient_id, limit=limit, offset=offset, unread_only=unread_only
        )

    async def count_notifications(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> int:
        """Count a user's notifications, optionally only the unread ones."""
        return await self.notification_repository.count_by_recipient(
            recipient_id, unread_only=unread_only
        )

    async def mark_read(
        self, recipient_id: UserId, notification_id: NotificationId
    ) -> NotificationEvent:
        """Mark one of a user's notifications as read.

        Args:
            recipient_id: Owner of the notification
            notification_id: Notification to mark

        Returns:
            The notification in its read state

        Raises:
            NotFoundError: If the user has no such notification
        """
        event = await self.notification_repository.mark_read(
            recipient_id, notification_id
        )
        if event is None:
            raise NotFoundError("Notification", str(notification_id))
        return event

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark all of a user's notifications as read.

        Returns:
            Number of notifications that were unread
        """
        with logfire.span("mark_all_read", recipient_id=str(recipient_id)):
            changed = await self.notification_repository.mark_all_read(recipient_id)
            logfire.info(
                "Notifications marked read",
                recipient_id=str(recipient_id),
                count=changed,
            )
            return changed

    async def delete_notification(
        self, recipient_id: UserId, notification_id: NotificationId
    ) -> None:
        """Delete one of a user's notifications.

        Raises:
            NotFoundError: If the user has no such notification
        """
        deleted = await self.notification_repository.delete(
            recipient_id, notification_id
        )
        if not deleted:
            raise NotFoundError("Notification", str(notification_id))

    async def clear_notifications(self, recipient_id: UserId) -> int:
        """Delete all of a user's notifications.

        Returns:
            Number of notifications deleted
        """
        with logfire.span("clear_notifications", recipient_id=str(recipient_id)):
            removed = await self.notification_repository.clear_all(recipient_id)
            logfire.info(
                "Notifications cleared",
                recipient_id=str(recipient_id),
                count=removed,
            )
            return removed
