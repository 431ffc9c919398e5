"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quorum.domain.model.notification import NotificationEvent
from quorum.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Sink and inbox for notification events.

    Enqueueing is best-effort: implementations report failure by raising
    NotificationDeliveryFailedError and must leave the caller's
    transaction intact. Every other operation is scoped to one recipient;
    a notification addressed to someone else is treated as missing.
    """

    @abstractmethod
    async def enqueue(self, event: NotificationEvent) -> NotificationEvent:
        """Persist an event for delivery.

        Args:
            event: The notification to enqueue

        Returns:
            The enqueued event

        Raises:
            NotificationDeliveryFailedError: If the event could not be stored
        """
        pass

    @abstractmethod
    async def find_by_recipient(
        self,
        recipient_id: UserId,
        limit: int = 20,
        offset: int = 0,
        unread_only: bool = False,
    ) -> List[NotificationEvent]:
        """Find notifications for a recipient, newest first.

        Args:
            recipient_id: The recipient's user ID
            limit: Maximum number of notifications to return
            offset: Number of notifications to skip
            unread_only: Only return notifications not yet read

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def count_by_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> int:
        """Count a recipient's notifications.

        Args:
            recipient_id: The recipient's user ID
            unread_only: Only count notifications not yet read

        Returns:
            Number of matching notifications
        """
        pass

    @abstractmethod
    async def mark_read(
        self, recipient_id: UserId, notification_id: NotificationId
    ) -> Optional[NotificationEvent]:
        """Mark one notification as read.

        Marking an already read notification keeps its original read time.

        Args:
            recipient_id: The recipient's user ID
            notification_id: The notification to mark

        Returns:
            The updated notification, or None if the recipient has no such
            notification
        """
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a recipient as read.

        Returns:
            Number of notifications that changed
        """
        pass

    @abstractmethod
    async def delete(
        self, recipient_id: UserId, notification_id: NotificationId
    ) -> bool:
        """Delete one notification.

        Returns:
            True if the notification existed and was deleted
        """
        pass

    @abstractmethod
    async def clear_all(self, recipient_id: UserId) -> int:
        """Delete every notification of a recipient.

        Returns:
            Number of notifications deleted
        """
        pass
