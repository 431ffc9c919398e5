"""In-memory notification repository for testing."""

from datetime import datetime
from typing import Optional

from quorum.domain.model.notification import NotificationEvent
from quorum.domain.repository.notification import NotificationRepository
from quorum.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._events: list[NotificationEvent] = []

    @property
    def events(self) -> list[NotificationEvent]:
        """All stored events, oldest first."""
        return list(self._events)

    def _owned(self, recipient_id: UserId, unread_only: bool = False):
        return [
            e
            for e in self._events
            if e.recipient_id == recipient_id and not (unread_only and e.is_read)
        ]

    async def enqueue(self, event: NotificationEvent) -> NotificationEvent:
        """Store an event."""
        self._events.append(event)
        return event

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        limit: int = 20,
        offset: int = 0,
        unread_only: bool = False,
    ) -> list[NotificationEvent]:
        """Find notifications for a recipient, newest first."""
        events = self._owned(recipient_id, unread_only)
        events.reverse()
        return events[offset : offset + limit]

    async def count_by_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> int:
        """Count a recipient's notifications."""
        return len(self._owned(recipient_id, unread_only))

    async def mark_read(
        self, recipient_id: UserId, notification_id: NotificationId
    ) -> Optional[NotificationEvent]:
        """Mark one notification as read."""
        for i, event in enumerate(self._events):
            if event.id == notification_id and event.recipient_id == recipient_id:
                self._events[i] = event.mark_read(datetime.now())
                return self._events[i]
        return None

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a recipient as read."""
        now = datetime.now()
        changed = 0
        for i, event in enumerate(self._events):
            if event.recipient_id == recipient_id and not event.is_read:
                self._events[i] = event.mark_read(now)
                changed += 1
        return changed

    async def delete(
        self, recipient_id: UserId, notification_id: NotificationId
    ) -> bool:
        """Delete one notification."""
        for event in self._events:
            if event.id == notification_id and event.recipient_id == recipient_id:
                self._events.remove(event)
                return True
        return False

    async def clear_all(self, recipient_id: UserId) -> int:
        """Delete every notification of a recipient."""
        kept = [e for e in self._events if e.recipient_id != recipient_id]
        removed = len(self._events) - len(kept)
        self._events = kept
        return removed
