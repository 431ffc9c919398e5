"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from quorum.domain.error import NotificationDeliveryFailedError
from quorum.domain.model import NotificationEvent
from quorum.domain.repository import NotificationRepository
from quorum.domain.value import NotificationId, UserId
from quorum.persistence.mappers import notification_to_dict, row_to_notification
from quorum.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository.

    Events share the request's transaction but are written inside a
    SAVEPOINT: a failed insert rolls back only the notification.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _recipient_filter(self, recipient_id: UserId, unread_only: bool = False):
        condition = notifications_table.c.recipient_id == recipient_id
        if unread_only:
            condition = and_(condition, notifications_table.c.is_read.is_(False))
        return condition

    def _owned(self, recipient_id: UserId, notification_id: NotificationId):
        return and_(
            notifications_table.c.id == notification_id,
            notifications_table.c.recipient_id == recipient_id,
        )

    async def enqueue(self, event: NotificationEvent) -> NotificationEvent:
        """Insert an event inside a nested transaction."""
        stmt = insert(notifications_table).values(**notification_to_dict(event))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise NotificationDeliveryFailedError(str(event.id), str(e)) from e
        return event

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        limit: int = 20,
        offset: int = 0,
        unread_only: bool = False,
    ) -> List[NotificationEvent]:
        """Find notifications for a recipient, newest first."""
        stmt = (
            select(notifications_table)
            .where(self._recipient_filter(recipient_id, unread_only))
            .order_by(notifications_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_by_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> int:
        """Count a recipient's notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(self._recipient_filter(recipient_id, unread_only))
        )
        return await self.session.scalar(stmt) or 0

    async def mark_read(
        self, recipient_id: UserId, notification_id: NotificationId
    ) -> Optional[NotificationEvent]:
        """Mark one notification as read, keeping an earlier read time."""
        stmt = (
            update(notifications_table)
            .where(self._owned(recipient_id, notification_id))
            .values(
                is_read=True,
                read_at=func.coalesce(notifications_table.c.read_at, func.now()),
            )
            .returning(*notifications_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_notification(row._asdict()) if row else None

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a recipient as read."""
        stmt = (
            update(notifications_table)
            .where(self._recipient_filter(recipient_id, unread_only=True))
            .values(is_read=True, read_at=func.now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete(
        self, recipient_id: UserId, notification_id: NotificationId
    ) -> bool:
        """Delete one notification."""
        stmt = (
            delete(notifications_table)
            .where(self._owned(recipient_id, notification_id))
            .returning(notifications_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted

    async def clear_all(self, recipient_id: UserId) -> int:
        """Delete every notification of a recipient."""
        stmt = delete(notifications_table).where(
            self._recipient_filter(recipient_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
