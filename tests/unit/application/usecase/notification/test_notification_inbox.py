"""Unit tests for the mark-read, delete and clear notification use cases."""

from uuid import uuid4

import pytest

from quorum.application.usecase.notification import (
    ClearNotificationsRequest,
    ClearNotificationsUseCase,
    DeleteNotificationRequest,
    DeleteNotificationUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
)
from quorum.domain.error import NotFoundError
from quorum.domain.repository import NotificationRepository
from quorum.domain.service import NotificationDispatcher
from quorum.domain.value import UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(unit_env, recipient: UserId, count: int):
    repo = await unit_env.get(NotificationRepository)
    dispatcher = NotificationDispatcher()
    return [
        await repo.enqueue(dispatcher.for_system(recipient, f"Notice {i}", "Body"))
        for i in range(count)
    ]


class TestMarkNotificationReadUseCase:
    @pytest.mark.asyncio
    async def test_marks_notification_read(self, unit_env):
        use_case = await unit_env.get(MarkNotificationReadUseCase)
        recipient = UserId(uuid4())
        [event] = await _seed(unit_env, recipient, 1)

        response = await use_case.execute(
            MarkNotificationReadRequest(
                user_id=str(recipient), notification_id=str(event.id)
            )
        )

        assert response.notification.notification_id == str(event.id)
        assert response.notification.is_read is True
        assert response.notification.read_at is not None

    @pytest.mark.asyncio
    async def test_other_users_notification_is_not_found(self, unit_env):
        use_case = await unit_env.get(MarkNotificationReadUseCase)
        [event] = await _seed(unit_env, UserId(uuid4()), 1)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                MarkNotificationReadRequest(
                    user_id=str(uuid4()), notification_id=str(event.id)
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_id_raises_value_error(self, unit_env):
        use_case = await unit_env.get(MarkNotificationReadUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(
                MarkNotificationReadRequest(
                    user_id=str(uuid4()), notification_id="not-a-uuid"
                )
            )


class TestMarkAllNotificationsReadUseCase:
    @pytest.mark.asyncio
    async def test_reports_number_marked(self, unit_env):
        use_case = await unit_env.get(MarkAllNotificationsReadUseCase)
        recipient = UserId(uuid4())
        await _seed(unit_env, recipient, 2)

        response = await use_case.execute(
            MarkAllNotificationsReadRequest(user_id=str(recipient))
        )

        assert response.updated == 2


class TestDeleteNotificationUseCase:
    @pytest.mark.asyncio
    async def test_deletes_notification(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteNotificationUseCase)
        repo = await unit_env.get(NotificationRepository)
        recipient = UserId(uuid4())
        first, second = await _seed(unit_env, recipient, 2)

        # Act
        response = await use_case.execute(
            DeleteNotificationRequest(
                user_id=str(recipient), notification_id=str(first.id)
            )
        )

        # Assert
        assert response.deleted is True
        assert response.notification_id == str(first.id)
        remaining = await repo.find_by_recipient(recipient)
        assert [e.id for e in remaining] == [second.id]

    @pytest.mark.asyncio
    async def test_unknown_notification_is_not_found(self, unit_env):
        use_case = await unit_env.get(DeleteNotificationUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteNotificationRequest(
                    user_id=str(uuid4()), notification_id=str(uuid4())
                )
            )


class TestClearNotificationsUseCase:
    @pytest.mark.asyncio
    async def test_clears_only_the_users_notifications(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ClearNotificationsUseCase)
        repo = await unit_env.get(NotificationRepository)
        recipient = UserId(uuid4())
        other = UserId(uuid4())
        await _seed(unit_env, recipient, 3)
        await _seed(unit_env, other, 1)

        # Act
        response = await use_case.execute(
            ClearNotificationsRequest(user_id=str(recipient))
        )

        # Assert
        assert response.removed == 3
        assert await repo.count_by_recipient(recipient) == 0
        assert await repo.count_by_recipient(other) == 1
