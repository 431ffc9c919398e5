"""Notification routes.

Every route is scoped to the user in the path; a notification addressed to
someone else answers 404.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from quorum.application.usecase.notification import (
    ClearNotificationsRequest,
    ClearNotificationsResponse,
    ClearNotificationsUseCase,
    DeleteNotificationRequest,
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
    GetNotificationsRequest,
    GetNotificationsResponse,
    GetNotificationsUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadResponse,
    MarkNotificationReadUseCase,
)
from quorum.domain.error import DomainError
from quorum.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["notifications"], route_class=DishkaRoute)


def _bad_request(e: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{user_id}/notifications", response_model=GetNotificationsResponse)
async def get_notifications(
    user_id: str,
    get_notifications_use_case: FromDishka[GetNotificationsUseCase],
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    unread: bool = Query(default=False),
) -> GetNotificationsResponse:
    """List a user's notifications, newest first.

    Args:
        user_id: Recipient UUID
        get_notifications_use_case: Get notifications use case from DI
        limit: Page size
        offset: Number of notifications to skip
        unread: Only list unread notifications

    Returns:
        One page of notifications with the total and unread counts
    """
    try:
        request = GetNotificationsRequest(
            user_id=user_id, limit=limit, offset=offset, unread_only=unread
        )
        return await get_notifications_use_case.execute(request)
    except ValueError as e:
        raise _bad_request(e)


@router.put(
    "/{user_id}/notifications/read-all",
    response_model=MarkAllNotificationsReadResponse,
)
async def mark_all_notifications_read(
    user_id: str,
    mark_all_read_use_case: FromDishka[MarkAllNotificationsReadUseCase],
) -> MarkAllNotificationsReadResponse:
    """Mark all of a user's notifications as read."""
    try:
        return await mark_all_read_use_case.execute(
            MarkAllNotificationsReadRequest(user_id=user_id)
        )
    except ValueError as e:
        raise _bad_request(e)


@router.put(
    "/{user_id}/notifications/{notification_id}/read",
    response_model=MarkNotificationReadResponse,
)
async def mark_notification_read(
    user_id: str,
    notification_id: str,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
) -> MarkNotificationReadResponse:
    """Mark one notification as read.

    Raises:
        HTTPException: 404 if the user has no such notification
    """
    try:
        return await mark_read_use_case.execute(
            MarkNotificationReadRequest(
                user_id=user_id, notification_id=notification_id
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise _bad_request(e)


# Declared before the single-notification route so "clear-all" is never
# taken for a notification ID
@router.delete(
    "/{user_id}/notifications/clear-all",
    response_model=ClearNotificationsResponse,
)
async def clear_notifications(
    user_id: str,
    clear_notifications_use_case: FromDishka[ClearNotificationsUseCase],
) -> ClearNotificationsResponse:
    """Delete all of a user's notifications."""
    try:
        return await clear_notifications_use_case.execute(
            ClearNotificationsRequest(user_id=user_id)
        )
    except ValueError as e:
        raise _bad_request(e)


@router.delete(
    "/{user_id}/notifications/{notification_id}",
    response_model=DeleteNotificationResponse,
)
async def delete_notification(
    user_id: str,
    notification_id: str,
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
) -> DeleteNotificationResponse:
    """Delete one notification.

    Raises:
        HTTPException: 404 if the user has no such notification
    """
    try:
        return await delete_notification_use_case.execute(
            DeleteNotificationRequest(
                user_id=user_id, notification_id=notification_id
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise _bad_request(e)
