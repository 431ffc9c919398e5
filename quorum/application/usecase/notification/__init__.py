"""Notification use cases."""

from .delete_notification import (
    ClearNotificationsRequest,
    ClearNotificationsResponse,
    ClearNotificationsUseCase,
    DeleteNotificationRequest,
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
)
from .get_notifications import (
    GetNotificationsRequest,
    GetNotificationsResponse,
    GetNotificationsUseCase,
    NotificationItem,
)
from .mark_read import (
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadResponse,
    MarkNotificationReadUseCase,
)

__all__ = [
    "GetNotificationsRequest",
    "GetNotificationsResponse",
    "GetNotificationsUseCase",
    "NotificationItem",
    "MarkNotificationReadRequest",
    "MarkNotificationReadResponse",
    "MarkNotificationReadUseCase",
    "MarkAllNotificationsReadRequest",
    "MarkAllNotificationsReadResponse",
    "MarkAllNotificationsReadUseCase",
    "DeleteNotificationRequest",
    "DeleteNotificationResponse",
    "DeleteNotificationUseCase",
    "ClearNotificationsRequest",
    "ClearNotificationsResponse",
    "ClearNotificationsUseCase",
]
