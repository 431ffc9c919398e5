"""Notification event.

Notifications are created by the dispatcher from a committed state change
and handed to a sink for persistence and delivery. Apart from the read
flag, which the recipient flips, they never change after creation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from quorum.domain.model.common import DomainModel
from quorum.domain.value import (
    AnswerId,
    NotificationId,
    NotificationKind,
    QuestionId,
    UserId,
)


class NotificationEvent(DomainModel):
    """Notification addressed to a single recipient.

    System notifications have no sender; every other kind names the user
    whose action triggered it.
    """

    id: NotificationId
    recipient_id: UserId
    sender_id: Optional[UserId] = None
    kind: NotificationKind
    title: str = Field(min_length=1)
    message: str = Field(min_length=1)
    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    is_read: bool = False
    read_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_sender(self) -> "NotificationEvent":
        """System notifications carry no sender; all others require one."""
        if self.kind == NotificationKind.SYSTEM and self.sender_id is not None:
            raise ValueError("System notifications cannot have a sender")
        if self.kind != NotificationKind.SYSTEM and self.sender_id is None:
            raise ValueError(f"{self.kind.value} notifications require a sender")
        return self

    @model_validator(mode="after")
    def validate_read_state(self) -> "NotificationEvent":
        """Only a read notification records when it was read."""
        if self.read_at is not None and not self.is_read:
            raise ValueError("Unread notifications cannot have a read time")
        return self

    def mark_read(self, at: datetime) -> "NotificationEvent":
        """Return this notification marked as read.

        The first read time is kept when the notification is already read.
        """
        if self.is_read:
            return self
        return self.model_copy(update={"is_read": True, "read_at": at})
