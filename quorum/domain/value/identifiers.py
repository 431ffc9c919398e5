"""Entity identifiers.

All IDs are UUIDs; the NewTypes keep a question ID from being passed
where an answer ID is expected.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
QuestionId = NewType("QuestionId", UUID)
AnswerId = NewType("AnswerId", UUID)
NotificationId = NewType("NotificationId", UUID)
