"""User aggregate root.

Users accumulate reputation through community engagement. The interaction
engine only reads a user's identity and reputation.
"""

from datetime import datetime

from pydantic import Field

from quorum.domain.model.common import DomainModel
from quorum.domain.value import UserId, Username


class User(DomainModel):
    """A platform user acting on questions and answers."""

    id: UserId
    username: Username
    reputation: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
