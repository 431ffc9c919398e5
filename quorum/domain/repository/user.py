"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quorum.domain.model.user import User
from quorum.domain.value import UserId


class UserRepository(ABC):
    """Read access to actors and their reputation.

    Accounts and reputation changes are owned elsewhere; the interaction
    engine only looks users up. ``save`` exists for seeding and for the
    account system's writes.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Look up an actor.

        Args:
            user_id: Actor ID

        Returns:
            The user, or None if unknown
        """
        pass

    @abstractmethod
    async def get_reputation(self, user_id: UserId) -> Optional[int]:
        """Current reputation points of an actor, or None if unknown."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert or overwrite a user record (last write wins)."""
        pass
