"""In-memory user store for tests."""

from typing import Optional

from quorum.domain.model.user import User
from quorum.domain.repository.user import UserRepository
from quorum.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """Dict-backed UserRepository."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def get_reputation(self, user_id: UserId) -> Optional[int]:
        if user_id not in self._users:
            return None
        return self._users[user_id].reputation

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user
