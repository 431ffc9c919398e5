"""PostgreSQL user store."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from quorum.domain.model import User
from quorum.domain.repository import UserRepository
from quorum.domain.value import UserId
from quorum.persistence.mappers import row_to_user, user_to_dict
from quorum.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """UserRepository over the ``users`` table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Fetch a user row by primary key."""
        result = await self.session.execute(
            select(users_table).where(users_table.c.id == user_id)
        )
        row = result.fetchone()
        if row is None:
            return None
        return row_to_user(row._asdict())

    async def get_reputation(self, user_id: UserId) -> Optional[int]:
        """Select only the reputation column."""
        return await self.session.scalar(
            select(users_table.c.reputation).where(users_table.c.id == user_id)
        )

    async def save(self, user: User) -> User:
        """Upsert on the primary key; username and reputation are overwritten."""
        stmt = insert(users_table).values(**user_to_dict(user))
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={
                "username": stmt.excluded.username,
                "reputation": stmt.excluded.reputation,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user
