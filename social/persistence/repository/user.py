"""PostgreSQL implementation of User repository."""

from typing import Dict, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.model import User
from social.domain.repository import UserRepository
from social.domain.value import UserId
from social.persistence.mappers import row_to_user
from social.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """Author lookups; one ``IN`` query per response."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> Dict[UserId, User]:
        if not user_ids:
            return {}
        stmt = select(users_table).where(users_table.c.id.in_(set(user_ids)))
        result = await self.session.execute(stmt)
        users = (row_to_user(row._asdict()) for row in result)
        return {user.id: user for user in users}
