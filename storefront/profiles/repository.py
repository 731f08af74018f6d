from __future__ import annotations

from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import select

from storefront.db.models import ProfileTable

from .models import Profile


class ProfileRepository:
    """Read access to the ``profiles`` table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_profile(self, user_id: str) -> Profile | None:
        async with self._session_factory() as session:
            row = await session.get(ProfileTable, user_id)
            if row is None:
                return None
            return self._table_to_profile(row)

    async def get_profiles(self, user_ids: Iterable[str]) -> dict[str, Profile]:
        ids = sorted(set(user_ids))
        if not ids:
            return {}
        async with self._session_factory() as session:
            result = await session.execute(select(ProfileTable).where(ProfileTable.id.in_(ids)))
            return {row.id: self._table_to_profile(row) for row in result.scalars().all()}

    @staticmethod
    def _table_to_profile(row: ProfileTable) -> Profile:
        return Profile(id=row.id, email=row.email, full_name=row.full_name)
