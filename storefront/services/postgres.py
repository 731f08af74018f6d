from __future__ import annotations

from dataclasses import dataclass

import asyncpg


def to_asyncpg_dsn(dsn: str) -> str:
    """Ensure a DSN uses the asyncpg driver for SQLAlchemy."""

    if dsn.startswith("postgresql+asyncpg://"):
        return dsn
    if dsn.startswith("postgresql://"):
        return "postgresql+asyncpg://" + dsn[len("postgresql://") :]
    if dsn.startswith("postgres://"):
        return "postgresql+asyncpg://" + dsn[len("postgres://") :]
    return dsn


def to_plain_dsn(dsn: str) -> str:
    """Strip a SQLAlchemy driver suffix so asyncpg can use the DSN directly."""

    if dsn.startswith("postgresql+asyncpg://"):
        return "postgresql://" + dsn[len("postgresql+asyncpg://") :]
    return dsn


@dataclass(slots=True)
class PostgresConnectionTester:
    """Utility providing explicit connection testing to PostgreSQL."""

    dsn: str
    _pool: asyncpg.Pool | None = None

    async def get_pool(self) -> asyncpg.Pool:
        if self._pool is None:
            self._pool = await asyncpg.create_pool(dsn=to_plain_dsn(self.dsn), min_size=1, max_size=1)
        return self._pool

    async def test_connection(self) -> bool:
        pool = await self.get_pool()
        async with pool.acquire() as connection:
            await connection.execute("SELECT 1")
        return True

    async def close(self) -> None:
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
