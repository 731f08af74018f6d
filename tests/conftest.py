from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from storefront.tickets.models import SupportTicket
from storefront.tickets.state import TicketCategory, TicketPriority, TicketStatus


def make_ticket(
    ticket_id: str = "ticket-1",
    *,
    user_id: str = "user-1",
    status: TicketStatus = TicketStatus.OPEN,
    created_at: datetime | None = None,
    **overrides,
) -> SupportTicket:
    now = created_at or datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    values = dict(
        id=ticket_id,
        user_id=user_id,
        subject="Order arrived damaged",
        description="The hoodie print is cracked",
        status=status,
        priority=TicketPriority.MEDIUM,
        category=TicketCategory.ORDER,
        created_at=now,
        updated_at=now,
    )
    values.update(overrides)
    return SupportTicket(**values)


@pytest.fixture
def ticket_factory():
    return make_ticket


@pytest.fixture
def timeline():
    start = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    return [start + timedelta(minutes=offset) for offset in range(5)]


@pytest_asyncio.fixture
async def engine() -> AsyncEngine:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    return async_sessionmaker(engine, expire_on_commit=False)
