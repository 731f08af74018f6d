from __future__ import annotations

from datetime import datetime, timezone

import pytest
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from storefront.db.models import SupportTicketTable
from storefront.tickets.repository import TicketRepository
from storefront.tickets.state import TicketStatus


@pytest.mark.asyncio
async def test_ensure_schema_creates_tables(engine: AsyncEngine):
    repository = TicketRepository(async_sessionmaker(engine, expire_on_commit=False), engine=engine)

    await repository.ensure_schema()

    async with engine.begin() as conn:
        tables = await conn.run_sync(lambda sync_conn: set(sa_inspect(sync_conn).get_table_names()))

    assert {"support_tickets", "profiles"} <= tables


@pytest.mark.asyncio
async def test_ensure_schema_requires_engine(session_factory: async_sessionmaker):
    repository = TicketRepository(session_factory)

    with pytest.raises(RuntimeError):
        await repository.ensure_schema()


@pytest.mark.asyncio
async def test_insert_and_get_ticket_round_trips_fields(session_factory, ticket_factory):
    repository = TicketRepository(session_factory)
    ticket = ticket_factory(chat_context={"messages": [{"role": "user", "text": "where is my order"}]})

    await repository.insert_ticket(ticket)
    stored = await repository.get_ticket(ticket.id)

    assert stored is not None
    assert stored.subject == ticket.subject
    assert stored.status is TicketStatus.OPEN
    assert stored.chat_context == ticket.chat_context
    assert stored.created_at.tzinfo is not None
    assert stored.resolved_at is None


@pytest.mark.asyncio
async def test_get_missing_ticket_returns_none(session_factory):
    repository = TicketRepository(session_factory)

    assert await repository.get_ticket("missing") is None


@pytest.mark.asyncio
async def test_list_tickets_orders_newest_first_and_filters_by_user(session_factory, ticket_factory, timeline):
    repository = TicketRepository(session_factory)
    await repository.insert_ticket(ticket_factory("t-old", user_id="user-1", created_at=timeline[0]))
    await repository.insert_ticket(ticket_factory("t-new", user_id="user-1", created_at=timeline[2]))
    await repository.insert_ticket(ticket_factory("t-other", user_id="user-2", created_at=timeline[1]))

    everything = await repository.list_tickets()
    mine = await repository.list_tickets(user_id="user-1")

    assert [ticket.id for ticket in everything] == ["t-new", "t-other", "t-old"]
    assert [ticket.id for ticket in mine] == ["t-new", "t-old"]


@pytest.mark.asyncio
async def test_list_statuses_reads_every_row(session_factory, ticket_factory):
    repository = TicketRepository(session_factory)
    await repository.insert_ticket(ticket_factory("t-1", status=TicketStatus.OPEN))
    await repository.insert_ticket(ticket_factory("t-2", status=TicketStatus.CLOSED))

    statuses = await repository.list_statuses()

    assert sorted(status.value for status in statuses) == ["closed", "open"]


@pytest.mark.asyncio
async def test_update_ticket_persists_values(session_factory, ticket_factory):
    repository = TicketRepository(session_factory)
    await repository.insert_ticket(ticket_factory())
    resolved_at = datetime(2024, 5, 2, 9, 30, tzinfo=timezone.utc)

    updated = await repository.update_ticket(
        "ticket-1",
        {
            "status": TicketStatus.RESOLVED,
            "admin_notes": "Replacement shipped",
            "resolved_by": "admin",
            "resolved_at": resolved_at,
            "updated_at": resolved_at,
        },
    )

    assert updated is not None
    assert updated.status is TicketStatus.RESOLVED
    assert updated.admin_notes == "Replacement shipped"
    assert updated.resolved_at == resolved_at

    async with session_factory() as session:
        row = await session.get(SupportTicketTable, "ticket-1")
    assert row is not None
    assert row.status == "resolved"


@pytest.mark.asyncio
async def test_update_ticket_returns_none_when_missing(session_factory):
    repository = TicketRepository(session_factory)

    assert await repository.update_ticket("missing", {"status": TicketStatus.CLOSED}) is None


@pytest.mark.asyncio
async def test_update_ticket_rejects_unknown_fields(session_factory):
    repository = TicketRepository(session_factory)

    with pytest.raises(ValueError):
        await repository.update_ticket("ticket-1", {"subject": "changed"})
