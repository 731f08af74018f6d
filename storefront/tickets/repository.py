from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlmodel import SQLModel, select

from storefront.db.models import SupportTicketTable

from .models import SupportTicket
from .state import TicketCategory, TicketPriority, TicketStatus

_UPDATABLE_FIELDS = frozenset({"status", "admin_notes", "resolved_by", "resolved_at", "updated_at"})


class TicketRepository:
    """Persistence helper wrapping the ``support_tickets`` table."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        engine: AsyncEngine | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._engine: AsyncEngine | None = engine

    async def ensure_schema(self) -> None:
        if self._engine is None:
            raise RuntimeError("Session factory is not bound to an async engine")
        async with self._engine.begin() as connection:
            await connection.run_sync(SQLModel.metadata.create_all)

    async def insert_ticket(self, ticket: SupportTicket) -> SupportTicket:
        async with self._session_factory() as session:
            async with session.begin():
                row = SupportTicketTable(
                    id=ticket.id,
                    user_id=ticket.user_id,
                    subject=ticket.subject,
                    description=ticket.description,
                    status=ticket.status.value,
                    priority=ticket.priority.value,
                    category=ticket.category.value,
                    chat_context=ticket.chat_context,
                    admin_notes=ticket.admin_notes,
                    resolved_by=ticket.resolved_by,
                    resolved_at=ticket.resolved_at,
                    created_at=ticket.created_at,
                    updated_at=ticket.updated_at,
                )
                session.add(row)
        return ticket

    async def get_ticket(self, ticket_id: str) -> SupportTicket | None:
        async with self._session_factory() as session:
            row = await session.get(SupportTicketTable, ticket_id)
            if row is None:
                return None
            return self._table_to_ticket(row)

    async def list_tickets(self, *, user_id: str | None = None) -> list[SupportTicket]:
        statement = select(SupportTicketTable)
        if user_id is not None:
            statement = statement.where(SupportTicketTable.user_id == user_id)
        statement = statement.order_by(SupportTicketTable.created_at.desc())
        async with self._session_factory() as session:
            result = await session.execute(statement)
            return [self._table_to_ticket(row) for row in result.scalars().all()]

    async def list_statuses(self) -> list[TicketStatus]:
        async with self._session_factory() as session:
            result = await session.execute(select(SupportTicketTable.status))
            return [TicketStatus(value) for value in result.scalars().all()]

    async def update_ticket(self, ticket_id: str, values: Mapping[str, Any]) -> SupportTicket | None:
        unknown = set(values) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update ticket fields: {', '.join(sorted(unknown))}")

        async with self._session_factory() as session:
            row = await session.get(SupportTicketTable, ticket_id)
            if row is None:
                return None
            for name, value in values.items():
                setattr(row, name, value.value if isinstance(value, TicketStatus) else value)
            await session.commit()
            await session.refresh(row)
            return self._table_to_ticket(row)

    @staticmethod
    def _table_to_ticket(row: SupportTicketTable) -> SupportTicket:
        return SupportTicket(
            id=row.id,
            user_id=row.user_id,
            subject=row.subject,
            description=row.description,
            status=TicketStatus(row.status),
            priority=TicketPriority(row.priority),
            category=TicketCategory(row.category),
            chat_context=row.chat_context,
            admin_notes=row.admin_notes,
            resolved_by=row.resolved_by,
            resolved_at=_ensure_datetime(row.resolved_at) if row.resolved_at is not None else None,
            created_at=_ensure_datetime(row.created_at),
            updated_at=_ensure_datetime(row.updated_at),
        )


def _ensure_datetime(value: datetime | None) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    raise TypeError("Expected datetime value from database")
