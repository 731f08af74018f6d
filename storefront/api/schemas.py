from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from storefront.tickets.models import SupportTicket, TicketWithUser
from storefront.tickets.state import TicketCategory, TicketPriority, TicketStatus


class TicketResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    subject: str
    description: str
    status: TicketStatus
    priority: TicketPriority
    category: TicketCategory
    chat_context: Any = None
    admin_notes: str | None = None
    resolved_by: str | None = None
    resolved_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, ticket: SupportTicket) -> "TicketResponse":
        return cls.model_validate(ticket)


class TicketWithUserResponse(TicketResponse):
    user_email: str
    user_name: str

    @classmethod
    def from_listing(cls, entry: TicketWithUser) -> "TicketWithUserResponse":
        base = TicketResponse.from_entity(entry.ticket)
        return cls(**base.model_dump(), user_email=entry.user_email, user_name=entry.user_name)


class TicketEnvelope(BaseModel):
    ticket: TicketResponse


class TicketListEnvelope(BaseModel):
    tickets: list[TicketResponse]


class AdminTicketListEnvelope(BaseModel):
    tickets: list[TicketWithUserResponse]


class TicketStatsResponse(BaseModel):
    total: int
    open: int
    inProgress: int
    resolved: int
    closed: int
    in_progress: int
