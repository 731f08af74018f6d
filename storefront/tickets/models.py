from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .state import TicketCategory, TicketPriority, TicketStatus

UNKNOWN_EMAIL = "Unknown"
UNKNOWN_NAME = "Unknown User"


@dataclass(slots=True)
class SupportTicket:
    """A support request raised by a customer."""

    id: str
    user_id: str
    subject: str
    description: str
    status: TicketStatus
    priority: TicketPriority
    category: TicketCategory
    created_at: datetime
    updated_at: datetime
    chat_context: Any = None
    admin_notes: str | None = None
    resolved_by: str | None = None
    resolved_at: datetime | None = None


@dataclass(slots=True)
class TicketWithUser:
    """Ticket joined with the contact details of the customer who raised it."""

    ticket: SupportTicket
    user_email: str = UNKNOWN_EMAIL
    user_name: str = UNKNOWN_NAME


@dataclass(slots=True)
class CreateTicketData:
    user_id: str
    subject: str
    description: str
    category: TicketCategory | None = None
    priority: TicketPriority | None = None
    chat_context: Any = None


@dataclass(slots=True)
class TicketStats:
    """Per-status ticket counts."""

    total: int = 0
    open: int = 0
    in_progress: int = 0
    resolved: int = 0
    closed: int = 0

    def as_payload(self) -> dict[str, int]:
        # the admin dashboard reads ``inProgress``, older clients ``in_progress``
        return {
            "total": self.total,
            "open": self.open,
            "inProgress": self.in_progress,
            "resolved": self.resolved,
            "closed": self.closed,
            "in_progress": self.in_progress,
        }
