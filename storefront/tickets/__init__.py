"""Support ticket domain models and services."""

from .models import CreateTicketData, SupportTicket, TicketStats, TicketWithUser
from .repository import TicketRepository
from .service import (
    InvalidTicketTransitionError,
    TicketBackendError,
    TicketNotFoundError,
    TicketService,
    TicketServiceError,
)
from .state import TicketCategory, TicketPriority, TicketStateMachine, TicketStatus

__all__ = [
    "CreateTicketData",
    "InvalidTicketTransitionError",
    "SupportTicket",
    "TicketBackendError",
    "TicketCategory",
    "TicketNotFoundError",
    "TicketPriority",
    "TicketRepository",
    "TicketService",
    "TicketServiceError",
    "TicketStateMachine",
    "TicketStats",
    "TicketStatus",
    "TicketWithUser",
]
