from __future__ import annotations

import logging
import uuid
from collections import Counter
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from storefront.profiles.repository import ProfileRepository

from .models import UNKNOWN_EMAIL, UNKNOWN_NAME, CreateTicketData, SupportTicket, TicketStats, TicketWithUser
from .repository import TicketRepository
from .state import TicketCategory, TicketPriority, TicketStateMachine, TicketStatus

logger = logging.getLogger(__name__)

# Driver-level connection failures (asyncpg, sockets) surface as OSError.
_BACKEND_ERRORS = (SQLAlchemyError, OSError)


class TicketServiceError(RuntimeError):
    """Base error for ticket service issues."""


class TicketNotFoundError(TicketServiceError):
    """Raised when a ticket could not be located."""


class InvalidTicketTransitionError(TicketServiceError):
    """Raised when attempting to transition to an invalid state."""


class TicketBackendError(TicketServiceError):
    """Raised when the database rejects or fails a ticket query."""


class TicketService:
    """Support ticket operations used by the customer and admin APIs."""

    def __init__(
        self,
        repository: TicketRepository,
        profiles: ProfileRepository,
        *,
        state_machine: type[TicketStateMachine] = TicketStateMachine,
    ) -> None:
        self._repository = repository
        self._profiles = profiles
        self._state_machine = state_machine

    async def create_ticket(self, data: CreateTicketData) -> SupportTicket:
        now = datetime.now(timezone.utc)
        ticket = SupportTicket(
            id=str(uuid.uuid4()),
            user_id=data.user_id,
            subject=data.subject,
            description=data.description,
            status=self._state_machine.initial_state(),
            priority=data.priority or TicketPriority.MEDIUM,
            category=data.category or TicketCategory.GENERAL,
            chat_context=data.chat_context,
            created_at=now,
            updated_at=now,
        )
        try:
            return await self._repository.insert_ticket(ticket)
        except _BACKEND_ERRORS as exc:
            raise _backend_error("create_ticket", exc) from exc

    async def get_user_tickets(self, user_id: str) -> list[SupportTicket]:
        try:
            return await self._repository.list_tickets(user_id=user_id)
        except _BACKEND_ERRORS as exc:
            raise _backend_error("get_user_tickets", exc) from exc

    async def get_ticket_by_id(self, ticket_id: str) -> SupportTicket | None:
        try:
            return await self._repository.get_ticket(ticket_id)
        except _BACKEND_ERRORS as exc:
            raise _backend_error("get_ticket_by_id", exc) from exc

    async def get_all_tickets(self) -> list[TicketWithUser]:
        """Return every ticket, newest first, with the owner's contact details.

        Profile lookup failures do not fail the listing; affected tickets are
        reported with placeholder user details instead.
        """

        try:
            tickets = await self._repository.list_tickets()
        except _BACKEND_ERRORS as exc:
            raise _backend_error("get_all_tickets", exc) from exc

        if not tickets:
            return []

        try:
            profiles = await self._profiles.get_profiles({ticket.user_id for ticket in tickets})
        except _BACKEND_ERRORS:
            logger.exception("Error fetching profiles for %d tickets", len(tickets))
            profiles = {}

        results: list[TicketWithUser] = []
        for ticket in tickets:
            profile = profiles.get(ticket.user_id)
            results.append(
                TicketWithUser(
                    ticket=ticket,
                    user_email=(profile.email if profile else None) or UNKNOWN_EMAIL,
                    user_name=(profile.full_name if profile else None) or UNKNOWN_NAME,
                )
            )
        return results

    async def update_ticket_status(
        self,
        ticket_id: str,
        status: TicketStatus,
        admin_notes: str | None = None,
        resolved_by: str | None = None,
    ) -> SupportTicket:
        try:
            current = await self._repository.get_ticket(ticket_id)
            if current is None:
                raise TicketNotFoundError(f"Ticket {ticket_id} not found")

            if not self._state_machine.can_transition(current.status, status):
                raise InvalidTicketTransitionError(
                    f"Cannot transition {current.status.value} -> {status.value}"
                )

            now = datetime.now(timezone.utc)
            values: dict[str, Any] = {"status": status, "updated_at": now}
            if admin_notes:
                values["admin_notes"] = admin_notes
            if status.is_terminal:
                values["resolved_at"] = now
                if resolved_by:
                    values["resolved_by"] = resolved_by

            updated = await self._repository.update_ticket(ticket_id, values)
        except _BACKEND_ERRORS as exc:
            raise _backend_error("update_ticket_status", exc) from exc

        if updated is None:
            raise TicketNotFoundError(f"Ticket {ticket_id} not found")
        logger.info("Ticket %s moved %s -> %s", ticket_id, current.status.value, status.value)
        return updated

    async def get_ticket_stats(self) -> TicketStats:
        try:
            statuses = await self._repository.list_statuses()
        except _BACKEND_ERRORS as exc:
            raise _backend_error("get_ticket_stats", exc) from exc

        counts = Counter(statuses)
        return TicketStats(
            total=len(statuses),
            open=counts[TicketStatus.OPEN],
            in_progress=counts[TicketStatus.IN_PROGRESS],
            resolved=counts[TicketStatus.RESOLVED],
            closed=counts[TicketStatus.CLOSED],
        )


def _backend_error(operation: str, exc: Exception) -> TicketBackendError:
    logger.error("%s failed: %s", operation, exc)
    return TicketBackendError(str(exc))
