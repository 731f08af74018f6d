from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from storefront.api.errors import error_response, server_error
from storefront.api.schemas import TicketEnvelope, TicketListEnvelope, TicketResponse
from storefront.db.models import SUBJECT_MAX_LENGTH
from storefront.dependencies.tickets import TicketServiceDep
from storefront.tickets.models import CreateTicketData
from storefront.tickets.state import TicketCategory, TicketPriority

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tickets", tags=["tickets"])


class TicketCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str | None = Field(default=None, alias="userId")
    subject: str | None = None
    description: str | None = None
    category: TicketCategory | None = None
    priority: TicketPriority | None = None
    chat_context: Any = Field(default=None, alias="chatContext")

    def missing_required(self) -> bool:
        return not (self.user_id and self.subject and self.description)


@router.post("", response_model=TicketEnvelope, status_code=status.HTTP_201_CREATED)
async def create_ticket(payload: TicketCreateRequest, service: TicketServiceDep) -> TicketEnvelope | JSONResponse:
    if payload.missing_required():
        return error_response(
            "userId, subject, and description are required", status_code=status.HTTP_400_BAD_REQUEST
        )
    if len(payload.subject) > SUBJECT_MAX_LENGTH:
        return error_response(
            f"subject must be at most {SUBJECT_MAX_LENGTH} characters", status_code=status.HTTP_400_BAD_REQUEST
        )

    try:
        ticket = await service.create_ticket(
            CreateTicketData(
                user_id=payload.user_id,
                subject=payload.subject,
                description=payload.description,
                category=payload.category,
                priority=payload.priority,
                chat_context=payload.chat_context,
            )
        )
    except Exception as exc:
        return server_error(logger, "Failed to create ticket", exc)
    return TicketEnvelope(ticket=TicketResponse.from_entity(ticket))


@router.get("", response_model=TicketListEnvelope)
async def list_user_tickets(
    service: TicketServiceDep,
    user_id: str | None = Query(default=None, alias="userId"),
) -> TicketListEnvelope | JSONResponse:
    if not user_id:
        return error_response("userId is required", status_code=status.HTTP_400_BAD_REQUEST)

    try:
        tickets = await service.get_user_tickets(user_id)
    except Exception as exc:
        return server_error(logger, "Failed to fetch tickets", exc)
    return TicketListEnvelope(tickets=[TicketResponse.from_entity(ticket) for ticket in tickets])
