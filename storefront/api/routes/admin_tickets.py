from __future__ import annotations

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from storefront.api.errors import error_response, server_error
from storefront.api.schemas import (
    AdminTicketListEnvelope,
    TicketEnvelope,
    TicketResponse,
    TicketStatsResponse,
    TicketWithUserResponse,
)
from storefront.dependencies.tickets import AdminUser, TicketServiceDep
from storefront.tickets.service import InvalidTicketTransitionError, TicketNotFoundError
from storefront.tickets.state import TicketStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/tickets", tags=["admin"])


class TicketStatusUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str | None = None
    admin_notes: str | None = Field(default=None, alias="adminNotes")
    resolved_by: str | None = Field(default=None, alias="resolvedBy")


@router.get("", response_model=AdminTicketListEnvelope)
async def list_all_tickets(service: TicketServiceDep, _: AdminUser) -> AdminTicketListEnvelope | JSONResponse:
    try:
        entries = await service.get_all_tickets()
    except Exception as exc:
        return server_error(logger, "Failed to fetch tickets", exc)
    return AdminTicketListEnvelope(tickets=[TicketWithUserResponse.from_listing(entry) for entry in entries])


@router.get("/stats", response_model=TicketStatsResponse)
async def ticket_stats(service: TicketServiceDep, _: AdminUser) -> TicketStatsResponse | JSONResponse:
    try:
        stats = await service.get_ticket_stats()
    except Exception as exc:
        return server_error(logger, "Failed to fetch stats", exc)
    return TicketStatsResponse(**stats.as_payload())


@router.get("/{ticket_id}", response_model=TicketEnvelope)
async def get_ticket(ticket_id: str, service: TicketServiceDep, _: AdminUser) -> TicketEnvelope | JSONResponse:
    try:
        ticket = await service.get_ticket_by_id(ticket_id)
    except Exception as exc:
        return server_error(logger, "Failed to fetch ticket", exc)
    if ticket is None:
        return error_response("Ticket not found", status_code=status.HTTP_404_NOT_FOUND)
    return TicketEnvelope(ticket=TicketResponse.from_entity(ticket))


@router.patch("/{ticket_id}", response_model=TicketEnvelope)
async def update_ticket_status(
    ticket_id: str,
    payload: TicketStatusUpdateRequest,
    service: TicketServiceDep,
    user: AdminUser,
) -> TicketEnvelope | JSONResponse:
    if not payload.status:
        return error_response("Status is required", status_code=status.HTTP_400_BAD_REQUEST)
    try:
        new_status = TicketStatus(payload.status)
    except ValueError as exc:
        return error_response("Invalid status", status_code=status.HTTP_400_BAD_REQUEST, exc=exc)

    try:
        ticket = await service.update_ticket_status(
            ticket_id,
            new_status,
            admin_notes=payload.admin_notes,
            resolved_by=payload.resolved_by or user.username,
        )
    except TicketNotFoundError as exc:
        return error_response("Ticket not found", status_code=status.HTTP_404_NOT_FOUND, exc=exc)
    except InvalidTicketTransitionError as exc:
        return error_response("Invalid status transition", status_code=status.HTTP_409_CONFLICT, exc=exc)
    except Exception as exc:
        return server_error(logger, "Failed to update ticket", exc)
    return TicketEnvelope(ticket=TicketResponse.from_entity(ticket))
