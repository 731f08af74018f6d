from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from storefront.dependencies.auth import Role, User, role_required
from storefront.profiles.repository import ProfileRepository
from storefront.tickets.service import TicketService

require_admin = role_required(Role.ADMIN)

AdminUser = Annotated[User, Depends(require_admin)]


async def get_ticket_service(request: Request) -> TicketService:
    service = getattr(request.app.state, "ticket_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Ticket service is not configured")
    return service


async def get_profile_repository(request: Request) -> ProfileRepository:
    repository = getattr(request.app.state, "profile_repository", None)
    if repository is None:
        raise HTTPException(status_code=503, detail="Profile store is not configured")
    return repository


TicketServiceDep = Annotated[TicketService, Depends(get_ticket_service)]
ProfileRepositoryDep = Annotated[ProfileRepository, Depends(get_profile_repository)]
