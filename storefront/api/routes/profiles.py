from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from storefront.dependencies.tickets import AdminUser, ProfileRepositoryDep
from storefront.profiles.helpers import get_user_email

router = APIRouter(prefix="/api/profiles", tags=["profiles"])


class UserEmailResponse(BaseModel):
    email: str | None


@router.get("/{user_id}/email", response_model=UserEmailResponse)
async def user_email(user_id: str, repository: ProfileRepositoryDep, _: AdminUser) -> UserEmailResponse:
    return UserEmailResponse(email=await get_user_email(repository, user_id))
