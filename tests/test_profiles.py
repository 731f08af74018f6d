from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from storefront.db.models import ProfileTable
from storefront.dependencies import tickets as ticket_deps
from storefront.dependencies.auth import Role, User
from storefront.main import create_app
from storefront.profiles.helpers import get_user_email
from storefront.profiles.models import Profile
from storefront.profiles.repository import ProfileRepository


@pytest_asyncio.fixture
async def seeded_profiles(session_factory):
    async with session_factory() as session:
        async with session.begin():
            session.add(ProfileTable(id="user-1", email="asha@example.com", full_name="Asha Rao"))
            session.add(ProfileTable(id="user-2", email=None, full_name="No Email"))
    return ProfileRepository(session_factory)


@pytest.mark.asyncio
async def test_get_profile(seeded_profiles):
    profile = await seeded_profiles.get_profile("user-1")

    assert profile == Profile(id="user-1", email="asha@example.com", full_name="Asha Rao")
    assert await seeded_profiles.get_profile("missing") is None


@pytest.mark.asyncio
async def test_get_profiles_returns_only_known_ids(seeded_profiles):
    profiles = await seeded_profiles.get_profiles(["user-1", "user-2", "missing", "user-1"])

    assert set(profiles) == {"user-1", "user-2"}
    assert await seeded_profiles.get_profiles([]) == {}


@pytest.mark.asyncio
async def test_get_user_email_returns_profile_email(seeded_profiles):
    assert await get_user_email(seeded_profiles, "user-1") == "asha@example.com"


@pytest.mark.asyncio
async def test_get_user_email_returns_none_without_email(seeded_profiles):
    assert await get_user_email(seeded_profiles, "user-2") is None
    assert await get_user_email(seeded_profiles, "missing") is None


@pytest.mark.asyncio
async def test_get_user_email_returns_none_on_lookup_error():
    repository = AsyncMock()
    repository.get_profile = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("down")))

    assert await get_user_email(repository, "user-1") is None


def test_user_email_route():
    app = create_app()
    repository = AsyncMock()
    repository.get_profile = AsyncMock(return_value=Profile(id="user-1", email="asha@example.com"))

    async def override_repository():
        return repository

    app.dependency_overrides[ticket_deps.get_profile_repository] = override_repository
    app.dependency_overrides[ticket_deps.require_admin] = lambda: User("ops-admin", (Role.ADMIN,))
    client = TestClient(app)

    response = client.get("/api/profiles/user-1/email")

    assert response.status_code == 200
    assert response.json() == {"email": "asha@example.com"}
