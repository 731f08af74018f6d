from __future__ import annotations

import logging

from .repository import ProfileRepository

logger = logging.getLogger(__name__)


async def get_user_email(repository: ProfileRepository, user_id: str) -> str | None:
    """Return the email stored on a user's profile.

    Lookup failures are logged and reported as ``None`` so callers can treat a
    missing address and an unreachable backend the same way.
    """

    try:
        profile = await repository.get_profile(user_id)
    except Exception:
        logger.exception("Error fetching user email for %s", user_id)
        return None

    if profile is None or not profile.email:
        return None
    return profile.email
