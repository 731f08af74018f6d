from collections.abc import Callable, Mapping
from enum import Enum
from typing import Annotated

from fastapi import Depends, HTTPException, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storefront.core.config import get_settings


class Role(str, Enum):
    """Supported roles."""

    ADMIN = "admin"


class User:
    """Simple representation of an authenticated user."""

    def __init__(self, username: str, roles: tuple[Role, ...]):
        self.username = username
        self.roles = roles

    def has_role(self, role: Role) -> bool:
        return role in self.roles


ANONYMOUS_USERNAME = "anonymous"

bearer_scheme = HTTPBearer(auto_error=False)


def resolve_user_from_token(token: str | None, token_map: Mapping[str, str] | None = None) -> User:
    """Return the user associated with the provided bearer token.

    ``token_map`` maps admin tokens to usernames and defaults to the configured
    ``admin_tokens``. Requests without a token are anonymous and carry no roles.
    """

    if token is None:
        return User(username=ANONYMOUS_USERNAME, roles=())

    tokens = get_settings().admin_tokens if token_map is None else token_map
    if token not in tokens:
        raise HTTPException(status_code=401, detail="Invalid authentication credentials")

    return User(username=tokens[token], roles=(Role.ADMIN,))


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Security(bearer_scheme)],
    request: Request,
) -> User:
    cached = getattr(request.state, "user", None)
    if isinstance(cached, User):
        return cached

    # Prefer the token recorded by RequestContextMiddleware; fall back to the
    # parsed header when the app runs without it.
    token = getattr(request.state, "bearer_token", None)
    if token is None and credentials is not None:
        token = credentials.credentials
    user = resolve_user_from_token(token)
    request.state.user = user
    return user


def role_required(role: Role) -> Callable[[User], User]:
    """Dependency factory ensuring the current user has the requested role."""

    async def dependency(user: Annotated[User, Depends(get_current_user)]) -> User:
        if not user.has_role(role):
            raise HTTPException(status_code=403, detail="Insufficient permissions")
        return user

    return dependency

