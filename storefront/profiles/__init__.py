"""Customer profile lookups."""

from .helpers import get_user_email
from .models import Profile
from .repository import ProfileRepository

__all__ = ["Profile", "ProfileRepository", "get_user_email"]
