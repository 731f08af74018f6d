from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Profile:
    """Read-only view of a customer profile."""

    id: str
    email: str | None = None
    full_name: str | None = None
