"""SQLModel table definitions for the storefront data layer."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import Column, DateTime, JSON, String, Text
from sqlmodel import Field, SQLModel

SUBJECT_MAX_LENGTH = 255


def _utcnow() -> datetime:
    """Return a timezone aware UTC timestamp."""

    return datetime.now(timezone.utc)


class SupportTicketTable(SQLModel, table=True):
    """Support tickets raised by customers, managed from the admin panel."""

    __tablename__ = "support_tickets"

    id: str = Field(primary_key=True, index=True)
    user_id: str = Field(sa_column=Column(String(36), nullable=False, index=True))
    subject: str = Field(sa_column=Column(String(SUBJECT_MAX_LENGTH), nullable=False))
    description: str = Field(sa_column=Column(Text, nullable=False))
    status: str = Field(sa_column=Column(String(20), nullable=False))
    priority: str = Field(sa_column=Column(String(20), nullable=False))
    category: str = Field(sa_column=Column(String(20), nullable=False))
    chat_context: Any = Field(default=None, sa_column=Column(JSON, nullable=True))
    admin_notes: str | None = Field(default=None, sa_column=Column(Text, nullable=True))
    resolved_by: str | None = Field(default=None, sa_column=Column(String(255), nullable=True))
    resolved_at: datetime | None = Field(default=None, sa_column=Column(DateTime(timezone=True), nullable=True))
    created_at: datetime = Field(default_factory=_utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=_utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))


class ProfileTable(SQLModel, table=True):
    """Customer profiles keyed by the auth user id."""

    __tablename__ = "profiles"

    id: str = Field(primary_key=True, index=True)
    email: str | None = Field(default=None, sa_column=Column(String(255), nullable=True))
    full_name: str | None = Field(default=None, sa_column=Column(String(255), nullable=True))
    created_at: datetime = Field(default_factory=_utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))
