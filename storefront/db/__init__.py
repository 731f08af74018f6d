"""Database table definitions."""

from .models import ProfileTable, SupportTicketTable

__all__ = ["ProfileTable", "SupportTicketTable"]
