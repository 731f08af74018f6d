"""Route modules exposed by the API package."""

from . import admin_tickets, custom_orders, marketing, ping, profiles, tickets

__all__ = ["admin_tickets", "custom_orders", "marketing", "ping", "profiles", "tickets"]
