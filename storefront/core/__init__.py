"""Configuration and logging for the storefront API."""
