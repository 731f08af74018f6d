"""LV8 storefront support and marketing API."""
