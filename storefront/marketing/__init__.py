"""Server-rendered marketing markup for the custom orders pages."""

from .analytics import render_analytics_tags
from .inquiries import CustomOrderInquiry, build_inquiry_email, render_inquiry_email
from .sections import BROCHURE_URL, render_custom_orders_page, render_pdf_download, render_trust_section

__all__ = [
    "BROCHURE_URL",
    "CustomOrderInquiry",
    "build_inquiry_email",
    "render_analytics_tags",
    "render_custom_orders_page",
    "render_inquiry_email",
    "render_pdf_download",
    "render_trust_section",
]
