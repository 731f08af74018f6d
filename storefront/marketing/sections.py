from __future__ import annotations

from html import escape

from .analytics import render_analytics_tags

BROCHURE_URL = "/custom-apparel-brochure.pdf"
BROCHURE_FILENAME = "custom-apparel-brochure.pdf"


def render_trust_section() -> str:
    return (
        '<section class="trust">\n'
        "  <h2>Bringing Your Brand Identity to Life</h2>\n"
        "  <p>THE LV8 specializes in high-quality, durable, professional customization that elevates "
        "your brand. From initial concept to final delivery, we partner with you every step of the way "
        "to ensure your vision is executed with precision and excellence.</p>\n"
        "</section>"
    )


def render_pdf_download(href: str = BROCHURE_URL) -> str:
    return (
        '<section class="pdf-download">\n'
        "  <h3>Want a Detailed Overview?</h3>\n"
        "  <p>Download our comprehensive Custom Apparel Brochure for complete information about our "
        "services, processes, and pricing guidelines.</p>\n"
        f'  <a href="{escape(href, quote=True)}" download>Download PDF Brochure</a>\n'
        "</section>"
    )


def render_custom_orders_page(*, pathname: str, measurement_id: str, title: str) -> str:
    """Compose the custom orders landing page."""

    head_scripts = render_analytics_tags(pathname, measurement_id)
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escape(title)}</title>\n"
        f"{head_scripts}\n"
        "</head>\n"
        "<body>\n"
        f"{render_trust_section()}\n"
        f"{render_pdf_download()}\n"
        "</body>\n"
        "</html>\n"
    )
