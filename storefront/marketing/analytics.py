"""Google Analytics script injection."""

from __future__ import annotations

from html import escape

GTAG_LOADER_URL = "https://www.googletagmanager.com/gtag/js"

# Admin pages are never tracked.
EXCLUDED_PATH_PREFIX = "/admin"


def render_analytics_tags(pathname: str | None, measurement_id: str) -> str:
    """Return the gtag loader and bootstrap scripts, or ``""`` on admin pages."""

    if pathname and pathname.startswith(EXCLUDED_PATH_PREFIX):
        return ""

    tag_id = escape(measurement_id, quote=True)
    loader = f'<script async src="{GTAG_LOADER_URL}?id={tag_id}"></script>'
    bootstrap = (
        '<script id="google-analytics">\n'
        "  window.dataLayer = window.dataLayer || [];\n"
        "  function gtag(){dataLayer.push(arguments);}\n"
        "  gtag('js', new Date());\n"
        f"  gtag('config', '{tag_id}');\n"
        "</script>"
    )
    return f"{loader}\n{bootstrap}"
