"""Custom order quote inquiries and their notification e-mail."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape

from storefront.services.mailer import EmailMessage

_STYLE = """\
body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Arial, sans-serif;
       line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px; }
.header { background: linear-gradient(135deg, #1c1917 0%, #44403c 100%); color: white;
          padding: 30px; border-radius: 8px 8px 0 0; text-align: center; }
.header h1 { margin: 0; font-size: 24px; font-weight: 400; }
.content { background: #f5f5f4; padding: 30px; border-radius: 0 0 8px 8px; }
.info-row, .message-box { background: white; padding: 15px; margin-bottom: 12px;
                          border-radius: 6px; border-left: 4px solid #1c1917; }
.label { font-weight: 600; color: #57534e; font-size: 12px; text-transform: uppercase;
         letter-spacing: 0.5px; margin-bottom: 5px; }
.value { color: #1c1917; font-size: 16px; }
.footer { text-align: center; margin-top: 30px; padding-top: 20px;
          border-top: 2px solid #e7e5e4; color: #78716c; font-size: 14px; }
"""


@dataclass(slots=True, frozen=True)
class CustomOrderInquiry:
    name: str
    email: str
    phone: str
    message: str
    company: str | None = None
    quantity: str | None = None

    @property
    def subject(self) -> str:
        return f"New Custom Order Inquiry from {self.name}"


def _info_row(label: str, value: str) -> str:
    return (
        '<div class="info-row">'
        f'<div class="label">{label}</div>'
        f'<div class="value">{escape(value)}</div>'
        "</div>"
    )


def render_inquiry_email(inquiry: CustomOrderInquiry) -> str:
    """Render the notification sent to the shop for a quote request.

    Every customer-supplied value is HTML-escaped. Company and quantity rows
    are left out when the customer did not fill them in.
    """

    rows = [
        _info_row("Customer Name", inquiry.name),
        _info_row("Email Address", inquiry.email),
        _info_row("Phone Number", inquiry.phone),
    ]
    if inquiry.company:
        rows.append(_info_row("Company/Brand Name", inquiry.company))
    if inquiry.quantity:
        rows.append(_info_row("Estimated Quantity", inquiry.quantity))

    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"<style>\n{_STYLE}</style>\n"
        "</head>\n"
        "<body>\n"
        '<div class="header"><h1>New Custom Order Inquiry</h1></div>\n'
        '<div class="content">\n'
        + "\n".join(rows)
        + "\n"
        '<div class="message-box">'
        '<div class="label">Project Details</div>'
        f'<div class="value" style="white-space: pre-wrap; margin-top: 10px;">{escape(inquiry.message)}</div>'
        "</div>\n"
        '<div class="footer">'
        "<p><strong>Action Required:</strong> Respond to this inquiry within 24 hours.</p>"
        f"<p>Reply directly to this email to contact {escape(inquiry.name)} at {escape(inquiry.email)}</p>"
        "</div>\n"
        "</div>\n"
        "</body>\n"
        "</html>\n"
    )


def build_inquiry_email(inquiry: CustomOrderInquiry, *, sender: str, recipient: str) -> EmailMessage:
    """Address the notification to the shop; replies go to the customer."""

    return EmailMessage(
        sender=sender,
        to=(recipient,),
        subject=inquiry.subject,
        html=render_inquiry_email(inquiry),
        reply_to=inquiry.email,
    )
