"""Transactional e-mail through the Resend API."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import resend
from resend.exceptions import ResendError

logger = logging.getLogger(__name__)


class MailerError(RuntimeError):
    """Raised when an e-mail could not be handed to the provider."""


@dataclass(slots=True, frozen=True)
class EmailMessage:
    sender: str
    to: tuple[str, ...]
    subject: str
    html: str
    reply_to: str | None = None


class ResendMailer:
    """Send :class:`EmailMessage` objects with the Resend SDK.

    The SDK is synchronous, so each send runs in a worker thread.
    """

    def __init__(self, api_key: str | None) -> None:
        self._api_key = api_key

    async def send(self, message: EmailMessage) -> str:
        if not self._api_key:
            raise MailerError("Resend API key is not configured")

        params: dict[str, Any] = {
            "from": message.sender,
            "to": list(message.to),
            "subject": message.subject,
            "html": message.html,
        }
        if message.reply_to:
            params["reply_to"] = message.reply_to

        try:
            response = await asyncio.to_thread(self._send, params)
        except ResendError as exc:
            raise MailerError(str(exc)) from exc

        email_id = response.get("id", "")
        logger.info("Sent %r to %s (id=%s)", message.subject, ", ".join(message.to), email_id)
        return email_id

    def _send(self, params: dict[str, Any]) -> dict[str, Any]:
        resend.api_key = self._api_key
        return resend.Emails.send(params)
