from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from storefront.core.config import Settings, get_settings
from storefront.services.mailer import ResendMailer


def get_mailer(settings: Annotated[Settings, Depends(get_settings)]) -> ResendMailer:
    return ResendMailer(settings.resend_api_key)


MailerDep = Annotated[ResendMailer, Depends(get_mailer)]
