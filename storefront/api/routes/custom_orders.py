from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from storefront.api.errors import error_response
from storefront.core.config import Settings, get_settings
from storefront.dependencies.mail import MailerDep
from storefront.marketing.inquiries import CustomOrderInquiry, build_inquiry_email
from storefront.services.mailer import MailerError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/custom-orders", tags=["custom-orders"])


class CustomOrderRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    company: str | None = None
    quantity: str | None = None
    message: str | None = None

    def missing_required(self) -> bool:
        return not (self.name and self.email and self.phone and self.message)


class CustomOrderAccepted(BaseModel):
    success: bool = True
    message: str = "Quote request sent successfully"


@router.post("", response_model=CustomOrderAccepted)
async def submit_custom_order(
    payload: CustomOrderRequest,
    mailer: MailerDep,
    settings: Annotated[Settings, Depends(get_settings)],
) -> CustomOrderAccepted | JSONResponse:
    if payload.missing_required():
        return error_response("Missing required fields", status_code=status.HTTP_400_BAD_REQUEST)

    inquiry = CustomOrderInquiry(
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
        message=payload.message,
        company=payload.company or None,
        quantity=payload.quantity or None,
    )
    email = build_inquiry_email(
        inquiry,
        sender=settings.custom_orders_from_email,
        recipient=settings.custom_orders_notify_email,
    )
    try:
        await mailer.send(email)
    except MailerError as exc:
        logger.error("Custom order notification for %s failed: %s", inquiry.email, exc)
        return error_response("Failed to send email")
    except Exception:
        logger.exception("Custom order inquiry from %s failed", inquiry.email)
        return error_response("Internal server error")
    return CustomOrderAccepted()
