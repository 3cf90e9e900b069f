"""Email channel decision logic.

Two channels share this module: the customer acknowledgment and the admin
alert. Each one decides whether it is requested, renders its template and
calls the injected sender. Sender failures are recorded in the returned
channel result and never raised.
"""

from __future__ import annotations

import logging
from email.utils import formataddr

from ..config import Settings
from ..kinds import RecordKind
from ..types import ChannelResult, Record, SendEmailFn
from . import templates
from .validation import is_valid_email

logger = logging.getLogger(__name__)


def send_customer_email_notification(
    record: Record,
    kind: RecordKind,
    settings: Settings,
    send_email: SendEmailFn,
) -> ChannelResult:
    """Acknowledge the submission to the customer who made it."""
    channel = "customer_email"
    to_email = record.get("email")
    if not is_valid_email(to_email):
        return _failed(channel, "record email is missing or invalid")

    subject, body = templates.customer_email(record, kind.name, settings.business_name)
    return _deliver(
        channel,
        send_email,
        from_email=formataddr((settings.business_name, settings.customer_from_email)),
        to_email=to_email,
        subject=subject,
        body=body,
    )


def send_admin_email_notification(
    record: Record,
    kind: RecordKind,
    settings: Settings,
    send_email: SendEmailFn,
) -> ChannelResult:
    """Alert the business owner with every field of the new record."""
    channel = "admin_email"
    if not settings.admin_email:
        return _failed(channel, "ADMIN_EMAIL is not configured")

    subject, body = templates.admin_email(record, kind.name, settings.business_name)
    return _deliver(
        channel,
        send_email,
        from_email=formataddr((settings.business_name, settings.alert_from_email)),
        to_email=settings.admin_email,
        subject=subject,
        body=body,
    )


def _deliver(channel: str, send_email: SendEmailFn, **message: str) -> ChannelResult:
    try:
        send_email(**message)
    except Exception as exc:
        logger.error("[CHANNEL FAILED] channel=%s to=%s error=%s", channel, message["to_email"], exc)
        return _failed(channel, str(exc))

    logger.info("[CHANNEL SENT] channel=%s to=%s", channel, message["to_email"])
    return {"channel": channel, "requested": True, "success": True, "error": None}


def _failed(channel: str, error: str) -> ChannelResult:
    return {"channel": channel, "requested": True, "success": False, "error": error}
