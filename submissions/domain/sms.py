"""SMS channel decision logic.

The channel is requested only when an outbound number is configured and the
record carries a phone number. Content is a short fixed template.
"""

from __future__ import annotations

import logging

from ..config import Settings
from ..kinds import PLACEHOLDER, RecordKind
from ..types import ChannelResult, Record, SendSMSFn
from . import templates

logger = logging.getLogger(__name__)


def send_sms_notification(
    record: Record,
    kind: RecordKind,
    settings: Settings,
    send_sms: SendSMSFn,
) -> ChannelResult:
    """Run SMS-channel rules and return a plain channel result dictionary."""
    phone = record.get("phone")
    if not settings.sms_enabled or not phone or phone == PLACEHOLDER:
        return {"channel": "sms", "requested": False, "success": True, "error": None}

    message = templates.sms_message(record, kind.name, settings.business_name)

    try:
        send_sms(from_phone=settings.sms_from_number, to_phone=phone, message=message)
    except Exception as exc:
        logger.error("[CHANNEL FAILED] channel=sms to=%s error=%s", phone, exc)
        return {"channel": "sms", "requested": True, "success": False, "error": str(exc)}

    logger.info("[CHANNEL SENT] channel=sms to=%s", phone)
    return {"channel": "sms", "requested": True, "success": True, "error": None}
