"""Webhook-relay use case.

The store calls back after a row is inserted. The row is already durable, so
this path only authenticates, normalizes and fans out notifications.
"""

from __future__ import annotations

import logging
from typing import Any

from ..adapters.auth import verify_shared_secret
from ..adapters.payload import (
    describe_envelope,
    extract_record,
    normalize_record,
    require_contact_email,
)
from ..config import Settings
from ..errors import AuthError, ValidationError
from ..kinds import BOOKING, INQUIRY, RecordKind
from ..types import HandlerResult, SendEmailFn, SendSMSFn
from .dispatch import dispatch_notifications
from .results import build_result

logger = logging.getLogger(__name__)

INSERT_EVENT = "INSERT"


def handle_relay_event(
    payload: Any,
    settings: Settings,
    *,
    shared_secret_header: str | None,
    send_email: SendEmailFn,
    send_sms: SendSMSFn,
) -> HandlerResult:
    """Handle one relayed row-inserted event and decide the HTTP outcome."""
    try:
        verify_shared_secret(shared_secret_header, settings.shared_secret)
    except AuthError as exc:
        logger.warning("[AUTH FAILED] reason=%s", exc)
        return build_result(
            "unauthorized", 401, {"ok": False, "error": "bad signature"}, error=str(exc)
        )

    try:
        event_type, table = describe_envelope(payload)
        if event_type and event_type.upper() != INSERT_EVENT:
            logger.info("[SKIPPED] event_type=%s table=%s", event_type, table)
            return build_result("skipped", 200, {"ok": True, "skipped": event_type})

        kind = _kind_for_table(table, settings)
        record = normalize_record(extract_record(payload), kind)
        try:
            require_contact_email(record)
        except ValidationError as exc:
            logger.info("[REJECTED] kind=%s table=%s reason=%s", kind.name, table, exc)
            return build_result(
                "rejected_invalid",
                400,
                {"ok": False, "error": f"no {kind.name}/email"},
                record=record,
                error=str(exc),
            )

        processing = dispatch_notifications(
            record, kind, settings, send_email=send_email, send_sms=send_sms
        )
    except Exception as exc:
        logger.exception("[RELAY ERROR] error=%s", exc)
        return build_result(
            "failed", 500, {"ok": False, "error": "server error"}, error=str(exc)
        )

    return build_result("notified", 200, {"ok": True}, record=record, notifications=processing)


def _kind_for_table(table: str | None, settings: Settings) -> RecordKind:
    if table and table == settings.inquiry_table:
        return INQUIRY
    return BOOKING
