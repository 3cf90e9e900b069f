"""Direct-submission use case: validate, persist, notify, respond.

State flow per submission:
  received -> validated -> persisted -> notified -> responded
with terminal exits to `rejected_*` (before any write) and `persist_failed`
(write attempted, nothing sent). Nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..adapters.payload import clean_submission, normalize_record
from ..config import Settings
from ..domain.validation import validate_submission
from ..errors import HoneypotTriggered, ValidationError
from ..kinds import RecordKind
from ..types import HandlerResult, InsertRowFn, SendEmailFn, SendSMSFn
from .dispatch import dispatch_notifications
from .results import build_result

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body."


def handle_submission(
    payload: Any,
    kind: RecordKind,
    settings: Settings,
    *,
    insert_row: InsertRowFn,
    send_email: SendEmailFn,
    send_sms: SendSMSFn,
) -> HandlerResult:
    """Handle one inquiry or booking form submission.

    Notification failures never change the response once the row is stored;
    the caller is not told which channel, if any, failed.
    """
    if not isinstance(payload, Mapping):
        return build_result(
            "rejected_invalid", 400, {"error": INVALID_BODY_MESSAGE}, error=INVALID_BODY_MESSAGE
        )

    row, honeypot_value = clean_submission(payload, kind)
    try:
        validate_submission(row, honeypot_value)
    except HoneypotTriggered:
        logger.info("[REJECTED] kind=%s reason=honeypot", kind.name)
        return build_result("rejected_spam", 200, {"success": True}, error="honeypot")
    except ValidationError as exc:
        logger.info("[REJECTED] kind=%s reason=%s", kind.name, exc)
        return build_result("rejected_invalid", 400, {"error": str(exc)}, error=str(exc))

    table = settings.table_for(kind.name)
    try:
        insert_row(table=table, row=row)
    except Exception as exc:
        logger.error("[PERSIST ERROR] kind=%s table=%s error=%s", kind.name, table, exc, exc_info=True)
        return build_result(
            "persist_failed",
            500,
            {"error": f"Failed to save {kind.name}"},
            record=row,
            error=str(exc),
        )
    logger.info("[PERSISTED] kind=%s table=%s email=%s", kind.name, table, row["email"])

    if not settings.notify_on_submit(kind.name):
        return build_result("persisted", 200, {"success": True}, record=row)

    processing = dispatch_notifications(
        normalize_record(row, kind),
        kind,
        settings,
        send_email=send_email,
        send_sms=send_sms,
    )
    return build_result("notified", 200, {"success": True}, record=row, notifications=processing)
