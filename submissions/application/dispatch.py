"""Application orchestration for notification channel execution.

Mental model refresher:
- Application layer coordinates use-case flow across domain modules.
- In this project the dispatcher:
  1) calls the customer email channel
  2) calls the admin email channel
  3) calls the SMS channel
  4) aggregates a single informational success flag
- Channels are independent. A failing channel never stops the next one, and
  the aggregate flag never changes the caller's HTTP outcome.
"""

from __future__ import annotations

import logging

from ..config import Settings
from ..domain.email import send_admin_email_notification, send_customer_email_notification
from ..domain.sms import send_sms_notification
from ..kinds import RecordKind
from ..types import ProcessingResult, Record, SendEmailFn, SendSMSFn

logger = logging.getLogger(__name__)


def dispatch_notifications(
    record: Record,
    kind: RecordKind,
    settings: Settings,
    *,
    send_email: SendEmailFn,
    send_sms: SendSMSFn,
) -> ProcessingResult:
    """Fan one normalized record out to every notification channel."""
    channel_results = [
        send_customer_email_notification(record, kind, settings, send_email),
        send_admin_email_notification(record, kind, settings, send_email),
        send_sms_notification(record, kind, settings, send_sms),
    ]

    all_requested_succeeded = all(
        (not item["requested"]) or item["success"] for item in channel_results
    )
    if not all_requested_succeeded:
        failed = [item["channel"] for item in channel_results if item["requested"] and not item["success"]]
        logger.warning(
            "[NOTIFY PARTIAL] kind=%s email=%s failed_channels=%s",
            kind.name,
            record.get("email"),
            ",".join(failed),
        )

    return {
        "record_kind": kind.name,
        "email": record.get("email"),
        "channel_results": channel_results,
        "all_requested_succeeded": all_requested_succeeded,
    }
