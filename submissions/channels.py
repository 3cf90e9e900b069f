"""Compatibility facade for submission and notification functions.

Module layout by abstraction layer:
- adapters: payload mapping, inbound auth, provider adapters, HTTP app
- domain: validation, templates, email/sms decision logic
- application: orchestration of the submission and relay use cases
"""

from .adapters.auth import verify_shared_secret
from .adapters.fake_senders import (
    InMemoryStore,
    insert_row_via_console,
    send_email_via_console,
    send_sms_via_console,
)
from .adapters.http_app import create_app, create_app_from_env
from .adapters.payload import clean_submission, extract_record, normalize_record
from .adapters.real_senders import (
    send_email_via_mailgun_from_env,
    send_email_via_smtp_from_env,
    send_sms_via_twilio_from_env,
)
from .adapters.store import build_supabase_insert_row_from_env
from .application.dispatch import dispatch_notifications
from .application.relay import handle_relay_event
from .application.submit import handle_submission
from .domain.email import send_admin_email_notification, send_customer_email_notification
from .domain.sms import send_sms_notification

__all__ = [
    "InMemoryStore",
    "build_supabase_insert_row_from_env",
    "clean_submission",
    "create_app",
    "create_app_from_env",
    "dispatch_notifications",
    "extract_record",
    "handle_relay_event",
    "handle_submission",
    "insert_row_via_console",
    "normalize_record",
    "send_admin_email_notification",
    "send_customer_email_notification",
    "send_email_via_console",
    "send_email_via_mailgun_from_env",
    "send_email_via_smtp_from_env",
    "send_sms_notification",
    "send_sms_via_console",
    "send_sms_via_twilio_from_env",
    "verify_shared_secret",
]
