"""Inquiry and booking submissions with best-effort notification fan-out."""

from .channels import (
    InMemoryStore,
    build_supabase_insert_row_from_env,
    clean_submission,
    create_app,
    create_app_from_env,
    dispatch_notifications,
    extract_record,
    handle_relay_event,
    handle_submission,
    insert_row_via_console,
    normalize_record,
    send_admin_email_notification,
    send_customer_email_notification,
    send_email_via_console,
    send_email_via_mailgun_from_env,
    send_email_via_smtp_from_env,
    send_sms_notification,
    send_sms_via_console,
    send_sms_via_twilio_from_env,
    verify_shared_secret,
)
from .config import Settings, load_settings
from .kinds import BOOKING, INQUIRY, RecordKind

__all__ = [
    "BOOKING",
    "INQUIRY",
    "InMemoryStore",
    "RecordKind",
    "Settings",
    "build_supabase_insert_row_from_env",
    "clean_submission",
    "create_app",
    "create_app_from_env",
    "dispatch_notifications",
    "extract_record",
    "handle_relay_event",
    "handle_submission",
    "insert_row_via_console",
    "load_settings",
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
