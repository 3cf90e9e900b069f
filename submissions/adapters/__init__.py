"""Adapter layer: payload mapping, inbound auth, provider implementations.

The FastAPI app lives in `http_app` and is not re-exported here because it
depends on the application layer, which in turn depends on these adapters.
"""

from .auth import SHARED_SECRET_HEADER, verify_shared_secret
from .fake_senders import (
    InMemoryStore,
    insert_row_via_console,
    send_email_via_console,
    send_sms_via_console,
)
from .payload import clean_submission, extract_record, normalize_record, require_contact_email
from .real_senders import (
    send_email_via_mailgun_from_env,
    send_email_via_smtp_from_env,
    send_sms_via_twilio_from_env,
)
from .store import build_supabase_insert_row_from_env

__all__ = [
    "InMemoryStore",
    "SHARED_SECRET_HEADER",
    "build_supabase_insert_row_from_env",
    "clean_submission",
    "extract_record",
    "insert_row_via_console",
    "normalize_record",
    "require_contact_email",
    "send_email_via_console",
    "send_email_via_mailgun_from_env",
    "send_email_via_smtp_from_env",
    "send_sms_via_console",
    "send_sms_via_twilio_from_env",
    "verify_shared_secret",
]
