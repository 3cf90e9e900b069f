"""Domain layer: validation rules, message templates, channel decision logic."""

from .email import send_admin_email_notification, send_customer_email_notification
from .sms import send_sms_notification
from .validation import is_valid_email, validate_submission

__all__ = [
    "is_valid_email",
    "send_admin_email_notification",
    "send_customer_email_notification",
    "send_sms_notification",
    "validate_submission",
]
