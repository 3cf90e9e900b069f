"""Submission validation rules.

The email rule is deliberately loose: something, an `@`, something, a dot,
something. It only filters out obvious typos before a reply is attempted.
"""

from __future__ import annotations

import re

from ..errors import HoneypotTriggered, ValidationError
from ..types import Record

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
# RFC 5321 path limit; also bounds the backtracking cost of EMAIL_PATTERN.
MAX_EMAIL_LENGTH = 254
INVALID_EMAIL_MESSAGE = "Please enter a valid email."


def is_valid_email(value: str | None) -> bool:
    if not value or len(value) > MAX_EMAIL_LENGTH:
        return False
    return EMAIL_PATTERN.search(value) is not None


def validate_submission(row: Record, honeypot_value: str) -> None:
    """Raise if the submission must not be stored.

    The honeypot wins over every other rule so automated submitters always see
    the same response regardless of what else they filled in.
    """
    if honeypot_value:
        raise HoneypotTriggered("honeypot field is non-empty")
    if not is_valid_email(row.get("email")):
        raise ValidationError(INVALID_EMAIL_MESSAGE)
