"""Payload adapter functions.

Mental model refresher:
- This is an adapter/edge module.
- It translates transport-shaped data (form JSON, store change events) into
  the plain record dictionaries used by application/domain code.
- Extraction is best-effort and never raises; validation happens afterwards,
  on the extracted record.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..domain.validation import is_valid_email
from ..errors import ValidationError
from ..kinds import HONEYPOT_FIELD, PLACEHOLDER, UNKNOWN_NAME, RecordKind
from ..types import Record, RecordDict

# Keys a store change event may nest the new row under, in lookup order.
RECORD_WRAPPER_KEYS = ("record", "new")


def extract_record(payload: Any) -> dict[str, Any]:
    """Locate the inserted row inside a loosely shaped change event."""
    if not isinstance(payload, Mapping):
        return {}
    for key in RECORD_WRAPPER_KEYS:
        nested = payload.get(key)
        if isinstance(nested, Mapping) and nested:
            return dict(nested)
    return dict(payload)


def describe_envelope(payload: Any) -> tuple[str | None, str | None]:
    """Return `(event_type, table)` when the payload wraps the row, else `(None, None)`.

    A bare row may legitimately have columns named `type` or `table`, so they
    are only trusted once a wrapper key proves this is an envelope.
    """
    if not isinstance(payload, Mapping):
        return None, None
    wrapped = any(
        isinstance(payload.get(key), Mapping) and payload.get(key)
        for key in RECORD_WRAPPER_KEYS
    )
    if not wrapped:
        return None, None
    return _as_optional_str(payload.get("type")), _as_optional_str(payload.get("table"))


def normalize_record(record: Mapping[str, Any], kind: RecordKind) -> RecordDict:
    """Map a raw row onto the kind's canonical fields with placeholders for gaps.

    This is the handoff from store data to notification data: every field in
    `kind.fields` is present in the result and none is empty.
    """
    normalized: RecordDict = {}
    for field_name in kind.fields:
        value = _first_present(record, kind.source_keys(field_name))
        if not value:
            value = UNKNOWN_NAME if field_name == "name" else PLACEHOLDER
        normalized[field_name] = value
    return normalized


def require_contact_email(record: Record) -> str:
    email = record.get("email")
    if not is_valid_email(email):
        raise ValidationError("record has no usable contact email")
    return email


def clean_submission(payload: Mapping[str, Any], kind: RecordKind) -> tuple[RecordDict, str]:
    """Split a direct form submission into the row to store and the honeypot value.

    The row holds exactly the kind's fields as stripped strings; absent values
    are stored as empty strings, not placeholders. The honeypot value is
    returned unstripped so whitespace alone still marks the submission as spam.
    """
    row = {
        field_name: _first_present(payload, kind.source_keys(field_name))
        for field_name in kind.fields
    }
    return row, _honeypot_text(payload.get(HONEYPOT_FIELD))


def _first_present(record: Mapping[str, Any], keys: tuple[str, ...]) -> str:
    for key in keys:
        text = _as_text(record.get(key))
        if text:
            return text
    return ""


def _as_text(value: Any) -> str:
    # Structured or boolean values never hold a usable form answer.
    if value is None or isinstance(value, (bool, Mapping, list, tuple, set)):
        return ""
    return str(value).strip()


def _honeypot_text(value: Any) -> str:
    """Any truthy value counts, whitespace included; falsy values are empty."""
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_optional_str(value: Any) -> str | None:
    text = _as_text(value)
    return text or None
