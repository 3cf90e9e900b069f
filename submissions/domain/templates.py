"""Plain-text message templates per record kind.

Templates receive a normalized record, so every field is present and absent
values already read as a placeholder.
"""

from __future__ import annotations

from ..kinds import PLACEHOLDER, UNKNOWN_NAME
from ..types import Record


def customer_email(record: Record, kind_name: str, business_name: str) -> tuple[str, str]:
    name = _greeting_name(record)
    if kind_name == "booking":
        subject = "We got your booking request"
        body = (
            f"Thanks for booking{name}!\n\n"
            f"Package: {record['package']}\n"
            f"Date: {record['date']} at {record['time']}\n\n"
            "We'll confirm shortly. Reply to this email with any questions.\n\n"
            f"{business_name}"
        )
        return subject, body

    subject = "We got your message"
    body = (
        f"Thanks for reaching out{name}!\n\n"
        "We received your request:\n\n"
        f"{record['message']}\n\n"
        "We'll get back to you with a quote shortly. "
        "Reply to this email with any questions.\n\n"
        f"{business_name}"
    )
    return subject, body


def admin_email(record: Record, kind_name: str, business_name: str) -> tuple[str, str]:
    lines = [
        f"Name: {record['name']}",
        f"Email: {record['email']}",
        f"Phone: {record['phone']}",
        f"Vehicle: {record['vehicle']}",
    ]
    if kind_name == "booking":
        lines.append(f"Package: {record['package']}")
        lines.append(f"Date: {record['date']} {record['time']}")
    else:
        lines.append(f"Message: {record['message']}")

    subject = f"New {kind_name} received"
    body = f"A new {kind_name} was submitted on the {business_name} site:\n\n" + "\n".join(lines)
    return subject, body


def sms_message(record: Record, kind_name: str, business_name: str) -> str:
    if kind_name == "booking":
        when = " ".join(
            value for value in (_blank(record["date"]), _blank(record["time"])) if value
        )
        when_text = f" for {when}" if when else ""
        return f"{business_name}: Booking received{when_text}. We'll confirm shortly."
    return f"{business_name}: We received your inquiry and will reply shortly."


def _greeting_name(record: Record) -> str:
    name = record.get("name", UNKNOWN_NAME)
    if not name or name == UNKNOWN_NAME:
        return ""
    return f", {name}"


def _blank(value: str) -> str:
    return "" if value == PLACEHOLDER else value
