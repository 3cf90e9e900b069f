"""Real provider adapters for production sending.

Mental model refresher:
- This module is an outbound adapter.
- It integrates with external providers using environment-variable config.
- Domain/application code only sees simple callable sender functions.
- Every provider failure, including missing credentials, surfaces as
  `NotificationError` so the channel that called it records a failure.
"""

from __future__ import annotations

import base64
import os
import smtplib
import urllib.error
import urllib.parse
import urllib.request
from email.message import EmailMessage
from email.utils import parseaddr

from ..config import _env_float, _env_int, _required_env
from ..errors import ConfigError, NotificationError

DEFAULT_TIMEOUT_SECONDS = 5.0


def send_email_via_mailgun_from_env(
    *, from_email: str, to_email: str, subject: str, body: str
) -> None:
    """Send email via Mailgun REST API using environment-variable config."""
    try:
        api_key = _required_env("MAILGUN_API_KEY")
        domain = _required_env("MAILGUN_DOMAIN")
        timeout_seconds = _env_float("MAILGUN_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)
    except ConfigError as exc:
        raise NotificationError(f"Mailgun is not configured: {exc}") from exc
    base_url = os.getenv("MAILGUN_API_BASE_URL", "https://api.mailgun.net").rstrip("/")

    encoded_domain = urllib.parse.quote(domain, safe="")
    endpoint = f"{base_url}/v3/{encoded_domain}/messages"
    payload = urllib.parse.urlencode(
        {"from": from_email, "to": to_email, "subject": subject, "text": body}
    ).encode("utf-8")

    _post_form(
        endpoint,
        payload,
        auth_header=_basic_auth_header("api", api_key),
        timeout_seconds=timeout_seconds,
        provider="Mailgun email send",
    )


def send_email_via_smtp_from_env(
    *, from_email: str, to_email: str, subject: str, body: str
) -> None:
    """Send email over SMTP with STARTTLS using environment-variable config."""
    try:
        host = _required_env("SMTP_HOST")
        port = _env_int("SMTP_PORT", 587)
        timeout_seconds = _env_float("SMTP_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)
    except ConfigError as exc:
        raise NotificationError(f"SMTP is not configured: {exc}") from exc
    user = os.getenv("SMTP_USER")
    password = os.getenv("SMTP_PASS")

    message = EmailMessage()
    message["Subject"] = subject
    message["From"] = from_email
    message["To"] = to_email
    message.set_content(body)

    try:
        with smtplib.SMTP(host, port, timeout=timeout_seconds) as server:
            server.starttls()
            if user and password:
                server.login(user, password)
            server.send_message(message, from_addr=parseaddr(from_email)[1], to_addrs=[to_email])
    except (smtplib.SMTPException, OSError) as exc:
        raise NotificationError(f"SMTP email send failed: {exc}") from exc


def send_sms_via_twilio_from_env(*, from_phone: str, to_phone: str, message: str) -> None:
    """Send SMS via Twilio REST API using environment-variable config."""
    try:
        account_sid = _required_env("TWILIO_ACCOUNT_SID")
        auth_token = _required_env("TWILIO_AUTH_TOKEN")
        timeout_seconds = _env_float("TWILIO_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)
    except ConfigError as exc:
        raise NotificationError(f"Twilio is not configured: {exc}") from exc
    base_url = os.getenv("TWILIO_API_BASE_URL", "https://api.twilio.com").rstrip("/")

    endpoint = f"{base_url}/2010-04-01/Accounts/{account_sid}/Messages.json"
    payload = urllib.parse.urlencode(
        {"To": to_phone, "From": from_phone, "Body": message}
    ).encode("utf-8")

    _post_form(
        endpoint,
        payload,
        auth_header=_basic_auth_header(account_sid, auth_token),
        timeout_seconds=timeout_seconds,
        provider="Twilio SMS send",
    )


def _post_form(
    endpoint: str,
    payload: bytes,
    *,
    auth_header: str,
    timeout_seconds: float,
    provider: str,
) -> None:
    request = urllib.request.Request(endpoint, data=payload, method="POST")
    request.add_header("Authorization", auth_header)
    request.add_header("Content-Type", "application/x-www-form-urlencoded")

    try:
        with urllib.request.urlopen(request, timeout=timeout_seconds) as response:
            status = int(response.getcode())
            if status < 200 or status >= 300:
                raise NotificationError(f"{provider} failed with status {status}")
            response.read()
    except urllib.error.HTTPError as exc:
        details = exc.read().decode("utf-8", errors="replace")
        raise NotificationError(f"{provider} failed HTTP {exc.code}: {details[:300]}") from exc
    except urllib.error.URLError as exc:
        raise NotificationError(f"{provider} failed: {exc.reason}") from exc
    except TimeoutError as exc:
        raise NotificationError(f"{provider} timed out after {timeout_seconds}s") from exc


def _basic_auth_header(username: str, password: str) -> str:
    token = f"{username}:{password}".encode("utf-8")
    encoded = base64.b64encode(token).decode("ascii")
    return f"Basic {encoded}"
