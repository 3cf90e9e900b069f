"""Environment-variable configuration.

Settings are read once at startup into an immutable `Settings` value and passed
explicitly to the handlers. Provider credentials (Mailgun, SMTP, Twilio,
Supabase) are not part of `Settings`; the provider adapters read them at call
time so a missing credential fails only the call that needs it.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from .errors import ConfigError
from .kinds import RECORD_KINDS

logger = logging.getLogger(__name__)

EMAIL_PROVIDERS = frozenset({"mailgun", "smtp", "console"})
SMS_PROVIDERS = frozenset({"twilio", "console"})
STORE_PROVIDERS = frozenset({"supabase", "console"})


@dataclass(frozen=True)
class Settings:
    app_env: str = "development"
    business_name: str = "AC Detailing"
    admin_email: str | None = None
    customer_from_email: str = "bookings@example.com"
    alert_from_email: str = "alerts@example.com"
    sms_from_number: str | None = None
    shared_secret: str | None = None
    email_provider: str = "console"
    sms_provider: str = "console"
    store_provider: str = "console"
    inquiry_table: str = "inquiry_alerts"
    booking_table: str = "bookings"
    notify_via_webhook: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def sms_enabled(self) -> bool:
        return bool(self.sms_from_number)

    @property
    def webhook_auth_enabled(self) -> bool:
        return bool(self.shared_secret)

    def table_for(self, kind_name: str) -> str:
        if kind_name == "inquiry":
            return self.inquiry_table
        if kind_name == "booking":
            return self.booking_table
        raise ConfigError(f"No table configured for record kind: {kind_name!r}")

    def notify_on_submit(self, kind_name: str) -> bool:
        """False when the store's insert webhook owns notifications for this kind."""
        return kind_name not in self.notify_via_webhook


def load_settings() -> Settings:
    """Build `Settings` from the process environment.

    Raises `ConfigError` for unknown provider names, unknown record kinds in
    `NOTIFY_VIA_WEBHOOK`, and a production deployment without a webhook secret.
    """
    settings = Settings(
        app_env=os.getenv("APP_ENV", "development").strip().lower() or "development",
        business_name=os.getenv("BUSINESS_NAME", "AC Detailing").strip() or "AC Detailing",
        admin_email=_optional_env("ADMIN_EMAIL"),
        customer_from_email=os.getenv("CUSTOMER_FROM_EMAIL", "bookings@example.com").strip(),
        alert_from_email=os.getenv("ALERT_FROM_EMAIL", "alerts@example.com").strip(),
        sms_from_number=_optional_env("SMS_FROM_NUMBER"),
        shared_secret=_optional_env("WEBHOOK_SHARED_SECRET"),
        email_provider=_env_choice("EMAIL_PROVIDER", EMAIL_PROVIDERS, default="console"),
        sms_provider=_env_choice("SMS_PROVIDER", SMS_PROVIDERS, default="console"),
        store_provider=_env_choice("STORE_PROVIDER", STORE_PROVIDERS, default="console"),
        inquiry_table=os.getenv("INQUIRY_TABLE", "inquiry_alerts").strip() or "inquiry_alerts",
        booking_table=os.getenv("BOOKING_TABLE", "bookings").strip() or "bookings",
        notify_via_webhook=_notify_via_webhook_from_env(),
    )

    if settings.is_production and not settings.webhook_auth_enabled:
        raise ConfigError(
            "WEBHOOK_SHARED_SECRET must be set when APP_ENV=production"
        )
    return settings


def warn_on_open_webhook(settings: Settings) -> None:
    if not settings.webhook_auth_enabled:
        logger.warning(
            "[CONFIG] WEBHOOK_SHARED_SECRET is not set; "
            "webhook relay accepts unauthenticated events app_env=%s",
            settings.app_env,
        )


def _optional_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    text = value.strip()
    return text or None


def _required_env(name: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        raise ConfigError(f"Missing required environment variable: {name}")
    return value.strip()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"Invalid number for {name}: {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be > 0")
    return value


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"Invalid integer for {name}: {raw!r}") from None


def _env_csv(name: str) -> list[str]:
    raw = os.getenv(name, "")
    return [item.strip().lower() for item in raw.split(",") if item.strip()]


def _env_choice(name: str, choices: frozenset[str], *, default: str) -> str:
    value = os.getenv(name, default).strip().lower() or default
    if value not in choices:
        allowed = ", ".join(sorted(choices))
        raise ConfigError(f"Invalid value for {name}: {value!r} (expected one of: {allowed})")
    return value


def _notify_via_webhook_from_env() -> frozenset[str]:
    kinds = _env_csv("NOTIFY_VIA_WEBHOOK")
    unknown = [name for name in kinds if name not in RECORD_KINDS]
    if unknown:
        raise ConfigError(f"NOTIFY_VIA_WEBHOOK names unknown record kinds: {unknown}")
    return frozenset(kinds)
