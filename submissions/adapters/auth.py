"""Shared-secret gate for the webhook relay endpoint.

The gate is optional: with no secret configured every event passes. Production
deployments refuse to start in that state (see `config.load_settings`).
"""

from __future__ import annotations

import hmac

from ..errors import AuthError

SHARED_SECRET_HEADER = "x-shared-secret"


def verify_shared_secret(header_value: str | None, expected_secret: str | None) -> None:
    """Raise `AuthError` unless the header equals the configured secret exactly."""
    if not expected_secret:
        return
    if not header_value:
        raise AuthError(f"missing {SHARED_SECRET_HEADER} header")
    if not hmac.compare_digest(header_value.encode("utf-8"), expected_secret.encode("utf-8")):
        raise AuthError(f"{SHARED_SECRET_HEADER} header does not match")
