"""Result dictionaries returned by the use cases to the transport layer."""

from __future__ import annotations

from typing import Any

from ..types import HandlerResult


def build_result(
    status: str,
    http_status: int,
    body: dict[str, Any],
    *,
    record: dict[str, str] | None = None,
    notifications: dict[str, Any] | None = None,
    error: str | None = None,
) -> HandlerResult:
    return {
        "status": status,
        "http_status": http_status,
        "body": body,
        "record": record,
        "notifications": notifications,
        "error": error,
    }
