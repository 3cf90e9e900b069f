"""Fake collaborators for local runs and smoke tests.

Mental model refresher:
- This is outbound adapter code.
- In production, provider SDK/API calls live in `real_senders` and `store`.
- Application code calls these through injected functions; it does not know
  which implementation is underneath.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

logger = logging.getLogger(__name__)


def send_email_via_console(*, from_email: str, to_email: str, subject: str, body: str) -> None:
    logger.info(
        "[EMAIL] from=%s to=%s subject=%s\n%s", from_email, to_email, subject, body
    )


def send_sms_via_console(*, from_phone: str, to_phone: str, message: str) -> None:
    logger.info("[SMS] from=%s to=%s message=%s", from_phone, to_phone, message)


def insert_row_via_console(*, table: str, row: Mapping[str, Any]) -> None:
    logger.info("[INSERT] table=%s row=%s", table, dict(row))


class InMemoryStore:
    """Keeps inserted rows per table; used by the local demo script."""

    def __init__(self) -> None:
        self.tables: dict[str, list[dict[str, Any]]] = {}

    def insert_row(self, *, table: str, row: Mapping[str, Any]) -> None:
        self.tables.setdefault(table, []).append(dict(row))
        logger.info("[INSERT] table=%s rows=%d", table, len(self.tables[table]))
