"""Declarative descriptors for the two submission kinds.

One handler serves both forms; everything that differs between an inquiry and
a booking (field set, legacy field names) lives here.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigError

HONEYPOT_FIELD = "company"

# Rendered in place of absent fields; never written to the store.
PLACEHOLDER = "—"
UNKNOWN_NAME = "Unknown"


@dataclass(frozen=True)
class RecordKind:
    name: str
    fields: tuple[str, ...]
    # (field, legacy_key) pairs read when the field itself is absent.
    aliases: tuple[tuple[str, str], ...] = ()

    def source_keys(self, field_name: str) -> tuple[str, ...]:
        legacy = tuple(alias for name, alias in self.aliases if name == field_name)
        return (field_name, *legacy)


INQUIRY = RecordKind(
    name="inquiry",
    fields=("name", "email", "phone", "vehicle", "message"),
)

BOOKING = RecordKind(
    name="booking",
    fields=("name", "email", "phone", "vehicle", "package", "date", "time"),
    aliases=(("package", "service"),),
)

RECORD_KINDS: dict[str, RecordKind] = {kind.name: kind for kind in (INQUIRY, BOOKING)}


def get_record_kind(name: str) -> RecordKind:
    try:
        return RECORD_KINDS[name.strip().lower()]
    except KeyError:
        raise ConfigError(f"Unknown record kind: {name!r}") from None
