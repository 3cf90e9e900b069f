"""Supabase row-insert adapter.

Mental model refresher:
- This module is the outbound adapter to the relational store.
- Application code only sees an `insert_row(*, table, row)` callable.
- The Supabase client is built once and reused for the process lifetime.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..config import _env_float, _required_env
from ..errors import PersistenceError
from ..types import InsertRowFn

DEFAULT_TIMEOUT_SECONDS = 5.0


def build_supabase_insert_row_from_env() -> InsertRowFn:
    """Create a Supabase client from the environment and return an insert callable."""
    url = _required_env("SUPABASE_URL")
    key = _required_env("SUPABASE_SERVICE_ROLE_KEY")
    timeout_seconds = _env_float("SUPABASE_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)

    create_client, ClientOptions = _import_supabase()
    client = create_client(url, key, options=ClientOptions(postgrest_client_timeout=timeout_seconds))

    def insert_row_via_supabase(*, table: str, row: Mapping[str, Any]) -> None:
        try:
            client.table(table).insert(dict(row)).execute()
        except Exception as exc:
            raise PersistenceError(f"Supabase insert into {table} failed: {exc}") from exc

    return insert_row_via_supabase


def _import_supabase() -> tuple[Any, Any]:
    try:
        from supabase import ClientOptions, create_client
    except ImportError as exc:
        raise RuntimeError(
            "Supabase support requires `supabase`. Install with: pip install supabase"
        ) from exc
    return create_client, ClientOptions
