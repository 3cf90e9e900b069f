"""FastAPI transport adapter.

Mental model refresher:
- This is the controller-like entrypoint for inbound HTTP.
- Flow:
  request -> JSON body -> application use-case -> JSON response
- Every collaborator (store, email, SMS) is injected into `create_app`, so the
  app can be exercised without network access. `create_app_from_env` wires the
  real providers named in `Settings`.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from ..application.relay import handle_relay_event
from ..application.submit import handle_submission
from ..config import Settings, load_settings, warn_on_open_webhook
from ..kinds import BOOKING, INQUIRY, RecordKind
from ..types import HandlerResult, InsertRowFn, SendEmailFn, SendSMSFn
from .auth import SHARED_SECRET_HEADER
from .fake_senders import insert_row_via_console, send_email_via_console, send_sms_via_console
from .real_senders import (
    send_email_via_mailgun_from_env,
    send_email_via_smtp_from_env,
    send_sms_via_twilio_from_env,
)
from .store import build_supabase_insert_row_from_env

logger = logging.getLogger(__name__)

EMAIL_SENDERS: dict[str, SendEmailFn] = {
    "mailgun": send_email_via_mailgun_from_env,
    "smtp": send_email_via_smtp_from_env,
    "console": send_email_via_console,
}
SMS_SENDERS: dict[str, SendSMSFn] = {
    "twilio": send_sms_via_twilio_from_env,
    "console": send_sms_via_console,
}


def create_app(
    settings: Settings,
    *,
    insert_row: InsertRowFn,
    send_email: SendEmailFn,
    send_sms: SendSMSFn,
) -> FastAPI:
    app = FastAPI(title=f"{settings.business_name} submissions")
    warn_on_open_webhook(settings)

    async def submit(kind: RecordKind, request: Request) -> JSONResponse:
        payload = await _read_json(request)
        result = await run_in_threadpool(
            handle_submission,
            payload,
            kind,
            settings,
            insert_row=insert_row,
            send_email=send_email,
            send_sms=send_sms,
        )
        return _respond(result)

    @app.get("/health")
    async def health() -> dict[str, Any]:
        return {
            "status": "ok",
            "email_provider": settings.email_provider,
            "sms_enabled": settings.sms_enabled,
            "webhook_auth": settings.webhook_auth_enabled,
        }

    @app.post("/inquiry")
    async def submit_inquiry(request: Request) -> JSONResponse:
        return await submit(INQUIRY, request)

    @app.post("/booking")
    async def submit_booking(request: Request) -> JSONResponse:
        return await submit(BOOKING, request)

    @app.post("/webhook/new-record")
    async def relay_new_record(request: Request) -> JSONResponse:
        payload = await _read_json(request)
        result = await run_in_threadpool(
            handle_relay_event,
            payload,
            settings,
            shared_secret_header=request.headers.get(SHARED_SECRET_HEADER),
            send_email=send_email,
            send_sms=send_sms,
        )
        return _respond(result)

    return app


def create_app_from_env() -> FastAPI:
    """Build the app with the providers selected by environment variables."""
    settings = load_settings()
    if settings.store_provider == "supabase":
        insert_row = build_supabase_insert_row_from_env()
    else:
        insert_row = insert_row_via_console

    logger.info(
        "[APP START] app_env=%s store=%s email=%s sms=%s sms_enabled=%s",
        settings.app_env,
        settings.store_provider,
        settings.email_provider,
        settings.sms_provider,
        settings.sms_enabled,
    )
    return create_app(
        settings,
        insert_row=insert_row,
        send_email=EMAIL_SENDERS[settings.email_provider],
        send_sms=SMS_SENDERS[settings.sms_provider],
    )


async def _read_json(request: Request) -> Any:
    """Parse the body as JSON; an unreadable body becomes `None` for the use case to reject."""
    try:
        return await request.json()
    except ValueError:
        return None


def _respond(result: HandlerResult) -> JSONResponse:
    return JSONResponse(result["body"], status_code=result["http_status"])
