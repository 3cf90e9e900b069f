#!/usr/bin/env python3
"""Run sample inquiry/booking submissions locally without a server.

Rows go to an in-memory store and notifications are logged to the console.
Pass `--fail-channel` to see one channel fail while the submission still
succeeds.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from submissions.adapters.fake_senders import (  # noqa: E402
    InMemoryStore,
    send_email_via_console,
    send_sms_via_console,
)
from submissions.application.submit import handle_submission  # noqa: E402
from submissions.config import Settings  # noqa: E402
from submissions.kinds import get_record_kind  # noqa: E402


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")

    kind = get_record_kind(args.kind)
    payload = load_payload(args.payload_file, kind.name)
    settings = Settings(admin_email="owner@example.com", sms_from_number="+15555550100")
    store = InMemoryStore()

    def send_email(*, from_email: str, to_email: str, subject: str, body: str) -> None:
        if args.fail_channel == "customer_email" and to_email != settings.admin_email:
            raise RuntimeError("email provider unavailable")
        if args.fail_channel == "admin_email" and to_email == settings.admin_email:
            raise RuntimeError("email provider unavailable")
        send_email_via_console(from_email=from_email, to_email=to_email, subject=subject, body=body)

    def send_sms(*, from_phone: str, to_phone: str, message: str) -> None:
        if args.fail_channel == "sms":
            raise RuntimeError("sms provider unavailable")
        send_sms_via_console(from_phone=from_phone, to_phone=to_phone, message=message)

    result = handle_submission(
        payload,
        kind,
        settings,
        insert_row=store.insert_row,
        send_email=send_email,
        send_sms=send_sms,
    )

    print("")
    print("[SUMMARY]")
    print(f"status={result['status']} http_status={result['http_status']} body={result['body']}")
    print(f"stored_rows={sum(len(rows) for rows in store.tables.values())}")
    if result["notifications"] is not None:
        for item in result["notifications"]["channel_results"]:
            print(
                f"channel={item['channel']} requested={item['requested']} "
                f"success={item['success']} error={item['error']}"
            )
    return 0 if result["http_status"] == 200 else 1


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Execute the submission pipeline with a sample payload."
    )
    parser.add_argument(
        "--kind",
        choices=("inquiry", "booking"),
        default="booking",
        help="Which form to submit (default: booking).",
    )
    parser.add_argument(
        "--payload-file",
        type=Path,
        default=None,
        help="Optional JSON file with the form fields.",
    )
    parser.add_argument(
        "--fail-channel",
        choices=("customer_email", "admin_email", "sms"),
        default=None,
        help="Make one notification channel raise.",
    )
    return parser.parse_args()


def load_payload(payload_file: Path | None, kind_name: str) -> dict[str, Any]:
    if payload_file is None:
        return sample_payload(kind_name)
    with payload_file.open("r", encoding="utf-8") as file_handle:
        return json.load(file_handle)


def sample_payload(kind_name: str) -> dict[str, Any]:
    if kind_name == "inquiry":
        return {
            "name": "Jane Doe",
            "email": "jane@example.com",
            "phone": "",
            "vehicle": "",
            "message": "Pet odor removal",
            "company": "",
        }
    return {
        "name": "Sam Lee",
        "email": "sam@example.com",
        "phone": "+15555550123",
        "vehicle": "2019 Honda Pilot",
        "package": "GOLD – SUV ($290)",
        "date": "2026-11-02",
        "time": "10:00",
        "company": "",
    }


if __name__ == "__main__":
    sys.exit(main())
