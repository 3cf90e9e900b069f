#!/usr/bin/env python3
"""POST one store "row inserted" envelope to a running service for testing."""

from __future__ import annotations

import argparse
import json
import os
import sys
import urllib.error
import urllib.request
from pathlib import Path

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parents[1]


def main() -> int:
    load_dotenv(REPO_ROOT / ".env")
    args = parse_args()
    envelope = build_envelope(args)

    request = urllib.request.Request(
        args.url,
        data=json.dumps(envelope).encode("utf-8"),
        method="POST",
    )
    request.add_header("Content-Type", "application/json")
    secret = args.secret or os.getenv("WEBHOOK_SHARED_SECRET")
    if secret:
        request.add_header("x-shared-secret", secret)

    try:
        with urllib.request.urlopen(request, timeout=args.timeout) as response:
            status = int(response.getcode())
            body = response.read().decode("utf-8", errors="replace")
    except urllib.error.HTTPError as exc:
        status = exc.code
        body = exc.read().decode("utf-8", errors="replace")

    print("[RELAYED]")
    print(f"status={status}")
    print(f"body={body}")
    return 0 if 200 <= status < 300 else 1


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Send a sample row-inserted webhook to /webhook/new-record."
    )
    parser.add_argument(
        "--email",
        required=True,
        help="Customer email placed in the relayed row.",
    )
    parser.add_argument(
        "--phone",
        default=None,
        help="Optional customer phone (enables the SMS channel when configured).",
    )
    parser.add_argument(
        "--table",
        default=os.getenv("BOOKING_TABLE", "bookings"),
        help="Table name in the envelope (default: BOOKING_TABLE or bookings).",
    )
    parser.add_argument(
        "--url",
        default="http://localhost:8000/webhook/new-record",
        help="Relay endpoint URL.",
    )
    parser.add_argument(
        "--secret",
        default=None,
        help="Shared secret header value (default: WEBHOOK_SHARED_SECRET).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=5.0,
        help="Request timeout in seconds.",
    )
    return parser.parse_args()


def build_envelope(args: argparse.Namespace) -> dict[str, object]:
    record: dict[str, object] = {
        "name": "Sam Lee",
        "email": args.email,
        "vehicle": "2019 Honda Pilot",
        "package": "GOLD – SUV ($290)",
        "date": "2026-11-02",
        "time": "10:00",
        "message": "Relayed test row",
    }
    if args.phone:
        record["phone"] = args.phone

    return {
        "type": "INSERT",
        "table": args.table,
        "schema": "public",
        "record": record,
        "old_record": None,
    }


if __name__ == "__main__":
    sys.exit(main())
