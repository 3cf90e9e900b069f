from __future__ import annotations

import unittest
from dataclasses import replace
from typing import Any

from submissions.application.relay import handle_relay_event
from submissions.config import Settings

SETTINGS = Settings(
    admin_email="owner@example.com",
    sms_from_number="+15555550100",
    shared_secret="s3cret",
)


def make_row(**overrides: Any) -> dict[str, Any]:
    base: dict[str, Any] = {
        "id": 41,
        "name": "Sam Lee",
        "email": "sam@example.com",
        "phone": "+15555550123",
        "vehicle": "2019 Honda Pilot",
        "package": "GOLD – SUV ($290)",
        "date": "2026-11-02",
        "time": "10:00",
    }
    return base | overrides


def make_envelope(row: dict[str, Any] | None = None, **overrides: Any) -> dict[str, Any]:
    base: dict[str, Any] = {
        "type": "INSERT",
        "table": "bookings",
        "schema": "public",
        "record": row if row is not None else make_row(),
        "old_record": None,
    }
    return base | overrides


class Outbox:
    def __init__(self) -> None:
        self.emails: list[dict[str, str]] = []
        self.sms: list[dict[str, str]] = []

    def send_email(self, *, from_email: str, to_email: str, subject: str, body: str) -> None:
        self.emails.append({"to_email": to_email, "subject": subject, "body": body})

    def send_sms(self, *, from_phone: str, to_phone: str, message: str) -> None:
        self.sms.append({"to_phone": to_phone, "message": message})

    def relay(
        self,
        payload: Any,
        *,
        header: str | None = "s3cret",
        settings: Settings = SETTINGS,
    ) -> dict[str, Any]:
        return handle_relay_event(
            payload,
            settings,
            shared_secret_header=header,
            send_email=self.send_email,
            send_sms=self.send_sms,
        )


class RelayAuthTests(unittest.TestCase):
    def test_mismatched_or_missing_secret_is_unauthorized(self) -> None:
        for header in (None, "", "wrong", "s3cret ", "S3CRET"):
            with self.subTest(header=header):
                outbox = Outbox()

                result = outbox.relay(make_envelope(), header=header)

                self.assertEqual(result["status"], "unauthorized")
                self.assertEqual(result["http_status"], 401)
                self.assertEqual(result["body"], {"ok": False, "error": "bad signature"})
                self.assertEqual(outbox.emails, [])
                self.assertEqual(outbox.sms, [])

    def test_unconfigured_secret_skips_the_check(self) -> None:
        outbox = Outbox()
        settings = replace(SETTINGS, shared_secret=None)

        result = outbox.relay(make_envelope(), header=None, settings=settings)

        self.assertEqual(result["http_status"], 200)
        self.assertEqual(result["body"], {"ok": True})


class RelayProcessingTests(unittest.TestCase):
    def test_insert_event_fans_out(self) -> None:
        outbox = Outbox()

        result = outbox.relay(make_envelope())

        self.assertEqual(result["status"], "notified")
        self.assertEqual(result["body"], {"ok": True})
        self.assertEqual(
            [item["to_email"] for item in outbox.emails],
            ["sam@example.com", "owner@example.com"],
        )
        self.assertEqual(outbox.emails[1]["subject"], "New booking received")
        self.assertEqual(len(outbox.sms), 1)

    def test_payload_shapes_produce_identical_notifications(self) -> None:
        row = make_row()
        shapes = [
            {"type": "INSERT", "table": "bookings", "record": row},
            {"type": "INSERT", "table": "bookings", "new": row},
            row,
        ]
        outboxes = []
        for shape in shapes:
            outbox = Outbox()
            outbox.relay(shape)
            outboxes.append((outbox.emails, outbox.sms))

        self.assertEqual(outboxes[0], outboxes[1])
        self.assertEqual(outboxes[1], outboxes[2])

    def test_missing_email_is_rejected(self) -> None:
        for row in (make_row(email=None), make_row(email="   "), make_row(email="nope")):
            with self.subTest(row=row):
                outbox = Outbox()

                result = outbox.relay(make_envelope(row))

                self.assertEqual(result["http_status"], 400)
                self.assertEqual(result["body"], {"ok": False, "error": "no booking/email"})
                self.assertEqual(outbox.emails, [])

    def test_unreadable_body_is_rejected(self) -> None:
        outbox = Outbox()

        result = outbox.relay(None)

        self.assertEqual(result["http_status"], 400)
        self.assertEqual(outbox.emails, [])

    def test_non_insert_events_are_skipped(self) -> None:
        for event_type in ("UPDATE", "DELETE"):
            with self.subTest(event_type=event_type):
                outbox = Outbox()

                result = outbox.relay(make_envelope(type=event_type))

                self.assertEqual(result["status"], "skipped")
                self.assertEqual(result["http_status"], 200)
                self.assertEqual(result["body"], {"ok": True, "skipped": event_type})
                self.assertEqual(outbox.emails, [])

    def test_inquiry_table_selects_inquiry_templates(self) -> None:
        outbox = Outbox()
        row = {"name": "Jane Doe", "email": "jane@example.com", "message": "Pet odor removal"}

        result = outbox.relay(make_envelope(row, table="inquiry_alerts"))

        self.assertEqual(result["record"]["message"], "Pet odor removal")
        self.assertEqual(outbox.emails[1]["subject"], "New inquiry received")
        self.assertIn("Message: Pet odor removal", outbox.emails[1]["body"])

    def test_inquiry_without_email_names_the_inquiry_kind(self) -> None:
        outbox = Outbox()

        result = outbox.relay(make_envelope({"name": "Jane Doe"}, table="inquiry_alerts"))

        self.assertEqual(result["http_status"], 400)
        self.assertEqual(result["body"], {"ok": False, "error": "no inquiry/email"})
        self.assertEqual(outbox.emails, [])

    def test_channel_failure_still_reports_ok(self) -> None:
        outbox = Outbox()

        def failing_send_email(*, from_email: str, to_email: str, subject: str, body: str) -> None:
            raise RuntimeError("email provider unavailable")

        result = handle_relay_event(
            make_envelope(),
            SETTINGS,
            shared_secret_header="s3cret",
            send_email=failing_send_email,
            send_sms=outbox.send_sms,
        )

        self.assertEqual(result["http_status"], 200)
        self.assertEqual(len(outbox.sms), 1)

    def test_unexpected_error_returns_server_error(self) -> None:
        outbox = Outbox()

        class ExplodingRow(dict):
            def get(self, key: str, default: Any = None) -> Any:
                raise RuntimeError("corrupt row")

        result = outbox.relay(ExplodingRow(make_row()))

        self.assertEqual(result["status"], "failed")
        self.assertEqual(result["http_status"], 500)
        self.assertEqual(result["body"], {"ok": False, "error": "server error"})


if __name__ == "__main__":
    unittest.main()
