from __future__ import annotations

import unittest
from typing import Any

from submissions.adapters.payload import (
    clean_submission,
    describe_envelope,
    extract_record,
    normalize_record,
    require_contact_email,
)
from submissions.errors import ValidationError
from submissions.kinds import BOOKING, INQUIRY, PLACEHOLDER, UNKNOWN_NAME


def make_row(**overrides: Any) -> dict[str, Any]:
    base: dict[str, Any] = {
        "name": "Sam Lee",
        "email": "sam@example.com",
        "phone": "+15555550123",
        "vehicle": "2019 Honda Pilot",
        "package": "GOLD – SUV ($290)",
        "date": "2026-11-02",
        "time": "10:00",
    }
    return base | overrides


class ExtractRecordTests(unittest.TestCase):
    def test_extract_record_is_stable_across_envelope_shapes(self) -> None:
        row = make_row()
        shapes = [
            {"type": "INSERT", "table": "bookings", "record": row},
            {"type": "INSERT", "table": "bookings", "new": row},
            row,
        ]

        normalized = [normalize_record(extract_record(shape), BOOKING) for shape in shapes]

        self.assertEqual(normalized[0], normalized[1])
        self.assertEqual(normalized[1], normalized[2])
        self.assertEqual(normalized[0]["email"], "sam@example.com")

    def test_extract_record_prefers_record_over_new(self) -> None:
        payload = {
            "record": make_row(email="record@example.com"),
            "new": make_row(email="new@example.com"),
        }

        self.assertEqual(extract_record(payload)["email"], "record@example.com")

    def test_extract_record_skips_empty_wrapper(self) -> None:
        payload = {"record": {}, "new": make_row(email="new@example.com")}

        self.assertEqual(extract_record(payload)["email"], "new@example.com")

    def test_extract_record_returns_empty_for_non_mapping(self) -> None:
        self.assertEqual(extract_record(None), {})
        self.assertEqual(extract_record(["not", "a", "row"]), {})

    def test_describe_envelope_ignores_bare_rows(self) -> None:
        row = make_row(type="SUV", table="folding")

        self.assertEqual(describe_envelope(row), (None, None))
        self.assertEqual(
            describe_envelope({"type": "UPDATE", "table": "bookings", "record": row}),
            ("UPDATE", "bookings"),
        )


class NormalizeRecordTests(unittest.TestCase):
    def test_missing_fields_get_placeholders(self) -> None:
        normalized = normalize_record({"email": "jane@example.com", "phone": "  "}, BOOKING)

        self.assertEqual(normalized["name"], UNKNOWN_NAME)
        self.assertEqual(normalized["phone"], PLACEHOLDER)
        self.assertEqual(normalized["package"], PLACEHOLDER)
        self.assertEqual(normalized["time"], PLACEHOLDER)
        self.assertEqual(set(normalized), set(BOOKING.fields))

    def test_booking_package_falls_back_to_service(self) -> None:
        row = make_row()
        del row["package"]
        row["service"] = "Interior + Exterior"

        normalized = normalize_record(row, BOOKING)

        self.assertEqual(normalized["package"], "Interior + Exterior")

    def test_non_string_values_are_stringified(self) -> None:
        normalized = normalize_record({"email": "a@b.co", "phone": 5555550123}, INQUIRY)

        self.assertEqual(normalized["phone"], "5555550123")

    def test_require_contact_email_rejects_placeholder(self) -> None:
        normalized = normalize_record({"name": "No Email"}, BOOKING)

        with self.assertRaises(ValidationError):
            require_contact_email(normalized)

    def test_require_contact_email_returns_address(self) -> None:
        normalized = normalize_record(make_row(), BOOKING)

        self.assertEqual(require_contact_email(normalized), "sam@example.com")


class CleanSubmissionTests(unittest.TestCase):
    def test_clean_submission_keeps_only_kind_fields(self) -> None:
        payload = {
            "name": "  Jane Doe ",
            "email": "jane@example.com",
            "message": "Pet odor removal",
            "company": "",
            "unexpected": "dropped",
        }

        row, honeypot = clean_submission(payload, INQUIRY)

        self.assertEqual(
            row,
            {
                "name": "Jane Doe",
                "email": "jane@example.com",
                "phone": "",
                "vehicle": "",
                "message": "Pet odor removal",
            },
        )
        self.assertEqual(honeypot, "")

    def test_clean_submission_returns_honeypot_value(self) -> None:
        _row, honeypot = clean_submission({"company": " Acme "}, INQUIRY)

        self.assertEqual(honeypot, " Acme ")

    def test_clean_submission_whitespace_honeypot_is_not_empty(self) -> None:
        _row, honeypot = clean_submission({"company": "   "}, INQUIRY)

        self.assertTrue(honeypot)

    def test_clean_submission_falsy_honeypot_values_are_empty(self) -> None:
        for value in (None, "", False, 0, [], {}):
            with self.subTest(value=value):
                _row, honeypot = clean_submission({"company": value}, INQUIRY)

                self.assertEqual(honeypot, "")

    def test_clean_submission_drops_structured_field_values(self) -> None:
        row, _honeypot = clean_submission(
            {"email": "a@b.co", "vehicle": ["Civic"], "message": {"text": "hi"}, "phone": True},
            INQUIRY,
        )

        self.assertEqual(row["vehicle"], "")
        self.assertEqual(row["message"], "")
        self.assertEqual(row["phone"], "")


if __name__ == "__main__":
    unittest.main()
