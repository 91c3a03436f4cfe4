#!/usr/bin/env python3
"""
Integration tests for the extract and stats commands

Covers the full path from a Gmail API message dump to spend statistics.
"""

import json

import pandas as pd
import pytest
from click.testing import CliRunner

from subtracker.cli.main import main
from tests.fixtures.mail_samples import gmail_message, multipart_message, text_part


def message_dump() -> list[dict]:
    return [
        gmail_message(
            "Netflix <info@account.netflix.com>",
            "Your Netflix receipt",
            "Premium plan. Amount: ₺149,99",
            message_id="m1",
        ),
        gmail_message("Grandma <grandma@example.org>", "Lunch", "Bring dessert", message_id="m2"),
        multipart_message(
            "Adobe <mail@mail.adobe.com>",
            "Your invoice",
            [text_part("Creative Cloud annual plan"), text_part("<b>USD 600.00</b>", "text/html")],
            message_id="m3",
        ),
        gmail_message("no-reply@spotify.com", "Account update", "Your password changed", message_id="m4"),
    ]


@pytest.fixture
def messages_file(tmp_path):
    path = tmp_path / "messages.json"
    path.write_text(json.dumps({"messages": message_dump()}), encoding="utf-8")
    return path


@pytest.mark.integration
class TestExtractCommand:
    def setup_method(self):
        self.runner = CliRunner()

    def test_extract_writes_records(self, messages_file, tmp_path):
        output = tmp_path / "out" / "subs.json"
        result = self.runner.invoke(main, ["extract", str(messages_file), "--output", str(output)])

        assert result.exit_code == 0, result.output
        assert "Extracted 2 of 4 mail items" in result.output
        assert "Unrecognized senders: 1" in result.output
        assert "Recognized but unparsed: 1" in result.output

        records = json.loads(output.read_text(encoding="utf-8"))
        assert [record["name"] for record in records] == ["Netflix", "Adobe Creative Cloud"]
        assert records[1]["currency"] == "USD"
        assert records[1]["billingCycle"] == "yearly"
        assert records[0]["provider"] == "netflix"

    def test_extract_default_output_location(self, messages_file, tmp_path):
        result = self.runner.invoke(main, ["extract", str(messages_file)])

        assert result.exit_code == 0, result.output
        written = list((tmp_path / "data" / "exports").glob("*_subscriptions.json"))
        assert len(written) == 1

    def test_extract_csv(self, messages_file, tmp_path):
        csv_file = tmp_path / "subs.csv"
        result = self.runner.invoke(
            main,
            ["extract", str(messages_file), "-o", str(tmp_path / "subs.json"), "--csv", str(csv_file)],
        )

        assert result.exit_code == 0, result.output
        df = pd.read_csv(csv_file)
        assert list(df["name"]) == ["Netflix", "Adobe Creative Cloud"]
        assert list(df["monthly_equivalent"]) == [149.99, 50.0]

    def test_extract_with_workers(self, messages_file, tmp_path):
        output = tmp_path / "subs.json"
        result = self.runner.invoke(main, ["extract", str(messages_file), "-o", str(output), "--workers", "3"])

        assert result.exit_code == 0, result.output
        assert "(3 workers)" in result.output
        records = json.loads(output.read_text(encoding="utf-8"))
        assert [record["name"] for record in records] == ["Netflix", "Adobe Creative Cloud"]

    def test_extract_rejects_zero_workers(self, messages_file):
        result = self.runner.invoke(main, ["extract", str(messages_file), "--workers", "0"])
        assert result.exit_code != 0

    def test_extract_tolerates_malformed_messages(self, tmp_path):
        path = tmp_path / "messages.json"
        messages = message_dump() + [{"id": "bad", "payload": {"headers": 5, "parts": 7}}]
        path.write_text(json.dumps(messages), encoding="utf-8")
        result = self.runner.invoke(main, ["extract", str(path), "-o", str(tmp_path / "subs.json")])

        assert result.exit_code == 0, result.output
        assert "Extracted 2 of 5 mail items" in result.output
        assert "Unrecognized senders: 2" in result.output

    def test_extract_bad_json_shape(self, tmp_path):
        path = tmp_path / "messages.json"
        path.write_text(json.dumps({"messages": "nope"}), encoding="utf-8")
        result = self.runner.invoke(main, ["extract", str(path)])

        assert result.exit_code != 0
        assert "Cannot read" in result.output


@pytest.mark.integration
class TestStatsCommand:
    def setup_method(self):
        self.runner = CliRunner()

    def test_extract_then_stats(self, messages_file, tmp_path):
        subs = tmp_path / "subs.json"
        self.runner.invoke(main, ["extract", str(messages_file), "-o", str(subs)])
        result = self.runner.invoke(main, ["stats", str(subs)])

        assert result.exit_code == 0, result.output
        assert "Active: 2 of 2" in result.output
        assert "Monthly total: ₺199.99" in result.output
        assert "2. Adobe Creative Cloud: ₺50.00" in result.output
        assert "1. Netflix: ₺149.99" in result.output
        assert "Video Streaming: ₺149.99" in result.output

    def test_stats_json(self, tmp_path):
        subs = tmp_path / "subs.json"
        subs.write_text(
            json.dumps(
                [
                    {"name": "A", "price": 100, "billingCycle": "monthly", "isActive": True},
                    {"name": "B", "price": 1200, "billingCycle": "yearly", "isActive": True},
                    {"name": "C", "price": 50, "billingCycle": "monthly", "isActive": False},
                ]
            ),
            encoding="utf-8",
        )
        result = self.runner.invoke(main, ["stats", str(subs), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["totalMonthly"] == 200
        assert data["totalYearly"] == 2400
        assert data["activeCount"] == 2
        assert data["totalCount"] == 3
        assert data["upcomingRenewals"] == []

    def test_stats_without_renewals(self, tmp_path):
        subs = tmp_path / "subs.json"
        subs.write_text(json.dumps([{"name": "Gym", "price": 250}]), encoding="utf-8")
        result = self.runner.invoke(main, ["stats", str(subs), "--horizon", "7"])

        assert result.exit_code == 0, result.output
        assert "No renewals in the next 7 days" in result.output

    def test_samples_then_stats(self, tmp_path):
        result = self.runner.invoke(main, ["samples"])

        assert result.exit_code == 0, result.output
        sample_file = tmp_path / "data" / "sample_subscriptions.json"
        assert sample_file.exists()

        result = self.runner.invoke(main, ["stats", str(sample_file)])
        assert result.exit_code == 0, result.output
        assert "Active: 5 of 5" in result.output
        assert "Monthly total: ₺1029.95" in result.output
        assert "Renewals in the next 30 days:" in result.output
        assert "(Monthly)" in result.output
        assert "Spotify" in result.output
