# ABOUTME: CSV exporter for contact form messages.
# ABOUTME: Exports messages to CSV format with a metadata row and proper escaping.

import csv
from datetime import UTC, datetime
from pathlib import Path

from portfolio_showcase.models import ContactMessage


class CSVExporter:
    """Exports contact messages to CSV format."""

    HEADERS = [
        "id",
        "received_at",
        "name",
        "email",
        "subject",
        "message",
    ]

    def export(self, messages: list[ContactMessage], output_path: Path) -> Path:
        """Export contact messages to a CSV file.

        Args:
            messages: Messages to export, in the order given.
            output_path: Path to the output CSV file.

        Returns:
            Path to the created CSV file.
        """
        with open(output_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(self._create_metadata_row(len(messages)))
            writer.writerow(self.HEADERS)
            for message in messages:
                writer.writerow(self._message_to_row(message))

        return output_path

    def _create_metadata_row(self, count: int) -> list[str]:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
        # Single cell so spreadsheet tools don't split it
        return [f"# Exported at: {timestamp} | Records: {count}"]

    def _message_to_row(self, message: ContactMessage) -> list[str]:
        return [
            str(message.id),
            message.created_at.strftime("%Y-%m-%d %H:%M:%S") if message.created_at else "",
            message.name,
            message.email,
            message.subject,
            message.message,
        ]
