# ABOUTME: Tests for the CSV exporter module.
# ABOUTME: Covers column layout, metadata row and escaping of message bodies.

import csv
import tempfile
from datetime import datetime
from pathlib import Path

import pytest

from portfolio_showcase.export import CSVExporter
from portfolio_showcase.models import ContactMessage


class TestCSVExporter:
    """Tests for CSVExporter class."""

    @pytest.fixture
    def sample_messages(self) -> list[ContactMessage]:
        """Create sample contact messages for testing."""
        return [
            ContactMessage(
                id=2,
                name="Jane Smith",
                email="jane@example.com",
                subject="Hiring",
                message="We have a role, are you interested?",
                created_at=datetime(2025, 6, 15, 10, 31, 0),
            ),
            ContactMessage(
                id=1,
                name="John Doe",
                email="john@example.com",
                subject="Hello",
                message='Line one\nLine two, with "quotes"',
                created_at=datetime(2025, 6, 15, 10, 30, 0),
            ),
        ]

    @pytest.fixture
    def temp_output_path(self) -> Path:
        """Create a temporary file path for CSV output."""
        with tempfile.NamedTemporaryFile(suffix=".csv", delete=False) as f:
            return Path(f.name)

    def _read_rows(self, path: Path) -> list[list[str]]:
        with open(path, newline="", encoding="utf-8") as f:
            return list(csv.reader(f))

    def test_export_creates_csv_file(
        self, sample_messages: list[ContactMessage], temp_output_path: Path
    ) -> None:
        """Test that export writes the file and returns its path."""
        result = CSVExporter().export(sample_messages, temp_output_path)

        assert result == temp_output_path
        assert temp_output_path.exists()

    def test_metadata_and_header_rows(
        self, sample_messages: list[ContactMessage], temp_output_path: Path
    ) -> None:
        """Test that the first row is metadata and the second the column headers."""
        CSVExporter().export(sample_messages, temp_output_path)

        rows = self._read_rows(temp_output_path)

        assert len(rows[0]) == 1
        assert rows[0][0].startswith("# Exported at:")
        assert rows[0][0].endswith("Records: 2")
        assert rows[1] == CSVExporter.HEADERS

    def test_rows_keep_given_order(
        self, sample_messages: list[ContactMessage], temp_output_path: Path
    ) -> None:
        """Test that messages are written in the order they are passed."""
        CSVExporter().export(sample_messages, temp_output_path)

        rows = self._read_rows(temp_output_path)

        assert [row[0] for row in rows[2:]] == ["2", "1"]
        assert rows[2][1] == "2025-06-15 10:31:00"
        assert rows[2][2] == "Jane Smith"

    def test_multiline_message_round_trips(
        self, sample_messages: list[ContactMessage], temp_output_path: Path
    ) -> None:
        """Test that newlines, commas and quotes in a body are escaped."""
        CSVExporter().export(sample_messages, temp_output_path)

        rows = self._read_rows(temp_output_path)

        assert rows[3][5] == 'Line one\nLine two, with "quotes"'

    def test_empty_export(self, temp_output_path: Path) -> None:
        """Test that an empty inbox still yields metadata and headers."""
        CSVExporter().export([], temp_output_path)

        rows = self._read_rows(temp_output_path)

        assert len(rows) == 2
        assert rows[0][0].endswith("Records: 0")
