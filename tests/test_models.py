"""Tests for report settings parsing and output formats."""

import pytest
from pydantic import ValidationError

from excel_analyzer.models import (
    OutputFormat,
    ReportSettings,
    parse_row_count,
)


class TestParseRowCount:
    """Tests for free-text numeric parsing with fallback."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("3", 3), (" 12 ", 12), ("0", 0), (7, 7), ("-4", 0), (-2, 0)],
    )
    def test_valid_numbers(self, text: str | int, expected: int) -> None:
        assert parse_row_count(text, default=9) == expected

    @pytest.mark.parametrize("text", ["", "abc", "2.5", "1e3", None, "five"])
    def test_invalid_input_falls_back(self, text: str | None) -> None:
        assert parse_row_count(text, default=9) == 9


class TestReportSettings:
    """Tests for the ReportSettings snapshot."""

    def test_defaults(self) -> None:
        settings = ReportSettings()

        assert settings.header_rows == 1
        assert settings.sample_rows == 5
        assert settings.output_format == OutputFormat.MARKDOWN

    def test_non_numeric_text_uses_defaults(self) -> None:
        settings = ReportSettings.from_text("x", "lots", OutputFormat.XML)

        assert settings.header_rows == 1
        assert settings.sample_rows == 5
        assert settings.output_format == OutputFormat.XML

    def test_custom_fallbacks(self) -> None:
        settings = ReportSettings.from_text(
            "?", "?", default_header_rows=2, default_sample_rows=10
        )

        assert (settings.header_rows, settings.sample_rows) == (2, 10)

    def test_is_frozen(self) -> None:
        settings = ReportSettings()

        with pytest.raises(ValidationError):
            settings.sample_rows = 10  # type: ignore[misc]

    def test_negative_counts_rejected_directly(self) -> None:
        with pytest.raises(ValidationError):
            ReportSettings(header_rows=-1)


class TestOutputFormat:
    """Tests for OutputFormat labels."""

    def test_exactly_three_formats(self) -> None:
        assert [fmt.value for fmt in OutputFormat] == ["Markdown", "XML", "PlainText"]

    def test_labels(self) -> None:
        assert OutputFormat.PLAIN_TEXT.label == "Plain Text"
        assert OutputFormat.XML.label == "XML"

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("Plain Text", OutputFormat.PLAIN_TEXT),
            ("PlainText", OutputFormat.PLAIN_TEXT),
            ("Markdown", OutputFormat.MARKDOWN),
            ("XML", OutputFormat.XML),
        ],
    )
    def test_from_label(self, label: str, expected: OutputFormat) -> None:
        assert OutputFormat.from_label(label) is expected

    def test_from_label_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown output format"):
            OutputFormat.from_label("HTML")
