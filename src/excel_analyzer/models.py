"""Pydantic models for report settings and output formats."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HEADER_ROWS = 1
DEFAULT_SAMPLE_ROWS = 5


class OutputFormat(str, Enum):
    """Rendering used for the generated report."""

    MARKDOWN = "Markdown"
    XML = "XML"
    PLAIN_TEXT = "PlainText"

    @property
    def label(self) -> str:
        """Human-readable name shown in the format selector."""
        if self is OutputFormat.PLAIN_TEXT:
            return "Plain Text"
        return self.value

    @classmethod
    def from_label(cls, label: str) -> "OutputFormat":
        """Resolve a selector label or enum value to an OutputFormat.

        Raises:
            ValueError: If the label matches no format.
        """
        for fmt in cls:
            if label in (fmt.label, fmt.value):
                return fmt
        raise ValueError(f"Unknown output format: {label}")


def parse_row_count(text: str | int | None, default: int) -> int:
    """Parse a free-text row count, falling back to ``default``.

    Non-numeric input yields ``default``; negative numbers are clamped to 0.
    """
    if isinstance(text, int) and not isinstance(text, bool):
        value = text
    else:
        try:
            value = int(str(text).strip())
        except (TypeError, ValueError):
            return default
    return max(value, 0)


class ReportSettings(BaseModel):
    """Immutable snapshot of the options used for one analysis run."""

    model_config = ConfigDict(frozen=True)

    header_rows: int = Field(
        default=DEFAULT_HEADER_ROWS,
        ge=0,
        description="Number of leading rows treated as column labels",
    )
    sample_rows: int = Field(
        default=DEFAULT_SAMPLE_ROWS,
        ge=0,
        description="Maximum number of data rows shown after the header block",
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.MARKDOWN, description="Rendering of the report"
    )

    @classmethod
    def from_text(
        cls,
        header_rows: str | int | None,
        sample_rows: str | int | None,
        output_format: OutputFormat = OutputFormat.MARKDOWN,
        default_header_rows: int = DEFAULT_HEADER_ROWS,
        default_sample_rows: int = DEFAULT_SAMPLE_ROWS,
    ) -> "ReportSettings":
        """Build settings from raw text inputs.

        Args:
            header_rows: Raw header-row count as typed by the user.
            sample_rows: Raw sample-row count as typed by the user.
            output_format: Selected output format.
            default_header_rows: Fallback for unparsable header-row input.
            default_sample_rows: Fallback for unparsable sample-row input.

        Returns:
            ReportSettings with parsed and clamped counts.
        """
        return cls(
            header_rows=parse_row_count(header_rows, default_header_rows),
            sample_rows=parse_row_count(sample_rows, default_sample_rows),
            output_format=output_format,
        )
