"""Dataclasses representing a decoded workbook as rows of cell text."""

from __future__ import annotations

from dataclasses import dataclass, field

Row = list[str]


@dataclass
class Sheet:
    """A single worksheet: ordered rows of stringified cell values."""

    name: str
    index: int
    rows: list[Row] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def header_block(self, header_rows: int) -> list[Row]:
        """Return the first ``header_rows`` rows, or all rows if fewer exist."""
        return self.rows[: max(header_rows, 0)]

    def sample_block(self, header_rows: int, sample_rows: int) -> list[Row]:
        """Return up to ``sample_rows`` rows directly after the header block."""
        start = min(max(header_rows, 0), len(self.rows))
        return self.rows[start : start + max(sample_rows, 0)]


@dataclass
class Workbook:
    """A decoded workbook with its sheets in file order."""

    file_path: str
    sheets: list[Sheet] = field(default_factory=list)

    @property
    def sheet_names(self) -> list[str]:
        return [sheet.name for sheet in self.sheets]
