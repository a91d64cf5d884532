"""Shared types for per-sheet report renderers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from excel_analyzer.workbook import Row, Sheet


@dataclass
class SheetSection:
    """The slices of one sheet that go into its report section."""

    file_path: str
    sheet: Sheet
    headers: list[Row]
    sample: list[Row]

    @classmethod
    def from_sheet(
        cls, file_path: str, sheet: Sheet, header_rows: int, sample_rows: int
    ) -> "SheetSection":
        return cls(
            file_path=file_path,
            sheet=sheet,
            headers=sheet.header_block(header_rows),
            sample=sheet.sample_block(header_rows, sample_rows),
        )


class SheetRenderer(ABC):
    """Renders one sheet section as text in a specific output format."""

    @abstractmethod
    def render(self, section: SheetSection) -> str:
        """Render the section.

        Args:
            section: Header and sample blocks of one sheet.

        Returns:
            The rendered section, ending with a blank line.
        """
