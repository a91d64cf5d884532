"""Markdown rendering of sheet sections."""

from excel_analyzer.output.base import SheetRenderer, SheetSection
from excel_analyzer.workbook import Row


def _table_row(cells: Row) -> str:
    return "|" + "".join(f" {cell} |" for cell in cells)


class MarkdownRenderer(SheetRenderer):
    """Render a sheet as headings, a header listing and a Markdown table.

    The table's header lines are the header block and its body is the sample
    block. The separator row has one ``---`` cell per cell of the first header
    row; without header rows it matches the widest sample row instead, and is
    left out entirely when the sheet has no rows.
    """

    def render(self, section: SheetSection) -> str:
        lines: list[str] = [
            f"# Excel File Name: {section.file_path}",
            "",
            f"## Sheet {section.sheet.index}:",
            "",
            f"### Sheet Name: {section.sheet.name}",
            "",
            "### Headers:",
        ]
        for row_number, header_row in enumerate(section.headers, start=1):
            lines.append(f"Row {row_number}:")
            lines.extend(
                f"- Column {column}: {value}"
                for column, value in enumerate(header_row, start=1)
            )
            lines.append("")

        lines.extend(["### Sample Data:", ""])
        lines.extend(_table_row(header_row) for header_row in section.headers)

        width = self.separator_width(section)
        if width:
            lines.append("|" + " --- |" * width)

        lines.extend(_table_row(row) for row in section.sample)
        lines.append("")
        return "\n".join(lines) + "\n"

    @staticmethod
    def separator_width(section: SheetSection) -> int:
        """Number of ``---`` cells in the table separator row."""
        if section.headers:
            return len(section.headers[0])
        return max((len(row) for row in section.sample), default=0)
