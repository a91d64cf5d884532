"""Plain-text rendering of sheet sections."""

from excel_analyzer.output.base import SheetRenderer, SheetSection


class PlainTextRenderer(SheetRenderer):
    """Render a sheet as labelled lines followed by tab-separated rows."""

    def render(self, section: SheetSection) -> str:
        lines: list[str] = [
            f"Excel File Name: {section.file_path}",
            "",
            f"Sheet {section.sheet.index}:",
            f"Sheet Name: {section.sheet.name}",
            "",
            "Headers:",
        ]
        for row_number, header_row in enumerate(section.headers, start=1):
            lines.append(f"Row {row_number}:")
            lines.extend(
                f"Column {column}: {value}"
                for column, value in enumerate(header_row, start=1)
            )
            lines.append("")

        lines.extend(["Sample Data:", ""])
        lines.extend("\t".join(row) for row in section.headers)
        lines.extend("\t".join(row) for row in section.sample)
        lines.append("")
        return "\n".join(lines) + "\n"
