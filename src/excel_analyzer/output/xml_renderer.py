"""XML rendering of sheet sections."""

from xml.sax.saxutils import escape, quoteattr

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from excel_analyzer.output.base import SheetRenderer, SheetSection
from excel_analyzer.workbook import Row

INDENT = "  "


def _text(value: str) -> str:
    """Escape cell text, dropping control characters XML 1.0 cannot carry."""
    return escape(ILLEGAL_CHARACTERS_RE.sub("", value))


def _attr(value: str) -> str:
    return quoteattr(ILLEGAL_CHARACTERS_RE.sub("", value))


class XmlRenderer(SheetRenderer):
    """Render a sheet as an ``<excel-file>`` element.

    Header rows appear twice: once under ``<headers>`` with row and column
    indices, and again at the top of ``<sample-data>`` ahead of the sample
    rows. Cell text and attribute values are escaped.
    """

    def render(self, section: SheetSection) -> str:
        lines: list[str] = [
            f"<excel-file name={_attr(section.file_path)}>",
            f"{INDENT}<sheet index=\"{section.sheet.index}\" "
            f"name={_attr(section.sheet.name)}>",
            f"{INDENT * 2}<headers>",
        ]
        for row_number, header_row in enumerate(section.headers, start=1):
            lines.append(f"{INDENT * 3}<row index=\"{row_number}\">")
            lines.extend(
                f"{INDENT * 4}<header column=\"{column}\">{_text(value)}</header>"
                for column, value in enumerate(header_row, start=1)
            )
            lines.append(f"{INDENT * 3}</row>")
        lines.append(f"{INDENT * 2}</headers>")

        lines.append(f"{INDENT * 2}<sample-data>")
        for row in [*section.headers, *section.sample]:
            lines.extend(self._data_row(row))
        lines.append(f"{INDENT * 2}</sample-data>")

        lines.extend([f"{INDENT}</sheet>", "</excel-file>", ""])
        return "\n".join(lines) + "\n"

    @staticmethod
    def _data_row(row: Row) -> list[str]:
        return [
            f"{INDENT * 3}<row>",
            *(f"{INDENT * 4}<cell>{_text(value)}</cell>" for value in row),
            f"{INDENT * 3}</row>",
        ]
