"""Report formatter that turns decoded sheets into a single text document.

The formatter is a pure function of its inputs: it receives the sheets of one
workbook plus the header/sample row counts and output format, and returns the
concatenation of one rendered section per sheet, in sheet order.
"""

from collections.abc import Sequence

from excel_analyzer.models import OutputFormat
from excel_analyzer.output.base import SheetRenderer, SheetSection
from excel_analyzer.output.markdown_renderer import MarkdownRenderer
from excel_analyzer.output.text_renderer import PlainTextRenderer
from excel_analyzer.output.xml_renderer import XmlRenderer
from excel_analyzer.utils.logging import get_logger
from excel_analyzer.workbook import Sheet

logger = get_logger(__name__)


class ReportFormatter:
    """Render workbooks in one of the supported output formats."""

    def __init__(
        self, renderers: dict[OutputFormat, SheetRenderer] | None = None
    ) -> None:
        """Initialize the formatter.

        Args:
            renderers: Optional renderer overrides keyed by output format.
        """
        self.renderers: dict[OutputFormat, SheetRenderer] = {
            OutputFormat.MARKDOWN: MarkdownRenderer(),
            OutputFormat.XML: XmlRenderer(),
            OutputFormat.PLAIN_TEXT: PlainTextRenderer(),
        }
        if renderers:
            self.renderers.update(renderers)

    def get_renderer(self, output_format: OutputFormat) -> SheetRenderer:
        """Look up the renderer for a format.

        Raises:
            ValueError: If no renderer is registered for the format.
        """
        try:
            return self.renderers[output_format]
        except KeyError:
            raise ValueError(f"No renderer for output format: {output_format}") from None

    def render(
        self,
        file_path: str,
        sheets: Sequence[Sheet],
        header_rows: int,
        sample_rows: int,
        output_format: OutputFormat,
    ) -> str:
        """Render every sheet of a workbook.

        Args:
            file_path: Path shown in each section heading.
            sheets: Sheets in workbook order.
            header_rows: Number of leading rows per sheet treated as headers.
            sample_rows: Maximum data rows shown after the header block.
            output_format: Rendering to use.

        Returns:
            The concatenated per-sheet sections.
        """
        renderer = self.get_renderer(output_format)
        sections = []
        for sheet in sheets:
            section = SheetSection.from_sheet(
                file_path, sheet, header_rows, sample_rows
            )
            logger.debug(
                "Rendering sheet",
                sheet=sheet.name,
                header_rows=len(section.headers),
                sample_rows=len(section.sample),
            )
            sections.append(renderer.render(section))
        return "".join(sections)


_default_formatter = ReportFormatter()


def render_report(
    file_path: str,
    sheets: Sequence[Sheet],
    header_rows: int,
    sample_rows: int,
    output_format: OutputFormat,
) -> str:
    """Render a workbook's sheets with the default renderers."""
    return _default_formatter.render(
        file_path, sheets, header_rows, sample_rows, output_format
    )
