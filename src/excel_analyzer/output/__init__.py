"""Report output module.

This module renders decoded workbooks as Markdown, XML or plain-text
reports, one section per sheet.
"""

from excel_analyzer.output.base import SheetRenderer, SheetSection
from excel_analyzer.output.markdown_renderer import MarkdownRenderer
from excel_analyzer.output.report_formatter import ReportFormatter, render_report
from excel_analyzer.output.text_renderer import PlainTextRenderer
from excel_analyzer.output.xml_renderer import XmlRenderer

__all__ = [
    "MarkdownRenderer",
    "PlainTextRenderer",
    "ReportFormatter",
    "SheetRenderer",
    "SheetSection",
    "XmlRenderer",
    "render_report",
]
