"""Excel Analyzer - preview spreadsheet headers and sample rows as text reports."""

from excel_analyzer.models import OutputFormat, ReportSettings
from excel_analyzer.output.report_formatter import render_report
from excel_analyzer.services.orchestrator import analyze_files

__all__ = ["OutputFormat", "ReportSettings", "analyze_files", "render_report"]
__version__ = "0.1.0"
