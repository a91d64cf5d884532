"""Services for reading workbooks and running analyses."""

from excel_analyzer.services.orchestrator import (
    AnalysisComplete,
    FileFailure,
    FileReport,
    analyze_file,
    analyze_files,
)
from excel_analyzer.services.runner import AnalysisRunner
from excel_analyzer.services.workbook_reader import WorkbookReader, WorkbookReadOptions

__all__ = [
    "AnalysisComplete",
    "AnalysisRunner",
    "FileFailure",
    "FileReport",
    "WorkbookReadOptions",
    "WorkbookReader",
    "analyze_file",
    "analyze_files",
]
