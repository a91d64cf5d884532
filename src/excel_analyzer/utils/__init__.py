"""Utilities package for the Excel analyzer.

This package provides:
- Centralized exception classes (exceptions.py)
- Structured logging utilities (logging.py)
"""

from excel_analyzer.utils.exceptions import (
    AnalyzerError,
    ErrorCode,
    SheetReadError,
    UnsupportedFormatError,
    WorkbookError,
    WorkbookNotFoundError,
    WorkbookReadError,
)
from excel_analyzer.utils.logging import (
    LogContext,
    StructuredLogger,
    get_logger,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Exceptions
    "AnalyzerError",
    "ErrorCode",
    "SheetReadError",
    "UnsupportedFormatError",
    "WorkbookError",
    "WorkbookNotFoundError",
    "WorkbookReadError",
    # Logging
    "LogContext",
    "StructuredLogger",
    "get_logger",
    "get_run_id",
    "set_run_id",
]
