"""Centralized exception classes for the Excel analyzer.

This module provides a hierarchy of custom exceptions with error codes and
structured error details so that every failure surfaced to the user carries
the file path and the underlying cause.

Exception Hierarchy:
    AnalyzerError (base)
    ├── WorkbookError
    │   ├── WorkbookNotFoundError
    │   ├── UnsupportedFormatError
    │   └── WorkbookReadError
    └── SheetReadError

Error Codes:
    All errors have a unique error code (e.g., "E1001") that can be used
    for programmatic error handling and log filtering.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Enumeration of all error codes used in the application.

    Error codes are grouped by category:
    - E1xxx: Workbook/file errors
    - E2xxx: Sheet errors
    - E9xxx: Internal/unexpected errors
    """

    # Workbook errors (E1xxx)
    FILE_NOT_FOUND = "E1001"
    UNSUPPORTED_FORMAT = "E1002"
    WORKBOOK_READ_ERROR = "E1003"

    # Sheet errors (E2xxx)
    SHEET_READ_ERROR = "E2001"

    # Internal errors (E9xxx)
    INTERNAL_ERROR = "E9001"


class AnalyzerError(Exception):
    """Base exception for all Excel analyzer errors.

    Attributes:
        message: Human-readable error message.
        error_code: Unique error code from ErrorCode enum.
        details: Optional dictionary with additional error details.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Error code from ErrorCode enum.
            details: Optional additional details about the error.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert the exception to a dictionary for logging.

        Returns:
            Dictionary with error information.
        """
        result: dict[str, Any] = {
            "error_code": self.error_code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        """Return string representation with error code."""
        return f"[{self.error_code.value}] {self.message}"


# =============================================================================
# Workbook Errors (E1xxx)
# =============================================================================


class WorkbookError(AnalyzerError):
    """Base class for errors opening or decoding a workbook file."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.WORKBOOK_READ_ERROR,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with file path information.

        Args:
            message: Error message.
            error_code: Error code.
            file_path: Path to the problematic workbook.
            details: Additional details.
        """
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, error_code, details)
        self.file_path = file_path


class WorkbookNotFoundError(WorkbookError):
    """Raised when a selected workbook no longer exists on disk."""

    def __init__(
        self,
        file_path: str,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        message = message or f"File not found: {file_path}"
        super().__init__(
            message=message,
            error_code=ErrorCode.FILE_NOT_FOUND,
            file_path=file_path,
            details=details,
        )


class UnsupportedFormatError(WorkbookError):
    """Raised when a file extension is not a supported spreadsheet type."""

    def __init__(
        self,
        message: str,
        extension: str | None = None,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with format information.

        Args:
            message: Error message.
            extension: File extension that was rejected.
            file_path: Optional file path.
            details: Additional details.
        """
        details = details or {}
        if extension is not None:
            details["extension"] = extension
        super().__init__(
            message=message,
            error_code=ErrorCode.UNSUPPORTED_FORMAT,
            file_path=file_path,
            details=details,
        )
        self.extension = extension


class WorkbookReadError(WorkbookError):
    """Raised when the decoding library cannot parse a workbook."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=ErrorCode.WORKBOOK_READ_ERROR,
            file_path=file_path,
            details=details,
        )


# =============================================================================
# Sheet Errors (E2xxx)
# =============================================================================


class SheetReadError(AnalyzerError):
    """Raised when a named sheet inside an opened workbook cannot be read."""

    def __init__(
        self,
        sheet_name: str,
        cause: str,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with sheet information.

        Args:
            sheet_name: Name of the sheet that failed.
            cause: Description of the underlying failure.
            file_path: Optional path of the containing workbook.
            details: Additional details.
        """
        details = details or {}
        details["sheet_name"] = sheet_name
        if file_path:
            details["file_path"] = file_path
        super().__init__(
            message=f"Sheet not found: {sheet_name} - {cause}",
            error_code=ErrorCode.SHEET_READ_ERROR,
            details=details,
        )
        self.sheet_name = sheet_name
        self.file_path = file_path
