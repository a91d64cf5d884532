"""File orchestrator: analyze a batch of workbooks one file at a time.

Each path produces exactly one message, either a rendered report or an error
line naming the file and the cause, in the order the paths were supplied. A
single AnalysisComplete message follows the last file. A failure while
processing one file never stops the files after it.
"""

import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from excel_analyzer.models import ReportSettings
from excel_analyzer.output.report_formatter import ReportFormatter
from excel_analyzer.services.workbook_reader import WorkbookReader, WorkbookReadOptions
from excel_analyzer.utils.exceptions import AnalyzerError
from excel_analyzer.utils.logging import (
    LogContext,
    ProgressTracker,
    get_logger,
    timed_operation,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class FileReport:
    """Rendered report for one successfully analyzed workbook."""

    file_path: str
    text: str


@dataclass(frozen=True)
class FileFailure:
    """Error line for a workbook that could not be analyzed."""

    file_path: str
    message: str
    error_code: str | None = None


@dataclass(frozen=True)
class AnalysisComplete:
    """Sentinel emitted once after the last file of a run."""

    total_files: int = 0
    failed_files: int = 0


FileResult = FileReport | FileFailure
AnalysisMessage = FileReport | FileFailure | AnalysisComplete


def format_error(file_path: str, error: BaseException) -> str:
    """Build the user-visible error line for a failed file."""
    return f"Error processing {file_path}: {error}"


def analyze_file(
    file_path: str,
    settings: ReportSettings,
    reader: WorkbookReader | None = None,
    formatter: ReportFormatter | None = None,
) -> FileResult:
    """Open one workbook and render its report.

    Args:
        file_path: Path of the workbook.
        settings: Row counts and output format for the report.
        reader: Workbook reader (a default reader if omitted).
        formatter: Report formatter (a default formatter if omitted).

    Returns:
        FileReport on success, FileFailure if the file could not be analyzed.
    """
    reader = reader or WorkbookReader()
    formatter = formatter or ReportFormatter()

    with LogContext(file_path=file_path):
        try:
            with timed_operation(logger, "analyze_file") as metrics:
                workbook = reader.read(
                    file_path,
                    WorkbookReadOptions(
                        max_rows=settings.header_rows + settings.sample_rows
                    ),
                )
                text = formatter.render(
                    file_path,
                    workbook.sheets,
                    settings.header_rows,
                    settings.sample_rows,
                    settings.output_format,
                )
                metrics.files_processed = 1
                metrics.sheets_processed = len(workbook.sheets)
                metrics.rows_rendered = sum(
                    len(sheet.header_block(settings.header_rows))
                    + len(sheet.sample_block(settings.header_rows, settings.sample_rows))
                    for sheet in workbook.sheets
                )
        except AnalyzerError as e:
            logger.warning(
                "Failed to analyze workbook",
                error_code=e.error_code.value,
                error=e.message,
            )
            return FileFailure(
                file_path=file_path,
                message=format_error(file_path, e),
                error_code=e.error_code.value,
            )
        except Exception as e:
            logger.error(
                "Unexpected error while analyzing workbook",
                error=f"{type(e).__name__}: {e}",
                exc_info=True,
            )
            return FileFailure(file_path=file_path, message=format_error(file_path, e))

    return FileReport(file_path=file_path, text=text)


def analyze_files(
    file_paths: Iterable[str],
    settings: ReportSettings,
    reader: WorkbookReader | None = None,
    formatter: ReportFormatter | None = None,
) -> Iterator[AnalysisMessage]:
    """Analyze workbooks in order, yielding one result per file then a sentinel.

    Args:
        file_paths: Paths to analyze, in submission order.
        settings: Snapshot of the report settings for this run.
        reader: Optional workbook reader shared across files.
        formatter: Optional report formatter shared across files.

    Yields:
        FileReport or FileFailure per path, then one AnalysisComplete.
    """
    paths = list(file_paths)
    reader = reader or WorkbookReader()
    formatter = formatter or ReportFormatter()

    start = time.time()
    tracker = ProgressTracker(logger, "Analyzing files", total=len(paths))
    failed = 0
    for path in paths:
        result = analyze_file(path, settings, reader=reader, formatter=formatter)
        if isinstance(result, FileFailure):
            failed += 1
        tracker.update(details=path)
        yield result

    tracker.complete()
    logger.log_run_result(
        total_files=len(paths),
        succeeded=len(paths) - failed,
        failed=failed,
        duration_seconds=time.time() - start,
    )
    yield AnalysisComplete(total_files=len(paths), failed_files=failed)
