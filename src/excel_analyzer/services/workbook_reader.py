"""Workbook reader that decodes spreadsheet files into rows of cell text."""

from __future__ import annotations

import zipfile
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import Any

import pandas as pd
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from xlrd import XLRDError

from excel_analyzer.utils.exceptions import (
    SheetReadError,
    UnsupportedFormatError,
    WorkbookNotFoundError,
    WorkbookReadError,
)
from excel_analyzer.utils.logging import get_logger
from excel_analyzer.workbook import Row, Sheet, Workbook

logger = get_logger(__name__)

OPENPYXL_EXTENSIONS = frozenset({".xlsx", ".xlsm"})
XLRD_EXTENSIONS = frozenset({".xls"})
SUPPORTED_EXTENSIONS = OPENPYXL_EXTENSIONS | XLRD_EXTENSIONS


@dataclass
class WorkbookReadOptions:
    """Options controlling how much of each sheet is decoded."""

    max_rows: int | None = None


def cell_to_text(value: Any) -> str:
    """Render a decoded cell value as display text.

    Empty cells become "", booleans "true"/"false", integral floats drop
    their ".0" and dates use ISO format.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if pd.isna(value):
            return ""
        if value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, datetime):
        if pd.isna(value):
            return ""
        return value.isoformat(sep=" ")
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, timedelta):
        return str(value)
    return str(value)


def _is_blank(row: Row) -> bool:
    return not any(row)


def _take_used_rows(rows: Iterable[Row], max_rows: int | None) -> list[Row]:
    """Collect up to ``max_rows`` rows of a sheet's used range.

    Blank rows ahead of the first used row are skipped. Blank rows at the
    end of the window are kept when a used row follows them further down the
    sheet, and dropped when they run to the end of the sheet.
    """
    if max_rows is not None and max_rows <= 0:
        return []
    remaining = iter(rows)
    window: list[Row] = []
    for row in remaining:
        if not window and _is_blank(row):
            continue
        window.append(row)
        if max_rows is not None and len(window) >= max_rows:
            break

    end = len(window)
    while end > 0 and _is_blank(window[end - 1]):
        end -= 1
    if end < len(window) and any(not _is_blank(row) for row in remaining):
        return window
    return window[:end]


def _trim_empty_columns(rows: list[Row]) -> list[Row]:
    """Drop columns left and right of the used cells."""
    used = [col for row in rows for col, value in enumerate(row) if value]
    if not used:
        return rows
    first, last = min(used), max(used)
    return [row[first : last + 1] for row in rows]


class WorkbookReader:
    """Decode spreadsheet files using openpyxl (.xlsx/.xlsm) or pandas (.xls)."""

    def read(
        self, file_path: str | Path, options: WorkbookReadOptions | None = None
    ) -> Workbook:
        """Open a workbook and decode every sheet.

        Args:
            file_path: Path of the spreadsheet file.
            options: Optional decoding limits.

        Returns:
            Workbook with one Sheet per worksheet, in file order.

        Raises:
            WorkbookNotFoundError: If the file does not exist.
            UnsupportedFormatError: If the extension is not a spreadsheet type.
            WorkbookReadError: If the file cannot be decoded.
            SheetReadError: If a sheet inside the workbook cannot be read.
        """
        path = Path(file_path)
        if not path.exists():
            raise WorkbookNotFoundError(str(file_path))

        extension = path.suffix.lower()
        if extension not in SUPPORTED_EXTENSIONS:
            raise UnsupportedFormatError(
                f"Unsupported spreadsheet format '{extension or path.name}'. "
                f"Supported: {', '.join(sorted(SUPPORTED_EXTENSIONS))}",
                extension=extension,
                file_path=str(file_path),
            )

        opts = options or WorkbookReadOptions()
        if extension in OPENPYXL_EXTENSIONS:
            sheets = self._read_with_openpyxl(path, opts.max_rows)
        else:
            sheets = self._read_with_pandas(path, opts.max_rows)

        logger.debug(
            "Decoded workbook",
            file_path=str(file_path),
            sheets=len(sheets),
            rows=sum(sheet.row_count for sheet in sheets),
        )
        return Workbook(file_path=str(file_path), sheets=sheets)

    def get_sheet_names(self, file_path: str | Path) -> list[str]:
        """List the sheet names of a workbook without decoding cells."""
        return self.read(file_path, WorkbookReadOptions(max_rows=0)).sheet_names

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _read_with_openpyxl(self, path: Path, max_rows: int | None) -> list[Sheet]:
        try:
            wb = load_workbook(filename=path, read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as exc:
            raise WorkbookReadError(
                f"Cannot open workbook: {exc}", file_path=str(path)
            ) from exc

        try:
            sheets: list[Sheet] = []
            for index, name in enumerate(wb.sheetnames, start=1):
                try:
                    ws = wb[name]
                    if max_rows == 0:
                        rows: list[Row] = []
                    else:
                        rows = self._rows_to_text(
                            ws.iter_rows(values_only=True), max_rows
                        )
                except (
                    AttributeError,
                    KeyError,
                    ValueError,
                    OSError,
                    zipfile.BadZipFile,
                ) as exc:
                    raise SheetReadError(name, str(exc), file_path=str(path)) from exc
                sheets.append(Sheet(name=name, index=index, rows=rows))
            return sheets
        finally:
            wb.close()

    def _read_with_pandas(self, path: Path, max_rows: int | None) -> list[Sheet]:
        try:
            excel_file = pd.ExcelFile(path, engine="xlrd")
        except (XLRDError, ValueError, OSError) as exc:
            raise WorkbookReadError(
                f"Cannot open workbook: {exc}", file_path=str(path)
            ) from exc

        with excel_file:
            sheets: list[Sheet] = []
            for index, name in enumerate(excel_file.sheet_names, start=1):
                sheet_name = str(name)
                if max_rows == 0:
                    sheets.append(Sheet(name=sheet_name, index=index))
                    continue
                try:
                    df = excel_file.parse(sheet_name, header=None, dtype=object)
                except (XLRDError, ValueError, KeyError) as exc:
                    raise SheetReadError(
                        sheet_name, str(exc), file_path=str(path)
                    ) from exc
                rows = self._rows_to_text(
                    df.itertuples(index=False, name=None), max_rows
                )
                sheets.append(Sheet(name=sheet_name, index=index, rows=rows))
            return sheets

    @staticmethod
    def _rows_to_text(
        rows: Iterable[tuple[Any, ...]], max_rows: int | None
    ) -> list[Row]:
        decoded = ([cell_to_text(value) for value in row] for row in rows)
        return _trim_empty_columns(_take_used_rows(decoded, max_rows))
