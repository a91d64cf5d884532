"""Tests for the WorkbookReader."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from pathlib import Path
from unittest.mock import MagicMock, patch

import pandas as pd
import pytest

from excel_analyzer.services.workbook_reader import (
    WorkbookReader,
    WorkbookReadOptions,
    cell_to_text,
)
from excel_analyzer.utils.exceptions import (
    ErrorCode,
    SheetReadError,
    UnsupportedFormatError,
    WorkbookNotFoundError,
    WorkbookReadError,
)


class TestCellToText:
    """Tests for cell stringification."""

    def test_none_is_empty(self) -> None:
        assert cell_to_text(None) == ""

    def test_booleans(self) -> None:
        assert cell_to_text(True) == "true"
        assert cell_to_text(False) == "false"

    def test_integral_float_drops_fraction(self) -> None:
        assert cell_to_text(30.0) == "30"
        assert cell_to_text(2.5) == "2.5"

    def test_nan_is_empty(self) -> None:
        assert cell_to_text(float("nan")) == ""
        assert cell_to_text(pd.NaT) == ""

    def test_int_and_str(self) -> None:
        assert cell_to_text(7) == "7"
        assert cell_to_text("text") == "text"

    def test_dates(self) -> None:
        assert cell_to_text(datetime(2024, 1, 15, 9, 30)) == "2024-01-15 09:30:00"
        assert cell_to_text(date(2024, 1, 15)) == "2024-01-15"


class TestXlsx:
    """Decoding .xlsx files with openpyxl."""

    def test_reads_sheets_in_order(self, make_xlsx: Callable[..., Path]) -> None:
        path = make_xlsx(
            {
                "People": [["Name", "Age"], ["Alice", 30], ["Bob", 25]],
                "Flags": [["ok"], [True]],
            }
        )

        workbook = WorkbookReader().read(path)

        assert workbook.sheet_names == ["People", "Flags"]
        assert [s.index for s in workbook.sheets] == [1, 2]
        assert workbook.sheets[0].rows == [
            ["Name", "Age"],
            ["Alice", "30"],
            ["Bob", "25"],
        ]
        assert workbook.sheets[1].rows == [["ok"], ["true"]]
        assert workbook.file_path == str(path)

    def test_empty_sheet_has_no_rows(self, make_xlsx: Callable[..., Path]) -> None:
        path = make_xlsx({"Data": [["a"]], "Blank": []})

        workbook = WorkbookReader().read(path)

        assert workbook.sheets[1].name == "Blank"
        assert workbook.sheets[1].rows == []

    def test_max_rows_limits_decoding(self, make_xlsx: Callable[..., Path]) -> None:
        path = make_xlsx({"Big": [[i] for i in range(100)]})

        workbook = WorkbookReader().read(path, WorkbookReadOptions(max_rows=3))

        assert workbook.sheets[0].rows == [["0"], ["1"], ["2"]]

    def test_blank_rows_inside_window_are_kept(
        self, make_xlsx: Callable[..., Path]
    ) -> None:
        path = make_xlsx(
            {
                "Gaps": [
                    ["h1", "h2"],
                    [None, None],
                    [None, None],
                    ["a", "b"],
                    ["c", "d"],
                ]
            }
        )

        workbook = WorkbookReader().read(path, WorkbookReadOptions(max_rows=3))

        sheet = workbook.sheets[0]
        assert sheet.rows == [["h1", "h2"], ["", ""], ["", ""]]
        assert sheet.sample_block(1, 2) == [["", ""], ["", ""]]

    def test_blank_rows_at_end_of_sheet_are_dropped(
        self, make_xlsx: Callable[..., Path]
    ) -> None:
        path = make_xlsx({"Tail": [["x"], ["y"], [None], [None]]})

        workbook = WorkbookReader().read(path, WorkbookReadOptions(max_rows=4))

        assert workbook.sheets[0].rows == [["x"], ["y"]]

    def test_used_range_not_at_a1(self, make_xlsx: Callable[..., Path]) -> None:
        path = make_xlsx(
            {"Offset": [[], [None, "Name", "Age"], [None, "Alice", 30]]}
        )

        workbook = WorkbookReader().read(path, WorkbookReadOptions(max_rows=6))

        sheet = workbook.sheets[0]
        assert sheet.rows == [["Name", "Age"], ["Alice", "30"]]
        assert sheet.header_block(1) == [["Name", "Age"]]

    def test_leading_blank_rows_do_not_use_up_the_window(
        self, make_xlsx: Callable[..., Path]
    ) -> None:
        path = make_xlsx({"Late": [[], [], ["h"], ["1"], ["2"]]})

        workbook = WorkbookReader().read(path, WorkbookReadOptions(max_rows=2))

        assert workbook.sheets[0].rows == [["h"], ["1"]]

    def test_max_rows_zero(self, make_xlsx: Callable[..., Path]) -> None:
        path = make_xlsx({"A": [["x"]], "B": [["y"]]})

        assert WorkbookReader().get_sheet_names(path) == ["A", "B"]
        workbook = WorkbookReader().read(path, WorkbookReadOptions(max_rows=0))
        assert all(sheet.rows == [] for sheet in workbook.sheets)

    def test_missing_file(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope.xlsx"

        with pytest.raises(WorkbookNotFoundError) as exc_info:
            WorkbookReader().read(missing)

        assert exc_info.value.error_code == ErrorCode.FILE_NOT_FOUND
        assert str(missing) in str(exc_info.value)

    def test_corrupt_file(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.xlsx"
        path.write_bytes(b"this is not a zip archive")

        with pytest.raises(WorkbookReadError) as exc_info:
            WorkbookReader().read(path)

        assert exc_info.value.file_path == str(path)

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        with pytest.raises(UnsupportedFormatError) as exc_info:
            WorkbookReader().read(path)

        assert exc_info.value.extension == ".txt"

    def test_sheet_failure_raises_sheet_read_error(
        self, make_xlsx: Callable[..., Path]
    ) -> None:
        path = make_xlsx({"Good": [["a"]]})
        wb = MagicMock()
        wb.sheetnames = ["Good"]
        wb.__getitem__.side_effect = KeyError("Good")

        with patch(
            "excel_analyzer.services.workbook_reader.load_workbook", return_value=wb
        ):
            with pytest.raises(SheetReadError) as exc_info:
                WorkbookReader().read(path)

        assert exc_info.value.sheet_name == "Good"
        assert "Sheet not found: Good" in str(exc_info.value)
        wb.close.assert_called_once()


class TestXls:
    """Decoding legacy .xls files through pandas."""

    def _mock_excel_file(self, frames: dict[str, pd.DataFrame]) -> MagicMock:
        excel_file = MagicMock()
        excel_file.__enter__.return_value = excel_file
        excel_file.sheet_names = list(frames)
        excel_file.parse.side_effect = lambda name, **kwargs: frames[name]
        return excel_file

    def test_reads_with_xlrd_engine(self, tmp_path: Path) -> None:
        path = tmp_path / "legacy.xls"
        path.write_bytes(b"placeholder")
        frames = {
            "S1": pd.DataFrame([["Name", "Age"], ["Alice", 30.0], ["Bob", None]]),
            "S2": pd.DataFrame(),
        }
        excel_file = self._mock_excel_file(frames)

        with patch(
            "excel_analyzer.services.workbook_reader.pd.ExcelFile",
            return_value=excel_file,
        ) as excel_cls:
            workbook = WorkbookReader().read(path, WorkbookReadOptions(max_rows=6))

        excel_cls.assert_called_once_with(path, engine="xlrd")
        excel_file.parse.assert_any_call("S1", header=None, dtype=object)
        assert workbook.sheet_names == ["S1", "S2"]
        assert workbook.sheets[0].rows == [
            ["Name", "Age"],
            ["Alice", "30"],
            ["Bob", ""],
        ]
        assert workbook.sheets[1].rows == []

    def test_undecodable_xls(self, tmp_path: Path) -> None:
        path = tmp_path / "legacy.xls"
        path.write_bytes(b"garbage")

        with patch(
            "excel_analyzer.services.workbook_reader.pd.ExcelFile",
            side_effect=ValueError("bad file"),
        ):
            with pytest.raises(WorkbookReadError, match="bad file"):
                WorkbookReader().read(path)

    def test_used_range_and_window(self, tmp_path: Path) -> None:
        path = tmp_path / "legacy.xls"
        path.write_bytes(b"placeholder")
        frame = pd.DataFrame(
            [
                [None, None, None],
                [None, "Name", "Age"],
                [None, None, None],
                [None, "Alice", 30.0],
                [None, None, None],
            ]
        )
        excel_file = self._mock_excel_file({"S1": frame})

        with patch(
            "excel_analyzer.services.workbook_reader.pd.ExcelFile",
            return_value=excel_file,
        ):
            windowed = WorkbookReader().read(path, WorkbookReadOptions(max_rows=2))
            whole = WorkbookReader().read(path)

        assert windowed.sheets[0].rows == [["Name", "Age"], ["", ""]]
        assert whole.sheets[0].rows == [
            ["Name", "Age"],
            ["", ""],
            ["Alice", "30"],
        ]
