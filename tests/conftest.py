from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from openpyxl import Workbook

from excel_analyzer.workbook import Sheet
from excel_analyzer.utils.logging import clear_context


@pytest.fixture(autouse=True)
def reset_log_context() -> None:
    """Keep logging context variables from leaking between tests."""
    clear_context()
    yield
    clear_context()


@pytest.fixture
def people_sheet() -> Sheet:
    """Single sheet from the README example."""
    return Sheet(
        name="Sheet1",
        index=1,
        rows=[["Name", "Age"], ["Alice", "30"], ["Bob", "25"]],
    )


@pytest.fixture
def numbered_sheet() -> Sheet:
    """Sheet with two header rows and twenty data rows."""
    rows = [["id", "value", "note"], ["(int)", "(float)", "(text)"]]
    rows.extend([str(i), f"{i * 1.5}", f"row {i}"] for i in range(1, 21))
    return Sheet(name="Numbers", index=2, rows=rows)


@pytest.fixture
def empty_sheet() -> Sheet:
    return Sheet(name="Empty", index=1, rows=[])


@pytest.fixture
def make_xlsx(tmp_path: Path) -> Callable[..., Path]:
    """Factory that writes an .xlsx file from ``{sheet_name: rows}``."""

    def _make(
        sheets: dict[str, list[list[object]]], name: str = "book.xlsx"
    ) -> Path:
        wb = Workbook()
        wb.remove(wb.active)
        for sheet_name, rows in sheets.items():
            ws = wb.create_sheet(sheet_name)
            for row in rows:
                ws.append(row)
        path = tmp_path / name
        wb.save(path)
        return path

    return _make
