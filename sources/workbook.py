"""
GridSource that reads a local .xlsx workbook with openpyxl.

Useful offline and for exported copies of the leaderboard spreadsheet.
Rows are trimmed of trailing empty cells, the same way the Sheets API
omits them, so both sources produce the same grid for the same sheet.
"""

from __future__ import annotations

import logging
import zipfile
from typing import Dict, Iterable, List, Tuple

import openpyxl
from openpyxl.utils.cell import range_boundaries
from openpyxl.utils.exceptions import InvalidFileException

from dto.leaderboard import CellValue, Grid
from errors import DataSourceError, InvalidRangeError
from sources.base import GridSource

logger = logging.getLogger(__name__)


def _split_range(range_name: str) -> Tuple[str, str]:
    """'Sheet!A1:C9' → ('Sheet', 'A1:C9');  'Sheet' → ('Sheet', '')."""
    sheet, _, cells = range_name.partition("!")
    return sheet.strip("'"), cells


def _bounds(cells: str) -> Dict[str, int]:
    """'B2:D10' → iter_rows keyword bounds (1-based, inclusive)."""
    try:
        min_col, min_row, max_col, max_row = range_boundaries(cells)
    except (ValueError, TypeError) as exc:
        raise InvalidRangeError(f"Invalid A1 range {cells!r}", status_code=400) from exc
    return {
        "min_row": min_row,
        "max_row": max_row,
        "min_col": min_col,
        "max_col": max_col,
    }


def _trim(row: Iterable[CellValue]) -> List[CellValue]:
    values = list(row)
    while values and values[-1] is None:
        values.pop()
    return values


class WorkbookSource(GridSource):
    """Reads cached cell values (``data_only``) from one .xlsx file."""

    def __init__(self, file_path: str):
        self._file_path = file_path

    def fetch_grid(self, range_name: str) -> Grid:
        sheet_name, cells = _split_range(range_name)
        logger.info("Loading sheet '%s' from %s", sheet_name, self._file_path)

        try:
            wb = openpyxl.load_workbook(self._file_path, data_only=True)
        except (OSError, InvalidFileException, zipfile.BadZipFile) as exc:
            raise DataSourceError(f"Cannot open workbook {self._file_path}: {exc}") from exc

        try:
            if sheet_name not in wb.sheetnames:
                raise InvalidRangeError(
                    f"Worksheet '{sheet_name}' not found. Available sheets: {wb.sheetnames}",
                    status_code=400,
                )
            ws = wb[sheet_name]
            bounds = _bounds(cells) if cells else {}
            grid = [_trim(row) for row in ws.iter_rows(values_only=True, **bounds)]
        finally:
            wb.close()

        # The Sheets API drops trailing empty rows as well
        while grid and not grid[-1]:
            grid.pop()
        logger.info("  -> %d row(s)", len(grid))
        return grid
