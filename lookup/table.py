"""
Reads a leaderboard table laid out below a located subcategory cell.

Sheet layout, relative to the located cell at (row, col):

    row      <subcategory>
    row + 1  <header> <header> ... ""        ← HeaderRun, stops at a blank
    row + 2  <value>  <value>  ...           ← first contestant
    ...

Nothing here checks the grid's extent: cells past the end of a row, or
rows past the end of the grid, come back as ``None``.
"""

from __future__ import annotations

from typing import List

from dto.cell_position import CellPosition
from dto.leaderboard import CellValue, Grid, HeaderRun, LeaderboardTable, ResultTable


def _is_blank(value: CellValue) -> bool:
    return value is None or value == ""


def _cell(grid: Grid, row: int, col: int) -> CellValue:
    if row >= len(grid):
        return None
    cells = grid[row]
    return cells[col] if col < len(cells) else None


def extract_headers(grid: Grid, position: CellPosition) -> HeaderRun:
    """
    Return the run of non-blank header cells one row below *position*,
    starting in the same column and stopping at the first blank cell.
    """
    header_row = position.row + 1
    if header_row >= len(grid):
        return []

    cells = grid[header_row]
    headers: HeaderRun = []
    for col in range(position.column, len(cells)):
        if _is_blank(cells[col]):
            break
        headers.append(cells[col])
    return headers


def extract_rows(
    grid: Grid,
    position: CellPosition,
    headers: HeaderRun,
    row_bound: int,
) -> ResultTable:
    """
    Collect one record per row from ``position.row + 2`` up to and
    including the absolute row index *row_bound*.

    Each record spans the columns covered by *headers*.
    """
    if row_bound < 0:
        raise ValueError(f"row_bound must be non-negative, got {row_bound}")

    first_col = position.column
    last_col = first_col + len(headers)

    records: ResultTable = []
    for row in range(position.row + 2, row_bound + 1):
        record: List[CellValue] = [
            _cell(grid, row, col) for col in range(first_col, last_col)
        ]
        records.append(record)
    return records


def extract_table(
    grid: Grid,
    position: CellPosition,
    row_bound: int,
) -> LeaderboardTable:
    """Read the headers and the contestant rows below *position*."""
    headers = extract_headers(grid, position)
    rows = extract_rows(grid, position, headers, row_bound)
    return LeaderboardTable(position=position, headers=headers, rows=rows)
