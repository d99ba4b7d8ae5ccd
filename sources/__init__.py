"""
Grid sources.

  - GoogleSheetsSource — the live leaderboard spreadsheet (Sheets v4 API)
  - WorkbookSource     — a local .xlsx copy, read with openpyxl
"""

from sources.base import GridSource
from sources.credentials import load_credentials
from sources.sheets import GoogleSheetsSource
from sources.workbook import WorkbookSource

__all__ = [
    "GridSource",
    "GoogleSheetsSource",
    "WorkbookSource",
    "load_credentials",
]
