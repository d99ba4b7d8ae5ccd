"""
Spreadsheet column letters <-> 1-based column numbers.

Letters are bijective base-26 (no zero digit): 1 → A, 26 → Z, 27 → AA.
"""

from __future__ import annotations

from openpyxl.utils import column_index_from_string, get_column_letter


def column_to_name(column_number: int) -> str:
    """
    Return the column letters for a 1-based column number.

    Only numbers >= 1 name a column; anything lower gives an empty label.
    """
    if column_number < 1:
        return ""
    return get_column_letter(column_number)


def name_to_column(column_name: str) -> int:
    """Parse column letters ('AB') back to a 1-based column number."""
    return column_index_from_string(column_name.upper())
