"""
Grid search and table extraction.

  1. ``locate``        — find the subcategory cell in the fetched grid
  2. ``extract_table`` — read the header run and contestant rows below it
"""

from lookup.columns import column_to_name, name_to_column
from lookup.locator import locate
from lookup.matching import exact_equals, get_matcher, loose_equals
from lookup.table import extract_headers, extract_rows, extract_table

__all__ = [
    "column_to_name",
    "name_to_column",
    "locate",
    "loose_equals",
    "exact_equals",
    "get_matcher",
    "extract_headers",
    "extract_rows",
    "extract_table",
]
