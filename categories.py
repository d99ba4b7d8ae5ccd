"""
Maps the short category names users type to sheet names in the
leaderboard spreadsheet.
"""

from __future__ import annotations

from typing import Dict

from titlecase import titlecase

CATEGORY_SHEETS: Dict[str, str] = {
    "overall": "GL 4* Overall rankings",
    "no-csb": "GL 4* No CSB rankings",
    "cod": "GL CoD Speedrun rankings",
    "magicite": "4* Magicite",
}


def resolve_sheet_name(category: str, aliases: Dict[str, str] = CATEGORY_SHEETS) -> str:
    """
    Return the sheet name for *category*.

    Known aliases are matched case-insensitively; anything else is
    title-cased and used as the sheet name directly.
    """
    key = category.strip().lower()
    if key in aliases:
        return aliases[key]
    return titlecase(key)


def normalise_subcategory(subcategory: str) -> str:
    """Subcategory headers are title-cased on the sheet."""
    return titlecase(subcategory.strip())
