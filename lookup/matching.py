"""
Equality predicates used when searching a grid for a target value.

Cells fetched from a sheet may come back as text even when they look
numeric, so the default ``loose`` predicate coerces numeric-looking
strings before comparing.  ``exact`` requires the same type and value.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from dto.leaderboard import CellValue

Matcher = Callable[[CellValue, CellValue], bool]

# Text that coerces to a number: decimal with optional
# exponent, "Infinity", or an unsigned 0x / 0o / 0b integer.  No digit
# separators, no "inf" / "nan" spellings.
_DECIMAL_RE = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_PREFIXED_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def _to_number(value: str) -> Optional[float]:
    stripped = value.strip()
    if not stripped:
        return 0.0
    if _PREFIXED_RE.fullmatch(stripped):
        return float(int(stripped, 0))
    if _DECIMAL_RE.fullmatch(stripped):
        return float(stripped.replace("Infinity", "inf"))
    return None


def loose_equals(cell: CellValue, target: CellValue) -> bool:
    """
    Coercing equality.

      - ``None`` only equals ``None``
      - booleans compare as 0 / 1
      - a string against a number is parsed as a number first
        (blank parses as 0, unparsable never matches)
    """
    if cell is None or target is None:
        return cell is None and target is None

    if isinstance(cell, bool):
        cell = int(cell)
    if isinstance(target, bool):
        target = int(target)

    if isinstance(cell, str) and isinstance(target, (int, float)):
        number = _to_number(cell)
        return number is not None and number == target
    if isinstance(target, str) and isinstance(cell, (int, float)):
        number = _to_number(target)
        return number is not None and number == cell

    return cell == target


def exact_equals(cell: CellValue, target: CellValue) -> bool:
    """Same type and same value."""
    return type(cell) is type(target) and cell == target


def get_matcher(mode: str) -> Matcher:
    """Return the predicate registered under *mode* ('loose' or 'exact')."""
    mode = mode.lower().strip()
    if mode == "loose":
        return loose_equals
    if mode == "exact":
        return exact_equals
    raise ValueError(f"Unknown match mode: {mode!r}")
